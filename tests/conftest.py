"""
Pytest configuration and fixtures for stop check tests.
"""

import json
from datetime import date

import pytest
from dateutil.relativedelta import relativedelta

TODAY = date(2026, 10, 19)


def iso(value: date) -> str:
    return f"{value.isoformat()}T00:00:00+03:00"


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def years_ago():
    """Date ``n`` years before the fixed evaluation date."""
    def _years_ago(years: int, days: int = 0) -> date:
        return TODAY - relativedelta(years=years, days=days)
    return _years_ago


@pytest.fixture
def client_document():
    """Build a client record as JSON text. Pass ``None`` to drop a field."""
    def _client_document(
        birth_date=TODAY - relativedelta(years=30),
        issued_at=TODAY - relativedelta(years=5),
        credit_history=(),
    ) -> str:
        data = {"firstName": "Иван", "lastName": "Иванов"}
        if birth_date is not None:
            data["birthDate"] = iso(birth_date) if isinstance(birth_date, date) else birth_date
        if issued_at is not None:
            data["passport"] = {
                "series": "4512",
                "number": "123456",
                "issuedAt": iso(issued_at) if isinstance(issued_at, date) else issued_at,
            }
        if credit_history is not None:
            data["creditHistory"] = list(credit_history)
        return json.dumps(data, ensure_ascii=False, indent=2)
    return _client_document
