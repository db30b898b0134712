"""Evaluation of a single loan application.

:func:`evaluate` runs the stop checks on already typed values.
:func:`perform_stop_checks` is the boundary used by callers holding the
raw client record: it reads the document and converts every input error
into a rejection, so an application with doubtful data is never approved.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from underwriting.models import (
    Applicant,
    CheckResult,
    CreditRecord,
    Passport,
    RejectionCode,
    Verdict,
)
from underwriting.services.rules import (
    applicant_age,
    check_age,
    check_credit_history,
    check_passport_validity,
)
from underwriting.utils.dates import MalformedDate, resolve_date
from underwriting.utils.document import ClientDocument, MalformedDocument, MissingField

logger = logging.getLogger(__name__)


def evaluate(
    birth_date: date,
    passport_issued_at: date,
    credit_records: Sequence[CreditRecord],
    today: Optional[date] = None,
) -> Verdict:
    today = today or date.today()

    age_result = check_age(birth_date, today)
    if not age_result:
        return _rejected(age_result)

    age = applicant_age(birth_date, today)
    passport_result = check_passport_validity(age, birth_date, passport_issued_at)
    if not passport_result:
        return _rejected(passport_result)

    credit_result = check_credit_history(credit_records)
    if not credit_result:
        return _rejected(credit_result)

    return Verdict.approve()


def evaluate_applicant(
    applicant: Applicant,
    passport: Passport,
    credit_records: Sequence[CreditRecord],
    today: Optional[date] = None,
) -> Verdict:
    return evaluate(applicant.birth_date, passport.issued_at, credit_records, today=today)


def perform_stop_checks(raw_text: str, today: Optional[date] = None) -> Verdict:
    try:
        document = ClientDocument.parse(raw_text)
        birth_date_str = document.require_string("birthDate")
        document.require_object("passport")
        issued_at_str = document.require_string("passport.issuedAt")
        credit_records = document.credit_records("creditHistory")

        applicant = Applicant(birth_date=resolve_date(birth_date_str))
        passport = Passport(issued_at=resolve_date(issued_at_str))
    except MissingField as exc:
        logger.warning("Required field is missing: %s", exc.path)
        return Verdict.reject(RejectionCode.MISSING_FIELD, f"missing field {exc.path}")
    except MalformedDate as exc:
        logger.warning("Failed to parse date %r", exc.value)
        return Verdict.reject(RejectionCode.MALFORMED_DATE, "malformed date")
    except MalformedDocument as exc:
        logger.warning("Failed to read client record: %s", exc)
        return Verdict.reject(RejectionCode.MALFORMED_DOCUMENT, "malformed document")

    return evaluate_applicant(applicant, passport, credit_records, today=today)


def _rejected(result: CheckResult) -> Verdict:
    logger.info("Application rejected: %s", result.reason)
    return Verdict.from_check(result)


__all__ = ["evaluate", "evaluate_applicant", "perform_stop_checks"]
