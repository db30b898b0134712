"""Stop checks applied to a loan application.

Each check returns a :class:`CheckResult` which is truthy when the
application passes it. Checks never print or log user-facing text,
rendering is done by :mod:`underwriting.utils.formatting`.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable

from underwriting.models import CheckResult, CreditRecord, RejectionCode
from underwriting.utils.dates import add_years, full_years_between

logger = logging.getLogger(__name__)

MIN_AGE = 20
PASSPORT_RENEWAL_AGES = (45, 20)

CREDIT_CARD_MAX_OVERDUE_DAYS = 30
LOAN_MAX_OVERDUE_DAYS = 60
LOAN_DELINQUENT_OVERDUE_DAYS = 15
MAX_DELINQUENT_LOANS = 2


def applicant_age(birth_date: date, today: date) -> int:
    return full_years_between(birth_date, today)


def check_age(birth_date: date, today: date) -> CheckResult:
    if applicant_age(birth_date, today) < MIN_AGE:
        return CheckResult.fail(RejectionCode.AGE_BELOW_MINIMUM, "age below minimum")
    return CheckResult.ok()


def check_passport_validity(age: int, birth_date: date, passport_issued_at: date) -> CheckResult:
    """The passport must be reissued on or after the latest milestone
    birthday the applicant has reached. Only that milestone is checked."""

    for milestone in PASSPORT_RENEWAL_AGES:
        if age < milestone:
            continue
        renewal_date = add_years(birth_date, milestone)
        if passport_issued_at < renewal_date:
            logger.debug(
                "Passport issued %s before %s birthday (%s)",
                passport_issued_at,
                milestone,
                renewal_date,
            )
            return CheckResult.fail(
                RejectionCode.PASSPORT_NOT_RENEWED,
                "passport not renewed after applicable age milestone",
            )
        break
    return CheckResult.ok()


def check_credit_history(records: Iterable[CreditRecord]) -> CheckResult:
    delinquent_loans = 0

    for record in records:
        if record.is_credit_card:
            if record.current_overdue_debt > 0:
                return CheckResult.fail(
                    RejectionCode.CREDIT_CARD_OVERDUE_DEBT,
                    "unpaid overdue debt on credit card",
                )
            if record.number_of_days_on_overdue > CREDIT_CARD_MAX_OVERDUE_DAYS:
                return CheckResult.fail(
                    RejectionCode.CREDIT_CARD_OVERDUE_DAYS,
                    f"credit card overdue more than {CREDIT_CARD_MAX_OVERDUE_DAYS} days",
                )
            continue

        if record.current_overdue_debt > 0:
            return CheckResult.fail(
                RejectionCode.LOAN_OVERDUE_DEBT,
                f"unpaid overdue debt on loan type {record.type}",
                loan_type=record.type,
            )
        if record.number_of_days_on_overdue > LOAN_MAX_OVERDUE_DAYS:
            return CheckResult.fail(
                RejectionCode.LOAN_OVERDUE_DAYS,
                f"loan type {record.type} overdue more than {LOAN_MAX_OVERDUE_DAYS} days",
                loan_type=record.type,
            )
        if record.number_of_days_on_overdue > LOAN_DELINQUENT_OVERDUE_DAYS:
            delinquent_loans += 1

    # checked only after the whole history has been scanned
    if delinquent_loans > MAX_DELINQUENT_LOANS:
        return CheckResult.fail(
            RejectionCode.TOO_MANY_DELINQUENT_LOANS,
            f"more than two loans overdue beyond {LOAN_DELINQUENT_OVERDUE_DAYS} days",
        )
    return CheckResult.ok()


__all__ = [
    "applicant_age",
    "check_age",
    "check_credit_history",
    "check_passport_validity",
]
