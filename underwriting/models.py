"""Data models used across the underwriting package."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

CREDIT_CARD_TYPE = "Кредитная карта"


class UnderwritingError(Exception):
    """Base class for errors raised while reading an application."""


class RejectionCode(str, Enum):
    """Machine-checkable cause of a negative verdict."""

    AGE_BELOW_MINIMUM = "age_below_minimum"
    PASSPORT_NOT_RENEWED = "passport_not_renewed"
    CREDIT_CARD_OVERDUE_DEBT = "credit_card_overdue_debt"
    CREDIT_CARD_OVERDUE_DAYS = "credit_card_overdue_days"
    LOAN_OVERDUE_DEBT = "loan_overdue_debt"
    LOAN_OVERDUE_DAYS = "loan_overdue_days"
    TOO_MANY_DELINQUENT_LOANS = "too_many_delinquent_loans"
    MISSING_FIELD = "missing_field"
    MALFORMED_DATE = "malformed_date"
    MALFORMED_DOCUMENT = "malformed_document"


@dataclass(frozen=True, slots=True)
class Applicant:
    birth_date: date


@dataclass(frozen=True, slots=True)
class Passport:
    issued_at: date


@dataclass(frozen=True, slots=True)
class CreditRecord:
    """One entry of the applicant's credit history."""

    type: str = ""
    current_overdue_debt: int = 0
    number_of_days_on_overdue: int = 0

    @property
    def is_credit_card(self) -> bool:
        return self.type == CREDIT_CARD_TYPE


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of a single stop check. Truthy when the check passed."""

    passed: bool
    code: Optional[RejectionCode] = None
    reason: Optional[str] = None
    loan_type: Optional[str] = None

    def __bool__(self) -> bool:
        return self.passed

    @classmethod
    def ok(cls) -> "CheckResult":
        return cls(passed=True)

    @classmethod
    def fail(
        cls,
        code: RejectionCode,
        reason: str,
        loan_type: Optional[str] = None,
    ) -> "CheckResult":
        return cls(passed=False, code=code, reason=reason, loan_type=loan_type)


@dataclass(frozen=True, slots=True)
class Verdict:
    """Final approve/reject outcome of one evaluation."""

    approved: bool
    reason: Optional[str] = None
    code: Optional[RejectionCode] = None
    loan_type: Optional[str] = None

    @classmethod
    def approve(cls) -> "Verdict":
        return cls(approved=True)

    @classmethod
    def reject(
        cls,
        code: RejectionCode,
        reason: str,
        loan_type: Optional[str] = None,
    ) -> "Verdict":
        return cls(approved=False, reason=reason, code=code, loan_type=loan_type)

    @classmethod
    def from_check(cls, result: CheckResult) -> "Verdict":
        if result.passed:
            return cls.approve()
        return cls.reject(result.code, result.reason, result.loan_type)


__all__ = [
    "CREDIT_CARD_TYPE",
    "Applicant",
    "CheckResult",
    "CreditRecord",
    "Passport",
    "RejectionCode",
    "UnderwritingError",
    "Verdict",
]
