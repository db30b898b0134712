from __future__ import annotations

from datetime import date
from typing import Optional

from babel.dates import format_date
from jinja2 import Template

from underwriting.models import RejectionCode, Verdict

APPROVED_TEXT = "Заявка одобрена"
REJECTED_TEXT = "Отказ, сработала стоп проверка"

REASON_TEXTS = {
    RejectionCode.AGE_BELOW_MINIMUM: "Отказ: возраст меньше 20 лет.",
    RejectionCode.PASSPORT_NOT_RENEWED: "Отказ: паспорт недействителен.",
    RejectionCode.CREDIT_CARD_OVERDUE_DEBT: (
        "Отказ: по кредитной карте есть непогашенная просроченная задолженность."
    ),
    RejectionCode.CREDIT_CARD_OVERDUE_DAYS: "Отказ: по кредитной карте была просрочка более 30 дней.",
    RejectionCode.LOAN_OVERDUE_DEBT: (
        'Отказ: по кредиту "{loan_type}" есть непогашенная просроченная задолженность.'
    ),
    RejectionCode.LOAN_OVERDUE_DAYS: 'Отказ: по кредиту "{loan_type}" была просрочка более 60 дней.',
    RejectionCode.TOO_MANY_DELINQUENT_LOANS: (
        "Отказ: есть больше двух кредитов с просроченной задолженностью более 15 дней."
    ),
    RejectionCode.MISSING_FIELD: "Ошибка при обработке JSON: не найдено обязательное поле.",
    RejectionCode.MALFORMED_DATE: "Ошибка при обработке JSON: некорректный формат даты.",
    RejectionCode.MALFORMED_DOCUMENT: "Ошибка при обработке JSON: документ повреждён.",
}

REPORT_TEMPLATE = Template(
    "{% if reason %}{{ reason }}\n{% endif %}"
    "{{ outcome }}"
    "{% if checked_on %}\nДата проверки: {{ checked_on }}{% endif %}"
)


def format_russian_date(value: date) -> str:
    return format_date(value, format="long", locale="ru")


def render_reason(verdict: Verdict) -> Optional[str]:
    if verdict.approved:
        return None
    template = REASON_TEXTS.get(verdict.code)
    if template is None:
        return f"Отказ: {verdict.reason or 'причина не указана'}."
    return template.format(loan_type=verdict.loan_type or "")


def render_verdict(verdict: Verdict, checked_on: Optional[date] = None) -> str:
    return REPORT_TEMPLATE.render(
        reason=render_reason(verdict),
        outcome=APPROVED_TEXT if verdict.approved else REJECTED_TEXT,
        checked_on=format_russian_date(checked_on) if checked_on else None,
    )


__all__ = [
    "APPROVED_TEXT",
    "REJECTED_TEXT",
    "format_russian_date",
    "render_reason",
    "render_verdict",
]
