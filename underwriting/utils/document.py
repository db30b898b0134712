from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from underwriting.models import CreditRecord, UnderwritingError

logger = logging.getLogger(__name__)

_ABSENT = object()


class MalformedDocument(UnderwritingError):
    """Raised when the client record is not a usable JSON document."""


class MissingField(MalformedDocument):
    """Raised when a required field is absent or has the wrong shape."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Поле не найдено: {path}")
        self.path = path


class ClientDocument:
    """Parsed client record navigable by dotted field paths."""

    def __init__(self, tree: Dict[str, Any]) -> None:
        self._tree = tree

    @classmethod
    def parse(cls, raw_text: str) -> "ClientDocument":
        try:
            tree = json.loads(raw_text)
        except (TypeError, ValueError) as exc:
            raise MalformedDocument(f"Не удалось разобрать JSON: {exc}") from exc
        if not isinstance(tree, dict):
            raise MalformedDocument("Корневой элемент документа должен быть объектом")
        return cls(tree)

    def get(self, path: str) -> Optional[Any]:
        """Return the value at ``path`` or ``None`` when it is absent."""

        node: Any = self._tree
        for key in path.split("."):
            if not isinstance(node, dict):
                return None
            node = node.get(key, _ABSENT)
            if node is _ABSENT:
                return None
        return node

    def require_string(self, path: str) -> str:
        value = self.get(path)
        if not isinstance(value, str):
            raise MissingField(path)
        return value

    def require_object(self, path: str) -> Dict[str, Any]:
        value = self.get(path)
        if not isinstance(value, dict):
            raise MissingField(path)
        return value

    def require_array(self, path: str) -> List[Any]:
        value = self.get(path)
        if not isinstance(value, list):
            raise MissingField(path)
        return value

    def credit_records(self, path: str = "creditHistory") -> List[CreditRecord]:
        records: List[CreditRecord] = []
        for index, item in enumerate(self.require_array(path)):
            item_path = f"{path}[{index}]"
            if not isinstance(item, dict):
                raise MalformedDocument(f"Элемент {item_path} должен быть объектом")
            records.append(parse_credit_record(item, item_path))
        return records


def parse_credit_record(item: Dict[str, Any], path: str = "creditHistory") -> CreditRecord:
    credit_type = item.get("type")
    if not isinstance(credit_type, str):
        if credit_type is not None:
            logger.debug("Ignoring non-string type %r in %s", credit_type, path)
        credit_type = ""
    return CreditRecord(
        type=credit_type,
        current_overdue_debt=_count(item.get("currentOverdueDebt"), f"{path}.currentOverdueDebt"),
        number_of_days_on_overdue=_count(
            item.get("numberOfDaysOnOverdue"), f"{path}.numberOfDaysOnOverdue"
        ),
    )


def _count(value: Any, path: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise MalformedDocument(f"Поле {path} должно быть целым числом")
    if isinstance(value, int):
        if value < 0:
            raise MalformedDocument(f"Поле {path} не может быть отрицательным")
        return value
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())
    raise MalformedDocument(f"Поле {path} должно быть целым числом")


__all__ = [
    "ClientDocument",
    "MalformedDocument",
    "MissingField",
    "parse_credit_record",
]
