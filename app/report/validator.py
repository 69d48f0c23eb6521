from typing import Any

from app.report.exceptions import ResponseFormatError
from app.report.models import Conflict, ConflictReport

_CONFLICT_FIELDS = ("document1", "document2", "description", "suggestion")


def build_report(data: dict[str, Any], raw_response: str) -> ConflictReport:
    """Build a ConflictReport from the parsed reply.

    A missing 'conflicts' key means no conflicts. Missing entry fields become
    empty strings.

    Raises:
        ResponseFormatError: if 'conflicts' is not a list or an entry is not an object.
    """
    raw_conflicts = data.get("conflicts")
    if raw_conflicts is None:
        return ConflictReport()
    if not isinstance(raw_conflicts, list):
        raise ResponseFormatError("'conflicts' must be a list", raw_response)
    return ConflictReport(
        conflicts=[_build_conflict(item, i, raw_response) for i, item in enumerate(raw_conflicts)]
    )


def _build_conflict(raw: Any, index: int, raw_response: str) -> Conflict:
    if not isinstance(raw, dict):
        raise ResponseFormatError(f"Conflict at index {index} must be an object", raw_response)
    values = {name: _as_text(raw.get(name)) for name in _CONFLICT_FIELDS}
    return Conflict(**values)


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)
