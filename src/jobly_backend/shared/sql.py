"""Helpers for assembling parameterized SQL fragments."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from jobly_backend.shared.errors import BadRequestError

PARAM_PREFIX = "p"


def _param_name(index: int) -> str:
    return f"{PARAM_PREFIX}{index}"


@dataclass(slots=True)
class PartialUpdate:
    """``SET`` clause and its bound values for a partial update."""

    set_cols: str
    values: list[Any]

    @property
    def params(self) -> dict[str, Any]:
        """Bound values keyed by the placeholder names used in :attr:`set_cols`."""
        return {_param_name(idx): value for idx, value in enumerate(self.values, start=1)}

    @property
    def next_param(self) -> str:
        """Name of the first placeholder not used by the ``SET`` clause."""
        return _param_name(len(self.values) + 1)


def sql_for_partial_update(
    data_to_update: Mapping[str, Any], column_map: Mapping[str, str]
) -> PartialUpdate:
    """Build the ``SET`` clause for updating only the supplied fields.

    ``column_map`` translates field names into column names where the two
    differ; unmapped fields are used as column names verbatim.

    >>> update = sql_for_partial_update({"first_name": "Aliya", "age": 32}, {})
    >>> update.set_cols
    '"first_name"=:p1, "age"=:p2'
    """

    if not data_to_update:
        raise BadRequestError("No data")

    cols = [
        f'"{column_map.get(key, key)}"=:{_param_name(idx)}'
        for idx, key in enumerate(data_to_update, start=1)
    ]
    return PartialUpdate(set_cols=", ".join(cols), values=list(data_to_update.values()))


def like_pattern(value: str) -> str:
    """Wrap ``value`` for a lowercase substring ``LIKE`` match, escaping its wildcards.

    Pair it with ``ESCAPE '\\'`` in the condition.
    """
    escaped = value.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


@dataclass(slots=True)
class WhereClause:
    """Accumulates ``AND``-joined filter conditions with bound parameters.

    Conditions passed to :meth:`add` use ``{param}`` where the placeholder
    should go, e.g. ``where.add("salary >= {param}", 1000)``.
    """

    conditions: list[str] = field(default_factory=list)
    params: dict[str, Any] = field(default_factory=dict)

    def add(self, condition: str, value: Any) -> None:
        name = _param_name(len(self.params) + 1)
        self.params[name] = value
        self.conditions.append(condition.format(param=f":{name}"))

    def add_raw(self, condition: str) -> None:
        """Add a condition that binds no value."""
        self.conditions.append(condition)

    def render(self) -> str:
        if not self.conditions:
            return ""
        return " WHERE " + " AND ".join(self.conditions)


__all__ = ["PartialUpdate", "WhereClause", "like_pattern", "sql_for_partial_update"]
