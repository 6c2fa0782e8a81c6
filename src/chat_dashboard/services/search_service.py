from __future__ import annotations

from collections.abc import Iterable

from chat_dashboard.domain.entities.employee import Employee


def filter_roster(roster: Iterable[Employee], query: str | None) -> list[Employee]:
    """Employees whose name contains *query*, case-insensitively, in roster order."""
    needle = (query or "").lower()
    return [
        emp
        for emp in roster
        if isinstance(getattr(emp, "name", None), str) and needle in emp.name.lower()
    ]
