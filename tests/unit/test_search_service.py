from __future__ import annotations

from types import SimpleNamespace

from chat_dashboard.services.search_service import filter_roster
from tests.conftest import make_employee


def _names(employees):
    return [e.name for e in employees]


def test_case_insensitive_substring_in_roster_order():
    roster = [make_employee("Dana"), make_employee("Alex"), make_employee("dave")]
    assert _names(filter_roster(roster, "da")) == ["Dana", "dave"]
    assert _names(filter_roster(roster, "DA")) == ["Dana", "dave"]


def test_empty_query_matches_everyone():
    roster = [make_employee("Dana"), make_employee("Alex")]
    assert _names(filter_roster(roster, "")) == ["Dana", "Alex"]
    assert _names(filter_roster(roster, None)) == ["Dana", "Alex"]


def test_no_match():
    assert filter_roster([make_employee("Dana")], "zed") == []


def test_malformed_names_are_excluded():
    roster = [make_employee("Dana"), SimpleNamespace(name=None), SimpleNamespace(), SimpleNamespace(name=5)]
    assert _names(filter_roster(roster, "")) == ["Dana"]
