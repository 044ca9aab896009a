from src.attendance_dashboard.attendance_dashboard.core.enums import SortDirection
from src.attendance_dashboard.attendance_dashboard.explorer.model import (
    ColumnDescriptor,
    ExplorerConfig,
    ExplorerState,
)
from src.attendance_dashboard.attendance_dashboard.explorer.pipeline import (
    clamp_page,
    compare_values,
    count_pages,
    derive,
    filter_rows,
    paginate,
    sort_rows,
)


def _values(rows, key="v"):
    return [row.get(key) for row in rows]


def test_missing_values_sort_last_in_both_directions():
    rows = [{"v": None}, {"v": 5}, {"v": 2}, {}]

    assert _values(sort_rows(rows, "v", SortDirection.ASC)) == [2, 5, None, None]
    assert _values(sort_rows(rows, "v", SortDirection.DESC)) == [5, 2, None, None]


def test_numbers_compare_numerically():
    rows = [{"v": 10}, {"v": -1.5}, {"v": 2}, {"v": -3}]

    assert _values(sort_rows(rows, "v")) == [-3, -1.5, 2, 10]
    assert _values(sort_rows(rows, "v", SortDirection.DESC)) == [10, 2, -1.5, -3]


def test_text_sorts_case_insensitively():
    rows = [{"v": "bob"}, {"v": "Amy"}, {"v": "alice"}]

    assert _values(sort_rows(rows, "v")) == ["alice", "Amy", "bob"]


def test_mixed_kinds_compare_as_text():
    rows = [{"v": 9}, {"v": "10"}]

    assert _values(sort_rows(rows, "v")) == ["10", 9]
    assert compare_values(9, "10") == 1


def test_sort_is_stable_for_equal_keys():
    rows = [{"k": 1, "id": "a"}, {"k": 0, "id": "b"}, {"k": 1, "id": "c"}, {"k": 0, "id": "d"}]

    assert _values(sort_rows(rows, "k"), "id") == ["b", "d", "a", "c"]
    assert _values(sort_rows(rows, "k", SortDirection.DESC), "id") == ["a", "c", "b", "d"]


def test_sort_by_nested_path():
    rows = [{"emp": {"name": "Zed"}}, {"emp": {"name": "Amy"}}, {"emp": {}}]

    assert [r["emp"].get("name") for r in sort_rows(rows, "emp.name")] == ["Amy", "Zed", None]


def test_sort_does_not_mutate_input():
    rows = [{"v": 3}, {"v": 1}, {"v": 2}]
    before = list(rows)

    sort_rows(rows, "v")

    assert rows == before


def test_filter_matches_any_field_case_insensitively():
    rows = [{"name": "Bob", "code": 123}, {"name": "Amy", "code": 7}, {"name": None}]

    assert filter_rows(rows, "BOB") == [rows[0]]
    assert filter_rows(rows, "23") == [rows[0]]
    assert filter_rows(rows, "zzz") == []


def test_filter_restricted_to_search_keys():
    rows = [{"name": "Amy", "remark": "bob covered"}, {"name": "Bob", "remark": ""}]

    assert filter_rows(rows, "bob", search_keys=("name",)) == [rows[1]]
    assert filter_rows(rows, "bob", search_keys=()) == []


def test_filter_returns_input_when_term_is_empty_or_search_disabled():
    rows = [{"name": "Amy"}]

    assert filter_rows(rows, "") is rows
    assert filter_rows(rows, "zzz", searchable=False) is rows


def test_page_counting_and_clamping():
    assert count_pages(45, 20) == 3
    assert count_pages(40, 20) == 2
    assert count_pages(0, 20) == 0
    assert clamp_page(9, 3) == 3
    assert clamp_page(0, 3) == 1
    assert clamp_page(4, 0) == 1


def test_paginate_slices_the_requested_page():
    rows = [{"i": i} for i in range(45)]

    assert _values(paginate(rows, 1, 20), "i") == list(range(20))
    assert _values(paginate(rows, 3, 20), "i") == list(range(40, 45))
    assert paginate(rows, 4, 20) == []


def test_derive_runs_filter_then_sort_then_page():
    config = ExplorerConfig(columns=(ColumnDescriptor("name", "Name"), ColumnDescriptor("n", "N")), page_size=2)
    rows = [{"name": "a1", "n": 3}, {"name": "b", "n": 1}, {"name": "a2", "n": 2}, {"name": "a3", "n": 1}]
    state = ExplorerState(search_term="a", sort_key="n", sort_direction=SortDirection.DESC, current_page=2)

    view = derive(rows, config, state)

    assert view.total_count == 3
    assert view.total_pages == 2
    assert _values(view.sorted, "name") == ["a1", "a2", "a3"]
    assert _values(view.page, "name") == ["a3"]
    assert view.has_previous and not view.has_next
