"""Tests for context snippets and line splitting."""

from linear_todos.engine.core import context_bounds, extract_context, split_lines


def test_single_line_document():
    assert extract_context(["only line"], 0) == ">>> only line"


def test_middle_of_document():
    lines = [f"line {i}" for i in range(10)]
    snippet = extract_context(lines, 5)
    assert snippet.splitlines() == [
        "    line 3",
        "    line 4",
        ">>> line 5",
        "    line 6",
        "    line 7",
    ]


def test_clamped_at_start_and_end():
    lines = [f"line {i}" for i in range(4)]
    assert extract_context(lines, 0).splitlines() == [">>> line 0", "    line 1", "    line 2"]
    assert extract_context(lines, 3).splitlines() == ["    line 1", "    line 2", ">>> line 3"]


def test_prefixes_have_equal_width():
    first, second = extract_context(["a", "b"], 0).splitlines()
    assert first.index("a") == second.index("b")


def test_custom_radius():
    lines = [str(i) for i in range(10)]
    assert extract_context(lines, 5, radius=0) == ">>> 5"
    assert context_bounds(10, 5, 1) == (4, 6)


def test_out_of_range_line_is_empty():
    assert extract_context(["a"], 3) == ""
    assert extract_context([], 0) == ""


def test_split_lines_handles_all_line_breaks():
    assert split_lines("a\nb\r\nc\rd") == ["a", "b", "c", "d"]
    assert split_lines("a\n") == ["a", ""]
    assert split_lines("") == [""]
