import pytest

from ezstore.paths import join


@pytest.mark.parametrize(
    ("parts", "expected"),
    [
        (["a/b", "c"], "a\\b\\c"),
        (["a/b\\c"], "a\\b\\c"),
        (["a\\b", "c"], "a\\b\\c"),
        ([""], ""),
        (["/"], "\\"),
    ],
    ids=[
        "unix-path",
        "combined-path",
        "windows-path",
        "empty-path",
        "no-path",
    ],
)
def test_normalize_path(parts, expected):
    assert join(*parts) == expected


def test_no_arguments_gives_empty_string():
    assert join() == ""


def test_empty_parts_are_skipped():
    assert join("a", "", "b") == "a\\b"


def test_parent_segments_are_resolved():
    assert join("a/../b") == "b"


def test_rooted_parent_cannot_escape_root():
    assert join("/", "..", "x") == "\\x"


def test_result_has_no_forward_slashes():
    result = join("x/y", "z/w/")
    assert "/" not in result
    assert result.split("\\") == ["x", "y", "z", "w"]