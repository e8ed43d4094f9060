import pytest

from ezstore.store.slices import pretty_string, unordered_equal


class SomeData:
    def __init__(self, value):
        self.value = value

    def __str__(self):
        return self.value

    def same(self, other):
        return self.value == other.value


def _data(*values):
    return [SomeData(value) for value in values]


@pytest.mark.parametrize(
    "items, expected",
    [
        ([], "[]"),
        (["foo"], "[foo]"),
        (["foo", "bar"], "[foo, bar]"),
        (["foo", "bar", "baz"], "[foo, bar, baz]"),
        (["foobar", "foobar"], "[foobar, foobar]"),
        (_data(), "[]"),
        (_data("foo"), "[foo]"),
        (_data("foo", "bar"), "[foo, bar]"),
        (_data("foo", "bar", "baz"), "[foo, bar, baz]"),
        (_data("foobar", "foobar"), "[foobar, foobar]"),
    ],
)
def test_pretty_string(items, expected):
    assert pretty_string(items) == expected


@pytest.mark.parametrize("value", ["foo", b"foo", 42])
def test_pretty_string_rejects_non_collections(value):
    with pytest.raises(TypeError):
        pretty_string(value)


@pytest.mark.parametrize(
    "left, right, expected",
    [
        (_data(), _data(), True),
        (_data("a", "b"), _data("b", "a"), True),
        (_data("a"), _data("b", "a"), False),
        (_data("a", "b"), _data("a"), False),
        (_data("a", "b"), _data("b", "c"), False),
    ],
)
def test_unordered_equal(left, right, expected):
    assert unordered_equal(left, right, lambda l, r: l.same(r)) is expected


def test_unordered_equal_with_dict_keys():
    data = {"a": "1", "b": "2", "c": "3"}
    keys = list(data)
    assert len(keys) == 3
    assert unordered_equal(["a", "b", "c"], keys, lambda l, r: l == r) is True


def test_unordered_equal_default_comparison():
    assert unordered_equal([1, 2, 3], [3, 2, 1]) is True
    assert unordered_equal([1, 2], [3, 2]) is False