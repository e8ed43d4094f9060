import pytest

from ezstore.version import FileInfo, Version, parse_version


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("v1", Version(major=1)),
        ("1.2", Version(major=1, minor=2)),
        ("1.2.3", Version(major=1, minor=2, build=3)),
        ("1.2.3.4", Version(major=1, minor=2, build=3, revision=4)),
    ],
    ids=["major", "major-minor", "major-minor-build", "major-minor-build-revision"],
)
def test_version(raw, expected):
    actual = parse_version(raw)
    assert actual == expected
    assert str(actual) == str(expected)


def test_version_string():
    assert str(Version(major=1, minor=2, build=3, revision=4)) == "v1.2.3.4"


@pytest.mark.parametrize("value", ["", "1.2.3.4.5", "foo bar 123", "vNotAVersion"])
def test_invalid_version(value):
    with pytest.raises(ValueError) as info:
        parse_version(value)
    assert str(info.value) == f'"{value}" is not a valid version'


def test_version_out_of_int64_range():
    with pytest.raises(ValueError, match="to int64"):
        parse_version("1.99999999999999999999")


@pytest.mark.parametrize(
    ("expected", "left", "right"),
    [
        (1, Version(major=1, minor=2, build=3, revision=4), Version(minor=2, build=3, revision=4)),
        (-1, Version(revision=3), Version(revision=4)),
        (0, Version(major=1, minor=2, build=3, revision=4), Version(major=1, minor=2, build=3, revision=4)),
    ],
    ids=["left", "right", "equal"],
)
def test_compare(expected, left, right):
    assert left.compare(right) == expected
    assert right.compare(left) == -expected


def test_ordering_operators_agree_with_compare():
    low = parse_version("1.0.0.0")
    high = parse_version("1.0.1.0")
    assert low < high
    assert max(high, low) is high
    assert low.compare(high) == -1


def test_as_tuple():
    assert parse_version("1.2.3.4").as_tuple() == (1, 2, 3, 4)


@pytest.mark.parametrize("raw", ["v0", "10.0.19041.1", "v1.2.3.4"])
def test_string_round_trip(raw):
    version = parse_version(raw)
    assert parse_version(str(version)) == version


def test_file_info_holds_version():
    version = parse_version("1.2")
    info = FileInfo(path="C:\\tmp\\Foo-v1.2.0.0.appx", name="Foo", version=version)
    assert info.version == Version(major=1, minor=2)
    assert info.name == "Foo"