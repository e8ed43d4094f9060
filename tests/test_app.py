import pytest

from ezstore.store.app import App, Apps, parse_app
from ezstore.store.packages import parse_package

FOO = "Foo_1.0.0.0_neutral_~_b1a2r3"
BAR = "Bar_1.0.0.0_x64__b3a2z1"


def test_app():
    expected = App(parse_package(FOO))
    actual = parse_app(FOO)
    assert actual == expected
    assert actual.dependencies() == []


def test_invalid_app():
    with pytest.raises(ValueError, match="is not valid package"):
        parse_app("Foo")


@pytest.mark.parametrize(
    "dependencies, count, text",
    [
        ([], 0, "Foo_v1.0.0.0_neutral__b1a2r3 []"),
        (["Bar"], 1, "Foo_v1.0.0.0_neutral__b1a2r3 [Bar]"),
        (["Bar", "Bar"], 1, "Foo_v1.0.0.0_neutral__b1a2r3 [Bar]"),
        (["Bar", "Baz"], 2, "Foo_v1.0.0.0_neutral__b1a2r3 [Bar, Baz]"),
    ],
)
def test_add_dependency_to_app(dependencies, count, text):
    app = parse_app(FOO)
    for dependency in dependencies:
        app.add(dependency)
    assert len(app.dependencies()) == count
    assert str(app) == text


def test_app_equality_ignores_dependency_order():
    left = parse_app(FOO)
    right = parse_app(FOO)
    left.add("Bar")
    left.add("Baz")
    right.add("Baz")
    right.add("Bar")
    assert left == right
    right.add("Qux")
    assert not left == right


@pytest.mark.parametrize(
    "names, count, text",
    [
        ([], 0, "[]"),
        ([FOO], 1, "[Foo_v1.0.0.0_neutral__b1a2r3 []]"),
        ([FOO, FOO], 1, "[Foo_v1.0.0.0_neutral__b1a2r3 []]"),
        ([FOO, BAR], 2, "[Foo_v1.0.0.0_neutral__b1a2r3 [], Bar_v1.0.0.0_x64__b3a2z1 []]"),
    ],
)
def test_apps(names, count, text):
    apps = Apps(*(parse_app(name) for name in names))
    assert len(apps.values()) == count
    assert str(apps) == text


def test_apps_keep_first_added():
    first = parse_app(FOO)
    first.add("Bar")
    second = parse_app(FOO)
    apps = Apps(first, second)
    assert apps.values()[0].dependencies() == ["Bar"]