import enum
from dataclasses import dataclass

from pyistub.pyrepr import all_builtin_types, fmt_py_obj, valid_external_repr


class A:
    pass


class Number(enum.Enum):
    Float = 0
    Integer = 1

    def __repr__(self):
        return f"{type(self).__name__}.{self.name}"


@dataclass
class Point:
    x: int
    y: int


class NoEq:
    def __repr__(self):
        return "NoEq()"


def test_fmt_dict():
    data = {"k1": "v1", "k2": 2}
    assert fmt_py_obj(data) == "{'k1': 'v1', 'k2': 2}"
    data["k3"] = A()
    assert fmt_py_obj(data) == "..."


def test_fmt_list():
    assert fmt_py_obj([1, 2]) == "[1, 2]"
    assert fmt_py_obj([A(), A()]) == "..."


def test_fmt_tuple():
    assert fmt_py_obj((1, 2)) == "(1, 2)"
    assert fmt_py_obj((1,)) == "(1,)"
    assert fmt_py_obj((A(),)) == "..."


def test_fmt_other():
    assert fmt_py_obj("123") == "'123'"
    assert fmt_py_obj("don't") == "\"don't\""
    assert fmt_py_obj("str\\") == "'str\\\\'"
    assert fmt_py_obj(True) == "True"
    assert fmt_py_obj(False) == "False"
    assert fmt_py_obj(123) == "123"
    assert fmt_py_obj(1.23) == "1.23"
    assert fmt_py_obj(None) == "None"
    assert fmt_py_obj(A()) == "..."


def test_fmt_enum():
    assert fmt_py_obj(Number.Float) == "Number.Float"


def test_fmt_dataclass_with_round_trip_repr():
    assert fmt_py_obj(Point(1, 2)) == repr(Point(1, 2))


def test_fmt_repr_that_does_not_compare_equal():
    assert fmt_py_obj(NoEq()) == "..."


def test_all_builtin_types_nested():
    assert all_builtin_types({"a": [1, (2.0, None)], "b": {"c": True}})
    assert not all_builtin_types({"a": [A()]})
    assert not all_builtin_types({1, 2})


def test_valid_external_repr_results():
    assert valid_external_repr(Point(3, 4)) is True
    assert valid_external_repr(Number.Integer) is True
    assert valid_external_repr(NoEq()) is False
    assert valid_external_repr(A()) is None
    assert valid_external_repr(frozenset({1})) is True