"""Stub types for common Rust types, and a lookup by Rust type expression.

Every stub type here is a subclass of :class:`~pyistub.types.StubType`
whose ``type_output`` and ``type_input`` give the annotations used for
return values and for arguments respectively.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .types import ModuleRef, StubType, TypeInfo

StubTypeClass = type[StubType]


def _stub(output: TypeInfo, input_: TypeInfo | None = None) -> StubTypeClass:
    type_in = output if input_ is None else input_

    class _Stub(StubType):
        @classmethod
        def type_output(cls) -> TypeInfo:
            return output

        @classmethod
        def type_input(cls) -> TypeInfo:
            return type_in

    _Stub.__name__ = _Stub.__qualname__ = f"Stub[{output.name}]"
    return _Stub


def _generic(head: str, infos: list[TypeInfo], module: str | None = None) -> TypeInfo:
    imports = frozenset().union(*(info.imports for info in infos))
    if module is not None:
        imports |= {ModuleRef(module)}
    return TypeInfo(f"{head}[{', '.join(info.name for info in infos)}]", imports)


def unit() -> StubTypeClass:
    """The unit type, annotated as ``None``."""
    return _stub(TypeInfo.none())


def builtin(name: str) -> StubTypeClass:
    """A type from the ``builtins`` module."""
    return _stub(TypeInfo.builtin(name))


def with_module(name: str, module: ModuleRef | str) -> StubTypeClass:
    """A qualified type that needs ``module`` imported."""
    return _stub(TypeInfo.with_module(name, module))


def path() -> StubTypeClass:
    """A filesystem path: returns ``pathlib.Path``, accepts str or path-likes."""
    output = TypeInfo.with_module("pathlib.Path", "pathlib")
    accepted = (
        TypeInfo.builtin("str")
        | TypeInfo.with_module("os.PathLike", "os")
        | TypeInfo.with_module("pathlib.Path", "pathlib")
    )
    return _stub(output, accepted)


def optional(inner: StubTypeClass) -> StubTypeClass:
    """``typing.Optional[inner]``."""
    return _stub(
        _generic("typing.Optional", [inner.type_output()], "typing"),
        _generic("typing.Optional", [inner.type_input()], "typing"),
    )


def sequence(inner: StubTypeClass) -> StubTypeClass:
    """A list: returned as ``builtins.list``, accepted as ``typing.Sequence``."""
    return _stub(
        TypeInfo.list_of(inner.type_output()),
        _generic("typing.Sequence", [inner.type_input()], "typing"),
    )


def set_of(inner: StubTypeClass) -> StubTypeClass:
    """``builtins.set[inner]`` for both arguments and return values."""
    return _stub(TypeInfo.set_of(inner.type_output()))


def mapping(key: StubTypeClass, value: StubTypeClass) -> StubTypeClass:
    """A map: returned as ``builtins.dict``, accepted as ``typing.Mapping``."""
    return _stub(
        TypeInfo.dict_of(key.type_output(), value.type_output()),
        _generic("typing.Mapping", [key.type_input(), value.type_input()], "typing"),
    )


_MAX_TUPLE = 9


def tuple_of(*args: StubTypeClass) -> StubTypeClass:
    """``tuple[...]`` of one to nine element types."""
    if not 1 <= len(args) <= _MAX_TUPLE:
        raise ValueError(f"tuples take 1 to {_MAX_TUPLE} element types, got {len(args)}")
    return _stub(
        _generic("tuple", [arg.type_output() for arg in args]),
        _generic("tuple", [arg.type_input() for arg in args]),
    )


def either(left: StubTypeClass, right: StubTypeClass) -> StubTypeClass:
    """``typing.Union[left, right]``."""
    return _stub(
        _generic("typing.Union", [left.type_output(), right.type_output()], "typing"),
        _generic("typing.Union", [left.type_input(), right.type_input()], "typing"),
    )


_NUMPY_SCALARS: dict[str, str] = {
    "i8": "int8",
    "i16": "int16",
    "i32": "int32",
    "i64": "int64",
    "u8": "uint8",
    "u16": "uint16",
    "u32": "uint32",
    "u64": "uint64",
    "f32": "float32",
    "f64": "float64",
    "Complex32": "complex64",
    "Complex64": "complex128",
}
_NUMPY_NAMES = frozenset(_NUMPY_SCALARS.values())


def numpy_array(dtype: str) -> StubTypeClass:
    """``numpy.typing.NDArray`` of a scalar, named by numpy or Rust name."""
    name = _NUMPY_SCALARS.get(dtype, dtype)
    if name not in _NUMPY_NAMES:
        raise ValueError(f"{dtype!r} is not a supported numpy scalar type")
    scalar = TypeInfo.with_module(f"numpy.{name}", "numpy")
    return _stub(_generic("numpy.typing.NDArray", [scalar], "numpy.typing"))


def untyped_array() -> StubTypeClass:
    """A numpy array of unknown element type."""
    return _stub(
        TypeInfo("numpy.typing.NDArray[typing.Any]", frozenset({"numpy.typing", "typing"}))
    )


def numpy_dtype() -> StubTypeClass:
    """A numpy data type descriptor."""
    return _stub(TypeInfo.with_module("numpy.dtype", "numpy"))


def py_any() -> StubTypeClass:
    """An arbitrary Python object, ``typing.Any``."""
    return _stub(TypeInfo.any())


_PY_NATIVE: dict[str, str] = {
    "PyInt": "int",
    "PyFloat": "float",
    "PyList": "list",
    "PyTuple": "tuple",
    "PySlice": "slice",
    "PyDict": "dict",
    "PySet": "set",
    "PyString": "str",
    "PyBackedStr": "str",
    "PyByteArray": "bytearray",
    "PyBytes": "bytes",
    "PyBackedBytes": "bytes",
    "PyType": "type",
    "CompareOp": "int",
}

_PY_DATETIME: dict[str, str] = {
    "PyDate": "date",
    "PyDateTime": "datetime",
    "PyDelta": "timedelta",
    "PyTime": "time",
    "PyTzInfo": "tzinfo",
}


def py_native(name: str) -> StubTypeClass:
    """A Python object type from the binding layer, such as ``PyDict``."""
    if name == "PyAny":
        return py_any()
    if name in _PY_NATIVE:
        return _stub(TypeInfo.unqualified(_PY_NATIVE[name]))
    if name in _PY_DATETIME:
        return with_module(f"datetime.{_PY_DATETIME[name]}", "datetime")
    raise ValueError(f"{name!r} is not a known Python object type")


@dataclass(frozen=True)
class _Node:
    name: str
    args: tuple[_Node, ...] = ()


_TOKEN_RE = re.compile(
    r"""\s*(?:
        (?P<lifetime>'[A-Za-z_]\w*)
      | (?P<path>(?:::\s*)?[A-Za-z_]\w*(?:\s*::\s*[A-Za-z_]\w*)*)
      | (?P<number>\d+)
      | (?P<punct>[<>,()\[\];&])
    )""",
    re.VERBOSE,
)
_PATH_SEP = re.compile(r"\s*::\s*")


def _tokenize(text: str) -> list[tuple[str, str]]:
    tokens = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if match is None or match.end() == pos:
            raise ValueError(f"cannot parse Rust type {text!r} at offset {pos}")
        kind = match.lastgroup
        tokens.append((kind, match.group(kind)))
        pos = match.end()
    return tokens


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._tokens = _tokenize(text.strip())
        self._pos = 0

    def _error(self, message: str) -> ValueError:
        return ValueError(f"cannot parse Rust type {self._text!r}: {message}")

    def _peek(self) -> tuple[str | None, str | None]:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return (None, None)

    def _take(self) -> tuple[str, str]:
        kind, value = self._peek()
        if kind is None:
            raise self._error("unexpected end")
        self._pos += 1
        return kind, value

    def _accept(self, value: str) -> bool:
        if self._peek()[1] == value:
            self._pos += 1
            return True
        return False

    def _expect(self, value: str) -> None:
        if not self._accept(value):
            raise self._error(f"expected {value!r}")

    def parse(self) -> _Node:
        node = self._type()
        if self._peek()[0] is not None:
            raise self._error(f"unexpected {self._peek()[1]!r}")
        return node

    def _type(self) -> _Node:
        kind, value = self._take()
        if value == "&":
            if self._peek()[0] == "lifetime":
                self._pos += 1
            self._accept("mut")
            return _Node("&", (self._type(),))
        if value == "(":
            return self._tuple()
        if value == "[":
            element = self._type()
            if self._accept(";"):
                length_kind, _ = self._take()
                if length_kind not in ("number", "path"):
                    raise self._error("expected an array length")
                self._expect("]")
                return _Node("[;]", (element,))
            self._expect("]")
            return _Node("[]", (element,))
        if kind == "path":
            name = _PATH_SEP.split(value)[-1]
            args = self._generic_args() if self._accept("<") else ()
            return _Node(name, args)
        raise self._error(f"unexpected {value!r}")

    def _tuple(self) -> _Node:
        items: list[_Node] = []
        trailing = False
        while not self._accept(")"):
            items.append(self._type())
            trailing = self._accept(",")
            if not trailing:
                self._expect(")")
                break
        if len(items) == 1 and not trailing:
            return items[0]
        return _Node("()", tuple(items))

    def _generic_args(self) -> tuple[_Node, ...]:
        args: list[_Node] = []
        while not self._accept(">"):
            if self._peek()[0] in ("lifetime", "number"):
                self._pos += 1
            else:
                args.append(self._type())
            if not self._accept(","):
                self._expect(">")
                break
        return tuple(args)


_INT_TYPES = ("u8", "u16", "u32", "u64", "u128", "usize",
              "i8", "i16", "i32", "i64", "i128", "isize")

_BUILTIN_NAMES: dict[str, str] = {
    **{name: "int" for name in _INT_TYPES},
    "bool": "bool",
    "f32": "float",
    "f64": "float",
    "Complex32": "complex",
    "Complex64": "complex",
    "char": "str",
    "str": "str",
    "OsStr": "str",
    "String": "str",
    "OsString": "str",
}

_DATETIME_TYPES: dict[str, str] = {
    "SystemTime": "datetime.datetime",
    "NaiveDateTime": "datetime.datetime",
    "NaiveDate": "datetime.date",
    "NaiveTime": "datetime.time",
    "FixedOffset": "datetime.tzinfo",
    "Utc": "datetime.tzinfo",
    "Duration": "datetime.timedelta",
}

_TRANSPARENT = frozenset({"Rc", "Arc", "Box", "Py", "PyRef", "PyRefMut", "Bound"})
_SETS: dict[str, tuple[int, int]] = {"HashSet": (1, 2), "BTreeSet": (1, 1), "IndexSet": (1, 2)}
_MAPS: dict[str, tuple[int, int]] = {"HashMap": (2, 3), "BTreeMap": (2, 2), "IndexMap": (2, 3)}
_NUMPY_ARRAY = re.compile(r"Py(?:Readonly|Readwrite)?Array(?:\d|Dyn)?")


def _arity(node: _Node, low: int, high: int) -> tuple[_Node, ...]:
    if not low <= len(node.args) <= high:
        raise ValueError(
            f"{node.name} takes {low} to {high} type arguments, got {len(node.args)}"
        )
    return node.args


def _resolve(node: _Node) -> StubTypeClass:
    name = node.name
    if name == "&":
        return _resolve(node.args[0])
    if name == "()":
        return tuple_of(*map(_resolve, node.args)) if node.args else unit()
    if name == "[;]":
        return sequence(_resolve(node.args[0]))
    if name == "[]":
        raise ValueError("a bare slice has no stub type")
    if name in _BUILTIN_NAMES:
        _arity(node, 0, 0)
        return builtin(_BUILTIN_NAMES[name])
    if name in _DATETIME_TYPES:
        _arity(node, 0, 0)
        return with_module(_DATETIME_TYPES[name], "datetime")
    if name == "DateTime":
        _arity(node, 0, 1)
        return with_module("datetime.datetime", "datetime")
    if name == "PathBuf":
        _arity(node, 0, 0)
        return path()
    if name == "Cow":
        (inner,) = _arity(node, 1, 1)
        if inner.name == "[]" and inner.args[0] == _Node("u8"):
            return builtin("bytes")
        if inner in (_Node("str"), _Node("OsStr")):
            return builtin("str")
        raise ValueError(f"no stub type known for Cow of {inner.name!r}")
    if name in _TRANSPARENT:
        (inner,) = _arity(node, 1, 1)
        return _resolve(inner)
    if name == "Result":
        return _resolve(_arity(node, 1, 2)[0])
    if name == "Option":
        (inner,) = _arity(node, 1, 1)
        return optional(_resolve(inner))
    if name == "Vec":
        (inner,) = _arity(node, 1, 1)
        return sequence(_resolve(inner))
    if name in _SETS:
        return set_of(_resolve(_arity(node, *_SETS[name])[0]))
    if name in _MAPS:
        key, value = _arity(node, *_MAPS[name])[:2]
        return mapping(_resolve(key), _resolve(value))
    if name == "Either":
        left, right = _arity(node, 2, 2)
        return either(_resolve(left), _resolve(right))
    if name == "PyUntypedArray":
        _arity(node, 0, 0)
        return untyped_array()
    if name == "PyArrayDescr":
        _arity(node, 0, 0)
        return numpy_dtype()
    if _NUMPY_ARRAY.fullmatch(name):
        dtype = _arity(node, 1, 2)[0]
        if dtype.args or dtype.name in ("&", "()", "[]", "[;]"):
            raise ValueError(f"{name} needs a numpy scalar element type")
        return numpy_array(dtype.name)
    if name == "PyAny" or name in _PY_NATIVE or name in _PY_DATETIME:
        _arity(node, 0, 0)
        return py_native(name)
    raise ValueError(f"no stub type known for {name!r}")


def lookup(rust_type: str) -> StubTypeClass:
    """Return the stub type for a Rust type expression such as ``Vec<u32>``.

    Raises ``ValueError`` when the expression cannot be parsed or names a
    type with no known Python annotation.
    """
    return _resolve(_Parser(rust_type).parse())