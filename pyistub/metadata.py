"""Metadata describing what a compiled extension module exposes to Python.

These records are submitted to an :class:`Inventory` and later gathered
into stub file definitions.
"""

from __future__ import annotations

import enum
from collections.abc import Hashable, Iterable
from dataclasses import dataclass
from typing import Any

from .exceptions import native_exception_name
from .stub_types import lookup
from .types import TypeInfo


def compare_op_type_input() -> TypeInfo:
    """Argument annotation for the comparison operator of ``__richcmp__``."""
    return lookup("isize").type_input()


def no_return_type_output() -> TypeInfo:
    """Return annotation of something that returns nothing."""
    return TypeInfo.none()


def _freeze(obj: Any, *names: str) -> None:
    for name in names:
        object.__setattr__(obj, name, tuple(getattr(obj, name)))


class SignatureKind(enum.Enum):
    """How an argument appears in a signature."""

    IDENT = "ident"
    ASSIGN = "assign"
    STAR = "star"
    ARGS = "args"
    KEYWORDS = "keywords"


@dataclass(frozen=True)
class SignatureArg:
    """An argument's place in a signature; ``default`` belongs to ``ASSIGN`` only."""

    kind: SignatureKind
    default: str | None = None

    def __post_init__(self) -> None:
        if self.kind is SignatureKind.ASSIGN:
            if self.default is None:
                raise ValueError("an assigned argument needs a default")
        elif self.default is not None:
            raise ValueError(f"a {self.kind.value} argument takes no default")


@dataclass(frozen=True)
class ArgInfo:
    """An argument of a function or method."""

    name: str
    type: TypeInfo
    signature: SignatureArg | None = None


class MethodType(enum.Enum):
    """How a method is bound."""

    INSTANCE = "instance"
    STATIC = "static"
    CLASS = "class"
    NEW = "new"


@dataclass(frozen=True)
class MethodInfo:
    """A method of a class."""

    name: str
    args: tuple[ArgInfo, ...]
    return_type: TypeInfo
    doc: str = ""
    method_type: MethodType = MethodType.INSTANCE

    def __post_init__(self) -> None:
        _freeze(self, "args")


@dataclass(frozen=True)
class MemberInfo:
    """A class attribute, getter or setter."""

    name: str
    type: TypeInfo
    doc: str = ""
    default: str | None = None


@dataclass(frozen=True)
class PyMethodsInfo:
    """Methods and members added to the class or enum keyed by ``struct_id``."""

    struct_id: Hashable
    attrs: tuple[MemberInfo, ...] = ()
    getters: tuple[MemberInfo, ...] = ()
    setters: tuple[MemberInfo, ...] = ()
    methods: tuple[MethodInfo, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "attrs", "getters", "setters", "methods")


@dataclass(frozen=True)
class PyClassInfo:
    """A class exposed to Python."""

    struct_id: Hashable
    pyclass_name: str
    module: str | None = None
    doc: str = ""
    getters: tuple[MemberInfo, ...] = ()
    setters: tuple[MemberInfo, ...] = ()
    bases: tuple[TypeInfo, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "getters", "setters", "bases")


class VariantForm(enum.Enum):
    """The shape of a variant of a structured enum."""

    UNIT = "unit"
    TUPLE = "tuple"
    STRUCT = "struct"


@dataclass(frozen=True)
class VariantInfo:
    """One variant of a structured enum, exposed as a nested class."""

    pyclass_name: str
    form: VariantForm
    module: str | None = None
    doc: str = ""
    fields: tuple[MemberInfo, ...] = ()
    constr_args: tuple[ArgInfo, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "form", VariantForm(self.form))
        _freeze(self, "fields", "constr_args")


@dataclass(frozen=True)
class PyComplexEnumInfo:
    """A structured enum exposed to Python as a class with variant subclasses."""

    enum_id: Hashable
    pyclass_name: str
    module: str | None = None
    doc: str = ""
    variants: tuple[VariantInfo, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "variants")


@dataclass(frozen=True)
class PyEnumInfo:
    """A plain enum; each variant is a ``(name, doc)`` pair."""

    enum_id: Hashable
    pyclass_name: str
    module: str | None = None
    doc: str = ""
    variants: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        variants = tuple((name, doc) for name, doc in self.variants)
        object.__setattr__(self, "variants", variants)


@dataclass(frozen=True)
class PyFunctionInfo:
    """A module-level function."""

    name: str
    args: tuple[ArgInfo, ...]
    return_type: TypeInfo
    doc: str = ""
    module: str | None = None

    def __post_init__(self) -> None:
        _freeze(self, "args")


@dataclass(frozen=True)
class PyErrorInfo:
    """An exception class derived from a native Python exception."""

    name: str
    module: str
    base: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", native_exception_name(self.base))


@dataclass(frozen=True)
class PyVariableInfo:
    """A module-level variable."""

    name: str
    module: str
    type: TypeInfo


_KINDS: tuple[type, ...] = (
    PyMethodsInfo,
    PyClassInfo,
    PyComplexEnumInfo,
    PyEnumInfo,
    PyFunctionInfo,
    PyErrorInfo,
    PyVariableInfo,
)


class Inventory:
    """Collects submitted metadata records, kept by kind in submission order."""

    def __init__(self, infos: Iterable[Any] = ()) -> None:
        self._entries: dict[type, list[Any]] = {kind: [] for kind in _KINDS}
        for info in infos:
            self.submit(info)

    def submit(self, info: Any) -> Any:
        """Add a record and return it."""
        entries = self._entries.get(type(info))
        if entries is None:
            raise TypeError(f"cannot submit a {type(info).__name__}")
        entries.append(info)
        return info

    def of_kind(self, kind: type) -> tuple[Any, ...]:
        """All records of ``kind``, in the order they were submitted."""
        entries = self._entries.get(kind)
        if entries is None:
            raise TypeError(f"{getattr(kind, '__name__', kind)!r} is not a metadata kind")
        return tuple(entries)