"""Python type annotations with the modules they need imported."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from dataclasses import dataclass


@functools.total_ordering
@dataclass(frozen=True)
class ModuleRef:
    """A module to import in a stub file.

    A ``name`` of ``None`` stands for the default module of the project,
    which is only known when stub files are generated. Named modules sort
    before the default one, and among themselves by name.
    """

    name: str | None = None

    def get(self) -> str | None:
        """Return the module name, or ``None`` for the default module."""
        return self.name

    def _sort_key(self) -> tuple[bool, str]:
        return (self.name is None, self.name or "")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ModuleRef):
            return NotImplemented
        return self._sort_key() < other._sort_key()


def _module_ref(value: ModuleRef | str) -> ModuleRef:
    if isinstance(value, ModuleRef):
        return value
    if isinstance(value, str):
        return ModuleRef(value)
    raise TypeError(f"expected a module name or ModuleRef, got {type(value).__name__}")


@dataclass(frozen=True)
class TypeInfo:
    """A type annotation together with the modules it requires."""

    name: str
    imports: frozenset[ModuleRef] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "imports", frozenset(_module_ref(m) for m in self.imports)
        )

    @classmethod
    def none(cls) -> TypeInfo:
        """The ``None`` annotation."""
        return cls("None")

    @classmethod
    def any(cls) -> TypeInfo:
        """The ``typing.Any`` annotation."""
        return cls("typing.Any", frozenset({ModuleRef("typing")}))

    @classmethod
    def builtin(cls, name: str) -> TypeInfo:
        """A type from the ``builtins`` module, such as ``int`` or ``dict[str, str]``."""
        return cls(f"builtins.{name}", frozenset({ModuleRef("builtins")}))

    @classmethod
    def unqualified(cls, name: str) -> TypeInfo:
        """A type name used as is, with nothing to import."""
        return cls(name)

    @classmethod
    def with_module(cls, name: str, module: ModuleRef | str) -> TypeInfo:
        """A qualified type name that needs ``module`` imported."""
        return cls(name, frozenset({_module_ref(module)}))

    @classmethod
    def list_of(cls, item: TypeInfo) -> TypeInfo:
        """A ``builtins.list[item]`` annotation."""
        return cls(
            f"builtins.list[{item.name}]", item.imports | {ModuleRef("builtins")}
        )

    @classmethod
    def set_of(cls, item: TypeInfo) -> TypeInfo:
        """A ``builtins.set[item]`` annotation."""
        return cls(
            f"builtins.set[{item.name}]", item.imports | {ModuleRef("builtins")}
        )

    @classmethod
    def dict_of(cls, key: TypeInfo, value: TypeInfo) -> TypeInfo:
        """A ``builtins.dict[key, value]`` annotation."""
        return cls(
            f"builtins.dict[{key.name}, {value.name}]",
            key.imports | value.imports | {ModuleRef("builtins")},
        )

    def __or__(self, other: TypeInfo) -> TypeInfo:
        if not isinstance(other, TypeInfo):
            return NotImplemented
        return TypeInfo(f"{self.name} | {other.name}", self.imports | other.imports)

    def __str__(self) -> str:
        return self.name


class StubType(ABC):
    """A type that knows its Python annotation.

    The input annotation, used for arguments, defaults to the output one,
    used for return values.
    """

    @classmethod
    @abstractmethod
    def type_output(cls) -> TypeInfo:
        """Annotation used for return values."""

    @classmethod
    def type_input(cls) -> TypeInfo:
        """Annotation used for arguments."""
        return cls.type_output()