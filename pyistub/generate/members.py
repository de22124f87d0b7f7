"""Stub text for arguments, class members, module variables and exceptions."""

from __future__ import annotations

from dataclasses import dataclass

from ..metadata import (
    ArgInfo,
    MemberInfo,
    PyErrorInfo,
    PyVariableInfo,
    SignatureArg,
    SignatureKind,
)
from ..types import ModuleRef, TypeInfo

INDENT = "    "


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def write_docstring(doc: str, indent: str) -> str:
    """Render ``doc`` as a raw docstring block at ``indent``; empty docs give ``""``."""
    doc = doc.strip()
    if not doc:
        return ""
    body = "".join(f"{indent}{line}\n" for line in _lines(doc))
    return f'{indent}r"""\n{body}{indent}"""\n'


@dataclass(frozen=True)
class Arg:
    """An argument in a function or method signature."""

    name: str
    type: TypeInfo
    signature: SignatureArg | None = None

    @classmethod
    def from_info(cls, info: ArgInfo) -> Arg:
        return cls(name=info.name, type=info.type, signature=info.signature)

    def imports(self) -> frozenset[ModuleRef]:
        return self.type.imports

    def __str__(self) -> str:
        kind = self.signature.kind if self.signature is not None else SignatureKind.IDENT
        match kind:
            case SignatureKind.IDENT:
                return f"{self.name}:{self.type}"
            case SignatureKind.ASSIGN:
                return f"{self.name}:{self.type}={self.signature.default}"
            case SignatureKind.STAR:
                return "*"
            case SignatureKind.ARGS:
                return f"*{self.name}"
            case SignatureKind.KEYWORDS:
                return f"**{self.name}"
        raise ValueError(f"unknown signature kind {kind!r}")


@dataclass(frozen=True)
class MemberDef:
    """A class member: a plain attribute, or a property getter or setter."""

    name: str
    type: TypeInfo
    doc: str = ""
    default: str | None = None

    @classmethod
    def from_info(cls, info: MemberInfo) -> MemberDef:
        return cls(name=info.name, type=info.type, doc=info.doc, default=info.default)

    def imports(self) -> frozenset[ModuleRef]:
        return self.type.imports

    def __str__(self) -> str:
        text = f"{INDENT}{self.name}: {self.type}"
        if self.default is not None:
            text += f" = {self.default}"
        return text + "\n" + write_docstring(self.doc, INDENT)

    def _accessor_doc(self) -> str:
        if self.default is None or self.default == "...":
            return self.doc
        return f"{self.doc}\n```python\ndefault = {self.default}\n```"

    def _render_accessor(self, header: str) -> str:
        doc = self._accessor_doc()
        if doc:
            return header + "\n" + write_docstring(doc, INDENT * 2)
        return header + " ...\n"

    def render_getter(self) -> str:
        """Render the member as a read-only property."""
        return self._render_accessor(
            f"{INDENT}@property\n{INDENT}def {self.name}(self) -> {self.type}:"
        )

    def render_setter(self) -> str:
        """Render the member as a property setter."""
        return self._render_accessor(
            f"{INDENT}@{self.name}.setter\n"
            f"{INDENT}def {self.name}(self, value: {self.type}) -> None:"
        )


@dataclass(frozen=True)
class VariableDef:
    """A module-level variable."""

    name: str
    type: TypeInfo

    @classmethod
    def from_info(cls, info: PyVariableInfo) -> VariableDef:
        return cls(name=info.name, type=info.type)

    def __str__(self) -> str:
        return f"{self.name}: {self.type}"


@dataclass(frozen=True)
class ErrorDef:
    """An exception class deriving from a native exception."""

    name: str
    base: str

    @classmethod
    def from_info(cls, info: PyErrorInfo) -> ErrorDef:
        return cls(name=info.name, base=info.base)

    def __str__(self) -> str:
        return f"class {self.name}({self.base}): ...\n"