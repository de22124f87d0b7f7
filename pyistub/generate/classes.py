"""Stub text for classes, structured enums and plain enums."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..metadata import PyClassInfo, PyComplexEnumInfo, PyEnumInfo, VariantInfo
from ..types import ModuleRef, TypeInfo
from .callables import MethodDef, variant_methods
from .members import INDENT, MemberDef, write_docstring


def _lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


@dataclass
class ClassDef:
    """A Python class, possibly with nested variant classes."""

    name: str
    doc: str = ""
    attrs: list[MemberDef] = field(default_factory=list)
    getters: list[MemberDef] = field(default_factory=list)
    setters: list[MemberDef] = field(default_factory=list)
    methods: dict[str, list[MethodDef]] = field(default_factory=dict)
    bases: list[TypeInfo] = field(default_factory=list)
    classes: list[ClassDef] = field(default_factory=list)
    match_args: list[str] | None = None

    @classmethod
    def from_class_info(cls, info: PyClassInfo) -> ClassDef:
        return cls(
            name=info.pyclass_name,
            doc=info.doc,
            getters=[MemberDef.from_info(m) for m in info.getters],
            setters=[MemberDef.from_info(m) for m in info.setters],
            bases=list(info.bases),
        )

    @classmethod
    def from_complex_enum(cls, info: PyComplexEnumInfo) -> ClassDef:
        return cls(
            name=info.pyclass_name,
            doc=info.doc,
            classes=[cls.from_variant(info, v) for v in info.variants],
        )

    @classmethod
    def from_variant(cls, enum_info: PyComplexEnumInfo, info: VariantInfo) -> ClassDef:
        return cls(
            name=info.pyclass_name,
            doc=info.doc,
            getters=[MemberDef.from_info(f) for f in info.fields],
            methods=variant_methods(enum_info, info),
            bases=[TypeInfo.unqualified(enum_info.pyclass_name)],
            match_args=[f.name for f in info.fields],
        )

    def imports(self) -> set[ModuleRef]:
        imports: set[ModuleRef] = set()
        for base in self.bases:
            imports |= base.imports
        for member in (*self.attrs, *self.getters, *self.setters):
            imports |= member.imports()
        for overloads in self.methods.values():
            if len(overloads) > 1:
                imports.add(ModuleRef("typing"))
            for method in overloads:
                imports |= method.imports()
        for nested in self.classes:
            imports |= nested.imports()
        return imports

    def __str__(self) -> str:
        bases = f"({', '.join(b.name for b in self.bases)})" if self.bases else ""
        parts = [f"class {self.name}{bases}:\n", write_docstring(self.doc.strip(), INDENT)]
        if self.match_args is not None:
            names = ", ".join(f'"{a}"' for a in self.match_args) if self.match_args else "()"
            parts.append(f"{INDENT}__match_args__ = ({names},)\n")
        parts.extend(str(attr) for attr in self.attrs)
        parts.extend(getter.render_getter() for getter in self.getters)
        parts.extend(setter.render_setter() for setter in self.setters)
        for overloads in self.methods.values():
            overloaded = len(overloads) > 1
            for method in overloads:
                if overloaded:
                    parts.append(f"{INDENT}@typing.overload\n")
                parts.append(str(method))
        for nested in self.classes:
            parts.extend(f"{INDENT}{line}\n" for line in _lines(str(nested)))
        if not (self.attrs or self.getters or self.setters or self.methods):
            parts.append(f"{INDENT}...\n")
        parts.append("\n")
        return "".join(parts)


@dataclass
class EnumDef:
    """A plain Python enum."""

    name: str
    doc: str = ""
    variants: tuple[tuple[str, str], ...] = ()
    methods: list[MethodDef] = field(default_factory=list)
    attrs: list[MemberDef] = field(default_factory=list)
    getters: list[MemberDef] = field(default_factory=list)
    setters: list[MemberDef] = field(default_factory=list)

    @classmethod
    def from_info(cls, info: PyEnumInfo) -> EnumDef:
        return cls(name=info.pyclass_name, doc=info.doc, variants=tuple(info.variants))

    def __str__(self) -> str:
        parts = [f"class {self.name}(Enum):\n", write_docstring(self.doc, INDENT)]
        for variant, variant_doc in self.variants:
            parts.append(f"{INDENT}{variant} = ...\n")
            parts.append(write_docstring(variant_doc, INDENT))
        if self.attrs or self.getters or self.setters or self.methods:
            parts.append("\n")
            parts.extend(str(attr) for attr in self.attrs)
            parts.extend(getter.render_getter() for getter in self.getters)
            parts.extend(setter.render_setter() for setter in self.setters)
            parts.extend(str(method) for method in self.methods)
        parts.append("\n")
        return "".join(parts)