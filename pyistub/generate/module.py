"""A whole stub file for one Python module or submodule."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field

from ..types import ModuleRef
from .callables import FunctionDef
from .classes import ClassDef, EnumDef
from .members import ErrorDef, VariableDef

HEADER = (
    "# This file is automatically generated by pyistub\n"
    "# ruff: noqa: E501, F401\n"
    "\n"
)


@dataclass
class Module:
    """Everything that goes into one ``*.pyi`` file.

    ``name`` is the module's own dotted name; ``default_module_name`` is
    what an import of the default module resolves to.
    """

    name: str = ""
    default_module_name: str = ""
    classes: dict[Hashable, ClassDef] = field(default_factory=dict)
    enums: dict[Hashable, EnumDef] = field(default_factory=dict)
    functions: dict[str, list[FunctionDef]] = field(default_factory=dict)
    errors: dict[str, ErrorDef] = field(default_factory=dict)
    variables: dict[str, VariableDef] = field(default_factory=dict)
    submodules: set[str] = field(default_factory=set)

    def imports(self) -> set[ModuleRef]:
        """Modules needed by the classes and functions of this module."""
        imports: set[ModuleRef] = set()
        for class_def in self.classes.values():
            imports |= class_def.imports()
        for overloads in self.functions.values():
            for function in overloads:
                imports |= function.imports()
        return imports

    def _import_name(self, ref: ModuleRef) -> str:
        name = ref.get()
        return self.default_module_name if name is None else name

    def __str__(self) -> str:
        parts = [HEADER]
        imports = self.imports()
        if any(len(overloads) > 1 for overloads in self.functions.values()):
            imports.add(ModuleRef("typing"))
        for ref in sorted(imports):
            name = self._import_name(ref)
            if name != self.name:
                parts.append(f"import {name}\n")
        parts.extend(f"from . import {sub}\n" for sub in sorted(self.submodules))
        if self.enums:
            parts.append("from enum import Enum\n")
        parts.append("\n")

        parts.extend(f"{self.variables[key]}\n" for key in sorted(self.variables))
        parts.extend(
            str(c) for c in sorted(self.classes.values(), key=lambda c: c.name)
        )
        parts.extend(str(e) for e in sorted(self.enums.values(), key=lambda e: e.name))
        for key in sorted(self.functions):
            overloads = self.functions[key]
            overloaded = len(overloads) > 1
            for function in overloads:
                if overloaded:
                    parts.append("@typing.overload\n")
                parts.append(str(function))
        parts.extend(f"{self.errors[key]}\n" for key in sorted(self.errors))
        return "".join(parts)