"""Stub text for methods and module-level functions."""

from __future__ import annotations

from dataclasses import dataclass

from ..metadata import (
    MethodInfo,
    MethodType,
    PyComplexEnumInfo,
    PyFunctionInfo,
    VariantForm,
    VariantInfo,
)
from ..types import ModuleRef, TypeInfo
from .members import INDENT, Arg, write_docstring


def _collect_imports(return_type: TypeInfo, args: tuple[Arg, ...]) -> frozenset[ModuleRef]:
    return return_type.imports.union(*(arg.imports() for arg in args))


@dataclass(frozen=True)
class MethodDef:
    """A method inside a class body."""

    name: str
    args: tuple[Arg, ...]
    return_type: TypeInfo
    doc: str = ""
    method_type: MethodType = MethodType.INSTANCE

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def from_info(cls, info: MethodInfo) -> MethodDef:
        return cls(
            name=info.name,
            args=tuple(Arg.from_info(a) for a in info.args),
            return_type=info.return_type,
            doc=info.doc,
            method_type=info.method_type,
        )

    def imports(self) -> frozenset[ModuleRef]:
        return _collect_imports(self.return_type, self.args)

    def __str__(self) -> str:
        decorator = ""
        params = [str(arg) for arg in self.args]
        match self.method_type:
            case MethodType.STATIC:
                decorator = f"{INDENT}@staticmethod\n"
            case MethodType.CLASS:
                decorator = f"{INDENT}@classmethod\n"
                params.insert(0, "cls")
            case MethodType.NEW:
                params.insert(0, "cls")
            case MethodType.INSTANCE:
                params.insert(0, "self")
        header = (
            f"{decorator}{INDENT}def {self.name}({', '.join(params)}) "
            f"-> {self.return_type}:"
        )
        if self.doc:
            return header + "\n" + write_docstring(self.doc, INDENT * 2)
        return header + " ...\n"


@dataclass(frozen=True)
class FunctionDef:
    """A module-level function."""

    name: str
    args: tuple[Arg, ...]
    return_type: TypeInfo
    doc: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))

    @classmethod
    def from_info(cls, info: PyFunctionInfo) -> FunctionDef:
        return cls(
            name=info.name,
            args=tuple(Arg.from_info(a) for a in info.args),
            return_type=info.return_type,
            doc=info.doc,
        )

    def imports(self) -> frozenset[ModuleRef]:
        return _collect_imports(self.return_type, self.args)

    def __str__(self) -> str:
        header = (
            f"def {self.name}({', '.join(str(arg) for arg in self.args)}) "
            f"-> {self.return_type}:"
        )
        if self.doc:
            body = "\n" + write_docstring(self.doc, INDENT)
        else:
            body = " ...\n"
        return header + body + "\n"


def variant_methods(
    enum_info: PyComplexEnumInfo, info: VariantInfo
) -> dict[str, list[MethodDef]]:
    """The methods every variant class of a structured enum provides."""
    full_name = f"{enum_info.pyclass_name}.{info.pyclass_name}"
    methods: dict[str, list[MethodDef]] = {
        "__new__": [
            MethodDef(
                name="__new__",
                args=tuple(Arg.from_info(a) for a in info.constr_args),
                return_type=TypeInfo.unqualified(full_name),
                method_type=MethodType.NEW,
            )
        ]
    }
    if info.form is VariantForm.TUPLE:
        methods["__len__"] = [
            MethodDef(name="__len__", args=(), return_type=TypeInfo.builtin("int"))
        ]
        methods["__getitem__"] = [
            MethodDef(
                name="__getitem__",
                args=(Arg("key", TypeInfo.builtin("int")),),
                return_type=TypeInfo.any(),
            )
        ]
    return methods