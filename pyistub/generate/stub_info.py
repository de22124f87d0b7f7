"""Gathering submitted metadata into modules and writing the stub files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ..metadata import (
    Inventory,
    PyClassInfo,
    PyComplexEnumInfo,
    PyEnumInfo,
    PyErrorInfo,
    PyFunctionInfo,
    PyMethodsInfo,
    PyVariableInfo,
)
from ..pyproject import PyProject
from .callables import FunctionDef, MethodDef
from .classes import ClassDef, EnumDef
from .members import ErrorDef, MemberDef, VariableDef
from .module import Module

logger = logging.getLogger(__name__)


@dataclass
class StubInfo:
    """All modules of a project and the directory their stubs go under."""

    modules: dict[str, Module] = field(default_factory=dict)
    python_root: Path = field(default_factory=Path)

    @classmethod
    def from_pyproject_toml(
        cls, path: str | Path, inventory: Inventory | None = None
    ) -> StubInfo:
        """Gather ``inventory`` using the settings of a ``pyproject.toml``.

        Stubs go under ``tool.maturin.python-source`` when it is set, and
        otherwise next to the ``pyproject.toml``.
        """
        pyproject = PyProject.parse_toml(path)
        root = pyproject.python_source()
        if root is None:
            root = Path(path).parent
        return cls.from_project_root(pyproject.module_name(), root, inventory)

    @classmethod
    def from_project_root(
        cls,
        default_module_name: str,
        project_root: str | Path,
        inventory: Inventory | None = None,
    ) -> StubInfo:
        """Gather ``inventory`` with an explicit default module and root."""
        builder = _Builder(default_module_name, Path(project_root))
        return builder.build(inventory if inventory is not None else Inventory())

    def generate(self) -> list[Path]:
        """Write one stub file per module and return the paths written.

        A module with submodules becomes a package ``__init__.pyi``.
        """
        written = []
        for name, module in self.modules.items():
            path = name.replace("-", "_").replace(".", "/")
            if module.submodules:
                dest = self.python_root / path / "__init__.pyi"
            else:
                dest = self.python_root / f"{path}.pyi"
            dest.parent.mkdir(parents=True, exist_ok=True)
            dest.write_text(str(module), encoding="utf-8")
            logger.info("Generate stub file of a module `%s` at %s", name, dest)
            written.append(dest)
        return written


class _Builder:
    def __init__(self, default_module_name: str, python_root: Path) -> None:
        self._modules: dict[str, Module] = {}
        self._default = default_module_name
        self._root = python_root

    def _module(self, name: str | None) -> Module:
        name = self._default if name is None else name
        module = self._modules.setdefault(name, Module())
        module.name = name
        module.default_module_name = self._default
        return module

    def _register_submodules(self) -> None:
        for name in list(self._modules):
            *parents, child = name.split(".")
            if not parents:
                continue
            parent = self._modules.get(".".join(parents))
            if parent is not None:
                parent.submodules.add(child)

    def _add_class(self, info: PyClassInfo) -> None:
        self._module(info.module).classes[info.struct_id] = ClassDef.from_class_info(info)

    def _add_complex_enum(self, info: PyComplexEnumInfo) -> None:
        self._module(info.module).classes[info.enum_id] = ClassDef.from_complex_enum(info)

    def _add_enum(self, info: PyEnumInfo) -> None:
        self._module(info.module).enums[info.enum_id] = EnumDef.from_info(info)

    def _add_function(self, info: PyFunctionInfo) -> None:
        functions = self._module(info.module).functions
        functions.setdefault(info.name, []).append(FunctionDef.from_info(info))

    def _add_error(self, info: PyErrorInfo) -> None:
        self._module(info.module).errors[info.name] = ErrorDef.from_info(info)

    def _add_variable(self, info: PyVariableInfo) -> None:
        self._module(info.module).variables[info.name] = VariableDef.from_info(info)

    def _add_methods(self, info: PyMethodsInfo) -> None:
        for name in sorted(self._modules):
            module = self._modules[name]
            target = module.classes.get(info.struct_id)
            if target is None:
                target = module.enums.get(info.struct_id)
            if target is None:
                continue
            target.attrs.extend(MemberDef.from_info(m) for m in info.attrs)
            target.getters.extend(MemberDef.from_info(m) for m in info.getters)
            target.setters.extend(MemberDef.from_info(m) for m in info.setters)
            if isinstance(target, ClassDef):
                for method in info.methods:
                    target.methods.setdefault(method.name, []).append(
                        MethodDef.from_info(method)
                    )
            else:
                target.methods.extend(MethodDef.from_info(m) for m in info.methods)
            return
        raise LookupError(f"Missing struct_id/enum_id = {info.struct_id!r}")

    def build(self, inventory: Inventory) -> StubInfo:
        for info in inventory.of_kind(PyClassInfo):
            self._add_class(info)
        for info in inventory.of_kind(PyComplexEnumInfo):
            self._add_complex_enum(info)
        for info in inventory.of_kind(PyEnumInfo):
            self._add_enum(info)
        for info in inventory.of_kind(PyFunctionInfo):
            self._add_function(info)
        for info in inventory.of_kind(PyErrorInfo):
            self._add_error(info)
        for info in inventory.of_kind(PyVariableInfo):
            self._add_variable(info)
        for info in inventory.of_kind(PyMethodsInfo):
            self._add_methods(info)
        self._register_submodules()
        modules = {name: self._modules[name] for name in sorted(self._modules)}
        return StubInfo(modules=modules, python_root=self._root)