"""Reading the ``[tool.maturin]`` settings of a ``pyproject.toml``."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


class PyProjectError(ValueError):
    """A ``pyproject.toml`` could not be used."""


def _table(data: dict[str, Any], key: str, where: str) -> dict[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict):
        raise PyProjectError(f"{where}{key} must be a table")
    return value


def _optional_str(data: dict[str, Any], key: str, where: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise PyProjectError(f"{where}{key} must be a string")
    return value


@dataclass(frozen=True)
class Maturin:
    """The ``[tool.maturin]`` table."""

    python_source: str | None = None
    module_name: str | None = None

    @classmethod
    def _from_table(cls, table: dict[str, Any]) -> Maturin:
        where = "tool.maturin."
        return cls(
            python_source=_optional_str(table, "python-source", where),
            module_name=_optional_str(table, "module-name", where),
        )


@dataclass(frozen=True)
class Tool:
    """The ``[tool]`` table."""

    maturin: Maturin | None = None

    @classmethod
    def _from_table(cls, table: dict[str, Any]) -> Tool:
        maturin = _table(table, "maturin", "tool.")
        return cls(maturin=Maturin._from_table(maturin) if maturin is not None else None)


@dataclass(frozen=True)
class Project:
    """The ``[project]`` table."""

    name: str

    @classmethod
    def _from_table(cls, table: dict[str, Any]) -> Project:
        name = table.get("name")
        if name is None:
            raise PyProjectError("missing field project.name")
        if not isinstance(name, str):
            raise PyProjectError("project.name must be a string")
        return cls(name=name)


@dataclass(frozen=True)
class PyProject:
    """The parts of a ``pyproject.toml`` needed for stub generation."""

    project: Project
    tool: Tool | None = None
    toml_path: Path = field(default_factory=Path)

    @classmethod
    def parse_toml(cls, path: str | Path) -> PyProject:
        """Read and parse the ``pyproject.toml`` at ``path``."""
        path = Path(path)
        if path.name != "pyproject.toml":
            raise PyProjectError(f"{path} is not a pyproject.toml")
        text = path.read_text(encoding="utf-8")
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as error:
            raise PyProjectError(f"{path}: {error}") from error
        project = _table(data, "project", "")
        if project is None:
            raise PyProjectError("missing field project")
        tool = _table(data, "tool", "")
        return cls(
            project=Project._from_table(project),
            tool=Tool._from_table(tool) if tool is not None else None,
            toml_path=path,
        )

    def _maturin(self) -> Maturin | None:
        return self.tool.maturin if self.tool is not None else None

    def module_name(self) -> str:
        """``tool.maturin.module-name`` if set, otherwise ``project.name``."""
        maturin = self._maturin()
        if maturin is not None and maturin.module_name is not None:
            return maturin.module_name
        return self.project.name

    def python_source(self) -> Path | None:
        """``tool.maturin.python-source`` relative to the file, if set.

        Its presence means the project mixes compiled and Python code.
        """
        maturin = self._maturin()
        if maturin is None or maturin.python_source is None:
            return None
        return self.toml_path.parent / maturin.python_source