import pytest

from pyistub.generate.stub_info import StubInfo
from pyistub.metadata import (
    ArgInfo,
    Inventory,
    MemberInfo,
    MethodInfo,
    PyClassInfo,
    PyEnumInfo,
    PyErrorInfo,
    PyFunctionInfo,
    PyMethodsInfo,
    PyVariableInfo,
)
from pyistub.pyproject import PyProjectError
from pyistub.types import TypeInfo


def _inventory():
    return Inventory(
        [
            PyClassInfo(struct_id="A", pyclass_name="A", doc="A class"),
            PyEnumInfo(enum_id="E", pyclass_name="E", variants=(("X", ""),)),
            PyMethodsInfo(
                struct_id="A",
                getters=(MemberInfo("size", TypeInfo.builtin("int")),),
                methods=(
                    MethodInfo("run", (ArgInfo("n", TypeInfo.builtin("int")),), TypeInfo.none()),
                ),
            ),
            PyMethodsInfo(
                struct_id="E",
                methods=(MethodInfo("label", (), TypeInfo.builtin("str")),),
            ),
            PyFunctionInfo(name="f", args=(), return_type=TypeInfo.none()),
            PyFunctionInfo(name="g", args=(), return_type=TypeInfo.none(), module="pkg.sub"),
            PyErrorInfo(name="Oops", module="pkg", base="PyValueError"),
            PyVariableInfo(name="LIMIT", module="pkg.sub", type=TypeInfo.builtin("int")),
        ]
    )


def test_gathers_into_modules(tmp_path):
    info = StubInfo.from_project_root("pkg", tmp_path, _inventory())
    assert list(info.modules) == ["pkg", "pkg.sub"]
    root = info.modules["pkg"]
    assert root.name == "pkg"
    assert root.submodules == {"sub"}
    cls = root.classes["A"]
    assert [g.name for g in cls.getters] == ["size"]
    assert list(cls.methods) == ["run"]
    assert [m.name for m in root.enums["E"].methods] == ["label"]
    assert set(root.errors) == {"Oops"}
    sub = info.modules["pkg.sub"]
    assert sub.default_module_name == "pkg"
    assert set(sub.variables) == {"LIMIT"}
    assert set(sub.functions) == {"g"}


def test_generate_writes_package_layout(tmp_path):
    info = StubInfo.from_project_root("pkg", tmp_path, _inventory())
    written = info.generate()
    assert written == [tmp_path / "pkg" / "__init__.pyi", tmp_path / "pkg" / "sub.pyi"]
    assert written[0].read_text(encoding="utf-8") == str(info.modules["pkg"])
    assert written[1].read_text(encoding="utf-8") == str(info.modules["pkg.sub"])


def test_dashes_become_underscores(tmp_path):
    inventory = Inventory([PyFunctionInfo(name="f", args=(), return_type=TypeInfo.none())])
    info = StubInfo.from_project_root("my-pkg", tmp_path, inventory)
    assert info.generate() == [tmp_path / "my_pkg.pyi"]
    assert (tmp_path / "my_pkg.pyi").exists()


def test_overloads_kept_in_order(tmp_path):
    first = PyFunctionInfo(name="f", args=(ArgInfo("a", TypeInfo.builtin("int")),), return_type=TypeInfo.none())
    second = PyFunctionInfo(name="f", args=(ArgInfo("a", TypeInfo.builtin("str")),), return_type=TypeInfo.none())
    info = StubInfo.from_project_root("m", tmp_path, Inventory([first, second]))
    overloads = info.modules["m"].functions["f"]
    assert [o.args[0].type for o in overloads] == [TypeInfo.builtin("int"), TypeInfo.builtin("str")]


def test_methods_for_unknown_struct_raise(tmp_path):
    inventory = Inventory([PyMethodsInfo(struct_id="missing")])
    with pytest.raises(LookupError):
        StubInfo.from_project_root("m", tmp_path, inventory)


def test_from_pyproject_uses_python_source(tmp_path):
    toml = tmp_path / "pyproject.toml"
    toml.write_text(
        '[project]\nname = "proj"\n\n[tool.maturin]\n'
        'python-source = "python"\nmodule-name = "proj._core"\n',
        encoding="utf-8",
    )
    inventory = Inventory([PyFunctionInfo(name="f", args=(), return_type=TypeInfo.none())])
    info = StubInfo.from_pyproject_toml(toml, inventory)
    assert info.python_root == tmp_path / "python"
    assert list(info.modules) == ["proj._core"]
    assert info.generate() == [tmp_path / "python" / "proj" / "_core.pyi"]


def test_from_pyproject_defaults_to_its_directory(tmp_path):
    toml = tmp_path / "pyproject.toml"
    toml.write_text('[project]\nname = "proj"\n', encoding="utf-8")
    info = StubInfo.from_pyproject_toml(toml)
    assert info.python_root == tmp_path
    assert info.modules == {}


def test_rejects_other_file_names(tmp_path):
    other = tmp_path / "setup.toml"
    other.write_text('[project]\nname = "proj"\n', encoding="utf-8")
    with pytest.raises(PyProjectError):
        StubInfo.from_pyproject_toml(other)