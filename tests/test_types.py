import pytest

from pyistub.types import ModuleRef, StubType, TypeInfo


def test_module_ref_get_named_and_default():
    assert ModuleRef("typing").get() == "typing"
    assert ModuleRef().get() is None


def test_module_ref_ordering_puts_default_last():
    refs = [ModuleRef(), ModuleRef("typing"), ModuleRef("builtins")]
    assert sorted(refs) == [ModuleRef("builtins"), ModuleRef("typing"), ModuleRef()]


def test_module_ref_is_hashable_and_equal_by_name():
    assert {ModuleRef("os"), ModuleRef("os"), ModuleRef()} == {ModuleRef("os"), ModuleRef()}


def test_none_has_no_imports():
    info = TypeInfo.none()
    assert info.name == "None"
    assert info.imports == frozenset()


def test_any_imports_typing():
    info = TypeInfo.any()
    assert info.name == "typing.Any"
    assert info.imports == {ModuleRef("typing")}


def test_builtin():
    info = TypeInfo.builtin("int")
    assert info.name == "builtins.int"
    assert info.imports == {ModuleRef("builtins")}


def test_unqualified_keeps_name_and_imports_nothing():
    info = TypeInfo.unqualified("MyClass")
    assert info.name == "MyClass"
    assert not info.imports


def test_with_module_accepts_string():
    info = TypeInfo.with_module("pathlib.Path", "pathlib")
    assert info.name == "pathlib.Path"
    assert info.imports == {ModuleRef("pathlib")}


def test_with_module_rejects_other_types():
    with pytest.raises(TypeError):
        TypeInfo.with_module("pathlib.Path", 3)


def test_list_of():
    info = TypeInfo.list_of(TypeInfo.builtin("int"))
    assert info.name == "builtins.list[builtins.int]"
    assert info.imports == {ModuleRef("builtins")}


def test_set_of_merges_imports():
    info = TypeInfo.set_of(TypeInfo.any())
    assert info.name.startswith("builtins.set[")
    assert info.imports == {ModuleRef("builtins"), ModuleRef("typing")}


def test_dict_of_merges_imports():
    key = TypeInfo.builtin("int")
    value = TypeInfo.with_module("pathlib.Path", "pathlib")
    info = TypeInfo.dict_of(key, value)
    assert key.name in info.name and value.name in info.name
    assert info.imports == {ModuleRef("builtins"), ModuleRef("pathlib")}


def test_union_operator():
    info = TypeInfo.builtin("int") | TypeInfo.builtin("str")
    assert info.name == "builtins.int | builtins.str"
    assert info.imports == {ModuleRef("builtins")}


def test_union_operator_combines_imports():
    info = TypeInfo.builtin("str") | TypeInfo.with_module("os.PathLike", "os")
    assert info.imports == {ModuleRef("builtins"), ModuleRef("os")}


def test_str_is_name():
    assert str(TypeInfo.any()) == TypeInfo.any().name


def test_stub_type_input_defaults_to_output():
    class Number(StubType):
        @classmethod
        def type_output(cls):
            return TypeInfo.builtin("float")

    result = Number.type_input()
    assert result == TypeInfo.builtin("float")
    assert result.name == "builtins.float"


def test_stub_type_requires_output():
    with pytest.raises(TypeError):
        StubType()