from pyistub.generate.callables import FunctionDef, MethodDef, variant_methods
from pyistub.generate.members import INDENT, Arg, write_docstring
from pyistub.metadata import (
    ArgInfo,
    MethodInfo,
    MethodType,
    PyComplexEnumInfo,
    PyFunctionInfo,
    VariantForm,
    VariantInfo,
)
from pyistub.types import ModuleRef, TypeInfo

INT = TypeInfo.builtin("int")


def test_method_documented_example():
    method = MethodDef(
        name="foo",
        args=(Arg("x", INT),),
        return_type=INT,
        doc="This is a foo method.",
        method_type=MethodType.INSTANCE,
    )
    expected = '''
    def foo(self, x:builtins.int) -> builtins.int:
        r"""
        This is a foo method.
        """
    '''
    assert str(method).strip() == expected.strip()


def test_static_method_has_no_receiver():
    method = MethodDef("f", (Arg("x", INT),), INT, method_type=MethodType.STATIC)
    lines = str(method).splitlines()
    assert lines[0] == INDENT + "@staticmethod"
    assert lines[1].startswith(f"{INDENT}def f({Arg('x', INT)})")


def test_class_method_decorated_with_cls():
    method = MethodDef("make", (), INT, method_type=MethodType.CLASS)
    lines = str(method).splitlines()
    assert lines[0] == INDENT + "@classmethod"
    assert lines[1].startswith(f"{INDENT}def make(cls)")


def test_new_has_cls_without_decorator():
    method = MethodDef("__new__", (Arg("x", INT),), INT, method_type=MethodType.NEW)
    text = str(method)
    assert "@classmethod" not in text
    assert text.startswith(f"{INDENT}def __new__(cls, {Arg('x', INT)})")


def test_method_without_doc_ends_with_ellipsis():
    text = str(MethodDef("f", (), TypeInfo.none()))
    assert text.endswith(" ...\n")
    assert text.count("\n") == 1


def test_method_doc_uses_double_indent():
    text = str(MethodDef("f", (), INT, doc="Doc."))
    assert text.endswith(write_docstring("Doc.", INDENT * 2))


def test_method_imports_are_union():
    method = MethodDef(
        "f",
        (Arg("p", TypeInfo.with_module("pathlib.Path", "pathlib")),),
        TypeInfo.any(),
    )
    assert method.imports() == frozenset({ModuleRef("pathlib"), ModuleRef("typing")})


def test_method_from_info():
    info = MethodInfo("f", (ArgInfo("x", INT),), INT, "d", MethodType.STATIC)
    method = MethodDef.from_info(info)
    assert method.args == (Arg("x", INT),)
    assert method.method_type is MethodType.STATIC
    assert method.doc == "d"


def test_function_without_doc():
    a, b = Arg("a", INT), Arg("b", TypeInfo.builtin("str"))
    text = str(FunctionDef("f", (a, b), TypeInfo.none()))
    assert text.startswith(f"def f({a}, {b}) -> None:")
    assert text.endswith(" ...\n\n")


def test_function_with_doc_and_blank_line():
    text = str(FunctionDef("f", (), INT, doc="Doc."))
    assert text == f"def f() -> {INT}:\n" + write_docstring("Doc.", INDENT) + "\n"


def test_function_from_info_and_imports():
    info = PyFunctionInfo("f", (ArgInfo("x", TypeInfo.any()),), INT, "", "pkg")
    func = FunctionDef.from_info(info)
    assert func.name == "f"
    assert func.imports() == frozenset({ModuleRef("builtins"), ModuleRef("typing")})


def _enum(*variants):
    return PyComplexEnumInfo("id", "Shape", variants=variants)


def test_variant_methods_unit():
    variant = VariantInfo("Empty", VariantForm.UNIT)
    methods = variant_methods(_enum(variant), variant)
    assert list(methods) == ["__new__"]
    (new,) = methods["__new__"]
    assert new.method_type is MethodType.NEW
    assert new.return_type == TypeInfo.unqualified("Shape.Empty")
    assert new.args == ()


def test_variant_methods_tuple():
    variant = VariantInfo("Pair", VariantForm.TUPLE, constr_args=(ArgInfo("_0", INT),))
    methods = variant_methods(_enum(variant), variant)
    assert list(methods) == ["__new__", "__len__", "__getitem__"]
    assert methods["__new__"][0].args == (Arg("_0", INT),)
    assert methods["__len__"][0].return_type == INT
    (getitem,) = methods["__getitem__"]
    assert getitem.args == (Arg("key", INT),)
    assert getitem.return_type == TypeInfo.any()


def test_variant_methods_struct_has_only_new():
    variant = VariantInfo("Point", VariantForm.STRUCT)
    assert list(variant_methods(_enum(variant), variant)) == ["__new__"]