# pyistub

`pyistub` writes Python typing stub files (`*.pyi`) for extension modules
from type metadata that you describe and collect in an inventory. Classes,
plain and structured enums, functions, methods, properties, exceptions and
module variables become stub files, one per (sub-)module, laid out under a
Python source root.

Python 3.11 or later is required. There are no third-party dependencies.

## Overview

1. **Describe types.** `pyistub.types.TypeInfo` is a type annotation plus the
   modules it needs imported. `pyistub.stub_types` builds annotations for
   common native types, and `lookup()` maps a Rust type expression such as
   `Vec<u32>` to one.
2. **Collect metadata.** Records from `pyistub.metadata` (`PyClassInfo`,
   `PyMethodsInfo`, `PyEnumInfo`, `PyComplexEnumInfo`, `PyFunctionInfo`,
   `PyErrorInfo`, `PyVariableInfo`) are submitted to an `Inventory`.
3. **Write stubs.** `pyistub.generate.stub_info.StubInfo` gathers the
   inventory into `Module`s and writes a `.pyi` file for each.

## Type annotations

```python
from pyistub.types import TypeInfo

annotation = TypeInfo.builtin("int") | TypeInfo.none()
str(annotation)       # 'builtins.int | None'
annotation.imports    # frozenset({ModuleRef(name='builtins')})
```

`TypeInfo` also has `any()`, `unqualified(name)`, `with_module(name, module)`,
`list_of(item)`, `set_of(item)` and `dict_of(key, value)`. A `ModuleRef` with
no name stands for the project's default module, resolved when stubs are
written.

`pyistub.stub_types` returns `StubType` subclasses whose `type_output()` is
the annotation for return values and `type_input()` the one for arguments:

```python
from pyistub.stub_types import lookup, mapping, builtin

lookup("Vec<u32>").type_output().name   # 'builtins.list[builtins.int]'
lookup("Vec<u32>").type_input().name    # 'typing.Sequence[builtins.int]'
lookup("Option<PathBuf>").type_output().name   # 'typing.Optional[pathlib.Path]'
mapping(builtin("str"), builtin("int")).type_input().name
# 'typing.Mapping[builtins.str, builtins.int]'
```

Other helpers: `unit`, `with_module`, `path`, `optional`, `sequence`,
`set_of`, `tuple_of` (1 to 9 items), `either`, `numpy_array`,
`untyped_array`, `numpy_dtype`, `py_any` and `py_native`. `lookup` raises
`ValueError` for expressions it cannot parse or types it does not know.

## Metadata

```python
from pyistub.metadata import (
    ArgInfo, Inventory, MemberInfo, MethodInfo, MethodType,
    PyClassInfo, PyFunctionInfo, PyMethodsInfo, PyErrorInfo,
    SignatureArg, SignatureKind,
)
from pyistub.stub_types import lookup

inventory = Inventory()
inventory.submit(PyClassInfo(
    struct_id="MyClass",
    pyclass_name="MyClass",
    module="my_module",
    doc="Docstring used in Python",
    getters=(MemberInfo("name", lookup("String").type_output(), "Name docstring"),),
))
inventory.submit(PyMethodsInfo(
    struct_id="MyClass",
    methods=(MethodInfo("foo", (ArgInfo("x", lookup("i64").type_input()),),
                        lookup("i64").type_output(), "This is a foo method."),),
))
inventory.submit(PyFunctionInfo(
    name="total",
    args=(ArgInfo("values", lookup("Vec<u32>").type_input()),
          ArgInfo("start", lookup("u32").type_input(),
                  SignatureArg(SignatureKind.ASSIGN, "0"))),
    return_type=lookup("u32").type_output(),
    module="my_module",
))
inventory.submit(PyErrorInfo(name="MyError", module="my_module", base="PyValueError"))
```

`struct_id` and `enum_id` can be any hashable value; a `PyMethodsInfo` is
attached to the class or enum with the same id. `PyErrorInfo.base` must name
a native Python exception, plain or with a `Py` prefix
(see `pyistub.exceptions`), or `ValueError` is raised. `Inventory.submit`
raises `TypeError` for anything that is not a metadata record.

## Writing stub files

```python
from pyistub.generate.stub_info import StubInfo

stubs = StubInfo.from_project_root("my_module", "python", inventory)
written = stubs.generate()   # list of paths written
```

or, reading the settings from a `pyproject.toml`:

```python
stubs = StubInfo.from_pyproject_toml("pyproject.toml", inventory)
```

There the default module name is `tool.maturin.module-name` if set, otherwise
`project.name`; stubs go under `tool.maturin.python-source` (relative to the
file) if set, otherwise next to the `pyproject.toml`. A path not named
`pyproject.toml`, or a file without `project.name`, raises
`pyistub.pyproject.PyProjectError`.

Each module is written to `<root>/<dotted/path>.pyi`; a module with
submodules goes to `<root>/<dotted/path>/__init__.pyi` and imports them with
`from . import ...`. Dashes in module names become underscores. Methods whose
class or enum was never submitted raise `LookupError` while gathering.

The pieces of a stub can also be rendered on their own: every definition in
`pyistub.generate` (`Arg`, `MemberDef`, `VariableDef`, `ErrorDef`,
`MethodDef`, `FunctionDef`, `ClassDef`, `EnumDef`, `Module`) gives its stub
text through `str()`, and `MemberDef` has `render_getter()` and
`render_setter()` for properties.

## Default values

`pyistub.pyrepr.fmt_py_obj(obj)` renders a default value: strings, numbers,
booleans, `None` and dicts, lists and tuples of them use their `repr`, as do
objects whose `repr` evaluates back to an equal object (checked by a small
evaluator that only sees the object's own type and a few builtins, never
`eval`). Anything else becomes `...`.

## What it does not do

`pyistub` does not inspect compiled modules: the metadata must be submitted
to an `Inventory` by your own code. It has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```