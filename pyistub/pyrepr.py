"""Rendering Python values as source text for default values in stubs."""

from __future__ import annotations

import ast
import operator
from collections.abc import Callable, Mapping
from typing import Any

_SAFE_BUILTINS: dict[str, type] = {
    kind.__name__: kind
    for kind in (
        bool,
        int,
        float,
        complex,
        str,
        bytes,
        bytearray,
        tuple,
        list,
        dict,
        set,
        frozenset,
        range,
        slice,
    )
}

_UNARY: dict[type, Callable[[Any], Any]] = {
    ast.USub: operator.neg,
    ast.UAdd: operator.pos,
    ast.Not: operator.not_,
    ast.Invert: operator.invert,
}

_BINARY: dict[type, Callable[[Any, Any], Any]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
    ast.BitOr: operator.or_,
    ast.BitAnd: operator.and_,
}


class _Unsupported(Exception):
    """The expression uses a construct the evaluator does not handle."""


def _evaluate(node: ast.AST, names: Mapping[str, Any]) -> Any:
    match node:
        case ast.Expression(body=body):
            return _evaluate(body, names)
        case ast.Constant(value=value):
            return value
        case ast.Name(id=ident):
            if ident not in names:
                raise _Unsupported(ident)
            return names[ident]
        case ast.Attribute(value=value, attr=attr):
            if attr.startswith("_"):
                raise _Unsupported(attr)
            return getattr(_evaluate(value, names), attr)
        case ast.Tuple(elts=elts):
            return tuple(_evaluate(e, names) for e in elts)
        case ast.List(elts=elts):
            return [_evaluate(e, names) for e in elts]
        case ast.Set(elts=elts):
            return {_evaluate(e, names) for e in elts}
        case ast.Dict(keys=keys, values=values):
            if any(k is None for k in keys):
                raise _Unsupported("dict unpacking")
            return {
                _evaluate(k, names): _evaluate(v, names) for k, v in zip(keys, values)
            }
        case ast.UnaryOp(op=op, operand=operand):
            unary = _UNARY.get(type(op))
            if unary is None:
                raise _Unsupported(type(op).__name__)
            return unary(_evaluate(operand, names))
        case ast.BinOp(left=left, op=op, right=right):
            binary = _BINARY.get(type(op))
            if binary is None:
                raise _Unsupported(type(op).__name__)
            return binary(_evaluate(left, names), _evaluate(right, names))
        case ast.Call(func=func, args=args, keywords=keywords):
            if any(k.arg is None for k in keywords):
                raise _Unsupported("keyword unpacking")
            target = _evaluate(func, names)
            return target(
                *(_evaluate(a, names) for a in args),
                **{k.arg: _evaluate(k.value, names) for k in keywords},
            )
        case _:
            raise _Unsupported(type(node).__name__)


def all_builtin_types(obj: Any) -> bool:
    """Whether ``obj`` is built only from str, bool, int, float, None, dict, list and tuple."""
    if obj is None or isinstance(obj, (str, bool, int, float)):
        return True
    if isinstance(obj, dict):
        return all(all_builtin_types(k) and all_builtin_types(v) for k, v in obj.items())
    if isinstance(obj, (list, tuple)):
        return all(all_builtin_types(item) for item in obj)
    return False


def valid_external_repr(obj: Any) -> bool | None:
    """Whether evaluating ``repr(obj)`` gives back a value equal to ``obj``.

    Only the object's own type, by its name, and a few builtin types are
    visible while evaluating. Returns ``None`` when the repr cannot be
    evaluated or compared at all.
    """
    try:
        kind = type(obj)
        names = {**_SAFE_BUILTINS, kind.__name__: kind}
        tree = ast.parse(repr(obj), mode="eval")
        rebuilt = _evaluate(tree, names)
        return bool(rebuilt == obj)
    except Exception:
        return None


def fmt_py_obj(obj: Any) -> str:
    """Return ``repr(obj)`` when it is valid Python source for the value, else ``...``."""
    if all_builtin_types(obj) or valid_external_repr(obj):
        try:
            return repr(obj)
        except Exception:
            pass
    return "..."