"""Names of the native Python exception types usable as exception bases."""

from __future__ import annotations

NATIVE_EXCEPTIONS: frozenset[str] = frozenset(
    {
        "ArithmeticError",
        "AssertionError",
        "AttributeError",
        "BaseException",
        "BlockingIOError",
        "BrokenPipeError",
        "BufferError",
        "BytesWarning",
        "ChildProcessError",
        "ConnectionAbortedError",
        "ConnectionError",
        "ConnectionRefusedError",
        "ConnectionResetError",
        "DeprecationWarning",
        "EOFError",
        "EnvironmentError",
        "Exception",
        "FileExistsError",
        "FileNotFoundError",
        "FloatingPointError",
        "FutureWarning",
        "GeneratorExit",
        "IOError",
        "ImportError",
        "ImportWarning",
        "IndexError",
        "InterruptedError",
        "IsADirectoryError",
        "KeyError",
        "KeyboardInterrupt",
        "LookupError",
        "MemoryError",
        "ModuleNotFoundError",
        "NameError",
        "NotADirectoryError",
        "NotImplementedError",
        "OSError",
        "OverflowError",
        "PendingDeprecationWarning",
        "PermissionError",
        "ProcessLookupError",
        "RecursionError",
        "ReferenceError",
        "ResourceWarning",
        "RuntimeError",
        "RuntimeWarning",
        "StopAsyncIteration",
        "StopIteration",
        "SyntaxError",
        "SyntaxWarning",
        "SystemError",
        "SystemExit",
        "TimeoutError",
        "TypeError",
        "UnboundLocalError",
        "UnicodeDecodeError",
        "UnicodeEncodeError",
        "UnicodeError",
        "UnicodeTranslateError",
        "UnicodeWarning",
        "UserWarning",
        "ValueError",
        "Warning",
        "ZeroDivisionError",
    }
)

_BINDING_PREFIX = "Py"


def _strip_prefix(name: str) -> str:
    if name.startswith(_BINDING_PREFIX) and name[len(_BINDING_PREFIX):] in NATIVE_EXCEPTIONS:
        return name[len(_BINDING_PREFIX):]
    return name


def is_native_exception(name: str) -> bool:
    """Whether ``name`` (plain or ``Py``-prefixed) names a native exception."""
    return _strip_prefix(name) in NATIVE_EXCEPTIONS


def native_exception_name(name: str) -> str:
    """Return the Python-side name of a native exception.

    Accepts both the plain name (``ValueError``) and the binding name
    (``PyValueError``). Raises ``ValueError`` for anything else.
    """
    plain = _strip_prefix(name)
    if plain not in NATIVE_EXCEPTIONS:
        raise ValueError(f"{name!r} is not a native Python exception")
    return plain