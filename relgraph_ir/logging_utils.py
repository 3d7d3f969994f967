from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 6
_repr.maxtuple = 6
_repr.maxdict = 6


def summarize(value: Any, *, max_items: int = 4, max_length: int = 300) -> str:
    """Short, bounded text for *value* suitable for DEBUG call tracing.

    Position maps and primitive lists can be large; only their first few
    entries are rendered, followed by the total count.
    """

    if isinstance(value, np.ndarray):
        return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"

    if isinstance(value, float):
        return f"{value:.6g}"

    if isinstance(value, dict):
        shown = [
            f"{summarize(key)}: {summarize(val)}"
            for key, val in list(value.items())[:max_items]
        ]
        if len(value) > max_items:
            shown.append(f"... ({len(value)} total)")
        return "{" + ", ".join(shown) + "}"

    if isinstance(value, list):
        shown = [summarize(item) for item in value[:max_items]]
        if len(value) > max_items:
            shown.append(f"... ({len(value)} total)")
        return "[" + ", ".join(shown) + "]"

    if isinstance(value, tuple) and len(value) <= max_items:
        return "(" + ", ".join(summarize(item) for item in value) + ")"

    try:
        rendered = _repr.repr(value)
    except Exception as exc:  # pragma: no cover - broken __repr__
        rendered = f"<repr-error {exc!r}>"
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(summarize(arg) for arg in args) + "]")
    if kwargs:
        parts.append(
            "kwargs={" + ", ".join(f"{key}={summarize(val)}" for key, val in kwargs.items()) + "}"
        )
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that logs entry, exit and failures at DEBUG level."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            enabled = logger.isEnabledFor(logging.DEBUG)
            if enabled:
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if enabled:
                    logger.exception("Exception in %s", qualname)
                raise
            if enabled:
                if log_result:
                    logger.debug("Exiting %s -> %s", qualname, summarize(result))
                else:
                    logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public module-level functions of *namespace* with call tracing.

    Private helpers (leading underscore) and classes are left alone.
    """

    module_name = namespace.get("__name__")
    if not isinstance(module_name, str):  # pragma: no cover
        module_name = None
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or [])

    for attr, value in list(namespace.items()):
        if attr in skip_set or attr.startswith("_"):
            continue
        if inspect.isfunction(value) and getattr(value, "__module__", None) == module_name:
            namespace[attr] = debug_log_call(logger, name=attr)(value)


__all__ = ["summarize", "debug_log_call", "apply_debug_logging"]
