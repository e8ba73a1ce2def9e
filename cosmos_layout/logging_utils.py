from __future__ import annotations

import dataclasses
import inspect
import logging
import reprlib
import time
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, Tuple, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxdict = 10
_repr.maxlist = 10
_repr.maxtuple = 10
_repr.maxset = 10


def _sequence_brackets(value: Sequence[Any]) -> Tuple[str, str]:
    if isinstance(value, tuple):
        return "(", ")"
    if isinstance(value, set):
        return "{", "}"
    if isinstance(value, frozenset):
        return "frozenset({", "})"
    return "[", "]"


def _summarize_array(value: np.ndarray, max_items: int) -> str:
    size = int(value.size)
    parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})", f"size={size}"]
    if size == 0:
        return ", ".join(parts)
    if size <= max_items:
        return ", ".join(parts + [f"values={_repr.repr(value.tolist())}"])
    return ", ".join(parts + [f"min={float(value.min()):.6g}", f"max={float(value.max()):.6g}"])


def safe_repr(value: Any, *, max_items: int = 5, max_length: int = 400) -> str:
    """Bounded ``repr`` for log lines: arrays are summarised and long layouts truncated."""

    if isinstance(value, np.ndarray):
        return _summarize_array(value, max_items)

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = []
        for idx, f in enumerate(dataclasses.fields(value)):
            if idx >= max_items:
                fields.append("...")
                break
            fields.append(f"{f.name}={safe_repr(getattr(value, f.name), max_items=max_items)}")
        return f"{type(value).__name__}({', '.join(fields)})"

    if isinstance(value, dict):
        items = []
        for idx, (key, val) in enumerate(value.items()):
            if idx >= max_items:
                items.append("...")
                break
            items.append(f"{safe_repr(key)}: {safe_repr(val)}")
        return "{" + ", ".join(items) + "}"

    if isinstance(value, (list, tuple, set, frozenset)):
        open_br, close_br = _sequence_brackets(value)  # type: ignore[arg-type]
        items = []
        for idx, item in enumerate(value):
            if idx >= max_items:
                items.append(f"... ({len(value)} total)")
                break
            items.append(safe_repr(item, max_items=max_items))
        return f"{open_br}{', '.join(items)}{close_br}"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _is_record(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def describe(value: Any) -> str:
    """Compact description of a layout value for trace lines.

    Sequences of layout records collapse to a count per record type and
    containers such as ``NeuralNetwork`` report the size of each collection;
    everything else falls back to :func:`safe_repr`.
    """

    if isinstance(value, (list, tuple)) and value and all(_is_record(item) for item in value):
        kinds = sorted({type(item).__name__ for item in value})
        return f"{len(value)} {'/'.join(kinds)} record(s)"

    if _is_record(value):
        members = [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]
        if members and all(isinstance(member, (list, tuple)) for _, member in members):
            sizes = ", ".join(f"{field_name}={len(member)}" for field_name, member in members)
            return f"{type(value).__name__}({sizes})"

    return safe_repr(value)


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    rendered = [describe(arg) for arg in args]
    rendered.extend(f"{key}={describe(value)}" for key, value in kwargs.items())
    return ", ".join(rendered) if rendered else "no arguments"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Trace each call of the decorated generator at DEBUG level.

    One line is logged on entry with the arguments and one on exit with the
    elapsed time and, when ``log_result`` is set, a :func:`describe` of the
    result.  Errors are logged and re-raised unchanged.
    """

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        label = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)

            logger.debug("Entering %s (%s)", label, _format_arguments(args, kwargs))
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                logger.debug("%s raised %s: %s", label, type(exc).__name__, exc)
                raise
            elapsed_ms = (time.perf_counter() - started) * 1000.0
            if log_result:
                logger.debug("Exiting %s after %.2f ms -> %s", label, elapsed_ms, describe(result))
            else:
                logger.debug("Exiting %s after %.2f ms", label, elapsed_ms)
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
    """Wrap the module-level functions of ``namespace`` with verbose DEBUG logging."""

    module_name = namespace.get("__name__")
    if not isinstance(module_name, str):
        module_name = None
    logger = logger or logging.getLogger(module_name or __name__)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set:
            continue
        if inspect.isfunction(value) and getattr(value, "__module__", None) == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Verbose debug logging enabled for %s", module_name or "<unknown module>")
