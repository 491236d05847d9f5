"""Classification of raw instrumentation options.

An option is one of:
- a nested list/tuple of options
- a zero-argument constructible (a class, or a factory callable)
- an already-constructed instrumentation (truthy ``instrumentation_name``)

Anything else is classified as unrecognized; what happens to it is up to the
caller.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, List, Sequence, Tuple, Union

from otel_autoloader.errors import InvalidOptionError
from otel_autoloader.instrumentation.base import Instrumentation

InstrumentationOption = Union[
    Sequence["InstrumentationOption"],
    Callable[[], Instrumentation],
    Instrumentation,
]


class OptionKind(enum.Enum):
    NESTED = "nested"
    CONSTRUCTIBLE = "constructible"
    INSTANCE = "instance"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ClassifiedOption:
    kind: OptionKind
    value: Any


def _is_nested(option: Any) -> bool:
    return isinstance(option, (list, tuple))


def _is_instrumentation(option: Any) -> bool:
    # Classes may declare instrumentation_name as a class attribute; those
    # are constructibles, not instances.
    if isinstance(option, type):
        return False
    return bool(getattr(option, "instrumentation_name", None))


def _is_instrumentation_class(option: Any) -> bool:
    if isinstance(option, type):
        return True
    # Callable instances that already are instrumentations stay instances.
    return callable(option) and not _is_instrumentation(option)


def classify_option(option: Any) -> ClassifiedOption:
    if _is_nested(option):
        kind = OptionKind.NESTED
    elif _is_instrumentation_class(option):
        kind = OptionKind.CONSTRUCTIBLE
    elif _is_instrumentation(option):
        kind = OptionKind.INSTANCE
    else:
        kind = OptionKind.UNRECOGNIZED
    return ClassifiedOption(kind=kind, value=option)


def describe_path(path: Tuple[int, ...]) -> str:
    """Render an index path like ``(2, 0)`` as ``options[2][0]``."""
    return "options" + "".join(f"[{i}]" for i in path)


def flatten_options(options: Sequence[Any]) -> List[Tuple[Tuple[int, ...], ClassifiedOption]]:
    """
    Flatten ``options`` depth-first, left to right.

    Uses an explicit stack, so nesting depth isn't limited by the recursion
    limit. Returns ``(path, classified)`` pairs for every non-nested item,
    unrecognized ones included.

    Raises:
        InvalidOptionError: if a list contains itself, directly or not
    """
    leaves: List[Tuple[Tuple[int, ...], ClassifiedOption]] = []
    # Stack of (sequence, next index, path of that sequence)
    stack: List[Tuple[Sequence[Any], int, Tuple[int, ...]]] = [(options, 0, ())]
    while stack:
        seq, index, path = stack.pop()
        if index >= len(seq):
            continue
        stack.append((seq, index + 1, path))
        item_path = path + (index,)
        classified = classify_option(seq[index])
        if classified.kind is OptionKind.NESTED:
            if any(entry[0] is classified.value for entry in stack):
                raise InvalidOptionError(
                    "Option list contains itself",
                    details={"path": describe_path(item_path)},
                )
            stack.append((classified.value, 0, item_path))
        else:
            leaves.append((item_path, classified))
    return leaves
