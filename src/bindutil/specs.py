"""
Argument Spec Entries

A call signature is described as an ordered list of spec entries.
Callers write them in a compact raw form:

    'value'                    required argument named "value"
    '?subpath'                 optional argument named "subpath"
    lambda arg: 'x' or None    checked optional argument

Raw entries are classified exactly once into the tagged variants below.
The resolver works on the variants only, never on raw strings or callables.

ARCHITECTURAL RULE:
    Spec entries are structure only.
    They do NOT match arguments themselves (belongs in resolver).
    They do NOT validate the shape of a spec list (belongs in analyzer).
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Union


OPTIONAL_MARKER = "?"


class _MissingType(Enum):
    """
    Type of the explicit "missing argument" placeholder.

    None is an ordinary argument value. MISSING is what a caller passes
    to say "this slot is deliberately left empty" while still occupying
    the position, e.g. ``set_value(binding, MISSING, 42)``.
    """
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _MissingType.MISSING


class SpecKind(Enum):
    """Kinds of spec entries."""
    REQUIRED = "required"
    OPTIONAL = "optional"
    PREDICATE = "predicate"


class ArgSpec(ABC):
    """
    Base class for all spec entries.

    Subclasses are immutable and carry a ``kind`` tag, so callers
    can branch on the tag instead of inspecting types.
    """

    kind: SpecKind

    @property
    def is_required(self) -> bool:
        return self.kind is SpecKind.REQUIRED


@dataclass(frozen=True)
class RequiredName(ArgSpec):
    """
    A required argument.

    The argument at the current position is always bound to ``name``,
    whatever its value.
    """

    name: str
    kind = SpecKind.REQUIRED


@dataclass(frozen=True)
class OptionalName(ArgSpec):
    """
    An optional argument, written as ``'?name'``.

    Optional arguments are matched in order, left to right. A plain
    optional name accepts any value, including None. An empty name
    (a bare ``'?'``) only consumes an explicit MISSING placeholder.
    """

    name: str
    kind = SpecKind.OPTIONAL


@dataclass(frozen=True)
class Predicate(ArgSpec):
    """
    A checked optional argument.

    ``func`` receives the candidate argument and returns the name to bind
    it under, or a falsy value to reject it. A rejected argument is
    offered to the next spec entry, which is how an optional slot can be
    skipped in favour of a later one.

    Example:
        Predicate(lambda arg: 'subpath' if can_represent_subpath(arg) else None)
    """

    func: Callable[[Any], Optional[str]]
    kind = SpecKind.PREDICATE

    def match(self, arg: Any) -> Optional[str]:
        return self.func(arg)


SpecEntry = Union[str, Callable[[Any], Optional[str]], ArgSpec]


def classify(entry: SpecEntry) -> ArgSpec:
    """
    Convert a raw spec entry into its tagged variant.

    Args:
        entry: 'name', '?name', a unary callable, or an ArgSpec

    Returns:
        RequiredName, OptionalName or Predicate

    Raises:
        TypeError: If the entry is none of the accepted forms
    """
    if isinstance(entry, ArgSpec):
        return entry
    if isinstance(entry, str):
        if entry.startswith(OPTIONAL_MARKER):
            return OptionalName(entry[len(OPTIONAL_MARKER):])
        return RequiredName(entry)
    if callable(entry):
        return Predicate(entry)
    raise TypeError(f"Unsupported spec entry type: {type(entry)}")


def classify_all(entries: Sequence[SpecEntry]) -> List[ArgSpec]:
    """Classify every entry of a spec list, preserving order."""
    return [classify(entry) for entry in entries]


def spec_name(spec: ArgSpec) -> Optional[str]:
    """Declared name of a spec entry (None for predicates)."""
    if isinstance(spec, (RequiredName, OptionalName)):
        return spec.name
    return None
