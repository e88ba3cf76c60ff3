"""
Argument Resolver

Maps a runtime argument list onto a list of spec entries, producing
a dict of argument name -> value. This is what lets binding methods
accept flexible call signatures such as:

    binding.set(value)
    binding.set(subpath, value)

via

    resolve_args(args, '?subpath', 'value')

RULES:
    - Specs may switch between required and optional at most once.
      This is NOT checked. Lists that switch more than once give
      unspecified (but deterministic, non-crashing) results.
    - Optional arguments are matched in order, left to right.
      Use a predicate entry to allow skipping one optional argument
      in favour of a later one.
    - Leading optional specs are matched against the args that remain
      after the trailing required specs have taken theirs.
    - Nothing here raises for mismatched lengths. Unmatched specs are
      simply absent from the result.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, TypeVar

from bindutil.specs import (
    MISSING,
    ArgSpec,
    SpecEntry,
    SpecKind,
    classify_all,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def find_turning_point(items: Sequence[T], pred: Callable[[T], bool]) -> Optional[int]:
    """
    Index of the first item whose ``pred`` value differs from the first item's.

    Returns:
        The index (always >= 1), or None if every item agrees with the first
        (including empty and single-item sequences)
    """
    if not items:
        return None
    first = pred(items[0])
    for i in range(1, len(items)):
        if pred(items[i]) != first:
            return i
    return None


def rotate(items: Sequence[T], split_at: int) -> List[T]:
    """
    Return a new list: ``items[split_at:]`` reversed, then ``items[:split_at]``.

    A negative ``split_at`` counts from the end, as in ordinary slicing.
    The moved tail is reversed so that required specs pair with
    arguments counted from the end.

    Example:
        >>> rotate([1, 2, 3, 4], 1)
        [4, 3, 2, 1]
    """
    return list(reversed(items[split_at:])) + list(items[:split_at])


def _prepare(args: List[Any], specs: List[ArgSpec]) -> Tuple[List[ArgSpec], List[Any]]:
    """Reorder specs and args so that required specs are matched first."""
    if not specs or specs[0].is_required:
        return specs, args

    turning_point = find_turning_point(specs, lambda spec: spec.is_required)
    if turning_point is None:
        return specs, args

    # Required specs from the turning point take the trailing args
    split_at = len(args) - (len(specs) - turning_point)
    logger.debug(
        "Rotating specs at turning point %d, args at %d (%d specs, %d args)",
        turning_point, split_at, len(specs), len(args),
    )
    return rotate(specs, turning_point), rotate(args, split_at)


def resolve(args: Sequence[Any], specs: Sequence[SpecEntry]) -> Dict[str, Any]:
    """
    Resolve arguments against a spec list.

    Args:
        args: Runtime arguments (any ordered, indexable sequence)
        specs: Spec entries: 'name', '?name', callables or ArgSpec objects

    Returns:
        New dict of resolved name -> argument value, in match order.
        Names that were not matched are absent.

    Example:
        >>> resolve([1, 2], ['?a', '?b', 'c'])
        {'c': 2, 'a': 1}
    """
    result: Dict[str, Any] = {}
    if not specs:
        return result

    prepared_specs, prepared_args = _prepare(list(args), classify_all(specs))

    spec_index = 0
    arg_index = 0
    while spec_index < len(prepared_specs) and arg_index < len(prepared_args):
        spec = prepared_specs[spec_index]
        arg = prepared_args[arg_index]

        if spec.kind is SpecKind.REQUIRED:
            result[spec.name] = arg
            arg_index += 1
        else:
            name = spec.match(arg) if spec.kind is SpecKind.PREDICATE else spec.name
            if name:
                result[name] = arg
                arg_index += 1
            elif arg is MISSING:
                # An explicit placeholder still consumes and names its slot
                result[name or ""] = arg
                arg_index += 1

        spec_index += 1

    return result


def resolve_args(args: Sequence[Any], *specs: Any) -> Dict[str, Any]:
    """
    Resolve arguments against specs given as var-args or as a single list.

    Both of these are equivalent:

        resolve_args(args, '?subpath', 'value')
        resolve_args(args, ['?subpath', 'value'])

    See ``resolve`` for the matching rules.
    """
    if len(specs) == 1 and isinstance(specs[0], (list, tuple)):
        return resolve(args, specs[0])
    return resolve(args, specs)
