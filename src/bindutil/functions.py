"""
Generic helper functions used across the binding library.

Small, stateless, side-effect-free. Nothing here knows about bindings
or components beyond the ``comp(props, children)`` calling convention
used by ``papply``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, List, MutableMapping, Optional, Sequence

from bindutil.specs import MISSING


def identity(x: Any) -> Any:
    return x


def not_(x: Any) -> bool:
    return not x


def constantly(x: Any) -> Callable[..., Any]:
    """Create a function that ignores its arguments and always returns ``x``."""
    def constant(*args, **kwargs):
        return x
    return constant


def after_complete(f: Callable[[], Any], cont: Callable[[], Any]) -> None:
    """
    Execute ``f``, then ``cont``.

    If ``f`` returns a future-like object (anything with ``add_done_callback``,
    e.g. ``concurrent.futures.Future`` or ``asyncio.Future``), ``cont`` runs
    when it completes, whether it succeeded or failed.
    """
    result = f()
    add_done_callback = getattr(result, "add_done_callback", None)
    if callable(add_done_callback):
        add_done_callback(lambda _: cont())
    else:
        cont()


def is_undefined_or_null(x: Any) -> bool:
    return x is None or x is MISSING


def starts_with(s1: str, s2: str) -> bool:
    return s1.startswith(s2)


def to_string(x: Any) -> str:
    """
    Render a value for messages and debugging.

    Examples:
        MISSING      -> undefined
        None         -> null
        "abc"        -> "abc" (quoted)
        [1, 2]       -> [1, 2]
    """
    if x is MISSING:
        return "undefined"
    if x is None:
        return "null"
    if isinstance(x, str):
        return f'"{x}"'
    if isinstance(x, (list, tuple)):
        return "[" + ", ".join(str(item) for item in x) + "]"
    return str(x)


def equals(x: Any, y: Any) -> bool:
    """
    Check if arguments are equal.

    Identity is checked first. If ``x`` defines an ``equals`` method it
    decides, otherwise ``==`` is used.
    """
    if x is y:
        return True
    custom = getattr(x, "equals", None)
    if callable(custom):
        return bool(custom(y))
    return x == y


def get_property_values(obj: Any) -> List[Any]:
    """Values of a mapping, or of an object's attributes, in definition order."""
    if isinstance(obj, Mapping):
        return list(obj.values())
    return list(vars(obj).values())


def find(items: Sequence[Any], pred: Callable[[Any, int, Sequence[Any]], Any]) -> Any:
    """
    Find the first element satisfying the predicate.

    Args:
        items: Sequence to search
        pred: Called as pred(value, index, items)

    Returns:
        The first matching value, or None
    """
    for i, value in enumerate(items):
        if pred(value, i, items):
            return value
    return None


def can_represent_subpath(x: Any) -> bool:
    """Check if argument can be a binding subpath (string, number or path list)."""
    if isinstance(x, bool):
        return False
    return isinstance(x, (str, int, float, list, tuple))


def shallow_merge(source: Mapping, dest: MutableMapping) -> MutableMapping:
    """Copy top-level keys of ``source`` into ``dest`` and return ``dest``."""
    for key, value in source.items():
        dest[key] = value
    return dest


class PartiallyApplied:
    """
    A component constructor with some props already applied.

    Calling it with a props mapping merges those props over the applied
    ones. Calling it with no props (or empty props) uses the applied
    props as they are. Any further positional arguments become the
    children list.
    """

    def __init__(self, comp: Callable[[Any, Optional[List[Any]]], Any], props: Optional[Mapping]):
        self.comp = comp
        self.props = props

    def __call__(self, props: Optional[Mapping] = None, *children: Any) -> Any:
        effective_children = list(children) if children else None
        if props:
            if self.props:
                effective_props: Dict[str, Any] = {}
                shallow_merge(self.props, effective_props)
                shallow_merge(props, effective_props)
            else:
                effective_props = props
            return self.comp(effective_props, effective_children)
        return self.comp(self.props, effective_children)

    def __repr__(self) -> str:
        return f"PartiallyApplied({self.comp!r}, {self.props!r})"


def papply(comp: Callable[..., Any], props: Mapping, override: bool = True) -> PartiallyApplied:
    """
    Partially apply a component constructor.

    Args:
        comp: Component constructor called as comp(props, children), or
            a PartiallyApplied from an earlier papply
        props: Props to apply
        override: When re-applying, whether ``props`` win over the props
            applied earlier (True) or the other way round (False)

    Returns:
        PartiallyApplied constructor

    Example:
        button = papply(make_button, {'kind': 'primary'})
        button({'label': 'OK'})  ->  make_button({'kind': 'primary', 'label': 'OK'}, None)
    """
    if isinstance(comp, PartiallyApplied):
        merged: Dict[str, Any] = {}
        if override:
            shallow_merge(comp.props or {}, merged)
            shallow_merge(props, merged)
        else:
            shallow_merge(props, merged)
            shallow_merge(comp.props or {}, merged)
        return PartiallyApplied(comp.comp, merged)
    return PartiallyApplied(comp, props)
