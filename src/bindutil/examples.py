"""
Example binding built on the argument resolver.

A minimal state binding over nested dicts, showing how methods use
``resolve_args`` at their call boundary to accept flexible signatures:

    binding.get()                     whole state
    binding.get('user.name')          value at subpath
    binding.set('Alice')              replace whole state
    binding.set('user.name', 'Alice') set value at subpath
    binding.update(fn)                apply fn to whole state
    binding.update('count', fn)       apply fn at subpath
"""
from typing import Any, Dict, List, Optional

from bindutil.functions import can_represent_subpath, identity
from bindutil.resolver import resolve_args
from bindutil.serialization import signatures_from_yaml


SIGNATURES_YAML = """
get: "?subpath"
update: "?subpath, update_fn"
"""

SIGNATURES = signatures_from_yaml(SIGNATURES_YAML)


def _subpath_spec(arg: Any) -> Optional[str]:
    return "subpath" if can_represent_subpath(arg) else None


def as_path(subpath: Any) -> List[Any]:
    """Normalize 'a.b', 3 or ['a', 'b'] into a path list."""
    if subpath is None:
        return []
    if isinstance(subpath, (list, tuple)):
        return list(subpath)
    if isinstance(subpath, str):
        return [part for part in subpath.split(".") if part]
    return [subpath]


class Binding:
    """Binding to a nested dict state, addressed by subpaths."""

    def __init__(self, state: Optional[Dict[str, Any]] = None):
        self.state = state if state is not None else {}

    def get(self, *args) -> Any:
        resolved = resolve_args(args, SIGNATURES["get"])
        value = self.state
        for key in as_path(resolved.get("subpath")):
            if not isinstance(value, dict) or key not in value:
                return None
            value = value[key]
        return value

    def set(self, *args) -> "Binding":
        # The subpath may be a string, number or list, so it is checked
        resolved = resolve_args(args, _subpath_spec, "new_value")
        return self._assign(resolved.get("subpath"), lambda _: resolved.get("new_value"))

    def update(self, *args) -> "Binding":
        resolved = resolve_args(args, SIGNATURES["update"])
        return self._assign(resolved.get("subpath"), resolved.get("update_fn", identity))

    def _assign(self, subpath: Any, fn) -> "Binding":
        path = as_path(subpath)
        if not path:
            self.state = fn(self.state)
            return self
        if not isinstance(self.state, dict):
            self.state = {}
        target = self.state
        for key in path[:-1]:
            if not isinstance(target.get(key), dict):
                target[key] = {}
            target = target[key]
        target[path[-1]] = fn(target.get(path[-1]))
        return self
