"""
Binding Utilities (bindutil)

Helper functions for a UI state-binding library.

The centrepiece is the argument resolver, which lets binding constructors
and methods accept flexible call signatures:

    resolve_args(args, '?subpath', 'value')

Everything else is small, stateless glue:
    - identity / constant / predicate helpers
    - shallow merge and partial application of component constructors
    - declarative signatures (text, JSON, YAML)
    - read-only diagnostics for spec lists

This package knows nothing about rendering. It is pure functions only.
"""

from bindutil.specs import MISSING
from bindutil.resolver import resolve, resolve_args

__version__ = "0.1.0"

__all__ = ["MISSING", "resolve", "resolve_args"]
