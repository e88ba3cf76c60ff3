#!/usr/bin/env python3
"""
Demo: Trace how the argument resolver matches call signatures.

Shows rotation for leading optional specs, predicate specs, and the
analyzer report for a well-formed and a malformed spec list.
"""

from bindutil import MISSING, resolve_args
from bindutil.analyzer import analyze_specs
from bindutil.examples import Binding
from bindutil.functions import to_string


def is_number(x):
    return "count" if isinstance(x, int) else None


CASES = [
    (["a", "b"], [1, 2, 3]),
    (["a", "?b"], [1]),
    (["?a", "b"], [1, 2]),
    (["?a", "?b", "c"], [1, 2]),
    (["?a", "?b", "c"], [1, 2, 3]),
    (["?a", "?b"], [MISSING, 2]),
    ([is_number, "b"], ["text", 2]),
    ([is_number, "b"], [5, 2]),
    (["?a", "b", "?c", "d"], [1, 2, 3, 4]),
]


def main():
    print("=" * 70)
    print("ARGUMENT RESOLVER DEMO")
    print("=" * 70)

    for specs, args in CASES:
        labels = [s if isinstance(s, str) else s.__name__ for s in specs]
        print(f"\nspecs={labels}  args={to_string(args)}")
        print(f"  -> {resolve_args(args, specs)}")

        report = analyze_specs(specs)
        print(f"  turning point: {report.turning_point}, rotates: {report.rotates}")
        for warning in report.warnings:
            print(f"  ⚠️  {warning}")

    print("\n" + "=" * 70)
    print("BINDING EXAMPLE")
    print("=" * 70)

    binding = Binding({"user": {"name": "Bob"}, "count": 1})
    binding.set("user.name", "Alice")
    binding.update("count", lambda n: n + 1)
    print(f"  get('user.name') -> {binding.get('user.name')}")
    print(f"  get('count')     -> {binding.get('count')}")
    print(f"  get()            -> {binding.get()}")


if __name__ == "__main__":
    main()
