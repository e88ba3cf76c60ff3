"""
Spec Analyzer — Diagnostics for argument spec lists.

Provides a read-only inventory of a spec list:
    - Required / optional / predicate counts and names
    - Turning point and whether the resolver will rotate
    - Number of required/optional transitions (well-formedness)
    - Duplicate names and other warning flags

IMPORTANT: This does NOT change how the resolver behaves.
The resolver accepts malformed lists as they are. This module only
reports on them, for tests and developer tooling.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from bindutil.resolver import find_turning_point
from bindutil.specs import SpecEntry, SpecKind, classify_all, spec_name


@dataclass
class SpecReport:
    """Analysis report for a spec list."""

    total_specs: int = 0
    required_count: int = 0
    optional_count: int = 0
    predicate_count: int = 0

    required_names: List[str] = field(default_factory=list)
    optional_names: List[str] = field(default_factory=list)

    # Shape
    turning_point: Optional[int] = None
    rotates: bool = False
    transitions: int = 0
    is_well_formed: bool = True

    duplicate_names: List[str] = field(default_factory=list)

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def count_transitions(specs: Sequence[SpecEntry]) -> int:
    """Number of positions where required-ness differs from the previous entry."""
    flags = [spec.is_required for spec in classify_all(specs)]
    return sum(1 for prev, cur in zip(flags, flags[1:]) if prev != cur)


def analyze_specs(specs: Sequence[SpecEntry]) -> SpecReport:
    """
    Analyze a spec list.

    Returns a SpecReport with counts, shape information and warnings.
    """
    classified = classify_all(specs)
    report = SpecReport(total_specs=len(classified))

    for spec in classified:
        if spec.kind is SpecKind.REQUIRED:
            report.required_count += 1
            report.required_names.append(spec_name(spec))
        elif spec.kind is SpecKind.OPTIONAL:
            report.optional_count += 1
            report.optional_names.append(spec_name(spec))
        else:
            report.predicate_count += 1

    report.turning_point = find_turning_point(classified, lambda spec: spec.is_required)
    report.rotates = (
        bool(classified)
        and not classified[0].is_required
        and report.turning_point is not None
    )
    report.transitions = count_transitions(classified)
    report.is_well_formed = report.transitions <= 1

    name_counts = Counter(report.required_names + report.optional_names)
    report.duplicate_names = sorted(name for name, count in name_counts.items() if count > 1)

    # Warning flags

    if not report.is_well_formed:
        report.add_warning(
            f"Spec list switches between required and optional {report.transitions} times; "
            f"results are unspecified"
        )

    if report.duplicate_names:
        report.add_warning(
            f"Duplicate argument names: {', '.join(report.duplicate_names)}"
        )

    if "" in report.optional_names:
        report.add_warning('Empty optional name only matches MISSING placeholders (bound under "")')

    return report
