"""
Serialization helpers for spec lists and named signatures.

Provides JSON/YAML round-trip via an intermediate dict representation,
plus a compact text form for signatures:

    "?subpath, value"   ->   [OptionalName('subpath'), RequiredName('value')]

Named signatures can be declared in YAML and loaded in one go:

    set:
      - "?subpath"
      - value
    update: "?subpath, update_fn"

Predicates are code, not data, and cannot be serialized.
"""
from __future__ import annotations

import json
import logging
import warnings
from typing import Any, Dict, List, Sequence

import yaml

from bindutil.analyzer import count_transitions
from bindutil.specs import (
    ArgSpec,
    OptionalName,
    RequiredName,
    SpecEntry,
    SpecKind,
    classify,
)

logger = logging.getLogger(__name__)


class SignatureParseError(Exception):
    """Raised when a signature cannot be parsed."""
    pass


def spec_to_dict(spec: SpecEntry) -> Dict[str, Any]:
    spec = classify(spec)
    if spec.kind is SpecKind.REQUIRED:
        return {"type": "required", "name": spec.name}
    if spec.kind is SpecKind.OPTIONAL:
        return {"type": "optional", "name": spec.name}
    raise TypeError(f"Unsupported spec type for serialization: {spec.kind.value}")


def spec_from_dict(d: Dict[str, Any]) -> ArgSpec:
    t = d.get("type")
    if t == "required":
        return RequiredName(d["name"])
    if t == "optional":
        return OptionalName(d["name"])
    raise TypeError(f"Unsupported spec dict type: {t}")


def specs_to_list(specs: Sequence[SpecEntry]) -> List[Dict[str, Any]]:
    return [spec_to_dict(spec) for spec in specs]


def specs_from_list(items: Sequence[Dict[str, Any]]) -> List[ArgSpec]:
    return [spec_from_dict(d) for d in items]


def specs_to_json(specs: Sequence[SpecEntry]) -> str:
    return json.dumps(specs_to_list(specs))


def specs_from_json(s: str) -> List[ArgSpec]:
    return specs_from_list(json.loads(s))


def specs_to_yaml(specs: Sequence[SpecEntry]) -> str:
    return yaml.safe_dump(specs_to_list(specs))


def specs_from_yaml(s: str) -> List[ArgSpec]:
    return specs_from_list(yaml.safe_load(s) or [])


def spec_to_text(spec: SpecEntry) -> str:
    d = spec_to_dict(spec)
    return d["name"] if d["type"] == "required" else "?" + d["name"]


def signature_to_text(specs: Sequence[SpecEntry]) -> str:
    """Inverse of ``parse_signature`` for predicate-free spec lists."""
    return ", ".join(spec_to_text(spec) for spec in specs)


def _parse_entry(text: str) -> ArgSpec:
    entry = text.strip()
    if not entry:
        raise SignatureParseError("Empty entry in signature")
    spec = classify(entry)
    if spec.kind is SpecKind.OPTIONAL and not spec.name.strip():
        raise SignatureParseError(f"Optional entry without a name: '{entry}'")
    if spec.kind is SpecKind.OPTIONAL:
        return OptionalName(spec.name.strip())
    return spec


def parse_signature(signature: Any) -> List[ArgSpec]:
    """
    Parse a signature into spec entries.

    Accepts either comma-separated text ("?subpath, value") or a list
    of entry strings (["?subpath", "value"]). An empty string is the
    empty signature.

    Raises:
        SignatureParseError: On empty entries, bare '?' markers or
            values that are neither text nor a list of text
    """
    if isinstance(signature, str):
        if not signature.strip():
            return []
        parts = signature.split(",")
    elif isinstance(signature, (list, tuple)):
        parts = signature
    else:
        raise SignatureParseError(f"Unsupported signature type: {type(signature).__name__}")

    specs = []
    for part in parts:
        if not isinstance(part, str):
            raise SignatureParseError(f"Signature entries must be strings, got {type(part).__name__}")
        specs.append(_parse_entry(part))
    return specs


def signatures_from_dict(d: Dict[str, Any]) -> Dict[str, List[ArgSpec]]:
    """
    Load named signatures.

    Signatures that switch between required and optional more than once
    are loaded as-is with a warning (their resolution is unspecified).

    Raises:
        SignatureParseError: If any signature cannot be parsed
    """
    signatures: Dict[str, List[ArgSpec]] = {}
    for name, raw in d.items():
        try:
            specs = parse_signature(raw)
        except SignatureParseError as e:
            raise SignatureParseError(f"Error parsing signature '{name}': {str(e)}")

        transitions = count_transitions(specs)
        if transitions > 1:
            warnings.warn(
                f"Signature '{name}' switches between required and optional "
                f"{transitions} times; resolution is unspecified",
                UserWarning,
            )
        signatures[name] = specs

    logger.debug("Loaded %d signatures", len(signatures))
    return signatures


def signatures_to_dict(signatures: Dict[str, Sequence[SpecEntry]]) -> Dict[str, List[str]]:
    return {
        name: [spec_to_text(spec) for spec in specs]
        for name, specs in signatures.items()
    }


def signatures_from_yaml(s: str) -> Dict[str, List[ArgSpec]]:
    d = yaml.safe_load(s)
    if d is None:
        return {}
    if not isinstance(d, dict):
        raise SignatureParseError("Signature document must be a mapping of name -> signature")
    return signatures_from_dict(d)


def signatures_to_yaml(signatures: Dict[str, Sequence[SpecEntry]]) -> str:
    return yaml.safe_dump(signatures_to_dict(signatures), sort_keys=False)
