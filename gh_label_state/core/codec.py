# gh_label_state/core/codec.py

from typing import Iterable

from .types import Label, ParsedLabel, StateMap


def _label_prefix(prefix: str, separator: str) -> str:
    """Leading text every state label carries; empty when no prefix is configured"""
    return f"{prefix}{separator}" if prefix else ""


def parse_label(name: str, prefix: str, separator: str) -> ParsedLabel | None:
    """
    Decode a label name into its state key and value.

    Only the first separator after the prefix splits key from value, so
    values may contain the separator (e.g. URLs with "::") but keys may not.

    Args:
        name: The full label name
        prefix: Label prefix to match (may be empty)
        separator: Separator between prefix, key and value

    Returns:
        ParsedLabel, or None if the label is not a state label
    """
    expected_prefix = _label_prefix(prefix, separator)
    if not name.startswith(expected_prefix):
        return None

    remainder = name[len(expected_prefix):]
    key, found, value = remainder.partition(separator)
    if not found or not key:
        return None

    return ParsedLabel(key, value)


def format_label(key: str, value: str, prefix: str, separator: str) -> str:
    """Encode a key/value pair as a label name (no escaping is applied)"""
    return f"{_label_prefix(prefix, separator)}{key}{separator}{value}"


def canonicalize_value(raw: str) -> str:
    """Return the stored form of a value

    Integers that survive a parse/format round trip are kept in that form;
    everything else (decimals, leading zeros, whitespace, trailing text)
    is stored verbatim.
    """
    try:
        number = int(raw, 10)
    except ValueError:
        return raw
    converted = str(number)
    return converted if converted == raw else raw


def label_name(label) -> str:
    # Handle Label, github.Label.Label and plain strings
    return getattr(label, 'name', label)


def extract_state(labels: Iterable[Label], prefix: str, separator: str) -> StateMap:
    """Build the key/value state from a label list, ignoring non-state labels"""
    state: StateMap = {}
    for label in labels:
        parsed = parse_label(label_name(label), prefix, separator)
        if parsed:
            state[parsed.key] = parsed.value
    return state


def matches_key(label, key: str, prefix: str, separator: str) -> bool:
    """Check whether a label decodes to the given key"""
    parsed = parse_label(label_name(label), prefix, separator)
    return parsed is not None and parsed.key == key
