"""
Tag shape coercion.

Stored tags show up as a comma-joined string, a list of strings, or a list
of {"name": ...} objects. Everything is coerced to a plain list of labels
before it reaches the scorer.
"""

from collections.abc import Mapping
from typing import Any


def _label_from_item(item: Any) -> str | None:
    if isinstance(item, str):
        return item
    if isinstance(item, Mapping) and isinstance(item.get("name"), str):
        return item["name"]
    return None


def resolve_tags(raw: Any) -> list[str]:
    """Coerce any supported tag representation into a list of labels.

    Unsupported shapes (None, numbers, arbitrary objects) resolve to an
    empty list instead of raising. Blank labels are dropped.
    """
    if isinstance(raw, str):
        candidates = raw.split(",")
    elif isinstance(raw, (list, tuple, set, frozenset)):
        candidates = [_label_from_item(item) for item in raw]
    else:
        return []

    labels = []
    for label in candidates:
        if label is None:
            continue
        label = label.strip()
        if label:
            labels.append(label)
    return labels


def format_tags(raw: Any) -> str:
    """Serialize tags for storage as a comma-joined string.

    Duplicates are removed case-insensitively, keeping first-seen order.
    """
    seen: set[str] = set()
    labels = []
    for label in resolve_tags(raw):
        folded = label.lower()
        if folded not in seen:
            seen.add(folded)
            labels.append(label)
    return ",".join(labels)
