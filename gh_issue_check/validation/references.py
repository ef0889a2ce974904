"""Issue reference extraction and aggregation."""

import re
from collections.abc import Iterable

ISSUE_REFERENCE_PATTERN = re.compile(r"#[0-9]+")

ReferenceSet = list[str]


def scan_references(text: str | None) -> ReferenceSet:
    """Find every ``#<digits>`` token in text.

    Matches are returned left to right with duplicates kept. Absent or
    empty text yields an empty list.
    """
    if not text or "#" not in text:
        return []
    return ISSUE_REFERENCE_PATTERN.findall(text)


def merge_references(*reference_sets: Iterable[str] | None) -> ReferenceSet:
    """Concatenate reference sets and drop duplicates.

    Absent inputs are ignored. The first occurrence of each token decides
    its position in the result.
    """
    merged: ReferenceSet = []
    seen: set[str] = set()
    for references in reference_sets:
        if references is None:
            continue
        for reference in references:
            if reference not in seen:
                seen.add(reference)
                merged.append(reference)
    return merged


def is_empty(references: ReferenceSet | None) -> bool:
    """Check whether a reference set holds no references."""
    return not references

