"""Icon name normalization."""

from __future__ import annotations


def to_pascal_case(name: str) -> str:
    """``academic-cap`` -> ``AcademicCap``.

    Only the first character of each hyphen-delimited token is upcased; the rest
    is kept as-is. No collision resolution happens here.
    """
    return "".join(word[:1].upper() + word[1:] for word in name.split("-"))
