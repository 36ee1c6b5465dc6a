from __future__ import annotations

import re

NUMBER_RE = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")
VIEW_BOX_SPLIT_RE = re.compile(r"[\s,]+")
SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def tag_namespace(tag: str) -> str | None:
    if tag.startswith("{") and "}" in tag:
        return tag[1:].split("}", 1)[0]
    return None


def local_name(tag: str) -> str:
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def split_view_box(value: str) -> list[str]:
    stripped = value.strip()
    if not stripped:
        return []
    return VIEW_BOX_SPLIT_RE.split(stripped)


def parse_number(value: str) -> float | None:
    if not NUMBER_RE.match(value):
        return None
    return float(value)


def tokens_equal(left: str, right: str) -> bool:
    """Compare viewBox tokens numerically, falling back to the raw text."""
    left_number = parse_number(left)
    right_number = parse_number(right)
    if left_number is not None and right_number is not None:
        return left_number == right_number
    return left == right


def quote_attributes(names: tuple[str, ...] | list[str]) -> str:
    return " and ".join(f"'{name}'" for name in names)
