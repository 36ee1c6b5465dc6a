from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from .svg_checks import local_name, tag_namespace


@dataclass(frozen=True)
class ParsedSvg:
    """Parsed icon markup, exposing only the root element."""

    root: ET.Element

    @property
    def tag_name(self) -> str:
        return local_name(self.root.tag)

    @property
    def namespace(self) -> str | None:
        return tag_namespace(self.root.tag)

    def get_attribute(self, name: str) -> str | None:
        return self.root.get(name)

    def has_attribute(self, name: str) -> bool:
        return name in self.root.attrib


def parse_svg_markup(svg_text: str) -> ParsedSvg:
    if not isinstance(svg_text, str):
        raise TypeError(f"SVG markup must be a string, got {type(svg_text).__name__}")
    return ParsedSvg(root=ET.fromstring(svg_text))
