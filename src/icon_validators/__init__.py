"""SVG icon style validation utilities."""

from .config import DEFAULT_CONTRACT, IconStyleContract, load_contract
from .report import ValidationIssue, ValidationReport
from .validate import check_icon
from .xml_utils import ParsedSvg, parse_svg_markup

__all__ = [
    "DEFAULT_CONTRACT",
    "IconStyleContract",
    "ParsedSvg",
    "ValidationIssue",
    "ValidationReport",
    "check_icon",
    "load_contract",
    "parse_svg_markup",
]
