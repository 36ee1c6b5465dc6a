from __future__ import annotations

from .config import DEFAULT_CONTRACT, IconStyleContract
from .report import ValidationIssue
from .svg_checks import SVG_NAMESPACE, quote_attributes, split_view_box, tokens_equal
from .xml_utils import ParsedSvg, parse_svg_markup

E2001_ROOT_NOT_SVG = "E2001_ROOT_NOT_SVG"
E2002_VIEWBOX_MISSING = "E2002_VIEWBOX_MISSING"
E2003_NOT_SQUARE = "E2003_NOT_SQUARE"
E2004_EXPLICIT_SIZE = "E2004_EXPLICIT_SIZE"
E2005_REQUIRED_ATTRIBUTE = "E2005_REQUIRED_ATTRIBUTE"


def _context(service_id: str, **extra: str) -> dict[str, str]:
    context = {"service_id": service_id}
    context.update(extra)
    return context


def _check_root_tag(
    svg: ParsedSvg, service_id: str, contract: IconStyleContract
) -> list[ValidationIssue]:
    if svg.tag_name == contract.root_tag and svg.namespace in (None, SVG_NAMESPACE):
        return []
    return [
        ValidationIssue(
            code=E2001_ROOT_NOT_SVG,
            message=(
                f"Parsed SVG root element is '{svg.root.tag}', "
                f"expected '{contract.root_tag}'."
            ),
            hint=f"Wrap the icon in a single <{contract.root_tag}> element.",
            context=_context(service_id, tag=svg.root.tag),
        )
    ]


def _check_square_view_box(
    svg: ParsedSvg, service_id: str, contract: IconStyleContract
) -> list[ValidationIssue]:
    if not contract.require_square_view_box:
        return []
    view_box = svg.get_attribute("viewBox")
    if view_box is None:
        return [
            ValidationIssue(
                code=E2002_VIEWBOX_MISSING,
                message="Svg tag must contain a 'viewBox' attribute.",
                hint="Add viewBox=\"0 0 N N\" to the svg tag.",
                context=_context(service_id, attribute="viewBox"),
            )
        ]
    tokens = split_view_box(view_box)
    if len(tokens) == 4 and tokens_equal(tokens[2], tokens[3]):
        return []
    return [
        ValidationIssue(
            code=E2003_NOT_SQUARE,
            message="The icon must have a square shape.",
            hint="Use equal width and height in the viewBox.",
            context=_context(service_id, attribute="viewBox", value=view_box),
        )
    ]


def _check_forbidden_attributes(
    svg: ParsedSvg, service_id: str, contract: IconStyleContract
) -> list[ValidationIssue]:
    present = [name for name in contract.forbid_attributes if svg.has_attribute(name)]
    if not present:
        return []
    return [
        ValidationIssue(
            code=E2004_EXPLICIT_SIZE,
            message=(
                f"Svg tag must not contain {quote_attributes(contract.forbid_attributes)} "
                "attributes"
            ),
            hint="Remove fixed sizing and let CSS scale the icon.",
            context=_context(service_id, attribute=",".join(present)),
        )
    ]


def _check_required_attributes(
    svg: ParsedSvg, service_id: str, contract: IconStyleContract
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for name, expected in contract.required_attributes.items():
        if svg.get_attribute(name) == expected:
            continue
        issues.append(
            ValidationIssue(
                code=E2005_REQUIRED_ATTRIBUTE,
                message=f"Svg tag must contain '{name}=\"{expected}\"' attribute.",
                hint=f"Set {name}=\"{expected}\" on the svg tag so the icon follows the theme.",
                context=_context(service_id, attribute=name),
            )
        )
    return issues


def check_icon(
    svg_text: str,
    service_id: str,
    contract: IconStyleContract | None = None,
) -> list[ValidationIssue]:
    """Check one icon against the house style.

    Every rule runs even when an earlier one fails, so the result lists all
    violations of the icon in rule order. Markup that does not parse raises
    ``xml.etree.ElementTree.ParseError`` (or ``TypeError`` for non-string
    input) instead of producing an issue.
    """
    contract = contract or DEFAULT_CONTRACT
    svg = parse_svg_markup(svg_text)

    issues: list[ValidationIssue] = []
    issues.extend(_check_root_tag(svg, service_id, contract))
    issues.extend(_check_square_view_box(svg, service_id, contract))
    issues.extend(_check_forbidden_attributes(svg, service_id, contract))
    issues.extend(_check_required_attributes(svg, service_id, contract))
    return issues
