from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterable

from icon_validators import IconStyleContract, ValidationIssue, ValidationReport, check_icon

from .errors import AggregatedValidationError, SvgParseError
from .models import ServiceRecord

E1002_SVG_PARSE_FAILED = "E1002_SVG_PARSE_FAILED"
E2000_ICON_VALIDATION_FAILED = "E2000_ICON_VALIDATION_FAILED"


def _check_record(record: ServiceRecord, contract: IconStyleContract | None) -> list[ValidationIssue]:
    try:
        return check_icon(record.icon_svg, record.id, contract)
    except (ET.ParseError, TypeError) as exc:
        raise SvgParseError(
            code=E1002_SVG_PARSE_FAILED,
            message=f"Invalid SVG for the service with id: '{record.id}': {exc}",
            hint="Ensure icon_svg holds well-formed SVG markup.",
            service_id=record.id,
        ) from exc


def check_svg_icons(
    records: Iterable[ServiceRecord],
    contract: IconStyleContract | None = None,
) -> ValidationReport:
    issues: list[ValidationIssue] = []
    checked = 0
    for record in records:
        issues.extend(_check_record(record, contract))
        checked += 1
    status = "pass" if not issues else "fail"
    return ValidationReport(
        status=status,
        errors=issues,
        stats={"icons_checked": checked, "error_count": len(issues)},
    )


def validate_svg_icons(
    records: Iterable[ServiceRecord],
    contract: IconStyleContract | None = None,
) -> ValidationReport:
    """Check every icon and fail once with all violations found.

    Markup that does not parse raises ``SvgParseError`` straight away; rule
    violations are collected across all records and raised together as an
    ``AggregatedValidationError``.
    """
    report = check_svg_icons(records, contract)
    if report.status != "pass":
        raise AggregatedValidationError(
            code=E2000_ICON_VALIDATION_FAILED,
            message=f"{len(report.errors)} icon style violation(s) found.",
            hint="Fix the listed icon_svg fields in the service YAML files.",
            messages=report.messages(),
        )
    return report
