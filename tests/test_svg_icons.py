from __future__ import annotations

import pytest

from services_catalog import (
    AggregatedValidationError,
    SvgParseError,
    check_svg_icons,
    validate_svg_icons,
)

from _service_builders import build_icon, build_record


def test_valid_records_pass() -> None:
    records = [build_record("acme"), build_record("zoom")]
    report = validate_svg_icons(records)
    assert report.status == "pass"
    assert report.errors == []
    assert report.stats == {"icons_checked": 2, "error_count": 0}


def test_missing_fill_reports_one_message() -> None:
    record = build_record("acme", build_icon('viewBox="0 0 24 24"'))
    with pytest.raises(AggregatedValidationError) as exc_info:
        validate_svg_icons([record])
    assert exc_info.value.messages == [
        "acme : Svg tag must contain 'fill=\"currentColor\"' attribute."
    ]


def test_violations_are_collected_across_records() -> None:
    records = [
        build_record("alpha", build_icon('viewBox="0 0 24 24"')),
        build_record("beta", build_icon('viewBox="0 0 24 24" width="24" fill="currentColor"')),
        build_record("gamma", build_icon('viewBox="0 0 24 48" fill="currentColor"')),
        build_record("delta"),
    ]
    with pytest.raises(AggregatedValidationError) as exc_info:
        validate_svg_icons(records)

    messages = exc_info.value.messages
    assert len(messages) == 3
    assert messages[0].startswith("alpha : ")
    assert messages[1] == "beta : Svg tag must not contain 'width' and 'height' attributes"
    assert messages[2] == "gamma : The icon must have a square shape."
    assert str(exc_info.value) == "\n".join(messages)


def test_check_reports_without_raising() -> None:
    record = build_record("acme", build_icon('viewBox="0 0 10 20" height="20"'))
    report = check_svg_icons([record])
    assert report.status == "fail"
    assert report.stats == {"icons_checked": 1, "error_count": 3}
    assert report.to_dict()["errors"][0]["context"]["service_id"] == "acme"


def test_unparseable_icon_fails_immediately() -> None:
    records = [
        build_record("alpha", build_icon('viewBox="0 0 24 24"')),
        build_record("broken", "<svg fill='currentColor'><path></svg>"),
    ]
    with pytest.raises(SvgParseError) as exc_info:
        validate_svg_icons(records)
    assert exc_info.value.service_id == "broken"
    assert "broken" in str(exc_info.value)


def test_missing_icon_is_a_parse_error() -> None:
    with pytest.raises(SvgParseError) as exc_info:
        validate_svg_icons([build_record("acme", icon_svg=None)])
    assert exc_info.value.service_id == "acme"
