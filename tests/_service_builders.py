from __future__ import annotations

from pathlib import Path

import yaml

from services_catalog import ServiceRecord

VALID_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="currentColor">'
    '<path d="M0 0h24v24H0z"/></svg>'
)


def build_icon(attrs: str = 'viewBox="0 0 24 24" fill="currentColor"') -> str:
    return f'<svg xmlns="http://www.w3.org/2000/svg" {attrs}><path d="M0 0h24v24H0z"/></svg>'


def build_record(service_id: str, icon_svg: str | None = VALID_ICON, **extra: object) -> ServiceRecord:
    data: dict[str, object] = {"id": service_id, "name": service_id.title(), **extra}
    if icon_svg is not None:
        data["icon_svg"] = icon_svg
    return ServiceRecord.from_mapping(data)


def write_service(directory: Path, file_name: str, service_id: str, icon_svg: str = VALID_ICON, **extra: object) -> Path:
    data: dict[str, object] = {
        "id": service_id,
        "name": service_id.title(),
        "rules": [f"||{service_id}.example^"],
        "icon_svg": icon_svg,
        **extra,
    }
    path = directory / file_name
    path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    return path
