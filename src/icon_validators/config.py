from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class IconStyleContract:
    root_tag: str = "svg"
    require_square_view_box: bool = True
    forbid_attributes: tuple[str, ...] = ("width", "height")
    required_attributes: dict[str, str] = field(
        default_factory=lambda: {"fill": "currentColor"}
    )


DEFAULT_CONTRACT = IconStyleContract()


def _load_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of YAML: {path}")
    return data


def load_contract(path: Path | str) -> IconStyleContract:
    data = _load_yaml(Path(path))
    svg = data.get("svg", {}) or {}
    attributes = data.get("attributes", {}) or {}

    root_tag = str(svg.get("root_tag", DEFAULT_CONTRACT.root_tag))
    require_square_view_box = bool(
        svg.get("require_square_view_box", DEFAULT_CONTRACT.require_square_view_box)
    )

    forbid_raw = attributes.get("forbid")
    forbid_attributes = (
        tuple(str(name) for name in forbid_raw)
        if forbid_raw is not None
        else DEFAULT_CONTRACT.forbid_attributes
    )

    required_raw = attributes.get("require")
    if required_raw is None:
        required_attributes = dict(DEFAULT_CONTRACT.required_attributes)
    elif isinstance(required_raw, dict):
        required_attributes = {str(key): str(value) for key, value in required_raw.items()}
    else:
        raise ValueError(f"attributes.require must be a mapping: {path}")

    return IconStyleContract(
        root_tag=root_tag,
        require_square_view_box=require_square_view_box,
        forbid_attributes=forbid_attributes,
        required_attributes=required_attributes,
    )
