from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class ServiceRecord:
    id: str
    icon_svg: str | None
    data: Mapping[str, Any] = field(default_factory=dict, repr=False)
    source: Path | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], source: Path | None = None) -> ServiceRecord:
        return cls(
            id=str(data["id"]),
            icon_svg=data.get("icon_svg"),
            data=MappingProxyType(dict(data)),
            source=source,
        )

    def to_dict(self) -> dict[str, Any]:
        return dict(self.data)


@dataclass(frozen=True)
class ServicesCatalog:
    blocked_services: tuple[ServiceRecord, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"blocked_services": [record.to_dict() for record in self.blocked_services]}
