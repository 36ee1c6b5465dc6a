from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ServicesCatalogError(Exception):
    code: str
    message: str
    hint: str

    def __str__(self) -> str:
        return self.message


@dataclass
class LoadError(ServicesCatalogError):
    path: Path | None = None


@dataclass
class SvgParseError(ServicesCatalogError):
    service_id: str | None = None


@dataclass
class AggregatedValidationError(ServicesCatalogError):
    messages: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        return "\n".join(self.messages)


@dataclass
class WriteError(ServicesCatalogError):
    path: Path | None = None
