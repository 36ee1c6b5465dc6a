from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ValidationIssue:
    code: str
    message: str
    hint: str
    context: dict[str, Any] | None = None

    @property
    def service_id(self) -> str | None:
        if not self.context:
            return None
        return self.context.get("service_id")

    def line(self) -> str:
        if self.service_id is None:
            return self.message
        return f"{self.service_id} : {self.message}"

    def to_dict(self) -> dict[str, Any]:
        data = {"code": self.code, "message": self.message, "hint": self.hint}
        if self.context:
            data["context"] = self.context
        return data


@dataclass
class ValidationReport:
    status: str
    errors: list[ValidationIssue] = field(default_factory=list)
    stats: dict[str, Any] = field(default_factory=dict)

    def messages(self) -> list[str]:
        return [issue.line() for issue in self.errors]

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "errors": [issue.to_dict() for issue in self.errors],
            "stats": self.stats,
        }
