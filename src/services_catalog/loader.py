from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

import yaml

from .errors import LoadError
from .models import ServiceRecord

logger = logging.getLogger(__name__)

E1001_LOAD_FAILED = "E1001_LOAD_FAILED"


def _load_error(path: Path, reason: str, hint: str) -> LoadError:
    return LoadError(
        code=E1001_LOAD_FAILED,
        message=f"Error while reading YAML file {path}: {reason}",
        hint=hint,
        path=path,
    )


def _load_yaml(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise _load_error(
            path, str(exc), "Check that the service file exists and is readable."
        ) from exc
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise _load_error(
            path, f"invalid YAML: {exc}", "Fix the YAML syntax of the service file."
        ) from exc


def load_service(path: Path | str) -> ServiceRecord:
    path = Path(path)
    data = _load_yaml(path)
    if not isinstance(data, dict):
        raise _load_error(
            path,
            "expected a mapping at the top of the document.",
            "A service file must be a single YAML mapping.",
        )
    service_id = data.get("id")
    if not isinstance(service_id, str) or not service_id.strip():
        raise _load_error(
            path,
            "missing a non-empty string 'id'.",
            "Add an 'id' field naming the service.",
        )
    logger.debug("Loaded service %s from %s", service_id, path)
    return ServiceRecord.from_mapping(data, source=path)


def load_services(input_dir: Path | str, file_names: Iterable[str]) -> list[ServiceRecord]:
    """Read and parse the named YAML files from ``input_dir``.

    The result follows the order of ``file_names``. The first file that
    cannot be read or parsed aborts the whole load with a ``LoadError``.
    """
    base_dir = Path(input_dir)
    records = [load_service(base_dir / name) for name in file_names]
    logger.debug("Loaded %d service files from %s", len(records), base_dir)
    return records
