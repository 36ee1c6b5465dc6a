from __future__ import annotations

import datetime as dt
import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Iterable

from icon_validators import IconStyleContract

from .errors import WriteError
from .icons import validate_svg_icons
from .loader import load_services
from .models import ServiceRecord, ServicesCatalog

logger = logging.getLogger(__name__)

E3001_WRITE_FAILED = "E3001_WRITE_FAILED"
E3002_NOT_SERIALIZABLE = "E3002_NOT_SERIALIZABLE"


def sort_services(records: Iterable[ServiceRecord]) -> list[ServiceRecord]:
    """Order records by ascending ``id``; records sharing an id keep input order."""
    return sorted(records, key=lambda record: record.id)


def build_catalog(records: Iterable[ServiceRecord]) -> ServicesCatalog:
    return ServicesCatalog(blocked_services=tuple(sort_services(records)))


def _json_default(value: Any) -> Any:
    # YAML timestamps load as date/datetime.
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _serialize(catalog: ServicesCatalog, path: Path) -> str:
    try:
        payload = json.dumps(catalog.to_dict(), indent=2, ensure_ascii=False, default=_json_default)
    except (TypeError, ValueError) as exc:
        raise WriteError(
            code=E3002_NOT_SERIALIZABLE,
            message=f"Cannot serialize services catalog for {path}: {exc}",
            hint="Service YAML files must only hold JSON-compatible values.",
            path=path,
        ) from exc
    return payload + "\n"


def _file_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_atomic(path: Path, payload: str) -> None:
    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(payload)
        os.chmod(tmp_name, _file_mode(path))
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise WriteError(
            code=E3001_WRITE_FAILED,
            message=f"Failed to write services catalog to {path}: {exc}",
            hint="Check that the output directory exists and is writable.",
            path=path,
        ) from exc


def write_catalog(
    catalog: ServicesCatalog | Iterable[ServiceRecord],
    output_path: Path | str,
) -> Path:
    """Write the catalog as 2-space indented JSON, replacing ``output_path``.

    The file is written next to the target and renamed over it, so readers
    never observe a half-written catalog.
    """
    path = Path(output_path)
    if not isinstance(catalog, ServicesCatalog):
        catalog = build_catalog(catalog)
    _write_atomic(path, _serialize(catalog, path))
    logger.info("Wrote %d services to %s", len(catalog.blocked_services), path)
    return path


def rewrite_services_json(
    input_dir: Path | str,
    result_path: Path | str,
    file_names: Iterable[str],
    contract: IconStyleContract | None = None,
) -> ServicesCatalog:
    """Build the services JSON file from the service YAML files.

    Loads every named file, validates all icons, then writes the sorted
    catalog. Any failure aborts before ``result_path`` is touched.
    """
    records = load_services(input_dir, file_names)
    validate_svg_icons(records, contract)
    catalog = build_catalog(records)
    write_catalog(catalog, result_path)
    return catalog
