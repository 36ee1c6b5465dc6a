"""Build the blocked services catalog from per-service YAML files."""

from .catalog import build_catalog, rewrite_services_json, sort_services, write_catalog
from .errors import (
    AggregatedValidationError,
    LoadError,
    ServicesCatalogError,
    SvgParseError,
    WriteError,
)
from .icons import check_svg_icons, validate_svg_icons
from .loader import load_service, load_services
from .models import ServiceRecord, ServicesCatalog

__all__ = [
    "AggregatedValidationError",
    "LoadError",
    "ServiceRecord",
    "ServicesCatalog",
    "ServicesCatalogError",
    "SvgParseError",
    "WriteError",
    "build_catalog",
    "check_svg_icons",
    "load_service",
    "load_services",
    "rewrite_services_json",
    "sort_services",
    "validate_svg_icons",
    "write_catalog",
]
