"""dump.cs catalog - searchable type/member catalogs from IL2CPP dump text."""

from .application import CatalogService
from .domain.models.catalog import Catalog, MemberInfo, MemberKind, TypeInfo
from .domain.services.parsing import DumpCsParser, parse_dump
from .infrastructure.config import Config

__all__ = [
    "Catalog",
    "CatalogService",
    "Config",
    "DumpCsParser",
    "MemberInfo",
    "MemberKind",
    "TypeInfo",
    "parse_dump",
]
