#!/usr/bin/env python3

"""JSON and CSV export of parsed catalogs."""

import csv
import json
from pathlib import Path
from typing import Any

from ...models.catalog import Catalog, MemberInfo, TypeInfo, format_hex
from ....infrastructure.logging import get_logger

logger = get_logger(__name__)

CSV_COLUMNS = [
    "assembly",
    "namespace",
    "type",
    "type_def_index",
    "kind",
    "name",
    "signature",
    "param_count",
    "rva",
    "offset",
    "va",
]


def member_to_dict(member: MemberInfo) -> dict[str, Any]:
    return {
        "kind": member.kind.label,
        "name": member.name,
        "signature": member.signature,
        "param_count": member.param_count,
        "rva": format_hex(member.rva),
        "offset": format_hex(member.offset),
        "va": format_hex(member.va),
    }


def type_to_dict(type_info: TypeInfo) -> dict[str, Any]:
    return {
        "name": type_info.name,
        "namespace": type_info.namespace,
        "type_def_index": type_info.type_def_index,
        "assembly": type_info.assembly,
        "is_enum": type_info.is_enum,
        "members": [member_to_dict(m) for m in type_info.members],
    }


def catalog_to_dict(catalog: Catalog) -> dict[str, Any]:
    return {
        "source": str(catalog.source_path) if catalog.source_path else None,
        "types": [type_to_dict(t) for t in catalog],
    }


def export_json(catalog: Catalog, output_path: str | Path) -> Path:
    """Write the catalog as JSON.

    Raises:
        OSError: If the file cannot be written
    """
    output_path = Path(output_path)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(catalog_to_dict(catalog), f, indent=2)
    logger.info(f"Exported {len(catalog)} types to {output_path}")
    return output_path


def export_csv(catalog: Catalog, output_path: str | Path) -> Path:
    """Write one CSV row per member.

    Raises:
        OSError: If the file cannot be written
    """
    output_path = Path(output_path)
    rows = 0
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
        writer.writeheader()
        for type_info in catalog:
            for member in type_info.members:
                writer.writerow(
                    {
                        "assembly": type_info.assembly,
                        "namespace": type_info.namespace,
                        "type": type_info.name,
                        "type_def_index": type_info.type_def_index,
                        "kind": member.kind.label,
                        "name": member.name,
                        "signature": member.signature,
                        "param_count": member.param_count,
                        "rva": format_hex(member.rva),
                        "offset": format_hex(member.offset),
                        "va": format_hex(member.va),
                    }
                )
                rows += 1
    logger.info(f"Exported {rows} members to {output_path}")
    return output_path
