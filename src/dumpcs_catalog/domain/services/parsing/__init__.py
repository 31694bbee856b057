#!/usr/bin/env python3

"""dump.cs parsing services."""

from .dump_parser import DumpCsParser, parse_dump
from .line_classifiers import (
    ImageMatch,
    LineClassifier,
    MetadataMatch,
    Section,
    TypeDeclaration,
    match_image,
    match_metadata,
    match_namespace,
    match_section,
    match_type_declaration,
)
from .line_source import LineSource
from .member_extractors import (
    count_parameters,
    extract_enum_member,
    extract_method_member,
    extract_plain_member,
    parse_method_declaration,
)
from .parser_state import ParserState, PendingMetadata

__all__ = [
    "DumpCsParser",
    "ImageMatch",
    "LineClassifier",
    "LineSource",
    "MetadataMatch",
    "ParserState",
    "PendingMetadata",
    "Section",
    "TypeDeclaration",
    "count_parameters",
    "extract_enum_member",
    "extract_method_member",
    "extract_plain_member",
    "match_image",
    "match_metadata",
    "match_namespace",
    "match_section",
    "match_type_declaration",
    "parse_dump",
    "parse_method_declaration",
]
