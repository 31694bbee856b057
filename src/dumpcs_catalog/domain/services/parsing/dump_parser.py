#!/usr/bin/env python3

"""dump.cs parser.

Turns the pseudo-C# text exported by IL2CPP dump tools into a Catalog of
types and members annotated with native addresses. Each line is offered to
the classifiers in priority order:

    Image -> Namespace -> Type -> Section -> section-specific extractor

Unrecognized lines are dropped silently. The parser never raises for
malformed input; an unreadable file yields an empty Catalog.
"""

from pathlib import Path

from ...models.catalog import Catalog, ImageMapEntry, MemberInfo, TypeInfo
from ....infrastructure.config import get_config
from ....infrastructure.logging import ProgressCallback, ProgressTracker, get_logger, log_timing
from .line_classifiers import (
    Section,
    match_image,
    match_namespace,
    match_section,
    match_type_declaration,
)
from .line_source import LineSource
from .member_extractors import (
    extract_enum_member,
    extract_method_member,
    extract_plain_member,
)
from .parser_state import ParserState

logger = get_logger(__name__)


class DumpCsParser:
    """Line-oriented state machine over dump.cs text.

    A parser instance holds only configuration; all mutable state lives in
    the ParserState created per ``parse`` call, so one instance may serve
    concurrent parses.
    """

    def __init__(self, progress_interval: int | None = None, encoding: str | None = None):
        """
        Args:
            progress_interval: Lines between progress emissions (config default)
            encoding: Text encoding of dump files (config default)
        """
        config = get_config()
        self.progress_interval = progress_interval or config["PROGRESS_INTERVAL"]
        self.encoding = encoding or config["FILE_ENCODING"]

    @log_timing
    def parse(self, path: str | Path, progress: ProgressCallback | None = None) -> Catalog:
        """Parse a dump file.

        Args:
            path: Path to the dump.cs file
            progress: Optional callback receiving percentages in [0, 100];
                the last call is always 100

        Returns:
            Catalog with every recognized type; empty if the file can't be read
        """
        path = Path(path)
        tracker = ProgressTracker(logger, progress, self.progress_interval)
        state = ParserState()

        try:
            with open(path, "rb") as f:
                source = LineSource(f, LineSource.size_of(path), self.encoding)
                for line in source:
                    self._process(state, line, tracker)
                    tracker.count_line(source.percent)
        except OSError as e:
            logger.warning(f"Cannot read dump file {path}: {e}")
            tracker.finish()
            return Catalog(source_path=path)

        tracker.finish()
        tracker.report_summary()
        logger.debug(f"{len(state.images)} images, {len(state.types)} types in {path}")
        return Catalog(types=state.types, source_path=path)

    def parse_lines(self, lines: list[str] | tuple[str, ...]) -> Catalog:
        """Parse already-split lines (no progress reporting)."""
        state = ParserState()
        for line in lines:
            self.process_line(state, line)
        return Catalog(types=state.types)

    @classmethod
    def process_line(cls, state: ParserState, line: str) -> MemberInfo | None:
        """Apply one line to ``state``.

        Args:
            state: Parser state, mutated in place
            line: Raw or trimmed line text

        Returns:
            The member appended to the current type, if any
        """
        return cls._apply(state, line.strip())

    def _process(self, state: ParserState, line: str, tracker: ProgressTracker) -> None:
        types_before = len(state.types)
        if self._apply(state, line) is not None:
            tracker.count_member()
        elif len(state.types) != types_before:
            tracker.count_type()

    @staticmethod
    def _apply(state: ParserState, line: str) -> MemberInfo | None:
        image = match_image(line)
        if image is not None:
            state.images.add(ImageMapEntry(base_index=image.base_index, assembly=image.assembly))
            return None

        namespace = match_namespace(line)
        if namespace is not None:
            state.namespace = namespace
            return None

        declaration = match_type_declaration(line)
        if declaration is not None:
            type_info = TypeInfo(
                name=declaration.name,
                namespace=state.namespace,
                is_enum=declaration.is_enum,
            )
            if declaration.type_def_index is not None:
                type_info.type_def_index = declaration.type_def_index
                type_info.assembly = state.images.resolve(declaration.type_def_index)
            state.begin_type(type_info)
            return None

        current = state.current_type
        if current is None:
            return None

        section = match_section(line)
        if section is not None:
            state.begin_section(section)
            return None

        if state.section is None:
            return None

        if state.section == Section.METHODS:
            member = extract_method_member(state, line)
        elif current.is_enum:
            member = extract_enum_member(line) if state.section == Section.FIELDS else None
        else:
            member = extract_plain_member(line, state.section)

        if member is not None:
            current.members.append(member)
        return member


@log_timing
def parse_dump(path: str | Path, progress: ProgressCallback | None = None) -> Catalog:
    """Parse a dump file with default settings."""
    return DumpCsParser().parse(path, progress)
