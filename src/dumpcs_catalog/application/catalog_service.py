#!/usr/bin/env python3

"""Catalog service orchestrator (Application Layer).

Wires the domain services together for one dump file:
- DumpCsParser: dump.cs -> Catalog
- NativeImage: optional address annotation from the native library
- SearchIndex: text search over the catalog
- CatalogDiffer: comparison against another dump
- Exporters: JSON / CSV output
"""

from pathlib import Path

from ..domain.models.catalog import Catalog
from ..domain.services.compare import CatalogDiff, CatalogDiffer, compare_files
from ..domain.services.export import export_csv, export_json
from ..domain.services.parsing import DumpCsParser
from ..domain.services.search import SearchEntry, SearchIndex
from ..infrastructure.config import Config, get_config
from ..infrastructure.logging import ProgressCallback, get_logger, log_timing
from ..infrastructure.native_image import NativeImage, annotate_catalog

logger = get_logger(__name__)


class CatalogService:
    """Loads a dump once and serves search, compare and export requests."""

    def __init__(self, config: Config):
        """
        Args:
            config: Application configuration (dump path, binary path, ...)
        """
        self.config = config
        self.settings = get_config()
        self.parser = DumpCsParser()
        self.catalog: Catalog | None = None
        self._index: SearchIndex | None = None

    @log_timing
    def load(self, progress: ProgressCallback | None = None) -> Catalog:
        """Parse the configured dump and annotate it from the binary if given.

        Raises:
            ValueError: If the configured native binary cannot be read
        """
        catalog = self.parser.parse(self.config.dump_file_path, progress)
        if self.config.binary_path is not None:
            image = NativeImage.load(self.config.binary_path)
            catalog = annotate_catalog(catalog, image)

        self.catalog = catalog
        self._index = None
        logger.info(
            f"Loaded {len(catalog)} types, {catalog.member_count} members "
            f"from {self.config.dump_file_path}"
        )
        return catalog

    def _require_catalog(self) -> Catalog:
        if self.catalog is None:
            return self.load()
        return self.catalog

    def search(
        self, text: str, kinds: set[str] | None = None, limit: int | None = None
    ) -> list[SearchEntry]:
        if self._index is None:
            self._index = SearchIndex.build(self._require_catalog())
        if limit is None:
            limit = self.settings["SEARCH_RESULT_LIMIT"]
        return self._index.query(text, kinds, limit)

    def compare(self, other_path: Path) -> CatalogDiff:
        """Diff the configured dump (old) against ``other_path`` (new).

        Both sides are compared as parsed, without native image annotation,
        since the other dump belongs to a different binary.
        """
        if self.catalog is not None and self.config.binary_path is None:
            return CatalogDiffer().diff(self.catalog, self.parser.parse(other_path))
        return compare_files(
            self.config.dump_file_path,
            other_path,
            parallel=self.settings["PARALLEL_COMPARE"],
        )

    def export(self, json_path: Path | None = None, csv_path: Path | None = None) -> list[Path]:
        """Write the requested export files, resolving relative paths
        against the configured output directory.

        Raises:
            OSError: If a file cannot be written
        """
        catalog = self._require_catalog()
        written = []
        if json_path is not None:
            written.append(export_json(catalog, self._output_path(json_path)))
        if csv_path is not None:
            written.append(export_csv(catalog, self._output_path(csv_path)))
        return written

    def _output_path(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        self.config.ensure_output_dir()
        return self.config.output_dir / path
