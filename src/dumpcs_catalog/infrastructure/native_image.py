#!/usr/bin/env python3

"""Native image address mapping.

Maps relative virtual addresses recorded in a dump back onto the ELF library
the dump was produced from (e.g. ``libil2cpp.so``):

- VA     = image base + RVA, where the image base is the lowest PT_LOAD vaddr
- Offset = file offset of the PT_LOAD segment containing the VA
"""

from dataclasses import dataclass, replace
from pathlib import Path

from elftools.common.exceptions import ELFError
from elftools.elf.elffile import ELFFile

from ..domain.models.catalog import CODE_MEMBER_KINDS, Catalog, TypeInfo
from .logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoadSegment:
    """A PT_LOAD program header."""

    vaddr: int
    offset: int
    filesz: int
    memsz: int

    def contains(self, va: int) -> bool:
        return self.vaddr <= va < self.vaddr + self.filesz


class NativeImage:
    """Loadable segments of an ELF image."""

    def __init__(self, path: Path, segments: list[LoadSegment], machine: str = ""):
        self.path = path
        self.segments = sorted(segments, key=lambda s: s.vaddr)
        self.machine = machine

    @classmethod
    def load(cls, path: str | Path) -> "NativeImage":
        """Read PT_LOAD segments from an ELF file.

        Args:
            path: Path to the ELF library

        Returns:
            NativeImage describing the file

        Raises:
            ValueError: If the file cannot be read or is not a valid ELF image
        """
        path = Path(path)
        try:
            with open(path, "rb") as f:
                elf = ELFFile(f)  # type: ignore[no-untyped-call]
                machine = str(elf.header["e_machine"])
                segments = [
                    LoadSegment(
                        vaddr=seg["p_vaddr"],
                        offset=seg["p_offset"],
                        filesz=seg["p_filesz"],
                        memsz=seg["p_memsz"],
                    )
                    for seg in elf.iter_segments()
                    if seg["p_type"] == "PT_LOAD"
                ]
        except (OSError, ELFError) as e:
            raise ValueError(f"Cannot read native image {path}: {e}") from e

        if not segments:
            raise ValueError(f"No loadable segments in {path}")

        logger.debug(
            f"Loaded {len(segments)} PT_LOAD segments from {path} (machine={machine})"
        )
        return cls(path, segments, machine)

    @property
    def image_base(self) -> int:
        return self.segments[0].vaddr if self.segments else 0

    def rva_to_va(self, rva: int) -> int:
        return self.image_base + rva

    def rva_to_offset(self, rva: int) -> int | None:
        """Map an RVA to a file offset, or None if no segment backs it."""
        va = self.rva_to_va(rva)
        for seg in self.segments:
            if seg.contains(va):
                return va - seg.vaddr + seg.offset
        return None


def annotate_catalog(catalog: Catalog, image: NativeImage) -> Catalog:
    """Fill in VA and file offsets of code members from a native image.

    Members keep their values when the dump already supplied them: ``va`` is
    only set when 0, and ``offset`` is only replaced when it is the RVA
    fallback. Members without an RVA are left untouched.

    Args:
        catalog: Parsed catalog
        image: Loaded native image

    Returns:
        New catalog with annotated members
    """
    annotated = 0
    types: list[TypeInfo] = []
    for type_info in catalog:
        members = []
        for member in type_info.members:
            if member.kind in CODE_MEMBER_KINDS and member.rva:
                va = member.va or image.rva_to_va(member.rva)
                offset = member.offset
                if offset == member.rva:
                    mapped = image.rva_to_offset(member.rva)
                    if mapped is not None:
                        offset = mapped
                if va != member.va or offset != member.offset:
                    member = replace(member, va=va, offset=offset)
                    annotated += 1
            members.append(member)
        types.append(replace(type_info, members=members))

    logger.info(f"Annotated {annotated} members from {image.path}")
    return Catalog(types=types, source_path=catalog.source_path)
