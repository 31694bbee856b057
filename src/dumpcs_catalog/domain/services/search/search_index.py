#!/usr/bin/env python3

"""Full-text search over a parsed catalog."""

from dataclasses import dataclass
from enum import Enum

from ...models.catalog import Catalog, MemberKind
from ....infrastructure.logging import get_logger, log_timing

logger = get_logger(__name__)


class EntryKind(Enum):
    NAMESPACE = "namespace"
    TYPE = "type"
    MEMBER = "member"


@dataclass(frozen=True)
class SearchEntry:
    """A searchable namespace, type or member."""

    kind: EntryKind
    display: str
    detail: str
    namespace: str
    assembly: str = ""
    type_index: int = -1
    member_index: int = -1
    member_kind: MemberKind | None = None

    @property
    def filter_key(self) -> str:
        """Key used by kind filters: entry kind, or member kind group key."""
        if self.member_kind is not None:
            return self.member_kind.value
        return self.kind.value


# Filter keys accepted by SearchIndex.query
FILTER_KEYS = frozenset(
    [EntryKind.NAMESPACE.value, EntryKind.TYPE.value] + [k.value for k in MemberKind]
)


class SearchIndex:
    """Flat list of search entries built from a catalog."""

    def __init__(self, entries: list[SearchEntry]):
        self.entries = entries

    @classmethod
    @log_timing
    def build(cls, catalog: Catalog) -> "SearchIndex":
        entries = [
            SearchEntry(kind=EntryKind.NAMESPACE, display=ns, detail=ns, namespace=ns)
            for ns in catalog.namespaces()
        ]

        for ti, type_info in enumerate(catalog):
            entries.append(
                SearchEntry(
                    kind=EntryKind.TYPE,
                    display=type_info.full_name,
                    detail=type_info.full_name,
                    namespace=type_info.namespace,
                    assembly=type_info.assembly,
                    type_index=ti,
                )
            )
            for mi, member in enumerate(type_info.members):
                entries.append(
                    SearchEntry(
                        kind=EntryKind.MEMBER,
                        display=f"{type_info.full_name}  {member.signature}",
                        detail=member.details(),
                        namespace=type_info.namespace,
                        assembly=type_info.assembly,
                        type_index=ti,
                        member_index=mi,
                        member_kind=member.kind,
                    )
                )

        logger.debug(f"Search index built with {len(entries)} entries")
        return cls(entries)

    def query(
        self, text: str = "", kinds: set[str] | None = None, limit: int | None = None
    ) -> list[SearchEntry]:
        """Find entries containing ``text`` (case-insensitive).

        Args:
            text: Substring to look for in display and detail text
            kinds: Allowed filter keys (see FILTER_KEYS); None allows all
            limit: Maximum number of results

        Returns:
            Matching entries in index order

        Raises:
            ValueError: If ``kinds`` contains an unknown key
        """
        if kinds is not None:
            unknown = set(kinds) - FILTER_KEYS
            if unknown:
                raise ValueError(f"Unknown search kinds: {', '.join(sorted(unknown))}")

        needle = text.strip().lower()
        results: list[SearchEntry] = []
        for entry in self.entries:
            if kinds is not None and entry.filter_key not in kinds:
                continue
            if needle and needle not in f"{entry.display}\n{entry.detail}".lower():
                continue
            results.append(entry)
            if limit is not None and len(results) >= limit:
                break
        return results

    def __len__(self) -> int:
        return len(self.entries)
