#!/usr/bin/env python3

"""Type information model for dump.cs parsing."""

from dataclasses import dataclass, field

from .member_info import MemberInfo, MemberKind

NAMESPACE_SENTINEL = "-"
UNKNOWN_TYPE_DEF_INDEX = -1


@dataclass
class TypeInfo:
    """Information about a class, struct, enum or interface."""

    name: str
    namespace: str = NAMESPACE_SENTINEL
    type_def_index: int = UNKNOWN_TYPE_DEF_INDEX
    assembly: str = ""
    is_enum: bool = False
    members: list[MemberInfo] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        """Namespace-qualified name, e.g. ``UnityEngine::Vector3``."""
        return f"{self.namespace}::{self.name}"

    @property
    def base_name(self) -> str:
        """Type name without generic parameters."""
        return self.name.split("<", 1)[0]

    def members_of(self, kind: MemberKind) -> list[MemberInfo]:
        """Return members of the given kind in declaration order."""
        return [m for m in self.members if m.kind == kind]
