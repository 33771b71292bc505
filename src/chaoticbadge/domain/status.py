"""Badge status classification and the status text/color tables.

This module defines:
- Status: The closed set of badge states
- StatusEntry: Default display text and color for a state
- StatusMap: An immutable Status -> StatusEntry table passed into styles
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from chaoticbadge.domain.color import FAILING_COLOR, PASSING_COLOR, UNKNOWN_COLOR, Color


class Status(str, Enum):
    """Classification of whatever the badge reports on.

    Values are the slugs accepted on the command line and in manifests.
    """

    PASSING = "passing"
    FAILING = "failing"
    UNKNOWN = "unknown"
    RELEASE = "release"
    PRERELEASE = "prerelease"
    NOT_FOUND = "not-found"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """Default display text and right-block color for a status.

    Attributes:
        text: Text shown in the status block
        color: Background color of the status block
    """

    text: str
    color: Color


@dataclass(frozen=True)
class StatusMap:
    """Immutable table mapping statuses to their default text and color.

    Lookups never fail: a status missing from the table resolves to the
    table's ERROR entry, or to the standard ERROR entry when the table has
    none either.

    Example:
        entry = STANDARD_STATUS_MAP.resolve(Status.PASSING)
        entry.text  # "passing"
    """

    entries: Mapping[Status, StatusEntry] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def __contains__(self, status: object) -> bool:
        return status in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, status: object) -> StatusEntry | None:
        """Return the entry for a status, or None if it is not mapped."""
        try:
            return self.entries.get(status)  # type: ignore[call-overload]
        except TypeError:
            # Unhashable sentinel values are simply unmapped
            return None

    def resolve(self, status: object) -> StatusEntry:
        """Return the entry for a status, falling back to the ERROR entry.

        Args:
            status: A Status, or any value a caller passes in its place

        Returns:
            The mapped entry, this map's ERROR entry, or the standard ERROR entry
        """
        entry = self.get(status)
        if entry is not None:
            return entry
        if Status.ERROR in self.entries:
            return self.entries[Status.ERROR]
        return _STANDARD_ENTRIES[Status.ERROR]


_STANDARD_ENTRIES: dict[Status, StatusEntry] = {
    Status.PASSING: StatusEntry("passing", PASSING_COLOR),
    Status.FAILING: StatusEntry("failing", FAILING_COLOR),
    Status.UNKNOWN: StatusEntry("unknown", UNKNOWN_COLOR),
    Status.RELEASE: StatusEntry("release", PASSING_COLOR),
    Status.PRERELEASE: StatusEntry("prerelease", UNKNOWN_COLOR),
    Status.NOT_FOUND: StatusEntry("not found", FAILING_COLOR),
    Status.ERROR: StatusEntry("error", FAILING_COLOR),
}

STANDARD_STATUS_MAP = StatusMap(_STANDARD_ENTRIES)

EMOTICON_STATUS_MAP = StatusMap(
    {
        Status.PASSING: StatusEntry("^.^", PASSING_COLOR),
        Status.FAILING: StatusEntry(">_<", FAILING_COLOR),
        Status.UNKNOWN: StatusEntry("@.@", UNKNOWN_COLOR),
        Status.RELEASE: StatusEntry(";D", PASSING_COLOR),
        Status.PRERELEASE: StatusEntry(":⦚", UNKNOWN_COLOR),
        Status.NOT_FOUND: StatusEntry("._.?", FAILING_COLOR),
        Status.ERROR: StatusEntry("o.o?", FAILING_COLOR),
    }
)
