"""Terminator selection: immutable sets of catalog entries."""

import functools
import re
from collections.abc import Iterable, Iterator
from re import Pattern

from loguru import logger

from nlsplit.core.errors import UnknownTerminatorError
from nlsplit.core.terminators.parsing import normalize_terminator_name, parse_terminator_name
from nlsplit.core.terminators.types import Terminator

_CATALOG_ORDER = {terminator: position for position, terminator in enumerate(Terminator)}


@functools.lru_cache(maxsize=None)
def _compile_search_pattern(members: frozenset[Terminator]) -> Pattern | None:
    """Compile a regex matching any terminator in ``members``.

    Alternatives are ordered longest first, then by catalog order, so the
    leftmost-first alternation of ``re`` picks CRLF over CR or LF at the same
    position and breaks equal-length ties by declaration order.
    """
    if not members:
        return None
    ordered = sorted(members, key=lambda t: (-len(t.value), _CATALOG_ORDER[t]))
    return re.compile("|".join(re.escape(t.value) for t in ordered))


class TerminatorSet:
    """An immutable subset of the terminator catalog.

    Behaves as a value: set operations return new instances, instances are
    hashable and compare equal when they hold the same terminators. CR and
    CRLF are independent members; holding one says nothing about the other.
    An empty set is valid and never matches anything.
    """

    __slots__ = ("_members",)

    def __init__(self, terminators: Iterable[Terminator] = ()) -> None:
        """Build a set from catalog entries.

        Args:
            terminators: Terminator members to include (duplicates are ignored)

        Raises:
            TypeError: If an item is not a Terminator
        """
        members = frozenset(terminators)
        for item in members:
            if not isinstance(item, Terminator):
                raise TypeError(f"Expected Terminator, got {type(item).__name__}: {item!r}")
        self._members = members

    @classmethod
    def from_names(cls, names: str | Iterable[str]) -> "TerminatorSet":
        """Build a set from terminator names.

        Names may be member names ('LINE_FEED'), display names ('Line Feed')
        or short names ('LF'). A bare string is a single name.

        Raises:
            UnknownTerminatorError: For the first name not in the catalog
        """
        if isinstance(names, str):
            names = [names]
        result = cls(parse_terminator_name(name) for name in names)
        logger.debug(f"Built terminator set from names: {result!r}")
        return result

    @classmethod
    def from_preset(cls, preset: str) -> "TerminatorSet":
        """Look up a predefined set: 'ascii', 'unicode', 'unix' or 'none'.

        Raises:
            UnknownTerminatorError: If ``preset`` is not a known preset name
        """
        result = PRESETS.get(normalize_terminator_name(preset))
        if result is None:
            raise UnknownTerminatorError(preset)
        return result

    # Queries

    def contains(self, terminator: Terminator) -> bool:
        return terminator in self._members

    def __contains__(self, terminator: object) -> bool:
        return terminator in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __bool__(self) -> bool:
        return bool(self._members)

    def __iter__(self) -> Iterator[Terminator]:
        """Iterate members in catalog order."""
        return (terminator for terminator in Terminator if terminator in self._members)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TerminatorSet):
            return NotImplemented
        return self._members == other._members

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        return f"TerminatorSet({{{', '.join(t.name for t in self)}}})"

    def names(self) -> list[str]:
        """Member names in catalog order."""
        return [terminator.name for terminator in self]

    def is_disjoint(self, other: "TerminatorSet") -> bool:
        return self._members.isdisjoint(other._members)

    def issubset(self, other: "TerminatorSet") -> bool:
        return self._members <= other._members

    def issuperset(self, other: "TerminatorSet") -> bool:
        return self._members >= other._members

    # Set algebra

    def union(self, other: "TerminatorSet | Terminator") -> "TerminatorSet":
        return TerminatorSet(self._members | _members_of(other))

    def intersection(self, other: "TerminatorSet | Terminator") -> "TerminatorSet":
        return TerminatorSet(self._members & _members_of(other))

    def difference(self, other: "TerminatorSet | Terminator") -> "TerminatorSet":
        return TerminatorSet(self._members - _members_of(other))

    def symmetric_difference(self, other: "TerminatorSet | Terminator") -> "TerminatorSet":
        return TerminatorSet(self._members ^ _members_of(other))

    def complement(self) -> "TerminatorSet":
        """Every catalog entry not in this set."""
        return TerminatorSet(t for t in Terminator if t not in self._members)

    def with_terminators(self, *terminators: Terminator) -> "TerminatorSet":
        return TerminatorSet(self._members.union(terminators))

    def without(self, *terminators: Terminator) -> "TerminatorSet":
        return TerminatorSet(self._members.difference(terminators))

    def __or__(self, other: object) -> "TerminatorSet":
        if not isinstance(other, (TerminatorSet, Terminator)):
            return NotImplemented
        return self.union(other)

    __ror__ = __or__

    def __and__(self, other: object) -> "TerminatorSet":
        if not isinstance(other, (TerminatorSet, Terminator)):
            return NotImplemented
        return self.intersection(other)

    __rand__ = __and__

    def __sub__(self, other: object) -> "TerminatorSet":
        if not isinstance(other, (TerminatorSet, Terminator)):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other: object) -> "TerminatorSet":
        if not isinstance(other, (TerminatorSet, Terminator)):
            return NotImplemented
        return self.symmetric_difference(other)

    __rxor__ = __xor__

    def __invert__(self) -> "TerminatorSet":
        return self.complement()

    # Matching support

    @property
    def search_pattern(self) -> Pattern | None:
        """Compiled regex matching any member, or None for the empty set."""
        return _compile_search_pattern(self._members)

    @property
    def initial_chars(self) -> frozenset[str]:
        """First characters of every member's sequence."""
        return frozenset(terminator.value[0] for terminator in self._members)


def _members_of(value: TerminatorSet | Terminator) -> frozenset[Terminator]:
    if isinstance(value, Terminator):
        return frozenset({value})
    # pylint: disable=protected-access
    return value._members


def as_terminator_set(value: TerminatorSet | Iterable[Terminator]) -> TerminatorSet:
    """Return ``value`` as a TerminatorSet, converting loose iterables."""
    if isinstance(value, TerminatorSet):
        return value
    if isinstance(value, Terminator):
        return TerminatorSet([value])
    return TerminatorSet(value)


EMPTY_TERMINATORS = TerminatorSet()
UNIX_TERMINATORS = TerminatorSet([Terminator.LINE_FEED])
ASCII_TERMINATORS = TerminatorSet(
    [Terminator.LINE_FEED, Terminator.CARRIAGE_RETURN, Terminator.CRLF]
)
UNICODE_TERMINATORS = TerminatorSet(Terminator)

PRESETS: dict[str, TerminatorSet] = {
    "ascii": ASCII_TERMINATORS,
    "unicode": UNICODE_TERMINATORS,
    "unix": UNIX_TERMINATORS,
    "none": EMPTY_TERMINATORS,
}
