"""
Climb Collection Store

In-memory list of climbs owned by the caller (the shell, or a test). Climbs
are identified by (name, location), compared case-insensitively.

Single-threaded: there is no locking. A concurrent front-end would need one
exclusive lock around the whole collection.
"""
import logging
from typing import Iterable, Iterator, List, Optional

from climblog.exceptions import ClimbNotFoundError, DuplicateClimbError
from climblog.schemas.climb import Attempt, Climb

logger = logging.getLogger(__name__)


class ClimbCollection:
    """Ordered collection of climbs with unique identity keys."""

    def __init__(self, climbs: Optional[Iterable[Climb]] = None) -> None:
        self._climbs: List[Climb] = []
        for climb in climbs or ():
            self.insert(climb)

    def __len__(self) -> int:
        return len(self._climbs)

    def __iter__(self) -> Iterator[Climb]:
        return iter(self._climbs)

    def __getitem__(self, index: int) -> Climb:
        return self._climbs[index]

    @property
    def climbs(self) -> List[Climb]:
        """Snapshot of the climbs in collection order."""
        return list(self._climbs)

    def find(self, name: str, location: str) -> Optional[int]:
        """
        Position of the climb with this identity.

        Returns:
            Index into the collection, or None if absent
        """
        for index, climb in enumerate(self._climbs):
            if climb.matches(name, location):
                return index
        return None

    def exists(self, name: str, location: str) -> bool:
        return self.find(name, location) is not None

    def get(self, name: str, location: str) -> Climb:
        """
        Climb with this identity.

        Raises:
            ClimbNotFoundError: If no climb matches
        """
        index = self.find(name, location)
        if index is None:
            raise ClimbNotFoundError(name, location)
        return self._climbs[index]

    def insert(self, climb: Climb) -> None:
        """
        Append a climb.

        Raises:
            DuplicateClimbError: If the identity key is already present
        """
        if self.exists(climb.name, climb.location):
            raise DuplicateClimbError(climb.name, climb.location)
        self._climbs.append(climb)
        logger.debug(f"Inserted climb: {climb.name} at {climb.location}")

    def remove_at(self, index: int) -> Climb:
        """Remove and return the climb at a position (IndexError if none)."""
        climb = self._climbs.pop(index)
        logger.debug(f"Removed climb: {climb.name} at {climb.location}")
        return climb

    def remove(self, name: str, location: str) -> Climb:
        """
        Remove the climb with this identity.

        Raises:
            ClimbNotFoundError: If no climb matches; the collection is unchanged
        """
        index = self.find(name, location)
        if index is None:
            raise ClimbNotFoundError(name, location)
        return self.remove_at(index)

    def clear(self) -> None:
        logger.debug(f"Clearing {len(self._climbs)} climbs")
        self._climbs.clear()

    def append_attempt(self, index: int, attempt: Attempt) -> None:
        """Append an attempt to the climb at a position."""
        if not isinstance(attempt, Attempt):
            raise TypeError(f"expected Attempt, got {type(attempt).__name__}")
        climb = self._climbs[index]
        climb.attempts.append(attempt)
        logger.debug(
            f"Added attempt to {climb.name} at {climb.location} "
            f"({len(climb.attempts)} total)"
        )
