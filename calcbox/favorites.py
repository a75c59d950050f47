"""
Favorites and Ratings Store

Caller-owned state for which calculators a user has starred and how they
rated them. The calculation library never touches this; the API injects a
store through a dependency so tests can swap it out.
"""

from typing import Dict, List, Optional, Protocol, Set

MIN_RATING = 1
MAX_RATING = 5


class FavoritesStore(Protocol):
    def is_favorite(self, calculator_id: str) -> bool: ...

    def toggle(self, calculator_id: str) -> bool: ...

    def list(self) -> List[str]: ...

    def rate(self, calculator_id: str, stars: int) -> None: ...

    def rating(self, calculator_id: str) -> Optional[int]: ...


class InMemoryFavoritesStore:
    """Process-local store; state lives only as long as the instance."""

    def __init__(self):
        self._favorites: Set[str] = set()
        self._order: List[str] = []
        self._ratings: Dict[str, int] = {}

    def is_favorite(self, calculator_id: str) -> bool:
        return calculator_id in self._favorites

    def toggle(self, calculator_id: str) -> bool:
        """Flip favorite state; returns the new state."""
        if calculator_id in self._favorites:
            self._favorites.remove(calculator_id)
            self._order.remove(calculator_id)
            return False
        self._favorites.add(calculator_id)
        self._order.append(calculator_id)
        return True

    def list(self) -> List[str]:
        """Favorites in the order they were added."""
        return list(self._order)

    def rate(self, calculator_id: str, stars: int) -> None:
        if isinstance(stars, bool) or not isinstance(stars, int) or not MIN_RATING <= stars <= MAX_RATING:
            raise ValueError(f"rating must be an integer from {MIN_RATING} to {MAX_RATING}")
        self._ratings[calculator_id] = stars

    def rating(self, calculator_id: str) -> Optional[int]:
        return self._ratings.get(calculator_id)
