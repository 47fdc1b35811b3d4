"""Falling objects of the game: watermelons and bombs."""

from __future__ import annotations

from dataclasses import dataclass

MELON_SIZE = 35
MELON_STEP = 1
BOMB_STEP = 3


@dataclass
class Melon:
    """A watermelon (or a bomb) falling down the playfield.

    ``cut`` tells whether it has been sliced, ``seconds`` counts the clock
    ticks since it was sliced, and ``is_bomb`` marks a bomb.
    """

    x: int
    y: int
    width: int = MELON_SIZE
    height: int = MELON_SIZE
    cut: bool = False
    seconds: int = 0
    is_bomb: bool = False

    def toggle_cut(self) -> None:
        """Flip the cut state."""
        self.cut = not self.cut

    def advance(self) -> None:
        """Count one more second since the melon was cut."""
        self.seconds += 1

    def fall(self) -> None:
        """Move one step down unless cut; bombs fall faster."""
        if self.cut:
            return
        self.y += BOMB_STEP if self.is_bomb else MELON_STEP

    def contains(self, px: int, py: int) -> bool:
        """Return True if the point lies on the melon, edges included."""
        return (
            self.x <= px <= self.x + self.width
            and self.y <= py <= self.y + self.height
        )