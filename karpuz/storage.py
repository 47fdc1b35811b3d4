"""Files the game keeps its scores, difficulty and spawn positions in."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from pathlib import Path

SCORES_FILE = "skorlar.txt"
DIFFICULTY_FILE = "kolayzor.txt"
POSITIONS_FILE = "konumlar.txt"


class Difficulty(enum.Enum):
    """Game difficulty, stored by its label."""

    EASY = "Kolay"
    HARD = "Zor"


def _to_int(text: str) -> int:
    """Parse an integer the lenient way: anything unparsable is 0."""
    try:
        return int(text)
    except ValueError:
        return 0


def _read_lines(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


@dataclass(frozen=True)
class GameFiles:
    """The data files of the game, all kept in one directory."""

    directory: Path

    @property
    def scores_path(self) -> Path:
        return Path(self.directory) / SCORES_FILE

    @property
    def difficulty_path(self) -> Path:
        return Path(self.directory) / DIFFICULTY_FILE

    @property
    def positions_path(self) -> Path:
        return Path(self.directory) / POSITIONS_FILE

    def highest_score(self) -> int:
        """Return the best recorded score, or -1 when there is none."""
        try:
            lines = _read_lines(self.scores_path)
        except FileNotFoundError:
            return -1
        return max((_to_int(line) for line in lines), default=-1, key=int) if lines else -1

    def record_score(self, score: int) -> None:
        """Append a score on a new line of the scores file."""
        with self.scores_path.open("a", encoding="utf-8") as out:
            out.write(f"\n{int(score)}")

    def save_difficulty(self, difficulty: Difficulty) -> None:
        """Append the chosen difficulty on a new line."""
        with self.difficulty_path.open("a", encoding="utf-8") as out:
            out.write(f"\n{Difficulty(difficulty).value}")

    def load_difficulty(self) -> Difficulty:
        """Return the last saved difficulty; anything but easy counts as hard."""
        try:
            lines = _read_lines(self.difficulty_path)
        except FileNotFoundError:
            return Difficulty.HARD
        last = lines[-1] if lines else ""
        return Difficulty.EASY if last == Difficulty.EASY.value else Difficulty.HARD

    def positions(self) -> list[tuple[int, int]]:
        """Return every spawn position listed as ``x y`` per line."""
        result = []
        for number, line in enumerate(_read_lines(self.positions_path), start=1):
            fields = line.split(" ")
            if len(fields) < 2:
                raise ValueError(f"line {number} of {self.positions_path} is not 'x y'")
            result.append((_to_int(fields[0]), _to_int(fields[1])))
        return result

    def random_position(self, rng: random.Random) -> tuple[int, int]:
        """Pick one of the spawn positions at random."""
        choices = self.positions()
        if not choices:
            raise ValueError(f"no spawn positions in {self.positions_path}")
        return rng.choice(choices)