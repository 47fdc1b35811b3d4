"""The playfield: spawning, falling, slicing, the clock and the countdown."""

from __future__ import annotations

import functools
import random
from dataclasses import dataclass
from typing import Callable, Optional

from karpuz.melon import Melon
from karpuz.storage import Difficulty, GameFiles

GAME_SECONDS = 30
COUNTDOWN_START = 3
COUNTDOWN_STEP_MS = 1000
COMBO_SHOW_MS = 2000
DEFAULT_FIELD_HEIGHT = 720


@dataclass(frozen=True)
class Speed:
    """Intervals, in milliseconds, of the game's periodic events."""

    clock_ms: int
    move_ms: int
    bomb_ms: int
    spawn_ms: int


def speed_for(difficulty: Difficulty) -> Speed:
    """Return the timer intervals for a difficulty."""
    if Difficulty(difficulty) is Difficulty.EASY:
        return Speed(clock_ms=1000, move_ms=10, bomb_ms=5000, spawn_ms=400)
    return Speed(clock_ms=1000, move_ms=5, bomb_ms=7000, spawn_ms=600)


@dataclass(frozen=True)
class GameResult:
    """Outcome of a finished game; ``best`` is the record before this game."""

    cut: int
    missed: int
    best: int
    new_record: bool


class Game:
    """State of one round, driven by :meth:`update` with elapsed time.

    A round opens with a countdown (3, 2, 1, go), one step per second;
    only then do the clock, movement and spawning run.
    """

    def __init__(
        self,
        files: GameFiles,
        field_height: int = DEFAULT_FIELD_HEIGHT,
        speed: Optional[Speed] = None,
        rng: Optional[random.Random] = None,
        duration: int = GAME_SECONDS,
    ) -> None:
        self.files = files
        self.field_height = field_height
        self.speed = speed if speed is not None else speed_for(files.load_difficulty())
        self.rng = rng if rng is not None else random.Random()
        self.duration = duration
        self.melons: list[Melon] = []
        self.cut_count = 0
        self.missed = 0
        self.elapsed_seconds = 0
        self.paused = False
        self.running = False
        self.result: Optional[GameResult] = None
        self.countdown: Optional[int] = None
        self.combo: Optional[int] = None
        self._now = 0
        self._due: dict[str, int] = {}
        self._countdown_due: Optional[int] = None
        self._combo_due: Optional[int] = None
        self._start_countdown()

    @property
    def remaining_seconds(self) -> int:
        return self.duration - self.elapsed_seconds

    @property
    def finished(self) -> bool:
        return self.result is not None

    # -- spawning -------------------------------------------------------

    def spawn_melon(self) -> Melon:
        """Add a watermelon at a random spawn position and return it."""
        x, y = self.files.random_position(self.rng)
        melon = Melon(x, y)
        self.melons.append(melon)
        return melon

    def spawn_bomb(self) -> Melon:
        """Add a bomb at a random spawn position and return it."""
        x, y = self.files.random_position(self.rng)
        bomb = Melon(x, y, is_bomb=True)
        self.melons.append(bomb)
        return bomb

    # -- periodic events ------------------------------------------------

    def move(self) -> int:
        """Let everything fall one step; drop what left the field.

        Returns how many were missed in this step.
        """
        kept = []
        missed = 0
        for melon in self.melons:
            melon.fall()
            if melon.y > self.field_height:
                missed += 1
            else:
                kept.append(melon)
        self.missed += missed
        self.melons = kept
        return missed

    def tick_clock(self) -> Optional[GameResult]:
        """Count one second; at the end of the round, settle the score."""
        self.elapsed_seconds += 1
        if self.elapsed_seconds != self.duration:
            return None
        self._stop_timers()
        best = self.files.highest_score()
        new_record = not best > self.cut_count
        if new_record:
            self.files.record_score(self.cut_count)
        self.result = GameResult(self.cut_count, self.missed, best, new_record)
        return self.result

    def sweep_cut(self) -> None:
        """Age the sliced pieces; remove them after three seconds, bombs at once."""
        kept = []
        skip_next = False
        for melon in self.melons:
            # Removing an item passes over the one right after it this round.
            if skip_next:
                skip_next = False
                kept.append(melon)
                continue
            if melon.cut:
                melon.advance()
                if melon.seconds == 3 or melon.is_bomb:
                    skip_next = True
                    continue
            kept.append(melon)
        self.melons = kept

    # -- input ----------------------------------------------------------

    def click(self, x: int, y: int) -> int:
        """Slice whatever lies under the point; return the points gained.

        A sliced bomb slices everything on the field, scoring one point
        for each object plus one for the bomb itself.
        """
        if not self.running:
            return 0
        gained = 0
        for melon in self.melons:
            if melon.cut or not melon.contains(x, y):
                continue
            melon.cut = True
            if melon.is_bomb:
                for other in self.melons:
                    other.cut = True
                gained += len(self.melons) + 1
                self.combo = len(self.melons)
                self._combo_due = self._now + COMBO_SHOW_MS
                break
            gained += 1
        self.cut_count += gained
        return gained

    def toggle_pause(self) -> bool:
        """Pause, or resume through a fresh countdown; return the paused state."""
        if self.finished:
            return self.paused
        if not self.paused:
            self.paused = True
            self._stop_timers()
            self.countdown = None
            self._countdown_due = None
        else:
            self.paused = False
            self._start_countdown()
        return self.paused

    # -- time -----------------------------------------------------------

    def update(self, elapsed_ms: int) -> Optional[GameResult]:
        """Advance time; return the result if the round ended meanwhile."""
        if elapsed_ms < 0:
            raise ValueError("elapsed time cannot be negative")
        was_finished = self.finished
        target = self._now + elapsed_ms
        while True:
            event = min(self._pending_events(), default=None, key=lambda e: (e[0], e[1]))
            if event is None or event[0] > target:
                break
            self._now = event[0]
            event[2]()
        self._now = target
        return None if was_finished else self.result

    def _timer_table(self) -> dict[str, tuple[int, Callable[[], object]]]:
        return {
            "clock": (self.speed.clock_ms, self._on_clock),
            "move": (self.speed.move_ms, self.move),
            "bomb": (self.speed.bomb_ms, self.spawn_bomb),
            "spawn": (self.speed.spawn_ms, self.spawn_melon),
        }

    def _pending_events(self) -> list[tuple[int, int, Callable[[], None]]]:
        events = []
        if self._countdown_due is not None:
            events.append((self._countdown_due, 0, self._advance_countdown))
        if self._combo_due is not None:
            events.append((self._combo_due, 1, self._hide_combo))
        for rank, name in enumerate(self._timer_table(), start=2):
            if name in self._due:
                events.append((self._due[name], rank, functools.partial(self._fire, name)))
        return events

    def _fire(self, name: str) -> None:
        interval, handler = self._timer_table()[name]
        self._due[name] += interval
        handler()

    def _on_clock(self) -> None:
        self.tick_clock()
        self.sweep_cut()

    def _start_countdown(self) -> None:
        self.countdown = COUNTDOWN_START
        self._countdown_due = self._now + COUNTDOWN_STEP_MS

    def _advance_countdown(self) -> None:
        if self.countdown is not None and self.countdown > 0:
            self.countdown -= 1
            self._countdown_due = self._now + COUNTDOWN_STEP_MS
        else:
            self.countdown = None
            self._countdown_due = None
            self._start_timers()

    def _hide_combo(self) -> None:
        self.combo = None
        self._combo_due = None

    def _start_timers(self) -> None:
        self.running = True
        self._due = {
            name: self._now + interval
            for name, (interval, _) in self._timer_table().items()
        }

    def _stop_timers(self) -> None:
        self.running = False
        self._due = {}