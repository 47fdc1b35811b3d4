"""The game window: the start menu, the playfield and the end-of-round screen."""

from __future__ import annotations

import argparse
import enum
import os
import random
import sys
from pathlib import Path
from typing import Optional

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from karpuz.game import GAME_SECONDS, Game, GameResult  # noqa: E402
from karpuz.storage import Difficulty, GameFiles  # noqa: E402

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
FRAME_RATE = 60
HEADER_HEIGHT = 100
PAUSE_SIZE = 50
PAUSED_SIZE = 400
COUNTDOWN_SIZE = 200
COUNTDOWN_GROWTH = 500

WARNING_TEXT = "Lütfen oyunun zorluk derecesini girin!"

_BACKGROUND = (30, 90, 40)
_HEADER = (235, 235, 235)
_TEXT = (20, 20, 20)
_BLUE = (30, 60, 200)
_GREEN = (20, 140, 40)
_RED = (200, 30, 30)
_RIND = (40, 150, 50)
_STRIPE = (20, 90, 30)
_FLESH = (230, 60, 70)
_BOMB = (25, 25, 25)
_BUTTON = (250, 200, 60)
_SELECTED = (120, 200, 255)


class Screen(enum.Enum):
    """Which screen the window shows."""

    MENU = "menu"
    PLAYING = "playing"
    RESULT = "result"


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser of the game."""
    parser = argparse.ArgumentParser(
        prog="karpuz", description="Slice the falling watermelons before they drop."
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("."),
        help="directory holding the score, difficulty and position files",
    )
    parser.add_argument("--width", type=_positive_int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=_positive_int, default=DEFAULT_HEIGHT)
    return parser


class App:
    """The game window, switching between the menu, a round and its result."""

    def __init__(
        self,
        files: GameFiles,
        size: tuple[int, int] = (DEFAULT_WIDTH, DEFAULT_HEIGHT),
        rng: Optional[random.Random] = None,
        frame_limit: Optional[int] = None,
    ) -> None:
        self.files = files
        self.width, self.height = size
        self.rng = rng if rng is not None else random.Random()
        self.frame_limit = frame_limit
        self.screen = Screen.MENU
        self.selected: Optional[Difficulty] = None
        self.warning: Optional[str] = None
        self.game: Optional[Game] = None
        self.result: Optional[GameResult] = None
        self.best = files.highest_score()
        self._fonts: dict[int, pygame.font.Font] = {}
        self._clock_ms = 0
        self._countdown_seen: Optional[int] = None
        self._countdown_since = 0

    # -- menu -----------------------------------------------------------

    def _menu_buttons(self) -> dict[str, pygame.Rect]:
        cx = self.width // 2
        return {
            "easy": pygame.Rect(cx - 150, 260, 140, 40),
            "hard": pygame.Rect(cx + 10, 260, 140, 40),
            "start": pygame.Rect(cx - 100, 330, 200, 50),
            "quit": pygame.Rect(cx - 100, 400, 200, 50),
        }

    def _menu_click(self, pos: tuple[int, int]) -> bool:
        """Handle a click on the menu; return False when the player quits."""
        buttons = self._menu_buttons()
        if buttons["easy"].collidepoint(pos):
            self.selected = Difficulty.EASY
            self.warning = None
        elif buttons["hard"].collidepoint(pos):
            self.selected = Difficulty.HARD
            self.warning = None
        elif buttons["start"].collidepoint(pos):
            self._start()
        elif buttons["quit"].collidepoint(pos):
            return False
        return True

    def _start(self) -> bool:
        """Start a round with the chosen difficulty, or warn if none is chosen."""
        if self.selected is None:
            self.warning = WARNING_TEXT
            return False
        self.files.save_difficulty(self.selected)
        self.game = Game(self.files, field_height=self.height, rng=self.rng)
        self.result = None
        self.warning = None
        self.screen = Screen.PLAYING
        self._countdown_seen = None
        return True

    # -- playing --------------------------------------------------------

    def _pause_rect(self) -> pygame.Rect:
        if self.game is not None and self.game.paused:
            return pygame.Rect(
                self.width // 2 - PAUSED_SIZE // 2,
                self.height // 2 - PAUSED_SIZE // 2,
                PAUSED_SIZE,
                PAUSED_SIZE,
            )
        return pygame.Rect(self.width - PAUSE_SIZE, PAUSE_SIZE, PAUSE_SIZE, PAUSE_SIZE)

    def _game_click(self, pos: tuple[int, int]) -> int:
        """Handle a click during a round; return the points it scored."""
        if self.game is None:
            return 0
        if self._pause_rect().collidepoint(pos):
            self.game.toggle_pause()
        return self.game.click(*pos)

    def _advance(self, elapsed_ms: int) -> None:
        self._clock_ms += elapsed_ms
        if self.screen is not Screen.PLAYING or self.game is None:
            return
        result = self.game.update(elapsed_ms)
        if self.game.countdown != self._countdown_seen:
            self._countdown_seen = self.game.countdown
            self._countdown_since = self._clock_ms
        if result is not None:
            self.result = result
            self.screen = Screen.RESULT

    # -- result ---------------------------------------------------------

    @staticmethod
    def _result_lines(result: GameResult) -> list[str]:
        if result.new_record:
            title = "Tebrikler en yüksek skora sahipsiniz !!"
        else:
            title = "En yüksek skoru geçemediniz!"
        return [
            "OYUNUN SÜRESİ BİTTİ",
            title,
            f"Kesilen karpuz sayısı : {result.cut}",
            f"kaçırılan sayısı {result.missed}",
            f"en yüksek skor : {result.best}",
        ]

    def _dismiss_result(self) -> None:
        self.screen = Screen.MENU
        self.game = None
        self.best = self.files.highest_score()

    # -- main loop ------------------------------------------------------

    def run(self) -> int:
        """Open the window and play until it is closed; return the exit status."""
        pygame.init()
        try:
            surface = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption("Karpuz")
            clock = pygame.time.Clock()
            frames = 0
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        running = self._dispatch_click(event.pos) and running
                    elif event.type == pygame.KEYDOWN and self.screen is Screen.RESULT:
                        self._dismiss_result()
                self._advance(clock.tick(FRAME_RATE))
                self._draw(surface)
                pygame.display.flip()
                frames += 1
                if self.frame_limit is not None and frames >= self.frame_limit:
                    running = False
        finally:
            self._fonts.clear()
            pygame.quit()
        return 0

    def _dispatch_click(self, pos: tuple[int, int]) -> bool:
        if self.screen is Screen.MENU:
            return self._menu_click(pos)
        if self.screen is Screen.PLAYING:
            self._game_click(pos)
        else:
            self._dismiss_result()
        return True

    # -- drawing --------------------------------------------------------

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(self, surface, text, pos, size=30, color=_TEXT, center=False):
        image = self._font(size).render(text, True, color)
        rect = image.get_rect(center=pos) if center else image.get_rect(topleft=pos)
        surface.blit(image, rect)

    def _draw(self, surface: pygame.Surface) -> None:
        if self.screen is Screen.MENU:
            self._draw_menu(surface)
        elif self.screen is Screen.PLAYING:
            self._draw_game(surface)
        else:
            self._draw_result(surface)

    def _draw_menu(self, surface: pygame.Surface) -> None:
        surface.fill(_BACKGROUND)
        cx = self.width // 2
        self._text(surface, "Karpuz", (cx, 100), 80, _HEADER, center=True)
        self._text(surface, f"En yüksek skor: {self.best}", (cx, 170), 36, _HEADER, center=True)
        self._text(surface, f"Süre: {GAME_SECONDS}", (cx, 210), 36, _HEADER, center=True)
        labels = {"easy": "Kolay", "hard": "Zor", "start": "Oyna", "quit": "Çıkış"}
        chosen = {Difficulty.EASY: "easy", Difficulty.HARD: "hard"}.get(self.selected)
        for name, rect in self._menu_buttons().items():
            color = _SELECTED if name == chosen else _BUTTON
            pygame.draw.rect(surface, color, rect, border_radius=8)
            self._text(surface, labels[name], rect.center, 32, center=True)
        if self.warning:
            self._text(surface, self.warning, (cx, 490), 30, _RED, center=True)

    def _draw_game(self, surface: pygame.Surface) -> None:
        game = self.game
        surface.fill(_HEADER)
        pygame.draw.rect(
            surface, _BACKGROUND, (0, HEADER_HEIGHT, self.width, self.height - HEADER_HEIGHT)
        )
        self._text(surface, "Süre : ", (10, 60), 30)
        self._text(surface, str(game.remaining_seconds), (90, 60), 30, _BLUE)
        self._text(surface, "Kacirilan karpuz sayisi:", (self.width - 280, 10), 26)
        self._text(surface, str(game.missed), (self.width - 80, 10), 30, _RED)
        self._text(surface, "Kesilen karpuz sayisi:", (self.width - 280, 60), 26)
        self._text(surface, str(game.cut_count), (self.width - 80, 60), 30, _GREEN)
        for melon in game.melons:
            self._draw_melon(surface, melon)
        self._draw_pause(surface)
        if game.combo is not None:
            self._text(surface, f"+{game.combo}", (self.width - 200, 120), 110, _RED)
            self._text(surface, "Tebrikler!", (20, 120), 80, _BUTTON)
        if game.countdown is not None:
            self._draw_countdown(surface, game.countdown)

    def _draw_melon(self, surface: pygame.Surface, melon) -> None:
        rect = pygame.Rect(melon.x, melon.y, melon.width, melon.height)
        if melon.is_bomb and not melon.cut:
            pygame.draw.circle(surface, _BOMB, rect.center, rect.width // 2)
            pygame.draw.line(surface, _BUTTON, rect.midtop, (rect.right, rect.top - 6), 3)
        elif melon.cut:
            left = pygame.Rect(rect.x - 4, rect.y, rect.width // 2, rect.height)
            right = pygame.Rect(rect.centerx + 4, rect.y, rect.width // 2, rect.height)
            for half in (left, right):
                pygame.draw.ellipse(surface, _FLESH, half)
                pygame.draw.ellipse(surface, _RIND, half, 3)
        else:
            pygame.draw.ellipse(surface, _RIND, rect)
            for offset in (-8, 0, 8):
                pygame.draw.line(
                    surface,
                    _STRIPE,
                    (rect.centerx + offset, rect.top + 3),
                    (rect.centerx + offset, rect.bottom - 3),
                    2,
                )

    def _draw_pause(self, surface: pygame.Surface) -> None:
        rect = self._pause_rect()
        pygame.draw.rect(surface, _BUTTON, rect, border_radius=rect.width // 6)
        bar_w = rect.width // 6
        bar_h = rect.height // 2
        top = rect.centery - bar_h // 2
        pygame.draw.rect(surface, _TEXT, (rect.centerx - bar_w * 2, top, bar_w, bar_h))
        pygame.draw.rect(surface, _TEXT, (rect.centerx + bar_w, top, bar_w, bar_h))

    def _draw_countdown(self, surface: pygame.Surface, value: int) -> None:
        label = str(value) if value > 0 else "GO"
        progress = min(max(self._clock_ms - self._countdown_since, 0) / 1000, 1.0)
        side = int(COUNTDOWN_SIZE + COUNTDOWN_GROWTH * progress)
        image = self._font(COUNTDOWN_SIZE).render(label, True, _TEXT)
        scale = side / max(image.get_height(), 1)
        image = pygame.transform.smoothscale(
            image, (max(int(image.get_width() * scale), 1), side)
        )
        surface.blit(image, image.get_rect(center=(self.width // 2, self.height // 2)))

    def _draw_result(self, surface: pygame.Surface) -> None:
        surface.fill(_BACKGROUND)
        cx = self.width // 2
        for row, line in enumerate(self._result_lines(self.result)):
            self._text(surface, line, (cx, 150 + row * 50), 40, _HEADER, center=True)
        self._text(surface, "Devam etmek için tıklayın", (cx, 450), 30, _BUTTON, center=True)


def main(argv: Optional[list[str]] = None) -> int:
    """Start the game from the command line; return the exit status."""
    args = build_parser().parse_args(argv)
    app = App(GameFiles(args.data_dir), size=(args.width, args.height))
    try:
        return app.run()
    except (OSError, ValueError, pygame.error) as exc:
        print(f"karpuz: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())