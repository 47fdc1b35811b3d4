import random
from pathlib import Path

import pytest

from karpuz.app import WARNING_TEXT, App, Screen, build_parser, main
from karpuz.game import GameResult, speed_for
from karpuz.storage import Difficulty, GameFiles


@pytest.fixture
def files(tmp_path):
    (tmp_path / "konumlar.txt").write_text("100 120\n300 150\n500 130\n", encoding="utf-8")
    return GameFiles(tmp_path)


@pytest.fixture
def app(files):
    return App(files, size=(800, 600), rng=random.Random(7))


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.data_dir == Path(".")


def test_parser_reads_options(tmp_path):
    args = build_parser().parse_args(
        ["--data-dir", str(tmp_path), "--width", "800", "--height", "600"]
    )
    assert args.data_dir == tmp_path
    assert (args.width, args.height) == (800, 600)


def test_parser_rejects_non_positive_size():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["--width", "0"])


def test_main_rejects_bad_arguments():
    with pytest.raises(SystemExit):
        main(["--height", "-5"])


def test_start_without_difficulty_warns(app, files):
    assert app._start() is False
    assert app.warning == WARNING_TEXT
    assert app.screen is Screen.MENU
    assert not files.difficulty_path.exists()


def test_start_with_easy_saves_difficulty(app, files):
    app.selected = Difficulty.EASY
    assert app._start() is True
    assert app.screen is Screen.PLAYING
    assert files.load_difficulty() is Difficulty.EASY
    assert app.game.speed == speed_for(Difficulty.EASY)


def test_menu_clicks_select_and_quit(app):
    buttons = app._menu_buttons()
    assert app._menu_click(buttons["hard"].center) is True
    assert app.selected is Difficulty.HARD
    assert app._menu_click(buttons["quit"].center) is False


def test_menu_start_button_starts_round(app, files):
    buttons = app._menu_buttons()
    app._menu_click(buttons["easy"].center)
    app._menu_click(buttons["start"].center)
    assert app.screen is Screen.PLAYING
    assert files.difficulty_path.read_text(encoding="utf-8").splitlines()[-1] == "Kolay"


def test_pause_button_toggles_pause(app):
    app.selected = Difficulty.EASY
    app._start()
    app._advance(4500)
    assert app.game.running
    app._game_click(app._pause_rect().center)
    assert app.game.paused
    assert not app.game.running
    big = app._pause_rect()
    assert big.width > app._pause_rect().width - 1 and big.width == 400
    app._game_click(big.center)
    assert not app.game.paused


def test_full_round_reaches_result_and_back(app, files):
    app.selected = Difficulty.EASY
    app._start()
    app._advance(40000)
    assert app.screen is Screen.RESULT
    assert app.result.new_record is True
    app._dismiss_result()
    assert app.screen is Screen.MENU
    assert app.game is None
    assert app.best == files.highest_score()
    assert app.best == app.result.cut


def test_result_lines_for_new_record():
    lines = App._result_lines(GameResult(cut=5, missed=2, best=3, new_record=True))
    assert lines[1] == "Tebrikler en yüksek skora sahipsiniz !!"
    assert "Kesilen karpuz sayısı : 5" in lines


def test_result_lines_for_no_record():
    lines = App._result_lines(GameResult(cut=1, missed=4, best=9, new_record=False))
    assert lines[1] == "En yüksek skoru geçemediniz!"
    assert "en yüksek skor : 9" in lines


def test_run_headless_returns_zero(app, monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    app.frame_limit = 3
    assert app.run() == 0
    assert app.screen is Screen.MENU