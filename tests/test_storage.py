import random

import pytest

from karpuz.storage import (
    DIFFICULTY_FILE,
    POSITIONS_FILE,
    SCORES_FILE,
    Difficulty,
    GameFiles,
)


@pytest.fixture
def files(tmp_path):
    return GameFiles(tmp_path)


@pytest.mark.parametrize(
    "difficulty, label",
    [(Difficulty.EASY, "Kolay"), (Difficulty.HARD, "Zor")],
)
def test_difficulty_labels_written(files, tmp_path, difficulty, label):
    files.save_difficulty(difficulty)
    text = (tmp_path / DIFFICULTY_FILE).read_text(encoding="utf-8")
    assert text.endswith("\n" + label)
    assert files.load_difficulty() is Difficulty(label)


def test_highest_score_without_file(files):
    assert files.highest_score() == -1


def test_highest_score_picks_maximum(files, tmp_path):
    (tmp_path / SCORES_FILE).write_text("4\n17\n9\n", encoding="utf-8")
    assert files.highest_score() == 17


def test_unparsable_lines_count_as_zero(files, tmp_path):
    (tmp_path / SCORES_FILE).write_text("abc\n", encoding="utf-8")
    assert files.highest_score() == 0


def test_record_score_round_trip(files):
    for score in (3, 12, 7):
        files.record_score(score)
    assert files.highest_score() == 12


def test_record_score_appends_on_new_line(files, tmp_path):
    files.record_score(8)
    files.record_score(5)
    assert files.highest_score() == 8
    assert (tmp_path / SCORES_FILE).read_text(encoding="utf-8") == "\n8\n5"


def test_difficulty_missing_file_is_hard(files):
    assert files.load_difficulty() is Difficulty.HARD


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_difficulty_round_trip(files, difficulty):
    files.save_difficulty(difficulty)
    assert files.load_difficulty() is difficulty


def test_last_saved_difficulty_wins(files, tmp_path):
    files.save_difficulty(Difficulty.EASY)
    files.save_difficulty(Difficulty.HARD)
    files.save_difficulty(Difficulty.EASY)
    assert files.load_difficulty() is Difficulty.EASY
    assert (tmp_path / DIFFICULTY_FILE).read_text(encoding="utf-8").endswith("\nKolay")


def test_unknown_difficulty_is_hard(files, tmp_path):
    (tmp_path / DIFFICULTY_FILE).write_text("\nOrta", encoding="utf-8")
    assert files.load_difficulty() is Difficulty.HARD


def test_positions_parsed(files, tmp_path):
    (tmp_path / POSITIONS_FILE).write_text("100 120\n300 140\n", encoding="utf-8")
    assert files.positions() == [(100, 120), (300, 140)]


def test_positions_bad_line(files, tmp_path):
    (tmp_path / POSITIONS_FILE).write_text("100\n", encoding="utf-8")
    with pytest.raises(ValueError):
        files.positions()


def test_positions_missing_file(files):
    with pytest.raises(FileNotFoundError):
        files.positions()


def test_random_position_is_listed(files, tmp_path):
    (tmp_path / POSITIONS_FILE).write_text("1 2\n3 4\n5 6", encoding="utf-8")
    rng = random.Random(0)
    listed = set(files.positions())
    picks = {files.random_position(rng) for _ in range(50)}
    assert picks <= listed
    assert len(picks) > 1


def test_random_position_empty_file(files, tmp_path):
    (tmp_path / POSITIONS_FILE).write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        files.random_position(random.Random(0))