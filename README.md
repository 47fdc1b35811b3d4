# karpuz

karpuz is a short arcade game about slicing watermelons. Melons fall down the playfield, and you click them to cut them.

- A round lasts 30 seconds. The top of the window shows the time left, the number of melons cut and the number missed. A melon counts as missed once it falls past the bottom of the window.
- Each round opens with a 3, 2, 1, GO countdown, one step per second. The round starts only after the countdown.
- Every few seconds a bomb falls. It moves three times as fast as a melon. When you cut a bomb, everything on the field is cut. You score one point for each object plus one for the bomb. The bonus is shown as `+N` for two seconds.
- Cut pieces stay on screen for three seconds and then disappear. A cut bomb disappears on the next clock tick.
- The pause button sits in the top-right corner. Clicking it stops everything and shows a large pause button in the middle of the screen. Clicking that button again resumes the game after a fresh countdown.
- There are two difficulty levels:
  - **Kolay** (easy): objects move every 10 ms, a melon appears every 400 ms and a bomb every 5 s.
  - **Zor** (hard): objects move every 5 ms, a melon appears every 600 ms and a bomb every 7 s.
- When a round ends, the result screen shows:
  - whether you reached the best score,
  - your cut and missed counts,
  - the best score as it stood before the round.

  If you matched or beat the best score, your score is added to the scores file. Click or press a key to go back to the menu.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Playing

```
karpuz
```

This opens the menu. The menu shows the best score so far and the round length. To play:

1. Choose **Kolay** or **Zor**.
2. Press **Oyna** to start. If you press it before choosing a difficulty, the menu shows a warning.

**Çıkış** closes the game.

Options:

- `--data-dir DIR`: directory that holds the data files (default: the current directory)
- `--width N`, `--height N`: window size in pixels (default 1280×720)

If a data file cannot be read, the command prints the error and exits with status 1. The same happens if the positions file lists no positions.

## Data files

All data files are plain text and are kept in the data directory:

- `konumlar.txt`: spawn positions, one `x y` pair per line. Each new melon or bomb appears at one of these positions, picked at random. You must provide this file, because the game does not create it.
- `skorlar.txt`: recorded scores, one per line. The highest is the best score, or -1 when there is none.
- `kolayzor.txt`: the difficulty chosen for each round, appended as `Kolay` or `Zor`. The last line sets the speed of the round.

## Using the pieces

You can drive the game logic without a window:

- `karpuz.storage.GameFiles(directory)` reads and writes the data files:
  - `highest_score()` and `record_score(score)`
  - `save_difficulty(difficulty)` and `load_difficulty()`, using `Difficulty.EASY` or `Difficulty.HARD`
  - `positions()` and `random_position(rng)`
- `karpuz.game.Game(files, field_height=720, speed=None, rng=None, duration=30)` holds the state of one round:
  - `update(elapsed_ms)` advances time and returns a `GameResult` when the round ends.
  - `click(x, y)` slices and returns the points gained.
  - `toggle_pause()` pauses or resumes.
  - `speed_for(difficulty)` returns the timer intervals as a `Speed`.
- `karpuz.melon.Melon` is one falling object, either a melon or a bomb. It provides `fall()`, `contains(px, py)`, `toggle_cut()` and `advance()`.
- `karpuz.app.App` is the game window, and `karpuz.app.main(argv=None)` is the command.

## What it does not do

- The game uses no image files and plays no sound. Melons, bombs, the pause button and the countdown are drawn as simple shapes and text.
- It does not create spawn positions on its own. These come only from `konumlar.txt`.

## Running the tests

```
pytest
```