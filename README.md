# mazerunner

This is a small maze game built on `pygame`. You pick a difficulty, and the game carves a fresh maze. You then steer from the top-left corner to the green exit in the opposite corner. Red enemies walk square patrol routes, and the game is over if one reaches your cell. Every maze you finish adds to your score. The best score is kept in a file between sessions.

## Installing

```
pip install .
```

This installs `pygame`, which opens the window, draws the game and reads the keyboard and mouse.

## Playing

```
mazerunner
```

The command also accepts an option:

```
mazerunner --high-score-file PATH
```

This keeps the high score in `PATH` instead of `highscore.dat` in the working directory.

On the menu, click **Easy**, **Medium** or **Hard**. The levels differ as follows:

| Level  | Maze size | Enemies | Multiplier |
|--------|-----------|---------|------------|
| Easy   | 15 × 15   | 2       | 1.0        |
| Medium | 21 × 21   | 4       | 1.5        |
| Hard   | 31 × 31   | 6       | 2.0        |

The multiplier sets how fast enemies move along their patrol, and it scales the score for each maze. After the maze is carved, extra random interior cells are opened as shortcuts. Their number is the maze area divided by 8 on Easy, 10 on Medium and 15 on Hard.

The upper right corner of the screen shows a minimap of the maze. The top left corner shows the score, the time, the moves and the high score.

| Key               | Action                                        |
|-------------------|-----------------------------------------------|
| W / Up arrow      | move up                                       |
| S / Down arrow    | move down                                     |
| A / Left arrow    | move left                                     |
| D / Right arrow   | move right                                    |
| Space             | toggle the `show_solution` flag               |
| R                 | start a new game (score reset, new maze)      |
| Esc               | pause / resume; on the game-over screen, menu |

### Scoring

A finished maze is worth `1000 × multiplier` points, with two deductions:

- `10 × multiplier` points for each second spent.
- `5 × multiplier` points for each move made.

A maze never scores below zero. After each maze, the time and the move count start again from zero and a new maze is carved.

Whenever the score passes the high score, it is saved at once as a single 4-byte integer. If the file cannot be read, the high score starts at 0. If it cannot be written, the save is skipped silently.

## Using it as a library

The rules live in `mazerunner.game` and need no window:

```python
import random
from mazerunner.game import MazeGame, Difficulty, Key, HighScoreStore

game = MazeGame(HighScoreStore("highscore.dat"), random.Random(1))
game.select_difficulty(Difficulty.EASY)
game.handle_key(Key.DOWN)
game.update(0.016)
print(game.status_text())
```

The other modules can be used on their own:

- **`mazerunner.maze`**
  - `carve_maze(size, extra_paths, rng)` returns a `Maze`. `str()` of a `Maze` shows `#` for walls and spaces for open cells.
  - `random_open_cell(maze, rng)` picks a free open cell.
- **`mazerunner.enemy`**: `Enemy`, a patrolling enemy.
- **`mazerunner.powerup`**: `PowerUp` and `PowerUpType`, timed power-ups that expire after 10 seconds.
- **`mazerunner.particles`**: `ParticleSystem`, a fading particle effect with gravity.
- **`mazerunner.button`**: `Button`, a clickable menu button.
- **`mazerunner.app`**: `App`, which connects a `MazeGame` to a `pygame` window.

## What it does not do

- **Power-ups:** `MazeGame.power_ups` starts empty and nothing places power-ups in the maze. Power-ups therefore never appear in play and cannot be collected.
- **Solution overlay:** Space toggles `show_solution`, but no solution path is computed or drawn.
- **Particles:** the particle system is not used by the game screen.
- **Enemy movement:** enemies follow their square route without regard to walls.

## Running the tests

```
pip install .[test]
pytest
```