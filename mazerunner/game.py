"""Game rules: difficulty, movement, scoring, enemies and high scores."""

from __future__ import annotations

import random
import struct
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from .enemy import Enemy
from .geometry import BASE_CELL_SIZE, Point
from .maze import Maze, carve_maze, random_open_cell
from .powerup import PowerUp

_SCORE_FORMAT = "=i"
DEFAULT_HIGH_SCORE_FILE = "highscore.dat"


class GameState(Enum):
    DIFFICULTY_SELECT = auto()
    PLAYING = auto()
    PAUSED = auto()
    GAME_OVER = auto()


class Difficulty(Enum):
    """Difficulty levels: maze size, shortcut divisor, enemy count, multiplier."""

    EASY = (15, 8, 2, 1.0)
    MEDIUM = (21, 10, 4, 1.5)
    HARD = (31, 15, 6, 2.0)

    @property
    def size(self) -> int:
        return self.value[0]

    @property
    def extra_paths(self) -> int:
        return self.size * self.size // self.value[1]

    @property
    def enemy_count(self) -> int:
        return self.value[2]

    @property
    def multiplier(self) -> float:
        """Scales enemy speed, enemy time and the score for a solved maze."""
        return self.value[3]


class Key(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SPACE = auto()
    ESCAPE = auto()
    R = auto()


_MOVES = {
    Key.UP: Point(0, -1),
    Key.DOWN: Point(0, 1),
    Key.LEFT: Point(-1, 0),
    Key.RIGHT: Point(1, 0),
}


@dataclass
class GameStats:
    score: int = 0
    move_count: int = 0
    time_elapsed: float = 0.0
    high_score: int = 0
    power_ups_collected: int = 0

    def reset_for_new_game(self) -> None:
        """Clear per-game counters; the high score is kept."""
        self.score = 0
        self.move_count = 0
        self.time_elapsed = 0.0
        self.power_ups_collected = 0


class HighScoreStore:
    """Keeps the high score as a single binary integer in a file."""

    def __init__(self, path: str | Path = DEFAULT_HIGH_SCORE_FILE) -> None:
        self.path = Path(path)

    def load(self) -> int:
        """Return the stored high score, or 0 if it cannot be read."""
        try:
            data = self.path.read_bytes()
        except OSError:
            return 0
        size = struct.calcsize(_SCORE_FORMAT)
        if len(data) < size:
            return 0
        return struct.unpack(_SCORE_FORMAT, data[:size])[0]

    def save(self, score: int) -> None:
        """Store the score; failures are ignored."""
        try:
            self.path.write_bytes(struct.pack(_SCORE_FORMAT, score))
        except (OSError, struct.error):
            pass


class MazeGame:
    """The state of one play session, driven by keys and elapsed time."""

    def __init__(self, store: HighScoreStore | None = None, rng: random.Random | None = None) -> None:
        self.store = store if store is not None else HighScoreStore()
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState.DIFFICULTY_SELECT
        self.difficulty = Difficulty.MEDIUM
        self.show_solution = False
        self.cell_size = BASE_CELL_SIZE
        self.stats = GameStats(high_score=self.store.load())
        self.maze: Maze | None = None
        self.player_pos = Point()
        self.end_pos = Point()
        self.enemies: list[Enemy] = []
        self.power_ups: list[PowerUp] = []

    def select_difficulty(self, difficulty: Difficulty) -> None:
        """Choose a difficulty and begin playing."""
        self.difficulty = difficulty
        self.state = GameState.PLAYING
        self.start_new_game()

    def start_new_game(self) -> None:
        self.stats.reset_for_new_game()
        self.generate_maze()

    def generate_maze(self) -> None:
        """Build a fresh maze and place the player and the enemies."""
        level = self.difficulty
        self.maze = carve_maze(level.size, level.extra_paths, self.rng)
        self.player_pos = self.maze.start
        self.end_pos = self.maze.end
        self.enemies = [
            Enemy(random_open_cell(self.maze, self.rng), level.multiplier)
            for _ in range(level.enemy_count)
        ]

    def handle_key(self, key: Key) -> None:
        """React to one key press according to the current state."""
        if self.state is GameState.GAME_OVER:
            if key is Key.ESCAPE:
                self.state = GameState.DIFFICULTY_SELECT
                self.stats.reset_for_new_game()
            return
        if self.state is GameState.PAUSED:
            if key is Key.ESCAPE:
                self.state = GameState.PLAYING
            return
        if self.state is not GameState.PLAYING:
            return

        step = _MOVES.get(key)
        if key is Key.SPACE:
            self.show_solution = not self.show_solution
        elif key is Key.ESCAPE:
            self.state = GameState.PAUSED
        elif key is Key.R:
            self.start_new_game()

        if step is None:
            return
        target = self.player_pos + step
        if self.is_valid_move(target):
            self.move_player(target)
            if target == self.end_pos:
                self.update_score()
                self.generate_maze()
                self.stats.move_count = 0
                self.stats.time_elapsed = 0.0

    def update(self, delta_time: float) -> None:
        """Advance time, move enemies and end the game on a collision."""
        if self.state is not GameState.PLAYING:
            return
        self.stats.time_elapsed += delta_time
        scaled = delta_time * self.difficulty.multiplier
        for enemy in self.enemies:
            enemy.update(scaled)
            if enemy.check_collision(self.player_pos):
                self.handle_game_over()
                return
        for power_up in self.power_ups:
            power_up.update(delta_time)

    def update_score(self) -> None:
        """Award points for a solved maze, less for time and moves spent."""
        multiplier = self.difficulty.multiplier
        maze_score = int(1000 * multiplier)
        maze_score -= int(self.stats.time_elapsed * (10 * multiplier))
        maze_score -= int(self.stats.move_count * (5 * multiplier))
        self.stats.score += max(0, maze_score)
        self._record_high_score()

    def handle_game_over(self) -> None:
        self._record_high_score()
        self.state = GameState.GAME_OVER

    def _record_high_score(self) -> None:
        if self.stats.score > self.stats.high_score:
            self.stats.high_score = self.stats.score
            self.store.save(self.stats.high_score)

    def is_valid_move(self, pos: Point) -> bool:
        return self.maze is not None and self.maze.is_open(pos)

    def move_player(self, pos: Point) -> None:
        self.player_pos = pos
        self.stats.move_count += 1

    def status_text(self) -> str:
        """The score panel shown while playing."""
        text = (
            f"Score: {self.stats.score}\n"
            f"Time: {int(self.stats.time_elapsed)}s\n"
            f"Moves: {self.stats.move_count}\n"
            f"High Score: {self.stats.high_score}"
        )
        if self.state is GameState.PAUSED:
            text += "\n\nPAUSED"
        return text

    def game_over_text(self) -> str:
        return f"Game Over!\nFinal Score: {self.stats.score}\nPress ESC to return to menu"