import random

import pytest

from mazerunner.enemy import Enemy
from mazerunner.game import (
    Difficulty,
    GameState,
    GameStats,
    HighScoreStore,
    Key,
    MazeGame,
)
from mazerunner.geometry import Point
from mazerunner.maze import Maze


@pytest.fixture
def store(tmp_path):
    return HighScoreStore(tmp_path / "highscore.dat")


@pytest.fixture
def game(store):
    return MazeGame(store, random.Random(1))


def _corridor(game):
    game.select_difficulty(Difficulty.MEDIUM)
    game.maze = Maze(["#####", "#   #", "#####"], Point(1, 1), Point(3, 1))
    game.player_pos = Point(1, 1)
    game.end_pos = Point(3, 1)
    game.enemies = []


def test_initial_state(game):
    assert game.state is GameState.DIFFICULTY_SELECT
    assert game.difficulty is Difficulty.MEDIUM
    assert game.stats.high_score == 0
    assert not game.show_solution


def test_store_round_trip(store):
    store.save(1234)
    assert store.load() == 1234


def test_store_missing_or_short_file(tmp_path):
    assert HighScoreStore(tmp_path / "absent.dat").load() == 0
    short = tmp_path / "short.dat"
    short.write_bytes(b"\x01")
    assert HighScoreStore(short).load() == 0


def test_store_save_failure_is_silent(tmp_path):
    broken = HighScoreStore(tmp_path / "missing_dir" / "hs.dat")
    broken.save(5)
    assert broken.load() == 0


def test_game_loads_high_score(store):
    store.save(777)
    assert MazeGame(store, random.Random(0)).stats.high_score == 777


@pytest.mark.parametrize(
    "difficulty, size, enemies",
    [(Difficulty.EASY, 15, 2), (Difficulty.MEDIUM, 21, 4), (Difficulty.HARD, 31, 6)],
)
def test_select_difficulty_builds_level(game, difficulty, size, enemies):
    game.select_difficulty(difficulty)
    assert game.state is GameState.PLAYING
    assert game.maze.width == size and game.maze.height == size
    assert game.player_pos == Point(1, 1)
    assert game.end_pos == Point(size - 2, size - 2)
    assert len(game.enemies) == enemies
    for enemy in game.enemies:
        assert game.maze.is_open(enemy.position)
        assert enemy.position not in (game.player_pos, game.end_pos)
        assert enemy.speed == difficulty.multiplier


def test_move_into_open_and_wall(game):
    _corridor(game)
    game.handle_key(Key.RIGHT)
    assert game.player_pos == Point(2, 1)
    assert game.stats.move_count == 1
    game.handle_key(Key.UP)
    assert game.player_pos == Point(2, 1)
    assert game.stats.move_count == 1


def test_reaching_end_scores_and_regenerates(game, store):
    _corridor(game)
    game.handle_key(Key.RIGHT)
    game.handle_key(Key.RIGHT)
    assert game.stats.score > 0
    assert game.stats.high_score == game.stats.score
    assert store.load() == game.stats.score
    assert game.stats.move_count == 0
    assert game.stats.time_elapsed == 0.0
    assert game.maze.width == Difficulty.MEDIUM.size
    assert game.player_pos == game.maze.start


def test_update_score_base_value(game):
    game.select_difficulty(Difficulty.EASY)
    game.update_score()
    assert game.stats.score == 1000


def test_more_moves_score_less(store):
    few = MazeGame(store, random.Random(0))
    many = MazeGame(store, random.Random(0))
    for g, moves in ((few, 1), (many, 20)):
        g.select_difficulty(Difficulty.HARD)
        g.stats.move_count = moves
        g.update_score()
    assert few.stats.score > many.stats.score


def test_update_score_never_negative(game):
    game.select_difficulty(Difficulty.HARD)
    game.stats.time_elapsed = 10_000.0
    game.update_score()
    assert game.stats.score == 0


def test_pause_and_resume(game):
    _corridor(game)
    game.handle_key(Key.ESCAPE)
    assert game.state is GameState.PAUSED
    game.handle_key(Key.RIGHT)
    assert game.player_pos == Point(1, 1)
    game.update(5.0)
    assert game.stats.time_elapsed == 0.0
    game.handle_key(Key.ESCAPE)
    assert game.state is GameState.PLAYING


def test_space_toggles_solution(game):
    _corridor(game)
    game.handle_key(Key.SPACE)
    assert game.show_solution
    game.handle_key(Key.SPACE)
    assert not game.show_solution


def test_restart_resets_stats(game):
    _corridor(game)
    game.handle_key(Key.RIGHT)
    game.stats.score = 50
    game.handle_key(Key.R)
    assert game.stats.score == 0
    assert game.stats.move_count == 0
    assert game.maze.width == Difficulty.MEDIUM.size


def test_keys_ignored_in_menu(game):
    game.handle_key(Key.RIGHT)
    game.handle_key(Key.ESCAPE)
    assert game.state is GameState.DIFFICULTY_SELECT
    assert game.stats.move_count == 0


def test_update_accumulates_time(game):
    _corridor(game)
    game.update(0.5)
    game.update(0.25)
    assert game.stats.time_elapsed == pytest.approx(0.75)
    assert game.state is GameState.PLAYING


def test_collision_ends_game_and_saves(game, store):
    _corridor(game)
    game.stats.score = 300
    game.enemies = [Enemy(game.player_pos, 0.0)]
    game.update(0.1)
    assert game.state is GameState.GAME_OVER
    assert game.stats.high_score == 300
    assert store.load() == 300


def test_escape_after_game_over(game):
    _corridor(game)
    game.stats.score = 40
    game.handle_game_over()
    game.handle_key(Key.RIGHT)
    assert game.state is GameState.GAME_OVER
    game.handle_key(Key.ESCAPE)
    assert game.state is GameState.DIFFICULTY_SELECT
    assert game.stats.score == 0
    assert game.stats.high_score == 40


def test_status_text(game):
    _corridor(game)
    assert game.status_text() == "Score: 0\nTime: 0s\nMoves: 0\nHigh Score: 0"
    game.handle_key(Key.ESCAPE)
    assert game.status_text().endswith("\n\nPAUSED")


def test_game_over_text(game):
    game.stats.score = 250
    assert game.game_over_text() == "Game Over!\nFinal Score: 250\nPress ESC to return to menu"


def test_stats_reset_keeps_high_score():
    stats = GameStats(score=5, move_count=3, time_elapsed=2.0, high_score=9, power_ups_collected=1)
    stats.reset_for_new_game()
    assert stats == GameStats(high_score=9)


def test_invalid_move_without_maze(game):
    assert not game.is_valid_move(Point(1, 1))