"""The window, event loop and drawing of the maze game."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import pygame

from .button import Button
from .game import DEFAULT_HIGH_SCORE_FILE, Difficulty, GameState, HighScoreStore, Key, MazeGame
from .geometry import SCREEN_HEIGHT, SCREEN_WIDTH, Point
from .info import current_user, print_game_info
from .resources import get_font

BACKGROUND = (30, 30, 30)
TEXT_COLOR = (255, 255, 255)
PLAYER_COLOR = (0, 255, 255)
END_COLOR = (0, 255, 0)
WALL_COLOR = (50, 50, 50)
FLOOR_COLOR = (200, 200, 200)
FRAME_RATE = 60

BUTTON_WIDTH = 200.0
BUTTON_HEIGHT = 50.0
BUTTON_SPACING = 20.0

_MINIMAP_RECT = pygame.Rect(
    int(SCREEN_WIDTH * 0.75), 0, int(SCREEN_WIDTH * 0.25), int(SCREEN_HEIGHT * 0.25)
)

_DIFFICULTY_BUTTONS = (
    ("Easy", Difficulty.EASY, (76, 175, 80)),
    ("Medium", Difficulty.MEDIUM, (255, 152, 0)),
    ("Hard", Difficulty.HARD, (244, 67, 54)),
)

_KEYS = {
    pygame.K_w: Key.UP,
    pygame.K_UP: Key.UP,
    pygame.K_s: Key.DOWN,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_a: Key.LEFT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_d: Key.RIGHT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_r: Key.R,
}


def _render_block(font: pygame.font.Font, text: str, color) -> pygame.Surface:
    """Render text that may span several lines onto one transparent surface."""
    lines = [font.render(line, True, color) for line in text.split("\n")]
    line_height = font.get_linesize()
    width = max([1, *(line.get_width() for line in lines)])
    block = pygame.Surface((width, line_height * len(lines)), pygame.SRCALPHA)
    for row, line in enumerate(lines):
        block.blit(line, (0, row * line_height))
    return block


class App:
    """Connects a MazeGame to a window: input, menu buttons and drawing."""

    def __init__(self, game: MazeGame | None = None) -> None:
        self.game = game if game is not None else MazeGame()
        self.running = False
        self.buttons: list[tuple[Button, Difficulty]] = []
        top = SCREEN_HEIGHT * 0.3
        for label, difficulty, color in _DIFFICULTY_BUTTONS:
            hover = tuple(int(channel * 0.8) for channel in color)
            button = Button(
                label,
                ((SCREEN_WIDTH - BUTTON_WIDTH) / 2.0, top),
                (BUTTON_WIDTH, BUTTON_HEIGHT),
                color,
                hover,
            )
            self.buttons.append((button, difficulty))
            top += BUTTON_HEIGHT + BUTTON_SPACING

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply one window event to the game."""
        if event.type == pygame.QUIT:
            self.running = False
            return
        if self.game.state is GameState.DIFFICULTY_SELECT:
            for button, difficulty in self.buttons:
                if button.is_clicked(event):
                    self.game.select_difficulty(difficulty)
                    return
            return
        if event.type == pygame.KEYDOWN:
            key = _KEYS.get(event.key)
            if key is not None:
                self.game.handle_key(key)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the current screen for the game's state."""
        surface.fill(BACKGROUND)
        state = self.game.state
        if state is GameState.DIFFICULTY_SELECT:
            self._draw_menu(surface)
        elif state in (GameState.PLAYING, GameState.PAUSED):
            self._draw_playfield(surface)
        elif state is GameState.GAME_OVER:
            self._draw_game_over(surface)

    def run(self) -> None:
        """Open the window and run the game until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            pygame.display.set_caption(f"Maze Game - {current_user()}")
            print_game_info()
            clock = pygame.time.Clock()
            self.running = True
            while self.running:
                delta_time = clock.tick(FRAME_RATE) / 1000.0
                for event in pygame.event.get():
                    self.handle_event(event)
                    if not self.running:
                        break
                if not self.running:
                    break
                if self.game.state is GameState.DIFFICULTY_SELECT:
                    mouse = pygame.mouse.get_pos()
                    for button, _ in self.buttons:
                        button.update(mouse)
                elif self.game.state is GameState.PLAYING:
                    self.game.update(delta_time)
                self.render(screen)
                pygame.display.flip()
        finally:
            pygame.quit()

    def _draw_menu(self, surface: pygame.Surface) -> None:
        title = get_font(40).render("Select Difficulty", True, TEXT_COLOR)
        surface.blit(title, ((SCREEN_WIDTH - title.get_width()) // 2, int(SCREEN_HEIGHT * 0.15)))
        for button, _ in self.buttons:
            button.draw(surface)

    def _draw_playfield(self, surface: pygame.Surface) -> None:
        game = self.game
        self._draw_maze(surface)
        for power_up in game.power_ups:
            power_up.draw(surface, game.cell_size)
        for enemy in game.enemies:
            enemy.draw(surface, game.cell_size)
        surface.blit(_render_block(get_font(20), game.status_text(), TEXT_COLOR), (10, 10))

        layer = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        self._draw_maze(layer)
        minimap = pygame.transform.scale(layer, _MINIMAP_RECT.size)
        surface.blit(minimap, _MINIMAP_RECT.topleft)

    def _draw_maze(self, surface: pygame.Surface) -> None:
        game = self.game
        maze = game.maze
        if maze is None:
            return
        size = game.cell_size
        for y in range(maze.height):
            for x in range(maze.width):
                cell = Point(x, y)
                if cell == game.player_pos:
                    color = PLAYER_COLOR
                elif cell == game.end_pos:
                    color = END_COLOR
                elif not maze.is_open(cell):
                    color = WALL_COLOR
                else:
                    color = FLOOR_COLOR
                rect = pygame.Rect(int(x * size), int(y * size), int(size), int(size))
                pygame.draw.rect(surface, color, rect)

    def _draw_game_over(self, surface: pygame.Surface) -> None:
        block = _render_block(get_font(30), self.game.game_over_text(), TEXT_COLOR)
        surface.blit(
            block,
            ((SCREEN_WIDTH - block.get_width()) // 2, (SCREEN_HEIGHT - block.get_height()) // 2),
        )


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; return the process exit status."""
    parser = argparse.ArgumentParser(prog="mazerunner", description="Find the way out of the maze.")
    parser.add_argument(
        "--high-score-file",
        default=DEFAULT_HIGH_SCORE_FILE,
        help="file that keeps the high score (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    try:
        App(MazeGame(HighScoreStore(args.high_score_file))).run()
    except Exception as exc:  # noqa: BLE001 - report any failure and exit non-zero
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0