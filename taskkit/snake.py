"""A grid-based snake game: pure game state plus a pygame front end."""

from __future__ import annotations

import argparse
import enum
import os
import random
import sys
import time
from dataclasses import dataclass, field

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

INITIAL_DELAY = 0.2
SPEED_UP = 0.95
FRAME_RATE = 60

_BLACK = (0, 0, 0)
_GREEN = (0, 255, 0)
_RED = (255, 0, 0)


@dataclass(frozen=True)
class SnakeSegment:
    """One cell occupied by the snake, in grid coordinates."""

    x: int
    y: int


class StepResult(enum.Enum):
    """What happened during one game tick."""

    MOVED = "moved"
    ATE = "ate"
    CRASHED = "crashed"


@dataclass
class SnakeState:
    """The board, the snake, the food and the current speed."""

    width: int = 800
    height: int = 600
    size: int = 20
    rng: random.Random = field(default_factory=random.Random, repr=False)
    snake: list[SnakeSegment] = field(init=False)
    direction: tuple[int, int] = field(init=False)
    food: SnakeSegment = field(init=False)
    delay: float = field(init=False)
    game_over: bool = field(init=False)

    def __post_init__(self) -> None:
        if self.size < 1 or self.width < self.size or self.height < self.size:
            raise ValueError("board must hold at least one cell")
        self.reset()

    @property
    def columns(self) -> int:
        return self.width // self.size

    @property
    def rows(self) -> int:
        return self.height // self.size

    @property
    def head(self) -> SnakeSegment:
        return self.snake[0]

    def _random_cell(self) -> SnakeSegment:
        return SnakeSegment(self.rng.randrange(self.columns), self.rng.randrange(self.rows))

    def reset(self) -> None:
        """Start a new game: a one-cell snake heading right and fresh food."""
        self.snake = [SnakeSegment(10, 10)]
        self.direction = (1, 0)
        self.food = self._random_cell()
        self.delay = INITIAL_DELAY
        self.game_over = False

    def steer(self, dx: int, dy: int) -> bool:
        """Turn to (dx, dy) if it is a quarter turn; return whether it turned."""
        dir_x, dir_y = self.direction
        if dy != 0 and dx == 0 and dir_y == 0:
            self.direction = (0, dy)
            return True
        if dx != 0 and dy == 0 and dir_x == 0:
            self.direction = (dx, 0)
            return True
        return False

    def _hits_something(self, cell: SnakeSegment) -> bool:
        outside = not (0 <= cell.x < self.columns and 0 <= cell.y < self.rows)
        return outside or cell in self.snake

    def update(self) -> StepResult:
        """Advance the snake one cell and report what happened."""
        dir_x, dir_y = self.direction
        new_head = SnakeSegment(self.head.x + dir_x, self.head.y + dir_y)

        if self._hits_something(new_head):
            self.game_over = True
            return StepResult.CRASHED

        self.snake.insert(0, new_head)
        if new_head == self.food:
            self.food = self._random_cell()
            self.delay *= SPEED_UP
            return StepResult.ATE
        self.snake.pop()
        return StepResult.MOVED


def _load_sound(path: str) -> pygame.mixer.Sound | None:
    try:
        return pygame.mixer.Sound(path)
    except (pygame.error, FileNotFoundError) as exc:
        print(f"Failed to load sound {path}: {exc}", file=sys.stderr)
        return None


class SnakeGame:
    """A pygame window that plays a SnakeState."""

    _KEYS = (
        (pygame.K_UP, (0, -1)),
        (pygame.K_DOWN, (0, 1)),
        (pygame.K_LEFT, (-1, 0)),
        (pygame.K_RIGHT, (1, 0)),
    )

    def __init__(
        self,
        state: SnakeState | None = None,
        eat_sound: str = "eat.wav",
        game_over_sound: str = "gameover.wav",
    ) -> None:
        self.state = state if state is not None else SnakeState()
        pygame.init()
        self.window = pygame.display.set_mode((self.state.width, self.state.height))
        pygame.display.set_caption("Snake Game")
        self.clock = pygame.time.Clock()
        self._eat_sound: pygame.mixer.Sound | None = None
        self._game_over_sound: pygame.mixer.Sound | None = None
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            print(f"Audio unavailable: {exc}", file=sys.stderr)
        else:
            self._eat_sound = _load_sound(eat_sound)
            self._game_over_sound = _load_sound(game_over_sound)

    def _handle_input(self) -> None:
        pressed = pygame.key.get_pressed()
        for key, (dx, dy) in self._KEYS:
            if pressed[key]:
                self.state.steer(dx, dy)

    def _tick(self) -> None:
        result = self.state.update()
        sound = {
            StepResult.ATE: self._eat_sound,
            StepResult.CRASHED: self._game_over_sound,
        }.get(result)
        if sound is not None:
            sound.play()

    def _draw(self) -> None:
        state = self.state
        self.window.fill(_BLACK)
        side = state.size - 2
        for segment in state.snake:
            rect = pygame.Rect(segment.x * state.size, segment.y * state.size, side, side)
            pygame.draw.rect(self.window, _GREEN, rect)
        food = pygame.Rect(state.food.x * state.size, state.food.y * state.size, side, side)
        pygame.draw.rect(self.window, _RED, food)
        pygame.display.flip()

    def run(self) -> None:
        """Play until the window is closed."""
        last_tick = time.perf_counter()
        running = True
        try:
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                if not running:
                    break
                if not self.state.game_over:
                    self._handle_input()
                now = time.perf_counter()
                if now - last_tick > self.state.delay:
                    last_tick = now
                    self._tick()
                self._draw()
                self.clock.tick(FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Play snake.")
    parser.add_argument("--eat-sound", default="eat.wav")
    parser.add_argument("--game-over-sound", default="gameover.wav")
    args = parser.parse_args(argv)

    game = SnakeGame(eat_sound=args.eat_sound, game_over_sound=args.game_over_sound)
    game.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())