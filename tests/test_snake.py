import random

import pytest

from taskkit.snake import SnakeSegment, SnakeState, StepResult


def make_state(seed=1, **kwargs):
    return SnakeState(rng=random.Random(seed), **kwargs)


def test_reset_starts_with_single_segment_heading_right():
    state = make_state()
    assert state.snake == [SnakeSegment(10, 10)]
    assert state.direction == (1, 0)
    assert state.delay == 0.2
    assert state.game_over is False


def test_grid_dimensions_follow_board_and_cell_size():
    state = make_state()
    assert state.columns == 800 // 20
    assert state.rows == 600 // 20


@pytest.mark.parametrize("seed", range(20))
def test_food_is_placed_on_the_board(seed):
    state = make_state(seed)
    assert 0 <= state.food.x < state.columns
    assert 0 <= state.food.y < state.rows


def test_update_moves_head_in_direction():
    state = make_state()
    state.food = SnakeSegment(0, 0)
    assert state.update() is StepResult.MOVED
    assert state.snake == [SnakeSegment(11, 10)]


def test_steer_rejects_reversal_and_same_axis():
    state = make_state()
    assert state.steer(-1, 0) is False
    assert state.steer(1, 0) is False
    assert state.direction == (1, 0)


def test_steer_accepts_quarter_turn():
    state = make_state()
    state.food = SnakeSegment(0, 0)
    assert state.steer(0, -1) is True
    assert state.direction == (0, -1)
    state.update()
    assert state.head == SnakeSegment(10, 9)
    assert state.steer(0, 1) is False


def test_eating_grows_snake_and_speeds_up():
    state = make_state()
    state.food = SnakeSegment(11, 10)
    assert state.update() is StepResult.ATE
    assert state.snake == [SnakeSegment(11, 10), SnakeSegment(10, 10)]
    assert state.delay == pytest.approx(0.19)
    assert 0 <= state.food.x < state.columns
    assert 0 <= state.food.y < state.rows


def test_delay_keeps_shrinking_with_each_meal():
    state = make_state()
    delays = [state.delay]
    for _ in range(3):
        state.food = SnakeSegment(state.head.x + 1, state.head.y)
        assert state.update() is StepResult.ATE
        delays.append(state.delay)
    assert delays == sorted(delays, reverse=True)
    assert len(set(delays)) == 4
    assert len(state.snake) == 4


def test_hitting_wall_ends_game_without_moving():
    state = make_state()
    edge = SnakeSegment(state.columns - 1, 10)
    state.snake = [edge]
    state.food = SnakeSegment(0, 0)
    assert state.update() is StepResult.CRASHED
    assert state.game_over is True
    assert state.snake == [edge]


def test_hitting_top_wall_ends_game():
    state = make_state()
    state.snake = [SnakeSegment(5, 0)]
    state.food = SnakeSegment(0, 5)
    state.steer(0, -1)
    assert state.update() is StepResult.CRASHED
    assert state.game_over is True


def test_running_into_own_body_ends_game():
    state = make_state()
    body = [
        SnakeSegment(5, 5),
        SnakeSegment(5, 6),
        SnakeSegment(6, 6),
        SnakeSegment(6, 5),
        SnakeSegment(6, 4),
    ]
    state.snake = list(body)
    state.direction = (0, -1)
    state.food = SnakeSegment(0, 0)
    state.steer(1, 0)
    assert state.update() is StepResult.CRASHED
    assert state.game_over is True
    assert state.snake == body


def test_reset_after_game_over_restores_start():
    state = make_state()
    state.snake = [SnakeSegment(state.columns - 1, 3)]
    state.update()
    assert state.game_over is True
    state.reset()
    assert state.game_over is False
    assert state.snake == [SnakeSegment(10, 10)]
    assert state.direction == (1, 0)


def test_same_seed_gives_same_food_and_moves():
    first = make_state(7)
    second = make_state(7)
    assert (first.food.x, first.food.y) == (second.food.x, second.food.y)
    assert 0 <= first.food.x < first.columns
    assert 0 <= first.food.y < first.rows


def test_board_too_small_is_rejected():
    with pytest.raises(ValueError):
        make_state(width=10, height=10, size=20)


def test_head_is_first_segment_after_moves():
    state = make_state()
    state.food = SnakeSegment(0, 0)
    state.update()
    state.update()
    assert (state.head.x, state.head.y) == (12, 10)
    assert state.snake[0] == state.head
    assert SnakeSegment(12, 10) in state.snake