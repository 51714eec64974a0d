import pytest

from unixkit.bounce import (
    BOT_ROW,
    LEFT_EDGE,
    RIGHT_EDGE,
    TOP_ROW,
    X_INIT,
    X_TTM,
    Y_INIT,
    Y_TTM,
    Ball,
    Message,
)


def test_ball_defaults_from_settings():
    ball = Ball()
    assert (ball.y_pos, ball.x_pos) == (Y_INIT, X_INIT)
    assert (ball.y_ttg, ball.x_ttg) == (Y_TTM, X_TTM)
    assert ball.symbol == "o"


def test_x_moves_after_x_ttm_ticks():
    ball = Ball()
    moves = [ball.tick() for _ in range(X_TTM)]
    assert moves[-1] is True
    assert not any(moves[:-1])
    assert ball.x_pos == X_INIT + 1
    assert ball.y_pos == Y_INIT
    assert ball.x_ttg == X_TTM


def test_y_moves_after_y_ttm_ticks():
    ball = Ball()
    for _ in range(Y_TTM):
        ball.tick()
    assert ball.y_pos == Y_INIT + 1
    assert ball.y_ttg == Y_TTM


def test_zero_ttm_never_moves():
    ball = Ball(y_ttm=0, x_ttm=0)
    assert not any(ball.tick() for _ in range(100))
    assert (ball.y_pos, ball.x_pos) == (Y_INIT, X_INIT)


def test_bounce_at_top_and_right():
    ball = Ball(y_pos=TOP_ROW, x_pos=RIGHT_EDGE, y_dir=-1, x_dir=1)
    assert ball.bounce_or_lose() is True
    assert ball.y_dir == 1
    assert ball.x_dir == -1


def test_bounce_at_bottom_and_left():
    ball = Ball(y_pos=BOT_ROW, x_pos=LEFT_EDGE, y_dir=1, x_dir=-1)
    assert ball.bounce_or_lose() is True
    assert ball.y_dir == -1
    assert ball.x_dir == 1


def test_no_bounce_in_the_middle():
    ball = Ball(y_pos=TOP_ROW + 1, x_pos=LEFT_EDGE + 1, y_dir=-1, x_dir=-1)
    assert ball.bounce_or_lose() is False
    assert (ball.y_dir, ball.x_dir) == (-1, -1)


@pytest.mark.parametrize("y_ttm,x_ttm", [(8, 5), (1, 1), (3, 2), (1, 7)])
def test_ball_stays_in_court(y_ttm, x_ttm):
    ball = Ball(y_ttm=y_ttm, x_ttm=x_ttm, y_ttg=y_ttm, x_ttg=x_ttm)
    for _ in range(2000):
        ball.tick()
        assert TOP_ROW <= ball.y_pos <= BOT_ROW
        assert LEFT_EDGE <= ball.x_pos <= RIGHT_EDGE


def test_message_turns_at_screen_edge():
    msg = Message("hello", col=0)
    cols = 20
    positions = [msg.step(cols) for _ in range(60)]
    assert max(positions) == cols - len("hello")
    assert min(positions) == 0
    assert all(0 <= p <= cols - len("hello") for p in positions)


def test_message_direction_flips_at_right():
    msg = Message("hello", col=13, dir=1)
    msg.step(20)
    assert msg.dir == 1
    msg.step(20)
    assert msg.col == 20 - len("hello")
    assert msg.dir == -1


def test_message_with_fixed_edges():
    msg = Message("Hello", row=10, col=10, left=10, right=30)
    positions = [msg.step(80) for _ in range(100)]
    assert max(positions) == 30
    assert min(positions) == 10


def test_message_reversed_turns_at_left():
    msg = Message("hello", col=1, dir=-1)
    assert msg.step(40) == 0
    assert msg.dir == 1