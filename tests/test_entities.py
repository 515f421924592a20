from pong.ball import Ball
from pong.paddle import Paddle


def test_paddle_moves_and_clamps():
    p = Paddle(20, 5, 12, 100, 6)
    p.move(-1)
    p.clamp(980)
    assert p.y == 0
    p.y = 978
    p.move(1)
    p.clamp(980)
    assert p.y == 980


def test_paddle_no_motion_when_direction_zero():
    p = Paddle(20, 490, 12, 100, 6)
    p.move(0)
    assert p.y == 490


def test_paddle_geometry():
    p = Paddle(20, 100, 12, 100, 6)
    assert p.center_y() == 150
    assert p.overlaps_vertically(190, 200)
    assert p.overlaps_vertically(90, 100)
    assert not p.overlaps_vertically(201, 211)
    assert p.rect().size == (12, 100)


def test_ball_integrate():
    b = Ball(10, 20, 10)
    b.launch(4.0, -1.5)
    b.integrate()
    assert (b.x, b.y) == (14.0, 18.5)


def test_ball_top_wall():
    b = Ball(100, -2, 10)
    b.launch(4.0, -1.5)
    b.bounce_off_walls(1080)
    assert b.y == 0
    assert b.vy == 1.5
    assert b.vx == 4.0


def test_ball_bottom_wall():
    b = Ball(100, 1075, 10)
    b.launch(-4.0, 2.0)
    b.bounce_off_walls(1080)
    assert b.y == 1070
    assert b.vy == -2.0


def test_ball_no_wall():
    b = Ball(100, 500, 10)
    b.launch(4.0, 1.0)
    b.bounce_off_walls(1080)
    assert b.y == 500
    assert b.vy == 1.0
