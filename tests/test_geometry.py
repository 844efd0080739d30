import random

import pytest

from game.air_combat.errors import InvalidConfiguration
from game.air_combat.geometry import Rect, Size, Vector2, overlaps


def test_vector_arithmetic():
    assert Vector2(1, 2) + Vector2(3, 4) == Vector2(4, 6)
    assert Vector2(5, 5) - Vector2(2, 7) == Vector2(3, -2)


def test_rect_edges():
    r = Rect.from_position_size(Vector2(10, 20), Size(5, 7))
    assert (r.left, r.top, r.right, r.bottom) == (10, 20, 15, 27)


def test_bullet_and_enemy_boxes_overlap():
    bullet = Rect(100, 100, 5, 20)
    enemy = Rect(95, 110, 50, 50)
    assert overlaps(bullet, enemy)
    assert bullet.overlaps(enemy)


def test_touching_edges_do_not_overlap():
    a = Rect(0, 0, 10, 10)
    assert not overlaps(a, Rect(10, 0, 10, 10))
    assert not overlaps(a, Rect(0, 10, 10, 10))
    assert overlaps(a, Rect(9.999, 9.999, 10, 10))


def test_disjoint_on_one_axis_only():
    a = Rect(0, 0, 10, 10)
    assert not overlaps(a, Rect(5, 50, 10, 10))
    assert not overlaps(a, Rect(50, 5, 10, 10))


def test_overlap_is_symmetric():
    rng = random.Random(1234)
    for _ in range(500):
        a = Rect(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(0, 40), rng.uniform(0, 40))
        b = Rect(rng.uniform(-50, 50), rng.uniform(-50, 50), rng.uniform(0, 40), rng.uniform(0, 40))
        assert overlaps(a, b) == overlaps(b, a)


def test_negative_size_rejected():
    with pytest.raises(InvalidConfiguration):
        Size(-1, 5)
