import random

from game.air_combat import Session, Spawner
from game.air_combat.geometry import Vector2


def test_enemy_spawns_above_top_at_random_x(session):
    enemy = session.spawn_enemy()
    assert enemy is not None
    assert enemy.position == Vector2(200, -50)
    assert session.enemies == [enemy]


def test_bullet_spawns_at_muzzle(session):
    assert session.player.position == Vector2(175, 700)
    bullet = session.spawn_bullet()
    assert bullet.position == Vector2(199, 700)
    assert session.bullets == [bullet]


def test_bullet_follows_player(session):
    session.apply_input(Vector2(-75, 0))
    bullet = session.spawn_bullet()
    assert bullet.position == Vector2(124, 700)


def test_seeded_spawns_are_reproducible():
    a = Session(400, 800, rng=random.Random(99))
    b = Session(400, 800, rng=random.Random(99))
    xs_a = [a.spawn_enemy().position.x for _ in range(20)]
    xs_b = [b.spawn_enemy().position.x for _ in range(20)]
    assert xs_a == xs_b
    assert all(0 <= x <= 400 for x in xs_a)


def test_spawner_is_noop_after_game_over(session, fixed_rng):
    session._game_over()
    spawner = Spawner(fixed_rng)
    assert spawner.spawn_enemy(session) is None
    assert spawner.spawn_bullet(session) is None
    assert session.enemies == []
    assert session.bullets == []
