import random

from game.air_combat.entities import Bullet, Enemy, Player
from game.air_combat.geometry import Vector2


def test_default_sizes_and_speeds():
    assert (Player(Vector2()).size.width, Player(Vector2()).size.height) == (50, 50)
    enemy = Enemy(Vector2())
    assert (enemy.size.width, enemy.size.height, enemy.speed) == (50, 50, 3.0)
    bullet = Bullet(Vector2())
    assert (bullet.size.width, bullet.size.height, bullet.speed) == (5, 20, 8.0)


def test_enemy_moves_down_and_bullet_moves_up():
    enemy = Enemy(Vector2(10, 0))
    bullet = Bullet(Vector2(10, 100))
    enemy.advance()
    bullet.advance()
    assert enemy.position == Vector2(10, 3.0)
    assert bullet.position == Vector2(10, 92.0)

    enemy.advance(ticks=2)
    assert enemy.position.y == 9.0


def test_player_input_is_horizontal_and_clamped():
    player = Player(Vector2(175, 700))
    player.apply_input(Vector2(10, 99), arena_width=400)
    assert player.position == Vector2(185, 700)

    player.apply_input(Vector2(-1000, 0), arena_width=400)
    assert player.position.x == 0

    player.apply_input(Vector2(1000, 0), arena_width=400)
    assert player.position.x == 350


def test_player_clamp_holds_for_any_delta_sequence():
    rng = random.Random(7)
    player = Player(Vector2(175, 700))
    for _ in range(1000):
        player.apply_input(Vector2(rng.uniform(-300, 300), rng.uniform(-300, 300)), 400)
        assert 0 <= player.position.x <= 400 - player.size.width
        assert player.position.y == 700


def test_player_in_arena_narrower_than_ship():
    player = Player(Vector2(0, 0))
    player.apply_input(Vector2(20, 0), arena_width=30)
    assert player.position.x == 0
