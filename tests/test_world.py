import math

import pygame
import pytest

from azteroidz.asteroids import AsteroidSize
from azteroidz.frame import Mode
from azteroidz.settings import HEIGHT, WIDTH
from azteroidz.world import InputState

IDLE = InputState()
FIRE_PRESS = InputState(fire_pressed=True)


def playing(world, now=0.0):
    world.start_match(now)
    return world


def shield(player, ticks=10 ** 6):
    player.invulnerable = True
    player.invulnerable_ticks = ticks


def test_cold_start(world):
    assert world.mode == Mode.TITLE
    assert world.asteroids.number_actives == 8
    assert world.bullets.pool.number_actives == 0
    assert world.particles.pool.number_actives == 0
    assert world.player.pos == (WIDTH / 2, HEIGHT / 2)
    assert world.player.lives == 3


def test_fire_press_starts_match(world):
    world.score = 12
    world.tick(FIRE_PRESS, 0.5)
    assert world.mode == Mode.PLAYING
    assert world.score == 0
    assert world.asteroids.number_actives == 8
    assert world.asteroids.pool.actives()[0].vertices


def test_held_fire_does_not_start_match(world):
    world.tick(InputState(fire=True), 0.5)
    assert world.mode == Mode.TITLE


def test_title_does_not_move_ship_or_shoot(world, audio):
    world.tick(InputState(thrust=True, fire=True, rotate_left=True), 1.0)
    assert world.player.vel == (0, 0)
    assert world.bullets.pool.number_actives == 0
    assert audio.played == []


def test_missing_input_keys_read_as_released(world):
    world.tick({"fire_pressed": True}, 0.5)
    assert world.mode == Mode.PLAYING
    assert InputState.from_mapping({}) == IDLE


def test_shoot_throttle(world, audio):
    playing(world)
    shield(world.player)
    admitted = []
    for i in range(1000):
        now = 1.0 + i / 1000
        before = world.time_shoot
        world.tick(InputState(fire=True), now)
        if world.time_shoot != before:
            admitted.append(i)
    assert len(admitted) == 10
    assert admitted[0] == 0
    assert all(b - a >= 100 for a, b in zip(admitted, admitted[1:]))
    assert audio.count("laser-shoot") == 10


def test_cooldown_applies_when_bullet_pool_is_full(world, audio):
    playing(world)
    shield(world.player)
    while world.bullets.pool.reserve() is not None:
        pass
    for bullet in world.bullets.pool:
        bullet.pos = pygame.Vector2(1, 1)
        bullet.vel = pygame.Vector2(0, 0)
    world.tick(InputState(fire=True), 1.0)
    assert world.time_shoot == 1.0
    assert audio.count("laser-shoot") == 0


def test_bullet_fragments_normal_asteroid(world, audio):
    world.asteroids.clear_all()
    target = world.asteroids.revive(AsteroidSize.NORMAL, 500, 400)
    target.vel = pygame.Vector2(0, 0)
    world.bullets.fire(pygame.Vector2(495, 400), 0)

    world.tick(IDLE, 1.0)

    assert world.score == 1
    assert not target.active
    assert world.bullets.pool.number_actives == 0
    children = world.asteroids.pool.actives()
    assert len(children) == 2
    for child in children:
        assert child.size == AsteroidSize.TINY
        assert child.pos.distance_to((500, 400)) <= 1.5
    particles = world.particles.pool.actives()
    assert len(particles) == 10
    for particle in particles:
        assert particle.pos.distance_to((500, 400)) <= 1.5
    assert audio.count("explosion-asteroid") == 1


def test_bullet_hitting_tiny_asteroid_leaves_no_children(world):
    world.asteroids.clear_all()
    target = world.asteroids.revive(AsteroidSize.TINY, 300, 300)
    target.vel = pygame.Vector2(0, 0)
    world.bullets.fire(pygame.Vector2(298, 300), 0)
    world.tick(IDLE, 1.0)
    assert world.score == 1
    assert world.asteroids.number_actives == 0


def test_bullet_leaving_arena_is_culled(world):
    world.asteroids.clear_all()
    world.bullets.fire(pygame.Vector2(WIDTH - 2, 100), 0)
    world.tick(IDLE, 1.0)
    assert world.bullets.pool.number_actives == 0
    assert world.score == 0


def test_player_death_and_respawn(world, audio):
    playing(world)
    world.asteroids.clear_all()
    world.asteroids_max = 1
    rock = world.asteroids.revive(AsteroidSize.NORMAL, WIDTH / 2, HEIGHT / 2)
    rock.vel = pygame.Vector2(0, 0)

    world.tick(IDLE, 1.0)
    player = world.player
    assert player.lives == 2
    assert player.pos == (WIDTH / 2, HEIGHT / 2)
    assert player.invulnerable
    assert player.invulnerable_ticks == 250
    assert audio.count("explosion-player") == 1
    assert world.particles.pool.number_actives == 5

    for expected in range(249, 0, -1):
        world.tick(IDLE, 1.0)
        assert player.lives == 2
        assert player.invulnerable_ticks == expected

    world.tick(IDLE, 1.0)
    assert player.lives == 1
    assert player.invulnerable_ticks == 250


def test_ship_is_not_hit_outside_play(world):
    world.asteroids.clear_all()
    rock = world.asteroids.revive(AsteroidSize.NORMAL, WIDTH / 2, HEIGHT / 2)
    rock.vel = pygame.Vector2(0, 0)
    world.tick(IDLE, 1.0)
    assert world.player.lives == 3


def test_game_over_cycle(world):
    playing(world)
    world.score = 7
    world.asteroids_max = 15
    world.player.lives = 0
    world.tick(IDLE, 0.5)
    assert world.mode == Mode.GAME_OVER
    assert [line.text for line in world.frame(0.5).hud] == ["GAME OVER", "SCORE 7"]

    world.tick(FIRE_PRESS, 0.6)
    assert world.mode == Mode.TITLE
    assert world.player.lives == 3
    assert not world.player.invulnerable
    assert world.player.invulnerable_ticks == 0
    assert world.player.pos == (WIDTH / 2, HEIGHT / 2)
    assert world.asteroids_max == 8
    assert world.asteroids.number_actives == 8


def test_game_over_press_does_not_skip_title(world):
    playing(world)
    world.player.lives = 0
    world.tick(FIRE_PRESS, 0.5)
    assert world.mode == Mode.GAME_OVER


def test_wave_tops_up_and_grows(world):
    playing(world, now=0.0)
    world.asteroids.clear_all()
    shield(world.player)
    world.tick(IDLE, 0.5)
    assert world.asteroids.number_actives == 1
    for expected in range(2, 9):
        world.tick(IDLE, 1.0)
        assert world.asteroids.number_actives == expected
    world.tick(IDLE, 1.0)
    assert world.asteroids.number_actives == 8

    world.tick(IDLE, 5.01)
    assert world.asteroids.number_actives == 8
    assert world.asteroids_max == 9
    world.tick(IDLE, 5.02)
    assert world.asteroids_max == 9
    assert world.asteroids.number_actives == 9

    now = 5.02
    for _ in range(40):
        now += 5.01
        world.tick(IDLE, now)
    assert world.asteroids_max == 20


def test_invariants_hold_during_play(world):
    playing(world)
    shield(world.player)
    steer = InputState(fire=True, thrust=True, rotate_left=True)
    last_score = world.score
    for i in range(1500):
        world.tick(steer, i / 60)
        assert world.score >= last_score
        last_score = world.score
        for pool in (world.bullets.pool, world.asteroids.pool, world.particles.pool):
            assert pool.number_actives == sum(1 for obj in pool if obj.active) <= 50
        for asteroid in world.asteroids.pool.actives():
            assert 0 <= asteroid.pos.x < WIDTH and 0 <= asteroid.pos.y < HEIGHT
        for bullet in world.bullets.pool.actives():
            assert 0 <= bullet.pos.x < WIDTH and 0 <= bullet.pos.y < HEIGHT
        assert 0 <= world.player.pos.x < WIDTH and 0 <= world.player.pos.y < HEIGHT


def test_frame_snapshot(world):
    title = world.frame(0.0)
    assert title.mode == Mode.TITLE
    assert title.ship is None
    assert [line.text for line in title.hud] == ["ASTEROIDS", "PRESS SPACE TO PLAY"]
    assert [line.size for line in title.hud] == [56, 24]
    assert len(title.asteroids) == 8

    playing(world)
    world.score = 42
    world.player.kill()
    frame = world.frame(0.25)
    assert frame.hud[0].text == "0042"
    assert frame.ship.invulnerable
    assert frame.ship.alpha == pytest.approx(abs(math.sin(0.25 * 7)))
    assert frame.stats["lives"] == 2
