"""Tests for enemy motion and reflection."""

import random

import pytest

import config
from enemy import Enemy, random_velocity
from level import build_level
from physics import push_out_of_zone, reflect_off_walls, step_enemy, update_moving_enemies
from utils import SAFE_ZONE, Rect, Vec2, overlaps


def moving(x, y, vx, vy):
    return Enemy(pos=Vec2(x, y), moving=True, vel=Vec2(vx, vy))


class TestStaticEnemies:
    def test_static_enemy_never_moves(self):
        e = Enemy(pos=Vec2(300, 200), moving=False, vel=Vec2(2, 2))
        update_moving_enemies([e])
        assert e.pos == Vec2(300, 200)
        assert e.vel == Vec2(2, 2)


class TestFreeMotion:
    def test_integrates_velocity(self):
        e = moving(300, 200, 1.5, -2)
        step_enemy(e)
        assert e.pos == Vec2(301.5, 198)
        assert e.rect == Rect.from_pos(301.5, 198, config.ENEMY_SIZE)


class TestWallReflection:
    def test_right_wall(self):
        e = moving(559, 200, 2, 0)
        step_enemy(e)
        assert e.vel.x == -2
        assert e.pos.x == config.ARENA_W - config.ENEMY_SIZE

    def test_left_wall(self):
        e = moving(1, 200, -2, 0.5)
        step_enemy(e)
        assert e.vel == Vec2(2, 0.5)
        assert e.pos.x == 0

    def test_bottom_wall(self):
        e = moving(300, 359, 0, 2)
        step_enemy(e)
        assert e.vel.y == -2
        assert e.pos.y == config.ARENA_H - config.ENEMY_SIZE

    def test_top_wall_at_right_of_zone(self):
        e = moving(300, 1, 0, -2)
        step_enemy(e)
        assert e.vel.y == 2
        assert e.pos.y == 0

    def test_reflect_off_walls_helper_clamps(self):
        pos, vel = Vec2(-3, 500), Vec2(-1, 1)
        reflect_off_walls(pos, vel, 40)
        assert pos == Vec2(0, config.ARENA_H - 40)
        assert vel == Vec2(1, -1)


class TestSafeZoneReflection:
    def test_entering_from_right(self):
        e = moving(151, 50, -2, 0)
        step_enemy(e)
        assert e.pos.x == SAFE_ZONE.right
        assert e.vel.x == 2
        assert not overlaps(e.rect, SAFE_ZONE)

    def test_entering_from_below(self):
        e = moving(50, 151, 0, -2)
        step_enemy(e)
        assert e.pos.y == SAFE_ZONE.bottom
        assert e.vel.y == 2
        assert not overlaps(e.rect, SAFE_ZONE)

    def test_entering_corner_diagonally_flips_both(self):
        e = moving(151, 151, -2, -2)
        step_enemy(e)
        assert e.pos == Vec2(150, 150)
        assert e.vel == Vec2(2, 2)

    def test_grazing_past_corner_only_flips_crossed_axis(self):
        e = moving(120, 151, 1, -2)
        step_enemy(e)
        assert e.pos == Vec2(121, 150)
        assert e.vel == Vec2(1, 2)

    def test_already_inside_is_pushed_to_nearest_edge(self):
        e = moving(100, 140, 1, 1)
        step_enemy(e)
        # 9 units from the bottom edge versus 49 from the right edge.
        assert e.pos == Vec2(101, 150)
        assert e.vel == Vec2(1, 1)
        assert not overlaps(e.rect, SAFE_ZONE)

    def test_push_out_points_velocity_away(self):
        pos, vel = Vec2(140, 60), Vec2(-1.5, 1)
        push_out_of_zone(pos, vel, 40)
        assert pos == Vec2(150, 60)
        assert vel == Vec2(1.5, 1)

    def test_push_out_skips_edges_outside_the_arena(self):
        # Closest edge would be the zone's left side at x=-40.
        pos, vel = Vec2(2, 100), Vec2(-1, 0.5)
        push_out_of_zone(pos, vel, 40)
        assert pos == Vec2(2, 150)
        assert vel == Vec2(-1, 0.5)


class TestInvariants:
    @pytest.mark.parametrize("seed", range(8))
    def test_never_ends_tick_inside_safe_zone(self, seed):
        layout = build_level(4, rng=random.Random(seed))
        # Make everything move so the zone gets plenty of visits.
        rng = random.Random(seed + 100)
        enemies = []
        for e in layout.enemies:
            m = Enemy(pos=e.pos, moving=True)
            m.vel = random_velocity(config.MOVING_ENEMY_SPEED, rng)
            enemies.append(m)

        for _ in range(3000):
            update_moving_enemies(enemies)
            for e in enemies:
                assert not overlaps(e.rect, SAFE_ZONE)
                assert 0 <= e.pos.x <= config.ARENA_W - e.size
                assert 0 <= e.pos.y <= config.ARENA_H - e.size

    @pytest.mark.parametrize("seed", range(8))
    def test_speed_is_preserved_by_reflections(self, seed):
        rng = random.Random(seed)
        e = Enemy(pos=Vec2(300, 200), moving=True, vel=random_velocity(2.0, rng))
        for _ in range(2000):
            step_enemy(e)
            assert e.vel.length() == pytest.approx(2.0)
