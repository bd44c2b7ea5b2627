"""Tests for heading math and the approach loop."""

import math

import pytest
from fakes import FakeGame, mob

from melee_hunter.config import Config
from melee_hunter.entities import EntityView
from melee_hunter.game import Entity, Target, ViewMode
from melee_hunter.navigation import Navigator, byte_to_radian, heading_byte


def _at(x, z):
    return Entity(x=x, z=z)


def _navigator(logger, game):
    return Navigator(logger, game, EntityView(game))


# ============================================================================
# HEADING
# ============================================================================

@pytest.mark.parametrize('player, target, expected', [
    (_at(0, 0), _at(10, 0), 0),       # east
    (_at(0, 0), _at(-10, 0), 128),    # west
    (_at(0, 0), _at(10, 10), 224),    # +x +z
    (_at(0, 0), _at(-10, 10), 160),   # -x +z
    (_at(0, 0), _at(-10, -10), 96),   # -x -z
    (_at(0, 0), _at(10, -10), 32),    # +x -z
    (_at(5, 5), _at(15, 5), 0),       # offset origin
])
def test_heading_byte_quadrants(player, target, expected):
    assert heading_byte(player, target) == expected


def test_heading_straight_along_z():
    assert heading_byte(_at(0, 0), _at(0, 10)) == 192
    assert heading_byte(_at(0, 0), _at(0, -10)) == 64


def test_heading_same_position():
    assert heading_byte(_at(3, 3), _at(3, 3)) == 0


def test_heading_always_a_byte():
    for tx in (-7, -1, 1, 7):
        for tz in (-7, -1, 0, 1, 7):
            assert 0 <= heading_byte(_at(0, 0), _at(tx, tz)) <= 255


@pytest.mark.parametrize('angle, radian', [
    (0, 0.0),
    (32, 0.788478),
    (96, 2.365434),
    (160, 3.942391),
    (224, 5.519347),
])
def test_radian_uses_255_divisor(angle, radian):
    assert byte_to_radian(angle) == pytest.approx(radian, abs=1e-5)


def test_radian_full_byte_is_full_turn():
    assert byte_to_radian(255) == pytest.approx(2 * math.pi)
    assert byte_to_radian(128) == pytest.approx(3.15391, abs=1e-4)


# ============================================================================
# APPROACH
# ============================================================================

def test_approach_in_range_does_nothing(logger, sleeps):
    game = FakeGame(scripts={3: [mob(3.0)]})

    result = _navigator(logger, game).approach(Target(3, mob(3.0)), Config.MELEE_DISTANCE)

    assert game.calls == []
    assert sleeps == []
    assert result.index == 3


def test_approach_outer_tolerance_gates_moving(logger):
    game = FakeGame(scripts={3: [mob(4.5)]})

    _navigator(logger, game).approach(Target(3, mob(4.5)), 5)

    assert game.calls == []


def test_approach_releases_key_on_first_exit_check(logger):
    game = FakeGame(scripts={3: [mob(3.5), mob(2.0)]})

    _navigator(logger, game).approach(Target(3, mob(3.5)), 3)

    assert game.calls == [('key', Config.MOVE_FORWARD_KEY, False)]


def test_approach_runs_until_melee_distance(logger, sleeps):
    game = FakeGame(scripts={3: [mob(10.0), mob(10.0), mob(6.0), mob(2.0)]})
    navigator = _navigator(logger, game)

    result = navigator.approach(Target(3, mob(10.0)), Config.MELEE_DISTANCE)

    assert result.entity.distance == 2.0
    assert len(game.named('facing')) == 2
    assert game.named('view_mode') == [('view_mode', ViewMode.FIRST_PERSON)] * 2
    assert game.named('key') == [
        ('key', Config.MOVE_FORWARD_KEY, True),
        ('key', Config.MOVE_FORWARD_KEY, True),
        ('key', Config.MOVE_FORWARD_KEY, False),
    ]
    assert game.calls[-1] == ('key', Config.MOVE_FORWARD_KEY, False)
    assert sleeps == [Config.TICK_SECONDS] * 2
    assert navigator.approaches == 1


def test_approach_stops_at_melee_distance_not_tolerance(logger):
    # Tolerance 10 lets the loop start, but only distance 3 stops it
    game = FakeGame(scripts={3: [mob(12.0), mob(8.0), mob(4.0), mob(3.0)]})

    _navigator(logger, game).approach(Target(3, mob(12.0)), 10)

    assert len(game.named('facing')) == 2


def test_approach_faces_target(logger):
    game = FakeGame(
        scripts={3: [mob(10.0, x=-10.0), mob(10.0, x=-10.0), mob(1.0, x=-1.0)]},
        player=_at(0, 0),
    )

    _navigator(logger, game).approach(Target(3, mob(10.0)), 3)

    assert game.named('facing') == [('facing', pytest.approx(128 / 255 * 2 * math.pi))]


def test_approach_sets_view_before_facing(logger):
    game = FakeGame(scripts={3: [mob(10.0), mob(10.0), mob(1.0)]})

    _navigator(logger, game).approach(Target(3, mob(10.0)), 3)

    names = [call[0] for call in game.calls]
    assert names == ['view_mode', 'facing', 'key', 'key']


def test_approach_releases_key_on_error(logger):
    class BrokenFacing(FakeGame):
        def set_player_facing(self, radian):
            raise RuntimeError("write failed")

    game = BrokenFacing(scripts={3: [mob(10.0)]})

    with pytest.raises(RuntimeError):
        _navigator(logger, game).approach(Target(3, mob(10.0)), 3)

    assert game.calls[-1] == ('key', Config.MOVE_FORWARD_KEY, False)
