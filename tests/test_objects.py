import random

import pytest

from rocketsim.objects import (
    CLOUD_SPRITE,
    GROUND_LEVEL,
    ROCKET_BODY,
    ROCKET_SPRITE,
    ROCKET_STAGES,
    TREE_SPRITE,
    WORLD_WIDTH,
    Cloud,
    Rocket,
    Stage,
    Star,
    Tree,
    World,
    init_clouds,
    init_stars,
    init_trees,
    is_star_at,
    launch_rocket,
)


def test_stages_match_presets():
    assert [s.name for s in ROCKET_STAGES] == ["Основная", "Ускоритель", "Маневровый"]
    assert ROCKET_STAGES[0].max_thrust_y == 15.0
    assert ROCKET_STAGES[1].fuel_consumption_rate == 2.0
    assert ROCKET_STAGES[2].max_thrust_x == 3.5
    assert isinstance(ROCKET_STAGES[0], Stage)
    bottoms = [Rocket(active_stage=i).sprite()[-1] for i in range(len(ROCKET_STAGES))]
    assert bottoms == ["  /\\  ", " /||\\ ", " <||> "]


@pytest.mark.parametrize("index", range(3))
def test_sprite_combines_body_and_stage_bottom(index):
    rocket = Rocket(active_stage=index)
    sprite = rocket.sprite()
    assert sprite[: len(ROCKET_BODY)] == list(ROCKET_BODY)
    assert sprite[len(ROCKET_BODY):] == list(ROCKET_STAGES[index].bottom_sprite)


def test_first_stage_sprite_is_classic_sprite():
    assert Rocket().sprite() == list(ROCKET_SPRITE)


def test_booster_sprite_bottom():
    assert Rocket(active_stage=1).sprite()[-1] == " /||\\ "


@pytest.mark.parametrize("bad", [-1, 3, 42])
def test_invalid_stage_is_reset(bad):
    rocket = Rocket(active_stage=bad)
    assert rocket.sprite() == list(ROCKET_SPRITE)
    assert rocket.active_stage == 0


def test_launch_rocket_stands_on_ground_centered():
    rocket = launch_rocket(9.5)
    assert rocket.y + len(ROCKET_SPRITE) == GROUND_LEVEL
    assert rocket.x + len(ROCKET_SPRITE[0]) // 2 == WORLD_WIDTH // 2
    assert rocket.thrust_y == 9.5
    assert rocket.fuel == 10000
    assert (rocket.vx, rocket.vy, rocket.active_stage) == (0, 0, 0)


def test_respawn_resets_position_speed_and_fuel():
    start = launch_rocket(1.0)
    rocket = Rocket(x=5, y=-500, vx=3.0, vy=40.0, fuel=7.0, thrust_y=2.0)
    rocket.respawn()
    assert (rocket.x, rocket.y) == (start.x, start.y)
    assert (rocket.vx, rocket.vy) == (0, 0)
    assert rocket.fuel == 100
    assert rocket.thrust_y == 2.0


def test_init_stars_bounds():
    stars = init_stars(50, random.Random(1))
    assert len(stars) == 50
    assert all(isinstance(s, Star) for s in stars)
    assert all(0 <= s.x < WORLD_WIDTH and 0 <= s.y < GROUND_LEVEL for s in stars)


def test_init_clouds_bounds():
    clouds = init_clouds(80, random.Random(2))
    assert len(clouds) == 80
    assert all(isinstance(c, Cloud) for c in clouds)
    assert all(0 <= c.x < WORLD_WIDTH and 10 <= c.y < 30 for c in clouds)
    assert all(c.sprite == CLOUD_SPRITE for c in clouds)


def test_init_trees_stand_on_ground():
    trees = init_trees(30, random.Random(3))
    assert len(trees) == 30
    assert all(isinstance(t, Tree) for t in trees)
    assert all(t.y + len(TREE_SPRITE) == GROUND_LEVEL for t in trees)
    assert all(0 <= t.x < WORLD_WIDTH for t in trees)


def test_generation_is_reproducible_with_seed():
    clouds = init_clouds(20, random.Random(7))
    assert len(clouds) == 20
    assert clouds == init_clouds(20, random.Random(7))
    assert len({(c.x, c.y) for c in clouds}) > 1


def test_init_with_zero_count_is_empty():
    assert init_stars(0) == []


def test_world_generate_counts():
    world = World.generate(stars=5, clouds=6, trees=7, rng=random.Random(0))
    assert (len(world.stars), len(world.clouds), len(world.trees)) == (5, 6, 7)


def test_world_generate_reproducible():
    a = World.generate(3, 3, 3, random.Random(11))
    b = World.generate(3, 3, 3, random.Random(11))
    assert a == b


def test_star_at_origin():
    assert is_star_at(0, 0) is True


def test_star_hash_is_deterministic_and_sparse():
    cells = [(x, y) for x in range(-100, 100) for y in range(-100, 100)]
    hits = sum(is_star_at(x, y) for x, y in cells)
    assert 0.01 < hits / len(cells) < 0.06
    assert [is_star_at(x, y) for x, y in cells[:500]] == [is_star_at(x, y) for x, y in cells[:500]]


def test_star_hash_handles_huge_coordinates():
    assert is_star_at(10**15, -(10**15)) in (True, False)
    assert is_star_at(10**15, -(10**15)) == is_star_at(10**15, -(10**15))