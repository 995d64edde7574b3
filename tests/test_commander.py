import random

import pytest

from fatecommander.battlefield import Battlefield
from fatecommander.commander import Commander
from fatecommander.tile import TileType
from fatecommander.unit import BrawlerUnit, SniperUnit, Team, UnitType


def make_field(size=11):
    field = Battlefield(grid_size=size, rng=random.Random(1))
    field.spawn_grid()
    return field


def unit_on(field, cls, team, x, y):
    loc = field.tile_at(x, y).location
    return cls(team, x, y, (loc[0], loc[1], loc[2] + 10.0))


def test_human_first_waits_for_click():
    cmd = Commander(make_field(), random.Random(0), human_first=True)
    cmd.start_placement_phase()
    assert cmd.placement_active
    assert cmd.units == []
    assert cmd.is_current_turn_human()


def test_ai_first_places_sniper_immediately():
    cmd = Commander(make_field(), random.Random(0), human_first=False)
    cmd.start_placement_phase()
    assert len(cmd.units) == 1
    assert cmd.units[0].team is Team.RED
    assert cmd.units[0].unit_type is UnitType.SNIPER
    assert cmd.placement_step == 1
    assert cmd.is_current_turn_human()


def test_click_on_obstacle_places_nothing():
    field = make_field()
    field.tile_at(2, 2).tile_type = TileType.MOUNTAIN
    cmd = Commander(field, random.Random(0), human_first=True)
    cmd.start_placement_phase()
    assert cmd.handle_placement((2, 2)) is False
    assert cmd.placement_step == 0
    assert cmd.units == []


def test_full_placement_sequence():
    cmd = Commander(make_field(), random.Random(3), human_first=True)
    cmd.start_placement_phase()
    cmd.handle_tile_clicked((0, 0))
    assert cmd.placement_step == 2
    cmd.handle_tile_clicked((1, 1))
    assert cmd.is_placement_phase_complete()
    assert not cmd.placement_active
    kinds = sorted((u.team.value, u.unit_type.value) for u in cmd.units)
    assert kinds == sorted(
        [
            ("green", "sniper"),
            ("red", "sniper"),
            ("green", "brawler"),
            ("red", "brawler"),
        ]
    )
    green = [u for u in cmd.units if u.team is Team.GREEN]
    assert {u.coordinates for u in green} == {(0, 0), (1, 1)}


def test_placement_ignored_after_phase_ends():
    cmd = Commander(make_field(), random.Random(3), human_first=True)
    cmd.start_placement_phase()
    cmd.handle_tile_clicked((0, 0))
    cmd.handle_tile_clicked((1, 1))
    assert cmd.handle_placement((2, 2)) is False
    assert len(cmd.units) == 4


def test_ai_cannot_place_without_empty_tiles():
    field = make_field(size=1)
    field.tile_at(0, 0).tile_type = TileType.TREE1
    cmd = Commander(field, random.Random(0), human_first=False)
    cmd.start_placement_phase()
    assert cmd.units == []
    assert cmd.placement_step == 0


def test_placed_unit_sits_above_tile_and_grid_coord_matches():
    field = make_field()
    cmd = Commander(field, random.Random(0), human_first=True)
    cmd.start_placement_phase()
    cmd.handle_tile_clicked((4, 7))
    unit = cmd.units[0]
    tile = field.tile_at(4, 7)
    assert unit.location[:2] == tile.location[:2]
    assert unit.location[2] == tile.location[2] + 10.0
    for placed in cmd.units:
        assert cmd.unit_grid_coord(placed) == placed.coordinates


def test_toss_gives_both_outcomes():
    results = {
        Commander(make_field(), random.Random(seed)).human_first for seed in range(30)
    }
    assert results == {True, False}


def test_highlight_matches_manhattan_range():
    field = make_field()
    field.tile_at(5, 6).tile_type = TileType.MOUNTAIN
    cmd = Commander(field, random.Random(0), human_first=True)
    unit = unit_on(field, SniperUnit, Team.GREEN, 5, 5)
    cmd.units.append(unit)
    cmd.set_selected_unit(unit)
    highlighted = {t.coordinates for t in field.tiles if t.highlighted}
    expected = {
        t.coordinates
        for t in field.tiles
        if t.is_empty() and abs(t.x - 5) + abs(t.y - 5) <= unit.movement_range
    }
    assert highlighted == expected
    assert (5, 6) not in highlighted
    assert {t.coordinates for t in cmd.reachable_tiles_for_movement} == highlighted


def test_clear_highlighted_tiles():
    field = make_field()
    cmd = Commander(field, random.Random(0), human_first=True)
    unit = unit_on(field, BrawlerUnit, Team.GREEN, 3, 3)
    cmd.units.append(unit)
    cmd.set_selected_unit(unit)
    cmd.clear_highlighted_tiles()
    assert not any(t.highlighted for t in field.tiles)
    assert cmd.reachable_tiles_for_movement == []


def test_selecting_another_unit_deselects_previous():
    field = make_field()
    cmd = Commander(field, random.Random(0), human_first=True)
    first = unit_on(field, SniperUnit, Team.GREEN, 1, 1)
    second = unit_on(field, BrawlerUnit, Team.GREEN, 8, 8)
    cmd.units.extend([first, second])
    cmd.set_selected_unit(first)
    assert first.selected and first.reachable_tiles
    cmd.set_selected_unit(second)
    assert not first.selected
    assert first.reachable_tiles == []
    assert second.selected
    assert cmd.selected_unit is second


def test_click_reachable_tile_moves_unit():
    field = make_field()
    cmd = Commander(field, random.Random(0), human_first=True)
    unit = unit_on(field, SniperUnit, Team.GREEN, 5, 5)
    cmd.units.append(unit)
    cmd.set_selected_unit(unit)
    cmd.handle_tile_clicked((5, 7))
    assert unit.coordinates == (5, 7)
    assert unit.location[:2] == field.tile_at(5, 7).location[:2]
    assert cmd.selected_unit is None
    assert not unit.selected
    assert not any(t.highlighted for t in field.tiles)


def test_click_out_of_range_does_not_move():
    field = make_field()
    cmd = Commander(field, random.Random(0), human_first=True)
    unit = unit_on(field, SniperUnit, Team.GREEN, 5, 5)
    cmd.units.append(unit)
    cmd.set_selected_unit(unit)
    cmd.handle_tile_clicked((10, 10))
    assert unit.coordinates == (5, 5)
    assert cmd.selected_unit is unit


def test_ai_brawler_closes_in_and_attacks():
    field = make_field()
    cmd = Commander(field, random.Random(5), human_first=True)
    brawler = unit_on(field, BrawlerUnit, Team.RED, 0, 0)
    target = unit_on(field, SniperUnit, Team.GREEN, 3, 0)
    cmd.units.extend([brawler, target])
    attacks = cmd.execute_ai_turn()
    assert len(attacks) == 1
    attack = attacks[0]
    assert attack.attacker is brawler and attack.target is target
    assert 1 <= attack.damage <= 6
    assert target.current_hp == target.max_hp - attack.damage
    assert abs(brawler.x - 3) + abs(brawler.y - 0) == 1
    assert cmd.unit_grid_coord(brawler) == brawler.coordinates
    assert cmd.selected_unit is None


def test_ai_out_of_range_moves_without_attacking():
    field = make_field(size=25)
    cmd = Commander(field, random.Random(2), human_first=True)
    brawler = unit_on(field, BrawlerUnit, Team.RED, 0, 0)
    target = unit_on(field, SniperUnit, Team.GREEN, 24, 24)
    cmd.units.extend([brawler, target])
    attacks = cmd.execute_ai_turn()
    assert attacks == []
    assert target.current_hp == target.max_hp
    assert brawler.x + brawler.y == brawler.movement_range


def test_ai_without_targets_stays_put():
    field = make_field()
    cmd = Commander(field, random.Random(0), human_first=True)
    brawler = unit_on(field, BrawlerUnit, Team.RED, 4, 4)
    cmd.units.append(brawler)
    assert cmd.execute_ai_turn() == []
    assert brawler.coordinates == (4, 4)


@pytest.mark.parametrize("human_first", [True, False])
def test_turn_alternates_during_placement(human_first):
    cmd = Commander(make_field(), random.Random(0), human_first=human_first)
    cmd.placement_step = 0
    first = cmd.is_current_turn_human()
    cmd.placement_step = 1
    assert cmd.is_current_turn_human() is (not first)
    assert first is human_first