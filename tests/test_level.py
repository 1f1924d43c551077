import pytest

from cellquest import models
from cellquest.level import create_level, create_levels, populate_level
from cellquest.models import EntityBehavior, EntityType


def test_create_level_is_empty():
    level = create_level("Name", "Desc", 1000.0, 7)
    assert level.name == "Name"
    assert level.description == "Desc"
    assert level.level_width == 1000.0
    assert level.id == 7
    assert level.platforms == [] and level.enemies == [] and level.glucose_items == []
    assert level.scroll_x == 0


def test_create_levels_ids_and_widths():
    levels = create_levels()
    assert [lv.id for lv in levels] == [1, 2, 3]
    assert [lv.level_width for lv in levels] == [1600, 2400, 3200]
    assert levels[0].name == "The Blood Stream"
    assert levels[1].name == "The Lymph Node"
    assert levels[2].name == "The Final Battle"


def test_blood_stream_platforms():
    level = create_levels()[0]
    assert len(level.platforms) == 18
    deadly = [p for p in level.platforms if p.is_deadly]
    assert len(deadly) == 2
    assert all(p.y == pytest.approx(models.SCREEN_HEIGHT / 2.0) for p in deadly)
    floors = level.platforms[:8]
    ceilings = level.platforms[8:16]
    assert all(f.y > c.y for f, c in zip(floors, ceilings))
    assert sum(p.width for p in floors) == level.level_width


def test_blood_stream_portal_sits_on_last_floor():
    level = create_levels()[0]
    portal = level.portal
    assert portal.is_active
    assert portal.x + portal.width + 20.0 == pytest.approx(level.level_width)
    assert portal.y + portal.height == pytest.approx(level.platforms[7].y)


def test_blood_stream_enemies():
    level = create_levels()[0]
    assert len(level.enemies) == 5
    assert all(e.type is EntityType.T_CELL for e in level.enemies)
    assert all(e.behavior is EntityBehavior.PATROL for e in level.enemies)
    assert all(e.active and e.health == e.max_health == 50 for e in level.enemies)
    xs = [e.x for e in level.enemies]
    assert all(b - a == pytest.approx(300.0) for a, b in zip(xs, xs[1:]))


def test_blood_stream_glucose():
    level = create_levels()[0]
    assert len(level.glucose_items) == 3
    assert all(g.active for g in level.glucose_items)
    assert level.glucose_items[0].y == models.SCREEN_HEIGHT - 150.0
    assert all(g.width == models.GLUCOSE_WIDTH for g in level.glucose_items)


def test_repopulate_restores_content():
    level = create_levels()[0]
    level.glucose_items[0].active = False
    level.enemies[0].x = -500.0
    level.enemies.pop()
    populate_level(level)
    assert all(g.active for g in level.glucose_items)
    assert len(level.enemies) == 5
    assert level.enemies[0].x == pytest.approx(400.0)


@pytest.mark.parametrize("index", [1, 2])
def test_flat_levels(index):
    level = create_levels()[index]
    assert len(level.platforms) == 1
    floor = level.platforms[0]
    assert floor.width == level.level_width
    assert floor.y + floor.height == models.SCREEN_HEIGHT
    assert level.enemies == []
    assert level.glucose_items == []
    assert level.portal.y + level.portal.height == pytest.approx(floor.y)


def test_unknown_level_id_is_left_empty():
    level = create_level("X", "Y", 500.0, 99)
    populate_level(level)
    assert level.platforms == []
    assert level.portal.is_active is False