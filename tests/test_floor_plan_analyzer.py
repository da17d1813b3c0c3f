"""End-to-end tests for raster room detection."""
import numpy as np
import pytest

from floorplan_geometry.floor_plan_analyzer import (
    ROOM_COLORS,
    AnalyzerConfig,
    FloorPlanAnalyzer,
    RoomRect,
    analyze_floor_plan,
)


def geometry(rooms):
    return [(r.x, r.y, r.width, r.height, r.name, r.color) for r in rooms]


def test_door_gap_does_not_leak(door_gap_plan):
    rooms = analyze_floor_plan(door_gap_plan, 50, 50)
    assert len(rooms) == 1
    room = rooms[0]
    assert (room.x, room.y, room.width, room.height) == (10, 10, 29, 29)
    assert room.name == "Room 1"
    assert room.color == ROOM_COLORS[0]


def test_without_dilation_interior_leaks_to_exterior(door_gap_plan):
    rooms = analyze_floor_plan(door_gap_plan, 50, 50, AnalyzerConfig(dilate_radius=0))
    assert rooms == []


def test_two_rooms_scaled_to_canvas(two_room_plan):
    rooms = analyze_floor_plan(two_room_plan, 200, 100)
    assert [r.name for r in rooms] == ["Room 1", "Room 2"]
    assert (rooms[0].x, rooms[0].y, rooms[0].width, rooms[0].height) == (20, 10, 62, 79)
    assert (rooms[1].x, rooms[1].y, rooms[1].width, rooms[1].height) == (116, 10, 62, 79)
    assert rooms[1].color == ROOM_COLORS[1]


def test_colors_cycle_through_palette(nine_room_plan):
    rooms = analyze_floor_plan(nine_room_plan, 300, 300)
    assert len(rooms) == 9
    assert rooms[-1].name == "Room 9"
    assert rooms[8].color == ROOM_COLORS[0]
    assert [r.color for r in rooms[:8]] == ROOM_COLORS


def test_rooms_have_positive_size(nine_room_plan):
    for room in analyze_floor_plan(nine_room_plan, 280, 280):
        assert room.width > 0
        assert room.height > 0


def test_analysis_is_deterministic(two_room_plan):
    analyzer = FloorPlanAnalyzer()
    first = analyzer.analyze(two_room_plan, 280, 280)
    second = analyzer.analyze(two_room_plan, 280, 280)
    assert geometry(first) == geometry(second)
    assert {r.id for r in first}.isdisjoint(r.id for r in second)


def test_polarity_inversion_gives_same_rooms(two_room_plan, door_gap_plan):
    for plan in (two_room_plan, door_gap_plan):
        normal = analyze_floor_plan(plan, 280, 280)
        inverted = analyze_floor_plan(255 - plan, 280, 280)
        assert len(normal) > 0
        assert geometry(inverted) == geometry(normal)


@pytest.mark.parametrize("value", [0, 255])
def test_uniform_image_yields_no_rooms(value):
    img = np.full((60, 80, 3), value, dtype=np.uint8)
    assert analyze_floor_plan(img, 280, 280) == []


def test_small_regions_are_discarded(door_gap_plan):
    # interior is 900 of 2500 pixels
    assert analyze_floor_plan(door_gap_plan, 50, 50, AnalyzerConfig(min_area_ratio=0.36)) != []
    assert analyze_floor_plan(door_gap_plan, 50, 50, AnalyzerConfig(min_area_ratio=0.37)) == []


def test_large_image_is_downscaled(make_plan):
    plan = make_plan(800, 800, thickness=16)
    rooms = analyze_floor_plan(plan, 800, 800)
    assert len(rooms) == 1
    # 400px working grid: 8px wall + 6px dilation
    assert (rooms[0].x, rooms[0].width) == (28, 742)


def test_gray_and_rgba_inputs(door_gap_plan):
    expected = geometry(analyze_floor_plan(door_gap_plan, 50, 50))

    gray = door_gap_plan[..., 0].copy()
    assert geometry(analyze_floor_plan(gray, 50, 50)) == expected

    alpha = np.full(door_gap_plan.shape[:2] + (1,), 255, dtype=np.uint8)
    rgba = np.concatenate([door_gap_plan, alpha], axis=2)
    assert geometry(analyze_floor_plan(rgba, 50, 50)) == expected


def test_custom_threshold(door_gap_plan):
    plan = door_gap_plan.copy()
    plan[plan == 255] = 150
    assert analyze_floor_plan(plan, 50, 50) == []
    assert len(analyze_floor_plan(plan, 50, 50, AnalyzerConfig(wall_threshold=100))) == 1


@pytest.mark.parametrize("image", [
    np.zeros((0, 0), dtype=np.uint8),
    np.zeros((10, 10, 2), dtype=np.uint8),
    np.zeros((10, 10, 3), dtype=np.float32),
    np.zeros(10, dtype=np.uint8),
])
def test_malformed_buffers_raise(image):
    with pytest.raises(ValueError):
        analyze_floor_plan(image, 100, 100)


def test_non_positive_canvas_raises(door_gap_plan):
    with pytest.raises(ValueError):
        analyze_floor_plan(door_gap_plan, 0, 100)


def test_room_rect_helpers():
    room = RoomRect(x=10, y=20, width=30, height=40, name="Room 1")
    assert room.right == 40
    assert room.bottom == 60
    assert room.center == (25, 40)
    assert room.area == 1200
    assert room.contains(40, 60)
    assert not room.contains(41, 30)
    data = room.to_dict()
    assert data['name'] == "Room 1"
    assert data['id'] == room.id
