import pytest

from floorplan_geometry.floor_plan_analyzer import RoomRect
from floorplan_geometry.units import (
    PX_PER_M,
    Measurement,
    canvas_to_world,
    m_to_px,
    measure,
    px_to_m,
    room_to_world_box,
    world_to_canvas,
)


def test_scale():
    assert PX_PER_M == pytest.approx(20)
    assert px_to_m(20) == pytest.approx(1.0)
    assert m_to_px(1.4) == pytest.approx(28)


def test_canvas_center_is_world_origin():
    assert canvas_to_world(140, 140) == pytest.approx((0, 0))


def test_world_to_canvas_inverts():
    wx, wz = canvas_to_world(30, 250)
    assert world_to_canvas(wx, wz) == pytest.approx((30, 250))


def test_room_to_world_box():
    room = RoomRect(x=120, y=120, width=40, height=60)
    (cx, cz), (w, d) = room_to_world_box(room)
    assert (cx, cz) == pytest.approx((0, 0.5))
    assert (w, d) == pytest.approx((2, 3))


def test_measure_on_floor():
    m = measure((1.0, 2.0), (4.0, 6.0))
    assert m == Measurement(horizontal=5.0, vertical=0.0, total=5.0)


def test_measure_with_heights():
    m = measure((0.0, 0.0), (3.0, 0.0), h1=2.5, h2=6.5)
    assert m.horizontal == pytest.approx(3.0)
    assert m.vertical == pytest.approx(4.0)
    assert m.total == pytest.approx(5.0)


def test_measure_is_order_independent():
    a = measure((0.5, -1.0), (2.0, 1.0), h1=1.2, h2=0.3)
    b = measure((2.0, 1.0), (0.5, -1.0), h1=0.3, h2=1.2)
    assert a.horizontal == pytest.approx(b.horizontal)
    assert a.vertical == pytest.approx(b.vertical)
    assert a.total == pytest.approx(b.total)
    assert a.vertical == pytest.approx(0.9)


def test_units_exported_from_package():
    import floorplan_geometry

    assert floorplan_geometry.canvas_to_world is canvas_to_world
    assert floorplan_geometry.measure is measure
    for name in ('px_to_m', 'world_to_canvas', 'room_to_world_box', 'Measurement'):
        assert name in floorplan_geometry.__all__
