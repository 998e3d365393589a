import pytest

from gameassets.bbox import BoundingBox
from gameassets.binary import DataReader, DataWriter
from gameassets.vertex import ModelVertex


def test_default_box():
    box = BoundingBox()
    assert box.origin == (0.0, 0.0, 0.0)
    assert box.extents == (0.5, 0.5, 0.5)


def test_round_trip():
    box = BoundingBox(origin=(1.0, 2.0, 3.0), extents=(0.25, 4.0, 8.0))
    writer = DataWriter()
    box.write(writer)
    reader = DataReader(writer.getvalue())
    assert BoundingBox.read(reader) == box
    assert reader.remaining_size() == 0


def test_from_vertices_encloses_points_exactly():
    vertices = [
        ModelVertex(position=(-1.0, -2.0, -3.0)),
        ModelVertex(position=(3.0, 2.0, 1.0)),
        ModelVertex(position=(0.0, 0.0, 0.0)),
    ]
    corners = BoundingBox.from_vertices(vertices).points()
    assert tuple(min(axis) for axis in zip(*corners)) == (-1.0, -2.0, -3.0)
    assert tuple(max(axis) for axis in zip(*corners)) == (3.0, 2.0, 1.0)


def test_from_no_vertices_warns_and_returns_default():
    with pytest.warns(UserWarning):
        box = BoundingBox.from_vertices([])
    assert box == BoundingBox()


def test_point_order():
    box = BoundingBox(origin=(1.0, 1.0, 1.0), extents=(1.0, 2.0, 4.0))
    points = box.points()
    assert len(points) == 8
    assert points[0] == (0.0, -1.0, -3.0)
    assert points[1] == (0.0, -1.0, 5.0)
    assert points[-1] == (2.0, 3.0, 5.0)


def test_points_flat_matches_points():
    box = BoundingBox(origin=(0.5, -0.5, 2.0), extents=(1.0, 1.5, 0.25))
    flat = box.points_flat()
    assert len(flat) == 24
    assert [tuple(flat[i:i + 3]) for i in range(0, 24, 3)] == box.points()


def test_truncated_read_raises():
    with pytest.raises(EOFError):
        BoundingBox.read(DataReader(b"\x00" * 12))