import pytest

from tunnelgfx.mathlib import Vector
from tunnelgfx.mesh import (
    Mesh,
    PrefabLibrary,
    PrefabType,
    Triangle,
    Vertex,
    build_prefab,
)


def _constant_color():
    return Vector(0.5, 0.5, 0.5, 1.0)


def _counting_source():
    calls = []

    def source():
        calls.append(len(calls))
        return Vector(float(len(calls)), 0.0, 0.0, 1.0)

    return source, calls


@pytest.mark.parametrize(
    "kind, verts, tris",
    [
        (PrefabType.UNIT_CUBE, 24, 12),
        (PrefabType.UNIT_FLOOR, 4, 4),
        (PrefabType.RECT, 4, 4),
        (PrefabType.SEGMENT, 16, 16),
    ],
)
def test_prefab_sizes(kind, verts, tris):
    mesh = build_prefab(kind, _constant_color)
    assert len(mesh.vertices) == verts
    assert len(mesh.triangles) == tris
    assert mesh.index_count() == tris * 3


@pytest.mark.parametrize("kind", list(PrefabType))
def test_indices_in_range(kind):
    mesh = build_prefab(kind, _constant_color)
    for triangle in mesh.triangles:
        assert all(0 <= index < len(mesh.vertices) for index in triangle)


def test_cube_corners_on_half_unit():
    mesh = build_prefab(PrefabType.UNIT_CUBE, _constant_color)
    for vertex in mesh.vertices:
        assert {abs(vertex.pos.x), abs(vertex.pos.y), abs(vertex.pos.z)} == {0.5}
        assert vertex.pos.w == 1.0


def test_floor_vertices_from_source():
    mesh = build_prefab(PrefabType.UNIT_FLOOR, _constant_color)
    first = mesh.vertices[0]
    assert (first.pos.x, first.pos.y, first.pos.z) == (1.0, 0.0, -1.0)
    assert (first.u, first.v) == (0.0, 1.0)
    assert mesh.triangles[1] == Triangle(0, 2, 3)


def test_cube_back_face_reversed():
    mesh = build_prefab(PrefabType.UNIT_CUBE, _constant_color)
    assert mesh.triangles[2] == Triangle(6, 5, 4)
    assert mesh.triangles[3] == Triangle(7, 6, 4)


def test_color_source_called_per_vertex_in_order():
    source, calls = _counting_source()
    mesh = build_prefab(PrefabType.SEGMENT, source)
    assert len(calls) == len(mesh.vertices)
    assert [v.col.x for v in mesh.vertices] == [float(i + 1) for i in range(len(calls))]


def test_default_colors_in_unit_range():
    mesh = build_prefab(PrefabType.RECT)
    for vertex in mesh.vertices:
        assert 0.0 <= vertex.col.x <= 1.0
        assert vertex.col.w == 1.0


def test_invalid_prefab_type():
    with pytest.raises(ValueError):
        build_prefab("cube", _constant_color)


def test_library_shares_meshes():
    library = PrefabLibrary(_constant_color)
    assert library.get(PrefabType.RECT) is library.get(PrefabType.RECT)
    assert len(library.get(PrefabType.UNIT_CUBE).vertices) == 24
    with pytest.raises(ValueError):
        library.get(7)


def test_mesh_index_count_custom():
    color = Vector()
    verts = tuple(Vertex(Vector(), 0.0, 0.0, color) for _ in range(3))
    mesh = Mesh(verts, (Triangle(0, 1, 2), Triangle(2, 1, 0)))
    assert mesh.index_count() == 2 * 3