# -*- coding: utf-8 -*-
import numpy as np
import pytest

from obj2webgl.mesh import MAX_UINT16_VERTICES, unify
from obj2webgl.mesh.triangulate import fan_indices
from obj2webgl.parser import ErrorKind, ObjParseError, parse_obj
from obj2webgl.utils.loader import load_mesh, load_obj

TRIANGLE = "v 0 0 0\nv 1 0 0\nv 0 1 0\n"
QUAD = TRIANGLE + "v 1 1 0\n"


def test_single_triangle():
    mesh = load_mesh(TRIANGLE + "f 1 2 3\n")
    assert mesh.vertex_buffer.dtype == np.float32
    assert mesh.index_buffer.dtype == np.uint16
    assert mesh.vertices().shape == (3, 3)
    assert mesh.index_buffer.tolist() == [0, 1, 2]
    assert not mesh.has_texcoord and not mesh.has_normal
    assert mesh.vertex_stride_bytes == 12


def test_quad_fan():
    mesh = load_mesh(QUAD + "f 1 2 3 4\n")
    assert mesh.index_buffer.tolist() == [0, 1, 2, 0, 2, 3]
    assert mesh.vertex_count == 4
    assert mesh.vertices()[3].tolist() == [1.0, 1.0, 0.0]


def test_same_position_different_normal_is_split():
    mesh = load_mesh(TRIANGLE + "vn 0 0 1\nvn 0 0 -1\nf 1//1 1//2 2//1\n")
    assert mesh.vertex_count == 3
    assert mesh.index_buffer.tolist() == [0, 1, 2]
    verts = mesh.vertices()
    assert verts[0].tolist() == [0, 0, 0, 0, 0, 1]
    assert verts[1].tolist() == [0, 0, 0, 0, 0, -1]


def test_identical_keys_share_a_slot():
    mesh = load_mesh(QUAD + "vt 0 0\nvt 1 0\nf 1/1 2/2 3/1\nf 3/1 2/2 4/2\n")
    assert mesh.index_buffer.tolist() == [0, 1, 2, 2, 1, 3]
    assert mesh.vertex_count == 4


def test_unknown_directive_leaves_buffers_unchanged():
    plain = load_mesh(TRIANGLE + "f 1 2 3\n")
    noisy = load_mesh(TRIANGLE + "l 1 2\nf 1 2 3\n")
    assert plain.vertex_buffer.tobytes() == noisy.vertex_buffer.tobytes()
    assert plain.index_buffer.tobytes() == noisy.index_buffer.tobytes()


def test_unused_texcoords_are_not_packed():
    mesh = load_mesh(TRIANGLE + "vt 0 0\nvt 1 1\nvn 0 0 1\nf 1//1 2//1 3//1\n")
    assert not mesh.has_texcoord
    assert mesh.has_normal
    assert mesh.vertex_stride_bytes == 24
    assert [a.name for a in mesh.attributes()] == ["position", "normal"]


def test_channel_order_and_layout(cube_obj):
    mesh = load_mesh(cube_obj)
    assert mesh.has_texcoord and mesh.has_normal
    assert mesh.vertex_stride_bytes == 32
    assert [(a.name, a.size, a.offset) for a in mesh.attributes()] == [
        ("position", 3, 0), ("texcoord", 2, 12), ("normal", 3, 20)]
    # первая вершина: v1 / vt1 / vn1
    assert mesh.vertices()[0].tolist() == [1, -1, -1, 0, 0, 0, -1, 0]
    # 6 граней‑квадов по 4 уникальных угла
    assert mesh.vertex_count == 24
    assert mesh.triangle_count == 12
    assert mesh.metadata.materials == ["Material"]
    assert mesh.smooth is False


def test_w_is_not_packed():
    mesh = load_mesh("v 1 2 3 9\nv 0 0 0\nv 0 1 0\nf 1 2 3\n")
    assert mesh.vertices()[0].tolist() == [1, 2, 3]


def test_index_count_matches_triangulation(cube_obj):
    data = parse_obj(cube_obj)
    mesh = unify(data)
    expected = sum(len(list(fan_indices(k))) for k in [4] * 6)
    assert len(mesh.index_buffer) == 3 * expected
    # уникальных вершин не больше, чем углов
    keys = {data.corners.key(i) for i in range(len(data.corners))}
    assert mesh.vertex_count == len(keys) <= len(data.corners)


def test_deterministic(cube_obj):
    a = load_mesh(cube_obj)
    b = load_mesh(cube_obj.encode("utf-8"))
    assert a.vertex_buffer.tobytes() == b.vertex_buffer.tobytes()
    assert a.index_buffer.tobytes() == b.index_buffer.tobytes()


def test_artifact_is_read_only():
    mesh = load_mesh(TRIANGLE + "f 1 2 3\n")
    with pytest.raises(ValueError):
        mesh.vertex_buffer[0] = 5.0
    with pytest.raises(ValueError):
        mesh.index_buffer[0] = 1


def test_out_of_range_index_reports_face_line():
    with pytest.raises(ObjParseError) as err:
        load_mesh(TRIANGLE + "\nf 1 2 4\n")
    assert err.value.kind is ErrorKind.INDEX_OUT_OF_RANGE
    assert err.value.line == 5

    with pytest.raises(ObjParseError) as err:
        load_mesh(TRIANGLE + "f 1//1 2//1 3//1\n")
    assert err.value.kind is ErrorKind.INDEX_OUT_OF_RANGE
    assert "normal" in err.value.message


def _many_triangles(count):
    lines = [f"v {i} 0 0" for i in range(count)]
    lines += [f"f {i + 1} {i + 2} {i + 3}" for i in range(0, count - 2, 3)]
    return "\n".join(lines) + "\n"


def test_index_overflow():
    text = _many_triangles(MAX_UINT16_VERTICES + 2)
    with pytest.raises(ObjParseError) as err:
        load_mesh(text)
    assert err.value.kind is ErrorKind.INDEX_OVERFLOW

    mesh = load_mesh(text, wide_indices=True)
    assert mesh.index_buffer.dtype == np.uint32
    assert mesh.index_type == "uint32"
    assert int(mesh.index_buffer.max()) >= MAX_UINT16_VERTICES


def test_exactly_65536_vertices_fit():
    # 21845 треугольников без общих углов + один, добавляющий последний слот
    text = _many_triangles(MAX_UINT16_VERTICES - 1) + f"v 9 9 9\nf {MAX_UINT16_VERTICES} 1 2\n"
    mesh = load_mesh(text)
    assert mesh.vertex_count == MAX_UINT16_VERTICES
    assert int(mesh.index_buffer.max()) == MAX_UINT16_VERTICES - 1
    assert mesh.index_buffer.dtype == np.uint16


def test_same_position_different_texcoord_is_split():
    mesh = load_mesh(TRIANGLE + "vt 0 0\nvt 1 1\nf 1/1 1/2 2/1\n")
    assert mesh.vertex_count == 3
    assert mesh.index_buffer.tolist() == [0, 1, 2]
    verts = mesh.vertices()
    assert verts[0].tolist() == [0, 0, 0, 0, 0]
    assert verts[1].tolist() == [0, 0, 0, 1, 1]


def test_non_utf8_comments_are_tolerated(tmp_path):
    plain = load_mesh(TRIANGLE + "f 1 2 3\n")

    mesh = load_mesh(b"# exported by Caf\xe9 3D\n" + (TRIANGLE + "f 1 2 3\n").encode("ascii"))
    assert mesh.vertex_buffer.tobytes() == plain.vertex_buffer.tobytes()

    path = tmp_path / "latin1.obj"
    path.write_bytes(b"# \xa9 2019\n" + (TRIANGLE + "f 1 2 3\n").encode("ascii"))
    mesh = load_obj(path)
    assert mesh.index_buffer.tolist() == [0, 1, 2]
