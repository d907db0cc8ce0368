import pytest

from sowascene.renderer2d import (
    IDENTITY,
    MAX_TEXTURES,
    MAX_VERTICES,
    Color,
    QuadArgs,
    Renderer2D,
    Vertex2D,
)

BLANK = 99


@pytest.fixture
def batches():
    return []


@pytest.fixture
def renderer(batches):
    return Renderer2D(BLANK, batches.append)


def _translation(tx, ty):
    return (
        (1.0, 0.0, 0.0, tx),
        (0.0, 1.0, 0.0, ty),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def test_rect_becomes_two_triangles(renderer):
    renderer.push_rect(1.0, 2.0, 3.0, 4.0, 5.0, 0.1, 0.2, 0.3, 0.4, 7.0, 0.0)
    vertices = renderer.vertices
    assert len(vertices) == 6
    assert vertices[3] == vertices[0]
    assert vertices[4] == vertices[2]
    assert (vertices[0].x, vertices[0].y) == (1.0, 2.0 + 5.0)
    assert (vertices[1].x, vertices[1].y) == (1.0, 2.0)
    assert (vertices[2].x, vertices[2].y) == (1.0 + 4.0, 2.0)
    assert (vertices[5].x, vertices[5].y) == (1.0 + 4.0, 2.0 + 5.0)
    assert all(v.z == 3.0 and v.d_id == 7.0 for v in vertices)
    assert (vertices[0].r, vertices[0].a) == (0.1, 0.4)


def test_untextured_quad_uses_blank_texture(renderer):
    renderer.push_rect(0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 0)
    batch = renderer.end()
    assert batch.textures == {BLANK: 0}
    assert all(v.t_id == 0.0 for v in batch.vertices)


def test_texture_ids_map_to_units_in_order(renderer):
    renderer.push_rect(0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 42)
    renderer.push_rect(0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 7)
    renderer.push_rect(0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 42)
    batch = renderer.end()
    assert batch.textures == {7: 1, 42: 0}
    assert list(batch.textures) == [7, 42]
    assert batch.units == [0, 1]
    assert [v.t_id for v in batch.vertices[::6]] == [0.0, 1.0, 0.0]


def test_end_flushes_and_resets(renderer, batches):
    renderer.push_rect(0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 0)
    batch = renderer.end()
    assert batches == [batch]
    assert renderer.vertices == ()
    assert renderer.texture_count == 0


def test_end_without_quads_flushes_nothing(renderer, batches):
    assert renderer.end() is None
    assert batches == []


def test_texture_limit_forces_flush(renderer, batches):
    for texture in range(1, MAX_TEXTURES + 1):
        renderer.push_rect(0, 0, 0, 1, 1, 1, 1, 1, 1, 1, texture)
    assert len(batches) == 1
    assert len(batches[0].textures) == MAX_TEXTURES
    assert batches[0].units == list(range(MAX_TEXTURES))
    assert renderer.vertices == ()


def test_vertex_limit_forces_flush(renderer, batches):
    for _ in range(MAX_VERTICES // 6):
        renderer.push_rect(0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 0)
    assert len(batches) == 1
    assert len(batches[0].vertices) == MAX_VERTICES
    assert renderer.vertices == ()


def test_push_vertices_needs_four(renderer):
    with pytest.raises(ValueError):
        renderer.push_vertices([Vertex2D()] * 3)


def test_push_quad_default_uvs_and_centred(renderer):
    renderer.push_quad(QuadArgs(texture_scale=(4.0, 6.0)))
    v = renderer.vertices
    assert [(p.u, p.v) for p in (v[0], v[1], v[2], v[5])] == [
        (0.0, 1.0), (0.0, 0.0), (1.0, 0.0), (1.0, 1.0)
    ]
    assert v[0].x == -v[2].x
    assert v[0].y == -v[2].y
    assert v[2].x - v[0].x == 4.0
    assert v[0].y - v[1].y == 6.0
    assert v[0].d_id == 1.0


def test_push_quad_custom_uvs(renderer):
    renderer.push_quad(QuadArgs(uv_top_left=(0.25, 0.75), uv_bottom_right=(0.5, 0.5)))
    v = renderer.vertices
    assert [(p.u, p.v) for p in (v[0], v[1], v[2], v[5])] == [
        (0.25, 0.75), (0.25, 0.5), (0.5, 0.5), (0.5, 0.75)
    ]


def test_transform_translates_corners(renderer):
    scale = (2.0, 2.0)
    renderer.push_transformed(IDENTITY, 0, scale)
    centred = renderer.vertices
    renderer.reset()
    renderer.push_transformed(_translation(10.0, -5.0), 0, scale, 3.0, Color(0.5, 0.5, 0.5, 1.0), 8.0)
    moved = renderer.vertices
    for a, b in zip(centred, moved):
        assert b.x == a.x + 10.0
        assert b.y == a.y - 5.0
    assert moved[0].z == 3.0
    assert moved[0].r == 0.5
    assert moved[0].d_id == 8.0


def test_without_flush_callback_end_returns_batch():
    renderer = Renderer2D(BLANK)
    renderer.push_rect(0, 0, 0, 1, 1, 1, 1, 1, 1, 1, 0)
    batch = renderer.end()
    assert len(batch.vertices) == 6
    assert batch.projection == renderer.projection