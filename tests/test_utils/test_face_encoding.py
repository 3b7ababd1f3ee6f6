"""Tests for objx.utils.face_encoding — sign-terminated face runs."""

import numpy as np
import pytest

from objx.utils.face_encoding import (
    Corner,
    count_polygons,
    decode_corners,
    decode_index,
    encode_polygons,
    is_terminated,
    split_polygons,
)


class TestDecodeIndex:
    def test_non_negative_continues_polygon(self):
        assert decode_index(0) == (0, False)
        assert decode_index(7) == (7, False)

    def test_negative_terminates_polygon(self):
        """-f - 1 is the real index: -1 -> 0, -3 -> 2."""
        assert decode_index(-1) == (0, True)
        assert decode_index(-3) == (2, True)

    def test_numpy_scalar(self):
        vertex_index, is_last = decode_index(np.int32(-5))
        assert vertex_index == 4
        assert type(vertex_index) is int
        assert is_last is True


class TestDecodeCorners:
    def test_positions_follow_run_not_vertex(self):
        """Two corners decoding to vertex 0 keep distinct positions."""
        corners = decode_corners([0, 1, -3, 0, 2, -4])
        assert [c.position for c in corners] == [0, 1, 2, 3, 4, 5]
        assert [c.vertex_index for c in corners] == [0, 1, 2, 0, 2, 3]
        assert corners[0].vertex_index == corners[3].vertex_index
        assert corners[0].position != corners[3].position

    def test_empty(self):
        assert decode_corners([]) == []


class TestSplitPolygons:
    def test_two_triangles(self):
        polygons = split_polygons([0, 1, -3, 2, 1, -4])
        assert [[c.vertex_index for c in p] for p in polygons] == [[0, 1, 2], [2, 1, 3]]

    def test_exactly_one_terminator_per_polygon_and_it_is_last(self):
        polygons = split_polygons([0, 1, 2, -4, 4, -6, 1, 2, -1])
        for polygon in polygons:
            flags = [c.is_last for c in polygon]
            assert flags.count(True) == 1
            assert flags[-1] is True

    def test_mixed_polygon_sizes(self):
        polygons = split_polygons([0, 1, 2, -4, 4, 5, -7])
        assert [len(p) for p in polygons] == [4, 3]

    def test_degenerate_polygons_kept(self):
        """One- and two-corner polygons come through unchanged."""
        polygons = split_polygons([-1, 0, -2])
        assert [len(p) for p in polygons] == [1, 2]
        assert polygons[0][0] == Corner(0, 0, True)

    def test_unterminated_tail(self):
        polygons = split_polygons([0, 1, -3, 3, 4])
        assert len(polygons) == 2
        assert [c.vertex_index for c in polygons[1]] == [3, 4]
        assert polygons[1][-1].is_last is False


class TestCounts:
    def test_is_terminated(self):
        assert is_terminated([]) is True
        assert is_terminated([0, 1, -3]) is True
        assert is_terminated([0, 1, 2]) is False

    def test_count_polygons(self):
        assert count_polygons([]) == 0
        assert count_polygons([0, 1, -3, 2, 1, -4]) == 2
        assert count_polygons([0, 1, -3, 5]) == 2


class TestEncodePolygons:
    def test_encode_triangle(self):
        np.testing.assert_array_equal(encode_polygons([[0, 1, 2]]), [0, 1, -3])

    def test_encode_matches_split(self):
        polygons = [[0, 1, 2, 3], [3, 2, 4], [0, 0]]
        run = encode_polygons(polygons)
        assert [[c.vertex_index for c in p] for p in split_polygons(run)] == polygons

    def test_encode_vertex_zero_as_last(self):
        """Vertex 0 as last corner encodes to -1, never to 0."""
        np.testing.assert_array_equal(encode_polygons([[2, 1, 0]]), [2, 1, -1])

    def test_empty_polygon_raises(self):
        with pytest.raises(ValueError, match="empty polygon"):
            encode_polygons([[0, 1, 2], []])

    def test_fractional_index_raises(self):
        with pytest.raises(ValueError, match="Non-integer vertex index"):
            encode_polygons([[0, 1.7, 2]])

    def test_negative_index_raises(self):
        with pytest.raises(ValueError, match="Negative vertex index"):
            encode_polygons([[0, -1, 2]])
