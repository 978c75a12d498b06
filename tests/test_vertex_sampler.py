"""Tests for grid vertex sampling."""

import numpy as np

from planargrid.generators.vertex_sampler import sample_vertices


class TestSampleVertices:
    def test_probability_zero(self):
        assert sample_vertices(5, 0.0, np.random.default_rng(0)) == ()

    def test_probability_one_is_row_major(self):
        vertices = sample_vertices(3, 1.0, np.random.default_rng(0))
        assert vertices == (
            (0, 0), (1, 0), (2, 0),
            (0, 1), (1, 1), (2, 1),
            (0, 2), (1, 2), (2, 2),
        )

    def test_zero_grid(self):
        assert sample_vertices(0, 0.5, np.random.default_rng(0)) == ()

    def test_ordering_is_row_major(self):
        vertices = sample_vertices(10, 0.4, np.random.default_rng(5))
        assert list(vertices) == sorted(vertices, key=lambda p: (p[1], p[0]))

    def test_within_grid(self):
        vertices = sample_vertices(7, 0.5, np.random.default_rng(9))
        assert all(0 <= x < 7 and 0 <= y < 7 for x, y in vertices)
        assert len(set(vertices)) == len(vertices)

    def test_deterministic(self):
        a = sample_vertices(8, 0.3, np.random.default_rng(123))
        b = sample_vertices(8, 0.3, np.random.default_rng(123))
        assert a == b

    def test_one_draw_per_cell(self):
        rng = np.random.default_rng(11)
        sample_vertices(4, 0.5, rng)
        reference = np.random.default_rng(11)
        reference.random(16)
        assert rng.random() == reference.random()
