import unittest
from unittest import TestCase

import numpy as np

from keytensor import ShapeError, Tensor


class TestTensorRepeat(TestCase):
    def setUp(self) -> None:
        self.t = Tensor((2, 3))
        self.t.fill_sequence(1)

    def test_repeat_inner_appends_fastest_axis(self):
        r = self.t.repeat_inner(3)
        self.assertEqual(r.dim, (2, 3, 3))
        self.assertEqual(r.nelem, self.t.nelem * 3)
        np.testing.assert_array_equal(r.vec, np.repeat(np.arange(1, 7), 3))

    def test_repeat_inner_runs_equal_source_elements(self):
        n = 4
        r = self.t.repeat_inner(n)
        for loc in range(self.t.nelem):
            np.testing.assert_array_equal(
                r.vec[loc * n : (loc + 1) * n], np.full(n, self.t.vec[loc])
            )

    def test_repeat_outer_prepends_slowest_axis(self):
        r = self.t.repeat_outer(2)
        self.assertEqual(r.dim, (2, 2, 3))
        np.testing.assert_array_equal(r.vec, [1, 2, 3, 4, 5, 6, 1, 2, 3, 4, 5, 6])

    def test_repeat_outer_coordinates(self):
        r = self.t.repeat_outer(3)
        for k in range(3):
            for i in range(2):
                for j in range(3):
                    self.assertEqual(r[k, i, j], self.t[i, j])

    def test_repeat_by_one_adds_unit_axis(self):
        self.assertEqual(self.t.repeat_inner(1).dim, (2, 3, 1))
        self.assertEqual(self.t.repeat_outer(1).dim, (1, 2, 3))
        np.testing.assert_array_equal(self.t.repeat_inner(1).vec, self.t.vec)

    def test_repeat_is_pure(self):
        before = self.t.vec.copy()
        r = self.t.repeat_inner(2)
        r.fill(0)
        np.testing.assert_array_equal(self.t.vec, before)

    def test_repeat_preserves_dtype(self):
        t = Tensor((2,), dtype=np.int16)
        self.assertEqual(t.repeat_outer(3).dtype, np.int16)
        self.assertEqual(t.repeat_inner(3).dtype, np.int16)

    def test_repeat_rank_zero(self):
        t = Tensor(())
        t[()] = 2.5
        r = t.repeat_inner(3)
        self.assertEqual(r.dim, (3,))
        np.testing.assert_array_equal(r.vec, [2.5, 2.5, 2.5])

    def test_non_positive_count_raises(self):
        with self.assertRaises(ShapeError):
            self.t.repeat_inner(0)
        with self.assertRaises(ShapeError):
            self.t.repeat_outer(-2)


if __name__ == "__main__":
    unittest.main()
