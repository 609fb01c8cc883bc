import operator
import unittest
from unittest import TestCase

import numpy as np

from keytensor import ReversedSubtractionWarning, ShapeError, Tensor


def _tensor(values, dim=None, dtype=np.float64) -> Tensor:
    arr = np.asarray(values, dtype=dtype)
    t = Tensor(arr.shape if dim is None else dim, dtype=dtype)
    t.copy_from_numpy(arr)
    return t


class TestTensorTensorArithmetic(TestCase):
    def setUp(self) -> None:
        self.x = np.random.randn(3, 4)
        self.y = np.random.randn(3, 4) + 5.0
        self.a = _tensor(self.x)
        self.b = _tensor(self.y)

    def test_binary_operators_match_numpy(self):
        np.testing.assert_allclose((self.a + self.b).to_numpy(), self.x + self.y)
        np.testing.assert_allclose((self.a - self.b).to_numpy(), self.x - self.y)
        np.testing.assert_allclose((self.a * self.b).to_numpy(), self.x * self.y)
        np.testing.assert_allclose((self.a / self.b).to_numpy(), self.x / self.y)

    def test_binary_operators_do_not_mutate_operands(self):
        _ = self.a + self.b
        _ = self.a * self.b
        np.testing.assert_array_equal(self.a.to_numpy(), self.x)
        np.testing.assert_array_equal(self.b.to_numpy(), self.y)

    def test_adding_zero_tensor_is_identity(self):
        z = Tensor(self.a.dim)
        self.assertEqual(self.a + z, self.a)

    def test_compound_assignment_mutates_left_operand(self):
        a = self.a
        a += self.b
        self.assertIs(a, self.a)
        np.testing.assert_allclose(self.a.to_numpy(), self.x + self.y)
        np.testing.assert_array_equal(self.b.to_numpy(), self.y)

    def test_named_assignments_return_self_for_chaining(self):
        out = self.a.add_assign(self.b).subtract_assign(self.b).multiply_assign(2.0)
        self.assertIs(out, self.a)
        np.testing.assert_allclose(self.a.to_numpy(), 2.0 * self.x, rtol=1e-12, atol=1e-12)

    def test_combine_inplace_with_custom_operator(self):
        out = self.a.combine_inplace(self.b, np.maximum)
        self.assertIs(out, self.a)
        np.testing.assert_array_equal(self.a.to_numpy(), np.maximum(self.x, self.y))

    def test_shape_mismatch_raises(self):
        c = Tensor((4, 3))
        for op in (operator.iadd, operator.isub, operator.imul, operator.itruediv):
            with self.assertRaises(ShapeError):
                op(self.a, c)
        with self.assertRaises(ShapeError):
            _ = self.a + Tensor((12,))

    def test_shape_mismatch_leaves_left_operand_unchanged(self):
        with self.assertRaises(ShapeError):
            self.a += Tensor((3, 5))
        np.testing.assert_array_equal(self.a.to_numpy(), self.x)

    def test_result_dtype_follows_left_operand(self):
        i = _tensor([1, 2, 3], dtype=np.int32)
        f = _tensor([0.5, 0.5, -0.5])

        r = f + i
        self.assertEqual(r.dtype, np.float64)
        np.testing.assert_allclose(r.vec, [1.5, 2.5, 2.5])

        r = i + f
        self.assertEqual(r.dtype, np.int32)
        np.testing.assert_array_equal(r.vec, [1, 2, 2])

    def test_integer_division_by_zero_tensor_raises(self):
        i = _tensor([4, 6], dtype=np.int64)
        with self.assertRaises(ZeroDivisionError):
            i /= _tensor([2, 0], dtype=np.int64)
        np.testing.assert_array_equal(i.vec, [4, 6])


class TestTensorScalarArithmetic(TestCase):
    def setUp(self) -> None:
        self.x = np.random.randn(2, 3, 4)
        self.t = _tensor(self.x)

    def test_scalar_operators_match_numpy(self):
        np.testing.assert_allclose((self.t + 1.5).to_numpy(), self.x + 1.5)
        np.testing.assert_allclose((self.t - 1.5).to_numpy(), self.x - 1.5)
        np.testing.assert_allclose((self.t * 3).to_numpy(), self.x * 3)
        np.testing.assert_allclose((self.t / 4).to_numpy(), self.x / 4)

    def test_add_then_subtract_scalar_round_trips(self):
        for s in (0.1, -7.25, 1e3):
            np.testing.assert_allclose(((self.t + s) - s).to_numpy(), self.x, atol=1e-9)

    def test_scalar_on_the_left_commutes_for_add_and_multiply(self):
        self.assertEqual(2.5 + self.t, self.t + 2.5)
        self.assertEqual(3 * self.t, self.t * 3)

    def test_numpy_scalar_on_the_left_defers_to_tensor(self):
        r = np.float64(2.0) * self.t
        self.assertIsInstance(r, Tensor)
        self.assertEqual(r, self.t * 2.0)

        r = np.int64(1) + self.t
        self.assertIsInstance(r, Tensor)

    def test_scalar_minus_tensor_is_tensor_minus_scalar(self):
        with self.assertWarns(ReversedSubtractionWarning):
            r = 10.0 - self.t
        self.assertEqual(r, self.t - 10.0)

    def test_scalar_divided_by_tensor_is_undefined(self):
        with self.assertRaises(TypeError):
            _ = 2.0 / self.t

    def test_unsupported_operands_raise_type_error(self):
        with self.assertRaises(TypeError):
            _ = self.t + "1"
        with self.assertRaises(TypeError):
            _ = [1] * self.t
        with self.assertRaises(TypeError):
            self.t.add_assign(None)
        with self.assertRaises(TypeError):
            self.t.combine_inplace([1.0], operator.add)

    def test_combine_inplace_scalar(self):
        out = self.t.combine_inplace_scalar(2.0, np.power)
        self.assertIs(out, self.t)
        np.testing.assert_allclose(self.t.to_numpy(), self.x**2)

    def test_complex_scalar_into_real_tensor_raises(self):
        with self.assertRaises(TypeError):
            self.t += 1j
        np.testing.assert_array_equal(self.t.to_numpy(), self.x)

    def test_complex_tensor_accepts_complex_scalar(self):
        c = Tensor((2,), dtype=np.complex128)
        c += 1j
        np.testing.assert_array_equal(c.vec, [1j, 1j])


class TestIntegerTensorArithmetic(TestCase):
    def test_fractional_scalar_is_truncated_into_integer_storage(self):
        t = _tensor([1, 2, -3], dtype=np.int32)
        r = t + 2.7
        self.assertEqual(r.dtype, np.int32)
        np.testing.assert_array_equal(r.vec, [3, 4, 0])

    def test_integer_division_truncates_toward_zero(self):
        t = _tensor([7, -7, 6], dtype=np.int64)
        np.testing.assert_array_equal((t / 2).vec, [3, -3, 3])

    def test_integer_division_by_zero_scalar_raises(self):
        t = _tensor([1, 2], dtype=np.int16)
        with self.assertRaises(ZeroDivisionError):
            _ = t / 0

    def test_overflow_raises_instead_of_wrapping(self):
        t = _tensor([100, 1], dtype=np.int8)
        with self.assertRaises(OverflowError):
            t *= 2
        np.testing.assert_array_equal(t.vec, [100, 1])

    def test_unsigned_underflow_raises(self):
        t = _tensor([1, 5], dtype=np.uint8)
        with self.assertRaises(OverflowError):
            _ = t - 2

    def test_int64_overflow_raises_instead_of_wrapping(self):
        big = np.iinfo(np.int64).max
        t = _tensor([big], dtype=np.int64)
        with self.assertRaises(OverflowError):
            t += 1
        self.assertEqual(int(t.vec[0]), big)

    def test_uint64_underflow_raises_instead_of_wrapping(self):
        t = Tensor((1,), dtype=np.uint64)
        with self.assertRaises(OverflowError):
            _ = t - 1

    def test_uint64_arithmetic_is_exact_at_the_top_of_the_range(self):
        top = np.iinfo(np.uint64).max
        t = _tensor([top - 1], dtype=np.uint64)
        t += 1
        self.assertEqual(int(t.vec[0]), top)

    def test_mixed_int64_and_uint64_is_exact(self):
        a = _tensor([2**53 + 1], dtype=np.int64)
        b = Tensor((1,), dtype=np.uint64)
        r = a + b
        self.assertEqual(r.dtype, np.int64)
        self.assertEqual(int(r.vec[0]), 2**53 + 1)

    def test_large_integer_division_is_exact(self):
        t = _tensor([2**62 + 3, -(2**62 + 3)], dtype=np.int64)
        r = t / 2
        self.assertEqual([int(v) for v in r.vec], [2**61 + 1, -(2**61 + 1)])

    def test_tensor_by_tensor_integer_division_truncates(self):
        t = _tensor([7, -7, 7, -7], dtype=np.int32)
        d = _tensor([2, 2, -2, -2], dtype=np.int32)
        np.testing.assert_array_equal((t / d).vec, [3, -3, -3, 3])

    def test_integer_division_checks_shape_before_zero_divisors(self):
        t = Tensor((2,), dtype=np.int32)
        with self.assertRaises(ShapeError):
            t /= Tensor((3,), dtype=np.int32)

    def test_non_finite_result_raises(self):
        t = _tensor([1, 2], dtype=np.int32)
        with self.assertRaises(OverflowError):
            _ = t * float("inf")


if __name__ == "__main__":
    unittest.main()
