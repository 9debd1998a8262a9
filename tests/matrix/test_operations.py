"""
Tests for Matrix algebra.

Covers scalar scaling, transpose, matmul, the Gram matrix, the Kronecker
product and identity construction, including the shape-mismatch paths that
warn and return a degraded value instead of raising.
"""

import numpy as np
import pytest

from pydense.core.exceptions import DimensionError, ShapeMismatchWarning
from pydense.matrix import Matrix


# ═══════════════════════════════════════════════════════════════════════
# Scalar operations
# ═══════════════════════════════════════════════════════════════════════


class TestScalarOps:

    def test_scale_in_place_returns_self(self):
        m = Matrix([1.0, 2.0, 3.0])
        assert m.scale(2.0) is m
        np.testing.assert_array_equal(m.data, [2.0, 4.0, 6.0])

    def test_divide_in_place_returns_self(self):
        m = Matrix([2.0, 4.0])
        assert m.divide(2.0) is m
        np.testing.assert_array_equal(m.data, [1.0, 2.0])

    def test_chaining(self):
        m = Matrix([1.0, 2.0, 3.0, 4.0], 2, 2)
        m.scale(3.0).divide(2.0).transpose()
        np.testing.assert_array_equal(m.data, [1.5, 4.5, 3.0, 6.0])

    def test_times_does_not_mutate(self):
        m = Matrix([1.0, 2.0])
        result = m.times(5.0)
        np.testing.assert_array_equal(result.data, [5.0, 10.0])
        np.testing.assert_array_equal(m.data, [1.0, 2.0])
        assert result.data is not m.data

    def test_divided_by_does_not_mutate(self):
        m = Matrix([4.0, 8.0])
        result = m.divided_by(4.0)
        np.testing.assert_array_equal(result.data, [1.0, 2.0])
        np.testing.assert_array_equal(m.data, [4.0, 8.0])

    def test_divide_by_zero_follows_ieee(self):
        m = Matrix([1.0, -1.0, 0.0])
        m.divide(0.0)
        assert m.get(0) == np.inf
        assert m.get(1) == -np.inf
        assert np.isnan(m.get(2))

    def test_operators(self):
        m = Matrix([1.0, 2.0])
        np.testing.assert_array_equal((m * 2.0).data, [2.0, 4.0])
        np.testing.assert_array_equal((2.0 * m).data, [2.0, 4.0])
        np.testing.assert_array_equal((np.float64(2.0) * m).data, [2.0, 4.0])
        np.testing.assert_array_equal((m / 2.0).data, [0.5, 1.0])
        np.testing.assert_array_equal(m.data, [1.0, 2.0])

    def test_in_place_operators_keep_identity(self):
        m = Matrix([1.0, 2.0])
        alias = m
        m *= 3.0
        m /= 2.0
        assert m is alias
        np.testing.assert_array_equal(m.data, [1.5, 3.0])

    def test_matrix_times_matrix_not_supported(self):
        with pytest.raises(TypeError):
            Matrix([1.0]) * Matrix([1.0])


# ═══════════════════════════════════════════════════════════════════════
# Transpose
# ═══════════════════════════════════════════════════════════════════════


class TestTranspose:

    def test_square_transposes(self):
        m = Matrix([1.0, 2.0, 3.0, 4.0], 2, 2)
        assert m.transpose() is m
        np.testing.assert_array_equal(m.data, [1.0, 3.0, 2.0, 4.0])

    def test_double_transpose_is_identity(self):
        m = Matrix([1.0, 2.0, 3.0, 4.0], 2, 2)
        m.transpose().transpose()
        np.testing.assert_array_equal(m.data, [1.0, 2.0, 3.0, 4.0])

    def test_square_matches_numpy(self, rng):
        A = rng.standard_normal((4, 4))
        m = Matrix.from_rows(A)
        m.transpose()
        np.testing.assert_array_equal(m.to_numpy(), A.T)

    def test_square_transpose_keeps_buffer(self):
        m = Matrix([1.0, 2.0, 3.0, 4.0], 2, 2)
        buffer = m.data
        m.transpose()
        assert m.data is buffer

    def test_non_square_swaps_shape(self):
        m = Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        m.transpose()
        assert (m.width, m.height) == (2, 3)
        np.testing.assert_array_equal(m.to_numpy(), [[1.0, 4.0], [2.0, 5.0], [3.0, 6.0]])

    def test_non_square_double_transpose(self, rng):
        A = rng.standard_normal((2, 5))
        m = Matrix.from_rows(A)
        m.transpose().transpose()
        np.testing.assert_array_equal(m.to_numpy(), A)

    def test_row_vector_becomes_column(self):
        m = Matrix([1.0, 2.0, 3.0])
        m.transpose()
        assert (m.width, m.height) == (1, 3)
        np.testing.assert_array_equal(m.data, [1.0, 2.0, 3.0])

    def test_one_by_one(self):
        m = Matrix([7.0], 1, 1)
        m.transpose()
        assert m.get(0, 0) == 7.0


# ═══════════════════════════════════════════════════════════════════════
# Matrix multiplication
# ═══════════════════════════════════════════════════════════════════════


class TestMatmul:

    def test_known_product(self):
        A = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        B = Matrix.from_rows([[5.0, 6.0], [7.0, 8.0]])
        np.testing.assert_array_equal(A.matmul(B).to_numpy(), [[19.0, 22.0], [43.0, 50.0]])

    def test_result_shape(self, rng):
        A = Matrix.from_rows(rng.standard_normal((2, 3)))  # width 3, height 2
        B = Matrix.from_rows(rng.standard_normal((3, 4)))  # width 4, height 3
        C = A.matmul(B)
        assert (C.width, C.height) == (4, 2)

    def test_matches_numpy(self, rng):
        A = rng.standard_normal((3, 5))
        B = rng.standard_normal((5, 2))
        C = Matrix.from_rows(A).matmul(Matrix.from_rows(B))
        np.testing.assert_allclose(C.to_numpy(), A @ B, rtol=1e-12, atol=1e-12)

    def test_operands_unmodified(self, rng):
        A = Matrix.from_rows(rng.standard_normal((2, 2)))
        B = Matrix.from_rows(rng.standard_normal((2, 2)))
        a_before, b_before = A.data.copy(), B.data.copy()
        C = A @ B
        np.testing.assert_array_equal(A.data, a_before)
        np.testing.assert_array_equal(B.data, b_before)
        assert C.data is not A.data and C.data is not B.data

    def test_scaling_commutes_with_product(self, rng):
        A = Matrix.from_rows(rng.standard_normal((3, 4)))
        B = Matrix.from_rows(rng.standard_normal((4, 2)))
        c = 2.5
        left = A.copy().scale(c).matmul(B)
        right = A.matmul(B).scale(c)
        np.testing.assert_allclose(left.data, right.data, rtol=1e-12, atol=1e-12)

    def test_mismatch_warns_and_returns_original_shape(self):
        A = Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])  # width 3
        B = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])            # height 2
        with pytest.warns(ShapeMismatchWarning, match="multiplication"):
            C = A.matmul(B)
        assert (C.width, C.height) == (3, 2)
        np.testing.assert_array_equal(C.data, A.data)
        assert C is not A

    def test_inconsistent_buffer_warns_and_returns_copy(self):
        A = Matrix([1.0, 2.0, 3.0], 2, 2)  # 2x2 shape over 3 values
        with pytest.warns(ShapeMismatchWarning, match="multiplication"):
            C = A.matmul(Matrix(2, 2))
        assert (C.width, C.height) == (2, 2)
        np.testing.assert_array_equal(C.data, [1.0, 2.0, 3.0])
        assert C is not A

    def test_inconsistent_right_operand_warns(self):
        A = Matrix.identity(2)
        with pytest.warns(ShapeMismatchWarning, match="multiplication"):
            C = A.matmul(Matrix([1.0, 2.0, 3.0], 2, 2))
        np.testing.assert_array_equal(C.data, A.data)

    def test_unset_shape_warns_and_returns_copy(self):
        A = Matrix(4)
        with pytest.warns(ShapeMismatchWarning, match="multiplication"):
            C = A.matmul(Matrix(4))
        assert C.size == 4
        assert C.width is None and C.height is None

    def test_matmul_operator_rejects_non_matrix(self):
        with pytest.raises(TypeError):
            Matrix([1.0]) @ np.ones(1)


# ═══════════════════════════════════════════════════════════════════════
# Gram matrix
# ═══════════════════════════════════════════════════════════════════════


class TestXtX:

    def test_matches_explicit_product(self, rng):
        X = rng.standard_normal((6, 3))
        G = Matrix.from_rows(X).xtx()
        assert (G.width, G.height) == (3, 3)
        np.testing.assert_allclose(G.to_numpy(), X.T @ X, rtol=1e-12, atol=1e-12)

    def test_symmetric(self, rng):
        G = Matrix.from_rows(rng.standard_normal((10, 4))).xtx().to_numpy()
        np.testing.assert_allclose(G, G.T, rtol=1e-12, atol=1e-12)

    def test_does_not_mutate(self):
        m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        before = m.data.copy()
        m.xtx()
        np.testing.assert_array_equal(m.data, before)
        assert (m.width, m.height) == (2, 3)

    def test_row_vector(self):
        G = Matrix([1.0, 2.0]).xtx()
        np.testing.assert_array_equal(G.to_numpy(), [[1.0, 2.0], [2.0, 4.0]])

    def test_agrees_with_transpose_matmul(self, rng):
        A = Matrix.from_rows(rng.standard_normal((5, 3)))
        via_transpose = A.copy().transpose().matmul(A)
        np.testing.assert_allclose(A.xtx().data, via_transpose.data, rtol=1e-12, atol=1e-12)


# ═══════════════════════════════════════════════════════════════════════
# Kronecker product
# ═══════════════════════════════════════════════════════════════════════


class TestCron:

    def test_one_by_one_unit_is_identity_operation(self, rng):
        one = Matrix([1.0], 1, 1)
        B = Matrix.from_rows(rng.standard_normal((3, 2)))
        result = one.cron(B)
        assert (result.width, result.height) == (B.width, B.height)
        np.testing.assert_array_equal(result.data, B.data)

    def test_shape(self):
        A = Matrix(2, 3)
        B = Matrix(4, 5)
        result = A.cron(B)
        assert (result.width, result.height) == (8, 15)

    def test_index_mapping(self, rng):
        A = Matrix.from_rows(rng.standard_normal((2, 3)))  # width 3, height 2
        B = Matrix.from_rows(rng.standard_normal((3, 2)))  # width 2, height 3
        result = A.cron(B)
        wa, ha = A.width, A.height
        wb, hb = B.width, B.height
        for i in range(wb):
            for h in range(hb):
                for j in range(wa):
                    for k in range(ha):
                        offset = wa * i + j + wa * wb * (ha * h + k)
                        assert result.get(offset) == B.get(i, h) * A.get(j, k)

    def test_each_element_of_other_scales_self(self):
        A = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        B = Matrix.from_rows([[0.0, 1.0], [2.0, 0.0]])
        expected = np.kron(B.to_numpy(), A.to_numpy())
        np.testing.assert_array_equal(A.cron(B).to_numpy(), expected)

    def test_kron_alias(self):
        A = Matrix([1.0, 2.0])
        B = Matrix([3.0, 4.0])
        np.testing.assert_array_equal(A.kron(B).data, A.cron(B).data)


# ═══════════════════════════════════════════════════════════════════════
# Identity
# ═══════════════════════════════════════════════════════════════════════


class TestMakeIdentity:

    def test_in_place(self, rng):
        m = Matrix.from_rows(rng.standard_normal((4, 4)))
        assert m.make_identity() is m
        for i in range(4):
            assert m.get(i, i) == 1.0
        off_diagonal = m.to_numpy()[~np.eye(4, dtype=bool)]
        assert np.all(off_diagonal == 0.0)

    def test_non_square_returns_empty(self):
        m = Matrix(2, 3)
        with pytest.warns(ShapeMismatchWarning, match="identity"):
            result = m.make_identity()
        assert (result.width, result.height) == (0, 0)
        assert result.size == 0
        assert (m.width, m.height) == (2, 3)

    def test_inconsistent_buffer_returns_empty(self):
        m = Matrix([1.0, 2.0, 3.0], 2, 2)
        with pytest.warns(ShapeMismatchWarning):
            result = m.make_identity()
        assert result.shape == (0, 0)
        np.testing.assert_array_equal(m.data, [1.0, 2.0, 3.0])

    def test_size_only_matrix_returns_empty(self):
        with pytest.warns(ShapeMismatchWarning):
            result = Matrix(4).make_identity()
        assert result.shape == (0, 0)


# ═══════════════════════════════════════════════════════════════════════
# Comparison
# ═══════════════════════════════════════════════════════════════════════


class TestAllclose:

    def test_equal(self):
        assert Matrix([1.0, 2.0], 2, 1).allclose(Matrix([1.0, 2.0], 2, 1))

    def test_shape_mismatch(self):
        assert not Matrix([1.0, 2.0], 2, 1).allclose(Matrix([1.0, 2.0], 1, 2))

    def test_value_mismatch(self):
        assert not Matrix([1.0, 2.0]).allclose(Matrix([1.0, 2.1]))

    def test_unset_shape_transpose_raises(self):
        with pytest.raises(DimensionError):
            Matrix(4).transpose()
