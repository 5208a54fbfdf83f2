"""
Tests for the Vector kernel.

Validates:
    - constructors, copying and dtype selection
    - permissive get/set at the boundary
    - element-wise arithmetic and the size precondition
    - reductions and geometry (dot, norm, angle, cross, projection)
    - transform by a matrix
    - exact and approximate comparison
    - element-wise maps and their IEEE-754 domain behaviour
    - the column helpers shared with Gram-Schmidt
"""

import math

import numpy as np
import pytest

from pydense.core.exceptions import DimensionError, PreconditionError, ValidationError
from pydense.matrix import Matrix
from pydense.vector import Vector, column_length, dot_cols


@pytest.fixture
def one_to_six():
    return Vector([1, 2, 3, 4, 5, 6])


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_list(self):
        v = Vector([1, 2, 3])
        assert v.size == 3
        assert len(v) == 3
        assert v.dtype == np.float64
        assert list(v) == [1.0, 2.0, 3.0]

    def test_scalar_becomes_single_element(self):
        assert Vector(4.0).size == 1

    def test_2d_rejected(self):
        with pytest.raises(ValidationError, match="expected 1D"):
            Vector([[1, 2], [3, 4]])

    def test_copies_input(self):
        source = np.array([1.0, 2.0])
        v = Vector(source)
        source[0] = 100.0
        assert v.get(0) == 1.0

    def test_data_is_read_only(self):
        v = Vector([1.0, 2.0])
        with pytest.raises(ValueError):
            v.data[0] = 5.0

    def test_init_and_zeros(self):
        assert Vector.init(4).equals(Vector([0, 0, 0, 0]))
        assert Vector.zeros(2).equals(Vector([0, 0]))

    def test_ones_and_fill(self):
        assert Vector.ones(3).equals(Vector([1, 1, 1]))
        assert Vector.fill(3, 2.5).equals(Vector([2.5, 2.5, 2.5]))

    def test_fp32(self):
        v = Vector.ones(3, dtype="fp32")
        assert v.dtype == np.float32
        assert Vector([1, 2], dtype=np.float32).dtype == np.float32

    def test_random_seeded(self):
        a = Vector.random(6, seed=42)
        b = Vector.random(6, seed=42)
        assert a.equals(b)
        assert all(0.0 <= x < 1.0 for x in a)

    def test_random_bound(self):
        v = Vector.random_bound(200, 5, -3.0, 3.0)
        assert v.data.min() >= -3.0
        assert v.data.max() < 3.0

    def test_random_bound_order(self):
        with pytest.raises(PreconditionError):
            Vector.random_bound(3, 5, 2.0, 1.0)

    def test_copy_is_independent(self):
        v = Vector([1.0, 2.0])
        w = v.copy()
        w.set(0, 9.0)
        assert v.get(0) == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_get_in_range(self, one_to_six):
        assert one_to_six.get(2) == 3.0

    @pytest.mark.parametrize("index", [-1, 6, 100])
    def test_get_out_of_range_is_zero(self, one_to_six, index):
        assert one_to_six.get(index) == 0.0

    def test_set_in_range(self):
        v = Vector.zeros(3)
        v.set(1, 7.0)
        assert v.equals(Vector([0, 7, 0]))

    @pytest.mark.parametrize("index", [-1, 3])
    def test_set_out_of_range_is_noop(self, index):
        v = Vector([1, 2, 3])
        v.set(index, 99.0)
        assert v.equals(Vector([1, 2, 3]))

    def test_set_elements(self):
        v = Vector.zeros(3)
        v.set_elements([4, 5, 6])
        assert v.equals(Vector([4, 5, 6]))

    def test_set_elements_wrong_length(self):
        with pytest.raises(DimensionError):
            Vector.zeros(3).set_elements([1, 2])


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_sub(self):
        a, b = Vector([1, 2, 3]), Vector([4, 5, 6])
        assert a.add(b).equals(Vector([5, 7, 9]))
        assert b.sub(a).equals(Vector([3, 3, 3]))
        assert (a + b).equals(Vector([5, 7, 9]))
        assert (b - a).equals(Vector([3, 3, 3]))

    def test_mul_div(self):
        a, b = Vector([1, 2, 3]), Vector([4, 5, 6])
        assert a.mul(b).equals(Vector([4, 10, 18]))
        assert b.div(a).all_close(Vector([4, 2.5, 2]))
        assert (a * b).equals(Vector([4, 10, 18]))
        assert (b / a).all_close(Vector([4, 2.5, 2]))

    def test_div_by_zero_gives_inf(self):
        out = Vector([1.0, 0.0]).div(Vector([0.0, 0.0]))
        assert np.isinf(out.get(0))
        assert np.isnan(out.get(1))

    def test_scale(self):
        v = Vector([1, -2])
        assert v.scale(3).equals(Vector([3, -6]))
        assert (2 * v).equals(Vector([2, -4]))
        assert (v * 2).equals(Vector([2, -4]))
        assert (-v).equals(Vector([-1, 2]))

    @pytest.mark.parametrize("op", ["add", "sub", "mul", "div", "dot"])
    def test_size_mismatch(self, op):
        with pytest.raises(DimensionError, match=op):
            getattr(Vector.ones(3), op)(Vector.ones(4))

    def test_operands_unchanged(self):
        a, b = Vector([1, 2]), Vector([3, 4])
        a.add(b)
        assert a.equals(Vector([1, 2]))
        assert b.equals(Vector([3, 4]))


# ═══════════════════════════════════════════════════════════════════════
# Reductions and geometry
# ═══════════════════════════════════════════════════════════════════════


class TestGeometry:

    def test_dot_with_itself(self, one_to_six):
        assert one_to_six.dot(one_to_six) == 91.0
        assert one_to_six @ one_to_six == 91.0

    def test_norm(self, one_to_six):
        assert one_to_six.norm() == pytest.approx(math.sqrt(91.0))

    def test_sum(self, one_to_six):
        assert one_to_six.sum() == 21.0

    def test_angle_orthogonal(self):
        assert Vector([1, 0]).angle(Vector([0, 1])) == pytest.approx(math.pi / 2)

    def test_angle_parallel(self):
        assert Vector([2, 0]).angle(Vector([5, 0])) == pytest.approx(0.0)

    def test_angle_zero_vector_is_nan(self):
        assert math.isnan(Vector([0, 0]).angle(Vector([1, 0])))

    def test_cross_uses_radians(self):
        # |a| |b| sin(pi/2)
        assert Vector([3, 0]).cross(Vector([0, 2])) == pytest.approx(6.0)

    def test_cross_parallel_is_zero(self):
        assert Vector([1, 0]).cross(Vector([3, 0])) == pytest.approx(0.0, abs=1e-12)

    def test_projection(self):
        assert Vector([3, 4]).projection(Vector([1, 0])) == pytest.approx(3.0)
        assert Vector([3, 4]).projection(Vector([0, 2])) == pytest.approx(4.0)

    def test_normalize(self):
        unit = Vector([3, 4]).normalize()
        assert unit.all_close(Vector([0.6, 0.8]))
        assert unit.norm() == pytest.approx(1.0)

    def test_normalize_zero_vector_is_nan(self):
        assert np.all(np.isnan(Vector([0, 0]).normalize().data))


class TestTransform:

    def test_matrix_vector_product(self):
        m = Matrix([[1, 2, 3], [4, 5, 6]])
        out = Vector([1, 0, -1]).transform(m)
        assert out.equals(Vector([-2, -2]))

    def test_identity(self):
        v = Vector([1.5, -2.0, 3.0])
        assert v.transform(Matrix.identity(3)).equals(v)

    def test_shape_mismatch(self):
        with pytest.raises(DimensionError, match="transform"):
            Vector([1, 2]).transform(Matrix.identity(3))


# ═══════════════════════════════════════════════════════════════════════
# Comparison
# ═══════════════════════════════════════════════════════════════════════


class TestComparison:

    def test_equals(self):
        assert Vector([1, 2]).equals(Vector([1, 2]))
        assert not Vector([1, 2]).equals(Vector([1, 2.0000001]))
        assert Vector([1, 2]) == Vector([1, 2])

    def test_equals_size_mismatch(self):
        assert not Vector([1, 2]).equals(Vector([1, 2, 3]))

    def test_all_close_tolerance(self):
        base = Vector([1.0, 100.0])
        assert Vector([1.0 + 5e-6, 100.0 + 5e-4]).all_close(base)
        assert not Vector([1.0 + 5e-5, 100.0]).all_close(base)

    def test_all_close_size_mismatch(self):
        assert not Vector([1.0]).all_close(Vector([1.0, 1.0]))

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector([1.0]))

    def test_no_instance_dict(self):
        v = Vector([1.0])
        assert not hasattr(v, "__dict__")
        with pytest.raises(AttributeError):
            v.extra = 1


# ═══════════════════════════════════════════════════════════════════════
# Element-wise maps
# ═══════════════════════════════════════════════════════════════════════


class TestMaps:

    @pytest.mark.parametrize("method, reference", [
        ("exp", np.exp),
        ("log", np.log),
        ("log10", np.log10),
        ("log2", np.log2),
        ("log1p", np.log1p),
        ("sqrt", np.sqrt),
        ("abs", np.abs),
        ("sin", np.sin),
        ("cos", np.cos),
        ("tan", np.tan),
        ("sinh", np.sinh),
        ("cosh", np.cosh),
        ("tanh", np.tanh),
        ("arc_tan", np.arctan),
        ("arc_sinh", np.arcsinh),
    ])
    def test_matches_numpy(self, method, reference):
        values = np.array([0.25, 0.5, 2.0, 3.0])
        out = getattr(Vector(values), method)()
        np.testing.assert_allclose(out.data, reference(values))

    @pytest.mark.parametrize("method, reference", [
        ("arc_sin", np.arcsin),
        ("arc_cos", np.arccos),
        ("arc_tanh", np.arctanh),
    ])
    def test_unit_interval_maps(self, method, reference):
        values = np.array([-0.5, 0.0, 0.5])
        out = getattr(Vector(values), method)()
        np.testing.assert_allclose(out.data, reference(values))

    def test_arc_cosh(self):
        values = np.array([1.0, 2.0, 10.0])
        np.testing.assert_allclose(Vector(values).arc_cosh().data, np.arccosh(values))

    def test_pow_and_rsqrt(self):
        assert Vector([2, 3]).pow(2).equals(Vector([4, 9]))
        assert Vector([4, 16]).rsqrt().all_close(Vector([0.5, 0.25]))

    def test_log_negative_is_nan(self):
        out = Vector([-1.0, 0.0]).log()
        assert math.isnan(out.get(0))
        assert out.get(1) == -math.inf

    def test_maps_return_new_vector(self):
        v = Vector([1.0, 4.0])
        v.sqrt()
        assert v.equals(Vector([1.0, 4.0]))

    def test_dtype_preserved(self):
        assert Vector([1.0], dtype="fp32").exp().dtype == np.float32


# ═══════════════════════════════════════════════════════════════════════
# Column helpers
# ═══════════════════════════════════════════════════════════════════════


class TestColumnHelpers:

    def test_column_length(self):
        m = Matrix([[3, 1], [4, 1]])
        assert column_length(m, 0) == pytest.approx(5.0)
        assert column_length(m, 1) == pytest.approx(math.sqrt(2.0))

    def test_dot_cols(self):
        a = Matrix([[1, 2], [3, 4]])
        b = Matrix([[5, 6], [7, 8]])
        assert dot_cols(a, 0, b, 1) == 1 * 6 + 3 * 8

    def test_dot_cols_row_mismatch(self):
        with pytest.raises(DimensionError):
            dot_cols(Matrix.ones(2, 2), 0, Matrix.ones(3, 2), 0)
