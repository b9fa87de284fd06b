"""Unit tests for cost matrix construction."""
import numpy as np
import pytest

from dtwpath.core.cost import CostMatrices, build_cost_matrices, validate_sequence
from dtwpath.exceptions import InvalidInputError


class TestIdenticalSequences:
    """Aligning a sequence with itself."""

    def test_zero_diagonal_and_distance(self, palindrome):
        result = build_cost_matrices(palindrome, palindrome)
        assert isinstance(result, CostMatrices)
        assert result.shape == (4, 4)
        assert result.min_distance == 0.0
        assert np.all(np.diag(result.local) == 0)
        assert np.all(np.diag(result.accumulated) == 0)

    def test_known_matrices(self, palindrome):
        result = build_cost_matrices(palindrome, palindrome)
        expected_local = np.array([
            [0, 1, 0, 1],
            [1, 0, 1, 2],
            [0, 1, 0, 1],
            [1, 2, 1, 0],
        ], dtype=float)
        expected_acc = np.array([
            [0, 1, 1, 2],
            [1, 0, 1, 3],
            [1, 1, 0, 1],
            [2, 3, 1, 0],
        ], dtype=float)
        np.testing.assert_array_equal(result.local, expected_local)
        np.testing.assert_array_equal(result.accumulated, expected_acc)


class TestConstantOffset:
    """[1, 1, 1] against [5, 5, 5]."""

    def test_every_local_cell_is_four(self):
        result = build_cost_matrices([1, 1, 1], [5, 5, 5])
        np.testing.assert_array_equal(result.local, np.full((2, 2), 4.0))

    def test_accumulated_and_distance(self):
        result = build_cost_matrices([1, 1, 1], [5, 5, 5])
        np.testing.assert_array_equal(result.accumulated, np.array([[4.0, 8.0], [8.0, 8.0]]))
        assert result.min_distance == 8.0


class TestShapes:
    """Trimmed shapes and the minimal distance cell."""

    def test_length_two_gives_single_cell(self):
        result = build_cost_matrices([0, 3], [1, 1])
        assert result.shape == (1, 1)
        assert result.local[0, 0] == 2.0
        assert result.accumulated[0, 0] == 2.0
        assert result.min_distance == 2.0

    def test_different_lengths(self, sine_cosine):
        s, t = sine_cosine
        result = build_cost_matrices(s, t[:7])
        assert result.local.shape == (11, 6)
        assert result.accumulated.shape == (11, 6)
        assert result.min_distance == result.accumulated[-1, -1]

    def test_first_samples_are_trimmed(self):
        # Only s[1:] and t[1:] reach the local matrix
        result = build_cost_matrices([100, 0, 0], [-100, 0, 0])
        np.testing.assert_array_equal(result.local, np.zeros((2, 2)))
        assert result.min_distance == 0.0

    def test_outputs_are_read_only(self, palindrome):
        result = build_cost_matrices(palindrome, palindrome)
        with pytest.raises(ValueError):
            result.accumulated[0, 0] = 5.0
        with pytest.raises(ValueError):
            result.local[0, 0] = 5.0


class TestDistanceFunctions:
    """Pluggable pointwise distance."""

    def test_squared_distance(self):
        s, t = [0, 0, 4], [0, 1, 1]
        absolute = build_cost_matrices(s, t, distance="absolute")
        squared = build_cost_matrices(s, t, distance="squared")
        np.testing.assert_array_equal(absolute.local, np.array([[1, 1], [3, 3]], dtype=float))
        np.testing.assert_array_equal(squared.local, np.array([[1, 1], [9, 9]], dtype=float))
        assert absolute.min_distance == 4.0
        assert squared.min_distance == 10.0

    def test_callable_distance(self, sine_cosine):
        s, t = sine_cosine
        base = build_cost_matrices(s, t)
        doubled = build_cost_matrices(s, t, distance=lambda x, y: 2 * abs(x - y))
        assert np.isclose(doubled.min_distance, 2 * base.min_distance)

    def test_unknown_distance_name(self):
        with pytest.raises(InvalidInputError, match="Unknown distance"):
            build_cost_matrices([0, 1], [0, 1], distance="manhattan-ish")

    def test_negative_cost_rejected(self):
        with pytest.raises(InvalidInputError, match="invalid cost"):
            build_cost_matrices([0, 1], [0, 2], distance=lambda x, y: -1.0)

    def test_nan_cost_rejected(self):
        with pytest.raises(InvalidInputError):
            build_cost_matrices([0, 1], [0, 2], distance=lambda x, y: float("nan"))


class TestProperties:
    """Properties that hold for arbitrary sequences."""

    @pytest.mark.parametrize("distance", ["absolute", "squared"])
    def test_swap_symmetry(self, distance):
        rng = np.random.default_rng(7)
        for _ in range(5):
            s = rng.normal(size=rng.integers(2, 15))
            t = rng.normal(size=rng.integers(2, 15))
            st = build_cost_matrices(s, t, distance=distance)
            ts = build_cost_matrices(t, s, distance=distance)
            assert np.isclose(st.min_distance, ts.min_distance)
            np.testing.assert_allclose(st.accumulated, ts.accumulated.T)

    def test_recurrence_and_monotonicity(self, sample_time_series):
        s = sample_time_series
        t = np.roll(sample_time_series, 3)[:20]
        result = build_cost_matrices(s, t)
        acc, local = result.accumulated, result.local

        assert np.all(local >= 0)
        assert np.all(np.isfinite(acc))
        assert np.all(acc >= local)

        rows, cols = acc.shape
        for j in range(1, cols):
            assert np.isclose(acc[0, j], local[0, j] + acc[0, j - 1])
        for i in range(1, rows):
            assert np.isclose(acc[i, 0], local[i, 0] + acc[i - 1, 0])
        for i in range(1, rows):
            for j in range(1, cols):
                expected = local[i, j] + min(acc[i - 1, j], acc[i, j - 1], acc[i - 1, j - 1])
                assert np.isclose(acc[i, j], expected)

    def test_deterministic(self, sine_cosine):
        s, t = sine_cosine
        a = build_cost_matrices(s, t)
        b = build_cost_matrices(s, t)
        np.testing.assert_array_equal(a.accumulated, b.accumulated)
        assert a.min_distance == b.min_distance


class TestValidation:
    """Invalid inputs are rejected before any computation."""

    @pytest.mark.parametrize("bad", [[], [1.0]])
    def test_too_short(self, bad):
        with pytest.raises(InvalidInputError):
            build_cost_matrices(bad, [1.0, 2.0, 3.0])
        with pytest.raises(InvalidInputError):
            build_cost_matrices([1.0, 2.0, 3.0], bad)

    @pytest.mark.parametrize("bad", [[1.0, np.nan, 2.0], [1.0, np.inf], [-np.inf, 0.0]])
    def test_non_finite(self, bad):
        with pytest.raises(InvalidInputError, match="NaN or infinite"):
            build_cost_matrices(bad, [1.0, 2.0])

    def test_not_one_dimensional(self):
        with pytest.raises(InvalidInputError, match="1D"):
            build_cost_matrices(np.ones((3, 2)), [1.0, 2.0])

    @pytest.mark.parametrize("bad", [["a", "b"], [1.0, None]])
    def test_non_numeric(self, bad):
        with pytest.raises(InvalidInputError, match="numeric"):
            validate_sequence(bad)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            build_cost_matrices([1.0], [1.0, 2.0])

    def test_booleans_are_rejected(self):
        with pytest.raises(InvalidInputError, match="numeric"):
            validate_sequence(np.array([True, False, True]))

    def test_integers_are_accepted(self):
        x = validate_sequence([1, 2, 3])
        assert x.dtype == np.float64
