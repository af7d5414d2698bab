"""Tests for numeric ingestion (_conversion.py)."""

import array
import os
import sys

import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from miniplot._conversion import to_float_sequence, to_matrix_rows


class _Samples:
    """Custom container that opts in through as_float_sequence()."""

    def __init__(self, values):
        self._values = values

    def as_float_sequence(self):
        return np.asarray(self._values, dtype=np.float64)


# ─── to_float_sequence ───────────────────────────────────────────────────────

class TestToFloatSequence:
    def test_list(self):
        assert to_float_sequence([1, 2, 3]).tolist() == [1.0, 2.0, 3.0]

    def test_tuple(self):
        assert to_float_sequence((10, 20.5)).tolist() == [10.0, 20.5]

    def test_range(self):
        assert to_float_sequence(range(4)).tolist() == [0.0, 1.0, 2.0, 3.0]

    def test_array_module(self):
        assert to_float_sequence(array.array("d", [0.5, 1.5])).tolist() == [0.5, 1.5]

    def test_empty(self):
        out = to_float_sequence([])
        assert out.shape == (0,)

    def test_dtype_is_float64(self):
        assert to_float_sequence([1, 2]).dtype == np.float64
        assert to_float_sequence(np.arange(3, dtype=np.int32)).dtype == np.float64

    def test_numpy_vector_no_copy(self):
        data = np.linspace(0.0, 1.0, 5)
        out = to_float_sequence(data)
        assert np.shares_memory(out, data)
        assert out.tolist() == data.tolist()

    def test_result_is_read_only(self):
        data = np.zeros(3)
        out = to_float_sequence(data)
        with pytest.raises(ValueError):
            out[0] = 1.0
        # the caller's own array stays writable
        data[0] = 2.0
        assert out[0] == 2.0

    def test_column_vector(self):
        col = np.array([[1.0], [2.0], [3.0]])
        assert to_float_sequence(col).tolist() == [1.0, 2.0, 3.0]

    def test_matrix_flattens_row_major(self):
        mat = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        assert to_float_sequence(mat).tolist() == [1.0, 2.0, 3.0, 4.0, 5.0, 6.0]

    def test_fortran_ordered_matrix_still_row_major(self):
        mat = np.asfortranarray(np.array([[1.0, 2.0], [3.0, 4.0]]))
        assert to_float_sequence(mat).tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_nested_list_matrix(self):
        assert to_float_sequence([[1, 2], [3, 4]]).tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_length_matches_element_count(self):
        mat = np.ones((4, 7))
        assert len(to_float_sequence(mat)) == 28

    def test_custom_container(self):
        assert to_float_sequence(_Samples([3, 2, 1])).tolist() == [3.0, 2.0, 1.0]

    def test_bool_values(self):
        assert to_float_sequence([True, False]).tolist() == [1.0, 0.0]


class TestToFloatSequenceRejects:
    def test_string(self):
        with pytest.raises(TypeError):
            to_float_sequence("123")

    def test_dict(self):
        with pytest.raises(TypeError):
            to_float_sequence({0: 1.0})

    def test_scalar(self):
        with pytest.raises(TypeError):
            to_float_sequence(3.0)

    def test_generator(self):
        with pytest.raises(TypeError):
            to_float_sequence(x for x in range(3))

    def test_non_numeric_items(self):
        with pytest.raises(TypeError):
            to_float_sequence(["a", "b"])

    def test_ragged_rows(self):
        with pytest.raises(TypeError):
            to_float_sequence([[1, 2], [3]])

    def test_string_array(self):
        with pytest.raises(TypeError):
            to_float_sequence(np.array(["x", "y"]))


# ─── to_matrix_rows ──────────────────────────────────────────────────────────

class TestToMatrixRows:
    def test_numpy_matrix(self):
        rows = to_matrix_rows(np.array([[1, 2, 3], [4, 5, 6]]))
        assert [r.tolist() for r in rows] == [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]

    def test_list_of_rows(self):
        rows = to_matrix_rows([[1, 2], (3, 4), np.array([5, 6])])
        assert [r.tolist() for r in rows] == [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]]

    def test_vector_is_single_row(self):
        rows = to_matrix_rows(np.array([1.0, 2.0]))
        assert len(rows) == 1
        assert rows[0].tolist() == [1.0, 2.0]

    def test_flat_list_is_single_row(self):
        rows = to_matrix_rows([1, 2, 3])
        assert [r.tolist() for r in rows] == [[1.0, 2.0, 3.0]]

    def test_zero_rows(self):
        assert to_matrix_rows(np.empty((0, 3))) == []

    def test_empty_list_has_no_rows(self):
        assert to_matrix_rows([]) == []
        assert to_matrix_rows(()) == []

    def test_rows_are_read_only(self):
        rows = to_matrix_rows(np.ones((2, 2)))
        with pytest.raises(ValueError):
            rows[0][0] = 5.0

    def test_rejects_3d(self):
        with pytest.raises(TypeError):
            to_matrix_rows(np.ones((2, 2, 2)))

    def test_rejects_string(self):
        with pytest.raises(TypeError):
            to_matrix_rows("abc")
