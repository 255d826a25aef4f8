"""
Unit tests for dream_core/sqmat.py

- Construction: new, from_flat, from_rows (dimension mismatch is an assertion)
- Indexing by (row, col) and by row
- Row/column views, map, replace, fill_with
- Value semantics and text rendering
"""

import numpy as np
import pytest

from dream_core.sqmat import SqMat


# =============================================================================
# Construction
# =============================================================================

class TestConstruction:
    """Test the construction paths."""

    def test_new_fills_default(self):
        m = SqMat.new(3, 0)
        assert m.dim == 3
        assert list(m) == [0] * 9

    def test_new_zero_dim(self):
        m = SqMat.new(0, 0)
        assert m.dim == 0
        assert len(m) == 0
        assert str(m) == ""

    def test_new_negative_dim_rejected(self):
        with pytest.raises(ValueError):
            SqMat.new(-1, 0)

    def test_from_flat_row_major(self):
        m = SqMat.from_flat(2, [1, 2, 3, 4])
        assert m[(0, 0)] == 1
        assert m[(0, 1)] == 2
        assert m[(1, 0)] == 3
        assert m[(1, 1)] == 4

    def test_from_flat_dimension_mismatch_is_assertion(self):
        """A flat list that is not dim² long is a caller defect."""
        with pytest.raises(AssertionError):
            SqMat.from_flat(3, [0] * 8)

    def test_from_rows(self):
        m = SqMat.from_rows([[1, 2], [3, 4]])
        assert m == SqMat.from_flat(2, [1, 2, 3, 4])

    def test_from_rows_not_square(self):
        with pytest.raises(AssertionError):
            SqMat.from_rows([[1, 2, 3], [4, 5, 6]])


# =============================================================================
# Access
# =============================================================================

class TestAccess:
    """Test indexing and views."""

    @pytest.fixture
    def m(self):
        return SqMat.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])

    def test_row_index(self, m):
        assert m[1] == (4, 5, 6)
        assert m.row(2) == (7, 8, 9)

    def test_col(self, m):
        assert m.col(0) == (1, 4, 7)
        assert m.col(2) == (3, 6, 9)

    def test_rows(self, m):
        assert list(m.rows()) == [(1, 2, 3), (4, 5, 6), (7, 8, 9)]

    def test_cells(self, m):
        cells = dict(m.cells())
        assert cells[(0, 0)] == 1
        assert cells[(2, 1)] == 8
        assert len(cells) == 9

    def test_out_of_range(self, m):
        with pytest.raises(IndexError):
            m[(3, 0)]
        with pytest.raises(IndexError):
            m[(0, -1)]
        with pytest.raises(IndexError):
            m[3]
        with pytest.raises(IndexError):
            m.col(3)

    def test_to_array(self, m):
        arr = m.to_array()
        assert arr.shape == (3, 3)
        assert np.array_equal(arr.sum(axis=1), [6, 15, 24])

    def test_to_list(self, m):
        assert m.to_list() == [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


# =============================================================================
# Derivation
# =============================================================================

class TestDerivation:
    """map/replace/fill_with return new matrices and leave the source intact."""

    def test_map_changes_cell_type(self):
        m = SqMat.from_flat(2, [0, 1, 1, 0])
        chars = m.map(lambda v: "+" if v else ".")
        assert list(chars) == [".", "+", "+", "."]
        assert chars.dim == 2

    def test_replace_is_copy(self):
        m = SqMat.new(2, 0)
        m2 = m.replace({(0, 1): 7})
        assert m2[(0, 1)] == 7
        assert m[(0, 1)] == 0, "Source matrix must not change"

    def test_replace_out_of_range(self):
        with pytest.raises(IndexError):
            SqMat.new(2, 0).replace({(2, 0): 1})

    def test_fill_with(self):
        counter = iter(range(100))
        m = SqMat.new(2, 0).fill_with(lambda: next(counter))
        assert list(m) == [0, 1, 2, 3]


# =============================================================================
# Value semantics
# =============================================================================

class TestValueSemantics:

    def test_equality_and_hash(self):
        a = SqMat.from_flat(2, [1, 2, 3, 4])
        b = SqMat.from_rows([[1, 2], [3, 4]])
        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_different_dims_differ(self):
        assert SqMat.new(0, 0) != SqMat.new(1, 0)

    def test_str_cell_then_space_per_row(self):
        m = SqMat.from_rows([["+", "."], [".", "."]])
        assert str(m) == "+ . \n. . \n"
