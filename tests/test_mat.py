import pytest

from bgui.mat import Mat, orthographic, scale, translate


def _row_vector(x, y):
    v = Mat(1, 4)
    v[0, 0] = x
    v[0, 1] = y
    v[0, 2] = 0.0
    v[0, 3] = 1.0
    return v


def test_square_matrix_starts_as_identity():
    m = Mat(4, 4)
    for i in range(4):
        for j in range(4):
            assert m[i, j] == (1.0 if i == j else 0.0)


def test_non_square_matrix_starts_as_zero():
    m = Mat(2, 3)
    assert all(v == 0.0 for v in m.data())
    assert len(m.data()) == 6


def test_set_and_get():
    m = Mat(3, 3)
    m[1, 2] = 5.0
    assert m[1, 2] == 5.0
    assert m.data()[1 * 3 + 2] == 5.0


def test_out_of_range_index():
    with pytest.raises(IndexError):
        Mat(2, 2)[2, 0]


def test_identity_is_neutral_for_product():
    m = Mat(4, 4)
    m[0, 1] = 3.0
    m[2, 3] = -1.5
    assert m * Mat(4, 4) == m
    assert Mat(4, 4) * m == m


def test_scalar_multiply_in_place_and_copy():
    m = Mat(2, 2)
    doubled = m * 2
    m *= 2
    assert m == doubled
    assert m[0, 0] == 2
    assert m[0, 1] == 0


def test_in_place_product_requires_square():
    m = Mat(2, 3)
    with pytest.raises(ValueError):
        m *= Mat(3, 3)


def test_product_dimension_mismatch():
    with pytest.raises(ValueError):
        Mat(2, 3) * Mat(2, 3)


def test_orthographic_maps_window_corners_to_clip_space():
    proj = orthographic(0.0, 800.0, 600.0, 0.0)
    top_left = _row_vector(0.0, 0.0) * proj
    bottom_right = _row_vector(800.0, 600.0) * proj
    assert top_left[0, 0] == pytest.approx(-1.0)
    assert top_left[0, 1] == pytest.approx(1.0)
    assert bottom_right[0, 0] == pytest.approx(1.0)
    assert bottom_right[0, 1] == pytest.approx(-1.0)
    assert proj[3, 3] == 1.0


def test_translate_adds_to_last_row():
    m = Mat(4, 4)
    translate(m, 2.0, 3.0, 4.0)
    translate(m, 2.0, 3.0, 4.0)
    assert (m[3, 0], m[3, 1], m[3, 2]) == (2.0 + 2.0, 3.0 + 3.0, 4.0 + 4.0)


def test_scale_multiplies_diagonal():
    m = Mat(4, 4)
    scale(m, 2.0, 3.0, 4.0)
    assert (m[0, 0], m[1, 1], m[2, 2], m[3, 3]) == (2.0, 3.0, 4.0, 1.0)