import pytest

from ampkit.grid import DenseArray2D


def test_size_reports_cell_counts():
    arr = DenseArray2D(3, 2)
    assert arr.size() == (3, 2)


def test_default_fill_is_false():
    arr = DenseArray2D(2, 2)
    assert arr.data() == [False] * 4


def test_custom_default_fill():
    arr = DenseArray2D(2, 3, 7)
    assert all(arr[i, j] == 7 for i in range(2) for j in range(3))


def test_set_and_get_round_trip():
    arr = DenseArray2D(4, 5, 0)
    arr[3, 4] = 9
    arr[0, 1] = 2
    assert arr[3, 4] == 9
    assert arr[0, 1] == 2
    assert arr[1, 0] == 0


def test_storage_is_column_major():
    arr = DenseArray2D(3, 2, 0)
    arr[1, 0] = 1
    arr[0, 1] = 2
    data = arr.data()
    assert data[1] == 1
    assert data[3] == 2


def test_data_returns_copy():
    arr = DenseArray2D(2, 2, 0)
    data = arr.data()
    data[0] = 5
    assert arr[0, 0] == 0


@pytest.mark.parametrize("index", [(3, 0), (0, 2), (-1, 0), (0, -1)])
def test_out_of_range_raises(index):
    arr = DenseArray2D(3, 2)
    with pytest.raises(IndexError) as read_error:
        arr[index]
    assert read_error.type is IndexError
    with pytest.raises(IndexError):
        arr[index] = True
    assert arr.data() == [False] * 6


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DenseArray2D(-1, 2)