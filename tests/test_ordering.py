import pytest

from squaremat.ordering import SumOrdering


class Grid(SumOrdering):
    def __init__(self, rows):
        self.rows = [list(row) for row in rows]

    def __iter__(self):
        return iter(self.rows)


def _grid(size, fn):
    rows = [[0.0] * size for _ in range(size)]
    for i in range(size):
        for j in range(size):
            fn(rows, i, j)
    return Grid(rows)


def _set(value_fn, transpose=False):
    def fn(rows, i, j):
        if transpose:
            rows[j][i] = value_fn(i, j)
        else:
            rows[i][j] = value_fn(i, j)

    return fn


@pytest.fixture
def base():
    return _grid(3, _set(lambda i, j: 3 * i + j))


@pytest.fixture
def same_sum():
    return _grid(3, _set(lambda i, j: 3 * i + j, transpose=True))


@pytest.fixture
def bigger():
    return _grid(3, _set(lambda i, j: 3 * i + j + 1, transpose=True))


@pytest.fixture
def sized_pair():
    big = _grid(5, _set(lambda i, j: 5 * i + j))
    small = _grid(3, _set(lambda i, j: 3 * i + j))
    return big, small


def test_total_equals_sum_of_entries(base):
    assert SumOrdering.total(base) == 36
    assert base.total() == sum(sum(row) for row in base.rows)


def test_exact_same(base):
    assert SumOrdering.total(base) == 36
    assert base == base
    assert not (base != base)


def test_same_sum(base, same_sum):
    assert SumOrdering.total(base) == SumOrdering.total(same_sum) == 36
    assert base == same_sum
    assert not (base != same_sum)
    assert base >= same_sum
    assert base <= same_sum
    assert not (base > same_sum)
    assert not (base < same_sum)


def test_smaller(base, bigger):
    assert SumOrdering.total(base) == 36
    assert SumOrdering.total(bigger) == 45
    assert not (base == bigger)
    assert base != bigger
    assert not (base >= bigger)
    assert base <= bigger
    assert not (base > bigger)
    assert base < bigger


def test_bigger(base, bigger):
    assert SumOrdering.total(bigger) == 45
    assert bigger >= base
    assert not (bigger <= base)
    assert bigger > base
    assert not (bigger < base)


def test_differently_sized(sized_pair):
    big, small = sized_pair
    assert SumOrdering.total(big) == 300
    assert SumOrdering.total(small) == 36
    assert not (big == small)
    assert big != small
    assert big >= small
    assert not (big <= small)
    assert big > small
    assert not (big < small)


def test_comparison_with_other_type(base):
    assert SumOrdering.total(base) == 36
    assert (base == 36) is False
    with pytest.raises(TypeError):
        base < 5


def test_unhashable(base):
    assert SumOrdering.total(base) == 36
    with pytest.raises(TypeError):
        hash(base)