import itertools

import pytest

from spatcore.dinfty import bottleneck_assignment


def _bottleneck(cost, perm):
    return max(cost[i][p] for i, p in enumerate(perm))


def test_identity_is_kept_when_optimal():
    assert bottleneck_assignment([[0, 5], [5, 0]]) == [0, 1]


def test_swap_when_cheaper():
    assert bottleneck_assignment([[5, 0], [0, 5]]) == [1, 0]


def test_trivial_sizes():
    assert bottleneck_assignment([[3]]) == [0]
    assert bottleneck_assignment([[]] * 0) == []


@pytest.mark.parametrize(
    "cost",
    [
        [[3, 1, 4], [1, 5, 9], [2, 6, 5]],
        [[7, 2, 9, 4], [3, 8, 1, 6], [5, 4, 7, 2], [9, 3, 2, 8]],
        [[1, 1, 1], [1, 1, 1], [1, 1, 1]],
    ],
)
def test_result_is_permutation_and_no_worse_than_any(cost):
    result = bottleneck_assignment(cost)
    n = len(cost)
    assert sorted(result) == list(range(n))
    value = _bottleneck(cost, result)
    for perm in itertools.permutations(range(n)):
        assert value <= _bottleneck(cost, perm)


def test_no_worse_than_identity():
    cost = [[9, 1, 2, 3], [1, 9, 2, 3], [2, 3, 9, 1], [3, 2, 1, 9]]
    result = bottleneck_assignment(cost)
    assert _bottleneck(cost, result) < _bottleneck(cost, range(4))


def test_rejects_non_square():
    with pytest.raises(ValueError):
        bottleneck_assignment([[1, 2, 3], [4, 5, 6]])