import pytest

from spatcore.auction import auction_assignment


def test_diagonal_preference_gives_identity():
    result = auction_assignment([[10, 0], [0, 10]], [0.1])
    assert result.assignment == [0, 1]


def test_antidiagonal_preference_swaps():
    result = auction_assignment([[0, 10], [10, 0]], [0.1])
    assert result.assignment == [1, 0]


def test_three_by_three_diagonal():
    desire = [[9, 0, 0], [0, 9, 0], [0, 0, 9]]
    result = auction_assignment(desire, [0.1])
    assert result.assignment == [0, 1, 2]


@pytest.mark.parametrize(
    "desire",
    [
        [[1, 9, 2], [8, 1, 3], [2, 3, 7]],
        [[4, 4, 4], [4, 4, 4], [4, 4, 4]],
        [[5, 1, 3, 2], [2, 6, 1, 4], [3, 2, 7, 1], [1, 4, 2, 8]],
    ],
)
def test_assignment_is_permutation(desire):
    result = auction_assignment(desire, [1.0, 0.5, 0.1])
    assert sorted(result.assignment) == list(range(len(desire)))


@pytest.mark.parametrize(
    "desire",
    [
        [[1, 9, 2], [8, 1, 3], [2, 3, 7]],
        [[5, 1, 3, 2], [2, 6, 1, 4], [3, 2, 7, 1], [1, 4, 2, 8]],
    ],
)
def test_profit_plus_price_equals_desire(desire):
    result = auction_assignment(desire, [0.2])
    for person, obj in enumerate(result.assignment):
        total = result.profit[person] + result.price[obj]
        assert total == pytest.approx(desire[person][obj])


def test_lengths_of_outputs():
    result = auction_assignment([[1, 2], [3, 4]], [0.5], price=[0.0, 0.0])
    assert len(result.price) == 2
    assert len(result.profit) == 2


def test_rejects_single_person():
    with pytest.raises(ValueError):
        auction_assignment([[1]], [0.1])


def test_rejects_non_square():
    with pytest.raises(ValueError):
        auction_assignment([[1, 2, 3], [4, 5, 6]], [0.1])


def test_rejects_wrong_price_length():
    with pytest.raises(ValueError):
        auction_assignment([[1, 2], [3, 4]], [0.1], price=[0.0])


def test_rejects_nonpositive_eps():
    with pytest.raises(ValueError):
        auction_assignment([[1, 2], [3, 4]], [0.0])