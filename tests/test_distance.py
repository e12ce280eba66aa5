"""
Tests for the card sort edit distance.
"""

import pytest

from edit import distance, max_distance, norm_distance, overlap_matrix
from utils.loader import load_sorts


@pytest.fixture
def sorts():
    return load_sorts("sorts.json")


def test_empty_card_sorts():
    assert distance([], []) == 0
    assert distance([set()], [set(), set()]) == 0


def test_equivalent_card_sorts():
    assert distance([{1}], [{1}]) == 0
    assert distance([{1}, {2}], [{1}, {2}]) == 0
    assert distance([{2}, {1}], [{1}, {2}]) == 0
    assert distance([{1, 2, 3}, {4}, {5, 6}], [{4}, {1, 2, 3}, {5, 6}]) == 0


def test_empty_groups_are_ignored():
    assert distance([{1}, {2}, set()], [{1}, {2}]) == 0
    assert distance([{1}, {2}], [{1}, set(), {2}]) == 0


def test_single_card_displacements():
    assert distance([{1, 2}, {3}], [{1}, {2, 3}]) == 1
    assert distance([{1}, {2}, {3}], [{1}, {2, 3}]) == 1
    assert distance([{1}, {2, 3}], [{1, 2, 3}]) == 1


def test_multiple_moves():
    a = [{1, 2, 3}, {4, 5, 6}, {7, 8, 9}]
    b = [{1, 2}, {3, 4}, {5, 6, 7}, {8, 9}]
    assert distance(a, b) == 3
    assert distance(b, a) == 3


def test_distance_is_symmetric(sorts):
    for a in sorts.values():
        assert distance(a, a) == 0
        for b in sorts.values():
            assert distance(a, b) == distance(b, a)


def test_overlap_matrix_skips_empty_groups():
    assert overlap_matrix([{1, 2}, set(), {3}], [{1}, {2, 3}]) == [[1, 1], [0, 1]]
    assert overlap_matrix([set()], [{1}]) == []


class TestMaxDistance:
    def test_default_number_of_groups(self, sorts):
        assert max_distance(sorts["hierarchy"]) == 13

    def test_given_number_of_groups(self, sorts):
        assert max_distance(sorts["hierarchy"], num_groups=4) == 12

    def test_more_groups_than_cards(self):
        assert max_distance([{1, 2}], num_groups=3) == 1

    def test_sort_without_cards(self):
        assert max_distance([]) == 0
        assert max_distance([set(), set()]) == 0
        assert max_distance([set()], num_groups=2) == 0

    @pytest.mark.parametrize("num_groups", [0, -1])
    def test_invalid_number_of_groups(self, num_groups):
        with pytest.raises(ValueError, match="num_groups"):
            max_distance([{1, 2}], num_groups=num_groups)


class TestNormDistance:
    def test_worked_examples(self, sorts):
        assert norm_distance(sorts["hierarchy"], sorts["mixed"], num_groups=4) == 1
        assert norm_distance(sorts["hierarchy"], sorts["by-rank"]) == 1
        assert norm_distance(
            sorts["hierarchy"], sorts["one-move"], num_groups=4
        ) == pytest.approx(1 / 12)

    def test_scaled_back_to_distance(self, sorts):
        a, b = sorts["hierarchy"], sorts["one-move"]
        for k in (2, 3, 4, 5):
            assert norm_distance(a, b, num_groups=k) * max_distance(
                a, num_groups=k
            ) == pytest.approx(distance(a, b))

    def test_sorts_without_cards(self):
        assert norm_distance([], []) == 0.0
        assert norm_distance([set()], [set()]) == 0.0

    def test_zero_maximum_distance(self):
        assert norm_distance([{1}], [{1}]) == 0.0
        # Sorts over different cards
        assert norm_distance([{1}], [{2}]) == 1.0
