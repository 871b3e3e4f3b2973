import random

from vocabstack_app.modules.vocabulary.engine.ordering import (
    fisher_yates,
    merge_order,
    stabilize_order,
)


class TestStabilizeOrder:

    def test_empty_prev_returns_next(self):
        assert stabilize_order([], [4, 1, 7]) == [4, 1, 7]

    def test_kept_then_missing(self):
        """Scenario: clearing the search restores the range around the kept hits."""
        prev = [3, 17]
        nxt = list(range(20))
        expected = [3, 17] + [i for i in range(20) if i not in (3, 17)]
        assert stabilize_order(prev, nxt) == expected

    def test_relative_order_of_kept_items_follows_prev(self):
        prev = [9, 2, 5, 7]
        nxt = [2, 5, 6, 9]
        assert stabilize_order(prev, nxt) == [9, 2, 5, 6]

    def test_items_leaving_the_filter_are_dropped(self):
        assert stabilize_order([1, 2, 3], [3]) == [3]

    def test_idempotent(self):
        prev = [5, 0, 3]
        nxt = [0, 1, 3, 4]
        once = stabilize_order(prev, nxt)
        assert stabilize_order(prev, nxt) == once
        assert stabilize_order(once, nxt) == once

    def test_duplicate_indices_in_prev_are_collapsed(self):
        assert stabilize_order([2, 2, 1, 2], [1, 2, 3]) == [2, 1, 3]


class TestMergeOrder:

    def test_without_mix_matches_stabilize(self):
        assert merge_order([3, 1], [0, 1, 2, 3]) == [3, 1, 0, 2]

    def test_mix_shuffles_only_the_appended_tail(self):
        rng = random.Random(7)
        prev = [8, 2]
        nxt = list(range(10))
        result = merge_order(prev, nxt, mix=True, rng=rng)
        assert result[:2] == [8, 2]
        assert sorted(result[2:]) == [i for i in range(10) if i not in (8, 2)]

    def test_mix_with_empty_prev_is_a_permutation(self):
        result = merge_order([], list(range(30)), mix=True, rng=random.Random(1))
        assert sorted(result) == list(range(30))


class TestFisherYates:

    def test_is_a_permutation(self):
        items = list(range(50))
        fisher_yates(items, random.Random(3))
        assert sorted(items) == list(range(50))

    def test_prefix_before_start_is_untouched(self):
        items = list(range(20))
        fisher_yates(items, random.Random(11), start=6)
        assert items[:6] == list(range(6))
        assert sorted(items[6:]) == list(range(6, 20))

    def test_seeded_rng_is_deterministic(self):
        first, second = list(range(15)), list(range(15))
        fisher_yates(first, random.Random(42))
        fisher_yates(second, random.Random(42))
        assert first == second

    def test_short_sequences(self):
        empty = []
        fisher_yates(empty, random.Random())
        assert empty == []
        one = [4]
        fisher_yates(one, random.Random(), start=3)
        assert one == [4]
