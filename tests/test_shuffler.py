"""Tests for the Fisher-Yates shuffle."""

from collections import Counter
import random

from keyword_app.core.shuffler import fisher_yates_shuffle


class TestFisherYatesShuffle:
    """Permutation and uniformity properties."""

    def test_result_is_permutation(self, rng):
        for size in range(0, 12):
            shuffled = fisher_yates_shuffle(list(range(size)), rng)
            assert sorted(shuffled) == list(range(size))

    def test_input_is_not_modified(self, rng):
        items = [0, 1, 2, 3, 4, 5]
        fisher_yates_shuffle(items, rng)
        assert items == [0, 1, 2, 3, 4, 5]

    def test_empty_and_single(self, rng):
        assert fisher_yates_shuffle([], rng) == []
        assert fisher_yates_shuffle(["X"], rng) == ["X"]

    def test_accepts_range(self, rng):
        assert sorted(fisher_yates_shuffle(range(4), rng)) == [0, 1, 2, 3]

    def test_same_seed_same_order(self):
        first = fisher_yates_shuffle(range(10), random.Random(7))
        second = fisher_yates_shuffle(range(10), random.Random(7))
        assert first == second

    def test_all_permutations_roughly_uniform(self):
        generator = random.Random(2024)
        counts = Counter(tuple(fisher_yates_shuffle([0, 1, 2], generator)) for _ in range(6000))
        assert len(counts) == 6
        for count in counts.values():
            # Expected 1000 each
            assert 850 < count < 1150

    def test_default_generator_is_used_without_rng(self):
        assert sorted(fisher_yates_shuffle([3, 1, 2])) == [1, 2, 3]
