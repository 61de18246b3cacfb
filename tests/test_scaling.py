"""Unit tests for bucket priority rescaling."""

import pytest

from priority_sorter import scale
from priority_sorter.entries import USE_DEFAULT_PRIORITY


class TestScale:
    """Test suite for scale."""

    @pytest.mark.parametrize("buckets", range(1, 13))
    def test_same_bucket_count_is_identity(self, buckets):
        """Test that scale(n, n, p) == p for every bucket."""
        for priority in range(1, buckets + 1):
            assert scale(buckets, buckets, priority) == priority

    @pytest.mark.parametrize(("old", "new"), [(5, 10), (10, 5), (3, 100), (100, 3), (7, 2)])
    def test_monotonic(self, old, new):
        """Test that rescaling never swaps the order of two priorities."""
        scaled = [scale(old, new, priority) for priority in range(1, old + 1)]
        assert scaled == sorted(scaled)

    @pytest.mark.parametrize(("old", "new"), [(5, 10), (10, 5), (2, 9), (9, 2)])
    def test_extremes_map_to_extremes(self, old, new):
        assert scale(old, new, 1) == 1
        assert scale(old, new, old) == new

    @pytest.mark.parametrize(
        ("old", "new", "priority", "expected"),
        [
            (5, 10, 3, 5),  # midpoint rounds down
            (5, 10, 4, 8),  # upper half rounds up
            (10, 5, 5, 2),
            (10, 5, 6, 4),
            (5, 3, 2, 1),
            (5, 3, 4, 3),
        ],
    )
    def test_rounding(self, old, new, priority, expected):
        assert scale(old, new, priority) == expected

    @pytest.mark.parametrize("priority", range(1, 11))
    def test_results_stay_in_range(self, priority):
        assert 1 <= scale(10, 4, priority) <= 4

    def test_use_default_priority_passes_through(self):
        """Test that the 'use default' marker is not treated as a bucket."""
        assert scale(5, 10, USE_DEFAULT_PRIORITY) == USE_DEFAULT_PRIORITY

    def test_single_bucket_source(self):
        assert scale(1, 10, 1) == 1
