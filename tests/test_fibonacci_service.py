"""
Unit tests for the Fibonacci cache.
"""

import threading
from unittest.mock import patch

import pytest

from rest_lab_api.app.services.fibonacci_service import FibonacciService, NegativePositionError

FIRST_VALUES = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377]


class TestComputeAndStore:
    """Test cases for FibonacciService.compute_and_store."""

    @pytest.mark.parametrize("n, expected", list(enumerate(FIRST_VALUES)))
    def test_correct_values_on_cold_cache(self, n, expected):
        service = FibonacciService()
        assert service.compute_and_store(n) == expected
        assert service.lookup(n) == expected

    def test_large_position_does_not_overflow(self, fibonacci_service):
        assert fibonacci_service.compute_and_store(100) == 354224848179261915075

    def test_base_cases_are_stored(self, fibonacci_service):
        assert fibonacci_service.compute_and_store(0) == 0
        assert fibonacci_service.compute_and_store(1) == 1
        assert 0 in fibonacci_service
        assert 1 in fibonacci_service

    def test_second_call_is_cache_hit(self, fibonacci_service):
        first = fibonacci_service.compute_and_store(30)
        with patch.object(FibonacciService, "_iterate") as iterate:
            second = fibonacci_service.compute_and_store(30)
        assert first == second == 832040
        iterate.assert_not_called()

    def test_cached_value_is_returned_unchanged(self, fibonacci_service):
        fibonacci_service.compute_and_store(10)
        with patch.object(FibonacciService, "_iterate", return_value=-99) as iterate:
            assert fibonacci_service.compute_and_store(10) == 55
        iterate.assert_not_called()

    def test_adjacent_pair_is_combined(self, fibonacci_service):
        fibonacci_service.compute_and_store(8)
        fibonacci_service.compute_and_store(9)
        with patch.object(FibonacciService, "_iterate") as iterate:
            assert fibonacci_service.compute_and_store(10) == 55
        iterate.assert_not_called()

    def test_single_neighbour_falls_back_to_iteration(self, fibonacci_service):
        fibonacci_service.compute_and_store(9)
        with patch.object(FibonacciService, "_iterate", wraps=FibonacciService._iterate) as iterate:
            assert fibonacci_service.compute_and_store(10) == 55
        iterate.assert_called_once_with(10)

    def test_iteration_does_not_fill_intermediate_positions(self, fibonacci_service):
        fibonacci_service.compute_and_store(20)
        assert len(fibonacci_service) == 1
        assert fibonacci_service.lookup(19) is None
        assert fibonacci_service.lookup(18) is None

    def test_negative_position_is_rejected(self, fibonacci_service):
        with pytest.raises(NegativePositionError) as exc_info:
            fibonacci_service.compute_and_store(-1)
        assert exc_info.value.position == -1
        assert isinstance(exc_info.value, ValueError)
        assert len(fibonacci_service) == 0

    def test_concurrent_computation_stores_one_value(self, fibonacci_service):
        results = []

        def worker():
            results.append(fibonacci_service.compute_and_store(50))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == [12586269025] * 8
        assert fibonacci_service.lookup(50) == 12586269025
        assert len(fibonacci_service) == 1


class TestCacheOperations:
    """Test cases for lookup, removal, listing and batch fills."""

    def test_lookup_of_unknown_position_is_none(self, fibonacci_service):
        assert fibonacci_service.lookup(7) is None

    def test_remove(self, fibonacci_service):
        fibonacci_service.compute_and_store(12)
        assert fibonacci_service.remove(12) is True
        assert fibonacci_service.lookup(12) is None
        assert fibonacci_service.remove(12) is False

    def test_all_entries(self, fibonacci_service):
        assert fibonacci_service.all_entries() == []
        fibonacci_service.batch_fill([3, 6, 1])
        assert sorted(fibonacci_service.all_entries()) == [1, 2, 8]

    def test_batch_fill_on_empty_cache(self, fibonacci_service):
        assert fibonacci_service.batch_fill([1, 2, 3, 4, 5]) == [1, 1, 2, 3, 5]
        with patch.object(FibonacciService, "_iterate") as iterate:
            assert fibonacci_service.compute_and_store(5) == 5
        iterate.assert_not_called()

    def test_batch_fill_preserves_order_and_duplicates(self, fibonacci_service):
        assert fibonacci_service.batch_fill([7, 2, 7]) == [13, 1, 13]

    def test_batch_fill_keeps_values_before_negative_position(self, fibonacci_service):
        with pytest.raises(NegativePositionError):
            fibonacci_service.batch_fill([4, 6, -2, 9])
        assert fibonacci_service.lookup(4) == 3
        assert fibonacci_service.lookup(6) == 8
        assert fibonacci_service.lookup(9) is None

    def test_clear(self, fibonacci_service):
        fibonacci_service.batch_fill([1, 2, 3])
        fibonacci_service.clear()
        assert len(fibonacci_service) == 0
        assert fibonacci_service.all_entries() == []
