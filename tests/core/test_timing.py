"""
Tests for Timer and timed().
"""

import pytest

from simplestats.core.compute.timing import Timer, timed


class TestTimer:

    def test_sections_and_total(self):
        timer = Timer()
        timer.start()
        with timer.section('sort'):
            sorted(range(1000))
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'sort'}
        assert result['total_seconds'] >= result['sort'] >= 0.0

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        for _ in range(3):
            with timer.section('mean'):
                pass
        timer.stop()
        assert 'mean' in timer.result()

    def test_section_recorded_on_error(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ZeroDivisionError):
            with timer.section('variance'):
                1 / 0
        timer.stop()
        assert 'variance' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()


def test_timed_context_manager():
    with timed() as timer:
        sum(range(100))
    assert timer.result()['total_seconds'] >= 0.0
