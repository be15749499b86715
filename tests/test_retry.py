"""Tests for bounded retry."""

from unittest.mock import Mock

import pytest

from image_uploader.uploaders.retry import RetryError, exponential_backoff, retry_call


class TestExponentialBackoff:
    def test_doubles_from_one_second(self):
        assert [exponential_backoff(n) for n in (1, 2, 3)] == [1.0, 2.0, 4.0]


class TestRetryCall:
    """Tests for retry_call."""

    def test_returns_first_success_without_sleeping(self, fake_sleep, sleep_calls):
        func = Mock(return_value="ok")

        assert retry_call(func, sleep=fake_sleep) == "ok"
        func.assert_called_once()
        assert sleep_calls == []

    def test_always_failing_call_is_attempted_three_times(self, fake_sleep, sleep_calls):
        func = Mock(side_effect=[ConnectionError("one"), ConnectionError("two"), ConnectionError("three")])

        with pytest.raises(RetryError) as exc_info:
            retry_call(func, sleep=fake_sleep)

        assert func.call_count == 3
        assert sleep_calls == [1.0, 2.0]
        assert exc_info.value.attempts == 3
        assert str(exc_info.value.last_error) == "three"

    def test_recovers_after_failure(self, fake_sleep, sleep_calls):
        func = Mock(side_effect=[OSError("flaky"), "done"])

        assert retry_call(func, sleep=fake_sleep) == "done"
        assert sleep_calls == [1.0]

    def test_reports_each_failure(self, fake_sleep):
        on_failure = Mock()
        error = RuntimeError("boom")

        with pytest.raises(RetryError):
            retry_call(Mock(side_effect=error), max_attempts=2, sleep=fake_sleep, on_failure=on_failure)

        assert [c.args for c in on_failure.call_args_list] == [
            (1, 2, error, 1.0),
            (2, 2, error, None),
        ]

    def test_custom_backoff(self, fake_sleep, sleep_calls):
        with pytest.raises(RetryError):
            retry_call(Mock(side_effect=ValueError()), max_attempts=4, backoff=lambda n: 0.5 * n, sleep=fake_sleep)

        assert sleep_calls == [0.5, 1.0, 1.5]

    def test_rejects_zero_attempts(self):
        func = Mock()

        with pytest.raises(ValueError, match="at least 1"):
            retry_call(func, max_attempts=0)

        func.assert_not_called()

    def test_single_attempt_raises_retry_error_without_sleeping(self, fake_sleep, sleep_calls):
        with pytest.raises(RetryError) as exc_info:
            retry_call(Mock(side_effect=OSError("down")), max_attempts=1, sleep=fake_sleep)

        assert exc_info.value.attempts == 1
        assert str(exc_info.value.last_error) == "down"
        assert sleep_calls == []
