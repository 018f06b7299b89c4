"""Capped retry with exponential backoff for model calls."""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from pid_digitizer.extraction.exceptions import ModelQuotaExceededError, TransientModelError
from pid_digitizer.logging.logger import Log

T = TypeVar("T")


def is_transient_error(exc: BaseException) -> bool:
    return isinstance(exc, TransientModelError)


def is_quota_error(exc: BaseException) -> bool:
    return isinstance(exc, ModelQuotaExceededError)


@dataclass(frozen=True)
class RetryPolicy:
    """How many times to call, how long to wait, and which failures matter.

    The wait before retrying after attempt ``n`` (0-based) is
    ``2**n * base_delay_seconds + uniform(0, max_jitter_seconds)``.
    """

    max_attempts: int = 3
    base_delay_seconds: float = 1.5
    max_jitter_seconds: float = 1.0
    is_transient: Callable[[BaseException], bool] = field(default=is_transient_error)
    should_fall_back: Callable[[BaseException], bool] = field(default=is_quota_error)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    def backoff_seconds(self, attempt: int, jitter: float) -> float:
        return (2**attempt) * self.base_delay_seconds + jitter


class RetryExecutor:
    """Runs a call under a RetryPolicy, sleeping between transient failures."""

    def __init__(
        self,
        policy: RetryPolicy,
        *,
        sleep: Callable[[float], None] = time.sleep,
        jitter: Callable[[float, float], float] = random.uniform,
    ) -> None:
        self._policy = policy
        self._sleep = sleep
        self._jitter = jitter

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    def run(self, call: Callable[[], T], *, label: str = "call") -> T:
        """Invoke ``call`` until it succeeds or the attempt budget runs out.

        Non-transient errors propagate immediately. When every attempt fails
        transiently, the last error is re-raised.
        """
        max_attempts = self._policy.max_attempts
        for attempt in range(max_attempts):
            Log.info(f"Attempting {label} (attempt {attempt + 1}/{max_attempts})")
            try:
                return call()
            except Exception as exc:
                if not self._policy.is_transient(exc) or attempt == max_attempts - 1:
                    raise
                wait = self._policy.backoff_seconds(
                    attempt, self._jitter(0.0, self._policy.max_jitter_seconds)
                )
                Log.warning(f"Transient error on {label}: {exc}. Retrying in {wait:.2f}s")
                self._sleep(wait)
        raise AssertionError("unreachable")
