"""
collector/shared/retry.py - 선택적 재시도 (기본 비활성)

기본 동작은 첫 번째 API 오류에서 즉시 중단입니다.
RetryConfig(max_retries=N)을 명시한 경우에만 재시도 가능한 오류
(HTTP 429/5xx, AWS 스로틀링 코드, 네트워크/타임아웃)를 지수 백오프로 재시도합니다.

주요 구성 요소:
- RetryConfig: 재시도 설정 (지수 백오프 + 지터)
- is_retryable: 재시도 가능 여부 판단
- call_with_retry: 단일 호출 재시도
- with_retry: IBM 서비스 핸들을 재시도 프록시로 감싸기
"""

from __future__ import annotations

import functools
import logging
import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryConfig:
    """재시도 설정

    Attributes:
        max_retries: 최대 재시도 횟수 (0이면 재시도 안함)
        base_delay: 기본 대기 시간 (초)
        max_delay: 최대 대기 시간 (초)
        exponential_base: 지수 백오프 밑수
        jitter: 지터 사용 여부 (대기 시간에 랜덤성 추가)
    """

    max_retries: int = 0
    base_delay: float = 1.0
    max_delay: float = 30.0
    exponential_base: float = 2.0
    jitter: bool = True

    @property
    def enabled(self) -> bool:
        return self.max_retries > 0

    def get_delay(self, attempt: int) -> float:
        """재시도 대기 시간 계산

        Args:
            attempt: 현재 시도 횟수 (0부터 시작)

        Returns:
            대기 시간 (초)
        """
        delay = min(self.base_delay * (self.exponential_base**attempt), self.max_delay)
        if self.jitter:
            # Full jitter: [0, delay]
            delay = random.uniform(0, delay)
        return delay


# 재시도 안함 (기본)
NO_RETRY = RetryConfig()

# 재시도 가능한 AWS 에러 코드
RETRYABLE_ERROR_CODES: set[str] = {
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "TooManyRequestsException",
    "RateExceeded",
    "ServiceUnavailable",
    "InternalError",
    "RequestTimeout",
}

# 재시도 가능한 HTTP 상태 코드 (IBM ApiException.status_code)
RETRYABLE_STATUS_CODES: set[int] = {429, 500, 502, 503, 504}


def is_retryable(error: Exception) -> bool:
    """재시도 가능한 에러인지 확인

    Args:
        error: 확인할 예외

    Returns:
        재시도 가능하면 True
    """
    response = getattr(error, "response", None)
    if isinstance(response, dict):
        return response.get("Error", {}).get("Code", "") in RETRYABLE_ERROR_CODES

    # IBM ApiException.code는 deprecated
    status = getattr(error, "status_code", None) or getattr(error, "code", None)
    if isinstance(status, int):
        return status in RETRYABLE_STATUS_CODES

    return isinstance(error, (ConnectionError, TimeoutError, OSError))


def call_with_retry(
    func: Callable[..., T],
    *args: Any,
    config: RetryConfig = NO_RETRY,
    operation: str = "",
    sleep: Callable[[float], None] = time.sleep,
    **kwargs: Any,
) -> T:
    """재시도 설정에 따라 함수 호출

    재시도 불가능한 오류이거나 재시도 횟수를 모두 쓰면 마지막 예외를 그대로 전파합니다.
    """
    attempt = 0
    while True:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            if attempt >= config.max_retries or not is_retryable(e):
                raise
            delay = config.get_delay(attempt)
            attempt += 1
            logger.warning(
                f"{operation or getattr(func, '__name__', 'call')} 재시도 {attempt}/{config.max_retries} "
                f"({delay:.1f}s 후): {e}"
            )
            sleep(delay)


class RetryingService:
    """서비스 핸들의 공개 메서드 호출을 재시도로 감싸는 프록시"""

    def __init__(self, service: Any, config: RetryConfig, sleep: Callable[[float], None] = time.sleep):
        self._service = service
        self._config = config
        self._sleep = sleep

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._service, name)
        if name.startswith("_") or not callable(attr):
            return attr

        @functools.wraps(attr)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return call_with_retry(attr, *args, config=self._config, operation=name, sleep=self._sleep, **kwargs)

        return wrapper


def with_retry(service: T, config: RetryConfig = NO_RETRY) -> T:
    """재시도가 활성화된 경우에만 프록시로 감싸서 반환"""
    if not config.enabled:
        return service
    return RetryingService(service, config)  # type: ignore[return-value]
