"""
collector/aws/client.py - boto3 client 생성 헬퍼

재시도 설정과 타임아웃이 적용된 boto3 client를 생성합니다.
기본은 재시도 없음(max_attempts=1)이며, RetryConfig로 재시도를 켜면
botocore 자체 재시도(standard 모드)에 맡깁니다.

Example:
    from collector.aws.client import get_client

    ec2 = get_client(session, "ec2", region_name="us-east-1")
    ec2 = get_client(session, "ec2", region_name="us-east-1", retry=RetryConfig(max_retries=3))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from botocore.config import Config

from collector.shared.retry import NO_RETRY, RetryConfig

if TYPE_CHECKING:
    import boto3

DEFAULT_CONNECT_TIMEOUT = 10  # 초
DEFAULT_READ_TIMEOUT = 30  # 초


def build_config(retry: RetryConfig = NO_RETRY) -> Config:
    """botocore Config 생성 (max_attempts = 재시도 횟수 + 1)"""
    return Config(
        retries={"max_attempts": retry.max_retries + 1, "mode": "standard"},  # pyright: ignore[reportArgumentType]
        connect_timeout=DEFAULT_CONNECT_TIMEOUT,
        read_timeout=DEFAULT_READ_TIMEOUT,
    )


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    retry: RetryConfig = NO_RETRY,
    **kwargs: Any,
) -> Any:
    """재시도 설정이 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (ec2 등)
        region_name: 리전 (None이면 세션 기본값)
        retry: 재시도 설정
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    config = build_config(retry)
    if "config" in kwargs:
        config = config.merge(kwargs.pop("config"))

    # session.client은 문자열 서비스명을 받지만 boto3-stubs는 Literal 타입 요구
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )
