"""
collector/factory.py - 프로바이더 컨테이너 선택

프로바이더 이름으로 컨테이너를 생성합니다.
알 수 없는 이름이면 None을 반환하며, 호출자가 설정 오류로 처리합니다.
"""

from __future__ import annotations

from collector.shared.container import ResourcesContainer
from collector.shared.retry import RetryConfig

from .aws import AWSResourcesContainer
from .exceptions import UnsupportedProviderError
from .ibm import IBMResourcesContainer
from .provider import Provider


def get_resource_container(
    provider: str | Provider,
    regions: list[str] | None = None,
    resource_group: str | None = None,
    retry: RetryConfig | None = None,
) -> ResourcesContainer | None:
    """프로바이더 컨테이너 생성

    Args:
        provider: 프로바이더 이름 ("ibm", "aws", 대소문자 무관)
        regions: 수집할 리전 (비어 있으면 전체)
        resource_group: 리소스 그룹 ID 또는 이름 (IBM만 사용)
        retry: 재시도 설정 (None이면 환경 변수 기준)

    Returns:
        컨테이너 또는 None (알 수 없는 프로바이더)
    """
    try:
        provider = Provider.parse(provider)
    except UnsupportedProviderError:
        return None

    if provider is Provider.IBM:
        return IBMResourcesContainer(regions, resource_group, retry=retry)
    if provider is Provider.AWS:
        return AWSResourcesContainer(regions, retry=retry)
    return None
