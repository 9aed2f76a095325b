"""
collector - 클라우드 네트워크 리소스 수집 엔진

프로바이더 API를 순회하여 네트워크 리소스 스냅샷을 만들고 JSON으로 직렬화합니다.

Usage:
    from collector import get_resource_container

    container = get_resource_container("ibm", regions=["us-south"])
    container.collect_resources_from_api()
    print(container.to_json_string())
"""

from .config import get_version
from .exceptions import CollectorError, ConfigurationError
from .factory import get_resource_container
from .provider import ALL_PROVIDERS, Provider

__version__ = get_version()

__all__ = [
    "get_resource_container",
    "get_version",
    "Provider",
    "ALL_PROVIDERS",
    "CollectorError",
    "ConfigurationError",
]
