"""
collector/shared - 프로바이더 공통 모듈

페이지 순회, 선택적 재시도, 정규 데이터 모델, 컨테이너 계약을 제공합니다.
"""

from .container import FabricateOptions, ResourcesContainer
from .model import Resource, ResourcesModel, Taggable, TaggedResource, resource_list, synthetic
from .paging import aws_next_token, call_api, get_resources, ibm_next_start, iterate_paged_api
from .retry import NO_RETRY, RetryConfig, with_retry

__all__ = [
    # container
    "ResourcesContainer",
    "FabricateOptions",
    # model
    "Resource",
    "TaggedResource",
    "Taggable",
    "ResourcesModel",
    "synthetic",
    "resource_list",
    # paging
    "iterate_paged_api",
    "get_resources",
    "call_api",
    "ibm_next_start",
    "aws_next_token",
    # retry
    "RetryConfig",
    "NO_RETRY",
    "with_retry",
]
