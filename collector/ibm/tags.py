"""
collector/ibm/tags.py - 태그 보강 (Global Tagging)

수집이 끝난 스냅샷의 태그 가능한 레코드마다 CRN으로 list_tags를 한 번씩 호출하여
태그 이름을 붙입니다. 리소스 타입은 고정 순서로, 타입 내에서는 스냅샷 순서로 처리합니다.

첫 번째 실패에서 전체 보강이 중단됩니다 (부분 태그 결과 없음).
"""

from __future__ import annotations

import logging
from typing import Any

from collector.exceptions import CollectorError, TaggingError
from collector.shared.model import Taggable

from .types import IBMResourcesModel

logger = logging.getLogger(__name__)

# 태그 보강 순서
TAGGED_RESOURCE_TYPES: tuple[str, ...] = (
    "vpcs",
    "subnets",
    "public_gateways",
    "floating_ips",
    "network_acls",
    "security_groups",
    "endpoint_gateways",
    "instances",
    "virtual_nis",
    "load_balancers",
)

# list_tags 최대 페이지 크기
TAGS_LIMIT = 1000


class TagsCollector:
    """GlobalTaggingV1 핸들로 레코드 태그를 조회"""

    def __init__(self, tagging_service: Any, limit: int = TAGS_LIMIT):
        self.tagging_service = tagging_service
        self.limit = limit

    def set_resource_tags(self, resource: Taggable) -> None:
        """CRN으로 태그를 조회하여 레코드의 태그를 교체

        Raises:
            TaggingError: CRN이 없거나 조회 실패
        """
        crn = resource.crn
        if not crn:
            raise TaggingError("list_tags", error_message=f"CRN이 없는 레코드: {getattr(resource, 'name', None)}")
        try:
            result = self.tagging_service.list_tags(attached_to=crn, limit=self.limit).get_result()
        except CollectorError:
            raise
        except Exception as e:
            raise TaggingError.from_exception("list_tags", e, resource_id=crn) from e
        resource.set_tags([item["name"] for item in result.get("items") or []])

    def collect_tags(self, resources: IBMResourcesModel) -> None:
        """스냅샷 전체 태그 보강"""
        for resource_type in TAGGED_RESOURCE_TYPES:
            records = getattr(resources, resource_type)
            for record in records:
                self.set_resource_tags(record)
            if records:
                logger.debug(f"{resource_type}: {len(records)}개 태그 조회 완료")
