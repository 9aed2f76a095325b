"""
collector/ibm/services/resource_manager.py - 리소스 그룹 확인

사용자가 넘긴 리소스 그룹 값은 ID일 수도, 이름일 수도 있습니다.
실행 시작 시 한 번만 확인하여 ID로 확정합니다.
"""

from __future__ import annotations

import logging
from typing import Any

from ibm_cloud_sdk_core import ApiException

from collector.exceptions import ResourceGroupNotFoundError

logger = logging.getLogger(__name__)


def resolve_resource_group(rm_service: Any, resource_group: str) -> str:
    """리소스 그룹 ID 확정

    1. ID로 조회에 성공하면 그대로 사용
    2. 아니면 이름으로 목록 조회, 정확히 하나 일치하면 그 ID 사용

    Args:
        rm_service: ResourceManagerV2 핸들
        resource_group: 리소스 그룹 ID 또는 이름

    Returns:
        리소스 그룹 ID

    Raises:
        ResourceGroupNotFoundError: 일치하는 그룹이 없거나 둘 이상
    """
    try:
        group = rm_service.get_resource_group(id=resource_group).get_result()
        if group:
            return resource_group
    except ApiException as e:
        logger.debug(f"리소스 그룹 ID 조회 실패, 이름으로 재시도: {resource_group} ({e.status_code})")

    try:
        groups = rm_service.list_resource_groups(name=resource_group).get_result().get("resources") or []
    except ApiException as e:
        raise ResourceGroupNotFoundError(resource_group, 0, cause=e) from e

    if len(groups) != 1:
        raise ResourceGroupNotFoundError(resource_group, len(groups))

    group_id = groups[0]["id"]
    logger.info(f"리소스 그룹 이름 {resource_group} -> ID {group_id}")
    return group_id
