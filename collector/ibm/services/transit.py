"""
collector/ibm/services/transit.py - Transit Gateway 수집 (글로벌)

TransitGatewayApisV1 핸들로 게이트웨이와 연결을 수집합니다.
두 API 모두 리소스 그룹 필터가 없으므로 게이트웨이는 resource_group.id로,
연결은 수집된 게이트웨이에 속하는지로 걸러냅니다.
"""

from __future__ import annotations

import logging
from typing import Any

from collector.config import DEFAULT_PAGE_SIZE
from collector.shared.paging import iterate_paged_api

from ..types import TransitConnection, TransitGateway, resource_group_id

logger = logging.getLogger(__name__)


def collect_transit_gateways(
    tgw_service: Any,
    resource_group_id_filter: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[TransitGateway]:
    gateways = iterate_paged_api(
        lambda limit, start: tgw_service.list_transit_gateways(limit=limit, start=start).get_result(),
        lambda page: page.get("transit_gateways"),
        page_size=page_size,
        operation="list_transit_gateways",
    )
    records = [TransitGateway(native=gw) for gw in gateways]
    if resource_group_id_filter:
        records = [r for r in records if resource_group_id(r) == resource_group_id_filter]
    return records


def collect_transit_connections(
    tgw_service: Any,
    gateways: list[TransitGateway],
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[TransitConnection]:
    """수집된 게이트웨이에 속한 연결만 반환 (API 반환 순서 유지)"""
    connections = iterate_paged_api(
        lambda limit, start: tgw_service.list_connections(limit=limit, start=start).get_result(),
        lambda page: page.get("connections"),
        page_size=page_size,
        operation="list_connections",
    )
    gateway_ids = {gw.id for gw in gateways}
    result = []
    for conn in connections:
        gateway_id = (conn.get("transit_gateway") or {}).get("id")
        if gateway_id in gateway_ids:
            result.append(TransitConnection(native=conn))
        else:
            logger.debug(f"Transit 연결 제외: {conn.get('id')} (게이트웨이 {gateway_id})")
    return result
