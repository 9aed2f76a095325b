"""
collector/ibm/services/vpc.py - IBM Cloud VPC 리전 리소스 수집

하나의 리전 VpcV1 핸들을 받아 리소스 타입별로 수집합니다.
목록에 포함되지 않는 중첩 데이터(예약 IP, 네트워크 인터페이스, 주소 접두사,
라우트, 리스너/정책/규칙, 풀/멤버)는 상위 항목마다 추가 호출로 가져옵니다.

중첩 조회가 하나라도 실패하면 해당 리소스 타입 전체가 실패합니다 (부분 결과 없음).
"""

from __future__ import annotations

import logging
from typing import Any

from collector.config import DEFAULT_PAGE_SIZE
from collector.shared.paging import call_api, get_resources, iterate_paged_api

from ..types import (
    VPC,
    EndpointGateway,
    FloatingIP,
    Instance,
    LoadBalancer,
    LoadBalancerListener,
    LoadBalancerListenerPolicy,
    LoadBalancerPool,
    NetworkACL,
    PublicGateway,
    RoutingTable,
    SecurityGroup,
    Subnet,
    VirtualNI,
    resource_group_id,
)

logger = logging.getLogger(__name__)


def _paged(method: Any, **kwargs: Any) -> Any:
    """SDK list 메서드를 (limit, start) -> dict 형태로 변환"""

    def list_func(limit: int, start: str | None) -> dict[str, Any]:
        return method(limit=limit, start=start, **kwargs).get_result()

    return list_func


def _label(item: dict[str, Any]) -> str:
    return item.get("name") or item.get("id") or "?"


# =============================================================================
# VPC (+ 주소 접두사)
# =============================================================================


def collect_vpcs(
    vpc_service: Any,
    region: str,
    resource_group_id: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[VPC]:
    """VPC 목록 수집 (주소 접두사 포함, 리전 표시)

    Args:
        vpc_service: 리전 VpcV1 핸들
        region: VPC 레코드에 기록할 리전 이름
        resource_group_id: 리소스 그룹 필터 (None이면 전체)
        page_size: 페이지 크기

    Returns:
        VPC 레코드 리스트
    """
    vpcs = iterate_paged_api(
        _paged(vpc_service.list_vpcs, resource_group_id=resource_group_id),
        lambda page: page.get("vpcs"),
        page_size=page_size,
        operation="list_vpcs",
    )
    result = []
    for vpc in vpcs:
        prefixes = iterate_paged_api(
            _paged(vpc_service.list_vpc_address_prefixes, vpc_id=vpc["id"]),
            lambda page: page.get("address_prefixes"),
            page_size=page_size,
            operation="list_vpc_address_prefixes",
            resource_id=_label(vpc),
        )
        result.append(VPC(native=vpc, region=region, address_prefixes=prefixes))
    return result


# =============================================================================
# 서브넷 (+ 예약 IP)
# =============================================================================


def collect_reserved_ips(
    vpc_service: Any,
    subnet: dict[str, Any],
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[dict[str, Any]]:
    """서브넷의 예약 IP 목록 (두 번째 API 호출)"""
    return iterate_paged_api(
        _paged(vpc_service.list_subnet_reserved_ips, subnet_id=subnet["id"]),
        lambda page: page.get("reserved_ips"),
        page_size=page_size,
        operation="list_subnet_reserved_ips",
        resource_id=_label(subnet),
    )


def collect_subnets(
    vpc_service: Any,
    resource_group_id: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[Subnet]:
    subnets = iterate_paged_api(
        _paged(vpc_service.list_subnets, resource_group_id=resource_group_id),
        lambda page: page.get("subnets"),
        page_size=page_size,
        operation="list_subnets",
    )
    return [
        Subnet(native=subnet, reserved_ips=collect_reserved_ips(vpc_service, subnet, page_size)) for subnet in subnets
    ]


# =============================================================================
# 단순 목록 리소스
# =============================================================================


def collect_public_gateways(
    vpc_service: Any,
    resource_group_id: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[PublicGateway]:
    return get_resources(
        _paged(vpc_service.list_public_gateways, resource_group_id=resource_group_id),
        lambda page: page.get("public_gateways"),
        lambda item: PublicGateway(native=item),
        "public_gateways",
        page_size=page_size,
    )


def collect_floating_ips(
    vpc_service: Any,
    resource_group_id: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[FloatingIP]:
    return get_resources(
        _paged(vpc_service.list_floating_ips, resource_group_id=resource_group_id),
        lambda page: page.get("floating_ips"),
        lambda item: FloatingIP(native=item),
        "floating_ips",
        page_size=page_size,
    )


def collect_network_acls(
    vpc_service: Any,
    resource_group_id: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[NetworkACL]:
    return get_resources(
        _paged(vpc_service.list_network_acls, resource_group_id=resource_group_id),
        lambda page: page.get("network_acls"),
        lambda item: NetworkACL(native=item),
        "network_acls",
        page_size=page_size,
    )


def collect_security_groups(
    vpc_service: Any,
    resource_group_id: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[SecurityGroup]:
    return get_resources(
        _paged(vpc_service.list_security_groups, resource_group_id=resource_group_id),
        lambda page: page.get("security_groups"),
        lambda item: SecurityGroup(native=item),
        "security_groups",
        page_size=page_size,
    )


def collect_endpoint_gateways(
    vpc_service: Any,
    resource_group_id: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[EndpointGateway]:
    """엔드포인트 게이트웨이 (VPE) 수집"""
    return get_resources(
        _paged(vpc_service.list_endpoint_gateways, resource_group_id=resource_group_id),
        lambda page: page.get("endpoint_gateways"),
        lambda item: EndpointGateway(native=item),
        "endpoint_gateways",
        page_size=page_size,
    )


def collect_virtual_nis(
    vpc_service: Any,
    resource_group_id: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[VirtualNI]:
    return get_resources(
        _paged(vpc_service.list_virtual_network_interfaces, resource_group_id=resource_group_id),
        lambda page: page.get("virtual_network_interfaces"),
        lambda item: VirtualNI(native=item),
        "virtual_network_interfaces",
        page_size=page_size,
    )


# =============================================================================
# 인스턴스 (+ 네트워크 인터페이스)
# =============================================================================


def collect_instances(
    vpc_service: Any,
    resource_group_id: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[Instance]:
    """인스턴스 수집

    목록 응답의 네트워크 인터페이스는 요약 정보뿐이므로
    인스턴스마다 list_instance_network_interfaces로 상세 정보를 가져옵니다.
    """
    instances = iterate_paged_api(
        _paged(vpc_service.list_instances, resource_group_id=resource_group_id),
        lambda page: page.get("instances"),
        page_size=page_size,
        operation="list_instances",
    )
    result = []
    for instance in instances:
        response = call_api(
            "list_instance_network_interfaces",
            vpc_service.list_instance_network_interfaces,
            instance_id=instance["id"],
            resource_id=_label(instance),
        )
        interfaces = response.get_result().get("network_interfaces") or []
        result.append(Instance(native=instance, network_interfaces=interfaces))
    return result


# =============================================================================
# 라우팅 테이블 (+ 라우트, VPC 참조)
# =============================================================================


def _vpc_reference(vpc: VPC) -> dict[str, Any]:
    return {
        "crn": vpc.get("crn"),
        "href": vpc.get("href"),
        "id": vpc.id,
        "name": vpc.name,
        "resource_type": "vpc",
    }


def collect_routing_tables(
    vpc_service: Any,
    vpcs: list[VPC],
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[RoutingTable]:
    """VPC별 라우팅 테이블 수집

    라우팅 테이블 API는 VPC 단위이므로 이미 수집된 VPC 목록을 순회합니다.
    """
    result = []
    for vpc in vpcs:
        vpc_ref = _vpc_reference(vpc)
        tables = iterate_paged_api(
            _paged(vpc_service.list_vpc_routing_tables, vpc_id=vpc.id),
            lambda page: page.get("routing_tables"),
            page_size=page_size,
            operation="list_vpc_routing_tables",
            resource_id=vpc.id,
        )
        for table in tables:
            routes = iterate_paged_api(
                _paged(vpc_service.list_vpc_routing_table_routes, vpc_id=vpc.id, routing_table_id=table["id"]),
                lambda page: page.get("routes"),
                page_size=page_size,
                operation="list_vpc_routing_table_routes",
                resource_id=table["id"],
            )
            result.append(RoutingTable(native=table, routes=routes, vpc=dict(vpc_ref)))
    return result


# =============================================================================
# 로드밸런서
# =============================================================================


def _collect_listener_policies(
    vpc_service: Any, lb_id: str, listener_id: str
) -> list[LoadBalancerListenerPolicy]:
    response = call_api(
        "list_load_balancer_listener_policies",
        vpc_service.list_load_balancer_listener_policies,
        load_balancer_id=lb_id,
        listener_id=listener_id,
        resource_id=listener_id,
    )
    policies = []
    for policy in response.get_result().get("policies") or []:
        rules = call_api(
            "list_load_balancer_listener_policy_rules",
            vpc_service.list_load_balancer_listener_policy_rules,
            load_balancer_id=lb_id,
            listener_id=listener_id,
            policy_id=policy["id"],
            resource_id=policy["id"],
        )
        policies.append(LoadBalancerListenerPolicy(native=policy, rules=rules.get_result().get("rules") or []))
    return policies


def _collect_listeners(vpc_service: Any, lb_id: str) -> list[LoadBalancerListener]:
    response = call_api(
        "list_load_balancer_listeners",
        vpc_service.list_load_balancer_listeners,
        load_balancer_id=lb_id,
        resource_id=lb_id,
    )
    return [
        LoadBalancerListener(native=listener, policies=_collect_listener_policies(vpc_service, lb_id, listener["id"]))
        for listener in response.get_result().get("listeners") or []
    ]


def _collect_pools(vpc_service: Any, lb_id: str) -> list[LoadBalancerPool]:
    response = call_api(
        "list_load_balancer_pools",
        vpc_service.list_load_balancer_pools,
        load_balancer_id=lb_id,
        resource_id=lb_id,
    )
    pools = []
    for pool in response.get_result().get("pools") or []:
        members = call_api(
            "list_load_balancer_pool_members",
            vpc_service.list_load_balancer_pool_members,
            load_balancer_id=lb_id,
            pool_id=pool["id"],
            resource_id=pool["id"],
        )
        pools.append(LoadBalancerPool(native=pool, members=members.get_result().get("members") or []))
    return pools


def collect_load_balancers(
    vpc_service: Any,
    resource_group_id_filter: str | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[LoadBalancer]:
    """로드밸런서 수집

    list_load_balancers는 리소스 그룹 필터를 지원하지 않으므로
    조회 후 resource_group.id로 직접 걸러냅니다. 걸러진 항목은 하위 조회를 하지 않습니다.
    """
    load_balancers = iterate_paged_api(
        _paged(vpc_service.list_load_balancers),
        lambda page: page.get("load_balancers"),
        page_size=page_size,
        operation="list_load_balancers",
    )
    result = []
    for lb in load_balancers:
        record = LoadBalancer(native=lb)
        if resource_group_id_filter and resource_group_id(record) != resource_group_id_filter:
            logger.debug(f"로드밸런서 제외 (리소스 그룹 불일치): {_label(lb)}")
            continue
        record.listeners = _collect_listeners(vpc_service, lb["id"])
        record.pools = _collect_pools(vpc_service, lb["id"])
        result.append(record)
    return result
