"""
collector/aws/services/ec2.py - EC2 네트워크 리소스 수집

리전 EC2 client 하나로 VPC, 서브넷, 인터넷 게이트웨이, Network ACL,
보안 그룹, 인스턴스, 라우트 테이블을 수집합니다.
모든 Describe* 호출은 MaxResults/NextToken으로 공통 페이지 순회를 사용합니다.
"""

from __future__ import annotations

from typing import Any

from collector.config import DEFAULT_PAGE_SIZE
from collector.shared.paging import aws_next_token, get_resources, iterate_paged_api

from ..types import (
    AwsInstance,
    AwsInternetGateway,
    AwsNetworkAcl,
    AwsRouteTable,
    AwsSecurityGroup,
    AwsSubnet,
    AwsVPC,
)

# Describe* 의 MaxResults 허용 범위
MIN_MAX_RESULTS = 5
MAX_MAX_RESULTS = 1000
MAX_ROUTE_TABLE_RESULTS = 100


def _paged(method: Any, max_limit: int = MAX_MAX_RESULTS) -> Any:
    """Describe* 메서드를 (limit, token) -> dict 형태로 변환"""

    def list_func(limit: int, token: str | None) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"MaxResults": min(max(limit, MIN_MAX_RESULTS), max_limit)}
        if token:
            kwargs["NextToken"] = token
        return method(**kwargs)

    return list_func


def _simple(
    ec2: Any, operation: str, key: str, convert: Any, page_size: int, max_limit: int = MAX_MAX_RESULTS
) -> list[Any]:
    return get_resources(
        _paged(getattr(ec2, operation), max_limit),
        lambda page: page.get(key),
        convert,
        key,
        get_next_start=aws_next_token,
        page_size=page_size,
    )


def collect_vpcs(ec2: Any, region: str, page_size: int = DEFAULT_PAGE_SIZE) -> list[AwsVPC]:
    """VPC 수집 (응답에 없는 리전을 Region으로 기록)"""
    return _simple(ec2, "describe_vpcs", "Vpcs", lambda item: AwsVPC(native=item, region=region), page_size)


def collect_subnets(ec2: Any, page_size: int = DEFAULT_PAGE_SIZE) -> list[AwsSubnet]:
    return _simple(ec2, "describe_subnets", "Subnets", lambda item: AwsSubnet(native=item), page_size)


def collect_internet_gateways(ec2: Any, page_size: int = DEFAULT_PAGE_SIZE) -> list[AwsInternetGateway]:
    return _simple(
        ec2,
        "describe_internet_gateways",
        "InternetGateways",
        lambda item: AwsInternetGateway(native=item),
        page_size,
    )


def collect_network_acls(ec2: Any, page_size: int = DEFAULT_PAGE_SIZE) -> list[AwsNetworkAcl]:
    return _simple(ec2, "describe_network_acls", "NetworkAcls", lambda item: AwsNetworkAcl(native=item), page_size)


def collect_security_groups(ec2: Any, page_size: int = DEFAULT_PAGE_SIZE) -> list[AwsSecurityGroup]:
    return _simple(
        ec2,
        "describe_security_groups",
        "SecurityGroups",
        lambda item: AwsSecurityGroup(native=item),
        page_size,
    )


def collect_route_tables(ec2: Any, page_size: int = DEFAULT_PAGE_SIZE) -> list[AwsRouteTable]:
    return _simple(
        ec2,
        "describe_route_tables",
        "RouteTables",
        lambda item: AwsRouteTable(native=item),
        page_size,
        max_limit=MAX_ROUTE_TABLE_RESULTS,
    )


def collect_instances(ec2: Any, page_size: int = DEFAULT_PAGE_SIZE) -> list[AwsInstance]:
    """인스턴스 수집 (Reservations를 펼쳐 인스턴스 단위로)"""
    reservations = iterate_paged_api(
        _paged(ec2.describe_instances),
        lambda page: page.get("Reservations"),
        get_next_start=aws_next_token,
        page_size=page_size,
        operation="list Reservations",
    )
    return [
        AwsInstance(native=instance) for reservation in reservations for instance in reservation.get("Instances", [])
    ]
