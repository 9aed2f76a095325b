"""
collector/ibm/types.py - IBM Cloud 정규 레코드 타입

SDK 응답(dict)을 그대로 native에 담고, 수집기가 추가하는 필드
(region, 중첩 하위 컬렉션, tags)를 합성 필드로 선언합니다.
합성 필드의 JSON 출력 순서는 클래스의 선언 순서를 따릅니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from collector.shared.model import Resource, ResourcesModel, TaggedResource, resource_list, synthetic

# =============================================================================
# VPC 리전 리소스
# =============================================================================


@dataclass
class VPC(TaggedResource):
    region: str = synthetic("region", default="")
    address_prefixes: list[dict[str, Any]] = synthetic("address_prefixes")
    tags: list[str] = synthetic("tags")


@dataclass
class Subnet(TaggedResource):
    reserved_ips: list[dict[str, Any]] = synthetic("reserved_ips")
    tags: list[str] = synthetic("tags")


@dataclass
class PublicGateway(TaggedResource):
    tags: list[str] = synthetic("tags")


@dataclass
class FloatingIP(TaggedResource):
    tags: list[str] = synthetic("tags")


@dataclass
class NetworkACL(TaggedResource):
    tags: list[str] = synthetic("tags")


@dataclass
class SecurityGroup(TaggedResource):
    tags: list[str] = synthetic("tags")


@dataclass
class EndpointGateway(TaggedResource):
    tags: list[str] = synthetic("tags")


@dataclass
class Instance(TaggedResource):
    network_interfaces: list[dict[str, Any]] = synthetic("network_interfaces")
    tags: list[str] = synthetic("tags")


@dataclass
class VirtualNI(TaggedResource):
    """가상 네트워크 인터페이스"""

    tags: list[str] = synthetic("tags")


@dataclass
class RoutingTable(Resource):
    """라우팅 테이블 (목록 응답에 VPC 참조가 없어 수집 시 추가)"""

    routes: list[dict[str, Any]] = synthetic("routes")
    vpc: dict[str, Any] | None = synthetic("vpc", default=None)


# =============================================================================
# 로드밸런서 (리스너 -> 정책 -> 규칙, 풀 -> 멤버)
# =============================================================================


@dataclass
class LoadBalancerPool(Resource):
    members: list[dict[str, Any]] = synthetic("members")


@dataclass
class LoadBalancerListenerPolicy(Resource):
    rules: list[dict[str, Any]] = synthetic("rules")


@dataclass
class LoadBalancerListener(Resource):
    policies: list[LoadBalancerListenerPolicy] = synthetic("policies", item=LoadBalancerListenerPolicy)


@dataclass
class LoadBalancer(TaggedResource):
    listeners: list[LoadBalancerListener] = synthetic("listeners", item=LoadBalancerListener)
    pools: list[LoadBalancerPool] = synthetic("pools", item=LoadBalancerPool)
    tags: list[str] = synthetic("tags")


# =============================================================================
# 글로벌 리소스
# =============================================================================


@dataclass
class TransitGateway(Resource):
    pass


@dataclass
class TransitConnection(Resource):
    pass


@dataclass
class IKSCluster(Resource):
    """IKS 클러스터 + 워커 노드 + 워커 풀"""

    worker_nodes: list[dict[str, Any]] = synthetic("worker_nodes")
    worker_pools: list[dict[str, Any]] = synthetic("worker_pools")


def resource_group_id(record: Resource) -> str | None:
    """레코드의 resource_group.id (없으면 None)"""
    group = record.get("resource_group") or {}
    return group.get("id")


# =============================================================================
# 스냅샷
# =============================================================================


@dataclass
class IBMResourcesModel(ResourcesModel):
    """IBM 수집 스냅샷"""

    vpcs: list[VPC] = resource_list(VPC)
    subnets: list[Subnet] = resource_list(Subnet)
    public_gateways: list[PublicGateway] = resource_list(PublicGateway)
    floating_ips: list[FloatingIP] = resource_list(FloatingIP)
    network_acls: list[NetworkACL] = resource_list(NetworkACL)
    security_groups: list[SecurityGroup] = resource_list(SecurityGroup)
    endpoint_gateways: list[EndpointGateway] = resource_list(EndpointGateway)
    instances: list[Instance] = resource_list(Instance)
    virtual_nis: list[VirtualNI] = resource_list(VirtualNI)
    routing_tables: list[RoutingTable] = resource_list(RoutingTable)
    load_balancers: list[LoadBalancer] = resource_list(LoadBalancer)
    transit_connections: list[TransitConnection] = resource_list(TransitConnection)
    transit_gateways: list[TransitGateway] = resource_list(TransitGateway)
    iks_clusters: list[IKSCluster] = resource_list(IKSCluster)
