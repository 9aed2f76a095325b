"""
collector/ibm/services - IBM Cloud 서비스별 수집 함수
"""

from .iks import KubernetesServiceApiV1, collect_clusters, parse_worker_pools
from .resource_manager import resolve_resource_group
from .transit import collect_transit_connections, collect_transit_gateways
from .vpc import (
    collect_endpoint_gateways,
    collect_floating_ips,
    collect_instances,
    collect_load_balancers,
    collect_network_acls,
    collect_public_gateways,
    collect_reserved_ips,
    collect_routing_tables,
    collect_security_groups,
    collect_subnets,
    collect_virtual_nis,
    collect_vpcs,
)

__all__ = [
    # VPC (리전)
    "collect_vpcs",
    "collect_subnets",
    "collect_reserved_ips",
    "collect_public_gateways",
    "collect_floating_ips",
    "collect_network_acls",
    "collect_security_groups",
    "collect_endpoint_gateways",
    "collect_instances",
    "collect_virtual_nis",
    "collect_routing_tables",
    "collect_load_balancers",
    # 글로벌
    "collect_transit_gateways",
    "collect_transit_connections",
    "KubernetesServiceApiV1",
    "collect_clusters",
    "parse_worker_pools",
    # 리소스 그룹
    "resolve_resource_group",
]
