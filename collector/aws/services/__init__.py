"""
collector/aws/services - AWS 서비스별 수집 함수
"""

from .ec2 import (
    collect_instances,
    collect_internet_gateways,
    collect_network_acls,
    collect_route_tables,
    collect_security_groups,
    collect_subnets,
    collect_vpcs,
)

__all__ = [
    "collect_vpcs",
    "collect_subnets",
    "collect_internet_gateways",
    "collect_network_acls",
    "collect_security_groups",
    "collect_instances",
    "collect_route_tables",
]
