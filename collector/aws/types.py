"""
collector/aws/types.py - AWS 정규 레코드 타입

EC2 Describe* 응답 항목을 그대로 native에 담습니다.
VPC만 수집 리전을 합성 필드 `Region`으로 추가합니다 (응답에 리전 정보가 없음).
AWS는 태그가 응답에 포함되므로 태그 보강 대상이 아닙니다.
"""

from __future__ import annotations

from dataclasses import dataclass

from collector.shared.model import Resource, ResourcesModel, resource_list, synthetic


@dataclass
class AwsVPC(Resource):
    region: str = synthetic("Region", default="")

    @property
    def id(self) -> str | None:
        return self.native.get("VpcId")


@dataclass
class AwsSubnet(Resource):
    pass


@dataclass
class AwsInternetGateway(Resource):
    pass


@dataclass
class AwsNetworkAcl(Resource):
    pass


@dataclass
class AwsSecurityGroup(Resource):
    pass


@dataclass
class AwsInstance(Resource):
    pass


@dataclass
class AwsRouteTable(Resource):
    pass


@dataclass
class AWSResourcesModel(ResourcesModel):
    """AWS 수집 스냅샷"""

    instances: list[AwsInstance] = resource_list(AwsInstance)
    internet_gateways: list[AwsInternetGateway] = resource_list(AwsInternetGateway)
    network_acls: list[AwsNetworkAcl] = resource_list(AwsNetworkAcl)
    route_tables: list[AwsRouteTable] = resource_list(AwsRouteTable)
    security_groups: list[AwsSecurityGroup] = resource_list(AwsSecurityGroup)
    subnets: list[AwsSubnet] = resource_list(AwsSubnet)
    vpcs: list[AwsVPC] = resource_list(AwsVPC)
