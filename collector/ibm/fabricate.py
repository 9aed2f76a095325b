"""
collector/ibm/fabricate.py - 합성 IBM 스냅샷 생성

실제 API 호출 없이 분석 도구 테스트용 스냅샷을 만듭니다.
VPC마다 1~10개의 Network ACL(각 0~9개 규칙)과 요청한 수의 서브넷을 만들고,
서브넷 CIDR(/23 또는 /24)은 사설 대역에서 겹치지 않게 잘라냅니다.

Usage:
    from collector.ibm.fabricate import fabricate_resources
    from collector.shared import FabricateOptions

    model = IBMResourcesModel()
    fabricate_resources(model, FabricateOptions(num_vpcs=2, subnets_per_vpc=3, seed=7))
"""

from __future__ import annotations

import ipaddress
import logging
import random
from collections import defaultdict
from typing import Any

from collector.shared.container import FabricateOptions

from .types import VPC, IBMResourcesModel, NetworkACL, Subnet

logger = logging.getLogger(__name__)

REGIONS_AND_ZONES: dict[str, list[str]] = {
    "us-south": ["us-south-1", "us-south-2", "us-south-3"],
    "us-east": ["us-east-1", "us-east-2", "us-east-3"],
}
PRIVATE_RANGES = ("10.0.0.0/8", "172.16.0.0/12", "192.168.0.0/16")
DEFAULT_CIDR_PREFIX = 24
MAX_NACLS_IN_VPC = 10
MAX_RULES_IN_NACL = 10


class UIDGenerator:
    """리소스 종류별 순차 ID 생성기 (vpc-0, vpc-1, nacl-0, ...)"""

    def __init__(self) -> None:
        self._counters: dict[str, int] = defaultdict(int)

    def next(self, kind: str) -> str:
        uid = f"{kind}-{self._counters[kind]}"
        self._counters[kind] += 1
        return uid


class CidrAllocator:
    """사설 대역에서 겹치지 않는 CIDR 블록 할당"""

    def __init__(self, ranges: tuple[str, ...] = PRIVATE_RANGES) -> None:
        self._available = sorted(ipaddress.IPv4Network(r) for r in ranges)

    def allocate(self, prefix: int) -> str:
        """가장 낮은 주소의 정렬된 /prefix 블록을 잘라 반환

        Raises:
            ValueError: 남은 공간 부족
        """
        for i, block in enumerate(self._available):
            if block.prefixlen > prefix:
                continue
            allocated = next(block.subnets(new_prefix=prefix))
            remaining = list(block.address_exclude(allocated))
            self._available = sorted(self._available[:i] + remaining + self._available[i + 1 :])
            return str(allocated)
        raise ValueError(f"/{prefix} 블록을 할당할 공간이 없습니다")


def _ref(uid: str, resource_type: str | None = None) -> dict[str, Any]:
    ref = {"crn": uid, "id": uid, "name": uid}
    if resource_type:
        ref["resource_type"] = resource_type
    return ref


class Fabricator:
    """합성 리소스 생성기 (난수와 ID 상태를 인스턴스에 보관)"""

    def __init__(self, seed: int | None = None) -> None:
        self.rng = random.Random(seed)
        self.uids = UIDGenerator()
        self.cidrs = CidrAllocator()

    def random_cidr(self) -> str:
        address = ipaddress.IPv4Address(self.rng.getrandbits(32))
        return str(ipaddress.IPv4Network(f"{address}/{self.rng.randint(8, 32)}", strict=False))

    def make_nacl_rules(self) -> list[dict[str, Any]]:
        rules = []
        for _ in range(self.rng.randrange(MAX_RULES_IN_NACL)):
            rule_id = self.uids.next("aclRule")
            rules.append(
                {
                    "id": rule_id,
                    "name": rule_id,
                    "action": self.rng.choice(["allow", "deny"]),
                    "direction": self.rng.choice(["inbound", "outbound"]),
                    "source": self.random_cidr(),
                    "destination": self.random_cidr(),
                    "protocol": "all",
                    "ip_version": "ipv4",
                }
            )
        return rules

    def make_nacls(self, vpc_id: str) -> list[NetworkACL]:
        nacls = []
        for _ in range(self.rng.randrange(MAX_NACLS_IN_VPC) + 1):
            nacl_id = self.uids.next("nacl")
            native = _ref(nacl_id)
            native["vpc"] = _ref(vpc_id, "vpc")
            native["rules"] = self.make_nacl_rules()
            native["subnets"] = []
            nacls.append(NetworkACL(native=native))
        return nacls

    def make_subnet(self, vpc_id: str, zone: str, nacl: NetworkACL) -> Subnet:
        subnet_id = self.uids.next("subnet")
        native = _ref(subnet_id)
        native["vpc"] = _ref(vpc_id, "vpc")
        native["zone"] = {"name": zone}
        native["ipv4_cidr_block"] = self.cidrs.allocate(DEFAULT_CIDR_PREFIX - self.rng.randrange(2))
        native["network_acl"] = _ref(nacl.id)
        nacl.native["subnets"].append(_ref(subnet_id))
        return Subnet(native=native)

    def fabricate(self, resources: IBMResourcesModel, options: FabricateOptions) -> None:
        for _ in range(options.num_vpcs):
            vpc_id = self.uids.next("vpc")
            region = self.rng.choice(sorted(REGIONS_AND_ZONES))
            resources.vpcs.append(VPC(native=_ref(vpc_id), region=region))

            nacls = self.make_nacls(vpc_id)
            resources.network_acls.extend(nacls)

            zone = self.rng.choice(REGIONS_AND_ZONES[region])
            for _ in range(options.subnets_per_vpc):
                resources.subnets.append(self.make_subnet(vpc_id, zone, self.rng.choice(nacls)))

        logger.info(
            f"합성 데이터 생성: VPC {len(resources.vpcs)}개, "
            f"NACL {len(resources.network_acls)}개, 서브넷 {len(resources.subnets)}개"
        )


def fabricate_resources(resources: IBMResourcesModel, options: FabricateOptions) -> None:
    """스냅샷에 합성 VPC/NACL/서브넷 추가"""
    Fabricator(options.seed).fabricate(resources, options)
