"""
collector/ibm/regions.py - IBM Cloud VPC 리전 엔드포인트

리전 이름 -> VPC API 엔드포인트 정적 테이블입니다.
비공개(private) 리전은 명시적으로 요청한 경우에만 수집합니다.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class IBMRegion:
    """VPC 리전 정보

    Attributes:
        name: 리전 이름 (예: "us-south")
        url: VPC API 엔드포인트
        is_private: 비공개 리전 여부
    """

    name: str
    url: str
    is_private: bool = False


def _region(name: str, is_private: bool = False) -> IBMRegion:
    return IBMRegion(name, f"https://{name}.iaas.cloud.ibm.com/v1", is_private)


VPC_REGIONS: dict[str, IBMRegion] = {
    r.name: r
    for r in (
        _region("us-east"),
        _region("us-south"),
        _region("ca-tor"),
        _region("br-sao"),
        _region("eu-de"),
        _region("eu-es"),
        _region("eu-gb"),
        _region("eu-fr2", is_private=True),
        _region("au-syd"),
        _region("jp-osa"),
        _region("jp-tok"),
    )
}


def all_regions() -> list[str]:
    """공개 리전 이름 목록 (테이블 순서)"""
    return [name for name, region in VPC_REGIONS.items() if not region.is_private]


def get_region(name: str) -> IBMRegion | None:
    """리전 조회 (알 수 없는 리전이면 None)"""
    return VPC_REGIONS.get(name)
