"""
collector/shared/container.py - 프로바이더 컨테이너 공통 계약

모든 프로바이더 컨테이너가 구현하는 추상 기반 클래스입니다.
하나의 컨테이너는 한 번의 수집 실행을 담당하며 스냅샷(ResourcesModel)을 소유합니다.

실행 단계:
    RegionalCollection (리전별) -> GlobalCollection -> TagEnrichment -> Complete
    어느 단계든 실패하면 예외를 전파하고 이후 단계는 실행하지 않습니다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from rich.console import Console
from rich.table import Table

from collector.exceptions import ConfigurationError

from .model import ResourcesModel


@dataclass
class FabricateOptions:
    """합성 데이터 생성 옵션

    Attributes:
        num_vpcs: 생성할 VPC 수
        subnets_per_vpc: VPC당 서브넷 수
        seed: 난수 시드 (None이면 비결정적)
    """

    num_vpcs: int = 1
    subnets_per_vpc: int = 1
    seed: int | None = None


class ResourcesContainer(ABC):
    """프로바이더 컨테이너 인터페이스"""

    provider: str = ""
    regions: list[str]

    @abstractmethod
    def collect_resources_from_api(self) -> None:
        """API에서 리소스를 수집하여 스냅샷을 채움

        Raises:
            CollectorError: 첫 번째 치명적 오류
        """

    @abstractmethod
    def get_resources(self) -> ResourcesModel:
        """수집 스냅샷 반환"""

    @abstractmethod
    def all_regions(self) -> list[str]:
        """프로바이더의 유효한 리전 이름 목록"""

    def to_json_string(self) -> str:
        return self.get_resources().to_json_string()

    def print_stats(self, console: Console | None = None) -> None:
        """리소스 타입별 개수를 테이블로 출력"""
        console = console or Console(stderr=True)
        table = Table(title=f"{self.provider} 수집 결과")
        table.add_column("Resource", style="cyan")
        table.add_column("Count", justify="right")
        for name, count in self.get_resources().counts().items():
            table.add_row(name, str(count))
        console.print(table)

    def fabricate(self, options: FabricateOptions) -> None:
        """합성 데이터 생성 (지원하지 않는 프로바이더는 ConfigurationError)"""
        raise ConfigurationError("fabricate", f"{self.provider} 프로바이더는 합성 데이터 생성을 지원하지 않습니다")
