"""
collector/aws/collector.py - AWS 리소스 컨테이너

boto3 기본 자격 증명 체인을 사용하여 리전별 EC2 네트워크 리소스를 수집합니다.
글로벌 리소스와 태그 보강 단계는 없습니다 (태그는 응답에 포함).

Usage:
    from collector.aws import AWSResourcesContainer

    container = AWSResourcesContainer(regions=["us-east-1"])
    container.collect_resources_from_api()
"""

from __future__ import annotations

import logging

import boto3
from botocore.exceptions import BotoCoreError

from collector.config import Settings, get_settings, get_version
from collector.exceptions import MissingCredentialsError, ServiceInitError
from collector.shared.container import ResourcesContainer
from collector.shared.retry import RetryConfig

from . import services
from .client import get_client
from .regions import all_regions, is_known_region
from .types import AWSResourcesModel

logger = logging.getLogger(__name__)

PROVIDER = "aws"
CREDENTIALS_SOURCE = "AWS credentials chain"


class AWSResourcesContainer(ResourcesContainer):
    """AWS 수집 컨테이너"""

    provider = PROVIDER

    def __init__(
        self,
        regions: list[str] | None = None,
        settings: Settings | None = None,
        retry: RetryConfig | None = None,
    ):
        self.regions = list(regions) if regions else all_regions()
        self.settings = settings
        self.retry = retry
        self.resources = AWSResourcesModel(collector_version=get_version(), provider=PROVIDER)

    def get_resources(self) -> AWSResourcesModel:
        return self.resources

    def all_regions(self) -> list[str]:
        return all_regions()

    def _create_session(self) -> boto3.Session:
        try:
            session = boto3.Session()
            credentials = session.get_credentials()
        except BotoCoreError as e:
            raise ServiceInitError("boto3_session", e) from e
        if credentials is None:
            raise MissingCredentialsError(PROVIDER, CREDENTIALS_SOURCE)
        return session

    def collect_resources_from_api(self) -> None:
        """AWS API에서 리소스 수집

        Raises:
            MissingCredentialsError: 자격 증명 없음
            APICallError: API 호출 실패
        """
        settings = self.settings or get_settings()
        retry = self.retry or RetryConfig(max_retries=settings.max_retries)
        session = self._create_session()

        resources = AWSResourcesModel(collector_version=get_version(), provider=PROVIDER)
        for region in self.regions:
            if not is_known_region(region):
                logger.warning(
                    f"알 수 없는 리전 {region}, 건너뜀. "
                    f"Available regions for provider {PROVIDER}: {', '.join(self.all_regions())}"
                )
                continue

            logger.info(f"리전 {region} 리소스 수집 중")
            ec2 = get_client(session, "ec2", region_name=region, retry=retry)
            page_size = settings.page_size

            resources.vpcs.extend(services.collect_vpcs(ec2, region, page_size))
            resources.internet_gateways.extend(services.collect_internet_gateways(ec2, page_size))
            resources.subnets.extend(services.collect_subnets(ec2, page_size))
            resources.network_acls.extend(services.collect_network_acls(ec2, page_size))
            resources.security_groups.extend(services.collect_security_groups(ec2, page_size))
            resources.instances.extend(services.collect_instances(ec2, page_size))
            resources.route_tables.extend(services.collect_route_tables(ec2, page_size))

        self.resources = resources
