"""
collector/ibm/collector.py - IBM Cloud 리소스 컨테이너

하나의 API 키로 서비스 핸들을 만들고 리전별 VPC 리소스, 글로벌 리소스,
태그 보강 순으로 수집합니다.

실행 단계:
    1. IBMCLOUD_API_KEY 확인 (없으면 MissingCredentialsError)
    2. 글로벌 서비스 핸들 생성 (실패 시 ServiceInitError, 수집 시작 전)
    3. 리소스 그룹 확인 (ID 또는 이름 -> ID)
    4. 리전별 수집 (알 수 없는 리전은 경고 후 건너뜀)
    5. 글로벌 수집 (Transit Gateway, IKS)
    6. 태그 보강

Usage:
    from collector.ibm import IBMResourcesContainer

    container = IBMResourcesContainer(regions=["us-south"], resource_group_id="my-group")
    container.collect_resources_from_api()
    print(container.to_json_string())
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ibm_cloud_networking_services import TransitGatewayApisV1
from ibm_cloud_sdk_core.authenticators import IAMAuthenticator
from ibm_platform_services import GlobalTaggingV1, ResourceManagerV2
from ibm_vpc import VpcV1

from collector.config import (
    ENV_IBM_API_KEY,
    GLOBAL_TAGGING_URL,
    TRANSIT_GATEWAY_URL,
    TRANSIT_GATEWAY_VERSION,
    Settings,
    get_settings,
    get_version,
)
from collector.exceptions import MissingCredentialsError, ServiceInitError
from collector.shared.container import FabricateOptions, ResourcesContainer
from collector.shared.paging import call_api
from collector.shared.retry import RetryConfig, with_retry

from . import services
from .fabricate import fabricate_resources
from .regions import all_regions, get_region
from .tags import TagsCollector
from .types import IBMResourcesModel

logger = logging.getLogger(__name__)

PROVIDER = "ibm"


@dataclass
class GlobalServices:
    """실행당 한 번 생성하는 글로벌 서비스 핸들"""

    tagging: Any
    resource_manager: Any
    transit: Any
    iks: Any


class IBMResourcesContainer(ResourcesContainer):
    """IBM Cloud 수집 컨테이너"""

    provider = PROVIDER

    def __init__(
        self,
        regions: list[str] | None = None,
        resource_group_id: str | None = None,
        settings: Settings | None = None,
        retry: RetryConfig | None = None,
    ):
        self.regions = list(regions) if regions else all_regions()
        self.resource_group_id = resource_group_id or None
        self.settings = settings
        self.retry = retry
        self.resources = IBMResourcesModel(collector_version=get_version(), provider=PROVIDER)

    def get_resources(self) -> IBMResourcesModel:
        return self.resources

    def all_regions(self) -> list[str]:
        return all_regions()

    # =========================================================================
    # 서비스 핸들 생성
    # =========================================================================

    def _create_authenticator(self, api_key: str) -> IAMAuthenticator:
        try:
            return IAMAuthenticator(api_key)
        except ValueError as e:
            raise ServiceInitError("iam_authenticator", e) from e

    def _create_global_services(self, authenticator: IAMAuthenticator, retry: RetryConfig) -> GlobalServices:
        try:
            tagging = GlobalTaggingV1(authenticator=authenticator)
            tagging.set_service_url(GLOBAL_TAGGING_URL)
        except Exception as e:
            raise ServiceInitError("global_tagging", e) from e

        try:
            resource_manager = ResourceManagerV2(authenticator=authenticator)
        except Exception as e:
            raise ServiceInitError("resource_manager", e) from e

        try:
            transit = TransitGatewayApisV1(version=TRANSIT_GATEWAY_VERSION, authenticator=authenticator)
            transit.set_service_url(TRANSIT_GATEWAY_URL)
        except Exception as e:
            raise ServiceInitError("transit_gateway", e) from e

        try:
            iks = services.KubernetesServiceApiV1(authenticator)
        except Exception as e:
            raise ServiceInitError("kubernetes_service", e) from e

        return GlobalServices(
            tagging=with_retry(tagging, retry),
            resource_manager=with_retry(resource_manager, retry),
            transit=with_retry(transit, retry),
            iks=with_retry(iks, retry),
        )

    def _create_vpc_service(self, authenticator: IAMAuthenticator, url: str, retry: RetryConfig) -> Any:
        try:
            vpc_service = VpcV1(authenticator=authenticator)
            vpc_service.set_service_url(url)
        except Exception as e:
            raise ServiceInitError("vpc", e) from e
        return with_retry(vpc_service, retry)

    # =========================================================================
    # 수집
    # =========================================================================

    def collect_resources_from_api(self) -> None:
        """IBM Cloud API에서 리소스 수집

        성공한 경우에만 스냅샷을 교체합니다. 실패하면 이전 스냅샷이 유지됩니다.

        Raises:
            MissingCredentialsError: API 키 없음
            ServiceInitError: 서비스 핸들 생성 실패
            ResourceGroupNotFoundError: 리소스 그룹 확인 실패
            APICallError: API 호출 실패
        """
        settings = self.settings or get_settings()
        if not settings.ibm_api_key:
            raise MissingCredentialsError(PROVIDER, ENV_IBM_API_KEY)
        retry = self.retry or RetryConfig(max_retries=settings.max_retries)

        authenticator = self._create_authenticator(settings.ibm_api_key)
        global_services = self._create_global_services(authenticator, retry)

        if self.resource_group_id:
            self.resource_group_id = call_api(
                "resolve_resource_group",
                services.resolve_resource_group,
                global_services.resource_manager,
                self.resource_group_id,
                resource_id=self.resource_group_id,
            )

        resources = IBMResourcesModel(collector_version=get_version(), provider=PROVIDER)
        for region in self.regions:
            self._collect_regional_resources(resources, region, authenticator, retry, settings.page_size)

        self._collect_global_resources(resources, global_services, settings.page_size)

        logger.info("태그 수집 중")
        TagsCollector(global_services.tagging).collect_tags(resources)

        self.resources = resources

    def _collect_regional_resources(
        self,
        resources: IBMResourcesModel,
        region_name: str,
        authenticator: IAMAuthenticator,
        retry: RetryConfig,
        page_size: int,
    ) -> None:
        region = get_region(region_name)
        if region is None:
            logger.warning(
                f"알 수 없는 리전 {region_name}, 건너뜀. "
                f"Available regions for provider {PROVIDER}: {', '.join(self.all_regions())}"
            )
            return

        vpc_service = self._create_vpc_service(authenticator, region.url, retry)
        logger.info(f"리전 {region_name} 리소스 수집 중")
        group = self.resource_group_id

        vpcs = services.collect_vpcs(vpc_service, region_name, group, page_size)
        resources.vpcs.extend(vpcs)
        if not vpcs:
            logger.info(f"리전 {region_name}: VPC 없음, 나머지 리소스 건너뜀")
            return

        resources.subnets.extend(services.collect_subnets(vpc_service, group, page_size))
        resources.public_gateways.extend(services.collect_public_gateways(vpc_service, group, page_size))
        resources.floating_ips.extend(services.collect_floating_ips(vpc_service, group, page_size))
        resources.network_acls.extend(services.collect_network_acls(vpc_service, group, page_size))
        resources.security_groups.extend(services.collect_security_groups(vpc_service, group, page_size))
        resources.endpoint_gateways.extend(services.collect_endpoint_gateways(vpc_service, group, page_size))
        resources.instances.extend(services.collect_instances(vpc_service, group, page_size))
        resources.virtual_nis.extend(services.collect_virtual_nis(vpc_service, group, page_size))
        resources.routing_tables.extend(services.collect_routing_tables(vpc_service, vpcs, page_size))
        resources.load_balancers.extend(services.collect_load_balancers(vpc_service, group, page_size))

    def _collect_global_resources(
        self,
        resources: IBMResourcesModel,
        global_services: GlobalServices,
        page_size: int,
    ) -> None:
        logger.info("글로벌 리소스 수집 중")
        group = self.resource_group_id

        resources.transit_gateways = services.collect_transit_gateways(global_services.transit, group, page_size)
        resources.transit_connections = services.collect_transit_connections(
            global_services.transit, resources.transit_gateways, page_size
        )
        resources.iks_clusters = services.collect_clusters(global_services.iks, group)

    # =========================================================================
    # 합성 데이터
    # =========================================================================

    def fabricate(self, options: FabricateOptions) -> None:
        resources = IBMResourcesModel(collector_version=get_version(), provider=PROVIDER)
        fabricate_resources(resources, options)
        self.resources = resources
