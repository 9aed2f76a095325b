"""
collector/ibm/services/iks.py - IKS (IBM Kubernetes Service) 클러스터 수집 (글로벌)

IKS API는 Python SDK가 없으므로 ibm_cloud_sdk_core.BaseService 위에
필요한 세 개의 v2 엔드포인트만 구현합니다.

알려진 API 결함:
    getWorkerPools가 배열 대신 다른 형태(단일 객체, JSON이 아닌 content-type)로
    응답하는 경우가 있어, 응답 본문을 직접 다시 해석합니다 (임시 우회).
"""

from __future__ import annotations

import json
import logging
from typing import Any

from ibm_cloud_sdk_core import BaseService, DetailedResponse

from collector.config import IKS_URL
from collector.exceptions import APICallError
from collector.shared.paging import call_api

from ..types import IKSCluster

logger = logging.getLogger(__name__)

IKS_PROVIDER = "vpc-gen2"


class KubernetesServiceApiV1(BaseService):
    """IKS v2 VPC API 클라이언트 (읽기 전용 부분만)"""

    DEFAULT_SERVICE_URL = IKS_URL
    DEFAULT_SERVICE_NAME = "kubernetes_service_api"

    def __init__(self, authenticator: Any, service_url: str = IKS_URL) -> None:
        BaseService.__init__(self, service_url=service_url, authenticator=authenticator)

    def _get(self, path: str, params: dict[str, Any], headers: dict[str, str] | None = None) -> DetailedResponse:
        request_headers = {"Accept": "application/json"}
        if headers:
            request_headers.update(headers)
        request = self.prepare_request(method="GET", url=path, headers=request_headers, params=params)
        return self.send(request)

    def vpc_get_clusters(self, x_auth_resource_group: str | None = None) -> DetailedResponse:
        """VPC 클러스터 목록 (리소스 그룹은 X-Auth-Resource-Group 헤더로 전달)"""
        headers = {"X-Auth-Resource-Group": x_auth_resource_group} if x_auth_resource_group else None
        return self._get("/v2/vpc/getClusters", {"provider": IKS_PROVIDER}, headers)

    def vpc_get_workers(self, cluster: str) -> DetailedResponse:
        return self._get("/v2/vpc/getWorkers", {"cluster": cluster})

    def vpc_get_worker_pools(self, cluster: str) -> DetailedResponse:
        return self._get("/v2/vpc/getWorkerPools", {"cluster": cluster})


def parse_worker_pools(result: Any, cluster_id: str) -> list[dict[str, Any]]:
    """getWorkerPools 응답을 리스트로 정규화

    배열이 아니면 원본 본문을 다시 해석하고, 단일 객체는 한 개짜리 리스트로 감쌉니다.

    Raises:
        APICallError: 해석할 수 없는 응답
    """
    if isinstance(result, list):
        return result

    logger.debug(f"getWorkerPools 응답이 배열이 아님 ({type(result).__name__}), 본문 재해석: {cluster_id}")
    body = result
    if hasattr(body, "text"):
        # JSON이 아닌 content-type이면 SDK가 requests.Response를 그대로 돌려줌
        body = body.text
    if isinstance(body, (str, bytes)):
        try:
            body = json.loads(body)
        except ValueError as e:
            raise APICallError(
                "getWorkerPools",
                resource_id=cluster_id,
                error_message="응답 본문을 JSON으로 해석할 수 없습니다",
                cause=e,
            ) from e

    if isinstance(body, list):
        return body
    if isinstance(body, dict):
        return [body]
    raise APICallError(
        "getWorkerPools",
        resource_id=cluster_id,
        error_message=f"예상하지 못한 응답 형태: {type(body).__name__}",
    )


def collect_clusters(iks_service: Any, resource_group_id: str | None = None) -> list[IKSCluster]:
    """IKS 클러스터 수집 (워커 노드, 워커 풀 포함)

    Args:
        iks_service: KubernetesServiceApiV1 핸들
        resource_group_id: 리소스 그룹 필터 (None이면 전체)

    Returns:
        IKSCluster 레코드 리스트
    """
    response = call_api(
        "getClusters",
        iks_service.vpc_get_clusters,
        x_auth_resource_group=resource_group_id,
        resource_id=resource_group_id,
    )
    clusters = response.get_result() or []
    result = []
    for cluster in clusters:
        cluster_id = cluster["id"]
        workers = call_api("getWorkers", iks_service.vpc_get_workers, cluster=cluster_id, resource_id=cluster_id)
        pools = call_api("getWorkerPools", iks_service.vpc_get_worker_pools, cluster=cluster_id, resource_id=cluster_id)
        result.append(
            IKSCluster(
                native=cluster,
                worker_nodes=workers.get_result() or [],
                worker_pools=parse_worker_pools(pools.get_result(), cluster_id),
            )
        )
    return result
