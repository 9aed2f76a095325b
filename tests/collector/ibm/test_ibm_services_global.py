"""
tests/collector/ibm/test_ibm_services_global.py - IBM 글로벌 리소스 수집 테스트

Transit Gateway 필터, IKS 워커 풀 응답 정규화, 리소스 그룹 확인을 검증합니다.
"""

import logging
import warnings
from unittest.mock import MagicMock

import pytest
from ibm_cloud_sdk_core import ApiException

from collector.exceptions import APICallError, ResourceGroupNotFoundError
from collector.ibm.services.iks import collect_clusters, parse_worker_pools
from collector.ibm.services.resource_manager import resolve_resource_group
from collector.ibm.services.transit import collect_transit_connections, collect_transit_gateways
from collector.ibm.types import TransitGateway

# =============================================================================
# Transit Gateway
# =============================================================================


class TestTransitGateways:
    """collect_transit_gateways 함수 테스트"""

    def test_filter_by_resource_group(self, paged, make_ibm_item):
        tgw_service = MagicMock()
        tgw_service.list_transit_gateways.side_effect = paged(
            "transit_gateways",
            [
                [make_ibm_item("tgw", 1, resource_group={"id": "rg-a"})],
                [make_ibm_item("tgw", 2, resource_group={"id": "rg-b"})],
            ],
        )

        result = collect_transit_gateways(tgw_service, resource_group_id_filter="rg-b")

        assert [gw.id for gw in result] == ["tgw-2"]
        assert tgw_service.list_transit_gateways.call_count == 2

    def test_no_filter(self, paged, make_ibm_item):
        tgw_service = MagicMock()
        tgw_service.list_transit_gateways.side_effect = paged("transit_gateways", [[make_ibm_item("tgw", 1)]])

        assert len(collect_transit_gateways(tgw_service)) == 1


class TestTransitConnections:
    """collect_transit_connections 함수 테스트"""

    def test_only_connections_of_collected_gateways(self, paged):
        gateways = [TransitGateway(native={"id": "tgw-1"})]
        tgw_service = MagicMock()
        tgw_service.list_connections.side_effect = paged(
            "connections",
            [
                [{"id": "conn-1", "transit_gateway": {"id": "tgw-1"}}],
                [
                    {"id": "conn-2", "transit_gateway": {"id": "tgw-9"}},
                    {"id": "conn-3", "transit_gateway": {"id": "tgw-1"}},
                ],
            ],
        )

        result = collect_transit_connections(tgw_service, gateways)

        assert [c.id for c in result] == ["conn-1", "conn-3"]

    def test_no_gateways(self, paged):
        tgw_service = MagicMock()
        connections = [{"id": "conn-1", "transit_gateway": {"id": "x"}}]
        tgw_service.list_connections.side_effect = paged("connections", [connections])

        assert collect_transit_connections(tgw_service, []) == []


# =============================================================================
# IKS
# =============================================================================


class TestParseWorkerPools:
    """getWorkerPools 응답 정규화 테스트"""

    def test_list(self):
        assert parse_worker_pools([{"id": "pool-1"}], "c-1") == [{"id": "pool-1"}]

    def test_single_object(self):
        assert parse_worker_pools({"id": "pool-1"}, "c-1") == [{"id": "pool-1"}]

    def test_raw_text_body(self):
        response = MagicMock()
        response.text = '[{"id": "pool-1"}, {"id": "pool-2"}]'

        assert [p["id"] for p in parse_worker_pools(response, "c-1")] == ["pool-1", "pool-2"]

    def test_bytes_object_body(self):
        assert parse_worker_pools(b'{"id": "pool-1"}', "c-1") == [{"id": "pool-1"}]

    def test_invalid_body(self):
        with pytest.raises(APICallError) as exc_info:
            parse_worker_pools("<html>error</html>", "c-1")

        assert exc_info.value.resource_id == "c-1"

    def test_unexpected_shape(self):
        with pytest.raises(APICallError):
            parse_worker_pools(42, "c-1")


class TestCollectClusters:
    """collect_clusters 함수 테스트"""

    def test_workers_and_pools(self, api_response):
        iks_service = MagicMock()
        iks_service.vpc_get_clusters.return_value = api_response([{"id": "c-1", "name": "k8s"}])
        iks_service.vpc_get_workers.return_value = api_response([{"id": "w-1"}, {"id": "w-2"}])
        iks_service.vpc_get_worker_pools.return_value = api_response({"id": "pool-1"})

        clusters = collect_clusters(iks_service, resource_group_id="rg-1")

        assert len(clusters[0].worker_nodes) == 2
        assert clusters[0].worker_pools == [{"id": "pool-1"}]
        iks_service.vpc_get_clusters.assert_called_once_with(x_auth_resource_group="rg-1")
        iks_service.vpc_get_workers.assert_called_once_with(cluster="c-1")

    def test_no_clusters(self, api_response):
        iks_service = MagicMock()
        iks_service.vpc_get_clusters.return_value = api_response(None)

        assert collect_clusters(iks_service) == []
        iks_service.vpc_get_workers.assert_not_called()

    def test_workers_failure(self, api_response):
        iks_service = MagicMock()
        iks_service.vpc_get_clusters.return_value = api_response([{"id": "c-1"}])
        iks_service.vpc_get_workers.side_effect = ApiException(500, message="internal")

        with pytest.raises(APICallError) as exc_info:
            collect_clusters(iks_service)

        assert exc_info.value.operation == "getWorkers"
        assert exc_info.value.resource_id == "c-1"


# =============================================================================
# 리소스 그룹
# =============================================================================


class TestResolveResourceGroup:
    """resolve_resource_group 함수 테스트"""

    def test_value_is_id(self, api_response):
        rm_service = MagicMock()
        rm_service.get_resource_group.return_value = api_response({"id": "abc123", "name": "prod"})

        assert resolve_resource_group(rm_service, "abc123") == "abc123"
        rm_service.list_resource_groups.assert_not_called()

    def test_value_is_name(self, api_response):
        rm_service = MagicMock()
        rm_service.get_resource_group.side_effect = ApiException(404, message="not found")
        rm_service.list_resource_groups.return_value = api_response({"resources": [{"id": "abc123", "name": "prod"}]})

        assert resolve_resource_group(rm_service, "prod") == "abc123"
        rm_service.list_resource_groups.assert_called_once_with(name="prod")

    def test_id_lookup_failure_logs_status(self, api_response, caplog):
        """ID 조회 실패 로그는 status_code 기준 (deprecated 경고 없음)"""
        rm_service = MagicMock()
        rm_service.get_resource_group.side_effect = ApiException(404, message="not found")
        rm_service.list_resource_groups.return_value = api_response({"resources": [{"id": "abc123", "name": "prod"}]})

        with warnings.catch_warnings(), caplog.at_level(logging.DEBUG):
            warnings.simplefilter("error")

            assert resolve_resource_group(rm_service, "prod") == "abc123"

        assert "(404)" in caplog.text

    def test_no_match(self, api_response):
        rm_service = MagicMock()
        rm_service.get_resource_group.side_effect = ApiException(404, message="not found")
        rm_service.list_resource_groups.return_value = api_response({"resources": []})

        with pytest.raises(ResourceGroupNotFoundError) as exc_info:
            resolve_resource_group(rm_service, "missing")

        assert exc_info.value.matches == 0

    def test_ambiguous_name(self, api_response):
        rm_service = MagicMock()
        rm_service.get_resource_group.side_effect = ApiException(404, message="not found")
        rm_service.list_resource_groups.return_value = api_response(
            {"resources": [{"id": "a", "name": "dup"}, {"id": "b", "name": "dup"}]}
        )

        with pytest.raises(ResourceGroupNotFoundError) as exc_info:
            resolve_resource_group(rm_service, "dup")

        assert exc_info.value.matches == 2

    def test_list_failure(self):
        rm_service = MagicMock()
        rm_service.get_resource_group.side_effect = ApiException(404, message="not found")
        rm_service.list_resource_groups.side_effect = ApiException(403, message="forbidden")

        with pytest.raises(ResourceGroupNotFoundError):
            resolve_resource_group(rm_service, "prod")
