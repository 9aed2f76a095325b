"""
tests/conftest.py - pytest 공통 픽스처

SDK 핸들 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(api_response, paged):
        vpc_service = MagicMock()
        vpc_service.list_vpcs.side_effect = paged("vpcs", [[vpc1], [vpc2]])
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import boto3
import pytest
from moto import mock_aws

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from collector.config import Settings  # noqa: E402

DATA_DIR = Path(__file__).parent / "data"


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정 (실제 자격 증명과 환경 변수 차단)"""
    for name in (
        "IBMCLOUD_API_KEY",
        "COLLECTOR_PAGE_SIZE",
        "COLLECTOR_MAX_RETRIES",
        "COLLECTOR_LOG_LEVEL",
        "COLLECTOR_LANG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    yield


@pytest.fixture
def settings():
    """API 키가 설정된 테스트 설정"""
    return Settings(ibm_api_key="test-api-key")


@pytest.fixture
def data_dir():
    return DATA_DIR


# =============================================================================
# IBM SDK 응답 헬퍼
# =============================================================================


def make_response(result):
    """DetailedResponse 모킹 (get_result()만 사용)"""
    response = MagicMock()
    response.get_result.return_value = result
    return response


@pytest.fixture
def api_response():
    """DetailedResponse 모킹 팩토리"""
    return make_response


@pytest.fixture
def paged():
    """페이지 응답 시퀀스 팩토리

    paged("vpcs", [[a, b], [c]]) -> 두 페이지 응답 리스트 (첫 페이지에 next.start)
    """

    def _paged(key, pages):
        responses = []
        for i, items in enumerate(pages):
            page = {key: items}
            if i < len(pages) - 1:
                page["next"] = {"start": f"cursor-{i + 1}"}
            responses.append(make_response(page))
        return responses

    return _paged


# =============================================================================
# 샘플 레코드
# =============================================================================


def ibm_item(kind, index, **extra):
    """IBM 네이티브 항목 (id, crn, name 포함)"""
    item_id = f"{kind}-{index}"
    item = {
        "id": item_id,
        "crn": f"crn:v1:bluemix:public:is:us-south:a/123::{kind}:{item_id}",
        "name": f"{kind}-name-{index}",
        "href": f"https://us-south.iaas.cloud.ibm.com/v1/{kind}s/{item_id}",
    }
    item.update(extra)
    return item


@pytest.fixture
def make_ibm_item():
    return ibm_item


# =============================================================================
# moto 통합
# =============================================================================


@pytest.fixture
def moto_ec2():
    """moto로 모킹한 ap-northeast-2 EC2 (VPC 1개, 서브넷 1개 생성)"""
    with mock_aws():
        ec2 = boto3.client("ec2", region_name="ap-northeast-2")

        vpc_id = ec2.create_vpc(CidrBlock="10.0.0.0/16")["Vpc"]["VpcId"]
        subnet_id = ec2.create_subnet(VpcId=vpc_id, CidrBlock="10.0.1.0/24")["Subnet"]["SubnetId"]

        yield ec2, vpc_id, subnet_id
