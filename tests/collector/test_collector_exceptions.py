"""
tests/collector/test_collector_exceptions.py - 예외 계층 구조 테스트
"""

import warnings

import pytest
from botocore.exceptions import ClientError
from ibm_cloud_sdk_core import ApiException

from collector.exceptions import (
    APICallError,
    CollectorError,
    ConfigurationError,
    MissingCredentialsError,
    PagingError,
    ResourceGroupNotFoundError,
    ServiceInitError,
    TaggingError,
    UnsupportedProviderError,
    get_error_code,
)


class TestHierarchy:
    """예외 상속 관계 테스트"""

    @pytest.mark.parametrize(
        "error",
        [
            MissingCredentialsError("ibm", "IBMCLOUD_API_KEY"),
            UnsupportedProviderError("gcp"),
            ResourceGroupNotFoundError("rg", 0),
            ServiceInitError("vpc"),
        ],
    )
    def test_configuration_errors(self, error):
        assert isinstance(error, ConfigurationError)
        assert isinstance(error, CollectorError)

    def test_api_errors(self):
        assert issubclass(PagingError, APICallError)
        assert issubclass(TaggingError, APICallError)
        assert issubclass(APICallError, CollectorError)


class TestMessages:
    """예외 메시지 테스트"""

    def test_configuration_message(self):
        error = ConfigurationError("page_size", "양수여야 합니다")

        assert str(error) == "설정 오류 [page_size]: 양수여야 합니다"
        assert error.details["config_key"] == "page_size"

    def test_cause_appended(self):
        error = ServiceInitError("vpc", ValueError("bad url"))

        assert str(error).endswith(": bad url")

    def test_unsupported_provider_lists_supported(self):
        error = UnsupportedProviderError("gcp", ["ibm", "aws"])

        assert "gcp" in str(error)
        assert "ibm, aws" in str(error)

    def test_resource_group_matches(self):
        assert "없습니다" in str(ResourceGroupNotFoundError("rg", 0))
        assert "2개" in str(ResourceGroupNotFoundError("rg", 2))

    def test_api_call_message(self):
        error = APICallError("list_subnet_reserved_ips", resource_id="subnet-1", error_code="500", error_message="boom")

        assert str(error) == "list_subnet_reserved_ips 실패 [subnet-1] (500): boom"

    def test_to_dict(self):
        error = APICallError("list_vpcs", error_code="403")

        data = error.to_dict()

        assert data["error_type"] == "APICallError"
        assert data["details"]["operation"] == "list_vpcs"
        assert data["cause"] is None


class TestFromException:
    """APICallError.from_exception 테스트"""

    def test_ibm_api_exception(self):
        cause = ApiException(404, message="not found")

        error = PagingError.from_exception("list_vpcs", cause, resource_id="vpc-1")

        assert isinstance(error, PagingError)
        assert error.error_code == "404"
        assert error.cause is cause

    def test_client_error(self):
        cause = ClientError({"Error": {"Code": "AccessDenied", "Message": "no"}}, "DescribeVpcs")

        assert APICallError.from_exception("DescribeVpcs", cause).error_code == "AccessDenied"


class TestGetErrorCode:
    """get_error_code 함수 테스트"""

    def test_plain_exception(self):
        assert get_error_code(ValueError("x")) is None

    def test_nested_api_call_error(self):
        assert get_error_code(APICallError("op", error_code="429")) == "429"

    def test_ibm_status_code(self):
        """ApiException은 deprecated code 속성 대신 status_code 사용"""
        error = ApiException(503, message="unavailable")

        with warnings.catch_warnings():
            warnings.simplefilter("error")

            assert get_error_code(error) == "503"
