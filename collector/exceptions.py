"""
collector/exceptions.py - 수집기 예외 계층 구조

수집 실행 중 발생하는 모든 치명적 오류를 정의합니다.
CLI는 CollectorError만 잡아서 메시지를 출력하고 종료 코드 1로 끝냅니다.

예외 계층 구조:
    CollectorError (베이스)
    ├── ConfigurationError (설정 관련, 재시도 안함)
    │   ├── MissingCredentialsError
    │   ├── UnsupportedProviderError
    │   ├── ResourceGroupNotFoundError
    │   └── ServiceInitError
    └── APICallError (클라우드 API 호출 실패)
        ├── PagingError
        └── TaggingError

Usage:
    from collector.exceptions import APICallError

    try:
        result = vpc_service.list_subnet_reserved_ips(subnet_id).get_result()
    except ApiException as e:
        raise APICallError.from_exception(
            "list_subnet_reserved_ips", e, resource_id=subnet_id
        ) from e
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# 베이스 예외
# =============================================================================


class CollectorError(Exception):
    """수집기 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigurationError(CollectorError):
    """설정 관련 예외 (자격 증명, 프로바이더, 리소스 그룹, 플래그 조합)"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Exception | None = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


class MissingCredentialsError(ConfigurationError):
    """API 키 또는 자격 증명을 찾을 수 없음"""

    def __init__(self, provider: str, source: str, cause: Exception | None = None):
        super().__init__(
            source,
            f"{provider} 자격 증명이 없습니다 ({source} 확인 필요)",
            cause,
        )
        self.provider = provider
        self.details["provider"] = provider


class UnsupportedProviderError(ConfigurationError):
    """지원하지 않는 프로바이더"""

    def __init__(self, provider: str, supported: list[str] | None = None):
        message = f"지원하지 않는 프로바이더: {provider}"
        if supported:
            message = f"{message} (지원: {', '.join(supported)})"
        super().__init__("provider", message)
        self.provider = provider


class ResourceGroupNotFoundError(ConfigurationError):
    """리소스 그룹을 ID 또는 이름으로 하나로 확정하지 못함"""

    def __init__(self, resource_group: str, matches: int, cause: Exception | None = None):
        if matches == 0:
            reason = "ID나 이름이 일치하는 리소스 그룹이 없습니다"
        else:
            reason = f"이름이 일치하는 리소스 그룹이 {matches}개입니다"
        super().__init__("resource_group", f"{resource_group}: {reason}", cause)
        self.resource_group = resource_group
        self.matches = matches
        self.details.update({"resource_group": resource_group, "matches": matches})


class ServiceInitError(ConfigurationError):
    """서비스 핸들 생성 실패"""

    def __init__(self, service: str, cause: Exception | None = None):
        super().__init__(service, "서비스 클라이언트를 생성할 수 없습니다", cause)
        self.service = service


# =============================================================================
# API 호출 관련 예외
# =============================================================================


class APICallError(CollectorError):
    """클라우드 API 호출 관련 예외

    IBM SDK의 ApiException, botocore의 ClientError를 래핑하여
    실패한 작업과 대상 식별자를 함께 남깁니다.
    """

    def __init__(
        self,
        operation: str,
        resource_id: str | None = None,
        error_code: str | None = None,
        error_message: str | None = None,
        cause: Exception | None = None,
    ):
        message = f"{operation} 실패"
        if resource_id:
            message = f"{message} [{resource_id}]"
        if error_code:
            message = f"{message} ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.operation = operation
        self.resource_id = resource_id
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "operation": operation,
                "resource_id": resource_id,
                "error_code": error_code,
            }
        )

    @classmethod
    def from_exception(
        cls,
        operation: str,
        error: Exception,
        resource_id: str | None = None,
    ) -> APICallError:
        """SDK 예외로부터 생성

        Args:
            operation: API 작업 이름
            error: ApiException, ClientError 등 원인 예외
            resource_id: 실패한 리소스의 ID 또는 이름

        Returns:
            APICallError (또는 하위 클래스) 인스턴스
        """
        return cls(
            operation=operation,
            resource_id=resource_id,
            error_code=get_error_code(error),
            cause=error,
        )


class PagingError(APICallError):
    """페이지 조회 중 오류 (목록 API 실패 또는 커서 오류)"""


class TaggingError(APICallError):
    """태그 조회 실패"""


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================


def get_error_code(error: Exception) -> str | None:
    """예외에서 오류 코드 추출

    botocore ClientError는 응답의 Error.Code를, IBM ApiException은
    HTTP 상태 코드를 문자열로 반환합니다.

    Args:
        error: 확인할 예외

    Returns:
        오류 코드 또는 None
    """
    if isinstance(error, APICallError):
        return error.error_code

    response = getattr(error, "response", None)
    if isinstance(response, dict):
        code = response.get("Error", {}).get("Code")
        if code:
            return str(code)

    status = getattr(error, "status_code", None) or getattr(error, "code", None)
    if isinstance(status, int):
        return str(status)

    return None
