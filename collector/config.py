"""
collector/config.py - 중앙 설정 관리

환경 변수 기반 실행 설정과 고정 엔드포인트를 제공합니다.

Usage:
    from collector.config import get_settings, get_version

    settings = get_settings()
    api_key = settings.ibm_api_key
    version = get_version()  # "0.6.0"
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

# 환경 변수 이름
ENV_IBM_API_KEY = "IBMCLOUD_API_KEY"
ENV_PAGE_SIZE = "COLLECTOR_PAGE_SIZE"
ENV_MAX_RETRIES = "COLLECTOR_MAX_RETRIES"
ENV_LOG_LEVEL = "COLLECTOR_LOG_LEVEL"
ENV_LANG = "COLLECTOR_LANG"

DEFAULT_PAGE_SIZE = 50
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LANG = "ko"

# IBM Cloud 글로벌 엔드포인트
GLOBAL_TAGGING_URL = "https://tags.global-search-tagging.cloud.ibm.com"
TRANSIT_GATEWAY_URL = "https://transit.cloud.ibm.com/v1"
TRANSIT_GATEWAY_VERSION = "2021-12-30"
IKS_URL = "https://containers.cloud.ibm.com/global"

_VERSION_FILE = Path(__file__).parent / "version.txt"


@lru_cache(maxsize=1)
def get_version() -> str:
    """version.txt에서 버전 문자열을 읽어 반환합니다."""
    try:
        return _VERSION_FILE.read_text(encoding="utf-8").strip()
    except OSError:
        return "0.0.0"


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """실행 설정

    Attributes:
        ibm_api_key: IBM Cloud API 키 (없으면 빈 문자열)
        page_size: 페이지 조회 시 한 번에 요청할 항목 수
        max_retries: 일시적 API 오류 재시도 횟수 (0이면 재시도 안함)
        log_level: 로깅 레벨 이름
        lang: CLI 메시지 언어 (ko, en)
    """

    ibm_api_key: str = ""
    page_size: int = DEFAULT_PAGE_SIZE
    max_retries: int = 0
    log_level: str = DEFAULT_LOG_LEVEL
    lang: str = DEFAULT_LANG

    @classmethod
    def from_env(cls) -> Settings:
        """환경 변수에서 설정을 로드합니다."""
        page_size = _int_env(ENV_PAGE_SIZE, DEFAULT_PAGE_SIZE)
        return cls(
            ibm_api_key=os.environ.get(ENV_IBM_API_KEY, ""),
            page_size=page_size if page_size > 0 else DEFAULT_PAGE_SIZE,
            max_retries=max(_int_env(ENV_MAX_RETRIES, 0), 0),
            log_level=os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper(),
            lang=os.environ.get(ENV_LANG, DEFAULT_LANG),
        )


def get_settings() -> Settings:
    """현재 환경 기준 설정을 반환합니다.

    API 키는 실행 시점에 읽어야 하므로 캐시하지 않습니다.
    """
    return Settings.from_env()
