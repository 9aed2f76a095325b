"""
cli/i18n/messages/cli_commands.py - CLI Command Messages

Contains translations for Click CLI commands, help text, and error messages.
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # CLI Help Text
    # =========================================================================
    "help_intro": {
        "ko": "클라우드 네트워크 리소스를 수집하여 하나의 JSON 문서로 출력합니다.",
        "en": "Collects cloud network resources and emits them as a single JSON document.",
    },
    "provider_help": {
        "ko": "클라우드 프로바이더",
        "en": "Cloud provider",
    },
    "out_help": {
        "ko": "출력 파일 경로 (생략 시 표준 출력)",
        "en": "Output file path (stdout when omitted)",
    },
    "lang_help": {
        "ko": "UI 언어 설정 / UI language (ko: 한국어, en: English)",
        "en": "UI language (ko: Korean, en: English)",
    },
    # =========================================================================
    # Commands
    # =========================================================================
    "collect_help": {
        "ko": "프로바이더 API에서 리소스 수집",
        "en": "Collect resources from the provider API",
    },
    "region_help": {
        "ko": "수집할 리전 (다중 가능, 생략 시 전체)",
        "en": "Region to collect from (repeatable, all when omitted)",
    },
    "resource_group_help": {
        "ko": "리소스 그룹 ID 또는 이름 (ibm 전용)",
        "en": "Resource group ID or name (ibm only)",
    },
    "max_retries_help": {
        "ko": "일시적 API 오류 재시도 횟수 (기본: 0, 재시도 안함)",
        "en": "Retries for transient API errors (default: 0, no retry)",
    },
    "get_regions_help": {
        "ko": "프로바이더의 유효한 리전 목록 출력",
        "en": "List the provider's valid regions",
    },
    "fabricate_help": {
        "ko": "테스트용 합성 데이터 생성",
        "en": "Generate synthetic data for testing",
    },
    "num_vpcs_help": {
        "ko": "생성할 VPC 수",
        "en": "Number of VPCs to generate",
    },
    "subnets_per_vpc_help": {
        "ko": "VPC당 서브넷 수",
        "en": "Number of subnets per VPC",
    },
    "seed_help": {
        "ko": "난수 시드 (재현 가능한 출력)",
        "en": "Random seed (reproducible output)",
    },
    # =========================================================================
    # Status / Errors
    # =========================================================================
    "collecting": {
        "ko": "{provider} 리소스 수집 시작 (리전: {regions})",
        "en": "Collecting {provider} resources (regions: {regions})",
    },
    "collect_done": {
        "ko": "수집 완료",
        "en": "Collection complete",
    },
    "collect_failed": {
        "ko": "수집 실패: {error}",
        "en": "Collection failed: {error}",
    },
    "fabricate_done": {
        "ko": "합성 데이터 생성 완료",
        "en": "Synthetic data generated",
    },
    "fabricate_failed": {
        "ko": "합성 데이터 생성 실패: {error}",
        "en": "Fabrication failed: {error}",
    },
    "resource_group_unsupported": {
        "ko": "리소스 그룹 필터는 ibm 프로바이더에서만 지원됩니다 (요청: {provider})",
        "en": "Resource group filtering is only supported for provider ibm (got: {provider})",
    },
    "unsupported_provider": {
        "ko": "지원하지 않는 프로바이더: {provider}",
        "en": "Unsupported provider: {provider}",
    },
    "output_written": {
        "ko": "결과 저장: {path}",
        "en": "Output written to {path}",
    },
    "output_failed": {
        "ko": "출력 파일 쓰기 실패: {error}",
        "en": "Failed to write output: {error}",
    },
    "regions_list": {
        "ko": "Available regions for provider {provider}: {regions}",
        "en": "Available regions for provider {provider}: {regions}",
    },
}
