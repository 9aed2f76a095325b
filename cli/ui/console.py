"""
cli/ui/console.py - Rich 콘솔 유틸리티

상태 메시지, 통계 테이블, 로그는 모두 stderr 콘솔로 출력합니다.
stdout은 JSON 결과 전용입니다.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# 외부 라이브러리 노이즈 로그 제한
NOISY_LOGGERS = (
    "botocore",
    "boto3",
    "urllib3",
    "ibm_cloud_sdk_core",
)


def get_console() -> Console:
    """stderr용 Rich Console 인스턴스를 생성하고 반환합니다."""
    return Console(stderr=True, soft_wrap=True, highlight=False)


# 전역 콘솔 인스턴스
console = get_console()


def setup_logging(level: str = "INFO") -> None:
    """RichHandler로 루트 로거를 설정합니다.

    Args:
        level: 로깅 레벨 이름 (DEBUG, INFO, WARNING, ...)
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


# =============================================================================
# 표준 출력 스타일
# =============================================================================

# 상태 심볼
SYMBOL_SUCCESS = "✓"
SYMBOL_ERROR = "✗"


def print_success(message: str) -> None:
    """성공 메시지 출력 (초록색 체크마크)"""
    console.print(f"[green]{SYMBOL_SUCCESS} {escape(message)}[/green]")


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X)"""
    console.print(f"[red]{SYMBOL_ERROR} {escape(message)}[/red]")
