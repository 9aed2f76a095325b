# cli/ui - 콘솔 출력 (rich)
"""
콘솔 출력 모듈

상태 메시지와 로그를 stderr Rich 콘솔로 출력합니다.
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_SUCCESS,
    console,
    get_console,
    print_error,
    print_success,
    setup_logging,
)

__all__ = [
    "console",
    "get_console",
    "setup_logging",
    "print_success",
    "print_error",
    "SYMBOL_SUCCESS",
    "SYMBOL_ERROR",
]
