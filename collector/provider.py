"""
collector/provider.py - 지원 클라우드 프로바이더
"""

from __future__ import annotations

from enum import Enum

from collector.exceptions import UnsupportedProviderError


class Provider(str, Enum):
    """지원 프로바이더"""

    IBM = "ibm"
    AWS = "aws"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> Provider:
        """대소문자 구분 없이 프로바이더 이름 해석

        Raises:
            UnsupportedProviderError: 지원하지 않는 이름
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise UnsupportedProviderError(value, ALL_PROVIDERS) from None


ALL_PROVIDERS: list[str] = [p.value for p in Provider]
