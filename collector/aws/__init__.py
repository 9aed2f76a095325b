"""
collector/aws - AWS 프로바이더

EC2 네트워크 리소스(VPC, 서브넷, 게이트웨이, ACL, 보안 그룹, 인스턴스, 라우트 테이블)를 수집합니다.
"""

from .collector import AWSResourcesContainer
from .regions import all_regions
from .types import AWSResourcesModel

__all__ = ["AWSResourcesContainer", "AWSResourcesModel", "all_regions"]
