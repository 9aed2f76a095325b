"""
collector/ibm - IBM Cloud 프로바이더

VPC 리전 리소스, Transit Gateway, IKS 클러스터를 수집하고
Global Tagging으로 태그를 보강합니다.
"""

from .collector import IBMResourcesContainer
from .regions import all_regions
from .types import IBMResourcesModel

__all__ = ["IBMResourcesContainer", "IBMResourcesModel", "all_regions"]
