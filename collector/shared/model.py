"""
collector/shared/model.py - 정규 데이터 모델 기반 클래스

모든 수집 레코드는 프로바이더 네이티브 속성(dict)과 수집기가 추가하는
합성 필드(region, tags, 중첩 하위 컬렉션)를 명시적으로 조합합니다.

직렬화 규칙:
    - to_dict(): 네이티브 키를 먼저, 합성 필드를 선언 순서대로 출력
    - from_dict(): 합성 키를 꺼내고 나머지는 네이티브로 유지
    - 합성 필드와 이름이 겹치는 네이티브 키는 생성 시 제거
    - datetime 값은 생성 시 ISO-8601 문자열로 정규화

따라서 from_dict(r.to_dict()) == r 이 항상 성립합니다.

Usage:
    @dataclass
    class Subnet(TaggedResource):
        reserved_ips: list[dict] = synthetic("reserved_ips")
        tags: list[str] = synthetic("tags")
"""

from __future__ import annotations

import json
from dataclasses import MISSING, Field, dataclass, field, fields
from datetime import date, datetime
from typing import Any, ClassVar, Protocol, TypeVar, runtime_checkable

JSON_INDENT = 4

ResourceT = TypeVar("ResourceT", bound="Resource")
ModelT = TypeVar("ModelT", bound="ResourcesModel")


def synthetic(key: str, item: type | None = None, default: Any = MISSING) -> Any:
    """합성 필드 선언

    Args:
        key: JSON 키 이름
        item: 중첩 레코드 타입 (Resource 하위 클래스). 값이 dict/list[dict]이면 None
        default: 기본값. 지정하지 않으면 빈 리스트

    Returns:
        dataclasses.field
    """
    metadata = {"json": key, "item": item}
    if default is MISSING:
        return field(default_factory=list, metadata=metadata)
    return field(default=default, metadata=metadata)


def to_json_safe(value: Any) -> Any:
    """boto3 응답의 datetime 등을 JSON 호환 값으로 재귀 변환"""
    if isinstance(value, dict):
        return {k: to_json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json_safe(v) for v in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


def _dump(value: Any) -> Any:
    if isinstance(value, Resource):
        return value.to_dict()
    if isinstance(value, list):
        return [_dump(v) for v in value]
    return value


def _load(value: Any, item: type | None) -> Any:
    if item is None or value is None:
        return value
    if isinstance(value, list):
        return [item.from_dict(v) for v in value]
    return item.from_dict(value)


@dataclass
class Resource:
    """레코드 기반 클래스: 네이티브 속성 + 합성 필드"""

    native: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        native = to_json_safe(self.native)
        for f in self.synthetic_fields():
            native.pop(f.metadata["json"], None)
        self.native = native

    @classmethod
    def synthetic_fields(cls) -> list[Field]:
        return [f for f in fields(cls) if "json" in f.metadata]

    def get(self, key: str, default: Any = None) -> Any:
        """네이티브 속성 조회"""
        return self.native.get(key, default)

    @property
    def id(self) -> str | None:
        return self.native.get("id")

    @property
    def name(self) -> str | None:
        return self.native.get("name")

    def to_dict(self) -> dict[str, Any]:
        result = dict(self.native)
        for f in self.synthetic_fields():
            result[f.metadata["json"]] = _dump(getattr(self, f.name))
        return result

    @classmethod
    def from_dict(cls: type[ResourceT], data: dict[str, Any]) -> ResourceT:
        native = dict(data)
        kwargs: dict[str, Any] = {}
        for f in cls.synthetic_fields():
            key = f.metadata["json"]
            if key in native:
                kwargs[f.name] = _load(native.pop(key), f.metadata["item"])
        return cls(native=native, **kwargs)


@runtime_checkable
class Taggable(Protocol):
    """태그 보강 대상 (안정적인 식별자 + 태그 설정)"""

    @property
    def crn(self) -> str | None: ...

    def set_tags(self, tags: list[str]) -> None: ...


@dataclass
class TaggedResource(Resource):
    """태그를 붙일 수 있는 레코드

    tags 필드는 하위 클래스가 `tags: list[str] = synthetic("tags")`로
    마지막에 선언합니다 (JSON에서 tags가 항상 마지막 키).
    """

    @property
    def crn(self) -> str | None:
        return self.native.get("crn")

    def set_tags(self, tags: list[str]) -> None:
        # 이전 태그는 덮어씀 (누적하지 않음)
        self.tags = list(tags)


@dataclass
class ResourcesModel:
    """수집 결과 스냅샷 기반 클래스

    하위 클래스는 리소스 타입별 리스트 필드를 `resource_list(Type)`으로 선언합니다.
    JSON 키 순서는 collector_version, provider, 그 다음 선언 순서입니다.
    """

    LIST_KEY: ClassVar[str] = "item"

    collector_version: str = ""
    provider: str | None = None

    @classmethod
    def list_fields(cls) -> list[Field]:
        return [f for f in fields(cls) if cls.LIST_KEY in f.metadata]

    def counts(self) -> dict[str, int]:
        """리소스 타입별 개수 (선언 순서)"""
        return {f.name: len(getattr(self, f.name)) for f in self.list_fields()}

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"collector_version": self.collector_version}
        if self.provider is not None:
            result["provider"] = self.provider
        for f in self.list_fields():
            result[f.name] = [r.to_dict() for r in getattr(self, f.name)]
        return result

    def to_json_string(self) -> str:
        return json.dumps(self.to_dict(), indent=JSON_INDENT, ensure_ascii=False)

    @classmethod
    def from_dict(cls: type[ModelT], data: dict[str, Any]) -> ModelT:
        kwargs: dict[str, Any] = {
            "collector_version": data.get("collector_version", ""),
            "provider": data.get("provider"),
        }
        for f in cls.list_fields():
            item = f.metadata[cls.LIST_KEY]
            kwargs[f.name] = [item.from_dict(v) for v in data.get(f.name) or []]
        return cls(**kwargs)

    @classmethod
    def from_json(cls: type[ModelT], text: str | bytes) -> ModelT:
        return cls.from_dict(json.loads(text))


def resource_list(item: type[Resource]) -> Any:
    """스냅샷의 리소스 리스트 필드 선언"""
    return field(default_factory=list, metadata={ResourcesModel.LIST_KEY: item})
