"""
collector/shared/paging.py - 페이지 API 순회

커서 기반 목록 API를 끝까지 읽어 하나의 리스트로 합칩니다.
리소스 종류와 무관하게 동작하며 IBM(next.start / next.href)과
AWS(NextToken) 커서 형식을 모두 지원합니다.

종료는 전적으로 API가 빈 커서를 반환하는지에 달려 있습니다.
커서를 계속 반환하는 API에서는 순회가 끝나지 않습니다 (페이지 수 상한 없음).

Usage:
    from collector.shared.paging import iterate_paged_api

    vpcs = iterate_paged_api(
        lambda limit, start: vpc_service.list_vpcs(limit=limit, start=start).get_result(),
        lambda page: page["vpcs"],
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import parse_qs, urlsplit

from collector.config import DEFAULT_PAGE_SIZE
from collector.exceptions import APICallError, CollectorError, PagingError

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

Page = dict[str, Any]
ListFunc = Callable[[int, str | None], Page]


def ibm_next_start(page: Page) -> str | None:
    """IBM 목록 응답에서 다음 페이지 커서 추출

    next.start가 있으면 그대로 사용하고, 없으면 next.href의
    start 쿼리 파라미터를 읽습니다.

    Args:
        page: 목록 API 응답 (dict)

    Returns:
        다음 커서 또는 None (마지막 페이지)

    Raises:
        PagingError: next.href를 해석할 수 없는 경우
    """
    next_link = page.get("next")
    if not next_link:
        return None
    start = next_link.get("start")
    if start:
        return start
    href = next_link.get("href")
    if not href:
        return None
    try:
        values = parse_qs(urlsplit(href).query).get("start")
    except ValueError as e:
        raise PagingError(
            "next.href", resource_id=href, error_message="커서를 해석할 수 없습니다", cause=e
        ) from e
    return values[0] if values else None


def aws_next_token(page: Page) -> str | None:
    """AWS 응답에서 NextToken 추출"""
    return page.get("NextToken") or None


def iterate_paged_api(
    list_func: ListFunc,
    get_items: Callable[[Page], list[T] | None],
    get_next_start: Callable[[Page], str | None] = ibm_next_start,
    page_size: int = DEFAULT_PAGE_SIZE,
    operation: str = "list",
    resource_id: str | None = None,
) -> list[T]:
    """페이지 API를 끝까지 순회하여 전체 항목 반환

    Args:
        list_func: (page_size, cursor) -> 페이지. 첫 호출의 cursor는 None
        get_items: 페이지에서 항목 리스트를 꺼내는 함수
        get_next_start: 페이지에서 다음 커서를 꺼내는 함수
        page_size: 한 번에 요청할 항목 수
        operation: 오류 메시지에 남길 작업 이름
        resource_id: 오류 메시지에 남길 상위 리소스 ID 또는 이름

    Returns:
        모든 페이지의 항목을 API 반환 순서대로 이어붙인 리스트

    Raises:
        PagingError: 페이지 조회 또는 커서 해석 실패 (누적 결과는 버림)
    """
    results: list[T] = []
    start: str | None = None
    pages = 0
    while True:
        try:
            page = list_func(page_size, start)
        except CollectorError:
            raise
        except Exception as e:
            raise PagingError.from_exception(operation, e, resource_id=resource_id) from e
        pages += 1
        results.extend(get_items(page) or [])
        start = get_next_start(page)
        if not start:
            break
    logger.debug(f"{operation}: {pages}페이지, {len(results)}개 항목")
    return results


def get_resources(
    list_func: ListFunc,
    get_items: Callable[[Page], list[T] | None],
    convert: Callable[[T], R],
    resource_type: str,
    get_next_start: Callable[[Page], str | None] = ibm_next_start,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> list[R]:
    """목록 조회 후 각 항목을 변환하는 단순 수집

    중첩 조회가 필요 없는 리소스 타입에 사용합니다.

    Args:
        list_func: 목록 API 호출 함수
        get_items: 페이지에서 항목 리스트를 꺼내는 함수
        convert: 네이티브 항목 -> 내부 레코드 변환 함수
        resource_type: 오류 메시지용 리소스 타입 이름

    Returns:
        변환된 레코드 리스트

    Raises:
        PagingError: 작업 이름에 resource_type을 포함하여 발생
    """
    items = iterate_paged_api(
        list_func, get_items, get_next_start, page_size, operation=f"list {resource_type}"
    )
    return [convert(item) for item in items]


def call_api(operation: str, func: Callable[..., T], *args: Any, resource_id: str | None = None, **kwargs: Any) -> T:
    """페이지가 없는 단일 API 호출

    Raises:
        APICallError: 작업 이름과 대상 식별자를 붙여 다시 발생
    """
    try:
        return func(*args, **kwargs)
    except CollectorError:
        raise
    except Exception as e:
        raise APICallError.from_exception(operation, e, resource_id=resource_id) from e
