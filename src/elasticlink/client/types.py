"""操作请求参数类型定义模块.

只列出路径参数和常用字段；其余字段原样作为请求体或查询参数传递。
"""

from __future__ import annotations

from typing import Any, Dict, List, TypedDict


class _IndexTarget(TypedDict, total=False):
    index: str


class SearchRequest(_IndexTarget, total=False):
    version: Any
    q: str
    routing: str
    preference: str
    explain: bool
    query: Dict[str, Any]
    aggs: Dict[str, Any]
    size: int
    sort: Any


class GetRequest(_IndexTarget, total=False):
    id: str
    routing: str
    realtime: bool
    _source: Any
    stored_fields: Any


class IndexRequest(_IndexTarget, total=False):
    id: str
    document: Any
    version_type: str
    op_type: str
    refresh: Any
    routing: str
    pipeline: str


class UpdateRequest(_IndexTarget, total=False):
    id: str
    doc: Dict[str, Any]
    doc_as_upsert: bool
    script: Any
    upsert: Dict[str, Any]
    retry_on_conflict: int
    refresh: Any


class UpdateByQueryRequest(_IndexTarget, total=False):
    conflicts: str
    query: Dict[str, Any]
    script: Any
    refresh: bool
    slices: Any


class DeleteRequest(_IndexTarget, total=False):
    id: str
    refresh: Any
    routing: str


class DeleteByQueryRequest(_IndexTarget, total=False):
    conflicts: str
    query: Dict[str, Any]
    refresh: bool
    slices: Any


class BulkRequest(_IndexTarget, total=False):
    body: List[Any]
    refresh: Any
    pipeline: str
    routing: str


class CountRequest(_IndexTarget, total=False):
    q: str
    query: Dict[str, Any]


class IndicesCreateRequest(_IndexTarget, total=False):
    settings: Dict[str, Any]
    mappings: Dict[str, Any]
    aliases: Dict[str, Any]
    timeout: str


class IndicesDeleteRequest(_IndexTarget, total=False):
    pass


class IndicesRefreshRequest(_IndexTarget, total=False):
    allow_no_indices: bool
    expand_wildcards: Any
    ignore_unavailable: bool
