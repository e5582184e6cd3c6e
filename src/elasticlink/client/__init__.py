"""Elasticsearch 操作客户端模块.

主要组件:
    - ElasticClient: 提供 search、get、index、update、bulk 等操作方法
    - format_query_params: 按允许列表生成查询串
"""

from .query_params import format_query_params
from .tool import ElasticClient
from .types import (
    BulkRequest,
    CountRequest,
    DeleteByQueryRequest,
    DeleteRequest,
    GetRequest,
    IndexRequest,
    IndicesCreateRequest,
    IndicesDeleteRequest,
    IndicesRefreshRequest,
    SearchRequest,
    UpdateByQueryRequest,
    UpdateRequest,
)

__all__ = [
    "ElasticClient",
    "format_query_params",
    # 请求类型
    "SearchRequest",
    "GetRequest",
    "IndexRequest",
    "UpdateRequest",
    "UpdateByQueryRequest",
    "DeleteRequest",
    "DeleteByQueryRequest",
    "BulkRequest",
    "CountRequest",
    "IndicesCreateRequest",
    "IndicesDeleteRequest",
    "IndicesRefreshRequest",
]
