"""查询参数格式化模块.

每个操作有固定的查询参数允许列表，只有列表中出现且有值的参数才会写入查询串。
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from ..typing import AllowList

SEARCH_PARAMS: AllowList = (
    "allow_no_indices",
    "allow_partial_search_results",
    "analyzer",
    "analyze_wildcard",
    "batched_reduce_size",
    "ccs_minimize_roundtrips",
    "default_operator",
    "df",
    "docvalue_fields",
    "expand_wildcards",
    "explain",
    "ignore_throttled",
    "ignore_unavailable",
    "lenient",
    "max_concurrent_shard_requests",
    "preference",
    "q",
    "request_cache",
    "rest_total_hits_as_int",
    "routing",
    "pretty",
    "version",
)

GET_PARAMS: AllowList = (
    "preference",
    "realtime",
    "refresh",
    "routing",
    "_source",
    "stored_fields",
    "version",
    "version_type",
)

CREATE_INDEX_PARAMS: AllowList = (
    "wait_for_active_shards",
    "timeout",
    "master_timeout",
)

INDEX_PARAMS: AllowList = (
    "if_seq_no",
    "if_primary_term",
    "op_type",
    "pipeline",
    "refresh",
    "routing",
    "timeout",
    "version",
    "version_type",
    "wait_for_active_shards",
    "require_alias",
)

UPDATE_PARAMS: AllowList = (
    "if_seq_no",
    "if_primary_term",
    "lang",
    "require_alias",
    "refresh",
    "retry_on_conflict",
    "routing",
    "_source",
    "_source_excludes",
    "_source_includes",
    "timeout",
    "wait_for_active_shards",
)

_BY_QUERY_PARAMS: AllowList = (
    "allow_no_indices",
    "analyzer",
    "conflicts",
    "analyze_wildcard",
    "default_operator",
    "df",
    "expand_wildcards",
    "from",
    "ignore_unavailable",
    "lenient",
    "max_docs",
    "pipeline",
    "preference",
    "refresh",
    "request_cache",
    "requests_per_second",
    "routing",
    "scroll",
    "scroll_size",
    "search_timeout",
    "search_type",
    "slices",
    "sort",
    "stats",
    "terminate_after",
    "timeout",
    "version",
    "version_type",
    "wait_for_active_shards",
)

UPDATE_BY_QUERY_PARAMS: AllowList = _BY_QUERY_PARAMS

# delete_by_query 不支持 pipeline 和 version_type
DELETE_BY_QUERY_PARAMS: AllowList = tuple(
    name for name in _BY_QUERY_PARAMS if name not in ("pipeline", "version_type")
)

DELETE_PARAMS: AllowList = (
    "if_primary_term",
    "if_seq_no",
    "refresh",
    "routing",
    "timeout",
    "version",
    "version_type",
    "wait_for_active_shards",
)

REFRESH_INDEX_PARAMS: AllowList = (
    "allow_no_indices",
    "expand_wildcards",
    "ignore_unavailable",
)

COUNT_PARAMS: AllowList = (
    "allow_no_indices",
    "analyzer",
    "analyze_wildcard",
    "default_operator",
    "df",
    "expand_wildcards",
    "ignore_throttled",
    "ignore_unavailable",
    "lenient",
    "min_score",
    "preference",
    "q",
    "routing",
    "terminate_after",
)

BULK_PARAMS: AllowList = (
    "pipeline",
    "refresh",
    "require_alias",
    "routing",
    "_source",
    "_source_excludes",
    "_source_includes",
    "timeout",
    "wait_for_active_shards",
)

# 默认冲突处理方式，调用方未指定 conflicts 时使用
DEFAULT_CONFLICTS = "proceed"


def _format_value(value: Any) -> str:
    """将参数值转换为查询串中的文本形式."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(_format_value(item) for item in value)
    return str(value)


def format_query_params(
    allowed: AllowList,
    params: Mapping[str, Any],
    **overrides: Any,
) -> str:
    """按允许列表生成查询串.

    Args:
        allowed: 允许写入查询串的参数名，顺序即输出顺序
        params: 完整的操作参数
        **overrides: 优先于 params 的参数值（仅对允许列表中的参数生效）

    Returns:
        不含 ``?`` 的查询串，没有可用参数时返回空字符串

    Examples:
        >>> format_query_params(("q", "routing"), {"index": "a", "q": "foo"})
        'q=foo'
        >>> format_query_params(("explain", "stored_fields"), {"explain": True, "stored_fields": ["a", "b"]})
        'explain=true&stored_fields=a%2Cb'
    """
    pairs = []
    for name in allowed:
        value = overrides[name] if name in overrides else params.get(name)
        if value is None:
            continue
        pairs.append((name, _format_value(value)))
    return urlencode(pairs)


def append_query_string(path: str, query_string: str) -> str:
    """查询串非空时拼接到路径后."""
    return f"{path}?{query_string}" if query_string else path
