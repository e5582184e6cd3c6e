"""请求分发工具模块.

提供 Dispatcher 类，负责节点选择、凭证附加、发起请求、有限次数重试
以及构造统一的响应信封。

使用示例:
    from elasticlink.connection import ClientConfig, Dispatcher

    dispatcher = Dispatcher(ClientConfig(hosts=["http://localhost:9200"]))
    response = dispatcher.dispatch("/_cluster/health", "GET")
    if response.ok:
        print(response.data)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import requests
from elasticsearch.exceptions import SerializationError
from elasticsearch.serializer import JsonSerializer

from .auth import encode_basic_auth
from .exceptions import (
    HttpStatusError,
    RequestFailedError,
    ResponseDecodeError,
    TransportFailure,
)
from .models import DEFAULT_STATUS_CODE, ClientConfig, Endpoint, Response
from .registry import HostRegistry
from .selectors import HostSelector, RandomSelector

logger = logging.getLogger(__name__)

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType(
    {"Content-Type": "application/json"}
)


def build_default_headers(config: ClientConfig) -> dict[str, str]:
    """构造默认请求头.

    顺序：固定 Content-Type -> 自定义请求头 -> 客户端级凭证。
    """
    headers = dict(DEFAULT_HEADERS)
    if config.custom_headers:
        headers.update(config.custom_headers)
    if config.authorization is not None:
        headers["Authorization"] = encode_basic_auth(
            config.authorization.username, config.authorization.password
        )
    return headers


class Dispatcher:
    """请求分发器.

    持有节点注册表和默认请求头，对一次逻辑调用执行
    “随机选节点 -> 附加凭证 -> 发请求 -> 失败重试” 的流程。
    默认请求头构造后不再修改，每次尝试都基于它生成新的请求头字典，
    因此并发调用之间不会互相看到对方节点的凭证。

    Attributes:
        _registry: 节点注册表
        _headers: 默认请求头（只读视图）
        _http: HTTP 实现
        _selector: 节点选择策略

    Examples:
        >>> dispatcher = Dispatcher(ClientConfig(hosts=["http://localhost:9200"]))
        >>> response = dispatcher.dispatch("/my-index/_count", "POST", body=b"{}")
    """

    def __init__(self, config: ClientConfig) -> None:
        """初始化请求分发器.

        Args:
            config: 客户端配置

        Raises:
            EndpointParseError: 节点地址无法解析时抛出
        """
        self._config = config
        self._registry = HostRegistry(config.hosts)
        self._headers: Mapping[str, str] = MappingProxyType(
            build_default_headers(config)
        )
        self._http = config.http if config.http is not None else requests
        self._selector: HostSelector = config.selector or RandomSelector()
        self._retry_policy = config.retry_policy
        self._serializer = JsonSerializer()

    @property
    def registry(self) -> HostRegistry:
        return self._registry

    @property
    def headers(self) -> Mapping[str, str]:
        """默认请求头（只读）."""
        return self._headers

    def request_headers(
        self,
        endpoint: Endpoint,
        headers: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        """为单次尝试生成请求头.

        节点自带凭证优先于客户端级凭证和调用方传入的请求头。
        """
        merged = dict(self._headers)
        if headers:
            merged.update(headers)
        if endpoint.authorization:
            merged["Authorization"] = endpoint.authorization
        return merged

    def dispatch(
        self,
        path_and_query: str,
        method: str = "GET",
        body: bytes | None = None,
        headers: Mapping[str, str] | None = None,
        max_attempts: int | None = None,
    ) -> Response[Any]:
        """执行一次逻辑调用.

        最多尝试 max_attempts 次，首次成功即返回。每次尝试独立选择节点。
        任何请求期失败都不会抛出，而是体现在返回值的 error/code 中。

        Args:
            path_and_query: 以 ``/`` 开头的路径及查询串
            method: HTTP 方法
            body: 请求体
            headers: 本次调用额外的请求头
            max_attempts: 尝试次数，默认使用重试策略中的 max_attempts

        Returns:
            统一响应信封
        """
        if max_attempts is None:
            max_attempts = self._retry_policy.max_attempts
        attempts = max(1, max_attempts)
        code = DEFAULT_STATUS_CODE
        error: RequestFailedError | None = None

        for attempt in range(1, attempts + 1):
            endpoint = self._selector.select(self._registry.endpoints)
            url = f"{endpoint.base_url}{path_and_query}"
            logger.debug(f"第 {attempt}/{attempts} 次尝试: {method} {url}")

            try:
                response = self._http.request(
                    method,
                    url,
                    headers=self.request_headers(endpoint, headers),
                    data=body,
                    timeout=self._config.request_timeout,
                )
            except Exception as e:
                # 自定义 http 实现可能抛出任意异常，统一计入传输层失败
                error = TransportFailure(url, e)
            else:
                code = response.status_code
                if 200 <= code < 300:
                    try:
                        if not response.content:
                            raise SerializationError("响应体为空")
                        data = self._serializer.loads(response.content)
                    except SerializationError as e:
                        error = ResponseDecodeError(url, code, e)
                    else:
                        return Response(data=data, code=code)
                else:
                    error = HttpStatusError(url, code, response.text)

            logger.warning(f"第 {attempt}/{attempts} 次尝试失败: {error}")
            if not self._retry_policy.should_retry(error):
                break

        logger.error(f"请求失败，已停止重试: {method} {path_and_query}, 状态码: {code}")
        return Response(data=None, code=code, error=error)
