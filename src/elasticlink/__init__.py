"""elasticlink - 轻量的 Elasticsearch HTTP 客户端.

将 search、get、index、update、bulk 等操作转换为对一组节点的 HTTP 请求，
每次调用随机选择节点、自动附加凭证、按需重试，并统一返回
``Response(data, code, error)`` 信封。

使用示例:
    from elasticlink import ElasticClient, Credential

    client = ElasticClient(
        hosts=["http://localhost:9200"],
        authorization=Credential("elastic", "changeme"),
    )
    response = client.count({"index": "logs"}, max_attempts=3)
    if response.error is None:
        print(response.data["count"])
"""

__version__ = "0.1.0"

# 导出客户端
from elasticlink.client import ElasticClient, format_query_params

# 导出请求分发组件
from elasticlink.connection import (
    ClientConfig,
    Credential,
    Dispatcher,
    Endpoint,
    FailureKind,
    HostRegistry,
    RandomSelector,
    Response,
    RetryPolicy,
    RoundRobinSelector,
    encode_basic_auth,
)

# 导出异常
from elasticlink.connection.exceptions import (
    ConnectionConfigError,
    EndpointParseError,
    HttpStatusError,
    RequestFailedError,
    ResponseDecodeError,
    TransportFailure,
)
from elasticlink.exceptions import ElasticLinkError

__all__ = [
    # 版本
    "__version__",
    # 客户端
    "ElasticClient",
    "format_query_params",
    # 请求分发
    "Dispatcher",
    "HostRegistry",
    "RandomSelector",
    "RoundRobinSelector",
    "encode_basic_auth",
    # 模型
    "ClientConfig",
    "Credential",
    "Endpoint",
    "Response",
    "RetryPolicy",
    "FailureKind",
    # 异常
    "ElasticLinkError",
    "ConnectionConfigError",
    "EndpointParseError",
    "RequestFailedError",
    "TransportFailure",
    "HttpStatusError",
    "ResponseDecodeError",
]
