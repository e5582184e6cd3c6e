"""请求分发模块 - 节点注册、凭证附加、随机选节点与有限次数重试.

主要组件:
    - Dispatcher: 请求分发器，返回统一响应信封
    - HostRegistry: 节点注册表
    - ClientConfig: 客户端配置模型
    - RetryPolicy: 重试策略
    - RandomSelector / RoundRobinSelector: 节点选择策略

使用示例:
    from elasticlink.connection import ClientConfig, Dispatcher

    dispatcher = Dispatcher(ClientConfig(hosts=["http://localhost:9200"]))
    response = dispatcher.dispatch("/_refresh", "POST")
"""

from .auth import encode_basic_auth
from .exceptions import (
    ConnectionConfigError,
    EndpointParseError,
    HttpStatusError,
    RequestFailedError,
    ResponseDecodeError,
    TransportFailure,
)
from .models import ClientConfig, Credential, Endpoint, Response
from .registry import HostRegistry, parse_endpoint
from .retry import FailureKind, RetryPolicy
from .selectors import HostSelector, RandomSelector, RoundRobinSelector
from .tool import Dispatcher

__all__ = [
    # 分发器
    "Dispatcher",
    # 节点
    "HostRegistry",
    "parse_endpoint",
    "encode_basic_auth",
    "HostSelector",
    "RandomSelector",
    "RoundRobinSelector",
    # 模型
    "ClientConfig",
    "Credential",
    "Endpoint",
    "Response",
    "FailureKind",
    "RetryPolicy",
    # 异常
    "ConnectionConfigError",
    "EndpointParseError",
    "RequestFailedError",
    "TransportFailure",
    "HttpStatusError",
    "ResponseDecodeError",
]
