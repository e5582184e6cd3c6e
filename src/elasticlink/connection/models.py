"""连接与请求分发数据模型定义模块.

提供请求分发相关的数据模型，包括：
- Credential: Basic Auth 凭证
- Endpoint: 解析后的节点地址
- ClientConfig: 客户端配置
- Response: 统一响应信封
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .exceptions import ConnectionConfigError, RequestFailedError
from .retry import RetryPolicy

if TYPE_CHECKING:
    from .selectors import HostSelector

T = TypeVar("T")

# 未成功解析任何响应之前的状态码
DEFAULT_STATUS_CODE = 500


@dataclass(frozen=True)
class Credential:
    """Basic Auth 凭证.

    Attributes:
        username: 用户名
        password: 密码
    """

    username: str
    password: str


@dataclass(frozen=True)
class Endpoint:
    """解析后的 Elasticsearch 节点地址.

    Attributes:
        scheme: 协议，如 http、https
        host: 主机名及端口，保持配置中的写法，如 ``localhost:9200``
        authorization: 节点地址中自带凭证时预先计算好的 Authorization 值
    """

    scheme: str
    host: str
    authorization: str | None = field(default=None, repr=False)

    @property
    def base_url(self) -> str:
        """不含凭证的基础地址."""
        return f"{self.scheme}://{self.host}"


@dataclass
class ClientConfig:
    """客户端配置模型.

    Attributes:
        hosts: ES 节点地址列表（必需，不可为空），可在地址中携带 ``user:pass@``
        custom_headers: 附加到每个请求的自定义请求头
        authorization: 客户端级 Basic Auth 凭证，节点自带凭证时以节点为准
        http: 自定义 HTTP 实现，需提供与 requests 兼容的 ``request`` 方法，
            默认使用 requests 模块本身
        request_timeout: 单次请求超时时间（秒），默认 30，必须 >= 0
        retry_policy: 重试策略，默认只尝试 1 次
        selector: 节点选择策略，默认均匀随机

    Raises:
        ConnectionConfigError: 当参数不合法时抛出

    Examples:
        >>> config = ClientConfig(
        ...     hosts=["http://localhost:9200"],
        ...     authorization=Credential("elastic", "changeme"),
        ... )
    """

    hosts: list[str] = field(default_factory=list)
    custom_headers: Mapping[str, str] | None = None
    authorization: Credential | None = None
    http: Any = None
    request_timeout: float = 30
    retry_policy: RetryPolicy = field(default_factory=RetryPolicy)
    selector: HostSelector | None = None

    def __post_init__(self) -> None:
        """校验客户端配置参数合法性."""
        if isinstance(self.hosts, str):
            self.hosts = [self.hosts]
        if not self.hosts:
            raise ConnectionConfigError("hosts 不能为空，请提供至少一个 ES 节点地址")
        if self.request_timeout < 0:
            raise ConnectionConfigError(
                f"request_timeout 必须 >= 0，当前值: {self.request_timeout}"
            )


@dataclass
class Response(Generic[T]):
    """统一响应信封.

    成功时 data 有值、error 为 None；失败时 data 为 None、error 描述最后一次失败。
    code 总是最后一次尝试的状态码，全部为传输层失败时保持 500。

    Attributes:
        data: 解析后的响应体
        code: HTTP 状态码
        error: 失败原因
    """

    data: T | None = None
    code: int = DEFAULT_STATUS_CODE
    error: RequestFailedError | None = None

    @property
    def ok(self) -> bool:
        """是否成功."""
        return self.error is None
