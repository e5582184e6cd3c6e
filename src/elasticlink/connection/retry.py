"""重试策略模块.

重试是立即进行的：没有退避、没有延迟，每次重试重新随机选择节点。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .exceptions import RequestFailedError


class FailureKind(Enum):
    """单次请求失败类别.

    Attributes:
        TRANSPORT: 传输层失败（网络错误、超时）
        HTTP_STATUS: 收到非 2xx 响应
        DECODE: 收到 2xx 响应但响应体无法解析
    """

    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    DECODE = "decode"


@dataclass(frozen=True)
class RetryPolicy:
    """重试策略.

    默认只尝试 1 次；``retry_on`` 默认包含全部失败类别，
    即在尝试次数内对任何失败都重试。

    Attributes:
        max_attempts: 最大尝试次数，必须 >= 1
        retry_on: 允许重试的失败类别集合

    Examples:
        >>> policy = RetryPolicy(max_attempts=3, retry_on=frozenset({FailureKind.TRANSPORT}))
    """

    max_attempts: int = 1
    retry_on: frozenset[FailureKind] = field(
        default_factory=lambda: frozenset(FailureKind)
    )

    def __post_init__(self) -> None:
        """校验重试参数合法性."""
        if self.max_attempts < 1:
            # 延迟导入避免循环依赖
            from .exceptions import ConnectionConfigError

            raise ConnectionConfigError(
                f"max_attempts 必须 >= 1，当前值: {self.max_attempts}"
            )

    def should_retry(self, error: RequestFailedError) -> bool:
        """判断一次失败之后是否继续尝试（尝试次数由调用方控制）."""
        return error.kind in self.retry_on
