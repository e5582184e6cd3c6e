"""连接与请求分发异常定义模块."""

from __future__ import annotations

from ..exceptions import ElasticLinkError
from .retry import FailureKind


class ConnectionConfigError(ElasticLinkError):
    """连接配置校验异常.

    当客户端配置不合法时抛出，例如 hosts 为空、request_timeout 小于 0 等。
    """

    pass


class EndpointParseError(ConnectionConfigError):
    """节点地址解析异常.

    当 hosts 中的某个地址无法解析为 scheme + host 时抛出，客户端无法构建。
    """

    pass


class RequestFailedError(ElasticLinkError):
    """单次请求失败的基础异常类.

    该类及其子类不会被抛出给调用方，而是放在 Response.error 中返回。

    Attributes:
        kind: 失败类别，供重试策略判断
    """

    kind: FailureKind = FailureKind.TRANSPORT


class TransportFailure(RequestFailedError):
    """传输层失败（DNS、连接被拒绝、超时等）."""

    kind = FailureKind.TRANSPORT

    def __init__(self, url: str, cause: BaseException):
        self.url = url
        self.cause = cause
        super().__init__(f"Elasticsearch request failed: {url} ({cause})")


class HttpStatusError(RequestFailedError):
    """HTTP 状态码非 2xx.

    Attributes:
        url: 请求地址
        status: HTTP 状态码
        body: 响应体文本
    """

    kind = FailureKind.HTTP_STATUS

    def __init__(self, url: str, status: int, body: str):
        self.url = url
        self.status = status
        self.body = body
        super().__init__(
            f"Elasticsearch request failed: {url} with status {status} {body}"
        )


class ResponseDecodeError(RequestFailedError):
    """状态码成功但响应体无法解析为 JSON."""

    kind = FailureKind.DECODE

    def __init__(self, url: str, status: int, cause: BaseException):
        self.url = url
        self.status = status
        self.cause = cause
        super().__init__(
            f"Elasticsearch response decode failed: {url} with status {status} ({cause})"
        )
