"""测试公共 fixtures."""

from __future__ import annotations

import json
from typing import Any

import pytest
import requests


def make_response(status: int = 200, body: Any = None) -> requests.Response:
    """构造 requests.Response 对象."""
    response = requests.Response()
    response.status_code = status
    response.encoding = "utf-8"
    if body is None:
        body = {}
    if isinstance(body, bytes):
        response._content = body
    elif isinstance(body, str):
        response._content = body.encode("utf-8")
    else:
        response._content = json.dumps(body).encode("utf-8")
    return response


class FakeHttp:
    """记录请求并按顺序返回预设结果的 HTTP 实现.

    预设结果用完后重复最后一个；结果为异常实例时抛出。
    """

    def __init__(self, *outcomes: Any) -> None:
        self.outcomes = list(outcomes) or [make_response()]
        self.calls: list[dict[str, Any]] = []

    def request(self, method, url, headers=None, data=None, timeout=None):
        self.calls.append(
            {
                "method": method,
                "url": url,
                "headers": headers,
                "data": data,
                "timeout": timeout,
            }
        )
        if len(self.outcomes) > 1:
            outcome = self.outcomes.pop(0)
        else:
            outcome = self.outcomes[0]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def ok_http() -> FakeHttp:
    """总是返回 200 {"acknowledged": true} 的 HTTP 实现."""
    return FakeHttp(make_response(200, {"acknowledged": True}))
