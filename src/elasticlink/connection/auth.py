"""Basic 认证编码模块."""

import base64


def encode_basic_auth(username: str, password: str) -> str:
    """将用户名和密码编码为 HTTP Basic 认证头的值.

    不校验空值，空用户名/密码同样会得到语法合法的结果。

    Args:
        username: 用户名
        password: 密码

    Returns:
        形如 ``Basic dXNlcjpwYXNz`` 的字符串

    Examples:
        >>> encode_basic_auth("user", "pass")
        'Basic dXNlcjpwYXNz'
    """
    token = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"
