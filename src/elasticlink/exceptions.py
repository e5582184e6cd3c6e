"""elasticlink 异常定义模块."""


class ElasticLinkError(Exception):
    """elasticlink 基础异常类."""

    pass
