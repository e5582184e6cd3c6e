"""elasticlink 类型定义模块."""

from collections.abc import Sequence
from typing import Any, Dict

# 操作参数字典类型
ParamsDict = Dict[str, Any]

# 查询参数允许列表类型
# 格式: ("routing", "preference", ...)，顺序即查询串中的顺序
AllowList = Sequence[str]
