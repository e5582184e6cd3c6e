"""节点选择策略模块.

选择策略不记录失败历史，每次尝试都独立选择。
"""

from __future__ import annotations

import random
import threading
from abc import ABC, abstractmethod
from collections.abc import Sequence

from .models import Endpoint


class HostSelector(ABC):
    """节点选择策略基类."""

    @abstractmethod
    def select(self, endpoints: Sequence[Endpoint]) -> Endpoint:
        """从非空节点列表中选择一个节点."""
        raise NotImplementedError


class RandomSelector(HostSelector):
    """均匀随机选择，默认策略.

    Args:
        rng: 随机数生成器，便于测试时固定种子；默认使用 random 模块
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random

    def select(self, endpoints: Sequence[Endpoint]) -> Endpoint:
        return self._rng.choice(endpoints)


class RoundRobinSelector(HostSelector):
    """轮询选择."""

    def __init__(self) -> None:
        self._position = 0
        self._lock = threading.Lock()

    def select(self, endpoints: Sequence[Endpoint]) -> Endpoint:
        with self._lock:
            endpoint = endpoints[self._position % len(endpoints)]
            self._position += 1
        return endpoint
