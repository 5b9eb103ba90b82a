"""
Format adapter interface
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List


@dataclass
class AdaptResult:
    """Caddy JSON produced by an adapter plus any non-fatal warnings"""
    output: str
    warnings: List[str] = field(default_factory=list)


class ConfigAdapter(ABC):
    """
    Converts one configuration dialect to Caddy JSON.

    Implementations raise on failure; the gateway adds the dialect context.
    """

    name: str = ""

    @abstractmethod
    async def adapt(self, body: bytes) -> AdaptResult:
        ...
