from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
from ..core.config import RuleConfig
from ..core.platform import Platform

class Rule(ABC):
    variable: str

    @abstractmethod
    def applies_to(self, platform: Platform) -> bool: ...

    @abstractmethod
    def apply(self, line: str) -> Optional[str]:
        """Return the rewritten line, or None when the line is left alone."""

class PrefixInjection(Rule):
    """Insert ``token`` right after a ``NAME = `` prefix at line start."""
    def __init__(self, variable: str, token: str, platforms: Iterable[Platform] = (), skip_present: bool = False) -> None:
        self.variable = variable
        self.token = token
        self.platforms = frozenset(platforms)
        self.skip_present = skip_present
        self.prefix = f"{variable} = "

    def applies_to(self, platform: Platform) -> bool:
        return not self.platforms or platform in self.platforms

    def apply(self, line: str) -> Optional[str]:
        if not line.startswith(self.prefix):
            return None
        rest = line[len(self.prefix):]
        if self.skip_present and self.token in rest.split():
            return None
        return f"{self.prefix}{self.token} {rest}"

def build_rules(spec: List[RuleConfig], skip_present: bool = False) -> List[Rule]:
    rules: List[Rule] = []
    for item in spec:
        if item.type == "prefix_injection":
            rules.append(PrefixInjection(item.variable, item.token, item.platforms, skip_present))
        else:
            raise ValueError(f"Unknown rule type: {item.type}")
    return rules
