from dataclasses import dataclass, field
from typing import Dict, List

@dataclass(frozen=True)
class PatchResult:
    lines: List[str]
    # rewritten line count keyed by variable name
    rewrites: Dict[str, int] = field(default_factory=dict)

    @property
    def changed(self) -> bool:
        return any(self.rewrites.values())
