from typing import Dict, List, Optional, Sequence
from ..core.config import DEFAULT_RULES
from ..core.platform import Platform, resolve_platform
from ..data.entities import PatchResult
from .rules import Rule, build_rules

class ManifestPatcher:
    """Extend variable definitions in a generated Makefile with probe artifacts.

    Lines are treated as opaque text: only lines beginning with a rule's
    ``NAME = `` prefix are touched, everything else (terminators included)
    passes through unchanged. Line count and order never change.

    Not idempotent unless ``skip_present`` is set on the rules: patching an
    already patched descriptor inserts the tokens a second time.
    """
    def __init__(self, rules: Optional[List[Rule]] = None) -> None:
        self.rules = rules if rules is not None else build_rules(DEFAULT_RULES)

    def apply(self, lines: Sequence[str], platform) -> PatchResult:
        platform = resolve_platform(platform)
        active = [r for r in self.rules if r.applies_to(platform)]
        rewrites: Dict[str, int] = {r.variable: 0 for r in self.rules}
        out: List[str] = []
        for line in lines:
            touched = set()
            for rule in active:
                new = rule.apply(line)
                if new is not None:
                    line = new
                    touched.add(rule.variable)
            for variable in touched:
                rewrites[variable] += 1
            out.append(line)
        return PatchResult(lines=out, rewrites=rewrites)

    def patch(self, lines: Sequence[str], platform: Platform) -> List[str]:
        return self.apply(lines, platform).lines
