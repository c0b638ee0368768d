import difflib, logging
from typing import Dict, Any, List, Optional
from ..core.config import PatchConfig
from ..core.platform import resolve_platform
from ..data.repository import AbstractDescriptorStore, FileDescriptorStore
from ..patching.patcher import ManifestPatcher
from ..patching.rules import build_rules

log = logging.getLogger(__name__)

class PatchPipeline:
    """Read the generated descriptor, patch it, write it back in place."""
    def __init__(self, store: Optional[AbstractDescriptorStore] = None) -> None:
        self._store = store or FileDescriptorStore()

    def run(self, cfg: PatchConfig, platform, dry_run: bool = False) -> Dict[str, Any]:
        platform = resolve_platform(platform)
        path = cfg.descriptor_path
        rules = build_rules(cfg.rules, skip_present=cfg.skip_present)
        log.info("patching %s for platform=%s", path, platform.value)

        lines = self._store.read_lines(path)
        result = ManifestPatcher(rules).apply(lines, platform)

        # one summary line per variable, however many rules target it
        variables: List[str] = list(dict.fromkeys(r.variable for r in rules))
        for variable in variables:
            n = result.rewrites.get(variable, 0)
            if not any(r.applies_to(platform) for r in rules if r.variable == variable):
                log.info("%s: skipped on %s", variable, platform.value)
            elif n:
                log.info("%s: rewrote %d line(s)", variable, n)
            else:
                log.warning("%s: no line rewritten in %s", variable, path)

        diff = "".join(difflib.unified_diff(lines, result.lines, fromfile=path, tofile=f"{path} (patched)"))
        if dry_run:
            log.info("dry run, %s left untouched", path)
        else:
            self._store.write_lines(path, result.lines)

        return {
            "descriptor_path": path,
            "platform": platform.value,
            "rewrites": dict(result.rewrites),
            "changed": result.changed,
            "written": not dry_run,
            "diff": diff,
        }
