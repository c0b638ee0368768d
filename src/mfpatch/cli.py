#!/usr/bin/env python3
"""
Inject dtrace/systemtap probe artifacts into the Makefile generated by mkmf.

Run right after ``create_makefile`` in extconf.rb:
  python -m mfpatch.cli [--makefile Makefile] [--config configs/probes.yaml]
Options:
  --platform      : OS tag to patch for (default: sys.platform)
  --skip-present  : do not insert a token that is already listed
                    (--no-skip-present overrides the config)
  --dry-run       : print the diff only, logs go to stderr
"""
import argparse, logging, sys
from typing import List, Optional
from .core.config import load_config
from .core.errors import ConfigError, PatchError
from .core.logging import setup_logging
from .orchestration.pipeline import PatchPipeline

log = logging.getLogger("mfpatch")

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="mfpatch", description="patch probes.o/probes.h into a generated Makefile")
    ap.add_argument("--makefile", default=None, help="descriptor to patch (default: Makefile)")
    ap.add_argument("--config", default=None, help="YAML config with injection rules")
    ap.add_argument("--platform", default=sys.platform)
    # unset keeps the config value
    ap.add_argument("--skip-present", action=argparse.BooleanOptionalAction, default=None)
    ap.add_argument("--dry-run", action="store_true", help="print the diff to stdout, log to stderr")
    ap.add_argument("--log-level", default=None)
    return ap

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    log_stream = sys.stderr if args.dry_run else sys.stdout
    setup_logging(args.log_level or "INFO", log_stream)
    try:
        cfg = load_config(args.config, {
            "descriptor_path": args.makefile,
            "log_level": args.log_level,
            "skip_present": args.skip_present,
        })
    except ConfigError as e:
        log.error("%s", e)
        return 2
    setup_logging(cfg.log_level, log_stream)

    try:
        out = PatchPipeline().run(cfg, args.platform, dry_run=args.dry_run)
    except PatchError as e:
        log.error("%s", e)
        return 1

    if args.dry_run:
        sys.stdout.write(out["diff"])
    log.info("done: %s", ", ".join(f"{k}={v}" for k, v in out["rewrites"].items()))
    return 0

if __name__ == "__main__":
    sys.exit(main())
