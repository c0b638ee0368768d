#!/usr/bin/env python3
"""
Patch the Makefile in the current directory with the probe artifacts.
Usage (from extconf.rb, after create_makefile):
  system("python3", "scripts/patch_makefile.py") or abort
"""
import sys
from mfpatch.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
