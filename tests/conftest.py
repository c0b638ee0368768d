import logging
import pytest

MAKEFILE = (
    "SHELL = /bin/sh\n"
    "srcdir = .\n"
    "OBJS = main.o helper.o\n"
    "HDRS = main.h\n"
    "CFLAGS = -O2\n"
    "\n"
    "all:\t$(DLLIB)\n"
)

@pytest.fixture(autouse=True)
def _restore_root_logging():
    # setup_logging() replaces root handlers; put them back for the next test
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)

@pytest.fixture
def makefile(tmp_path):
    p = tmp_path / "Makefile"
    p.write_bytes(MAKEFILE.encode("utf-8"))
    return p
