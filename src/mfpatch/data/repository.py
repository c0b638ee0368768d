import logging, os, shutil, tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List
from ..core.errors import DescriptorReadError, DescriptorWriteError

log = logging.getLogger(__name__)

# Makefiles are not guaranteed UTF-8; undecodable bytes must survive the rewrite
ENCODING = "utf-8"
ERRORS = "surrogateescape"

class AbstractDescriptorStore(ABC):
    @abstractmethod
    def read_lines(self, path: str) -> List[str]: ...

    @abstractmethod
    def write_lines(self, path: str, lines: List[str]) -> None: ...

class FileDescriptorStore(AbstractDescriptorStore):
    def read_lines(self, path: str) -> List[str]:
        try:
            # newline='' keeps \r\n and \r terminators untranslated
            with open(path, 'r', encoding=ENCODING, errors=ERRORS, newline='') as f:
                return list(f)
        except OSError as e:
            raise DescriptorReadError(path, e) from e

    def write_lines(self, path: str, lines: List[str]) -> None:
        dest = Path(path)
        tmp = None
        try:
            fd, tmp = tempfile.mkstemp(prefix=f".{dest.name}.", suffix=".tmp", dir=str(dest.parent))
            with os.fdopen(fd, 'w', encoding=ENCODING, errors=ERRORS, newline='') as f:
                f.writelines(lines)
                f.flush()
                os.fsync(f.fileno())
            if dest.exists():
                shutil.copymode(str(dest), tmp)
            os.replace(tmp, str(dest))
            tmp = None
        except OSError as e:
            raise DescriptorWriteError(path, e) from e
        finally:
            if tmp is not None and os.path.exists(tmp):
                os.unlink(tmp)
        log.debug("wrote %d lines to %s", len(lines), path)

class MemoryDescriptorStore(AbstractDescriptorStore):
    """Dict-backed store for dry runs and tests."""
    def __init__(self, files: Dict[str, List[str]] = None) -> None:
        self.files: Dict[str, List[str]] = dict(files or {})

    def read_lines(self, path: str) -> List[str]:
        if path not in self.files:
            raise DescriptorReadError(path, FileNotFoundError(path))
        return list(self.files[path])

    def write_lines(self, path: str, lines: List[str]) -> None:
        self.files[path] = list(lines)
