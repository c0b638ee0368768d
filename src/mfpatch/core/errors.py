from typing import Optional

class PatchError(Exception):
    """Base for failures that must stop the build stage."""
    stage = "patch"

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        self.path = str(path)
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"{self.stage} failed for {self.path}{detail}")

class DescriptorReadError(PatchError):
    stage = "read"

class DescriptorWriteError(PatchError):
    stage = "write"

class ConfigError(PatchError):
    stage = "config"
