from enum import Enum

class Platform(str, Enum):
    LINUX = "linux"
    DARWIN = "darwin"
    OTHER = "other"

def resolve_platform(identifier) -> Platform:
    """Map an OS tag such as ``sys.platform`` or ``x86_64-linux`` to a Platform."""
    if isinstance(identifier, Platform):
        return identifier
    tag = str(identifier or "").lower()
    if "linux" in tag:
        return Platform.LINUX
    if "darwin" in tag:
        return Platform.DARWIN
    return Platform.OTHER
