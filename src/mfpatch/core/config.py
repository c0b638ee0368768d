import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing import Optional, Dict, Any, List, Literal
from .errors import ConfigError
from .platform import Platform

class RuleConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    type: Literal["prefix_injection"] = "prefix_injection"
    variable: str
    token: str
    # empty means every platform
    platforms: List[Platform] = Field(default_factory=list)

class PatchConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    descriptor_path: str = "Makefile"
    log_level: str = "INFO"
    skip_present: bool = False
    rules: List[RuleConfig] = Field(default_factory=lambda: list(DEFAULT_RULES))

DEFAULT_RULES = [
    RuleConfig(variable="OBJS", token="probes.o", platforms=[Platform.LINUX]),
    RuleConfig(variable="HDRS", token="probes.h"),
]

def load_config(path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> PatchConfig:
    data: Dict[str, Any] = {}
    if path:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(path, e) from e
        if not isinstance(data, dict):
            raise ConfigError(path, ValueError("top-level YAML must be a mapping"))
    data.update({k: v for k, v in (overrides or {}).items() if v is not None})
    try:
        return PatchConfig(**data)
    except ValidationError as e:
        raise ConfigError(path or "<defaults>", e) from e
