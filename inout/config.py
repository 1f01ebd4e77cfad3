# inout/config.py
"""
Load and validate YAML run configurations.
"""
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from cerberus import Validator

from core.exceptions import ConfigError
from core.frequency import DEFAULT_BATCH_SIZE, DEFAULT_TOP_K
from core.primality import DEFAULT_ROUNDS

DEFAULT_SIZE_MB = 64

# Cerberus schema for the run configuration
CONFIG_SCHEMA: Dict[str, Any] = {
    'size_mb':    {'type': 'integer', 'required': False, 'min': 1, 'coerce': int},
    'top_k':      {'type': 'integer', 'required': False, 'min': 1, 'coerce': int},
    'rounds':     {'type': 'integer', 'required': False, 'min': 1, 'coerce': int},
    'workers':    {'type': 'integer', 'required': False, 'min': 1, 'nullable': True},
    'batch_size': {'type': 'integer', 'required': False, 'min': 1, 'coerce': int},
    'seed':       {'type': 'integer', 'required': False, 'min': 0, 'nullable': True},
    'log_file':   {'type': 'string',  'required': False, 'nullable': True},
}


@dataclass(frozen=True)
class AnalysisConfig:
    size_mb: int = DEFAULT_SIZE_MB
    top_k: int = DEFAULT_TOP_K
    rounds: int = DEFAULT_ROUNDS
    workers: Optional[int] = None      # None -> os.cpu_count()
    batch_size: int = DEFAULT_BATCH_SIZE
    seed: Optional[int] = None
    log_file: Optional[str] = None

    @property
    def size_bytes(self) -> int:
        return self.size_mb * 1024 * 1024

    def merged(self, **overrides: Any) -> "AnalysisConfig":
        """Return a copy with every non-None override applied."""
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")
        changes = {k: v for k, v in overrides.items() if v is not None}
        return validate_config({**self.__dict__, **changes}) if changes else self


def validate_config(raw: Optional[Dict[str, Any]]) -> AnalysisConfig:
    """
    Validate a configuration mapping and return an AnalysisConfig.

    Raises:
        ConfigError: If the mapping does not match CONFIG_SCHEMA.
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(raw).__name__}")

    validator = Validator(CONFIG_SCHEMA, allow_unknown=False)
    if not validator.validate(raw):
        raise ConfigError(f"Configuration schema validation errors: {validator.errors}")
    return replace(AnalysisConfig(), **validator.document)


def load_config(path: Path) -> AnalysisConfig:
    """
    Load a YAML run configuration file, validate its schema, and return an AnalysisConfig.

    Raises:
        ConfigError: If file read fails or schema validation fails.
    """
    try:
        raw = yaml.safe_load(Path(path).read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read configuration YAML '{path}': {e}")
    return validate_config(raw)
