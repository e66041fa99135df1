"""
Process-wide settings for parsing and folding expressions.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

import numpy as np

from .logging_system import LogLevel, set_log_level


_DTYPES = {32: np.int32, 64: np.int64}


@dataclass
class ExpressionConfig:
    strict_parse: bool = False   # reject tokens left over after a complete expression
    integer_bits: int = 32       # width of the wraparound arithmetic used when folding
    log_level: LogLevel = field(default=LogLevel.MODERATE)

    def __post_init__(self):
        if self.integer_bits not in _DTYPES:
            raise ValueError(f"integer_bits must be one of {sorted(_DTYPES)}, got {self.integer_bits}")

    @property
    def dtype(self):
        return _DTYPES[self.integer_bits]

    @property
    def min_value(self) -> int:
        return int(np.iinfo(self.dtype).min)

    @property
    def max_value(self) -> int:
        return int(np.iinfo(self.dtype).max)


_global_config: Optional[ExpressionConfig] = None


def get_config() -> ExpressionConfig:
    """Get or create the global configuration"""
    global _global_config
    if _global_config is None:
        _global_config = ExpressionConfig()
    return _global_config


def set_config(config: Optional[ExpressionConfig] = None, **overrides) -> ExpressionConfig:
    """Install a configuration, optionally overriding individual fields"""
    global _global_config
    base = config if config is not None else get_config()
    _global_config = replace(base, **overrides) if overrides else base
    set_log_level(_global_config.log_level)
    return _global_config


def reset_config() -> ExpressionConfig:
    """Restore the default configuration"""
    global _global_config
    _global_config = None
    return set_config(ExpressionConfig())
