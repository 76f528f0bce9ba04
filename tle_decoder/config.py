"""Environment-driven configuration for tle_decoder."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

__all__ = [
    "FeatureFlags",
    "DecoderConfig",
    "load_config",
]

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class FeatureFlags:
    """Optional validation toggles; all off by default."""

    strict_checksum: bool = False


@dataclass(frozen=True)
class DecoderConfig:
    feature_flags: FeatureFlags
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def strict(self) -> bool:
        return self.feature_flags.strict_checksum


_TRUE_SET = {"1", "true", "yes", "on"}
_FALSE_SET = {"0", "false", "no", "off"}


def _to_bool(value: Optional[str], default: Optional[bool] = None) -> Optional[bool]:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_SET:
        return True
    if lowered in _FALSE_SET:
        return False
    return default


def load_config(env: Optional[Mapping[str, str]] = None) -> DecoderConfig:
    """Load configuration from environment variables."""

    env_map: Mapping[str, str]
    if env is None:
        env_map = os.environ
    else:
        env_map = env

    strict = _to_bool(env_map.get("TLE_DECODER_STRICT"), default=False)
    log_level = env_map.get("TLE_DECODER_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL

    return DecoderConfig(
        feature_flags=FeatureFlags(strict_checksum=bool(strict)),
        log_level=log_level.upper(),
    )
