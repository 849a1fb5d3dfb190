"""
Toolkit configuration.

Only two knobs exist: which integer domain untyped (plain Python int)
inputs run in, and whether fixed-width domains trap overflow.  Both can be
set from the environment:

  EXACTMATH_DEFAULT_DOMAIN   "big" (default), "int64", "int32", ...
  EXACTMATH_CHECK_OVERFLOW   "1" (default) / "0"
"""

import os
import warnings
from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional

from .domains import BIG, IntegerDomain, get_domain

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ToolkitConfig:
    """Process-wide defaults for integer operations."""
    default_domain: str = "big"     # Domain for plain Python int inputs
    check_overflow: bool = True     # Trap fixed-width overflow

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _parse_bool(name: str, raw: str, fallback: bool) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    warnings.warn(
        f"Ignoring {name}={raw!r}: expected one of "
        f"{sorted(_TRUE | _FALSE)}. Using {fallback}.",
        RuntimeWarning,
    )
    return fallback


def load_config(environ: Optional[Mapping[str, str]] = None) -> ToolkitConfig:
    """Build a ToolkitConfig from environment variables.

    Unknown values are reported with a RuntimeWarning and replaced by the
    defaults, so a bad environment never prevents the toolkit from loading.
    """
    env = os.environ if environ is None else environ
    defaults = ToolkitConfig()

    check_overflow = defaults.check_overflow
    raw_check = env.get("EXACTMATH_CHECK_OVERFLOW")
    if raw_check is not None:
        check_overflow = _parse_bool("EXACTMATH_CHECK_OVERFLOW", raw_check,
                                     defaults.check_overflow)

    domain_name = env.get("EXACTMATH_DEFAULT_DOMAIN", defaults.default_domain)
    try:
        get_domain(domain_name)
    except KeyError as exc:
        warnings.warn(
            f"{exc.args[0]} Falling back to '{defaults.default_domain}'.",
            RuntimeWarning,
        )
        domain_name = defaults.default_domain

    return ToolkitConfig(default_domain=domain_name,
                         check_overflow=check_overflow)


_config: Optional[ToolkitConfig] = None


def get_config() -> ToolkitConfig:
    """Return the active configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: Optional[ToolkitConfig]) -> None:
    """Replace the active configuration (None reloads from the environment)."""
    global _config
    _config = config


def default_domain() -> IntegerDomain:
    """Domain used for inputs that do not carry one (plain Python ints)."""
    cfg = get_config()
    if cfg.default_domain == BIG.name:
        return BIG
    return get_domain(cfg.default_domain, check_overflow=cfg.check_overflow)
