"""Discount policy settings: the nth-order interval and the reward percentage.

Each setting resolves from an environment variable first, then from the
``[custom]`` section of the domain configuration, then from the default.
Settings are read on every call so a running domain picks up overrides.
"""

import os

from protean.exceptions import ConfigurationError
from protean.utils.globals import current_domain

DEFAULT_NTH_ORDER = 5
DEFAULT_DISCOUNT_PERCENT = 10

# key: (environment variable, default, upper bound)
_SETTINGS = {
    "nth_order": ("STOREFRONT_NTH_ORDER", DEFAULT_NTH_ORDER, None),
    "discount_percent": ("STOREFRONT_DISCOUNT_PERCENT", DEFAULT_DISCOUNT_PERCENT, 100),
}


def _custom_config():
    return current_domain.config.get("custom") or {}


def _setting(key):
    env_var, default, maximum = _SETTINGS[key]
    raw = os.getenv(env_var)
    if raw is None:
        raw = _custom_config().get(key, default)

    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from exc

    if value < 1:
        raise ConfigurationError(f"{key} must be a positive integer, got {value}")
    if maximum is not None and value > maximum:
        raise ConfigurationError(f"{key} must be at most {maximum}, got {value}")
    return value


def nth_order_interval() -> int:
    """Every order whose number is a multiple of this value mints a code."""
    return _setting("nth_order")


def discount_percent() -> int:
    """Percentage granted by newly minted codes."""
    return _setting("discount_percent")
