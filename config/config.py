"""
Configuration classes for the basket pricing engine.
Defines the decimal working scale and display rounding in a type-safe, extensible way.
"""

import decimal
import os
from dataclasses import dataclass

from utils.env import load_project_dotenv

ENV_PREFIX = "BASKET_"

ROUNDING_MODES = {
    name: getattr(decimal, name)
    for name in (
        "ROUND_DOWN",
        "ROUND_HALF_UP",
        "ROUND_HALF_EVEN",
        "ROUND_UP",
        "ROUND_CEILING",
        "ROUND_FLOOR",
        "ROUND_HALF_DOWN",
        "ROUND_05UP",
    )
}


@dataclass
class BasketConfig:
    decimal_scale: int = 4  # fractional digits kept by basket arithmetic
    display_places: int = 2
    display_rounding: str = decimal.ROUND_DOWN  # totals are truncated for display
    log_level: str = "INFO"

    def __post_init__(self):
        if self.decimal_scale < 0:
            raise ValueError(f"decimal_scale must be >= 0, got {self.decimal_scale}")
        if self.display_places < 0:
            raise ValueError(f"display_places must be >= 0, got {self.display_places}")
        if self.display_rounding not in ROUNDING_MODES:
            raise ValueError(f"Unknown rounding mode: {self.display_rounding}")

    @classmethod
    def from_env(cls) -> "BasketConfig":
        """
        Build a config from ``BASKET_*`` environment variables.
        The project ``.env`` is loaded first; real environment variables win.
        """
        load_project_dotenv()
        defaults = cls()
        return cls(
            decimal_scale=_env_int("DECIMAL_SCALE", defaults.decimal_scale),
            display_places=_env_int("DISPLAY_PLACES", defaults.display_places),
            display_rounding=os.getenv(
                ENV_PREFIX + "DISPLAY_ROUNDING", defaults.display_rounding
            ).upper(),
            log_level=os.getenv(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        )


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from e


# Example usage:
# config = BasketConfig.from_env()
# basket = Basket(products, rules, offers, config=config)
