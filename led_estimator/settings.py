# settings.py
# Estimator configuration: pricing defaults and planning policy values,
# overridable through LED_ESTIMATOR_* environment variables or a .env file.

import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from led_estimator.errors import require_number

ENV_PREFIX = "LED_ESTIMATOR_"


@dataclass(frozen=True)
class EstimatorSettings:
    global_markup_percent: float = 20.0
    bespoke_markup_percent: float = 20.0
    quote_markup_percent: float = 25.0
    quote_fees: float = 0.0
    safety_factor: float = 1.2
    log_level: str = "INFO"


# env suffix -> (field, validation kwargs)
_NUMERIC_FIELDS = {
    "GLOBAL_MARKUP": ("global_markup_percent", {}),
    "BESPOKE_MARKUP": ("bespoke_markup_percent", {}),
    "QUOTE_MARKUP": ("quote_markup_percent", {}),
    "QUOTE_FEES": ("quote_fees", {"minimum": 0}),
    "SAFETY_FACTOR": ("safety_factor", {"minimum": 0, "exclusive": True}),
}


def load_settings(env=None) -> EstimatorSettings:
    """
    Build settings from the environment.

    With ``env`` omitted, a .env file in the working directory is loaded
    first (existing variables win) and os.environ is read.
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    values = {}
    for suffix, (name, checks) in _NUMERIC_FIELDS.items():
        raw = env.get(ENV_PREFIX + suffix)
        if raw is None or str(raw).strip() == "":
            continue
        values[name] = require_number(raw, ENV_PREFIX + suffix, **checks)

    level = env.get(ENV_PREFIX + "LOG_LEVEL")
    if level:
        values["log_level"] = level.strip().upper()

    return EstimatorSettings(**values)
