from .loader import (
    CONFIG_ENV_VAR,
    active_settings,
    configure,
    get_settings,
    load_settings,
    using_settings,
)
from .models import KantaSettings

__all__ = [
    "CONFIG_ENV_VAR",
    "KantaSettings",
    "active_settings",
    "configure",
    "get_settings",
    "load_settings",
    "using_settings",
]
