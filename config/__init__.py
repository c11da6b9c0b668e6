"""Конфигурационные модули."""

from .display_config import DisplayConfig
from .limits_config import LimitsConfig
from .verifier_config import VerifierConfig

__all__ = ["DisplayConfig", "LimitsConfig", "VerifierConfig"]
