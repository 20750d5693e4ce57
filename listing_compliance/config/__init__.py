"""Runtime configuration resolved from the environment."""

from .settings import ValidatorConfig, load_config

__all__ = ["ValidatorConfig", "load_config"]
