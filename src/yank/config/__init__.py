"""yank configuration package."""

from yank.config.loader import get_config, load_config
from yank.config.models import YankConfig

__all__ = ["YankConfig", "get_config", "load_config"]
