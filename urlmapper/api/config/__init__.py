"""Config API module."""

from .LogConfig import LogConfig
from .RewriteConfig import RewriteConfig
from .SiteConfig import SiteConfig
from .URLMapperConfig import URLMapperConfig

__all__ = ["LogConfig", "RewriteConfig", "SiteConfig", "URLMapperConfig"]
