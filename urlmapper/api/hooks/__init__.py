"""Host extension points."""

from .hook_names import (
    ATTACHMENT_IMAGE_SRC,
    ATTACHMENT_URL,
    CONTENT,
    IMAGE_SRCSET,
    OBJECT_METADATA,
    THUMBNAIL_HTML,
    WIDGET_BLOCK_CONTENT,
    WIDGET_TEXT,
)
from .HookRegistry import HookRegistry
from .register_filters import REWRITE_PRIORITY, register_filters

__all__ = [
    "ATTACHMENT_IMAGE_SRC",
    "ATTACHMENT_URL",
    "CONTENT",
    "IMAGE_SRCSET",
    "OBJECT_METADATA",
    "THUMBNAIL_HTML",
    "WIDGET_BLOCK_CONTENT",
    "WIDGET_TEXT",
    "REWRITE_PRIORITY",
    "HookRegistry",
    "register_filters",
]
