"""Bind the rewriter to the host's extension points."""

from __future__ import annotations

from typing import TYPE_CHECKING

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

if TYPE_CHECKING:
    from ..rewrite.URLRewriter import URLRewriter

# Run after the host's own formatting filters (default priority 10).
REWRITE_PRIORITY = 20


def register_filters(hooks: HookRegistry, rewriter: URLRewriter, priority: int = REWRITE_PRIORITY) -> None:
    for name in (CONTENT, WIDGET_TEXT, WIDGET_BLOCK_CONTENT, THUMBNAIL_HTML):
        hooks.add_filter(name, rewriter.rewrite_string, priority)
    hooks.add_filter(ATTACHMENT_URL, rewriter.rewrite_url, priority)
    hooks.add_filter(ATTACHMENT_IMAGE_SRC, rewriter.rewrite_image_src, priority, accepted_args=4)
    hooks.add_filter(IMAGE_SRCSET, rewriter.rewrite_srcset, priority, accepted_args=5)
    # Only whitelisted keys are touched (see URLRewriter.is_meta_key_allowed).
    hooks.add_filter(OBJECT_METADATA, rewriter.filter_object_metadata, priority, accepted_args=4)
