"""Extension-point names the host exposes."""

CONTENT = "content"
WIDGET_TEXT = "widget_text"
WIDGET_BLOCK_CONTENT = "widget_block_content"
THUMBNAIL_HTML = "thumbnail_html"
ATTACHMENT_URL = "attachment_url"
ATTACHMENT_IMAGE_SRC = "attachment_image_src"
IMAGE_SRCSET = "image_srcset"
OBJECT_METADATA = "object_metadata"
