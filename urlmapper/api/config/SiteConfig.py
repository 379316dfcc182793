"""Site section: the root URLs the host serves content from."""

from urllib.parse import urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, field_validator

_HTTP_URL = TypeAdapter(HttpUrl)


def set_url_scheme(url: str, scheme: str) -> str:
    """Return ``url`` with its scheme replaced by ``scheme``.

    Protocol-relative URLs (``//host/path``) gain the scheme.
    """
    if not url:
        return url
    parts = urlsplit(url if "//" in url else f"//{url}")
    return urlunsplit(parts._replace(scheme=scheme))


class SiteConfig(BaseModel):
    """Site section of urlmapper configuration.

    ``home_url`` is the public front-end root. ``site_url`` is the root the
    host's admin and upload handling live under; it defaults to ``home_url``.
    """

    model_config = ConfigDict(extra="forbid")

    home_url: str = Field(..., description="Public root URL of the site")
    site_url: str | None = Field(default=None, description="Root URL of the host installation, defaults to home_url")

    @field_validator("home_url", "site_url")
    @classmethod
    def validate_root_url(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        _HTTP_URL.validate_python(v)
        return v

    def root_urls(self) -> list[str]:
        """Root URL variants in both schemes, de-duplicated in order."""
        roots = [self.home_url, self.site_url or self.home_url]
        variants = [set_url_scheme(root, scheme) for root in roots for scheme in ("http", "https")]
        return list(dict.fromkeys(v for v in variants if v))
