from ..config.URLMapperConfig import URLMapperConfig
from ..mapping.build_mapping_store import build_mapping_store
from ..meta.MetaStore import MetaStore
from .URLRewriter import URLRewriter


def build_url_rewriter(config: URLMapperConfig) -> URLRewriter:
    """URLRewriter wired to the configured database and site."""
    return URLRewriter(
        store=build_mapping_store(config),
        site=config.site,
        meta_store=MetaStore(config.database),
        max_depth=config.rewrite.max_depth,
    )
