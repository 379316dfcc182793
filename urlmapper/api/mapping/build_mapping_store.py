from ..config.URLMapperConfig import URLMapperConfig
from ..options.Options import Options
from .MappingStore import MappingStore


def build_mapping_store(config: URLMapperConfig) -> MappingStore:
    """Mapping store backed by the configured database."""
    return MappingStore(Options(config.database))
