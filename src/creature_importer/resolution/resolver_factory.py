"""
Factory for creating entity resolvers.

Builds the index and matcher from configuration.
"""
from typing import Optional

from ..catalog import JsonDirectoryCatalog, ReferenceCatalog, ReferenceLibraryIndex
from ..config import ImporterConfig
from ..exceptions import ConfigurationError
from .entity_resolver import EntityResolver
from .fuzzy_matcher import FuzzyMatcher


def create_entity_resolver(
    config: ImporterConfig,
    catalog: Optional[ReferenceCatalog] = None,
) -> EntityResolver:
    """
    Factory function to create an EntityResolver.
    
    Uses a JSON directory catalog at config.catalog_path when no catalog
    is given.
    
    :param config: ImporterConfig instance
    :param catalog: Optional catalog collaborator
    :return: EntityResolver wired to a fresh index
    :raises: ConfigurationError if there is no catalog to use
    """
    if catalog is None:
        if not config.catalog_path:
            raise ConfigurationError(
                "No reference catalog available. Pass a catalog or set CREATURE_CATALOG_PATH."
            )
        catalog = JsonDirectoryCatalog(config.catalog_path)
    
    index = ReferenceLibraryIndex(
        catalog,
        document_name=config.catalog_document_name,
        school_table=config.magic_school_to_skill,
    )
    matcher = FuzzyMatcher(
        list_threshold=config.list_threshold,
        best_guess_threshold=config.best_guess_threshold,
    )
    
    return EntityResolver(index, matcher=matcher, skill_labels=config.skill_labels)
