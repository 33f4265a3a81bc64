"""
Public application facade for the creature importer.

This is the single stable entry point for the library.
All internal structure can change freely, but this API remains stable.
"""
import dataclasses
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from .canonicalizer import build_import_plan
from .catalog import ReferenceCatalog
from .config import ImporterConfig
from .data_loader import PayloadLoader
from .exceptions import EntryNotFoundError
from .models import CreatureRecord, ReferenceLibraryEntry, ResolvedAbility, UnresolvedAbilityRef
from .normalization import CreatureNormalizer
from .resolution import AutoMatched, EntityResolver, create_entity_resolver, normalize_skill_hint
from .schemas import ImportPlan, ImportSummary, NormalizationResult
from .workflow import SequentialResolutionWorkflow

logger = logging.getLogger(__name__)


class CreatureImportApp:
    """
    Public application facade for the creature importer.
    
    All dependency wiring and factory usage is encapsulated here.
    
    Usage:
        config = load_config_from_env()
        app = CreatureImportApp(config, catalog=my_catalog)
        result = app.normalize(app.load("wolf.json"))
        remaining = await app.auto_resolve(result.record)
        workflow = app.start_workflow(result.record, remaining)
        ...
        plan = app.build_plan(result.record)
    """
    
    def __init__(self, config: Optional[ImporterConfig] = None, catalog: Optional[ReferenceCatalog] = None):
        """
        :param config: ImporterConfig instance (defaults apply when omitted)
        :param catalog: Reference catalog; falls back to config.catalog_path
        """
        self._config = config or ImporterConfig()
        self._catalog = catalog
        self._loader = PayloadLoader()
        self._normalizer = CreatureNormalizer(self._config)
        self._resolver: Optional[EntityResolver] = None
    
    @property
    def config(self) -> ImporterConfig:
        return self._config
    
    @property
    def resolver(self) -> EntityResolver:
        """
        Entity resolver, created on first use.
        
        :raises: ConfigurationError if no catalog is available
        """
        if self._resolver is None:
            self._resolver = create_entity_resolver(self._config, catalog=self._catalog)
        return self._resolver
    
    def load(self, source: Union[str, Path]) -> Dict[str, Any]:
        """
        Read a payload from a file path or JSON text.
        
        :raises: FormatValidationError if the content is not a JSON object
        """
        return self._loader.load(source)
    
    def normalize(self, payload: Mapping[str, Any]) -> NormalizationResult:
        """
        Normalize a payload of any supported format.
        
        :return: NormalizationResult with the record and its import summary
        :raises: FormatValidationError if the payload is invalid
        """
        record = self._normalizer.normalize(payload)
        summary = ImportSummary.from_record(record)
        logger.info(summary.to_text())
        return NormalizationResult(record=record, summary=summary)
    
    async def auto_resolve(self, record: CreatureRecord) -> List[UnresolvedAbilityRef]:
        """
        Bind every unresolved ability that resolves to exactly one entry.
        
        :return: Abilities still unresolved afterwards, in record order
        """
        pending = [ref for ref in record.unresolved_abilities if not ref.manually_tagged]
        
        bound = 0
        for ref in pending:
            resolution = await self.resolver.resolve(ref.name, ref.kind, ref.skill_hint, ref.level_ceiling)
            if not isinstance(resolution, AutoMatched):
                continue
            try:
                entry = await self._fetch_matched(resolution)
            except EntryNotFoundError as e:
                logger.warning(f"Leaving '{ref.name}' unresolved: {e}")
                continue
            ability = ResolvedAbility(entry=entry, skill_hint=normalize_skill_hint(ref.skill_hint))
            record.bind_ability(ref, ability)
            bound += 1
        
        remaining = [ref for ref in record.unresolved_abilities if not ref.manually_tagged]
        logger.info(f"Auto-resolved {bound} of {len(pending)} abilities for '{record.name}'")
        return remaining
    
    async def _fetch_matched(self, resolution: AutoMatched) -> ReferenceLibraryEntry:
        """Full catalog document for a match, keeping the level it matched at."""
        entry = await self.resolver.index.fetch_entry(resolution.entry.unique_id)
        if entry.level != resolution.entry.level:
            entry = dataclasses.replace(entry, level=resolution.entry.level)
        return entry
    
    def start_workflow(
        self,
        record: CreatureRecord,
        queue: Optional[List[UnresolvedAbilityRef]] = None,
    ) -> SequentialResolutionWorkflow:
        """
        Start a sequential resolution session for the given items.
        
        :param queue: Items to walk; defaults to the record's untagged unresolved abilities
        """
        return SequentialResolutionWorkflow(record, self.resolver, queue=queue, config=self._config)
    
    def build_plan(self, record: CreatureRecord, existing_actor_id: Optional[str] = None) -> ImportPlan:
        """
        Build the persistence plan: create a new actor, or update an existing
        one replacing only its weapon items.
        """
        plan = build_import_plan(record, existing_actor_id)
        logger.info(f"Import plan for '{record.name}': {plan.action}, {len(plan.items)} items")
        return plan
