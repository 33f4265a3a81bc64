"""
Searchable view over a reference catalog.

Partitions are scanned lazily, once per ability kind, reading only the
fields needed for filtering. A partition that fails to scan is logged and
contributes no entries; the rest of the catalog stays usable.
"""
import asyncio
import dataclasses
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..exceptions import EntryNotFoundError, PartitionReadError
from ..models import AbilityKind, ReferenceLibraryEntry
from ..utils.numeric import coerce_int
from ..utils.text import normalize_name
from .availability import parse_available_in
from .protocol import IndexEntry, PartitionHandle, ReferenceCatalog

logger = logging.getLogger(__name__)

# Skill filter value selecting entries that are bound to no skill
GENERAL_SKILL = "none"

KIND_FIELDS = {
    AbilityKind.MASTERY: ("system.skill", "system.level", "system.availableIn", "system.description"),
    AbilityKind.SPELL: ("system.skill", "system.skillLevel", "system.availableIn", "system.description"),
}


@dataclass(frozen=True)
class QueryConstraints:
    """
    Filters applied to catalog entries.
    
    skill: None for any skill, GENERAL_SKILL for entries without a skill,
           otherwise the entry skill or one of its "available in" skills.
    level_ceiling: None for no limit.
    """
    skill: Optional[str] = None
    level_ceiling: Optional[int] = None


@dataclass(frozen=True)
class IndexHit:
    entry: ReferenceLibraryEntry
    is_exact: bool


@dataclass(frozen=True)
class _ScannedEntry:
    entry: ReferenceLibraryEntry
    availability: Dict[str, int]


class ReferenceLibraryIndex:
    """
    In-memory index over an external catalog.
    
    Never mutates catalog entries. Scan results are cached until
    invalidate() is called.
    """
    
    def __init__(
        self,
        catalog: ReferenceCatalog,
        document_name: str = "Item",
        school_table: Optional[Dict[str, str]] = None,
    ):
        """
        :param catalog: Catalog collaborator
        :param document_name: Only partitions holding this document type are scanned
        :param school_table: Alternative school names used in "available in" tokens
        """
        self._catalog = catalog
        self._document_name = document_name
        self._school_table = school_table or {}
        self._scans: Dict[AbilityKind, List[_ScannedEntry]] = {}
        self._handles: Dict[str, PartitionHandle] = {}
        self._scan_lock = asyncio.Lock()
    
    def invalidate(self) -> None:
        """Drop cached scans so the next query rereads the catalog."""
        self._scans.clear()
        self._handles.clear()
    
    async def query(
        self,
        kind: AbilityKind,
        constraints: Optional[QueryConstraints] = None,
    ) -> List[ReferenceLibraryEntry]:
        """
        Return all entries of a kind that satisfy the constraints.
        
        Entries matched through an "available in" skill carry the grade of
        that skill as their level.
        """
        constraints = constraints or QueryConstraints()
        results = []
        
        for scanned in await self._scan(kind):
            level = self._effective_level(scanned, constraints.skill)
            if level is None:
                continue
            if constraints.level_ceiling is not None and level > constraints.level_ceiling:
                continue
            
            entry = scanned.entry
            if level != entry.level:
                entry = dataclasses.replace(entry, level=level)
            results.append(entry)
        
        return results
    
    async def lookup_exact_or_prefix(
        self,
        name: str,
        kind: AbilityKind,
        constraints: Optional[QueryConstraints] = None,
    ) -> List[IndexHit]:
        """
        Find entries whose name equals or starts with name (normalized).
        
        :return: Hits flagged exact or prefix, in catalog order
        """
        search = normalize_name(name)
        if not search:
            return []
        
        hits = []
        for entry in await self.query(kind, constraints):
            entry_name = normalize_name(entry.name)
            if entry_name == search:
                hits.append(IndexHit(entry=entry, is_exact=True))
            elif entry_name.startswith(search):
                hits.append(IndexHit(entry=entry, is_exact=False))
        
        logger.debug(f"lookup_exact_or_prefix('{name}', {kind.value}): {[h.entry.name for h in hits]}")
        return hits
    
    async def browse(
        self,
        kind: AbilityKind,
        skill: Optional[str],
        level_ceiling: Optional[int] = None,
    ) -> List[ReferenceLibraryEntry]:
        """
        Entries offered for manual selection under one skill.
        
        Masteries are sorted by name, spells by grade then name.
        """
        entries = await self.query(kind, QueryConstraints(skill=skill, level_ceiling=level_ceiling))
        
        if kind == AbilityKind.SPELL:
            return sorted(entries, key=lambda e: (e.level, e.name.lower()))
        return sorted(entries, key=lambda e: e.name.lower())
    
    async def fetch_entry(self, unique_id: str) -> ReferenceLibraryEntry:
        """
        Fetch the full catalog entry for a unique id ("<partition>.<id>").
        
        :raises: EntryNotFoundError if the entry cannot be fetched
        """
        partition, _, entry_id = unique_id.rpartition(".")
        handle = self._handles.get(partition) or PartitionHandle(name=partition, document_name=self._document_name)
        
        try:
            document = await self._catalog.fetch_full_entry(handle, entry_id)
        except Exception as e:
            raise EntryNotFoundError(f"Could not fetch {unique_id}: {e}") from e
        
        if not document:
            raise EntryNotFoundError(f"No catalog entry {unique_id}")
        
        try:
            kind = AbilityKind(document.get("type"))
        except ValueError:
            raise EntryNotFoundError(f"Catalog entry {unique_id} is not an ability ({document.get('type')!r})")
        
        return self._to_entry(handle, document, kind)
    
    async def _scan(self, kind: AbilityKind) -> List[_ScannedEntry]:
        async with self._scan_lock:
            if kind in self._scans:
                return self._scans[kind]
            
            scanned: List[_ScannedEntry] = []
            for handle in await self._catalog.list_partitions():
                if handle.document_name != self._document_name:
                    continue
                self._handles[handle.name] = handle
                
                try:
                    index = await self._catalog.scan_partition(handle, KIND_FIELDS[kind])
                except PartitionReadError as e:
                    logger.warning(f"{e}; treating it as empty")
                    continue
                except Exception as e:
                    logger.warning(f"Could not index partition '{handle.name}': {e}; treating it as empty")
                    continue
                
                for raw in index:
                    if raw.get("type") != kind.value or not raw.get("name"):
                        continue
                    scanned.append(self._scan_entry(handle, raw, kind))
            
            logger.info(f"Indexed {len(scanned)} {kind.value} entries")
            self._scans[kind] = scanned
            return scanned
    
    def _scan_entry(self, handle: PartitionHandle, raw: IndexEntry, kind: AbilityKind) -> _ScannedEntry:
        system = raw.get("system") or {}
        return _ScannedEntry(
            entry=self._to_entry(handle, raw, kind),
            availability=parse_available_in(system.get("availableIn"), self._school_table),
        )
    
    @staticmethod
    def _to_entry(handle: PartitionHandle, raw: IndexEntry, kind: AbilityKind) -> ReferenceLibraryEntry:
        system = raw.get("system") or {}
        skill = system.get("skill") or None
        if skill == GENERAL_SKILL:
            skill = None
        if kind == AbilityKind.MASTERY:
            level = coerce_int(system.get("level"), default=1, field="system.level") or 1
        else:
            level = coerce_int(system.get("skillLevel"), default=0, field="system.skillLevel")
        
        return ReferenceLibraryEntry(
            unique_id=f"{handle.name}.{raw.get('_id')}",
            name=raw.get("name", ""),
            entity_kind=kind,
            skill=skill,
            level=level,
            description=system.get("description") or "",
            partition=handle.name,
            data=raw,
        )
    
    @staticmethod
    def _effective_level(scanned: _ScannedEntry, skill: Optional[str]) -> Optional[int]:
        entry = scanned.entry
        if skill is None:
            return entry.level
        if skill == GENERAL_SKILL:
            return entry.level if not entry.skill else None
        if entry.skill == skill:
            return entry.level
        if skill in scanned.availability:
            return scanned.availability[skill]
        return None
