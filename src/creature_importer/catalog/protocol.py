"""
Read-only reference catalog interface.

A catalog is split into partitions ("packs") that are scanned
independently. A scan returns lightweight index entries holding only the
requested field projection; full documents are fetched one at a time.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

IndexEntry = Dict[str, Any]

BASE_FIELDS = ("_id", "name", "type")


@dataclass(frozen=True)
class PartitionHandle:
    name: str
    document_name: str = "Item"
    label: str = ""


class ReferenceCatalog(ABC):
    """
    Protocol for reference catalogs.
    
    Implementations raise PartitionReadError (or any exception) when a
    partition cannot be read; callers treat that partition as empty.
    """
    
    @abstractmethod
    async def list_partitions(self) -> List[PartitionHandle]:
        """List all partitions of the catalog."""
        pass
    
    @abstractmethod
    async def scan_partition(
        self,
        handle: PartitionHandle,
        fields: Sequence[str],
    ) -> List[IndexEntry]:
        """
        Scan a partition.
        
        :param handle: Partition to scan
        :param fields: Dotted field paths to include besides _id, name and type
        :return: Index entries restricted to the projection
        """
        pass
    
    @abstractmethod
    async def fetch_full_entry(self, handle: PartitionHandle, entry_id: str) -> Optional[Dict[str, Any]]:
        """Fetch the complete document, or None if it does not exist."""
        pass


def project_fields(document: Dict[str, Any], fields: Sequence[str]) -> IndexEntry:
    """
    Copy only the base fields and the requested dotted paths of a document.
    
    project_fields({"_id": "a", "name": "X", "type": "spell", "system": {"skill": "firemagic", "costs": "4"}},
                   ["system.skill"])
    -> {"_id": "a", "name": "X", "type": "spell", "system": {"skill": "firemagic"}}
    """
    projected: IndexEntry = {key: document.get(key) for key in BASE_FIELDS}
    
    for path in fields:
        parts = path.split(".")
        value: Any = document
        for part in parts:
            if not isinstance(value, dict) or part not in value:
                value = None
                break
            value = value[part]
        if value is None:
            continue
        
        target = projected
        for part in parts[:-1]:
            target = target.setdefault(part, {})
        target[parts[-1]] = value
    
    return projected
