"""
Catalog implementations backed by Python data or JSON files.
"""
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from ..exceptions import PartitionReadError
from .protocol import IndexEntry, PartitionHandle, ReferenceCatalog, project_fields

logger = logging.getLogger(__name__)


class InMemoryCatalog(ReferenceCatalog):
    """
    Catalog over documents held in memory.
    
    Usage:
        catalog = InMemoryCatalog({
            "core.masteries": [{"_id": "m1", "name": "Whirlwind Strike", "type": "mastery",
                                "system": {"skill": "melee", "level": 3}}],
        })
    """
    
    def __init__(
        self,
        partitions: Dict[str, List[Dict[str, Any]]],
        document_name: str = "Item",
    ):
        self._documents = {name: list(docs) for name, docs in partitions.items()}
        self._handles = [PartitionHandle(name=name, document_name=document_name) for name in partitions]
    
    async def list_partitions(self) -> List[PartitionHandle]:
        return list(self._handles)
    
    async def scan_partition(self, handle: PartitionHandle, fields: Sequence[str]) -> List[IndexEntry]:
        if handle.name not in self._documents:
            raise PartitionReadError(handle.name, "unknown partition")
        return [project_fields(doc, fields) for doc in self._documents[handle.name]]
    
    async def fetch_full_entry(self, handle: PartitionHandle, entry_id: str) -> Optional[Dict[str, Any]]:
        for doc in self._documents.get(handle.name, []):
            if doc.get("_id") == entry_id:
                return dict(doc)
        return None


class JsonDirectoryCatalog(ReferenceCatalog):
    """
    Catalog where every *.json file in a directory is one partition.
    
    A file holds either a list of documents or an object
    {"label": ..., "documentName": "Item", "entries": [...]}.
    Files are read off the event loop and cached after the first read.
    """
    
    def __init__(self, directory: str):
        self._directory = Path(directory)
        self._cache: Dict[str, List[Dict[str, Any]]] = {}
    
    async def list_partitions(self) -> List[PartitionHandle]:
        paths = await asyncio.to_thread(lambda: sorted(self._directory.glob("*.json")))
        handles = []
        for path in paths:
            try:
                content = await asyncio.to_thread(self._read_file, path)
            except (OSError, ValueError) as e:
                logger.warning(f"Skipping unreadable catalog file {path.name}: {e}")
                continue
            document_name = "Item"
            label = path.stem
            if isinstance(content, dict):
                document_name = content.get("documentName", document_name)
                label = content.get("label", label)
            documents = self._documents_of(content)
            if documents is not None:
                self._cache[path.stem] = documents
            handles.append(PartitionHandle(name=path.stem, document_name=document_name, label=label))
        return handles
    
    async def scan_partition(self, handle: PartitionHandle, fields: Sequence[str]) -> List[IndexEntry]:
        documents = await self._load(handle)
        return [project_fields(doc, fields) for doc in documents]
    
    async def fetch_full_entry(self, handle: PartitionHandle, entry_id: str) -> Optional[Dict[str, Any]]:
        for doc in await self._load(handle):
            if doc.get("_id") == entry_id:
                return dict(doc)
        return None
    
    async def _load(self, handle: PartitionHandle) -> List[Dict[str, Any]]:
        if handle.name in self._cache:
            return self._cache[handle.name]
        
        path = self._directory / f"{handle.name}.json"
        try:
            content = await asyncio.to_thread(self._read_file, path)
        except (OSError, ValueError) as e:
            raise PartitionReadError(handle.name, str(e)) from e
        
        documents = self._documents_of(content)
        if documents is None:
            raise PartitionReadError(handle.name, "expected a list of entries")
        
        self._cache[handle.name] = documents
        return documents
    
    @staticmethod
    def _documents_of(content: Any) -> Optional[List[Dict[str, Any]]]:
        documents = content.get("entries", []) if isinstance(content, dict) else content
        if not isinstance(documents, list):
            return None
        return [doc for doc in documents if isinstance(doc, dict)]
    
    @staticmethod
    def _read_file(path: Path) -> Any:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
