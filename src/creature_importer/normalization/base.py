"""
Tagged-variant dispatch over the supported payload formats.

The format is chosen from an explicit tag in the payload, never from
its content. Each format has one normalizer class registered under its
tag; they share only the key tables and helper functions.
"""
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from ..config import ImporterConfig
from ..exceptions import FormatValidationError
from ..models import AbilityKind, CreatureRecord, SkillValue, UnresolvedAbilityRef
from ..utils.numeric import coerce_int

logger = logging.getLogger(__name__)

FORMAT_FIELD = "format"
EDITOR_TAG = "SPLITTERMOND_CREATURE_EDITOR"

_REGISTRY: Dict[str, Type["FormatNormalizer"]] = {}


def register_format(tag: str) -> Callable[[Type["FormatNormalizer"]], Type["FormatNormalizer"]]:
    """Class decorator registering a normalizer under a format tag."""
    def decorator(cls: Type["FormatNormalizer"]) -> Type["FormatNormalizer"]:
        cls.format_tag = tag
        _REGISTRY[tag] = cls
        return cls
    return decorator


def supported_formats() -> list:
    return sorted(_REGISTRY)


def detect_format(payload: Mapping[str, Any]) -> str:
    """
    Read the format tag of a payload.
    
    Files from the original creature editor carry only the editor tag and
    are treated as EDITOR_V1.
    
    :raises: FormatValidationError if no supported tag is present
    """
    if not isinstance(payload, Mapping):
        raise FormatValidationError("payload", "JSON object", type(payload).__name__)
    
    tag = payload.get(FORMAT_FIELD)
    if tag is None and payload.get("editor") == EDITOR_TAG:
        return "EDITOR_V1"
    
    if tag not in _REGISTRY:
        raise FormatValidationError(FORMAT_FIELD, supported_formats(), tag)
    
    return tag


class FormatNormalizer(ABC):
    """
    Converts one payload format into a CreatureRecord.
    
    Subclasses declare the discriminator fields they require, the pydantic
    schema of the payload and implement _build.
    """
    
    format_tag: str = ""
    required_fields: Dict[str, Any] = {}
    schema: Type[BaseModel]
    
    def __init__(self, config: Optional[ImporterConfig] = None):
        self.config = config or ImporterConfig()
    
    def normalize(self, payload: Mapping[str, Any]) -> CreatureRecord:
        """
        Validate and convert a payload.
        
        :raises: FormatValidationError naming the offending field
        """
        self._check_discriminators(payload)
        model = self._parse(payload)
        record = self._build(model)
        logger.info(
            f"Normalized {self.format_tag} creature '{record.name}': "
            f"{len(record.skills)} skills, {len(record.weapons)} weapons, "
            f"{len(record.abilities)} abilities, {len(record.unresolved_abilities)} unresolved"
        )
        return record
    
    @abstractmethod
    def _build(self, model: BaseModel) -> CreatureRecord:
        pass
    
    def _check_discriminators(self, payload: Mapping[str, Any]) -> None:
        for field, expected in self.required_fields.items():
            actual = payload.get(field)
            if actual != expected:
                raise FormatValidationError(field, expected, actual)
        
        name = payload.get("name")
        if not isinstance(name, str) or not name.strip():
            raise FormatValidationError("name", "non-empty string", name)
    
    def _parse(self, payload: Mapping[str, Any]) -> BaseModel:
        try:
            return self.schema.model_validate(dict(payload))
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error.get("loc", ())) or "payload"
            raise FormatValidationError(
                field,
                error.get("msg", "valid value"),
                error.get("input"),
                message=f"{self.format_tag}: invalid field '{field}': {error.get('msg')}",
            ) from e
    
    # Shared mapping helpers
    
    @staticmethod
    def map_values(source: Mapping[str, Any], table: Mapping[str, str], label: str) -> Dict[str, int]:
        """
        Map source keys to canonical keys, dropping unknown keys.
        
        Values are parsed leniently and clamped to 0.
        """
        values: Dict[str, int] = {}
        for key, raw in source.items():
            canonical = table.get(key)
            if canonical is None:
                logger.debug(f"Dropping unknown {label} key '{key}'")
                continue
            values[canonical] = non_negative(raw, f"{label}.{key}")
        return values
    
    def canonical_skill(self, key: str) -> Optional[str]:
        """Return key if it is a configured skill."""
        key = key.strip().lower()
        return key if key in self.config.skill_groups.all_skills() else None
    
    def make_skill(self, value: Any, points: Any, field: str) -> SkillValue:
        return SkillValue(value=non_negative(value, field), points=non_negative(points, f"{field}.points"))
    
    def unresolved(
        self,
        name: str,
        kind: AbilityKind,
        level: Any,
        skill_hint: Optional[str] = None,
        category: Optional[str] = None,
        source: Optional[str] = None,
    ) -> UnresolvedAbilityRef:
        default = (
            self.config.default_mastery_ceiling
            if kind == AbilityKind.MASTERY
            else self.config.default_spell_ceiling
        )
        return UnresolvedAbilityRef(
            name=name.strip(),
            kind=kind,
            level_ceiling=max(coerce_int(level, default=default, field=f"{name}.level"), 0),
            skill_hint=skill_hint,
            category=category,
            source=source or self.format_tag,
        )


def non_negative(value: Any, field: str) -> int:
    parsed = coerce_int(value, field=field)
    if parsed < 0:
        logger.warning(f"Negative value {parsed} for {field}, clamping to 0")
        return 0
    return parsed


class CreatureNormalizer:
    """
    Entry point for payload normalization.
    
    Usage:
        normalizer = CreatureNormalizer(config)
        record = normalizer.normalize(payload)
    """
    
    def __init__(self, config: Optional[ImporterConfig] = None):
        self.config = config or ImporterConfig()
        self._normalizers: Dict[str, FormatNormalizer] = {}
    
    def normalizer_for(self, tag: str) -> FormatNormalizer:
        if tag not in self._normalizers:
            self._normalizers[tag] = _REGISTRY[tag](self.config)
        return self._normalizers[tag]
    
    def normalize(self, payload: Mapping[str, Any]) -> CreatureRecord:
        return self.normalizer_for(detect_format(payload)).normalize(payload)
