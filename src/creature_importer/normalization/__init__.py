"""
Payload normalization.

Every supported format registers a FormatNormalizer under its tag;
CreatureNormalizer dispatches on the tag found in the payload.
"""
from .base import (
    CreatureNormalizer,
    FormatNormalizer,
    detect_format,
    register_format,
    supported_formats,
)
from .features import parse_great_tricks
from .editor_v1 import EditorV1Normalizer
from .editor_v2 import EditorV2Normalizer
from .vtt_import import VttImportNormalizer

__all__ = [
    "CreatureNormalizer",
    "FormatNormalizer",
    "detect_format",
    "register_format",
    "supported_formats",
    "parse_great_tricks",
    "EditorV1Normalizer",
    "EditorV2Normalizer",
    "VttImportNormalizer",
]
