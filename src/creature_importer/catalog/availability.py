"""
Parsing of the catalog's "available in" field.

Spells list the other skills they can be cast with as a comma separated
string of "skill grade" tokens, e.g. "firemagic 2, lightmagic 3". A token
without a grade counts as grade 0.

Only the token-string form is understood. Older catalogs that store a
structured per-skill list can be supported by adding a parser for that
type to AVAILABILITY_PARSERS.
"""
import logging
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


def parse_token_string(value: str, school_table: Optional[Dict[str, str]] = None) -> Dict[str, int]:
    """
    Parse "skill grade" tokens into a skill -> grade map.
    
    :param value: Raw field value
    :param school_table: Optional mapping of alternative school names to skill keys
    """
    availability: Dict[str, int] = {}
    
    for token in value.split(","):
        parts = token.strip().lower().split()
        if not parts:
            continue
        
        grade = 0
        if len(parts) > 1 and parts[-1].lstrip("+-").isdigit():
            grade = int(parts[-1])
            parts = parts[:-1]
        elif len(parts) == 1 and parts[0].isdigit():
            logger.debug(f"Ignoring grade-only availability token {token!r}")
            continue
        
        skill = " ".join(parts)
        if school_table:
            skill = school_table.get(skill, skill)
        availability[skill] = max(grade, 0)
    
    return availability


AVAILABILITY_PARSERS: Dict[type, Callable[..., Dict[str, int]]] = {
    str: parse_token_string,
}


def parse_available_in(value: Any, school_table: Optional[Dict[str, str]] = None) -> Dict[str, int]:
    """Parse an "available in" field of any supported shape, {} if unknown."""
    if not value:
        return {}
    
    parser = AVAILABILITY_PARSERS.get(type(value))
    if parser is None:
        logger.debug(f"Unsupported availability format: {type(value).__name__}")
        return {}
    
    return parser(value, school_table)
