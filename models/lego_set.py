# models/lego_set.py
"""
LegoSet record - one entry of the Brickset catalog.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from core.exceptions import ValidationError


def _require_str(data: Dict[str, Any], key: str) -> str:
    if key not in data:
        raise ValidationError(f"Missing required field '{key}'", field=key)
    value = data[key]
    if not isinstance(value, str):
        raise ValidationError(f"Field '{key}' must be a string", field=key, value=value)
    return value


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"Field '{key}' must be a string or null", field=key, value=value)
    return value


@dataclass(frozen=True)
class LegoSet:
    """A LEGO set catalog entry."""
    number: str
    name: str
    pieces: int
    theme: Optional[str] = None
    subtheme: Optional[str] = None
    tags: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Any) -> 'LegoSet':
        """
        Parse a decoded JSON object into a LegoSet.

        Raises:
            ValidationError: if the object does not have the record shape
        """
        if not isinstance(data, dict):
            raise ValidationError("LegoSet record must be a JSON object", value=data)

        pieces = data.get("pieces")
        # bool is an int subclass
        if isinstance(pieces, bool) or not isinstance(pieces, int):
            raise ValidationError("Field 'pieces' must be an integer", field="pieces", value=pieces)

        tags = data.get("tags") or []
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise ValidationError("Field 'tags' must be a list of strings", field="tags", value=tags)

        return cls(
            number=_require_str(data, "number"),
            name=_require_str(data, "name"),
            pieces=pieces,
            theme=_optional_str(data, "theme"),
            subtheme=_optional_str(data, "subtheme"),
            tags=tuple(tags),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "name": self.name,
            "pieces": self.pieces,
            "theme": self.theme,
            "subtheme": self.subtheme,
            "tags": list(self.tags)
        }
