"""Client record model consumed by the bulk loader."""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from social_registry.core.exceptions import RecordFormatError


def _name_list(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise RecordFormatError(f"Field {key!r} must be a list of names, got {value!r}")
    return list(value)


@dataclass
class ClientRecord:
    """One client entry of a bulk load."""

    name: str
    score: int
    following: List[str] = field(default_factory=list)
    connections: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary representation."""
        return {
            'name': self.name,
            'score': self.score,
            'following': list(self.following),
            'connections': list(self.connections)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClientRecord':
        """
        Create ClientRecord instance from dictionary.

        Raises:
            RecordFormatError: If required keys are missing or lists are malformed
        """
        if not isinstance(data, dict):
            raise RecordFormatError(f"Client record must be an object, got {data!r}")
        missing = [key for key in ('name', 'score') if key not in data]
        if missing:
            raise RecordFormatError(f"Client record is missing {', '.join(missing)}: {data!r}")
        return cls(
            name=data['name'],
            score=data['score'],
            following=_name_list(data, 'following'),
            connections=_name_list(data, 'connections')
        )

    def __repr__(self) -> str:
        return f"ClientRecord(name={self.name!r}, score={self.score!r})"
