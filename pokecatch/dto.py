from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Dict, Any


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _isoformat(ts: datetime) -> str:
    # the browser client expects the UTC 'Z' suffix rather than '+00:00'
    return ts.isoformat().replace('+00:00', 'Z')


@dataclass
class CaughtPokemon:
    id: int
    name: str
    original_name: str
    type: str
    image_url: str = ''
    is_favorite: bool = False
    caught_at: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "originalName": self.original_name,
            "type": self.type,
            "imageUrl": self.image_url,
            "isFavorite": self.is_favorite,
            "caughtAt": _isoformat(self.caught_at),
        }


@dataclass
class CatchRequest:
    name: Optional[str]
    type: Optional[str]
    image_url: Optional[str] = None

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> 'CatchRequest':
        return CatchRequest(
            name=d.get('name'),
            type=d.get('type'),
            image_url=d.get('imageUrl'),
        )


@dataclass
class RenameRequest:
    new_name: Optional[str]

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> 'RenameRequest':
        return RenameRequest(new_name=d.get('newName'))
