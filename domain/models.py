from dataclasses import dataclass, field, fields
from typing import List, Dict, Optional, Any
import datetime as _dt

from domain.constants import DEFAULT_USERNAME, UNSET_LABEL


def _now_iso():
    return _dt.datetime.now(_dt.timezone.utc).isoformat()


def _filtered(cls, d: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only keys the dataclass declares (rows may carry extra columns)."""
    allowed = {f.name for f in fields(cls)}
    return {k: v for k, v in (d or {}).items() if k in allowed}


def split_options(raw: Optional[str]) -> List[str]:
    """'S, M ,L' -> ['S', 'M', 'L'] (blank entries dropped)."""
    if not raw:
        return []
    return [part.strip() for part in str(raw).split(',') if part.strip()]


@dataclass
class UserProfile:
    id: str
    email: str = ''
    username: str = DEFAULT_USERNAME
    gender: str = UNSET_LABEL
    style_preference: str = UNSET_LABEL

    @property
    def initial(self) -> str:
        return (self.username or 'U')[0]


@dataclass
class Cloth:
    id: Any
    name: str
    price: float = 0.0
    category: Optional[str] = None
    description: str = ''
    sizes: Optional[str] = None  # comma separated, e.g. "S,M,L"
    colors: Optional[str] = None
    season: Optional[str] = None
    material: Optional[str] = None
    created_at: Optional[str] = None

    @property
    def size_options(self) -> List[str]:
        return split_options(self.sizes)

    @property
    def color_options(self) -> List[str]:
        return split_options(self.colors)


def cloth_from_dict(d: Dict[str, Any]) -> Cloth:
    filtered = _filtered(Cloth, d)
    try:
        filtered['price'] = float(filtered.get('price') or 0)
    except (TypeError, ValueError):
        filtered['price'] = 0.0
    filtered['description'] = filtered.get('description') or ''
    return Cloth(**filtered)


def _joined_cloth(d: Dict[str, Any]) -> Optional[Cloth]:
    # PostgREST embeds the referenced row under the table name
    row = d.get('clothes')
    if isinstance(row, list):
        row = row[0] if row else None
    return cloth_from_dict(row) if row else None


@dataclass
class CartItem:
    id: Any
    user_id: str
    cloth_id: Any
    size: Optional[str] = None
    color: Optional[str] = None
    quantity: int = 1
    created_at: Optional[str] = None
    cloth: Optional[Cloth] = None

    @property
    def line_total(self) -> float:
        price = self.cloth.price if self.cloth else 0.0
        return price * self.quantity


def cart_item_from_dict(d: Dict[str, Any]) -> CartItem:
    filtered = _filtered(CartItem, d)
    filtered['quantity'] = int(filtered.get('quantity') or 1)
    filtered['cloth'] = _joined_cloth(d)
    return CartItem(**filtered)


@dataclass
class FavoriteItem:
    id: Any
    user_id: str
    cloth_id: Any
    created_at: Optional[str] = None
    cloth: Optional[Cloth] = None


def favorite_from_dict(d: Dict[str, Any]) -> FavoriteItem:
    filtered = _filtered(FavoriteItem, d)
    filtered['cloth'] = _joined_cloth(d)
    return FavoriteItem(**filtered)


@dataclass
class Recommendation:
    user_id: Optional[str]
    cloth_id: Any
    reason: Optional[str] = None
    viewed_at: str = field(default_factory=_now_iso)
    id: Any = None
    created_at: Optional[str] = None
    cloth: Optional[Cloth] = None


def recommendation_from_dict(d: Dict[str, Any]) -> Recommendation:
    filtered = _filtered(Recommendation, d)
    filtered.setdefault('user_id', None)
    filtered['cloth'] = _joined_cloth(d)
    if filtered.get('cloth_id') is None:
        filtered['cloth_id'] = filtered['cloth'].id if filtered['cloth'] else None
    if not filtered.get('viewed_at'):
        filtered['viewed_at'] = filtered.get('created_at') or _now_iso()
    return Recommendation(**filtered)
