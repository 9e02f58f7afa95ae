"""Catalog reads. Clothes are read-only from the storefront's side."""
from typing import Any, List, Optional

from domain.constants import TABLES, ALL_CATEGORIES
from domain.models import Cloth, cloth_from_dict
from services.result import ApiResult, remote_call


@remote_call('clothes.get_all')
def get_all_clothes(client) -> List[Cloth]:
    resp = (client.table(TABLES['clothes'])
            .select('*')
            .order('created_at', desc=True)
            .execute())
    return [cloth_from_dict(r) for r in resp.data or []]


@remote_call('clothes.get_by_id')
def get_cloth_by_id(client, cloth_id: Any) -> Optional[Cloth]:
    """Return the item, or None when no row has this id."""
    resp = (client.table(TABLES['clothes'])
            .select('*')
            .eq('id', cloth_id)
            .limit(1)
            .execute())
    rows = resp.data or []
    return cloth_from_dict(rows[0]) if rows else None


@remote_call('clothes.get_by_category')
def get_clothes_by_category(client, category: str) -> List[Cloth]:
    resp = (client.table(TABLES['clothes'])
            .select('*')
            .eq('category', category)
            .order('created_at', desc=True)
            .execute())
    return [cloth_from_dict(r) for r in resp.data or []]


def load_catalog(client, category: str = ALL_CATEGORIES) -> ApiResult:
    if not category or category == ALL_CATEGORIES:
        return get_all_clothes(client)
    return get_clothes_by_category(client, category)


def get_similar_clothes(client, cloth: Cloth, limit: int = 3) -> ApiResult:
    """Same-category items other than `cloth`, capped at `limit`."""
    if not cloth.category:
        return ApiResult(data=[])
    result = get_clothes_by_category(client, cloth.category)
    if not result.ok:
        return result
    similar = [c for c in result.data if str(c.id) != str(cloth.id)]
    return ApiResult(data=similar[:max(limit, 0)])
