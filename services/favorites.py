"""Favorites: a (user, cloth) pair either exists or it doesn't."""
from typing import Any, List

from domain.constants import TABLES, FAVORITE_CONFLICT_KEYS
from domain.models import FavoriteItem, favorite_from_dict
from services.result import remote_call


@remote_call('favorites.get_user_favorites')
def get_user_favorites(client, user_id: str) -> List[FavoriteItem]:
    resp = (client.table(TABLES['favorites'])
            .select('*, clothes (*)')
            .eq('user_id', user_id)
            .order('created_at', desc=True)
            .execute())
    return [favorite_from_dict(r) for r in resp.data or []]


@remote_call('favorites.add')
def add_to_favorites(client, user_id: str, cloth_id: Any):
    resp = (client.table(TABLES['favorites'])
            .upsert({'user_id': user_id, 'cloth_id': cloth_id}, on_conflict=FAVORITE_CONFLICT_KEYS)
            .execute())
    return resp.data


@remote_call('favorites.remove')
def remove_from_favorites(client, user_id: str, cloth_id: Any):
    resp = (client.table(TABLES['favorites'])
            .delete()
            .eq('user_id', user_id)
            .eq('cloth_id', cloth_id)
            .execute())
    return resp.data


@remote_call('favorites.is_favorite')
def is_favorite(client, user_id: str, cloth_id: Any) -> bool:
    resp = (client.table(TABLES['favorites'])
            .select('id')
            .eq('user_id', user_id)
            .eq('cloth_id', cloth_id)
            .limit(1)
            .execute())
    return bool(resp.data)
