"""Cart rows: one per (user, cloth, size, color), quantity kept upstream."""
from typing import Any, Iterable, List, Optional

from domain.constants import TABLES, CART_CONFLICT_KEYS
from domain.models import CartItem, cart_item_from_dict
from services.result import ApiResult, remote_call

CART_SELECT = '*, clothes (*)'


@remote_call('cart.get_user_cart')
def get_user_cart(client, user_id: str) -> List[CartItem]:
    resp = (client.table(TABLES['cart'])
            .select(CART_SELECT)
            .eq('user_id', user_id)
            .order('created_at', desc=True)
            .execute())
    return [cart_item_from_dict(r) for r in resp.data or []]


@remote_call('cart.add')
def _add_to_cart(client, user_id: str, cloth_id: Any, size: Optional[str],
                 color: Optional[str], quantity: int):
    row = {
        'user_id': user_id,
        'cloth_id': cloth_id,
        # blank rather than NULL so the composite key still matches
        'size': size or '',
        'color': color or '',
        'quantity': quantity,
    }
    resp = (client.table(TABLES['cart'])
            .upsert(row, on_conflict=CART_CONFLICT_KEYS)
            .execute())
    return resp.data


def add_to_cart(client, user_id: str, cloth_id: Any, size: Optional[str] = None,
                color: Optional[str] = None, quantity: int = 1) -> ApiResult:
    """Insert the line, or overwrite its quantity if the same size/color is already there."""
    if quantity < 1:
        return ApiResult(error="数量至少为 1")
    return _add_to_cart(client, user_id, cloth_id, size, color, quantity)


@remote_call('cart.update_quantity')
def _update_cart_item(client, user_id: str, item_id: Any, quantity: int):
    resp = (client.table(TABLES['cart'])
            .update({'quantity': quantity})
            .eq('id', item_id)
            .eq('user_id', user_id)
            .execute())
    return resp.data


def update_cart_item(client, user_id: str, item_id: Any, quantity: int) -> ApiResult:
    if quantity < 1:
        # no call is made; the minus button is disabled at 1 anyway
        return ApiResult(error="数量至少为 1")
    return _update_cart_item(client, user_id, item_id, quantity)


@remote_call('cart.remove')
def remove_from_cart(client, user_id: str, item_id: Any):
    resp = (client.table(TABLES['cart'])
            .delete()
            .eq('id', item_id)
            .eq('user_id', user_id)
            .execute())
    return resp.data


@remote_call('cart.clear')
def clear_cart(client, user_id: str):
    resp = (client.table(TABLES['cart'])
            .delete()
            .eq('user_id', user_id)
            .execute())
    return resp.data


def cart_total_price(items: Iterable[CartItem]) -> float:
    return round(sum(item.line_total for item in items), 2)


def cart_total_count(items: Iterable[CartItem]) -> int:
    return sum(item.quantity for item in items)
