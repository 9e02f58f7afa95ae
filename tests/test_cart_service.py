from services import cart as cart_svc
from domain.models import cart_item_from_dict
from conftest import FakeClient, cloth_row


def _cart_client():
    return FakeClient({'cart': [
        {'id': 1, 'user_id': 'u1', 'cloth_id': 1, 'size': 'M', 'color': '米白', 'quantity': 2,
         'created_at': '2024-03-01T00:00:00+00:00', 'clothes': cloth_row(1)},
        {'id': 2, 'user_id': 'u1', 'cloth_id': 3, 'size': 'L', 'color': '', 'quantity': 1,
         'created_at': '2024-03-02T00:00:00+00:00', 'clothes': cloth_row(3)},
        {'id': 3, 'user_id': 'u2', 'cloth_id': 4, 'size': '', 'color': '燕麦', 'quantity': 5,
         'created_at': '2024-03-03T00:00:00+00:00', 'clothes': cloth_row(4)},
    ]})


def test_get_user_cart_only_returns_own_rows_with_cloth():
    client = _cart_client()
    result = cart_svc.get_user_cart(client, 'u1')
    assert result.ok
    assert [i.id for i in result.data] == [2, 1]
    assert result.data[1].cloth.name == '碎花连衣裙'
    q = client.last_query
    assert q.columns == '*, clothes (*)'
    assert ('user_id', 'u1') in q.filters


def test_cart_totals_are_sum_of_price_times_quantity():
    items = cart_svc.get_user_cart(_cart_client(), 'u1').data
    assert cart_svc.cart_total_price(items) == 299 * 2 + 199 * 1
    assert cart_svc.cart_total_count(items) == 3


def test_cart_totals_round_to_cents():
    items = [
        cart_item_from_dict({'id': 1, 'user_id': 'u', 'cloth_id': 2, 'quantity': 3, 'clothes': cloth_row(2)}),
    ]
    assert cart_svc.cart_total_price(items) == 718.5


def test_cart_totals_empty():
    assert cart_svc.cart_total_price([]) == 0
    assert cart_svc.cart_total_count([]) == 0


def test_add_to_cart_upserts_on_composite_key():
    client = _cart_client()
    result = cart_svc.add_to_cart(client, 'u1', 1, 'M', '米白', 4)
    assert result.ok
    q = client.last_query
    assert q.action == 'upsert'
    assert q.on_conflict == 'user_id,cloth_id,size,color'
    rows = [r for r in client.tables['cart'] if r['user_id'] == 'u1' and r['cloth_id'] == 1]
    assert len(rows) == 1
    assert rows[0]['quantity'] == 4


def test_add_to_cart_blank_variant_not_null():
    client = FakeClient()
    cart_svc.add_to_cart(client, 'u1', 4, None, None)
    payload = client.last_query.payload
    assert payload['size'] == ''
    assert payload['color'] == ''
    assert payload['quantity'] == 1


def test_update_quantity_scoped_to_user():
    client = _cart_client()
    result = cart_svc.update_cart_item(client, 'u1', 1, 5)
    assert result.ok
    q = client.last_query
    assert q.payload == {'quantity': 5}
    assert q.filters == [('id', 1), ('user_id', 'u1')]
    assert client.tables['cart'][0]['quantity'] == 5


def test_update_quantity_below_one_makes_no_call():
    client = _cart_client()
    result = cart_svc.update_cart_item(client, 'u1', 1, 0)
    assert not result.ok
    assert client.queries == []


def test_remove_and_clear():
    client = _cart_client()
    assert cart_svc.remove_from_cart(client, 'u1', 2).ok
    assert {r['id'] for r in client.tables['cart']} == {1, 3}
    assert cart_svc.clear_cart(client, 'u1').ok
    assert [r['user_id'] for r in client.tables['cart']] == ['u2']


def test_remove_other_users_row_is_noop():
    client = _cart_client()
    cart_svc.remove_from_cart(client, 'u1', 3)
    assert len(client.tables['cart']) == 3


def test_add_with_quantity_below_one_makes_no_call():
    client = _cart_client()
    result = cart_svc.add_to_cart(client, 'u1', 1, 'M', '米白', quantity=0)
    assert not result.ok
    assert client.queries == []
    assert len(client.tables['cart']) == 3
