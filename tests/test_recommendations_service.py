import datetime as dt
import random

from domain.constants import RECOMMENDATION_REASONS, VIEW_REASON
from services import recommendations as rec_svc
from conftest import FakeClient, cloth_row


def test_add_recommendation_appends_with_timestamp():
    client = FakeClient()
    before = dt.datetime.now(dt.timezone.utc)
    result = rec_svc.add_recommendation(client, 'u1', 3, VIEW_REASON)
    assert result.ok
    q = client.last_query
    assert q.table == 'recommendations'
    assert q.action == 'insert'
    assert q.payload['user_id'] == 'u1'
    assert q.payload['cloth_id'] == 3
    assert q.payload['reason'] == VIEW_REASON
    viewed = dt.datetime.fromisoformat(q.payload['viewed_at'])
    assert viewed >= before


def test_user_history_joins_clothes():
    client = FakeClient({'recommendations': [
        {'id': 1, 'user_id': 'u1', 'cloth_id': 1, 'reason': None, 'viewed_at': '2024-03-01T00:00:00+00:00',
         'created_at': '2024-03-01T00:00:00+00:00', 'clothes': cloth_row(1)},
        {'id': 2, 'user_id': 'u2', 'cloth_id': 3, 'reason': 'x', 'viewed_at': '2024-03-02T00:00:00+00:00',
         'created_at': '2024-03-02T00:00:00+00:00', 'clothes': cloth_row(3)},
    ]})
    result = rec_svc.get_user_recommendations(client, 'u1')
    assert len(result.data) == 1
    rec = result.data[0]
    assert rec.cloth.name == '碎花连衣裙'
    assert rec.reason is None
    assert client.last_query.columns == '*, clothes (*)'


def test_popular_respects_limit_and_fills_cloth_id():
    rows = [{'clothes': cloth_row(i)} for i in (1, 3, 4, 5)]
    client = FakeClient({'recommendations': rows})
    result = rec_svc.get_popular_recommendations(client, limit=3)
    assert result.ok
    assert len(result.data) == 3
    assert [r.cloth_id for r in result.data] == [1, 3, 4]
    assert client.last_query.columns == 'cloth_id, clothes (*)'


def test_random_reason_is_from_fixed_list():
    rng = random.Random(7)
    for _ in range(20):
        assert rec_svc.random_recommendation_reason(rng) in RECOMMENDATION_REASONS
