"""Recommendation log: append-only view events plus the home page's popular picks.

There is no ranking. "Popular" is whatever rows the backend hands back first,
and the reason shown beside them is picked at random for display.
"""
import datetime as dt
import random
from typing import Any, List, Optional

from domain.constants import TABLES, RECOMMENDATION_REASONS
from domain.models import Recommendation, recommendation_from_dict
from services.result import remote_call


@remote_call('recommendations.get_user_recommendations')
def get_user_recommendations(client, user_id: str) -> List[Recommendation]:
    resp = (client.table(TABLES['recommendations'])
            .select('*, clothes (*)')
            .eq('user_id', user_id)
            .order('created_at', desc=True)
            .execute())
    return [recommendation_from_dict(r) for r in resp.data or []]


@remote_call('recommendations.add')
def add_recommendation(client, user_id: str, cloth_id: Any, reason: str):
    row = {
        'user_id': user_id,
        'cloth_id': cloth_id,
        'reason': reason,
        'viewed_at': dt.datetime.now(dt.timezone.utc).isoformat(),
    }
    resp = client.table(TABLES['recommendations']).insert(row).execute()
    return resp.data


@remote_call('recommendations.get_popular')
def get_popular_recommendations(client, limit: int = 10) -> List[Recommendation]:
    resp = (client.table(TABLES['recommendations'])
            .select('cloth_id, clothes (*)')
            .limit(limit)
            .execute())
    return [recommendation_from_dict(r) for r in resp.data or []]


def random_recommendation_reason(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(RECOMMENDATION_REASONS)
