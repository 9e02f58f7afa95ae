"""In-memory stand-in for the Supabase client used by the service tests.

Supports the slice of the query builder the services use (select / insert /
upsert / update / delete / eq / order / limit / execute) and records every
executed query so tests can assert on table, filters and payloads.
"""
import copy
from types import SimpleNamespace

import pytest


class FakeQuery:
    def __init__(self, client, table):
        self.client = client
        self.table = table
        self.action = None
        self.columns = None
        self.payload = None
        self.on_conflict = None
        self.filters = []
        self.ordering = None
        self.row_limit = None

    def select(self, columns='*'):
        self.action, self.columns = 'select', columns
        return self

    def insert(self, payload):
        self.action, self.payload = 'insert', payload
        return self

    def upsert(self, payload, on_conflict=None):
        self.action, self.payload, self.on_conflict = 'upsert', payload, on_conflict
        return self

    def update(self, payload):
        self.action, self.payload = 'update', payload
        return self

    def delete(self):
        self.action = 'delete'
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.ordering = (column, desc)
        return self

    def limit(self, n):
        self.row_limit = n
        return self

    def _matches(self, row):
        return all(str(row.get(col)) == str(val) for col, val in self.filters)

    def execute(self):
        self.client.queries.append(self)
        if self.client.fail_with is not None:
            raise self.client.fail_with
        rows = self.client.tables.setdefault(self.table, [])
        if self.action == 'select':
            data = [copy.deepcopy(r) for r in rows if self._matches(r)]
            if self.ordering:
                col, desc = self.ordering
                data.sort(key=lambda r: r.get(col) or '', reverse=desc)
            if self.row_limit is not None:
                data = data[:self.row_limit]
        elif self.action == 'insert':
            new = dict(self.payload, id=len(rows) + 1)
            rows.append(new)
            data = [new]
        elif self.action == 'upsert':
            payloads = self.payload if isinstance(self.payload, list) else [self.payload]
            keys = (self.on_conflict or 'id').split(',')
            data = []
            for p in payloads:
                existing = next((r for r in rows if all(r.get(k) == p.get(k) for k in keys)), None)
                if existing is not None:
                    existing.update(p)
                    data.append(existing)
                else:
                    new = dict(p)
                    new.setdefault('id', len(rows) + 1)
                    rows.append(new)
                    data.append(new)
        elif self.action == 'update':
            data = []
            for r in rows:
                if self._matches(r):
                    r.update(self.payload)
                    data.append(r)
        elif self.action == 'delete':
            data = [r for r in rows if self._matches(r)]
            self.client.tables[self.table] = [r for r in rows if not self._matches(r)]
        else:
            raise AssertionError(f"query on {self.table} executed without an action")
        return SimpleNamespace(data=data)


class FakeAuth:
    def __init__(self):
        self.accounts = {}
        self.current = None
        self.calls = []

    def get_user(self):
        self.calls.append('get_user')
        return SimpleNamespace(user=self.current) if self.current else None

    def sign_in_with_password(self, credentials):
        self.calls.append('sign_in')
        account = self.accounts.get(credentials['email'])
        if not account or account['password'] != credentials['password']:
            raise AuthFailure("Invalid login credentials")
        self.current = account['user']
        return SimpleNamespace(user=account['user'], session={'access_token': 'token'})

    def sign_up(self, credentials):
        self.calls.append('sign_up')
        if credentials['email'] in self.accounts:
            raise AuthFailure("User already registered")
        user = {
            'id': f"uid-{len(self.accounts) + 1}",
            'email': credentials['email'],
            'user_metadata': credentials.get('options', {}).get('data', {}),
        }
        self.accounts[credentials['email']] = {'password': credentials['password'], 'user': user}
        return SimpleNamespace(user=user, session=None)

    def sign_out(self):
        self.calls.append('sign_out')
        self.current = None


class AuthFailure(Exception):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class FakeClient:
    def __init__(self, tables=None):
        self.tables = copy.deepcopy(tables or {})
        self.queries = []
        self.fail_with = None
        self.auth = FakeAuth()

    def table(self, name):
        return FakeQuery(self, name)

    @property
    def last_query(self):
        return self.queries[-1]


CLOTHES = [
    {'id': 1, 'name': '碎花连衣裙', 'price': 299, 'category': 'women', 'description': '雪纺',
     'sizes': 'S, M,L', 'colors': '米白,淡蓝', 'season': '春夏', 'material': '雪纺',
     'created_at': '2024-03-01T10:00:00+00:00'},
    {'id': 2, 'name': '阔腿牛仔裤', 'price': 239.5, 'category': 'women', 'description': '',
     'sizes': 'S,M', 'colors': '浅蓝', 'season': None, 'material': None,
     'created_at': '2024-03-03T10:00:00+00:00'},
    {'id': 3, 'name': '商务衬衫', 'price': 199, 'category': 'men', 'description': '免烫',
     'sizes': 'M,L,XL', 'colors': '白色', 'season': '四季', 'material': '棉',
     'created_at': '2024-03-02T10:00:00+00:00'},
    {'id': 4, 'name': '羊绒围巾', 'price': 259, 'category': 'accessories', 'description': '',
     'sizes': '', 'colors': '燕麦,酒红', 'season': '秋冬', 'material': '羊绒',
     'created_at': '2024-02-01T10:00:00+00:00'},
    {'id': 5, 'name': '针织开衫', 'price': 279, 'category': 'women', 'description': '',
     'sizes': 'S,M,L', 'colors': '奶油白', 'season': '春秋', 'material': None,
     'created_at': '2024-01-01T10:00:00+00:00'},
]


def cloth_row(cloth_id):
    return copy.deepcopy(next(c for c in CLOTHES if c['id'] == cloth_id))


@pytest.fixture
def client():
    return FakeClient({'clothes': CLOTHES})
