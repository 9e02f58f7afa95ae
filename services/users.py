"""User service helpers: sign in/up/out through the backend's auth provider,
plus profile conversion and login-form checks.

Identity and metadata (username, gender, style preference) are owned by the
auth provider; nothing about users is stored locally beyond the session.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional

from domain.constants import DEFAULT_USERNAME, UNSET_LABEL, MIN_PASSWORD_LENGTH
from domain.models import UserProfile
from services.result import remote_call

_USER_KEYS = ('id', 'email', 'user_metadata', 'created_at')


def user_to_dict(user: Any) -> Optional[Dict[str, Any]]:
    """Reduce an auth user (pydantic model or dict) to the keys the app keeps in session."""
    if user is None:
        return None
    if hasattr(user, 'model_dump'):
        raw = user.model_dump()
    elif isinstance(user, dict):
        raw = user
    else:
        raw = {k: getattr(user, k, None) for k in _USER_KEYS}
    out = {k: raw.get(k) for k in _USER_KEYS}
    if out['id'] is not None:
        out['id'] = str(out['id'])
    out['user_metadata'] = out.get('user_metadata') or {}
    return out


@remote_call('users.get_current_user')
def get_current_user(client) -> Optional[Dict[str, Any]]:
    resp = client.auth.get_user()
    return user_to_dict(getattr(resp, 'user', None)) if resp else None


@remote_call('users.sign_in')
def sign_in(client, email: str, password: str) -> Dict[str, Any]:
    resp = client.auth.sign_in_with_password({'email': email, 'password': password})
    return {'user': user_to_dict(resp.user), 'session': resp.session}


@remote_call('users.sign_up')
def sign_up(client, email: str, password: str, user_data: Dict[str, Any]) -> Dict[str, Any]:
    resp = client.auth.sign_up({
        'email': email,
        'password': password,
        'options': {'data': user_data},
    })
    return {'user': user_to_dict(resp.user), 'session': resp.session}


@remote_call('users.sign_out')
def sign_out(client) -> None:
    client.auth.sign_out()


def profile_from_user(user: Dict[str, Any]) -> UserProfile:
    meta = user.get('user_metadata') or {}
    return UserProfile(
        id=str(user.get('id') or ''),
        email=user.get('email') or '',
        username=meta.get('username') or DEFAULT_USERNAME,
        gender=meta.get('gender') or UNSET_LABEL,
        style_preference=meta.get('style_preference') or UNSET_LABEL,
    )


def validate_credentials(email: str, password: str, username: Optional[str] = None,
                         registering: bool = False) -> List[str]:
    """Form-level checks only; the auth provider has the final say."""
    errors = []
    email = (email or '').strip()
    if not email or '@' not in email:
        errors.append("请输入有效的邮箱地址")
    if len(password or '') < MIN_PASSWORD_LENGTH:
        errors.append(f"密码至少需要 {MIN_PASSWORD_LENGTH} 位")
    if registering and not (username or '').strip():
        errors.append("请输入用户名")
    return errors
