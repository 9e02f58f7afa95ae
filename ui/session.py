"""Per-browser-session state: the Supabase client, the signed-in user and
the one-shot toast carried across `st.rerun()`.
"""
import streamlit as st
from typing import Any, Dict, Optional

from config.database import create_supabase_client_optional
from core.logging import bind_context, get_logger
from services import users as user_svc

logger = get_logger(__name__)

_CLIENT_KEY = 'supabase_client'
_USER_KEY = 'user'
_FLASH_KEY = 'flash'
_TOAST_ICONS = {'success': '✅', 'error': '❌', 'info': 'ℹ️'}


def get_client():
    """One client per session: the auth session is stored on it."""
    if _CLIENT_KEY not in st.session_state:
        st.session_state[_CLIENT_KEY] = create_supabase_client_optional()
    return st.session_state[_CLIENT_KEY]


def ensure_user_loaded():
    """Ask the backend who is signed in, once per session."""
    if _USER_KEY in st.session_state:
        return
    result = user_svc.get_current_user(get_client())
    if not result.ok:
        logger.warning("Could not check current user", error=result.error)
    set_user(result.data if result.ok else None)


def current_user() -> Optional[Dict[str, Any]]:
    return st.session_state.get(_USER_KEY)


def current_user_id() -> Optional[str]:
    user = current_user()
    return user['id'] if user else None


def set_user(user: Optional[Dict[str, Any]]):
    st.session_state[_USER_KEY] = user
    bind_context(user_id=user['id'] if user else None)
    if user is None:
        st.session_state.pop('recorded_views', None)


def flash(message: str, kind: str = 'success'):
    """Queue a toast for the next run (actions call st.rerun right after)."""
    st.session_state[_FLASH_KEY] = (message, kind)


def render_flash():
    pending = st.session_state.pop(_FLASH_KEY, None)
    if pending:
        message, kind = pending
        st.toast(message, icon=_TOAST_ICONS.get(kind, 'ℹ️'))
