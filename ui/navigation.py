"""Page switching helpers shared by views and the router in `app.py`.

Views never import each other; they ask for a page by key and the router picks
it up on the next run.
"""
import streamlit as st
from typing import Any, Optional

HOME = 'home'
CLOTH_DETAIL = 'cloth_detail'
CART = 'cart'
FAVORITES = 'favorites'
PROFILE = 'profile'


def go_to(page_key: str, cloth_id: Optional[Any] = None):
    st.session_state.nav_target = page_key
    if cloth_id is not None:
        st.session_state.selected_cloth_id = str(cloth_id)
    st.rerun()


def open_cloth(cloth_id: Any):
    go_to(CLOTH_DETAIL, cloth_id=cloth_id)


def selected_cloth_id() -> Optional[str]:
    return st.session_state.get('selected_cloth_id')
