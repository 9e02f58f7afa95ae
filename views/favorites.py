import streamlit as st

from services import favorites as fav_svc
from ui import navigation
from ui.components import favorite_card, empty_state, login_required
from ui.session import get_client, current_user_id, flash

GRID_COLUMNS = 3


def view():
    user_id = current_user_id()
    if not user_id:
        login_required("收藏")
        if st.button("返回首页"):
            navigation.go_to(navigation.HOME)
        return

    client = get_client()
    with st.spinner("正在加载收藏..."):
        result = fav_svc.get_user_favorites(client, user_id)
    if not result.ok:
        st.error(f"加载收藏失败: {result.error}")
        if st.button("返回首页"):
            navigation.go_to(navigation.HOME)
        return

    favorites = result.data
    head, action = st.columns([4, 1])
    head.header(f"❤️ 我的收藏 ({len(favorites)}件商品)")

    if not favorites:
        empty_state("❤️", "还没有收藏任何商品", "收藏喜欢的商品，方便以后查看和购买")
        if st.button("去购物收藏", type="primary"):
            navigation.go_to(navigation.HOME)
        return

    if action.button("去收藏更多", type="primary"):
        navigation.go_to(navigation.HOME)

    for start in range(0, len(favorites), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, item in zip(cols, favorites[start:start + GRID_COLUMNS]):
            with col:
                clicked = favorite_card(item)
            if clicked['view']:
                navigation.open_cloth(item.cloth_id)
            if clicked['remove']:
                removed = fav_svc.remove_from_favorites(client, user_id, item.cloth_id)
                if removed.ok:
                    flash("已取消收藏", 'info')
                    st.rerun()
                st.toast(f"取消收藏失败: {removed.error}", icon="❌")
