import streamlit as st

from config.settings import get_settings
from domain.constants import CATEGORIES, ALL_CATEGORIES
from services import clothes as clothes_svc
from services import recommendations as rec_svc
from ui import navigation
from ui.components import cloth_card, popular_card, empty_state
from ui.session import get_client, current_user

GRID_COLUMNS = 3


def _category_filter() -> str:
    st.subheader("精选分类")
    if 'selected_category' not in st.session_state:
        st.session_state.selected_category = ALL_CATEGORIES
    cols = st.columns(len(CATEGORIES))
    for col, (value, label) in zip(cols, CATEGORIES):
        active = st.session_state.selected_category == value
        if col.button(label, key=f"category_{value}", type="primary" if active else "secondary"):
            st.session_state.selected_category = value
            st.rerun()
    return st.session_state.selected_category


def view():
    settings = get_settings()
    client = get_client()

    st.markdown(
        """<div class="hero"><h1>发现你的专属风格</h1>
        <p>基于AI算法的个性化服装推荐，为您打造完美形象</p></div>""",
        unsafe_allow_html=True,
    )
    if current_user() is None:
        if st.button("立即体验个性化推荐 ▶", type="primary"):
            navigation.go_to(navigation.PROFILE)

    category = _category_filter()

    with st.spinner("正在加载时尚推荐..."):
        catalog = clothes_svc.load_catalog(client, category)
        popular = rec_svc.get_popular_recommendations(client, settings.popular_limit)

    if not catalog.ok:
        st.error(f"加载数据失败: {catalog.error}")
        if st.button("重试"):
            st.rerun()
        return

    label = dict(CATEGORIES).get(category, "")
    st.subheader("所有服装" if category == ALL_CATEGORIES else label)

    items = catalog.data
    if not items:
        empty_state("👕", "暂无该分类的服装数据")
    else:
        for start in range(0, len(items), GRID_COLUMNS):
            cols = st.columns(GRID_COLUMNS)
            for col, cloth in zip(cols, items[start:start + GRID_COLUMNS]):
                with col:
                    if cloth_card(cloth):
                        navigation.open_cloth(cloth.id)

    # Popular picks are best effort; a failure here doesn't hide the catalog
    picks = (popular.data or [])[:settings.popular_limit] if popular.ok else []
    if picks:
        st.subheader("热门推荐")
        # Reasons are fixed per session so they don't reshuffle on every click
        reasons = st.session_state.setdefault('popular_reasons', {})
        for start in range(0, len(picks), GRID_COLUMNS):
            cols = st.columns(GRID_COLUMNS)
            for offset, (col, rec) in enumerate(zip(cols, picks[start:start + GRID_COLUMNS])):
                index = start + offset
                reason = reasons.setdefault(index, rec_svc.random_recommendation_reason())
                with col:
                    if popular_card(rec, reason, index):
                        navigation.open_cloth(rec.cloth.id)
