import streamlit as st

from config.settings import get_settings
from domain.constants import VIEW_REASON
from domain.models import Cloth
from services import cart as cart_svc
from services import clothes as clothes_svc
from services import favorites as fav_svc
from services import recommendations as rec_svc
from ui import navigation
from ui.components import cloth_card, detail_header, tag, tags
from ui.session import get_client, current_user_id, flash
from utils.formatting import format_price


def _record_view(client, user_id: str, cloth: Cloth) -> bool:
    """Log the view once per item per session. Returns True once recorded."""
    recorded = st.session_state.setdefault('recorded_views', set())
    key = str(cloth.id)
    if key in recorded:
        return True
    result = rec_svc.add_recommendation(client, user_id, cloth.id, VIEW_REASON)
    if result.ok:
        recorded.add(key)
    return result.ok


def _purchase_panel(client, user_id, cloth: Cloth):
    sizes = cloth.size_options
    colors = cloth.color_options

    size = color = None
    c1, c2, c3 = st.columns([2, 2, 1])
    if sizes:
        size = c1.radio("可选尺寸", sizes, horizontal=True, key=f"size_{cloth.id}")
    if colors:
        color = c2.radio("可选颜色", colors, horizontal=True, key=f"color_{cloth.id}")
    quantity = int(c3.number_input("数量", min_value=1, max_value=99, value=1, step=1,
                                   key=f"qty_{cloth.id}"))

    b_cart, b_fav = st.columns(2)
    if b_cart.button("🛒 加入购物车", key=f"add_cart_{cloth.id}", type="primary"):
        if not user_id:
            st.warning("请先登录后再加入购物车")
        else:
            result = cart_svc.add_to_cart(client, user_id, cloth.id, size, color, quantity)
            if result.ok:
                flash("已加入购物车", 'success')
                st.rerun()
            st.error(f"加入购物车失败: {result.error}")

    favorited = False
    if user_id:
        check = fav_svc.is_favorite(client, user_id, cloth.id)
        favorited = bool(check.data) if check.ok else False
    if b_fav.button("💔 取消收藏" if favorited else "❤️ 收藏", key=f"fav_{cloth.id}"):
        if not user_id:
            st.warning("请先登录后再收藏")
        else:
            if favorited:
                result = fav_svc.remove_from_favorites(client, user_id, cloth.id)
                message = "已取消收藏"
            else:
                result = fav_svc.add_to_favorites(client, user_id, cloth.id)
                message = "已加入收藏"
            if result.ok:
                flash(message, 'info' if favorited else 'success')
                st.rerun()
            st.error(f"操作失败: {result.error}")


def view():
    settings = get_settings()
    client = get_client()
    user_id = current_user_id()
    cloth_id = navigation.selected_cloth_id()

    if st.button("← 返回"):
        navigation.go_to(navigation.HOME)

    if not cloth_id:
        st.error("服装不存在")
        return

    with st.spinner("正在加载服装详情..."):
        result = clothes_svc.get_cloth_by_id(client, cloth_id)

    if not result.ok:
        st.error(f"加载服装详情失败: {result.error}")
        if st.button("返回首页"):
            navigation.go_to(navigation.HOME)
        return
    cloth = result.data
    if cloth is None:
        st.error("服装不存在")
        if st.button("返回首页"):
            navigation.go_to(navigation.HOME)
        return

    recorded = _record_view(client, user_id, cloth) if user_id else False

    left, right = st.columns(2, gap="large")
    with left:
        detail_header(cloth)
    with right:
        st.title(cloth.name)
        st.markdown(f'<span class="price large">{format_price(cloth.price)}</span>', unsafe_allow_html=True)
        if cloth.description:
            st.write(cloth.description)
        if cloth.size_options:
            st.caption("可选尺寸")
            tags(*(tag(s) for s in cloth.size_options))
        if cloth.color_options:
            st.caption("可选颜色")
            tags(*(tag(c) for c in cloth.color_options))
        st.divider()
        _purchase_panel(client, user_id, cloth)
        if recorded:
            st.success("✅ 已记录您的浏览偏好，将为您推荐相似款式")

    similar = clothes_svc.get_similar_clothes(client, cloth, settings.similar_limit)
    if similar.ok and similar.data:
        st.subheader("相似推荐")
        cols = st.columns(max(len(similar.data), 1))
        for col, item in zip(cols, similar.data):
            with col:
                if cloth_card(item, key_prefix="similar"):
                    navigation.open_cloth(item.id)
