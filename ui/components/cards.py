import streamlit as st
from typing import Dict, Optional

from domain.constants import DEFAULT_SEASON, DEFAULT_HISTORY_REASON
from domain.models import Cloth, CartItem, FavoriteItem, Recommendation
from utils.formatting import category_icon, category_label, format_price, format_total, format_date
from .base import tag, tags


def _icon(category: Optional[str], large: bool = False):
    cls = "cloth-icon large" if large else "cloth-icon"
    st.markdown(f'<div class="{cls}">{category_icon(category)}</div>', unsafe_allow_html=True)


def cloth_card(cloth: Cloth, key_prefix: str = "catalog") -> bool:
    """
    Catalog grid card. Returns True when "查看详情" was clicked.
    """
    with st.container(border=True):
        _icon(cloth.category)
        st.markdown(f"**{cloth.name}**")
        if cloth.description:
            st.caption(cloth.description)
        c1, c2 = st.columns([1, 1])
        c1.markdown(f'<span class="price">{format_price(cloth.price)}</span>', unsafe_allow_html=True)
        c2.markdown(tag(category_label(cloth.category)), unsafe_allow_html=True)
        return st.button("查看详情", key=f"{key_prefix}_view_{cloth.id}")


def popular_card(rec: Recommendation, reason: str, index: int) -> bool:
    """Popular pick card; rows whose cloth was deleted upstream render empty."""
    with st.container(border=True):
        tags(tag("热门", "hot"))
        if rec.cloth is None:
            st.caption("—")
            return False
        st.markdown(f"**{rec.cloth.name}**")
        st.caption(reason)
        return st.button("查看", key=f"popular_{index}_{rec.cloth.id}")


def detail_header(cloth: Cloth):
    _icon(cloth.category, large=True)
    labels = [tag(category_label(cloth.category), "accent"), tag(cloth.season or DEFAULT_SEASON)]
    if cloth.material:
        labels.append(tag(cloth.material))
    tags(*labels)


def cart_line(item: CartItem) -> Dict[str, bool]:
    """
    One cart row with quantity -/+ and remove.

    Returns the clicked actions: {'decrement', 'increment', 'remove'}.
    """
    cloth = item.cloth
    with st.container(border=True):
        c_icon, c_info = st.columns([1, 4])
        with c_icon:
            _icon(cloth.category if cloth else None)
        with c_info:
            st.markdown(f"**{cloth.name if cloth else item.cloth_id}**")
            variant = " | ".join(
                part for part in (
                    f"尺寸: {item.size}" if item.size else "",
                    f"颜色: {item.color}" if item.color else "",
                ) if part
            )
            if variant:
                st.caption(variant)
            st.markdown(
                f'<span class="price">{format_price(cloth.price if cloth else 0)}</span>',
                unsafe_allow_html=True,
            )
            b_minus, b_qty, b_plus, b_remove = st.columns([1, 1, 1, 2])
            decrement = b_minus.button("−", key=f"cart_dec_{item.id}", disabled=item.quantity <= 1)
            b_qty.markdown(f"**{item.quantity}**")
            increment = b_plus.button("+", key=f"cart_inc_{item.id}")
            remove = b_remove.button("移除", key=f"cart_rm_{item.id}")
    return {'decrement': decrement, 'increment': increment, 'remove': remove}


def order_summary(total_count: int, total_price: float):
    with st.container(border=True):
        st.subheader("订单总结")
        c1, c2 = st.columns(2)
        c1.caption("商品数量")
        c2.markdown(f"{total_count}件")
        c1.caption("商品总价")
        c2.markdown(format_total(total_price))
        c1.caption("运费")
        c2.markdown("免运费")
        st.divider()
        st.metric("总计", format_total(total_price))
        # Checkout is not implemented
        st.button("结算订单", key="checkout", disabled=True,
                  help="结算功能暂未开放")


def favorite_card(item: FavoriteItem) -> Dict[str, bool]:
    cloth = item.cloth
    with st.container(border=True):
        _icon(cloth.category if cloth else None)
        if cloth is None:
            st.caption(f"商品 {item.cloth_id} 已下架")
        else:
            st.markdown(f"**{cloth.name}**")
            labels = [tag(category_label(cloth.category))]
            if cloth.season:
                labels.append(tag(cloth.season))
            tags(*labels)
            if cloth.description:
                st.caption(cloth.description)
            c1, c2 = st.columns(2)
            c1.markdown(f'<span class="price">{format_price(cloth.price)}</span>', unsafe_allow_html=True)
            c2.caption(f"收藏于 {format_date(item.created_at)}")
        b_view, b_remove = st.columns([2, 1])
        view = b_view.button("查看详情", key=f"fav_view_{item.cloth_id}", disabled=cloth is None)
        remove = b_remove.button("取消收藏", key=f"fav_rm_{item.cloth_id}")
    return {'view': view, 'remove': remove}


def recommendation_card(rec: Recommendation) -> bool:
    cloth = rec.cloth
    if cloth is None:
        return False
    with st.container(border=True):
        _icon(cloth.category)
        st.markdown(f"**{cloth.name}**")
        st.caption(rec.reason or DEFAULT_HISTORY_REASON)
        c1, c2 = st.columns(2)
        c1.markdown(f'<span class="price">{format_price(cloth.price)}</span>', unsafe_allow_html=True)
        clicked = c2.button("查看", key=f"history_{rec.id}_{cloth.id}")
        st.caption(format_date(rec.viewed_at))
    return clicked
