import streamlit as st

from services import cart as cart_svc
from ui import navigation
from ui.components import cart_line, order_summary, empty_state, login_required
from ui.session import get_client, current_user_id, flash


def _apply(result, success_message: str, kind: str, failure_message: str):
    if result.ok:
        flash(success_message, kind)
        st.rerun()
    else:
        st.toast(f"{failure_message}: {result.error}", icon="❌")


def view():
    user_id = current_user_id()
    if not user_id:
        login_required("购物车")
        if st.button("返回首页"):
            navigation.go_to(navigation.HOME)
        return

    client = get_client()
    with st.spinner("正在加载购物车..."):
        result = cart_svc.get_user_cart(client, user_id)
    if not result.ok:
        st.error(f"加载购物车失败: {result.error}")
        if st.button("返回首页"):
            navigation.go_to(navigation.HOME)
        return

    items = result.data
    total_count = cart_svc.cart_total_count(items)
    total_price = cart_svc.cart_total_price(items)

    head, action = st.columns([4, 1])
    head.header(f"🛒 我的购物车 ({total_count}件商品)")

    if not items:
        empty_state("🛒", "购物车是空的", "快去挑选喜欢的商品吧！")
        if st.button("去购物", type="primary"):
            navigation.go_to(navigation.HOME)
        return

    # Two-step clear: the first click arms a confirmation row
    if action.button("清空购物车", type="secondary"):
        st.session_state.confirm_clear_cart = True
    if st.session_state.get('confirm_clear_cart'):
        st.warning("确定要清空购物车吗？")
        yes, no = st.columns(2)
        if yes.button("确定清空", type="primary"):
            st.session_state.confirm_clear_cart = False
            _apply(cart_svc.clear_cart(client, user_id), "购物车已清空", 'info', "清空失败")
        if no.button("取消"):
            st.session_state.confirm_clear_cart = False
            st.rerun()

    lines, summary = st.columns([2, 1], gap="large")
    with lines:
        for item in items:
            clicked = cart_line(item)
            if clicked['decrement']:
                _apply(cart_svc.update_cart_item(client, user_id, item.id, item.quantity - 1),
                       "数量已更新", 'success', "更新失败")
            elif clicked['increment']:
                _apply(cart_svc.update_cart_item(client, user_id, item.id, item.quantity + 1),
                       "数量已更新", 'success', "更新失败")
            elif clicked['remove']:
                _apply(cart_svc.remove_from_cart(client, user_id, item.id),
                       "已从购物车移除", 'info', "移除失败")
    with summary:
        order_summary(total_count, total_price)
        if st.button("继续购物"):
            navigation.go_to(navigation.HOME)
