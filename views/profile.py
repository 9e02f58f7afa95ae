import streamlit as st

from config.settings import get_settings
from core.logging import get_logger
from services import users as user_svc
from services import recommendations as rec_svc
from ui import navigation
from ui.components import auth_form, recommendation_card, empty_state
from ui.session import get_client, current_user, set_user, flash

logger = get_logger(__name__)

GRID_COLUMNS = 3
FEATURES = [
    "✓ 基于您的浏览历史智能推荐",
    "✓ 根据风格偏好精准匹配",
    "✓ 记录您的喜欢和收藏",
    "✓ 季节性趋势分析推荐",
]


def sign_out():
    result = user_svc.sign_out(get_client())
    if not result.ok:
        # the local session is dropped regardless
        logger.warning("Sign out failed upstream", error=result.error)
    set_user(None)
    flash("已退出登录", 'info')
    navigation.go_to(navigation.HOME)


def _profile_view(user):
    settings = get_settings()
    profile = user_svc.profile_from_user(user)

    with st.container(border=True):
        avatar, ident = st.columns([1, 6])
        avatar.markdown(f"## {profile.initial}")
        ident.header(profile.username)
        ident.caption(profile.email)
        c1, c2 = st.columns(2)
        c1.caption("性别")
        c1.markdown(f"**{profile.gender}**")
        c2.caption("风格偏好")
        c2.markdown(f"**{profile.style_preference}**")
        if st.button("退出登录", key="profile_sign_out"):
            sign_out()

    st.subheader("我的推荐历史")
    result = rec_svc.get_user_recommendations(get_client(), profile.id)
    if not result.ok:
        logger.warning("History unavailable", error=result.error)
    history = (result.data or [])[:settings.history_limit] if result.ok else []
    if not history:
        empty_state("📊", "暂无推荐历史")
        if st.button("开始浏览服装", type="primary"):
            navigation.go_to(navigation.HOME)
        return
    for start in range(0, len(history), GRID_COLUMNS):
        cols = st.columns(GRID_COLUMNS)
        for col, rec in zip(cols, history[start:start + GRID_COLUMNS]):
            with col:
                if recommendation_card(rec):
                    navigation.open_cloth(rec.cloth_id)


def _auth_view():
    if 'auth_is_login' not in st.session_state:
        st.session_state.auth_is_login = True

    _, center, _ = st.columns([1, 2, 1])
    with center:
        mode = st.radio("账户模式", ["登录", "注册"], horizontal=True, label_visibility="collapsed",
                        index=0 if st.session_state.auth_is_login else 1, key="auth_mode")
        st.session_state.auth_is_login = mode == "登录"
        is_login = st.session_state.auth_is_login

        notice = st.session_state.pop('auth_notice', None)
        if notice:
            st.success(notice)

        values = auth_form.render(is_login)
        if values:
            client = get_client()
            with st.spinner("处理中..."):
                if is_login:
                    result = user_svc.sign_in(client, values['email'], values['password'])
                else:
                    result = user_svc.sign_up(client, values['email'], values['password'], {
                        'username': values['username'],
                        'gender': values['gender'],
                        'style_preference': values['style_preference'],
                    })
            if not result.ok:
                st.error(result.error)
            elif is_login:
                set_user(result.data['user'])
                logger.info("User signed in", user_id=result.data['user']['id'])
                flash("登录成功", 'success')
                navigation.go_to(navigation.HOME)
            else:
                logger.info("User registered", email_domain=values['email'].split('@')[-1])
                st.session_state.auth_notice = "注册成功！请检查您的邮箱验证邮件。"
                st.session_state.auth_is_login = True
                st.session_state.pop('auth_mode', None)
                st.rerun()

        with st.container(border=True):
            st.markdown("**🎯 个性化推荐功能**")
            for line in FEATURES:
                st.markdown(line)


def view():
    user = current_user()
    if user:
        _profile_view(user)
    else:
        _auth_view()
