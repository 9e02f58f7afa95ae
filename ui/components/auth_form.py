import streamlit as st
from typing import Dict, Any, Optional

from domain.constants import GENDERS, STYLE_PREFERENCES
from services.users import validate_credentials

_PLACEHOLDER = "请选择"


def render(is_login: bool, key_prefix: str = "auth") -> Optional[Dict[str, Any]]:
    """
    Renders the login or registration form.

    Args:
        is_login (bool): Login form when True, registration form otherwise.
        key_prefix (str): A unique prefix for Streamlit widget keys.

    Returns:
        Dict[str, Any]: The submitted form values, or None if not submitted
        or invalid (errors are shown inline).
    """
    with st.form(f"form_{key_prefix}_{'login' if is_login else 'register'}"):
        st.subheader("欢迎回来" if is_login else "创建账户")

        username = None
        if not is_login:
            username = st.text_input("用户名", placeholder="请输入用户名", key=f"{key_prefix}_username")
        email = st.text_input("邮箱地址", placeholder="请输入邮箱地址", key=f"{key_prefix}_email")
        password = st.text_input("密码", type="password", placeholder="请输入密码", key=f"{key_prefix}_password")

        gender = style_preference = ""
        if not is_login:
            gender = st.selectbox("性别", [_PLACEHOLDER] + GENDERS, key=f"{key_prefix}_gender")
            style_preference = st.selectbox("风格偏好", [_PLACEHOLDER] + STYLE_PREFERENCES,
                                            key=f"{key_prefix}_style")

        submitted = st.form_submit_button("登录" if is_login else "注册")

        if submitted:
            errors = validate_credentials(email, password, username, registering=not is_login)
            if errors:
                for err in errors:
                    st.error(err)
                return None

            values = {'email': email.strip(), 'password': password}
            if not is_login:
                values.update({
                    'username': username.strip(),
                    'gender': "" if gender == _PLACEHOLDER else gender,
                    'style_preference': "" if style_preference == _PLACEHOLDER else style_preference,
                })
            return values

    return None
