import streamlit as st

from config.settings import get_settings
from core.logging import configure_logging_once, get_logger
from ui import navigation
from ui.components import inject_base_css
from ui.session import get_client, ensure_user_loaded, current_user, render_flash

# Import the page rendering functions from the view modules
from views import home, cloth_detail, cart, favorites, profile

logger = get_logger(__name__)

# --- Page Registry ---
# Maps a page key to its label, rendering function, whether it needs a
# signed-in user to appear in the menu, and whether it appears in the menu at all.
PAGE_REGISTRY = {
    navigation.HOME: {
        "label": "🏠 首页",
        "render_func": home.view,
        "requires_login": False,
        "in_menu": True,
    },
    navigation.CLOTH_DETAIL: {
        "label": "👕 服装详情",
        "render_func": cloth_detail.view,
        "requires_login": False,
        "in_menu": False,
    },
    navigation.CART: {
        "label": "🛒 购物车",
        "render_func": cart.view,
        "requires_login": True,
        "in_menu": True,
    },
    navigation.FAVORITES: {
        "label": "❤️ 我的收藏",
        "render_func": favorites.view,
        "requires_login": True,
        "in_menu": True,
    },
    navigation.PROFILE: {
        "label": "🙍 个人中心",
        "render_func": profile.view,
        "requires_login": False,
        "in_menu": True,
    },
}

LOGIN_LABEL = "🔑 登录/注册"


def menu_pages(signed_in: bool):
    """Visible menu entries as (key, label) pairs for the current auth state."""
    entries = []
    for key, page in PAGE_REGISTRY.items():
        if not page["in_menu"] or (page["requires_login"] and not signed_in):
            continue
        label = page["label"]
        if key == navigation.PROFILE and not signed_in:
            label = LOGIN_LABEL
        entries.append((key, label))
    return entries


def menu_entries(page_key: str, signed_in: bool):
    """Menu entries plus the current page when it has no menu slot (the detail page).

    The radio always shows the page being rendered, so clicking any other entry
    changes its value and fires on_change.
    """
    entries = menu_pages(signed_in)
    if page_key not in dict(entries):
        entries.append((page_key, PAGE_REGISTRY[page_key]["label"]))
    return entries


def setup_logging(settings):
    configure_logging_once(json_logs=settings.use_json_logs, log_level=settings.log_level)


def _resolve_page() -> str:
    """Pick the page to render from nav requests, query params or the menu."""
    qs = st.query_params

    if 'nav_target' in st.session_state:
        target = st.session_state.pop('nav_target')
        if target in PAGE_REGISTRY:
            st.session_state.current_page = target
    elif 'current_page' not in st.session_state:
        # Deep link: ?page=cloth_detail&cloth=<id>
        raw = qs.get('page')
        if raw in PAGE_REGISTRY:
            st.session_state.current_page = raw
        if qs.get('cloth'):
            st.session_state.selected_cloth_id = qs.get('cloth')

    page_key = st.session_state.get('current_page', navigation.HOME)
    if page_key not in PAGE_REGISTRY or (PAGE_REGISTRY[page_key]["requires_login"] and current_user() is None):
        page_key = navigation.HOME
    st.session_state.current_page = page_key
    return page_key


def _on_menu_change():
    label = st.session_state.get('navigation_radio')
    for key, page in PAGE_REGISTRY.items():
        if page["label"] == label or (key == navigation.PROFILE and label == LOGIN_LABEL):
            st.session_state.current_page = key
            return


def main():
    """
    Main application router.

    Renders the sidebar header (menu, user badge, sign out) and the selected page.
    """
    settings = get_settings()
    setup_logging(settings)
    st.set_page_config(page_title="时尚推荐", page_icon="👗", layout="wide")
    inject_base_css()

    if get_client() is None:
        st.error("❌ Supabase 配置缺失！请在项目根目录的 .env 文件中设置 SUPABASE_URL 和 SUPABASE_ANON_KEY")

    ensure_user_loaded()
    user = current_user()

    # --- Sidebar ---
    st.sidebar.title("👗 时尚推荐")
    page_key = _resolve_page()
    entries = menu_entries(page_key, signed_in=user is not None)
    labels = [label for _, label in entries]
    # Set before the widget is created so the radio tracks the rendered page
    st.session_state.navigation_radio = dict(entries)[page_key]
    st.sidebar.radio("导航", labels, key="navigation_radio", on_change=_on_menu_change)

    if user:
        st.sidebar.caption(f"已登录: {user.get('email') or user['id']}")
        if st.sidebar.button("退出登录", key="sidebar_sign_out"):
            profile.sign_out()

    # Keep the URL shareable
    st.query_params['page'] = page_key
    if page_key == navigation.CLOTH_DETAIL and navigation.selected_cloth_id():
        st.query_params['cloth'] = navigation.selected_cloth_id()
    elif 'cloth' in st.query_params:
        del st.query_params['cloth']

    render_flash()

    # --- Page Rendering ---
    logger.debug("Rendering page", page=page_key)
    PAGE_REGISTRY[page_key]["render_func"]()


if __name__ == "__main__":
    main()
