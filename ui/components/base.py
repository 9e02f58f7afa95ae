import streamlit as st

PRIMARY_ACCENT = "#667eea"
SECONDARY_ACCENT = "#764ba2"
RED = "#ef4444"
MUTED = "#64748b"
CHIP_BG = "#f1f5f9"


def inject_base_css():
    st.markdown(
        f"""
        <style>
        .hero {{
            background:linear-gradient(135deg,{PRIMARY_ACCENT} 0%,{SECONDARY_ACCENT} 100%);
            color:white; border-radius:16px; padding:2.2rem 1.8rem; margin-bottom:1.6rem; text-align:center;
        }}
        .hero h1 {{color:white; font-size:2.4rem; margin-bottom:.4rem;}}
        .hero p {{opacity:.9; font-size:1.05rem; margin:0;}}
        .cloth-icon {{font-size:3.4rem; text-align:center; padding:1rem 0; background:{CHIP_BG}; border-radius:12px;}}
        .cloth-icon.large {{font-size:7rem; padding:3rem 0;}}
        .tag {{
            display:inline-block; padding:2px 10px; border-radius:999px; font-size:12px; font-weight:600;
            background:{CHIP_BG}; color:#334155; margin-right:6px; margin-bottom:4px;
        }}
        .tag.accent {{background:{PRIMARY_ACCENT}; color:white;}}
        .tag.hot {{background:{RED}; color:white;}}
        .price {{color:{PRIMARY_ACCENT}; font-weight:700; font-size:1.2rem;}}
        .price.large {{font-size:2rem;}}
        .muted {{color:{MUTED}; font-size:.9rem;}}
        .empty-state {{text-align:center; padding:3rem 0; color:{MUTED};}}
        .empty-state .icon {{font-size:3.5rem; margin-bottom:.6rem;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def tag(text: str, variant: str = "") -> str:
    return f'<span class="tag {variant}">{text}</span>'


def tags(*items: str) -> None:
    st.markdown("".join(items), unsafe_allow_html=True)


def empty_state(icon: str, title: str, hint: str = ""):
    hint_html = f'<p>{hint}</p>' if hint else ''
    st.markdown(
        f'<div class="empty-state"><div class="icon">{icon}</div><h3>{title}</h3>{hint_html}</div>',
        unsafe_allow_html=True,
    )


def login_required(subject: str) -> None:
    """Shown instead of cart/favorites when nobody is signed in."""
    st.subheader("请先登录")
    st.caption(f"登录后即可查看和管理您的{subject}")
