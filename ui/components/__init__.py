"""
This package provides a collection of reusable UI components for the storefront.

It is organized into several modules:
- `base`: CSS injection, tags and empty states.
- `cards`: Catalog, cart, favorite and history cards.
- `auth_form`: The login / registration form.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    tag,
    tags,
    empty_state,
    login_required,
)

from .cards import (
    cloth_card,
    popular_card,
    detail_header,
    cart_line,
    order_summary,
    favorite_card,
    recommendation_card,
)
