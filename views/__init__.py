"""View modules for manual routing.

Every page lives under `views/` and exposes a `view()` function. `app.py` owns
the sidebar navigation and registers each page in `PAGE_REGISTRY`; views
switch pages through `ui.navigation.go_to` instead of importing each other.

Add any new page as a module with a `view()` callable and register it in
`PAGE_REGISTRY` inside `app.py`.
"""
