"""
This module contains centralized constants used throughout the storefront,
ensuring a single source of truth for table names, categories and labels.
"""

# Remote table names
TABLES = {
    'clothes': 'clothes',
    'recommendations': 'recommendations',
    'cart': 'cart',
    'favorites': 'favorites',
}

# Composite keys enforced by the backend; upserts resolve conflicts on these
CART_CONFLICT_KEYS = 'user_id,cloth_id,size,color'
FAVORITE_CONFLICT_KEYS = 'user_id,cloth_id'

# Catalog categories in display order. 'all' is the unfiltered view.
ALL_CATEGORIES = 'all'
CATEGORIES = [
    (ALL_CATEGORIES, "全部"),
    ("women", "女装"),
    ("men", "男装"),
    ("kids", "童装"),
    ("accessories", "配饰"),
]
CATEGORY_LABELS = dict(CATEGORIES)
CATEGORY_ICONS = {
    "women": "👗",
    "men": "👔",
    "kids": "👶",
    "accessories": "👜",
}
DEFAULT_CATEGORY_ICON = "👕"
DEFAULT_CATEGORY_LABEL = "服装"
DEFAULT_SEASON = "四季通用"

# Registration form options
GENDERS = ["男", "女", "其他"]
STYLE_PREFERENCES = ["休闲", "商务", "运动", "时尚", "复古", "简约", "甜美", "街头"]

# Profile fallbacks when auth metadata is missing
DEFAULT_USERNAME = "用户"
UNSET_LABEL = "未设置"

# Cosmetic reasons shown next to popular picks (no ranking behind them)
RECOMMENDATION_REASONS = [
    "根据您的浏览历史推荐",
    "热门款式，销量火爆",
    "新季新品，时尚前沿",
    "与您风格相似的用户也喜欢",
    "季节性推荐，适合当前天气",
]
VIEW_REASON = "用户查看详情"
DEFAULT_HISTORY_REASON = "个性化推荐"

MIN_PASSWORD_LENGTH = 6
