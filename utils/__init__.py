"""
Utils Package - Centralized utility modules initialization
"""

from .data import get_profile, get_projects, get_skills, get_global_meta
from .theme import (
    ThemeStore,
    ThemeStorageError,
    CookieStorage,
    get_theme_store,
    get_current_theme,
    persist_theme,
    LIGHT,
    DARK
)
from .helpers import (
    is_safe_redirect_target,
    resolve_redirect_target,
    get_resume_path
)
from .ui_helpers import (
    get_nav_links,
    get_blueprint_styles,
    inject_blueprint_assets,
    get_page_specific_class
)

__all__ = [
    # Data
    'get_profile',
    'get_projects',
    'get_skills',
    'get_global_meta',

    # Theme
    'ThemeStore',
    'ThemeStorageError',
    'CookieStorage',
    'get_theme_store',
    'get_current_theme',
    'persist_theme',
    'LIGHT',
    'DARK',

    # Helpers
    'is_safe_redirect_target',
    'resolve_redirect_target',
    'get_resume_path',

    # UI Helpers
    'get_nav_links',
    'get_blueprint_styles',
    'inject_blueprint_assets',
    'get_page_specific_class'
]
