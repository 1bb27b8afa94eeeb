"""
Theme Module - Light/dark display preference

A ThemeStore holds the active theme for one visitor. It reads the stored
value once, keeps it in memory, and writes changes back to its storage.
In the web app the storage is the visitor's ``theme`` cookie.
"""

import logging

from flask import current_app, g, has_request_context, request

logger = logging.getLogger(__name__)

LIGHT = 'light'
DARK = 'dark'
THEMES = (LIGHT, DARK)
DEFAULT_KEY = 'theme'


class ThemeStorageError(Exception):
    """Raised by a storage backend that cannot be read or written"""


def is_valid_theme(value):
    return value in THEMES


def opposite(theme):
    return LIGHT if theme == DARK else DARK


class ThemeStore:
    """
    Explicit holder for the theme flag

    Args:
        storage: mapping-like object with ``get`` and item assignment.
            ``None`` means in-memory only.
        key (str): storage key holding the literal ``light``/``dark``
        default (str): theme used when nothing valid is stored
    """

    def __init__(self, storage=None, key=DEFAULT_KEY, default=LIGHT):
        if not is_valid_theme(default):
            raise ValueError(f'Unknown theme: {default!r}')
        self._storage = storage
        self._key = key
        self._default = default
        self._theme = None

    def get(self):
        if self._theme is None:
            self._theme = self._load()
        return self._theme

    def set(self, value):
        if not is_valid_theme(value):
            raise ValueError(f'Unknown theme: {value!r}')
        self._theme = value
        if self._storage is None:
            return value
        try:
            self._storage[self._key] = value
        except ThemeStorageError as e:
            logger.warning(f'Theme storage unavailable, keeping {value} in memory: {e}')
        return value

    def toggle(self):
        return self.set(opposite(self.get()))

    @property
    def is_dark(self):
        return self.get() == DARK

    @property
    def document_class(self):
        """Class applied to the <html> element"""
        return 'dark' if self.is_dark else ''

    def _load(self):
        if self._storage is None:
            return self._default
        try:
            stored = self._storage.get(self._key)
        except ThemeStorageError as e:
            logger.warning(f'Theme storage unavailable, using {self._default}: {e}')
            return self._default
        if stored is None:
            return self._default
        if not is_valid_theme(stored):
            logger.debug(f'Ignoring unknown stored theme {stored!r}')
            return self._default
        return stored


class CookieStorage:
    """
    Request-scoped storage backed by a browser cookie

    Reads come from the incoming request. Writes are kept as pending and
    flushed onto the response by ``persist_theme``.
    """

    def __init__(self):
        self.pending = {}

    def _require_request(self):
        if not has_request_context():
            raise ThemeStorageError('cookie storage used outside a request')

    def get(self, key):
        self._require_request()
        if key in self.pending:
            return self.pending[key]
        return request.cookies.get(key)

    def __setitem__(self, key, value):
        self._require_request()
        self.pending[key] = value


def get_theme_store():
    """Return the ThemeStore for the current request"""
    if 'theme_store' not in g:
        storage = CookieStorage()
        g.theme_storage = storage
        g.theme_store = ThemeStore(
            storage,
            key=current_app.config.get('THEME_COOKIE_NAME', DEFAULT_KEY),
            default=current_app.config.get('DEFAULT_THEME', LIGHT),
        )
    return g.theme_store


def get_current_theme():
    return get_theme_store().get()


def persist_theme(response):
    """after_request hook: write pending theme changes as cookies"""
    storage = g.get('theme_storage')
    if storage is None or not storage.pending:
        return response

    for key, value in storage.pending.items():
        response.set_cookie(
            key,
            value,
            max_age=current_app.config.get('THEME_COOKIE_MAX_AGE'),
            secure=current_app.config.get('THEME_COOKIE_SECURE', False),
            httponly=False,
            samesite='Lax',
            path='/',
        )
        current_app.logger.debug(f'Persisted theme cookie {key}={value}')
    storage.pending.clear()
    return response
