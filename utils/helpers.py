"""
Helpers Module - Utility functions for common operations
"""

import os
from urllib.parse import urlparse
from flask import current_app
from .data import get_profile


def is_safe_redirect_target(target):
    """Only relative, same-site paths are followed after a form post"""
    if not target:
        return False
    parsed = urlparse(target)
    return not parsed.scheme and not parsed.netloc and target.startswith('/') and not target.startswith('//')


def resolve_redirect_target(*candidates, default='/'):
    """Return the first safe candidate, or ``default``"""
    for candidate in candidates:
        if not candidate:
            continue
        # Referer headers are absolute URLs; keep path and query only
        parsed = urlparse(candidate)
        if parsed.netloc:
            candidate = parsed.path + (f'?{parsed.query}' if parsed.query else '')
        if is_safe_redirect_target(candidate):
            return candidate
    return default


def get_resume_path():
    """Absolute path of the resume document, or None when it is missing"""
    folder = current_app.config.get('RESUME_FOLDER')
    if not folder:
        return None
    filename = get_profile().resume_filename
    path = os.path.join(folder, filename)
    if not os.path.isfile(path):
        current_app.logger.warning(f'Resume document not found at {path}')
        return None
    return path
