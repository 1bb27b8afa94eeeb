"""
Theme Routes - Toggle and set the light/dark preference
"""

from flask import request, redirect, jsonify, abort, current_app
from utils.helpers import resolve_redirect_target
from utils.theme import get_theme_store, get_current_theme
from . import theme_bp


def _back():
    target = resolve_redirect_target(request.form.get('next'),
                                     request.args.get('next'),
                                     request.referrer)
    return redirect(target)


@theme_bp.route('', methods=['GET'])
def current():
    """Current theme for scripts"""
    return jsonify({'theme': get_current_theme()})


@theme_bp.route('/toggle', methods=['POST'])
def toggle():
    """Flip between light and dark, then return to the previous page"""
    store = get_theme_store()
    previous = store.get()
    new_theme = store.toggle()
    current_app.logger.info(f"Theme toggled: {previous} -> {new_theme}")
    return _back()


@theme_bp.route('/<value>', methods=['POST'])
def set_theme(value):
    """Set an explicit theme"""
    try:
        get_theme_store().set(value)
    except ValueError as e:
        current_app.logger.warning(f"Rejected theme change: {str(e)}")
        abort(400)
    return _back()
