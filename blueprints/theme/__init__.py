"""
Theme Blueprint - Light/dark preference
Handles: toggling and setting the persisted theme
"""

from flask import Blueprint

theme_bp = Blueprint('theme', __name__, url_prefix='/theme')

from . import routes
