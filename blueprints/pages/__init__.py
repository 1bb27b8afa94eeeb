"""
Pages Blueprint - Public portfolio pages
Handles: Home, Resume, Projects, Skills, Contact
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__, url_prefix='')

from . import routes
