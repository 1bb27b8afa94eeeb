"""
Kedhar Vishnu Portfolio - Main Application Entry Point
Built using the Application Factory Pattern

This module initializes the Flask application with its configuration,
logging, blueprints and hooks. All route handling is delegated to blueprints.
"""

import os
import logging
from datetime import datetime
from flask import Flask, render_template, request
from config import get_config
from utils.data import get_profile, get_global_meta
from utils.theme import get_theme_store, persist_theme
from utils.ui_helpers import get_nav_links, inject_blueprint_assets, get_page_specific_class

# Import all blueprints
from blueprints.pages import pages_bp
from blueprints.theme import theme_bp


def create_app(config_name=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)

    configure_logging(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio application is running'}, 200

    app.logger.info(f"✓ Application created with {conf.__name__}")
    return app


def configure_logging(app):
    """Set the application log level from LOG_LEVEL"""
    level_name = str(app.config.get('LOG_LEVEL', 'INFO')).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        app.logger.warning(f"Unknown LOG_LEVEL {level_name}, using INFO")
        level = logging.INFO
    app.logger.setLevel(level)
    logging.getLogger('utils').setLevel(level)


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(theme_bp)


def register_error_handlers(app):
    """Register custom error handlers"""

    @app.errorhandler(400)
    def bad_request(e):
        return render_template('400.html'), 400

    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('404.html'), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return render_template('404.html'), 405

    @app.errorhandler(500)
    def internal_server_error(e):
        app.logger.error(f"Server Error: {str(e)}")
        return render_template('500.html'), 500


def register_hooks(app):
    """Register request/response hooks and context processors"""

    @app.context_processor
    def inject_global_vars():
        """Values every template renders against"""
        store = get_theme_store()
        blueprint_assets = inject_blueprint_assets()
        route_name = request.endpoint.split('.')[-1] if request.endpoint else None

        return {
            'current_theme': store.get(),
            'theme_class': store.document_class,
            'profile': get_profile(),
            'nav_links': get_nav_links(request.endpoint),
            'current_year': datetime.now().year,
            'default_meta': get_global_meta(),
            'blueprint_styles': blueprint_assets.get('blueprint_styles', []),
            'current_blueprint': blueprint_assets.get('current_blueprint'),
            'page_class': get_page_specific_class(
                blueprint_assets.get('current_blueprint'), route_name),
        }

    app.after_request(persist_theme)

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data:; "
            "frame-src 'self'; "
            "frame-ancestors 'self';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['Referrer-Policy'] = 'same-origin'
        return response


# Create app instance for gunicorn
app = create_app()

if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=5000,
        debug=(env == 'development')
    )
