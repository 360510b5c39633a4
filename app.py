"""
app.py — Flask entry point for the terrace planner dashboard.

Initializes the Flask app, loads grid settings (defaults, then environment,
then test_config) and registers all route blueprints.

Run: python app.py → localhost:5000
"""

import os
from flask import Flask
from flask_wtf.csrf import CSRFProtect

from routes.main import main_bp
from routes.planner import planner_bp
from routes.recommendations import recommendations_bp
from routes.tracker import tracker_bp
from routes.export import export_bp


def _env_int(name, default):
    value = os.environ.get(name)
    return int(value) if value else default


def create_app(test_config=None):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.secret_key = os.environ.get('TERRACE_SECRET_KEY', 'terrace-planner-local-secret-key')
    app.config['WTF_CSRF_CHECK_DEFAULT'] = True
    app.config['TEMPLATES_AUTO_RELOAD'] = True

    # Grid editor settings (slider bounds follow the dashboard's 5-25 ft range)
    app.config['DEFAULT_GRID_ROWS'] = _env_int('TERRACE_DEFAULT_ROWS', 15)
    app.config['DEFAULT_GRID_COLS'] = _env_int('TERRACE_DEFAULT_COLS', 15)
    app.config['MIN_GRID_SIZE'] = _env_int('TERRACE_MIN_SIZE', 5)
    app.config['MAX_GRID_SIZE'] = _env_int('TERRACE_MAX_SIZE', 25)
    app.config['WATERING_LOG_DISPLAY'] = 14
    app.config['MAX_WORKSPACES'] = _env_int('TERRACE_MAX_WORKSPACES', 256)

    if test_config:
        app.config.update(test_config)

    csrf = CSRFProtect(app)

    if not (app.config['MIN_GRID_SIZE']
            <= app.config['DEFAULT_GRID_ROWS'] <= app.config['MAX_GRID_SIZE']
            and app.config['MIN_GRID_SIZE']
            <= app.config['DEFAULT_GRID_COLS'] <= app.config['MAX_GRID_SIZE']):
        app.logger.warning(
            "Default grid %sx%s is outside the editor bounds %s-%s",
            app.config['DEFAULT_GRID_ROWS'], app.config['DEFAULT_GRID_COLS'],
            app.config['MIN_GRID_SIZE'], app.config['MAX_GRID_SIZE'],
        )

    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(planner_bp)
    app.register_blueprint(recommendations_bp)
    app.register_blueprint(tracker_bp)
    app.register_blueprint(export_bp)

    return app


if __name__ == '__main__':
    app = create_app()
    # Debug mode: enabled by default for development (auto-reload on file changes)
    # Set FLASK_DEBUG=0 to disable for production
    debug = os.environ.get('FLASK_DEBUG', '1') != '0'
    app.run(host='localhost', port=5000, debug=debug)
