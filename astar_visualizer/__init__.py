from flask import Flask
from flask_cors import CORS
import os

def _env_int(name, default=None):
    value = os.environ.get(name)
    return int(value) if value else default

def create_app(test_config=None):
    app = Flask(__name__, instance_relative_config=True)
    CORS(app, send_wildcard=True) # Enable CORS for all routes, answering with '*'

    app.config.from_mapping(
        SECRET_KEY=os.environ.get('SECRET_KEY', 'dev'),
        GRID_MIN_SIZE=_env_int('GRID_MIN_SIZE', 5),
        GRID_MAX_SIZE=_env_int('GRID_MAX_SIZE', 100),
        DEFAULT_HEURISTIC=os.environ.get('DEFAULT_HEURISTIC', 'manhattan'),
        SEARCH_MAX_ITERATIONS=_env_int('SEARCH_MAX_ITERATIONS'), # None = no cap
    )

    if test_config is None:
        # load the instance config, if it exists, when not testing
        app.config.from_pyfile('config.py', silent=True)
    else:
        # load the test config if passed in
        app.config.from_mapping(test_config)

    # Register blueprints
    from .routes import api_routes, web_routes
    app.register_blueprint(api_routes.bp)
    app.register_blueprint(web_routes.bp)

    return app
