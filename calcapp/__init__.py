from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import logging

load_dotenv()

db = SQLAlchemy()
csrf = CSRFProtect()

def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object('config')
    if test_config:
        app.config.update(test_config)

    # Validate required settings
    if not app.config.get('SECRET_KEY'):
        raise ValueError("Required environment variable SECRET_KEY is not set")

    # Configure logging
    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    app.jinja_env.trim_blocks = app.config.get('JINJA2_TRIM_BLOCKS', False)
    app.jinja_env.lstrip_blocks = app.config.get('JINJA2_LSTRIP_BLOCKS', False)

    # Initialize extensions
    db.init_app(app)
    csrf.init_app(app)

    # Register blueprints
    from calcapp.projects.calculator.routes import calculator_bp
    from calcapp.projects.calculator.commands import calculator_cli

    app.register_blueprint(calculator_bp)
    app.cli.add_command(calculator_cli)

    # Import models to ensure they're known to Flask-SQLAlchemy
    from calcapp.models import LogEntry

    with app.app_context():
        db.create_all()

    return app
