import os

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///calculator.db").replace("postgres://", "postgresql://", 1)
SQLALCHEMY_DATABASE_URI = DATABASE_URL

SECRET_KEY = os.getenv("SECRET_KEY")

# Root logger level for logging.basicConfig
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Record page visits as LogEntry rows
LOG_VISITS = os.getenv("LOG_VISITS", "true").lower() in ("1", "true", "yes")

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
