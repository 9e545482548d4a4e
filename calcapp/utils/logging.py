"""
Logging utilities for tracking page activity.
"""

from flask import current_app, request
from calcapp.models import LogEntry
from calcapp import db


def log_project_visit(project_name, project_display_name=None):
    """
    Log a visit to a project/page.

    Args:
        project_name (str): The project identifier (e.g., 'calculator')
        project_display_name (str, optional): Human-readable name for the description.
                                              Defaults to project_name if not provided.
    """
    if not current_app.config.get('LOG_VISITS', True):
        return

    display_name = project_display_name or project_name
    visitor = request.headers.get('User-Agent') or 'unknown agent'

    log_entry = LogEntry(
        project=project_name,
        category='Visit',
        description=f"Anonymous user visited {display_name} ({visitor})"
    )
    db.session.add(log_entry)
    db.session.commit()
