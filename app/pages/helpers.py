"""
Static page helpers
"""

from flask import current_app, send_from_directory


def send_page(name, status=200):
    """Serve an HTML file from the public folder with the given status."""
    response = send_from_directory(current_app.config['PUBLIC_FOLDER'], name)
    response.status_code = status
    return response
