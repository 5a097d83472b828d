"""
StealthUnit CMS Backend
Application Entry Point

Uses the application factory pattern defined in the app package.
"""

import sys

from app import create_app
from app.server import run_server

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    sys.exit(run_server(app))
