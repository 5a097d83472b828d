"""
API Blueprint

Public read API and the session-gated admin API for news, players and
products. Errors under /api are always answered with JSON.
"""

from flask import Blueprint

api_bp = Blueprint('api', __name__, url_prefix='/api')

from app.api import news, players, products  # noqa: E402, F401
