"""
Pages Blueprint

Static public pages of the marketing site and uploaded images.
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__)

from app.pages import routes  # noqa: E402, F401
