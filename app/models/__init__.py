"""
Models Package

Exports all models for easy importing.
"""

from app.models.admin import Admin
from app.models.news import NewsArticle
from app.models.player import Player
from app.models.product import Product

__all__ = ['Admin', 'NewsArticle', 'Player', 'Product']
