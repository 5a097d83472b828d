"""
Services Package

Data access and upload handling, kept free of request handling.
"""

from app.services import admins, news, players, products, uploads

__all__ = ['admins', 'news', 'players', 'products', 'uploads']
