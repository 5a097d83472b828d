"""
News Service

CRUD for news articles with NO HTTP dependencies.
"""

import logging

from app.extensions import db
from app.models import NewsArticle

logger = logging.getLogger(__name__)


def list_news(limit=None):
    """All articles, newest first."""
    query = NewsArticle.query.order_by(NewsArticle.date.desc(), NewsArticle.id.desc())
    if limit:
        query = query.limit(limit)
    return query.all()


def get_news(news_id):
    return db.session.get(NewsArticle, news_id)


def create_news(data, fallback_author):
    """
    Create an article from a validated NewsCreate.

    Args:
        data: NewsCreate schema
        fallback_author: used when the request carries no author
    """
    article = NewsArticle(
        title=data.title,
        content=data.content,
        image=data.image or '',
        author=data.author or fallback_author,
    )
    db.session.add(article)
    db.session.commit()
    logger.info('News %s created by %s', article.id, article.author)
    return article


def update_news(news_id, data):
    """Apply the fields present in a NewsUpdate. Returns None if missing."""
    article = get_news(news_id)
    if article is None:
        return None

    for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(article, field, value)
    db.session.commit()
    logger.info('News %s updated', news_id)
    return article


def delete_news(news_id):
    article = get_news(news_id)
    if article is None:
        return False
    db.session.delete(article)
    db.session.commit()
    logger.info('News %s deleted', news_id)
    return True
