"""
News API Routes
"""

from flask import abort, current_app, g, jsonify, request

from app.admin.decorators import admin_required
from app.api import api_bp
from app.api.helpers import not_found, parse_id, validate_body
from app.schemas import NewsCreate, NewsUpdate
from app.services import news


@api_bp.route('/news', methods=['GET'])
def list_news():
    """Public news feed, newest first, optionally capped with ?limit=N."""
    limit = request.args.get('limit')
    if limit is not None:
        if not limit.isascii() or not limit.isdigit() or int(limit) < 1:
            abort(400, description='limit must be a positive integer')
        limit = int(limit)
    return jsonify([a.to_dict() for a in news.list_news(limit=limit)])


@api_bp.route('/news/<news_id>', methods=['GET'])
def get_news(news_id):
    article = news.get_news(parse_id(news_id))
    if article is None:
        not_found()
    return jsonify(article.to_dict())


@api_bp.route('/admin/news', methods=['GET'])
@admin_required
def admin_list_news():
    return jsonify([a.to_dict() for a in news.list_news()])


@api_bp.route('/admin/news/<news_id>', methods=['GET'])
@admin_required
def admin_get_news(news_id):
    return get_news(news_id)


@api_bp.route('/admin/news', methods=['POST'])
@admin_required
def admin_create_news():
    data = validate_body(NewsCreate)
    fallback = g.get('admin_username') or current_app.config['ORGANIZATION_NAME']
    article = news.create_news(data, fallback_author=fallback)
    return jsonify(article.to_dict()), 201


@api_bp.route('/admin/news/<news_id>', methods=['PUT'])
@admin_required
def admin_update_news(news_id):
    news_id = parse_id(news_id)
    data = validate_body(NewsUpdate)
    article = news.update_news(news_id, data)
    if article is None:
        not_found()
    return jsonify(article.to_dict())


@api_bp.route('/admin/news/<news_id>', methods=['DELETE'])
@admin_required
def admin_delete_news(news_id):
    if not news.delete_news(parse_id(news_id)):
        not_found()
    return jsonify({'message': 'Deleted'})
