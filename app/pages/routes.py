"""
Public Page Routes
"""

from flask import current_app, send_from_directory

from app.pages import pages_bp
from app.pages.helpers import send_page
from app.schemas import is_valid_id
from app.services import news

PAGES = {
    '/': 'index.html',
    '/team': 'team.html',
    '/news': 'news.html',
    '/store': 'store.html',
    '/lookbook': 'lookbook.html',
    '/contact': 'contact.html',
}


def _page_view(filename):
    def view():
        return send_page(filename)
    return view


for _path, _filename in PAGES.items():
    pages_bp.add_url_rule(_path, _filename.rsplit('.', 1)[0], _page_view(_filename))


@pages_bp.route('/news/<news_id>')
def news_detail(news_id):
    """Detail page only for articles that exist."""
    if not is_valid_id(news_id) or news.get_news(int(news_id)) is None:
        return send_page('404.html', 404)
    return send_page('news-detail.html')


@pages_bp.route('/404')
def not_found_page():
    return send_page('404.html')


@pages_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
