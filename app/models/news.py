"""
News Article Model
"""

from datetime import datetime

from app.extensions import db


class NewsArticle(db.Model):
    """News article shown on the public news page"""
    __tablename__ = 'news'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    content = db.Column(db.Text, nullable=False)
    image = db.Column(db.String(500), default='')
    author = db.Column(db.String(100))
    date = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'content': self.content,
            'image': self.image or '',
            'author': self.author,
            'date': self.date.isoformat() if self.date else None,
        }

    def __repr__(self):
        return f'<NewsArticle {self.id} {self.title!r}>'
