"""
Player Model
"""

from datetime import datetime

from app.extensions import db


def empty_stats():
    return {'kills': 0, 'deaths': 0, 'assists': 0, 'kdRatio': 0.0}


class Player(db.Model):
    """Roster player with socials, stats and history"""
    __tablename__ = 'players'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    nickname = db.Column(db.String(100), nullable=False)
    role = db.Column(db.String(50), nullable=False)
    game = db.Column(db.String(100), nullable=False)
    bio = db.Column(db.Text, default='')
    image = db.Column(db.String(500), default='')

    # Nested documents
    social_media = db.Column(db.JSON, default=dict)
    stats = db.Column(db.JSON, default=empty_stats)
    achievements = db.Column(db.JSON, default=list)
    previous_teams = db.Column(db.JSON, default=list)

    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'nickname': self.nickname,
            'role': self.role,
            'game': self.game,
            'bio': self.bio or '',
            'image': self.image or '',
            'socialMedia': self.social_media or {},
            'stats': self.stats or empty_stats(),
            'achievements': self.achievements or [],
            'previousTeams': self.previous_teams or [],
            'createdAt': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Player {self.nickname}>'
