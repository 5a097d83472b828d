"""
Player Service

CRUD for roster players. Keeps the upload folder in sync with the stored
image path: superseded managed files are removed after the record change is
committed. File removal is best effort and never undoes the record change.
"""

import logging

from app.extensions import db
from app.models import Player
from app.services.uploads import remove_managed_image

logger = logging.getLogger(__name__)


def _column_values(data, partial):
    values = data.model_dump(exclude_unset=partial, exclude_none=True)
    if data.social_media is not None:
        values['social_media'] = data.social_media.model_dump(exclude_none=True)
    if data.stats is not None:
        values['stats'] = data.stats.model_dump(by_alias=True)
    return values


def list_players():
    return Player.query.order_by(Player.created_at.asc(), Player.id.asc()).all()


def get_player(player_id):
    return db.session.get(Player, player_id)


def create_player(data, image_path=None):
    """
    Create a player from a validated PlayerCreate.

    Args:
        data: PlayerCreate schema
        image_path: path of a freshly uploaded image, wins over data.image
    """
    values = _column_values(data, partial=False)
    if image_path:
        values['image'] = image_path

    player = Player(**values)
    db.session.add(player)
    db.session.commit()
    logger.info('Player %s (%s) created', player.id, player.nickname)
    return player


def update_player(player_id, data, image_path=None):
    """Apply a PlayerUpdate. Returns None if the player does not exist."""
    player = get_player(player_id)
    if player is None:
        return None

    old_image = player.image
    values = _column_values(data, partial=True)
    if image_path:
        values['image'] = image_path

    for field, value in values.items():
        setattr(player, field, value)
    db.session.commit()
    logger.info('Player %s updated', player_id)

    if 'image' in values and values['image'] != old_image:
        remove_managed_image(old_image)
    return player


def delete_player(player_id):
    """Delete the record, then its managed image (best effort)."""
    player = get_player(player_id)
    if player is None:
        return False

    image = player.image
    db.session.delete(player)
    db.session.commit()
    logger.info('Player %s deleted', player_id)

    remove_managed_image(image)
    return True
