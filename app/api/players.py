"""
Player API Routes

Create and update accept JSON or multipart form data with an optional
`image` file. An uploaded file wins over the `image` URL field.
"""

from flask import jsonify

from app.admin.decorators import admin_required
from app.api import api_bp
from app.api.helpers import not_found, parse_id, save_uploaded_image, validate_body
from app.schemas import PlayerCreate, PlayerUpdate
from app.services import players, uploads


@api_bp.route('/players', methods=['GET'])
def list_players():
    return jsonify([p.to_dict() for p in players.list_players()])


@api_bp.route('/players/<player_id>', methods=['GET'])
def get_player(player_id):
    player = players.get_player(parse_id(player_id))
    if player is None:
        not_found()
    return jsonify(player.to_dict())


@api_bp.route('/admin/players', methods=['GET'])
@admin_required
def admin_list_players():
    return list_players()


@api_bp.route('/admin/players/<player_id>', methods=['GET'])
@admin_required
def admin_get_player(player_id):
    return get_player(player_id)


@api_bp.route('/admin/players', methods=['POST'])
@admin_required
def admin_create_player():
    data = validate_body(PlayerCreate)
    image_path = save_uploaded_image()
    try:
        player = players.create_player(data, image_path=image_path)
    except Exception:
        uploads.remove_managed_image(image_path)
        raise
    return jsonify(player.to_dict()), 201


@api_bp.route('/admin/players/<player_id>', methods=['PUT'])
@admin_required
def admin_update_player(player_id):
    player_id = parse_id(player_id)
    data = validate_body(PlayerUpdate)
    if players.get_player(player_id) is None:
        not_found()

    image_path = save_uploaded_image()
    try:
        player = players.update_player(player_id, data, image_path=image_path)
    except Exception:
        uploads.remove_managed_image(image_path)
        raise
    return jsonify(player.to_dict())


@api_bp.route('/admin/players/<player_id>', methods=['DELETE'])
@admin_required
def admin_delete_player(player_id):
    if not players.delete_player(parse_id(player_id)):
        not_found()
    return jsonify({'message': 'Deleted'})
