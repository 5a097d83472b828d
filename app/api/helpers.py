"""
Request parsing shared by the API routes.
"""

from flask import abort, request
from pydantic import ValidationError

from app.schemas import format_validation_error, is_valid_id
from app.services import uploads


def parse_id(raw_id):
    """Reject malformed ids with a 400 before touching the database."""
    if not is_valid_id(raw_id):
        abort(400, description='Invalid id')
    return int(raw_id)


def request_data():
    """Body as a plain dict, from JSON or from (multipart) form fields."""
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            abort(400, description='Request body must be a JSON object')
        return data
    return request.form.to_dict()


def validate_body(schema):
    try:
        return schema.model_validate(request_data())
    except ValidationError as e:
        abort(400, description=format_validation_error(e))


def save_uploaded_image():
    """Store the optional `image` file; returns its URL path or None."""
    storage = uploads.get_uploaded_image(request.files)
    if storage is None:
        return None
    return uploads.save_image(storage)


def not_found():
    abort(404, description='Not found')
