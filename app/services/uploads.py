"""
Image Upload Service

Stores a single uploaded image under a server-generated name inside the
upload folder, and removes superseded files on a best-effort basis.
"""

import logging
import os
import secrets
import time

from flask import current_app
from werkzeug.exceptions import BadRequest

logger = logging.getLogger(__name__)

IMAGE_FIELD = 'image'


class UploadError(BadRequest):
    """Rejected upload (wrong extension or MIME type)."""
    description = 'Only image files (jpeg, jpg, png, gif) are allowed'


def _extension(filename):
    _, ext = os.path.splitext(filename or '')
    return ext.lower()


def is_allowed_image(filename, mimetype):
    """Both the extension and the declared MIME type must be on the allow-list."""
    ext = _extension(filename).lstrip('.')
    allowed_ext = current_app.config['ALLOWED_IMAGE_EXTENSIONS']
    allowed_mime = current_app.config['ALLOWED_IMAGE_MIMETYPES']
    return ext in allowed_ext and (mimetype or '').lower() in allowed_mime


def generate_filename(original_name):
    """upload-<epoch ms>-<random suffix><original extension>"""
    suffix = f'{int(time.time() * 1000)}-{secrets.randbelow(10 ** 9)}'
    return f'upload-{suffix}{_extension(original_name)}'


def get_uploaded_image(files):
    """Return the FileStorage for the image field, or None when no file was sent."""
    storage = files.get(IMAGE_FIELD)
    if storage is None or not storage.filename:
        return None
    return storage


def save_image(storage):
    """Validate and write an uploaded image, returning its public URL path.

    Raises:
        UploadError: the file is not an allowed image type
    """
    if not is_allowed_image(storage.filename, storage.mimetype):
        logger.info('Rejected upload %r (%s)', storage.filename, storage.mimetype)
        raise UploadError()

    folder = current_app.config['UPLOAD_FOLDER']
    os.makedirs(folder, exist_ok=True)
    filename = generate_filename(storage.filename)
    storage.save(os.path.join(folder, filename))
    logger.info('Saved upload %s', filename)
    return current_app.config['UPLOAD_URL_PREFIX'] + filename


def is_managed_path(image_path):
    """True when the stored image points into the upload folder."""
    prefix = current_app.config['UPLOAD_URL_PREFIX']
    return bool(image_path) and image_path.startswith(prefix) and \
        len(image_path) > len(prefix)


def remove_managed_image(image_path):
    """Delete a managed upload. Failures are logged, never raised.

    Returns True if a file was removed.
    """
    if not is_managed_path(image_path):
        return False
    # Only the basename is trusted; stored paths never address subfolders.
    filename = os.path.basename(image_path)
    path = os.path.join(current_app.config['UPLOAD_FOLDER'], filename)
    try:
        os.remove(path)
        logger.info('Removed upload %s', filename)
        return True
    except OSError as e:
        logger.warning('Could not remove upload %s: %s', filename, e)
        return False
