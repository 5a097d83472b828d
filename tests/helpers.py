import io

from app.config import TestConfig

ADMIN_USERNAME = TestConfig.ADMIN_USERNAME
ADMIN_PASSWORD = TestConfig.ADMIN_PASSWORD

# Magic bytes are enough, content is never sniffed
PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00' * 16
GIF_BYTES = b'GIF89a' + b'\x00' * 16


def image_file(name='avatar.png', mimetype='image/png', content=PNG_BYTES):
    """Tuple accepted by the werkzeug test client for a file field."""
    return (io.BytesIO(content), name, mimetype)


def uploaded_name(image_path):
    assert image_path.startswith('/uploads/')
    return image_path[len('/uploads/'):]
