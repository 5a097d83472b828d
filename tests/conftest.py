import os

import pytest

from app import create_app
from app.config import TestConfig
from app.extensions import db
from app.services.admins import seed_default_admin
from tests.helpers import ADMIN_PASSWORD, ADMIN_USERNAME


@pytest.fixture(scope='session')
def app(tmp_path_factory):
    upload_dir = tmp_path_factory.mktemp('uploads')

    class _Config(TestConfig):
        UPLOAD_FOLDER = str(upload_dir)

    return create_app(_Config)


@pytest.fixture(autouse=True)
def clean_state(app):
    """Empty every table and the upload folder, then reseed the admin."""
    with app.app_context():
        for table in reversed(db.metadata.sorted_tables):
            db.session.execute(table.delete())
        db.session.commit()
        seed_default_admin(ADMIN_USERNAME, ADMIN_PASSWORD)

    folder = app.config['UPLOAD_FOLDER']
    for name in os.listdir(folder):
        os.remove(os.path.join(folder, name))
    yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def admin_client(client):
    r = client.post('/adminp/login', data={'username': ADMIN_USERNAME, 'password': ADMIN_PASSWORD})
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/adminp/dashboard')
    return client


@pytest.fixture()
def upload_folder(app):
    return app.config['UPLOAD_FOLDER']
