"""
Flask Extensions

Administrator identity is carried by Flask-Login inside a server-side
session (Flask-Session, SQLAlchemy backend), so logging out deletes the
stored session record instead of just expiring a signed cookie.
"""

from flask.sessions import SessionInterface
from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_session import Session

# Database instance
db = SQLAlchemy()

# Login manager for administrator authentication
login_manager = LoginManager()

# Server-side session store
server_session = Session()


class UnavailableSessionInterface(SessionInterface):
    """Stand-in when the session store failed to initialise.

    Every request gets Flask's null session: reads see an empty session and
    any write (such as a login) raises, so no session ever lives in a cookie.
    """

    def open_session(self, app, request):
        return None

    def save_session(self, app, session, response):
        return None
