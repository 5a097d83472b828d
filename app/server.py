"""
Process Runner

Serves the application with werkzeug's threaded WSGI server. Any unhandled
failure (server loop or background thread) is logged, the listener is shut
down and the process exits non-zero so a supervisor can restart it.
"""

import logging
import threading

from werkzeug.serving import make_server

logger = logging.getLogger(__name__)


def run_server(app, host='0.0.0.0', port=None):
    """Serve until interrupted. Returns the process exit code."""
    port = port or app.config['PORT']
    server = make_server(host, port, app, threaded=True)
    failed = threading.Event()

    def on_thread_failure(args):
        name = args.thread.name if args.thread else 'unknown'
        logger.critical('Unhandled failure in thread %s', name,
                        exc_info=(args.exc_type, args.exc_value, args.exc_traceback))
        failed.set()
        threading.Thread(target=server.shutdown, daemon=True).start()

    previous_hook = threading.excepthook
    threading.excepthook = on_thread_failure
    logger.info('🚀 Server running on http://localhost:%s', port)

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        logger.info('Shutting down')
    except Exception:
        logger.critical('Unhandled failure, shutting down', exc_info=True)
        failed.set()
    finally:
        threading.excepthook = previous_hook
        server.server_close()

    return 1 if failed.is_set() else 0
