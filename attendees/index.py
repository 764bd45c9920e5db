import logging
import os
import socket

from flask import Flask, request

from .config import get_config

logger = logging.getLogger(__name__)

METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'HEAD', 'OPTIONS']


class Event:
    def __init__(self):
        self.body = request.get_data()
        self.headers = dict(request.headers)
        self.method = request.method
        self.query = request.args.to_dict()
        self.path = request.path


class Context:
    def __init__(self):
        self.hostname = os.getenv('HOSTNAME', socket.gethostname())


def format_response(res):
    if res is None:
        return ('', 200)
    status = res.get('statusCode', 200)
    return (res.get('body', ''), status, res.get('headers', {}))


def create_app(handle=None):
    """Serve a function the way the python3-http runtime does."""
    if handle is None:
        from . import handler
        handle = handler.handle

    app = Flask(__name__)

    @app.route('/', defaults={'path': ''}, methods=METHODS)
    @app.route('/<path:path>', methods=METHODS)
    def call_handler(path):
        return format_response(handle(Event(), Context()))

    return app


def main():
    config = get_config()
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    port = int(os.getenv('PORT', '5000'))
    logger.info("Serving %s.%s on port %d", config.database, config.collection, port)
    create_app().run(host='0.0.0.0', port=port)


if __name__ == '__main__':
    main()
