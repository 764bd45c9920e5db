import logging
import os
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)

SECRET_PATH = '/var/openfaas/secrets/mongodb-password'


class ConfigurationError(Exception):
    """Raised when the function cannot be configured."""

    pass


@dataclass(frozen=True)
class Config:
    password: str
    host: str = 'mongodb'
    port: int = 27017
    username: str = 'root'
    database: str = 'okteto'
    collection: str = 'attendees'
    log_level: str = 'INFO'

    @property
    def uri(self):
        # password goes in as-is
        return "mongodb://{username:s}:{password:s}@{host:s}:{port:d}".format(
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
        )

    def __repr__(self):
        return "Config(host={!r}, port={!r}, database={!r}, collection={!r})".format(
            self.host, self.port, self.database, self.collection)


def read_secret(path=SECRET_PATH):
    try:
        with open(path, 'r') as file:
            return file.read().replace('\n', '')
    except OSError as e:
        raise ConfigurationError(
            "Cannot read MongoDB secret at {}: {}".format(path, e)) from e


@lru_cache(maxsize=None)
def get_config():
    """Build the function configuration from the environment and the secret file.

    Cached so the secret is read once per process.
    """
    port = os.getenv('MONGODB_PORT', '27017')
    try:
        port = int(port)
    except ValueError:
        raise ConfigurationError("MONGODB_PORT must be an integer, got {!r}".format(port))

    config = Config(
        password=read_secret(os.getenv('MONGODB_SECRET_PATH', SECRET_PATH)),
        host=os.getenv('MONGODB_HOST', 'mongodb'),
        port=port,
        username=os.getenv('MONGODB_USERNAME', 'root'),
        database=os.getenv('MONGODB_DATABASE', 'okteto'),
        collection=os.getenv('MONGODB_COLLECTION', 'attendees'),
        log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    )
    logger.debug("Loaded %r", config)
    return config
