import logging

from pymongo import MongoClient

from .attendee import AttendeeHandler
from .config import get_config

config = get_config()
logging.basicConfig(level=config.log_level)

client = MongoClient(config.uri)
attendee_handler = AttendeeHandler(client[config.database][config.collection])


def handle(event, context):
    """handle a request to the function
    Args:
        event: request method, raw body, headers, query and path
        context: function context
    Returns:
        dict: statusCode, body and headers
    """
    return attendee_handler(event, context)
