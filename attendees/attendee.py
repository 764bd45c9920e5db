import json
import logging

from bson import json_util

logger = logging.getLogger(__name__)


def parse_body(raw):
    """Decode a request body as JSON, returning None for empty or invalid input."""
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


class Event:
    """An inbound request as delivered by the function runtime."""

    def __init__(self, method, body=None, headers=None, query=None, path='/'):
        if not method:
            raise ValueError("Event requires a method, got {!r}".format(method))
        self.method = method.upper()
        self.body = body
        self.headers = headers or {}
        self.query = query or {}
        self.path = path

    @classmethod
    def from_request(cls, request):
        """Build an Event from the runtime's raw request (bytes body)."""
        return cls(
            method=getattr(request, 'method', None),
            body=parse_body(getattr(request, 'body', None)),
            headers=getattr(request, 'headers', None),
            query=getattr(request, 'query', None),
            path=getattr(request, 'path', '/'),
        )

    @property
    def github_id(self):
        if isinstance(self.body, dict):
            return self.body.get('githubID')
        return None


class Context:
    """Response builder handed to the function with every event."""

    def __init__(self):
        self.status_code = 200
        self.payload = None

    def status(self, code):
        self.status_code = code
        return self

    def succeed(self, payload):
        self.payload = payload
        return self

    def to_response(self):
        if self.payload is None:
            return {"statusCode": self.status_code, "body": ""}
        return {
            "statusCode": self.status_code,
            "body": json_util.dumps(self.payload),
            "headers": {"Content-Type": "application/json"},
        }


class AttendeeHandler:
    """Records and lists attendees in a MongoDB collection."""

    def __init__(self, collection):
        self.collection = collection

    def __call__(self, event, context):
        """Serve one runtime request and return its response dict.

        Args:
            event: the runtime's request, with a raw bytes body
            context: the runtime's context, unused
        """
        return self.handle(Event.from_request(event), Context()).to_response()

    def handle(self, event, context):
        logger.debug("%s %s", event.method, event.path)
        if event.method == 'POST':
            return self.insert(event, context)
        elif event.method == 'GET':
            return self.find_all(context)
        logger.warning("Method %s not supported", event.method)
        return context.status(405)

    def insert(self, event, context):
        r = self.collection.insert_one({'githubID': event.github_id})
        if r.acknowledged and r.inserted_id is not None:
            return context.status(204)
        logger.warning("Insert of %r was not acknowledged", event.github_id)
        return context.status(500)

    def find_all(self, context):
        result = list(self.collection.find())
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Listing attendees %s", [a.get('githubID') for a in result])
        # raw documents, not just githubID
        return context.status(200).succeed(result)
