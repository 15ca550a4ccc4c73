import logging
from typing import Dict, Optional, Tuple

import requests
from graphql import get_introspection_query

from .errors import ConfigurationError, FetchError

logger = logging.getLogger(__name__)

# The canonical query; its TypeRef fragment unwraps a fixed number of levels,
# which is a convention of the query text and not a limit of the printer.
INTROSPECTION_QUERY = get_introspection_query(descriptions=True, directive_is_repeatable=True)


def parse_header(header: str) -> Tuple[str, str]:
    """Split 'Name: value' on the first colon.

    Raises ConfigurationError if there is no colon or no name.
    """
    name, sep, value = header.partition(':')
    name = name.strip()
    if not sep or not name:
        raise ConfigurationError(
            f"Invalid header format. Expected 'name: value', got {header!r}")
    return name, value.strip()

def _error_message(response: requests.Response) -> str:
    """Prefer the messages of a GraphQL error body over the raw text."""
    try:
        body = response.json()
    except ValueError:
        body = None
    errors = body.get('errors') if isinstance(body, dict) else None
    if isinstance(errors, list):
        messages = [
            e['message'] for e in errors
            if isinstance(e, dict) and isinstance(e.get('message'), str)
        ]
        if messages:
            return f"Server returned status {response.status_code}: " + '; '.join(messages)
    return f"Server returned status {response.status_code}: {response.text}"

def fetch_introspection(endpoint: str, header: Optional[str] = None) -> str:
    """POST the introspection query to `endpoint` and return the raw JSON text.

    `header` is an optional extra request header of the form 'Name: value'.
    Configuration is checked before anything goes over the network.
    """
    if not endpoint:
        raise ConfigurationError("GraphQL endpoint URL is required")
    headers: Dict[str, str] = {'Content-Type': 'application/json'}
    if header:
        name, value = parse_header(header)
        headers[name] = value

    logger.info("Sending introspection query to %s", endpoint)
    try:
        response = requests.post(
            endpoint, json={'query': INTROSPECTION_QUERY}, headers=headers)
    except requests.RequestException as e:
        raise FetchError(f"Error sending request to {endpoint}: {e}") from e

    if not 200 <= response.status_code < 300:
        raise FetchError(_error_message(response), status_code=response.status_code)
    logger.info("Received %d bytes from %s", len(response.content), endpoint)
    return response.text
