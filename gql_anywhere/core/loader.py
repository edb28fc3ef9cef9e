"""Loading of documents, data and variables.

Documents are parsed with graphql-core. Data is JSON read from a local file
or fetched over HTTP with httpx.
"""

import json
import os
from typing import Any

import httpx
from graphql import DocumentNode, parse

from .auth import Auth, NoAuth

DOCUMENT_EXTENSIONS = (".graphql", ".gql")


def load_document(source: DocumentNode | str) -> DocumentNode:
    """Return a parsed document.

    Accepts an already-parsed document, a path to a .graphql/.gql file, or
    query text.
    """
    if isinstance(source, DocumentNode):
        return source
    if source.endswith(DOCUMENT_EXTENSIONS) and os.path.isfile(source):
        with open(source) as f:
            source = f.read()
    return parse(source)


def is_url(source: str) -> bool:
    """Check if a data source is an HTTP(S) URL."""
    return source.startswith(("http://", "https://"))


def load_json(
    source: str,
    auth: Auth | None = None,
    timeout: float = 30.0,
    transport: httpx.BaseTransport | None = None,
) -> Any:
    """Load JSON data from a URL or a local file.

    Args:
        source: http(s) URL or file path
        auth: Authentication handler for URL sources
        timeout: Request timeout in seconds
        transport: Optional httpx transport (e.g. httpx.MockTransport)

    Raises:
        httpx.HTTPError: If the request fails or returns an error status
        json.JSONDecodeError: If the content is not valid JSON
    """
    if not is_url(source):
        with open(source) as f:
            return json.load(f)

    headers = {"Accept": "application/json"}
    headers.update((auth or NoAuth()).get_headers())
    with httpx.Client(timeout=timeout, headers=headers, transport=transport) as client:
        response = client.get(source)
        response.raise_for_status()
        return response.json()


def load_variables(source: str | None) -> dict[str, Any]:
    """Load variables from a JSON object string or a JSON file."""
    if source is None:
        return {}
    if source.lstrip().startswith("{"):
        variables = json.loads(source)
    else:
        with open(source) as f:
            variables = json.load(f)
    if not isinstance(variables, dict):
        raise ValueError("Variables must be a JSON object")
    return variables
