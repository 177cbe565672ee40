import itertools
from decimal import Decimal
from typing import Any, Optional

import requests
from loguru import logger

from .errors import TransportError


class HttpTransport:
    """Synchronous JSON-RPC 2.0 transport over HTTP.

    Response bodies are parsed with ``parse_float=Decimal`` so that large
    numbers keep the exact digits the node sent.
    """

    def __init__(self, url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.url = url
        self.timeout = timeout
        self.session = session or requests.Session()
        self._ids = itertools.count(1)

    def close(self) -> None:
        self.session.close()

    def __call__(self, method: str, params: Optional[list] = None) -> Any:
        """Make an RPC call to the Seele node."""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params or [],
        }
        logger.debug(f"RPC call {method} id={payload['id']}")

        try:
            response = self.session.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            body = response.json(parse_float=Decimal)
        except requests.JSONDecodeError as e:
            raise TransportError(method, f"invalid JSON body: {e}") from e
        except requests.RequestException as e:
            raise TransportError(method, str(e)) from e

        if not isinstance(body, dict):
            raise TransportError(method, "response is not a JSON-RPC object")
        error = body.get("error")
        if error is not None:
            if isinstance(error, dict):
                raise TransportError(method, str(error.get("message", error)), error.get("code"))
            raise TransportError(method, str(error))

        return body.get("result")
