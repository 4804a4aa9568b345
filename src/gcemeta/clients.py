from __future__ import annotations

import json
import logging
from collections.abc import Callable
from functools import lru_cache
from typing import Any

import requests
from pydantic import ValidationError

from .core import METADATA_HEADERS, METADATA_URL
from .exceptions import DecodeError, RequestConstructionError, TransportError
from .schemas.metadata import Metadata

logger = logging.getLogger(__name__)


class MetadataClient:
    """
    Reads the full metadata tree from the GCE metadata server.

    Each call to get() issues exactly one request. Nothing is cached and
    nothing is retried; failures surface as MetadataError subclasses.
    """

    def __init__(
        self,
        endpoint_url: str = METADATA_URL,
        session: requests.Session | None = None,
        timeout: float | tuple[float, float] | None = None,
        loads: Callable[[bytes], Any] = json.loads,
    ) -> None:
        self.endpoint_url = endpoint_url
        self.session = session
        self.timeout = timeout
        self.loads = loads

    def get(self) -> Metadata:
        if self.session is not None:
            return self._fetch(self.session)

        # One session per call; metadata traffic must not go through a proxy
        with requests.Session() as session:
            session.trust_env = False
            return self._fetch(session)

    def _fetch(self, session: requests.Session) -> Metadata:
        try:
            request = session.prepare_request(
                requests.Request("GET", self.endpoint_url, headers=METADATA_HEADERS)
            )
        except ValueError as e:
            raise RequestConstructionError(
                f"Invalid metadata URL {self.endpoint_url!r}: {e}"
            ) from e

        logger.debug(f"GET {request.url}")

        try:
            response = session.send(request, timeout=self.timeout, stream=True)
        except (requests.exceptions.InvalidSchema, requests.exceptions.InvalidURL) as e:
            raise RequestConstructionError(
                f"Invalid metadata URL {self.endpoint_url!r}: {e}"
            ) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"Metadata request to {self.endpoint_url} failed: {e}"
            ) from e

        with response:
            logger.debug(f"Metadata server answered {response.status_code}")
            if not 200 <= response.status_code < 300:
                raise TransportError(
                    f"Metadata server returned HTTP {response.status_code}",
                    status_code=response.status_code,
                )
            try:
                body = response.content
            except requests.exceptions.RequestException as e:
                raise TransportError(
                    f"Failed to read metadata response body: {e}"
                ) from e

        logger.debug(f"Decoding {len(body)} bytes of metadata")
        return self._decode(body)

    def _decode(self, body: bytes) -> Metadata:
        try:
            data = self.loads(body)
        except Exception as e:
            # json.loads raises RecursionError on deeply nested documents
            raise DecodeError(f"Metadata response is not valid JSON: {e}") from e

        try:
            return Metadata.model_validate(data)
        except ValidationError as e:
            raise DecodeError(
                f"Metadata response does not match the expected shape: {e}"
            ) from e


# Default client (lazy-loaded and cached; it holds configuration only)


@lru_cache(maxsize=1)
def get_default_client() -> MetadataClient:
    return MetadataClient()


def get(
    endpoint_url: str | None = None, timeout: float | None = None
) -> Metadata:
    """
    Requests metadata from the metadata server.

        meta = gcemeta.get()
        print(meta.project.project_id)
    """
    if endpoint_url is None and timeout is None:
        return get_default_client().get()
    return MetadataClient(
        endpoint_url=METADATA_URL if endpoint_url is None else endpoint_url,
        timeout=timeout,
    ).get()
