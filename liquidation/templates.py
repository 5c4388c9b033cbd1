"""
Template Loader

Fetches the decree skeleton at render time. Remote skeletons are downloaded
over HTTP, anything else is read from disk. One attempt, no retry: every
failure surfaces as TemplateUnavailable.
"""

import logging
from pathlib import Path

import requests

from . import config
from .errors import TemplateUnavailable

logger = logging.getLogger(__name__)


class TemplateLoader:
    """Loads a skeleton as raw bytes."""

    def __init__(self, timeout: float | None = None):
        self.timeout = config.TEMPLATE_TIMEOUT if timeout is None else timeout

    def load(self, location: str) -> bytes:
        if not location:
            raise TemplateUnavailable("No decree template configured")

        if location.startswith(("http://", "https://")):
            data = self._fetch_remote(location)
        else:
            data = self._read_local(location)

        if not data:
            raise TemplateUnavailable(f"Decree template is empty: {location}")

        logger.info(f"Loaded decree template {location} ({len(data)} bytes)")
        return data

    def _fetch_remote(self, url: str) -> bytes:
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.Timeout as e:
            raise TemplateUnavailable(f"Timed out fetching decree template {url}: {e}") from e
        except requests.RequestException as e:
            raise TemplateUnavailable(f"Could not fetch decree template {url}: {e}") from e
        return response.content

    def _read_local(self, location: str) -> bytes:
        try:
            return Path(location).read_bytes()
        except OSError as e:
            raise TemplateUnavailable(f"Could not read decree template {location}: {e}") from e
