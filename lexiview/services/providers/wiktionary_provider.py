"""Wiktionary REST API definition client."""

import logging
from typing import Any
from urllib.parse import quote

import requests

from lexiview.exceptions import WordLookupError
from lexiview.models import RawRecord

logger = logging.getLogger(__name__)


def parse_lookup_result(data: Any) -> list[RawRecord]:
    """Convert a decoded definition response into raw records.

    The response maps a source key (a language code for Wiktionary) to a
    list of per-language, per-part-of-speech chunks. Chunks are returned
    in source order, then chunk order. A bare list is treated as a
    single source.

    Args:
        data: Decoded JSON body

    Returns:
        Raw records; malformed chunks are skipped
    """
    if isinstance(data, dict):
        sources = list(data.values())
    elif isinstance(data, list):
        sources = [data]
    else:
        return []

    records = []
    for chunks in sources:
        if not isinstance(chunks, list):
            continue
        for chunk in chunks:
            if isinstance(chunk, dict):
                records.append(RawRecord.from_dict(chunk))
    return records


class WiktionaryClient:
    """Online definition client using the Wiktionary REST API.

    Implements DefinitionClient protocol.
    """

    def __init__(
        self,
        api_url: str = "https://en.wiktionary.org/api/rest_v1/page/definition",
        timeout: float = 10.0,
        user_agent: str = "lexiview",
    ):
        """Initialize with API URL and request timeout.

        Args:
            api_url: Definition endpoint; the escaped word is appended.
            timeout: Seconds to wait for a response.
            user_agent: User-Agent header sent with each request.
        """
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._user_agent = user_agent

    @property
    def name(self) -> str:
        return "Wiktionary"

    def url_for(self, word: str) -> str:
        """Build the lookup URL for a word."""
        return f"{self._api_url}/{quote(word, safe='')}"

    def fetch_definition(self, word: str) -> list[RawRecord]:
        """Look up a word via the definition endpoint.

        Args:
            word: Word to look up.

        Returns:
            Raw records in response order.

        Raises:
            WordLookupError: On a non-200 status, a transport failure or
                a body that is not JSON.
        """
        url = self.url_for(word)
        logger.debug(f"GET {url}")

        try:
            response = requests.get(
                url,
                headers={"User-Agent": self._user_agent, "Accept": "application/json"},
                timeout=self._timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.warning(f"Lookup of {word!r} timed out")
            raise WordLookupError(word, transport_message=f"timed out: {e}") from e
        except requests.RequestException as e:
            logger.warning(f"Lookup of {word!r} failed: {e}")
            raise WordLookupError(word, transport_message=str(e)) from e

        if response.status_code != 200:
            logger.warning(f"Lookup of {word!r} returned HTTP {response.status_code}")
            raise WordLookupError(word, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise WordLookupError(word, transport_message="response is not valid JSON") from e

        return parse_lookup_result(data)
