"""HTTPX-based implementation of the ReleaseIndexPort.

Reads the distribution's index.json, a JSON array with one object per
release:

    [{"version": "v20.5.0", "date": "2023-07-18", "lts": false, ...},
     {"version": "v18.17.0", "date": "2023-07-18", "lts": "Hydrogen", ...}]
"""

from __future__ import annotations

from datetime import date
from typing import Any

import httpx

from nvmg.domain.exceptions import ReleaseIndexError
from nvmg.domain.release import ReleaseInfo
from nvmg.domain.settings import DEFAULT_TIMEOUT_SECONDS, NODE_INDEX_URL
from nvmg.usecases.version_parser import parse_version


class HttpxReleaseIndex:
    """HTTPX-based adapter listing published Node.js releases.

    Entries whose version cannot be parsed are skipped; a payload that is
    not a JSON array of objects is rejected as a whole.
    """

    def __init__(
        self,
        url: str = NODE_INDEX_URL,
        client: httpx.Client | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the release index adapter.

        Args:
            url: Location of index.json.
            client: Optional httpx.Client for dependency injection (testing).
            timeout_seconds: Timeout for the request when no client is injected.
        """
        self._url = url
        self._client = client
        self._timeout_seconds = timeout_seconds

    def releases(self) -> list[ReleaseInfo]:
        """Fetch and parse the release index.

        Returns:
            ReleaseInfo for every parseable entry, in index order.

        Raises:
            ReleaseIndexError: For network failures, HTTP errors or a
                payload that is not a list of release objects.
        """
        try:
            if self._client is not None:
                payload = self._get_json(self._client)
            else:
                with httpx.Client(timeout=self._timeout_seconds) as client:
                    payload = self._get_json(client)
        except httpx.HTTPError as e:
            raise ReleaseIndexError(
                f"Failed to fetch release index: {e}", url=self._url, original_error=e
            ) from e
        except ValueError as e:
            raise ReleaseIndexError(
                f"Release index is not valid JSON: {e}",
                url=self._url,
                original_error=e,
            ) from e

        if not isinstance(payload, list):
            raise ReleaseIndexError(
                "Release index must be a JSON array", url=self._url
            )

        releases: list[ReleaseInfo] = []
        for entry in payload:
            if not isinstance(entry, dict):
                raise ReleaseIndexError(
                    f"Release index entry must be an object, got: {entry!r}",
                    url=self._url,
                )
            release = self._parse_entry(entry)
            if release is not None:
                releases.append(release)
        return releases

    def _get_json(self, client: httpx.Client) -> Any:
        response = client.get(self._url, follow_redirects=True)
        response.raise_for_status()
        return response.json()

    def _parse_entry(self, entry: dict[str, Any]) -> ReleaseInfo | None:
        raw_version = entry.get("version")
        if not isinstance(raw_version, str):
            return None
        try:
            version = parse_version(raw_version.removeprefix("v"))
        except ValueError:
            return None

        # "lts" is false for current releases and the codename otherwise
        lts = entry.get("lts")
        codename = lts if isinstance(lts, str) and lts else None

        released_on = None
        raw_date = entry.get("date")
        if isinstance(raw_date, str):
            try:
                released_on = date.fromisoformat(raw_date)
            except ValueError:
                released_on = None

        return ReleaseInfo(version=version, lts=codename, released_on=released_on)
