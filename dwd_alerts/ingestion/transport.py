"""
HTTP layer — a single blocking GET against the warnings endpoint.

No retries and no caching: one call, one request. Any httpx failure,
including a non-2xx status, surfaces as TransportError with the httpx
exception chained as ``__cause__``.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from dwd_alerts.core.config import settings
from dwd_alerts.core.errors import TransportError

logger = logging.getLogger(__name__)


def _get_text(client: httpx.Client, url: str) -> str:
    response = client.get(url)
    response.raise_for_status()
    return response.text


def fetch_raw_text(
    url: Optional[str] = None,
    *,
    client: Optional[httpx.Client] = None,
    timeout: Optional[float] = None,
) -> str:
    """
    Fetch the raw response body from DWD.

    Parameters
    ----------
    url : str, optional
        Endpoint to query. Defaults to ``settings.DWD_WARNINGS_URL``.
    client : httpx.Client, optional
        Client to issue the request with. It is used as-is and left open;
        useful for tests (``httpx.MockTransport``) and connection reuse.
    timeout : float, optional
        Seconds, for the internally created client only.
        Defaults to ``settings.FETCH_TIMEOUT``.
    """
    target = url or settings.DWD_WARNINGS_URL
    logger.debug("GET %s", target, extra={"url": target})

    try:
        if client is not None:
            return _get_text(client, target)

        with httpx.Client(
            timeout=timeout if timeout is not None else settings.FETCH_TIMEOUT,
            follow_redirects=True,
            headers={"User-Agent": settings.USER_AGENT},
        ) as own_client:
            return _get_text(own_client, target)

    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        raise TransportError(target, f"HTTP {status}", http_status=status) from e
    except httpx.HTTPError as e:
        raise TransportError(target, str(e) or type(e).__name__) from e
