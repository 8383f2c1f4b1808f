"""Retrieval of remote scripts."""

from __future__ import annotations

from typing import Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from tailwindcov import __version__ as TAILWINDCOV_VERSION
from tailwindcov.core.errors import RetrievalError
from tailwindcov.core.instrumenter import DEFAULT_PROBE_NAME
from tailwindcov.core.logging import get_logger
from tailwindcov.core.run import CoverageRun, instrument_and_run
from tailwindcov.plugins.sandboxes import SandboxPlugin

LOGGER = get_logger(__name__)

DEFAULT_FETCH_TIMEOUT = 30.0


def fetch_source(url: str, timeout: float = DEFAULT_FETCH_TIMEOUT) -> str:
    """Download a script and return its text.

    Args:
        url: Address of the script.
        timeout: Socket timeout in seconds.

    Returns:
        Decoded script text.

    Raises:
        RetrievalError: On HTTP errors (status >= 400), network errors or
            an undecodable body.
    """
    LOGGER.info(f"Fetching script from {url}")
    request = Request(url, headers={"User-Agent": f"tailwindcov/{TAILWINDCOV_VERSION}"})

    try:
        with urlopen(request, timeout=timeout) as response:  # nosec B310
            status = getattr(response, "status", 200)
            if status >= 400:
                raise RetrievalError(f"Failed to fetch {url}: HTTP {status}", url, status)
            charset = response.headers.get_content_charset() or "utf-8"
            body = response.read()
    except HTTPError as e:
        raise RetrievalError(
            f"Failed to fetch {url}: HTTP {e.code} - {e.reason}", url, e.code
        ) from e
    except URLError as e:
        raise RetrievalError(f"Failed to fetch {url}: {e.reason}", url) from e
    except OSError as e:
        raise RetrievalError(f"Failed to fetch {url}: {e}", url) from e

    try:
        return body.decode(charset)
    except (LookupError, UnicodeDecodeError) as e:
        raise RetrievalError(f"Failed to decode {url} as {charset}: {e}", url, status) from e


def fetch_and_run(
    url: str,
    sandbox: Optional[SandboxPlugin] = None,
    probe_name: str = DEFAULT_PROBE_NAME,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
) -> CoverageRun:
    """Retrieve a remote script, then instrument and run it.

    A retrieval failure raises RetrievalError before anything is parsed
    or executed.
    """
    source = fetch_source(url, timeout=timeout)
    return instrument_and_run(source, sandbox=sandbox, probe_name=probe_name)
