"""Container health probe for the greeter service.

Run as ``python -m greeter.probe`` from a Docker ``HEALTHCHECK``. Exits 0
when ``/health`` answers with a 2xx status and 1 otherwise.
"""

import logging
import os
import sys

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 3.0


def health_url() -> str:
    url = os.getenv("HEALTHCHECK_URL", "").strip()
    if url:
        return url
    port = os.getenv("PORT", "").strip() or "2593"
    return f"http://127.0.0.1:{port}/health"


def check(url: str, timeout: float = DEFAULT_TIMEOUT) -> bool:
    """Return True if the service at ``url`` reports healthy."""
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        logger.warning(f"Health check failed: {e}")
        return False
    if not 200 <= resp.status_code < 300:
        logger.warning(f"Health check returned {resp.status_code}")
        return False
    return True


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    raw = os.getenv("HEALTHCHECK_TIMEOUT", "").strip()
    try:
        timeout = float(raw) if raw else DEFAULT_TIMEOUT
    except ValueError:
        timeout = 0
    if not timeout > 0:
        logger.error("HEALTHCHECK_TIMEOUT must be a positive number")
        return 1
    return 0 if check(health_url(), timeout=timeout) else 1


if __name__ == "__main__":
    sys.exit(main())
