"""UrlCodeDownloader: fetches source text over HTTP(S)."""

import urllib.request

from playground.errors import CodeDownloadFailedError

DEFAULT_TIMEOUT = 10.0


class UrlCodeDownloader:
    """Downloads UTF-8 text with a bounded timeout.

    Transport errors, non-2xx responses, timeouts and undecodable bodies all
    raise CodeDownloadFailedError wrapping the underlying error.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, opener=urllib.request.urlopen):
        self.timeout = timeout
        self._opener = opener

    def download(self, url: str) -> str:
        try:
            with self._opener(url, timeout=self.timeout) as response:
                status = getattr(response, "status", 200)
                if not 200 <= status < 300:
                    raise OSError(f"HTTP {status} for {url}")
                return response.read().decode("utf-8")
        except (OSError, ValueError) as error:
            raise CodeDownloadFailedError(error) from error
