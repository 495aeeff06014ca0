"""Rewrite Gist and GitHub links so that they point at raw file contents."""

from urllib.parse import urlsplit, urlunsplit

GIST_HOST = "gist.github.com"
GITHUB_MARKER = "github.com/"
RAW_GITHUB_PREFIX = "https://raw.githubusercontent.com/"


def normalize_code_url(url: str) -> str:
    """Return the raw-content URL for *url*.

    Gist pages get ``/raw`` appended to their path unless they already point
    at raw content. GitHub file pages are moved to the raw content host with
    the ``/blob/`` segment dropped. Anything else is returned unchanged.
    """
    if GIST_HOST in url:
        if "/raw" in url:
            return url
        parts = urlsplit(url)
        return urlunsplit(parts._replace(path=parts.path.rstrip("/") + "/raw"))

    marker = url.find(GITHUB_MARKER)
    if marker == -1:
        return url
    suffix = url[marker + len(GITHUB_MARKER):]
    return RAW_GITHUB_PREFIX + suffix.replace("/blob/", "/")
