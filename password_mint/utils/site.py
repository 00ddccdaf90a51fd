"""
Site identifier normalization
Purely lexical - no DNS lookups, no IDNA handling
"""

_SCHEMES = ("http://", "https://")
_WWW_PREFIX = "www."

# Split order matters: path, query, fragment, then port
_HOST_DELIMITERS = ("/", "?", "#", ":")


def normalize_site(raw_site: str) -> str:
    """
    Canonicalize a site, app name or URL
    - trimmed and lowercased
    - leading http:// or https:// removed
    - leading www. removed
    - hostname only when the value looks like a URL (contains . or /)
    Bare names without . or / are returned as-is ("Spotify" -> "spotify").
    """
    site = raw_site.strip().lower()

    for scheme in _SCHEMES:
        if site.startswith(scheme):
            site = site[len(scheme):]
            break

    if site.startswith(_WWW_PREFIX):
        site = site[len(_WWW_PREFIX):]

    if "." in site or "/" in site:
        for delimiter in _HOST_DELIMITERS:
            site = site.split(delimiter, 1)[0]

    return site
