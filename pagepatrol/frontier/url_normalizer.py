def normalize_url(url: str) -> str:
    """Canonical dedup key for a URL: trailing slashes stripped

    'https://a/b/' and 'https://a/b' map to the same key. Applying the
    function twice gives the same result as applying it once.
    """
    return url.strip().rstrip('/')
