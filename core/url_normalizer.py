"""
URL Normalization Utility

Prepares user-entered brand URLs for fetching and turns relative asset
references found on a page into absolute URLs.
"""

from urllib.parse import urljoin, urlparse


class URLNormalizer:
    """Normalizes URLs for crawling and asset resolution"""

    @staticmethod
    def ensure_scheme(url: str) -> str:
        """
        Prefix https:// when the URL has no http(s) scheme

        Args:
            url: URL as entered by the user

        Returns:
            URL starting with http:// or https://

        Raises:
            ValueError: If the URL is empty
        """
        if not url or not url.strip():
            raise ValueError("URL is required")

        url = url.strip()
        if url.startswith('http://') or url.startswith('https://'):
            return url
        return f"https://{url}"

    @staticmethod
    def get_origin(url: str) -> str:
        """
        Get the origin (scheme + host) of a URL

        Examples:
            >>> URLNormalizer.get_origin('https://example.com/about?x=1')
            'https://example.com'
        """
        parsed = urlparse(url)
        return f"{parsed.scheme}://{parsed.netloc}"

    @staticmethod
    def absolutize(value: str, page_url: str) -> str:
        """
        Resolve an asset reference against the page origin

        Values already starting with "http" are returned unchanged. Everything
        else is joined onto the origin, not the page path, so "/logo.png" and
        "logo.png" both land at the site root.

        Args:
            value: href/content value taken from the page
            page_url: URL the page was fetched from

        Returns:
            Absolute URL, or the value unchanged when it is empty
        """
        if not value or value.startswith('http'):
            return value
        return urljoin(URLNormalizer.get_origin(page_url) + '/', value)
