"""Public record URLs."""

from urllib.parse import quote


class PermalinkBuilder:
    """{site_url}/{content_type}/{slug}/, or {site_url}/?p={id} when the record has no slug."""

    def __init__(self, site_url: str) -> None:
        self.site_url = site_url.rstrip("/")

    def permalink(self, record_id: int, content_type: str, slug: str | None) -> str:
        if not slug:
            return f"{self.site_url}/?p={record_id}"
        return f"{self.site_url}/{quote(content_type)}/{quote(slug)}/"
