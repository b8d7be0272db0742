"""Aggregation query - the normalized cache key input."""

import hashlib
import json
import re
from dataclasses import asdict, dataclass
from urllib.parse import urlencode, urlsplit

# Dot-separated hostname labels
TENANT_RE = re.compile(r"[a-z0-9_-]+(\.[a-z0-9_-]+)*")


def normalize_domain(raw: str | None) -> str:
    """Lowercase host, drop scheme/port/path and a leading ``www.``."""
    value = (raw or "").strip().lower()
    if "://" in value:
        try:
            value = urlsplit(value).netloc
        except ValueError:
            return ""
    value = value.split("/", 1)[0].split(":", 1)[0]
    if value.startswith("www."):
        value = value[len("www.") :]
    return value


def is_valid_tenant(domain: str) -> bool:
    """True for a normalized domain usable as a cache namespace."""
    return bool(TENANT_RE.fullmatch(domain))


def normalize_base_path(raw: str | None) -> str:
    """Reduce a base to path+query, discarding scheme and host when supplied."""
    try:
        parts = urlsplit((raw or "").strip())
    except ValueError:
        return ""
    path = parts.path
    if parts.scheme or parts.netloc:
        path = path or "/"
    return f"{path}?{parts.query}" if parts.query else path


def normalize_filter(raw: str | None) -> str | None:
    value = (raw or "").strip()
    return value or None


def parse_featured(raw: str | bool | None) -> bool:
    if isinstance(raw, bool):
        return raw
    return (raw or "").strip().lower() == "true"


@dataclass(frozen=True)
class AggregationQuery:
    """What to aggregate for one tenant."""

    domain: str
    base_path: str
    category: str | None = None
    tag: str | None = None
    featured: bool = False

    @classmethod
    def from_params(
        cls,
        domain: str | None,
        base: str | None,
        category: str | None = None,
        tag: str | None = None,
        featured: str | bool | None = None,
    ) -> "AggregationQuery":
        """Build a normalized query from raw request parameters."""
        return cls(
            domain=normalize_domain(domain),
            base_path=normalize_base_path(base),
            category=normalize_filter(category),
            tag=normalize_filter(tag),
            featured=parse_featured(featured),
        )

    @property
    def tenant(self) -> str:
        return self.domain

    @property
    def cache_key(self) -> str:
        """Deterministic hash of all normalized fields."""
        raw = json.dumps(asdict(self), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(raw.encode("utf-8")).hexdigest()

    def seed_url(self) -> str:
        """First upstream page URL (``format=json`` is added by the pager)."""
        url = f"https://{self.domain}{self.base_path}"
        params = {k: v for k, v in (("category", self.category), ("tag", self.tag)) if v}
        if params:
            url += ("&" if "?" in url else "?") + urlencode(params)
        return url
