"""Summary API."""

from web.api.summary.views import SUMMARY_HEADERS, get_summary, purge_summary

__all__ = [
    "get_summary",
    "purge_summary",
    "SUMMARY_HEADERS",
]
