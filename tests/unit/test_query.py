"""Tests for aggregation query normalization."""

from app.models.summary import AggregationQuery, is_valid_tenant


class TestDomain:
    def test_case_whitespace_and_www(self):
        a = AggregationQuery.from_params("WWW.Example.COM", "/blog")
        b = AggregationQuery.from_params("  example.com ", "/blog")
        assert a.domain == "example.com"
        assert a.cache_key == b.cache_key

    def test_scheme_discarded(self):
        a = AggregationQuery.from_params("https://www.example.com/", "/blog")
        assert a.domain == "example.com"

    def test_missing(self):
        assert AggregationQuery.from_params(None, "/blog").domain == ""


class TestBasePath:
    def test_full_url_reduced_to_path_and_query(self):
        a = AggregationQuery.from_params("example.com", "https://example.com/blog?view=list")
        b = AggregationQuery.from_params("example.com", "/blog?view=list")
        assert a.base_path == "/blog?view=list"
        assert a.cache_key == b.cache_key

    def test_other_host_discarded(self):
        a = AggregationQuery.from_params("example.com", "http://elsewhere.net/news")
        assert a.base_path == "/news"

    def test_bare_host_is_root(self):
        assert AggregationQuery.from_params("example.com", "https://example.com").base_path == "/"

    def test_relative_kept_as_is(self):
        assert AggregationQuery.from_params("example.com", "blog").base_path == "blog"


class TestFilters:
    def test_empty_filters_are_absent(self):
        a = AggregationQuery.from_params("example.com", "/blog", category="  ", tag="")
        b = AggregationQuery.from_params("example.com", "/blog")
        assert a.category is None and a.tag is None
        assert a.cache_key == b.cache_key

    def test_featured_parsing(self):
        assert AggregationQuery.from_params("example.com", "/blog", featured="TRUE").featured is True
        assert AggregationQuery.from_params("example.com", "/blog", featured="yes").featured is False
        assert AggregationQuery.from_params("example.com", "/blog", featured=True).featured is True

    def test_filters_change_key(self):
        base = AggregationQuery.from_params("example.com", "/blog")
        assert AggregationQuery.from_params("example.com", "/blog", category="News").cache_key != base.cache_key
        assert AggregationQuery.from_params("example.com", "/blog", tag="x").cache_key != base.cache_key
        assert AggregationQuery.from_params("example.com", "/blog", featured="true").cache_key != base.cache_key

    def test_key_is_stable_hex(self):
        key = AggregationQuery.from_params("example.com", "/blog").cache_key
        assert len(key) == 64
        assert key == AggregationQuery.from_params("example.com", "/blog").cache_key


class TestSeedUrl:
    def test_plain(self):
        assert AggregationQuery.from_params("example.com", "/blog").seed_url() == "https://example.com/blog"

    def test_filters(self):
        q = AggregationQuery.from_params("example.com", "/blog", category="News", tag="big launch")
        assert q.seed_url() == "https://example.com/blog?category=News&tag=big+launch"

    def test_existing_query(self):
        q = AggregationQuery.from_params("example.com", "/blog?view=list", category="News")
        assert q.seed_url() == "https://example.com/blog?view=list&category=News"


class TestFragment:
    def test_fragment_dropped(self):
        a = AggregationQuery.from_params("example.com", "/blog#top")
        b = AggregationQuery.from_params("example.com", "/blog")
        assert a.base_path == "/blog"
        assert a.cache_key == b.cache_key

    def test_fragment_dropped_after_query(self):
        a = AggregationQuery.from_params("example.com", "https://example.com/blog?view=list#top")
        b = AggregationQuery.from_params("example.com", "/blog?view=list#other")
        assert a.base_path == b.base_path == "/blog?view=list"

    def test_malformed_url_is_empty(self):
        assert AggregationQuery.from_params("http://[bad", "http://[bad/blog").base_path == ""
        assert AggregationQuery.from_params("http://[bad", "/blog").domain == ""


class TestTenant:
    def test_hostnames(self):
        assert is_valid_tenant("example.com")
        assert is_valid_tenant("my-site.squarespace.com")
        assert is_valid_tenant("localhost")

    def test_rejects_path_like_values(self):
        for value in ["", ".", "..", "a..b", ".example.com", "evil\\..", "a b", "a/b"]:
            assert not is_valid_tenant(value), value
