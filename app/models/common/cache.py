"""Summary cache table - one row per (tenant, query key)."""

CACHE_DDL = """
CREATE TABLE IF NOT EXISTS summary_cache (
    tenant VARCHAR NOT NULL,
    key VARCHAR NOT NULL,
    data JSON NOT NULL,
    created_at DOUBLE NOT NULL,
    PRIMARY KEY (tenant, key)
)
"""
