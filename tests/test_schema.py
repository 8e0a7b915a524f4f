"""Test schema filtering."""

from fuzzyrank.search.schema import filter_schema


class TestFilterSchema:
    """Test table search by name and column names."""

    def test_blank_query_returns_all(self, sample_schema):
        assert filter_schema(sample_schema, "") is sample_schema

    def test_matches_table_name(self, sample_schema):
        result = filter_schema(sample_schema, "ord")
        assert result[0].table_name == "orders"

    def test_matches_column_name(self, sample_schema):
        """A column-only match still surfaces its table."""
        result = filter_schema(sample_schema, "email")
        assert [t.table_name for t in result] == ["users"]

    def test_min_score(self, sample_schema):
        assert filter_schema(sample_schema, "email", min_score=0.95) == []

    def test_limit(self, sample_schema):
        assert len(filter_schema(sample_schema, "id", limit=1)) == 1

    def test_no_match(self, sample_schema):
        assert filter_schema(sample_schema, "qqq") == []
