"""
Schema Search

Filters database tables for an entity browser: tables are ranked by name,
with their column names acting as keywords.
"""

from dataclasses import dataclass, field

from fuzzyrank.search.ranking import SearchOptions, search_items


@dataclass
class ColumnSchema:
    """A table column."""

    column_name: str
    data_type: str = ""


@dataclass
class TableSchema:
    """A table and its columns."""

    table_name: str
    columns: list[ColumnSchema] = field(default_factory=list)
    schema_name: str = "public"


def filter_schema(
    tables: list[TableSchema],
    query: str,
    limit: int = 50,
    min_score: float = 0.1,
) -> list[TableSchema]:
    """
    Return the tables matching query, best first.

    A blank query returns all tables in their original order.
    """
    if not query.strip():
        return tables

    options: SearchOptions[TableSchema] = SearchOptions(
        get_text=lambda table: table.table_name,
        get_keywords=lambda table: [c.column_name for c in table.columns],
        limit=limit,
        min_score=min_score,
    )
    return [result.item for result in search_items(tables, query, options)]
