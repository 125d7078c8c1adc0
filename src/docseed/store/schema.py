"""Database schema definitions for docseed."""

SCHEMA_SQL = """\
CREATE TABLE IF NOT EXISTS documents (
    slug TEXT PRIMARY KEY,
    id TEXT,
    title TEXT,
    description TEXT,
    date TEXT,
    category TEXT,
    categoryLabel TEXT,
    points TEXT,
    contacts TEXT,
    tables TEXT,
    content TEXT,
    sort INTEGER
);
"""

# Column order shared by inserts and DocumentRecord.as_params()
DOCUMENT_COLUMNS = (
    "slug",
    "id",
    "title",
    "description",
    "date",
    "category",
    "categoryLabel",
    "points",
    "contacts",
    "tables",
    "content",
    "sort",
)


def get_schema() -> str:
    """Get the SQL schema string."""
    return SCHEMA_SQL
