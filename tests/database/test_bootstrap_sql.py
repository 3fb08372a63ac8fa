from pathlib import Path

from src.careclock.careclock.database.bootstrap import _iter_sql_statements, schema_statements

SCHEMA_PATH = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_splitter_respects_quoted_semicolons():
    sql = "INSERT INTO t VALUES ('a;b'); INSERT INTO t VALUES (\"c;d\");\nSELECT 1"

    assert list(_iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_splitter_handles_escaped_quotes():
    sql = r"INSERT INTO t VALUES ('it\'s; fine'); SELECT 2;"

    assert list(_iter_sql_statements(sql)) == [r"INSERT INTO t VALUES ('it\'s; fine')", "SELECT 2"]


def test_splitter_drops_comments_outside_quotes():
    sql = (
        "-- don't split here; it's a comment\n"
        "SELECT 1; /* block; comment */ SELECT '-- kept';\n"
        "SELECT 3 -- trailing\n"
    )

    assert list(_iter_sql_statements(sql)) == ["SELECT 1", "SELECT '-- kept'", "SELECT 3"]


def test_database_selection_statements_are_skipped():
    sql = "CREATE DATABASE IF NOT EXISTS x;\nUSE x;\nCREATE TABLE a (id INT);\n"

    assert schema_statements(sql) == ["CREATE TABLE a (id INT)"]


def test_schema_file_yields_table_statements():
    statements = schema_statements(SCHEMA_PATH.read_text(encoding="utf-8"))

    assert [s.split("(")[0].split()[-1] for s in statements] == ["perimeters", "workers", "shift_records"]
    assert "uq_shift_one_open" in statements[-1]
    assert all("--" not in s for s in statements)
