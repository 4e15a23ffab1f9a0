from src.workforce_system.workforce_system.database.bootstrap import iter_sql_statements


def test_splits_on_semicolons_outside_quotes():
    sql = "CREATE TABLE a (x INT); INSERT INTO a VALUES ('x;y'); SELECT \"1;2\""
    assert list(iter_sql_statements(sql)) == [
        "CREATE TABLE a (x INT)",
        "INSERT INTO a VALUES ('x;y')",
        'SELECT "1;2"',
    ]


def test_skips_empty_statements():
    assert list(iter_sql_statements(";;  ;\n")) == []
