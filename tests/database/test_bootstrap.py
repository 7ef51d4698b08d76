from __future__ import annotations

from pathlib import Path

from src.shift_roster.shift_roster.database.bootstrap import iter_sql_statements

DATABASE_DIR = Path(__file__).resolve().parents[2] / "database"


def test_splitter_keeps_semicolons_inside_quotes():
    sql = """
    -- comment; with a semicolon
    INSERT INTO hr_users VALUES ('a', 'x;y', "z;w", 'hr');
    SELECT 1
    """
    statements = list(iter_sql_statements(sql))

    assert statements == ["INSERT INTO hr_users VALUES ('a', 'x;y', \"z;w\", 'hr')", "SELECT 1"]


def test_schema_declares_every_collection():
    statements = list(iter_sql_statements((DATABASE_DIR / "schema.sql").read_text(encoding="utf-8")))
    created = " ".join(s for s in statements if s.upper().startswith("CREATE TABLE"))

    for table in ("profiles", "shift_entries", "managers", "hr_users", "admin_credentials"):
        assert f"`{table}`" in created or f" {table} " in created
    assert "UNIQUE" in created


def test_seed_loads_admin_and_hr_codes():
    seed = (DATABASE_DIR / "seed.sql").read_text(encoding="utf-8")
    assert "'ADMIN123'" in seed
    for code in ("'Main123*'", "'ENG123*'", "'OP123*'"):
        assert code in seed
