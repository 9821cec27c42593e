"""Integration tests for database operations."""

import sqlite3

import pytest

from url_shortener.core.database import Database, get_test_db
from url_shortener.core.exceptions import AlreadyExists, NotFound, StoreUnavailable

CREATED = "2024-03-10T12:00:00.000000+00:00"


class TestDatabaseIntegration:
    """Integration tests for the link store and click log."""

    def test_link_insert_and_retrieval(self, test_db):
        """Test link creation and retrieval from database."""
        record = test_db.insert_link("testcode", "https://example.com", CREATED)
        assert record == {
            "code": "testcode",
            "target_url": "https://example.com",
            "created_at": CREATED,
        }
        assert test_db.get_link("testcode") == record

    def test_get_missing_link(self, test_db):
        assert test_db.get_link("nonexistent") is None

    def test_insert_existing_code(self, test_db):
        test_db.insert_link("testcode", "https://example.com", CREATED)
        with pytest.raises(AlreadyExists) as exc_info:
            test_db.insert_link("testcode", "https://other.com", CREATED)
        assert exc_info.value.code == "testcode"
        assert test_db.get_link("testcode")["target_url"] == "https://example.com"

    def test_codes_are_case_sensitive(self, test_db):
        test_db.insert_link("abc", "https://lower.com", CREATED)
        test_db.insert_link("ABC", "https://upper.com", CREATED)
        assert test_db.get_link("ABC")["target_url"] == "https://upper.com"

    def test_link_exists(self, test_db):
        """Test checking if a code exists."""
        assert test_db.link_exists("nonexistent") is False
        test_db.insert_link("testcode", "https://example.com", CREATED)
        assert test_db.link_exists("testcode") is True

    def test_count_links(self, test_db):
        for i in range(3):
            test_db.insert_link(f"code{i}", f"https://example{i}.com", CREATED)
        assert test_db.count_links() == 3

    def test_click_requires_link(self, test_db):
        with pytest.raises(NotFound):
            test_db.insert_click("ghost", CREATED)

    def test_click_summary(self, test_db):
        test_db.insert_link("sum", "https://example.com", CREATED)
        for stamp in [
            "2024-03-01T10:00:00.000000+00:00",
            "2024-03-05T10:00:00.000000+00:00",
            "2024-03-05T11:00:00.000000+00:00",
            "2024-03-06T00:00:00.000000+00:00",
        ]:
            test_db.insert_click("sum", stamp)

        total, rows = test_db.click_summary(
            "sum", "2024-03-04T00:00:00.000000+00:00", "2024-03-06T00:00:00.000000+00:00"
        )

        assert total == 4
        assert rows == [{"day": "2024-03-05", "clicks": 2}]

    def test_click_summary_missing_link(self, test_db):
        assert test_db.click_summary("ghost", CREATED, CREATED) is None

    def test_transaction_rolls_back(self, test_db):
        with pytest.raises(RuntimeError):
            with test_db.transaction() as conn:
                conn.execute(
                    "INSERT INTO links (code, target_url, created_at) VALUES (?, ?, ?)",
                    ("halfway", "https://example.com", CREATED),
                )
                raise RuntimeError("interrupted")
        assert test_db.link_exists("halfway") is False

    def test_transaction_integrity_error_propagates(self, test_db):
        test_db.insert_link("dup", "https://example.com", CREATED)
        with pytest.raises(sqlite3.IntegrityError):
            with test_db.transaction() as conn:
                conn.execute(
                    "INSERT INTO links (code, target_url, created_at) VALUES (?, ?, ?)",
                    ("dup", "https://other.com", CREATED),
                )
        assert test_db.count_links() == 1

    def test_broken_query_is_store_unavailable(self, test_db):
        with pytest.raises(StoreUnavailable):
            test_db.execute("SELECT * FROM no_such_table", fetch=True)

    def test_unopenable_database(self, tmp_path):
        broken = Database(str(tmp_path / "missing" / "links.db"))
        try:
            with pytest.raises(StoreUnavailable):
                broken.get_link("abc")
        finally:
            broken.close()

    def test_file_database_persists(self, tmp_path):
        path = str(tmp_path / "links.db")
        first = Database(path)
        first.init_db()
        first.insert_link("keep", "https://example.com", CREATED)
        first.close()

        second = Database(path)
        try:
            assert second.get_link("keep")["target_url"] == "https://example.com"
        finally:
            second.close()

    def test_get_test_db(self):
        db = get_test_db()
        try:
            assert db.count_links() == 0
        finally:
            db.close()
