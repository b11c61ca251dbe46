"""Unit tests for NamedPeriodResolver and bundled asset loading."""

import threading

import pytest
from date_parsing.periods import NamedPeriodResolver, period_key
from date_parsing.resources import AssetError, clear_asset_cache


class TestNamedPeriodResolver:
    """Test cases for NamedPeriodResolver."""

    def setup_method(self):
        """Set up test fixtures."""
        self.resolver = NamedPeriodResolver()

    @pytest.mark.parametrize("text", [
        "early Roman period",
        "EARLY roman period",
        "early  Roman\tperiod",
    ])
    def test_resolve(self, text):
        date = self.resolver.resolve(text)
        assert date is not None
        assert str(date) == "200 -- 1 BC"

    @pytest.mark.parametrize("text", [
        "early Roman period?",
        "early? Roman period",
        "EARLY roman period?",
    ])
    def test_resolve_dubious(self, text):
        date = self.resolver.resolve(text)
        assert date is not None
        assert str(date) == "200 ? -- 1 BC ?"

    @pytest.mark.parametrize("text", ["", None, "early imp.", "Athens"])
    def test_unknown(self, text):
        assert self.resolver.resolve(text) is None

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            self.resolver.periods["new period"] = None

    def test_table_is_shared(self):
        assert NamedPeriodResolver().periods is self.resolver.periods

    def test_concurrent_first_use(self):
        clear_asset_cache()
        tables = []

        def load():
            tables.append(NamedPeriodResolver().periods)

        threads = [threading.Thread(target=load) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(tables) == 8
        assert all(table is tables[0] for table in tables)


class TestPeriodAssetErrors:
    """Test cases for missing or malformed period tables."""

    def teardown_method(self):
        clear_asset_cache()

    def test_missing_file(self, tmp_path):
        resolver = NamedPeriodResolver(tmp_path / "missing.csv")
        with pytest.raises(AssetError):
            resolver.resolve("early roman period")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "periods.csv"
        path.write_text("# nothing here\n", encoding="utf-8")
        with pytest.raises(AssetError):
            NamedPeriodResolver(path).resolve("early roman period")

    def test_malformed_date(self, tmp_path):
        path = tmp_path / "periods.csv"
        path.write_text("early roman period,sometime\n", encoding="utf-8")
        with pytest.raises(AssetError):
            NamedPeriodResolver(path).resolve("early roman period")

    def test_wrong_column_count(self, tmp_path):
        path = tmp_path / "periods.csv"
        path.write_text("early roman period\n", encoding="utf-8")
        with pytest.raises(AssetError):
            NamedPeriodResolver(path).resolve("early roman period")

    def test_custom_table(self, tmp_path):
        path = tmp_path / "periods.csv"
        path.write_text("Sullan period,88 -- 79 BC\n", encoding="utf-8")
        date = NamedPeriodResolver(path).resolve("sullan period")
        assert str(date) == "88 -- 79 BC"


def test_period_key():
    assert period_key(" Early?  Roman period ") == "early roman period"
