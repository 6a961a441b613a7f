"""
Tests for range table loading.
"""

import json

import pytest

from isbn_parser import (
    load_ranges,
    save_ranges,
    parse_isbn,
    RangeTable,
    RangeTableError,
    RegistrationGroupRule,
    RegistrantRule,
)
from isbn_parser import ranges_loader


RANGE_MESSAGE = """<?xml version="1.0" encoding="utf-8"?>
<ISBNRangeMessage>
  <MessageSource>International ISBN Agency</MessageSource>
  <MessageSerialNumber>test-serial</MessageSerialNumber>
  <MessageDate>Mon, 2 Oct 2023 10:12:44 GMT</MessageDate>
  <EAN.UCCPrefixes>
    <EAN.UCC>
      <Prefix>978</Prefix>
      <Agency>International ISBN Agency</Agency>
      <Rules>
        <Rule><Range>0000000-5999999</Range><Length>1</Length></Rule>
        <Rule><Range>6000000-9999999</Range><Length>0</Length></Rule>
      </Rules>
    </EAN.UCC>
  </EAN.UCCPrefixes>
  <RegistrationGroups>
    <Group>
      <Prefix>978-2</Prefix>
      <Agency>French language</Agency>
      <Rules>
        <Rule><Range>0000000-1999999</Range><Length>2</Length></Rule>
        <Rule><Range>2000000-3499999</Range><Length>3</Length></Rule>
      </Rules>
    </Group>
  </RegistrationGroups>
</ISBNRangeMessage>
"""


@pytest.fixture
def isolated_cache(monkeypatch):
    """Restore the module cache after the test."""
    monkeypatch.setattr(ranges_loader, "_cached_table", None)
    monkeypatch.delenv(ranges_loader.RANGES_ENV_VAR, raising=False)


class TestPackagedTable:
    """Tests for the packaged dataset."""

    def test_cached(self):
        assert load_ranges() is load_ranges()

    def test_gs1_prefixes(self):
        assert load_ranges().gs1_prefixes == ["978", "979"]

    def test_rule_types(self):
        table = load_ranges()
        assert isinstance(table.registration_group_rules("978")[0], RegistrationGroupRule)
        assert isinstance(table.group("978-2").rules[0], RegistrantRule)

    def test_group_lookup(self):
        table = load_ranges()
        assert "978-2" in table
        assert table.group("978-2").agency == "French language"
        assert table.group("978-65").agency == "Brazil"
        assert table.group("978-66") is None
        assert table.group("978-611").rules == ()

    def test_covers_registry(self):
        table = load_ranges()
        for prefix in [
            "978-5", "978-85", "978-89", "978-600", "978-9908",
            "978-99993", "979-11", "979-12", "979-8",
        ]:
            assert prefix in table
        assert len(table) > 250

    def test_unknown_prefix_has_no_rules(self):
        assert load_ranges().registration_group_rules("977") == ()


class TestRangeMessage:
    """Tests for RangeMessage.xml input."""

    def test_from_range_message(self):
        table = RangeTable.from_range_message(RANGE_MESSAGE)
        assert table.serial == "test-serial"
        assert table.registration_group_rules("978")[1] == RegistrationGroupRule("6000000", "9999999", 0)
        assert parse_isbn("9782207258040", ranges=table).registrant_element == "207"

    def test_invalid_xml(self):
        with pytest.raises(RangeTableError):
            RangeTable.from_range_message("<ISBNRangeMessage>")

    def test_load_xml_file(self, tmp_path):
        path = tmp_path / "RangeMessage.xml"
        path.write_text(RANGE_MESSAGE, encoding="utf-8")
        table = load_ranges(path)
        assert table.group("978-2").agency == "French language"


class TestMalformedData:
    """Malformed data raises RangeTableError."""

    @pytest.mark.parametrize("rule", [
        {"range": "0000000", "length": 1},
        {"range": "000000-9999999", "length": 1},
        {"range": "00000A0-9999999", "length": 1},
        {"range": "00000\u00b20-9999999", "length": 1},
        {"range": "\u0660000000-9999999", "length": 1},
        {"range": "0000000-9999999", "length": "one"},
    ])
    def test_bad_rule(self, rule):
        with pytest.raises(RangeTableError):
            RangeTable.from_dict({"prefixes": [{"prefix": "978", "rules": [rule]}], "groups": []})

    def test_missing_section(self):
        with pytest.raises(RangeTableError):
            RangeTable.from_dict({"prefixes": []})

    @pytest.mark.parametrize("text", ["{not json", "", "[1, 2"])
    def test_invalid_json(self, text):
        with pytest.raises(RangeTableError):
            RangeTable.from_json(text)

    def test_invalid_json_file(self, tmp_path):
        path = tmp_path / "ranges.json"
        path.write_text("{\"prefixes\": [", encoding="utf-8")
        with pytest.raises(RangeTableError):
            load_ranges(path)


class TestConfiguration:
    """Dataset path resolution and reload."""

    def test_env_override(self, isolated_cache, monkeypatch, tmp_path):
        path = tmp_path / "ranges.json"
        path.write_text(RangeTable.from_range_message(RANGE_MESSAGE).to_json(), encoding="utf-8")
        monkeypatch.setenv(ranges_loader.RANGES_ENV_VAR, str(path))

        table = load_ranges(force_reload=True)
        assert table.serial == "test-serial"
        assert len(table) == 1

    def test_explicit_path_bypasses_cache(self, isolated_cache, tmp_path):
        cached = load_ranges()
        path = tmp_path / "ranges.json"
        save_ranges(cached, path)

        loaded = load_ranges(path)
        assert loaded is not cached
        assert load_ranges() is cached
        assert json.loads(path.read_text(encoding="utf-8"))["groups"][0]["prefix"] == "978-0"

    def test_missing_file(self, isolated_cache, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_ranges(tmp_path / "missing.json")
