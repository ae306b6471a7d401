import pytest

from kana_typist.constants import KEY_CONFIG_DATA
from kana_typist.keyconfig import (
    KeyConfigError,
    build_table,
    get_table_size,
    is_known_kana,
    longest_matches_at,
    lookup_by_kana,
)


def test_lookup_by_kana_returns_spellings_in_table_order():
    config = lookup_by_kana("し")

    assert config is not None
    assert config.spellings == ("si", "ci", "shi")
    assert config.canonical == "si"


def test_lookup_by_kana_unknown_returns_none():
    assert lookup_by_kana("漢") is None
    assert lookup_by_kana("") is None
    assert not is_known_kana("x")
    assert is_known_kana("きゃ")


def test_table_has_every_entry_once():
    kana = [k for k, _ in KEY_CONFIG_DATA]

    assert len(kana) == len(set(kana))
    assert get_table_size() == len(KEY_CONFIG_DATA)
    assert all(spellings for _, spellings in KEY_CONFIG_DATA)


def test_longest_matches_prefers_digraph():
    text = "きょう"

    assert [c.kana for c in longest_matches_at(text, 0)] == ["きょ"]
    assert [c.kana for c in longest_matches_at(text, 1)] == ["ょ"]
    assert [c.kana for c in longest_matches_at(text, 2)] == ["う"]


def test_longest_matches_out_of_range_or_unknown():
    assert longest_matches_at("きょう", 3) == []
    assert longest_matches_at("きょう", -1) == []
    assert longest_matches_at("abc", 0) == []
    assert longest_matches_at("", 0) == []


def test_longest_matches_small_vowel_digraph():
    assert [c.kana for c in longest_matches_at("うぃすきー", 0)] == ["うぃ"]
    assert [c.kana for c in longest_matches_at("うす", 0)] == ["う"]


def test_build_table_rejects_duplicate_kana():
    with pytest.raises(KeyConfigError):
        build_table([("か", ("ka",)), ("か", ("ca",))])


def test_build_table_rejects_empty_spellings():
    with pytest.raises(KeyConfigError):
        build_table([("か", ())])
    with pytest.raises(KeyConfigError):
        build_table([("か", ("ka", ""))])
    with pytest.raises(ValueError):
        build_table([("", ("ka",))])


def test_build_table_indexes_custom_data():
    table = build_table([("か", ("ka", "ca")), ("かあ", ("kaa",))])

    assert table.by_kana["か"].spellings == ("ka", "ca")
    assert sorted(table.trie.prefixes("かあさん")) == ["か", "かあ"]


def test_longest_matches_deep_into_long_text():
    text = "あ" * 5000 + "きょう"

    assert [c.kana for c in longest_matches_at(text, 5000)] == ["きょ"]
    assert [c.kana for c in longest_matches_at(text, 5002)] == ["う"]
    assert [c.kana for c in longest_matches_at(text, 4999)] == ["あ"]
