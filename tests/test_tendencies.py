import logging

import pytest

from kana_typist.keyconfig import lookup_by_kana
from kana_typist.tendencies import (
    DEFAULT_TENDENCIES,
    default_tendencies,
    validate_tendencies,
)


def test_baseline_covers_table_with_valid_spellings():
    assert validate_tendencies(DEFAULT_TENDENCIES) == []
    assert DEFAULT_TENDENCIES["し"] == "si"
    assert DEFAULT_TENDENCIES["ふ"] == "fu"
    assert DEFAULT_TENDENCIES["うぃ"] == "wi"
    assert DEFAULT_TENDENCIES["うぇ"] == "we"
    assert DEFAULT_TENDENCIES["きゃ"] == lookup_by_kana("きゃ").canonical


def test_default_tendencies_returns_independent_copy():
    session = default_tendencies()
    session["し"] = "shi"

    assert DEFAULT_TENDENCIES["し"] == "si"
    assert default_tendencies()["し"] == "si"


def test_baseline_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_TENDENCIES["し"] = "shi"

    assert DEFAULT_TENDENCIES["し"] == "si"


def test_validate_tendencies_reports_unusable_entries(caplog):
    tendencies = {"か": "ca", "き": "chi", "ぬぬ": "nunu"}

    with caplog.at_level(logging.WARNING, logger="kana_typist.tendencies"):
        invalid = validate_tendencies(tendencies)

    assert invalid == ["き", "ぬぬ"]
    assert len(caplog.records) == 2
