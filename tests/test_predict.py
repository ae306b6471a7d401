import pytest

from kana_typist.constants import KEY_CONFIG_DATA
from kana_typist.predict import is_complete, is_valid_input, predict_next


def letters(predictions):
    return {p.letter for p in predictions}


def spellings(predictions):
    return {p.spelling for p in predictions}


@pytest.mark.parametrize(
    "kana,spelling",
    # ん is covered separately: typing its first "n" already completes a lone ん
    [(k, s[0]) for k, s in KEY_CONFIG_DATA if k != "ん"],
)
def test_canonical_spelling_is_typeable(kana, spelling):
    for i in range(len(spelling)):
        predictions = predict_next(kana, spelling[:i])
        assert predictions, f"{kana!r} diverged after {spelling[:i]!r}"
        assert spelling[i] in letters(predictions)

    assert predict_next(kana, spelling) == []
    assert is_complete(kana, spelling)


def test_predict_next_is_idempotent():
    first = predict_next("きょうはいいてんき", "kyouha")
    predict_next("っか", "k")
    second = predict_next("きょうはいいてんき", "kyouha")

    assert first == second


def test_sokuon_offers_doubling_and_fixed_spellings():
    predictions = predict_next("った", "")

    assert {"t", "l", "x"} <= letters(predictions)
    assert {"ltu", "xtu", "ltsu", "xtsu", "tta"} <= spellings(predictions)
    assert all(p.kana == "っ" for p in predictions)


def test_sokuon_doubling_must_continue_with_same_consonant():
    assert is_valid_input("っか", "kk")
    assert is_valid_input("っか", "cc")
    assert not is_valid_input("っか", "kc")
    assert is_complete("っか", "kka")
    assert is_complete("っか", "xtuka")


def test_moraic_n_at_end_offers_bare_n():
    assert spellings(predict_next("ん", "")) == {"n", "nn", "n'", "xn"}


def test_moraic_n_before_vowel_excludes_bare_n():
    assert spellings(predict_next("んあ", "")) == {"nn", "n'", "xn"}


def test_moraic_n_typed_as_single_n_before_consonant():
    assert letters(predict_next("かんき", "kan")) == {"n", "'", "k"}
    assert is_complete("かんき", "kanki")
    assert is_complete("かんき", "kannki")


def test_moraic_n_single_n_completes_end_of_text():
    assert predict_next("ん", "n") == []
    assert is_complete("ん", "n")
    assert is_complete("ん", "nn")


def test_continues_after_alternative_spelling():
    predictions = predict_next("つき", "tu")

    assert letters(predictions) == {"k"}
    assert [p.kana for p in predictions] == ["き"]


def test_digraph_buffer_is_followed():
    predictions = predict_next("しゃ", "s")

    assert letters(predictions) == {"y", "h"}
    assert all(p.recognized for p in predictions)


def test_diverged_input_yields_nothing():
    assert predict_next("か", "z") == []
    assert not is_complete("か", "z")
    assert not is_valid_input("か", "z")


def test_completed_input_yields_nothing():
    assert predict_next("か", "ka") == []
    assert is_complete("か", "ka")
    assert is_valid_input("か", "ka")


def test_empty_text_is_complete():
    assert predict_next("", "") == []
    assert is_complete("", "")


def test_literal_character_is_not_recognized():
    [prediction] = predict_next("Aか", "")

    assert prediction.letter == "A"
    assert prediction.kana == "A"
    assert not prediction.recognized
    assert "recognized=False" in repr(prediction)


def test_punctuation_uses_table_spelling():
    assert letters(predict_next("ら-", "ra")) == {"-"}
    assert letters(predict_next("らー", "ra")) == {"-"}
    assert is_complete("ね。", "ne.")
