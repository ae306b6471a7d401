from kana_typist.lattice import KanaLattice, PositionKind


def spellings(lattice, pos):
    return [o.spelling for o in lattice.options_at(pos)]


def test_kind_at_resolves_each_position():
    lattice = KanaLattice("っかんa")

    assert lattice.kind_at(0) is PositionKind.SOKUON
    assert lattice.kind_at(1) is PositionKind.ORDINARY
    assert lattice.kind_at(2) is PositionKind.MORAIC_N
    assert lattice.kind_at(3) is PositionKind.LITERAL
    assert lattice.kind_at(4) is PositionKind.END


def test_sokuon_offers_fixed_and_doubled_spellings():
    lattice = KanaLattice("っか")

    assert spellings(lattice, 0) == ["ltu", "xtu", "ltsu", "xtsu", "kka", "cca"]

    kka = lattice.options_at(0)[4]
    assert kka.advance == 2
    assert kka.kana == "っ"
    assert kka.doubled.spelling == "ka"


def test_sokuon_does_not_double_vowels_or_end_of_text():
    assert spellings(KanaLattice("っ"), 0) == ["ltu", "xtu", "ltsu", "xtsu"]
    assert spellings(KanaLattice("っあ"), 0) == ["ltu", "xtu", "ltsu", "xtsu"]


def test_consecutive_sokuon_double_recursively():
    lattice = KanaLattice("っっか")

    doubled = {o.spelling: o.advance for o in lattice.options_at(0)}
    assert doubled["kkka"] == 3
    assert doubled["lltu"] == 2


def test_moraic_n_bare_n_rule():
    # next-kana initials come from the full table, independent of tendencies
    assert spellings(KanaLattice("ん"), 0) == ["nn", "n'", "xn", "n"]
    assert spellings(KanaLattice("んか"), 0) == ["nn", "n'", "xn", "n"]
    assert spellings(KanaLattice("んあ"), 0) == ["nn", "n'", "xn"]
    assert spellings(KanaLattice("んな"), 0) == ["nn", "n'", "xn"]
    assert spellings(KanaLattice("んや"), 0) == ["nn", "n'", "xn"]
    assert spellings(KanaLattice("んい"), 0) == ["nn", "n'", "xn"]


def test_initials_are_deduplicated_in_option_order():
    lattice = KanaLattice("しゅ")

    assert lattice.initials_at(0) == ["s"]
    assert KanaLattice("ち").initials_at(0) == ["t", "c"]
    assert KanaLattice("").initials_at(0) == []


def test_literal_passes_character_through():
    lattice = KanaLattice("A")

    [option] = lattice.options_at(0)
    assert option.spelling == "A"
    assert option.kind is PositionKind.LITERAL
