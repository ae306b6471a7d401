"""
Static tables and tuning constants for kana-typist.

KEY_CONFIG_DATA lists every kana token the typing engine recognizes together
with the romaji spellings accepted for it. The first spelling of each entry
is the canonical one (used by the basic romanizer and the default
tendencies).
"""

from typing import List, Tuple


# =============================================================================
# Special Kana
# =============================================================================

SOKUON = "っ"
MORAIC_N = "ん"

# ん is always typeable with these; bare "n" is added only when unambiguous
MORAIC_N_SPELLINGS: Tuple[str, ...] = ("nn", "n'", "xn")
BARE_N = "n"

# A next-kana initial from this set makes bare "n" ambiguous ("nona" vs "nonna")
N_BLOCKING_INITIALS = frozenset("aiueoyn")

# Initials the sokuon can double
CONSONANTS = frozenset("bcdfghjklmnpqrstvwxz")


# =============================================================================
# Scoring / Lookup
# =============================================================================

# Weight of one non-preferred spelling; must dominate any length difference
PENALTY_WEIGHT = 10000

# Longest kana token tried by the basic romanizer
MAX_KANA_LENGTH = 3


# =============================================================================
# Key Config Table
# =============================================================================

KEY_CONFIG_DATA: List[Tuple[str, Tuple[str, ...]]] = [
    # Vowels and basic syllables
    ("あ", ("a",)),
    ("い", ("i", "yi")),
    ("う", ("u", "wu", "whu")),
    ("え", ("e",)),
    ("お", ("o",)),
    ("か", ("ka", "ca")),
    ("き", ("ki",)),
    ("く", ("ku", "cu", "qu")),
    ("け", ("ke",)),
    ("こ", ("ko", "co")),
    ("さ", ("sa",)),
    ("し", ("si", "ci", "shi")),
    ("す", ("su",)),
    ("せ", ("se", "ce")),
    ("そ", ("so",)),
    ("た", ("ta",)),
    ("ち", ("ti", "chi")),
    ("つ", ("tu", "tsu")),
    ("て", ("te",)),
    ("と", ("to",)),
    ("な", ("na",)),
    ("に", ("ni",)),
    ("ぬ", ("nu",)),
    ("ね", ("ne",)),
    ("の", ("no",)),
    ("は", ("ha",)),
    ("ひ", ("hi",)),
    ("ふ", ("fu", "hu")),
    ("へ", ("he",)),
    ("ほ", ("ho",)),
    ("ま", ("ma",)),
    ("み", ("mi",)),
    ("む", ("mu",)),
    ("め", ("me",)),
    ("も", ("mo",)),
    ("や", ("ya",)),
    ("ゆ", ("yu",)),
    ("よ", ("yo",)),
    ("ら", ("ra",)),
    ("り", ("ri",)),
    ("る", ("ru",)),
    ("れ", ("re",)),
    ("ろ", ("ro",)),
    ("わ", ("wa",)),
    ("を", ("wo",)),
    ("ん", ("nn", "n'", "xn")),
    # Voiced / semi-voiced
    ("が", ("ga",)),
    ("ぎ", ("gi",)),
    ("ぐ", ("gu",)),
    ("げ", ("ge",)),
    ("ご", ("go",)),
    ("ざ", ("za",)),
    ("じ", ("zi", "ji")),
    ("ず", ("zu",)),
    ("ぜ", ("ze",)),
    ("ぞ", ("zo",)),
    ("だ", ("da",)),
    ("ぢ", ("di",)),
    ("づ", ("du",)),
    ("で", ("de",)),
    ("ど", ("do",)),
    ("ば", ("ba",)),
    ("び", ("bi",)),
    ("ぶ", ("bu",)),
    ("べ", ("be",)),
    ("ぼ", ("bo",)),
    ("ぱ", ("pa",)),
    ("ぴ", ("pi",)),
    ("ぷ", ("pu",)),
    ("ぺ", ("pe",)),
    ("ぽ", ("po",)),
    # Small kana
    ("ぁ", ("la", "xa")),
    ("ぃ", ("li", "xi")),
    ("ぅ", ("lu", "xu")),
    ("ぇ", ("le", "xe")),
    ("ぉ", ("lo", "xo")),
    ("ゃ", ("lya", "xya")),
    ("ゅ", ("lyu", "xyu")),
    ("ょ", ("lyo", "xyo")),
    ("ヵ", ("lka", "xka")),
    ("ヶ", ("lke", "xke")),
    ("ゎ", ("lwa", "xwa")),
    ("っ", ("ltu", "xtu", "ltsu", "xtsu")),
    # Rare kana
    ("ゔ", ("vu",)),
    ("ゐ", ("wyi", "wi")),
    ("ゑ", ("wye", "we")),
    # Punctuation
    ("ー", ("-",)),
    ("？", ("?",)),
    ("！", ("!",)),
    ("、", (",",)),
    ("。", (".",)),
    # Digraphs
    ("うぁ", ("wha",)),
    ("うぃ", ("whi", "wi")),
    ("うぇ", ("whe", "we")),
    ("うぉ", ("who",)),
    ("いぇ", ("ye",)),
    ("きゃ", ("kya",)),
    ("きぃ", ("kyi",)),
    ("きゅ", ("kyu",)),
    ("きぇ", ("kye",)),
    ("きょ", ("kyo",)),
    ("くぁ", ("qa", "kwa")),
    ("くぃ", ("qi", "kwi")),
    ("くぇ", ("qe",)),
    ("くぉ", ("qo", "qwo")),
    ("ぐぁ", ("gwa",)),
    ("ぐぃ", ("gwi",)),
    ("ぐぅ", ("gwu",)),
    ("ぐぇ", ("gwe",)),
    ("ぐぉ", ("gwo",)),
    ("しゃ", ("sya", "sha")),
    ("しぃ", ("syi",)),
    ("しゅ", ("syu", "shu")),
    ("しぇ", ("sye", "she")),
    ("しょ", ("syo", "sho")),
    ("すぁ", ("swa",)),
    ("すぃ", ("swi",)),
    ("すぅ", ("swu",)),
    ("すぇ", ("swe",)),
    ("すぉ", ("swo",)),
    ("ちゃ", ("tya", "cya", "cha")),
    ("ちぃ", ("tyi", "cyi")),
    ("ちゅ", ("tyu", "cyu", "chu")),
    ("ちぇ", ("tye", "cye", "che")),
    ("ちょ", ("tyo", "cyo", "cho")),
    ("つぁ", ("tsa",)),
    ("つぃ", ("tsi",)),
    ("つぇ", ("tse",)),
    ("つぉ", ("tso",)),
    ("てゃ", ("tha",)),
    ("てぃ", ("thi",)),
    ("てゅ", ("thu",)),
    ("てぇ", ("the",)),
    ("てょ", ("tho",)),
    ("とぁ", ("twa",)),
    ("とぃ", ("twi",)),
    ("とぅ", ("twu",)),
    ("とぇ", ("twe",)),
    ("とぉ", ("two",)),
    ("にゃ", ("nya",)),
    ("にぃ", ("nyi",)),
    ("にゅ", ("nyu",)),
    ("にぇ", ("nye",)),
    ("にょ", ("nyo",)),
    ("ひゃ", ("hya",)),
    ("ひぃ", ("hyi",)),
    ("ひゅ", ("hyu",)),
    ("ひぇ", ("hye",)),
    ("ひょ", ("hyo",)),
    ("みゃ", ("mya",)),
    ("みぃ", ("myi",)),
    ("みゅ", ("myu",)),
    ("みぇ", ("mye",)),
    ("みょ", ("myo",)),
    ("りゃ", ("rya",)),
    ("りぃ", ("ryi",)),
    ("りゅ", ("ryu",)),
    ("りぇ", ("rye",)),
    ("りょ", ("ryo",)),
    ("ふぁ", ("fa", "fwa", "hwa")),
    ("ふぃ", ("fi", "fwi", "fyi")),
    ("ふぅ", ("fwu",)),
    ("ふぇ", ("fe", "fwe", "fye")),
    ("ふぉ", ("fo", "fwo")),
    ("ふゃ", ("fya",)),
    ("ふゅ", ("fyu",)),
    ("ふょ", ("fyo",)),
    ("ぎゃ", ("gya",)),
    ("ぎぃ", ("gyi",)),
    ("ぎゅ", ("gyu",)),
    ("ぎぇ", ("gye",)),
    ("ぎょ", ("gyo",)),
    ("じゃ", ("zya", "ja", "jya")),
    ("じぃ", ("zyi", "jyi")),
    ("じゅ", ("zyu", "ju", "jyu")),
    ("じぇ", ("zye", "je", "jye")),
    ("じょ", ("zyo", "jo", "jyo")),
    ("ぢゃ", ("dya",)),
    ("ぢぃ", ("dyi",)),
    ("ぢゅ", ("dyu",)),
    ("ぢぇ", ("dye",)),
    ("ぢょ", ("dyo",)),
    ("びゃ", ("bya",)),
    ("びぃ", ("byi",)),
    ("びゅ", ("byu",)),
    ("びぇ", ("bye",)),
    ("びょ", ("byo",)),
    ("ぴゃ", ("pya",)),
    ("ぴぃ", ("pyi",)),
    ("ぴゅ", ("pyu",)),
    ("ぴぇ", ("pye",)),
    ("ぴょ", ("pyo",)),
    ("ゔぁ", ("va",)),
    ("ゔぃ", ("vi", "vyi")),
    ("ゔぇ", ("ve", "vye")),
    ("ゔぉ", ("vo",)),
    ("ゔゃ", ("vya",)),
    ("ゔゅ", ("vyu",)),
    ("ゔょ", ("vyo",)),
    ("でゃ", ("dha",)),
    ("でぃ", ("dhi",)),
    ("でゅ", ("dhu",)),
    ("でぇ", ("dhe",)),
    ("でょ", ("dho",)),
    ("どぁ", ("dwa",)),
    ("どぃ", ("dwi",)),
    ("どぅ", ("dwu",)),
    ("どぇ", ("dwe",)),
    ("どぉ", ("dwo",)),
]

# Baseline tendencies that differ from the canonical (first) spelling
DEFAULT_TENDENCY_OVERRIDES = {
    "うぃ": "wi",
    "うぇ": "we",
}
