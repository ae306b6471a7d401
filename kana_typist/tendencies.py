"""
Conversion tendencies for kana-typist.

A tendency maps a kana token to the spelling a player prefers for it. The
game builds one table per session from DEFAULT_TENDENCIES; this package only
reads it.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping

from kana_typist.constants import KEY_CONFIG_DATA, DEFAULT_TENDENCY_OVERRIDES
from kana_typist.keyconfig import lookup_by_kana

logger = logging.getLogger(__name__)


DEFAULT_TENDENCIES: Mapping[str, str] = MappingProxyType({
    kana: DEFAULT_TENDENCY_OVERRIDES.get(kana, spellings[0])
    for kana, spellings in KEY_CONFIG_DATA
})


def default_tendencies() -> Dict[str, str]:
    """Get a fresh, session-owned copy of the baseline tendencies."""
    return dict(DEFAULT_TENDENCIES)


def validate_tendencies(tendencies: Mapping[str, str]) -> List[str]:
    """
    Find tendency entries the search can never honor.

    An entry is unusable when its kana is not in the table or its spelling
    is not one of that kana's spellings. Each one is logged as a warning.

    Returns:
        The unusable kana, in mapping order
    """
    invalid = []

    for kana, spelling in tendencies.items():
        config = lookup_by_kana(kana)
        if config is None:
            logger.warning(f"Tendency for unknown kana {kana!r} is ignored")
            invalid.append(kana)
        elif spelling not in config.spellings:
            logger.warning(
                f"Tendency {spelling!r} is not a spelling of {kana!r} "
                f"(expected one of {list(config.spellings)})"
            )
            invalid.append(kana)

    return invalid
