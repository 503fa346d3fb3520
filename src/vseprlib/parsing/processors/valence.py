"""
Valence electron derivation.

The source data carries a valence hint (the group number) for every element.
Main-group elements in groups 13-18 have ``group - 10`` valence electrons and
groups 1-2 use the hint unchanged. Transition metals, lanthanides and
actinides (hint 3-12 or 0) are resolved from the electron configuration
string instead: the electrons of the outermost shell plus any f-subshell
electrons.
"""
import logging
from typing import List

from vseprlib.data.constants import FileConstants, ProcessingConstants

logger = logging.getLogger(__name__)

_DIGITS = '0123456789'


def derive_valence_electrons(valence_hint: int, configuration: str) -> int:
    """
    Resolve the valence electron count of an element.
    Args:
        valence_hint: Raw hint from the source row (0 when missing)
        configuration: Electron configuration, e.g. ``"[Ar] 3d6 4s2"``
    Returns:
        Non-negative valence electron count
    """
    if valence_hint > ProcessingConstants.VALENCE_GROUP_THRESHOLD:
        valence = valence_hint - ProcessingConstants.VALENCE_GROUP_OFFSET
        logger.debug("Valence from group hint %d: %d", valence_hint, valence)
    elif valence_hint > ProcessingConstants.DIRECT_VALENCE_MAX or valence_hint == 0:
        outer = count_outer_shell_electrons(configuration)
        f_electrons = count_f_electrons(configuration)
        valence = outer + f_electrons
        logger.debug("Valence from configuration %r: %d outer + %d f = %d",
                     configuration, outer, f_electrons, valence)
    else:
        valence = valence_hint
    return max(valence, 0)


def subshell_tokens(configuration: str) -> List[str]:
    """Space-separated tokens that start with a shell number, e.g. ``3d10``."""
    return [token for token in configuration.split(FileConstants.CONFIGURATION_DELIMITER)
            if token and token[0] in _DIGITS]


def count_outer_shell_electrons(configuration: str) -> int:
    """
    Sum the occupancy of every subshell in the highest principal shell.

    Only the single occupancy digit after the subshell letter is read, so
    ``3d10`` contributes 1. Core notation such as ``[Ar]`` is ignored.
    """
    tokens = subshell_tokens(configuration)
    if not tokens:
        return 0
    highest_shell = max(int(token[0]) for token in tokens)
    total = 0
    for token in tokens:
        if int(token[0]) != highest_shell:
            continue
        if len(token) > 2 and token[2] in _DIGITS:
            total += int(token[2])
    return total


def count_f_electrons(configuration: str) -> int:
    """
    Sum the occupancy of every f subshell anywhere in the configuration.

    Occupancy is one digit (``4f7``) or two digits (``4f14``); an ``f`` not
    followed by a digit contributes nothing.
    """
    total = 0
    position = configuration.find('f')
    while position != -1:
        first = configuration[position + 1:position + 2]
        second = configuration[position + 2:position + 3]
        if first and first in _DIGITS:
            if second and second in _DIGITS:
                total += int(first + second)
            else:
                total += int(first)
        position = configuration.find('f', position + 1)
    return total
