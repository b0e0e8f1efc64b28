#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

"""

from typing import (
    Dict, Optional, FrozenSet, Mapping, Union
)

import matcher.magic_values.matcher_settings as es
import matcher.magic_values.magic_values_rules as mgr
from matcher.code.utils.utils import text_or_empty


def parse_antigen_string(input_string: Optional[str]) -> FrozenSet[str]:
    """Parse a comma-separated string of allele / antigen tokens
    into a set. Tokens are stripped of whitespace; empty tokens
    (and empty or missing strings) are ignored.
    """
    if not isinstance(input_string, str):
        return frozenset()
    return frozenset(
        token for token in (
            code.strip() for code in input_string.split(
                es.ANTIGEN_SEPARATOR
            )
        ) if token
    )


def _resolve_locus(key: str) -> str:
    if key in mgr.ALL_HLA_LOCI:
        return key
    # Accepts e.g. 'DR', 'hlaDR' and 'HLA-DR'
    short_name = key.upper().replace('HLA', '').strip('-_ ')
    if (locus := mgr.SHORT_NAMES_TO_LOCUS.get(short_name)) is not None:
        return locus
    raise ValueError(
        f'{key} is not a recognized HLA locus. Use one of: '
        f'{", ".join(mgr.LOCUS_SHORT_NAMES.values())}'
    )


class HLAProfile:
    """Class which implements an HLA typing over the six loci.

    Attributes
    ----------
    hla_strings : Dict[str, str]
        Original comma-separated allele string per locus.
    alleles : Tuple[FrozenSet[str]]
        Allele tokens per locus, ordered as ALL_HLA_LOCI.

    Methods
    -------
    locus_string(locus: str) -> str
        Returns the input string for a locus.
    """
    __slots__ = ('hla_strings', 'alleles', '_all_antigens')

    def __init__(
        self,
        hla_typing: Optional[Mapping[str, Optional[str]]] = None
    ):
        hla_strings = {locus: '' for locus in mgr.ALL_HLA_LOCI}
        if hla_typing:
            for key, value in hla_typing.items():
                hla_strings[_resolve_locus(key)] = text_or_empty(value)
        self.hla_strings = hla_strings
        self.alleles = tuple(
            parse_antigen_string(hla_strings[locus])
            for locus in mgr.ALL_HLA_LOCI
        )
        self._all_antigens = None

    @classmethod
    def from_loci(cls, **loci: Optional[str]) -> 'HLAProfile':
        return cls(loci)

    def locus_string(self, locus: str) -> str:
        return self.hla_strings[_resolve_locus(locus)]

    @property
    def all_antigens(self) -> FrozenSet[str]:
        if self._all_antigens is None:
            self._all_antigens = frozenset().union(*self.alleles)
        return self._all_antigens

    @property
    def is_typed(self) -> bool:
        return any(self.alleles)

    def __eq__(self, other) -> bool:
        if not isinstance(other, HLAProfile):
            return NotImplemented
        return self.alleles == other.alleles

    def __hash__(self) -> int:
        return hash(self.alleles)

    def __getstate__(self):
        return (self.hla_strings,)

    def __setstate__(self, state):
        self.__init__(state[0])

    def __str__(self) -> str:
        return ', '.join(
            f'{mgr.LOCUS_SHORT_NAMES[locus]}: {", ".join(sorted(alleles))}'
            for locus, alleles in zip(mgr.ALL_HLA_LOCI, self.alleles)
            if alleles
        )

    def __repr__(self) -> str:
        return f'HLAProfile({self.hla_strings})'


HLAInput = Union[HLAProfile, Mapping[str, Optional[str]], None]


def as_hla_profile(hla: HLAInput) -> HLAProfile:
    if isinstance(hla, HLAProfile):
        return hla
    return HLAProfile(hla)


class HLAComparator:
    """Class which compares donor and recipient HLA typings.

    The comparison is a simplified allele-count heuristic: per locus,
    the number of tokens present in both the donor and recipient set
    is counted. The total is normalized by a nominal 12 antigens
    (2 alleles x 6 loci), irrespective of the number of typed alleles.
    """

    def __init__(self, n_antigens: int = es.N_HLA_ANTIGENS) -> None:
        self.n_antigens = n_antigens

    @staticmethod
    def compare_locus(
        donor_alleles: Optional[str], recipient_alleles: Optional[str]
    ) -> int:
        return len(
            parse_antigen_string(donor_alleles) &
            parse_antigen_string(recipient_alleles)
        )

    def matches_per_locus(
        self, donor_hla: HLAInput, recipient_hla: HLAInput
    ) -> Dict[str, int]:
        d_hla = as_hla_profile(donor_hla)
        r_hla = as_hla_profile(recipient_hla)
        return {
            locus: len(d_alleles & r_alleles)
            for locus, d_alleles, r_alleles in zip(
                mgr.ALL_HLA_LOCI, d_hla.alleles, r_hla.alleles
            )
        }

    def total_hla_score(
        self, donor_hla: HLAInput, recipient_hla: HLAInput
    ) -> int:
        return sum(self.matches_per_locus(donor_hla, recipient_hla).values())

    def capped_matches(self, n_matches: int) -> int:
        return min(n_matches, self.n_antigens)

    def hla_score(self, n_matches: int) -> float:
        """Normalized HLA score in [0, 1]"""
        return self.capped_matches(n_matches) / self.n_antigens
