#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

"""

from typing import Any, Optional

import matcher.magic_values.matcher_settings as es
from matcher.code.utils.utils import round_to_decimals, clamp
from matcher.code.entities import Donor, Recipient, validate_pra
from matcher.code.BloodGroupSystem import BloodTypeCompatibility
from matcher.code.HLA.HLASystem import HLAComparator
from matcher.code.HLA.Unacceptables import AntigenExclusionFilter
from matcher.code.CrossmatchEvaluator import CrossmatchEvaluator
from matcher.code.matchlist.MatchRecord import MatchRecord, MatchDetails


class ScoreAggregator:
    """Class which implements the compatibility score.

    Blood type and crossmatch are hard gates; HLA and PRA are
    graded multipliers which only count if both gates pass:

        score = round(hla_matches / 12 * (100 - pra) / 100, 2)

    Unacceptable antigens do not alter the score, but lead to
    exclusion of the donor.

    Attributes   #noqa
    ----------
    blood_types: BloodTypeCompatibility
        blood type compatibility table
    hla_comparator: HLAComparator
        HLA comparison
    crossmatch: CrossmatchEvaluator
        crossmatch veto
    antigen_filter: AntigenExclusionFilter
        unacceptable antigen veto
    decimals: int
        number of decimals to round the score to

    Methods
    -------
    score(donor, recipient) -> MatchRecord
    """

    def __init__(
        self,
        blood_types: Optional[BloodTypeCompatibility] = None,
        hla_comparator: Optional[HLAComparator] = None,
        crossmatch: Optional[CrossmatchEvaluator] = None,
        antigen_filter: Optional[AntigenExclusionFilter] = None,
        decimals: int = es.SCORE_DECIMALS
    ) -> None:
        self.blood_types = (
            blood_types if blood_types is not None
            else BloodTypeCompatibility()
        )
        self.hla_comparator = (
            hla_comparator if hla_comparator is not None
            else HLAComparator()
        )
        self.crossmatch = (
            crossmatch if crossmatch is not None
            else CrossmatchEvaluator()
        )
        self.antigen_filter = (
            antigen_filter if antigen_filter is not None
            else AntigenExclusionFilter()
        )
        self.decimals = decimals

    @staticmethod
    def pra_factor(pra: Any, id_recipient: Any = None) -> float:
        """Multiplier for sensitization; PRA 100 gives 0."""
        pra = validate_pra(pra, id_recipient=id_recipient)
        return clamp(
            (es.PRA_MAX - pra) / es.PRA_MAX,
            lims=(0, 1)
        )

    def score(self, donor: Donor, recipient: Recipient) -> MatchRecord:
        """Calculate the compatibility score of a donor for a recipient"""

        # Hard gate 1: blood type
        blood_type_match = self.blood_types.is_compatible(
            donor.d_bloodgroup, recipient.r_bloodgroup
        )

        # HLA matches are always computed, also if a gate fails.
        hla_per_locus = self.hla_comparator.matches_per_locus(
            donor.hla, recipient.hla
        )
        hla_matches = sum(hla_per_locus.values())
        hla_score = self.hla_comparator.hla_score(hla_matches)

        # Hard gate 2: crossmatch
        crossmatch_compatible = self.crossmatch.is_crossmatch_compatible(
            donor.crossmatch_result, recipient.crossmatch_requirement
        )

        pra_factor = self.pra_factor(
            recipient.pra, id_recipient=recipient.id_recipient
        )

        if blood_type_match and crossmatch_compatible:
            compatibility_score = round_to_decimals(
                hla_score * pra_factor, self.decimals
            )
        else:
            compatibility_score = 0.0

        # Unacceptable antigens only determine classification.
        excluded_reason = self.antigen_filter.excluded_reason(
            recipient.unacceptable_antigens, donor.donor_antibodies
        )

        return MatchRecord(
            donor=donor,
            recipient=recipient,
            compatibility_score=compatibility_score,
            match_details=MatchDetails(
                blood_type_match=blood_type_match,
                hla_matches=self.hla_comparator.capped_matches(hla_matches),
                crossmatch_compatible=crossmatch_compatible,
                has_unacceptable_antigens=excluded_reason is not None,
                excluded_reason=excluded_reason,
                hla_matches_per_locus=hla_per_locus,
                pra_factor=pra_factor
            )
        )

    def __str__(self):
        return (
            f'bg_match*xm_match*round(min(hla_matches, '
            f'{self.hla_comparator.n_antigens})/'
            f'{self.hla_comparator.n_antigens}*(100-pra)/100, '
            f'{self.decimals})'
        )
