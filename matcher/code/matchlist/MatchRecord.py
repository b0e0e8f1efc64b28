#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

"""

from typing import Any, Dict, Optional

import matcher.magic_values.column_names as cn
import matcher.magic_values.magic_values_rules as mgr
from matcher.code.entities import Donor, Recipient


class MatchDetails:
    """Details on how a compatibility score was obtained.

    Attributes
    ----------
    blood_type_match : bool
        whether donor blood type may donate to recipient
    hla_matches : int
        number of shared HLA tokens (capped at 12)
    crossmatch_compatible : bool
        whether crossmatch result equals recipient requirement
    has_unacceptable_antigens : bool
        whether the donor carries any unacceptable antigen
    excluded_reason : Optional[str]
        human-readable exclusion reason
    hla_matches_per_locus : Dict[str, int]
        uncapped number of shared HLA tokens per locus
    pra_factor : float
        multiplier derived from recipient PRA
    """
    __slots__ = (
        'blood_type_match', 'hla_matches', 'crossmatch_compatible',
        'has_unacceptable_antigens', 'excluded_reason',
        'hla_matches_per_locus', 'pra_factor'
    )

    def __init__(
        self,
        blood_type_match: bool,
        hla_matches: int,
        crossmatch_compatible: bool,
        has_unacceptable_antigens: bool = False,
        excluded_reason: Optional[str] = None,
        hla_matches_per_locus: Optional[Dict[str, int]] = None,
        pra_factor: Optional[float] = None
    ) -> None:
        self.blood_type_match = blood_type_match
        self.hla_matches = hla_matches
        self.crossmatch_compatible = crossmatch_compatible
        self.has_unacceptable_antigens = has_unacceptable_antigens
        self.excluded_reason = excluded_reason
        self.hla_matches_per_locus = (
            hla_matches_per_locus if hla_matches_per_locus is not None
            else {}
        )
        self.pra_factor = pra_factor

    def as_dict(self) -> Dict[str, Any]:
        return {
            cn.BLOOD_TYPE_MATCH: self.blood_type_match,
            cn.HLA_MATCHES: self.hla_matches,
            cn.CROSSMATCH_COMPATIBLE: self.crossmatch_compatible,
            cn.HAS_UNACCEPTABLE_ANTIGENS: self.has_unacceptable_antigens,
            cn.EXCLUDED_REASON: self.excluded_reason,
            cn.PRA_FACTOR: self.pra_factor
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, MatchDetails):
            return NotImplemented
        return all(
            getattr(self, k) == getattr(other, k) for k in self.__slots__
        )

    def __getstate__(self):
        return {k: getattr(self, k) for k in self.__slots__}

    def __setstate__(self, state):
        for k, v in state.items():
            setattr(self, k, v)

    def __repr__(self) -> str:
        return (
            f'MatchDetails(bg: {self.blood_type_match}, '
            f'hla: {self.hla_matches}, xm: {self.crossmatch_compatible}, '
            f'unacc: {self.has_unacceptable_antigens})'
        )


class MatchRecord:
    """
    Class which implements the result of matching one
    donor to a recipient.

    Attributes
    ----------
    donor : Donor
        Donor information.
    recipient : Recipient
        Recipient information.
    compatibility_score : float
        Compatibility score in [0, 1], rounded to 2 decimals.
    match_details : MatchDetails
        Match details underlying the score.
    """

    def __init__(
        self,
        donor: Donor,
        recipient: Recipient,
        compatibility_score: float,
        match_details: MatchDetails
    ) -> None:
        self.donor = donor
        self.recipient = recipient
        self.compatibility_score = compatibility_score
        self.match_details = match_details

    @property
    def classification(self) -> str:
        # Exclusion takes precedence over the score.
        if self.match_details.has_unacceptable_antigens:
            return mgr.EXCLUDED
        elif self.compatibility_score > 0:
            return mgr.COMPATIBLE
        else:
            return mgr.INCOMPATIBLE

    @property
    def is_compatible(self) -> bool:
        return self.classification == mgr.COMPATIBLE

    @property
    def reason(self) -> Optional[str]:
        """Reason why a donor is not compatible, if applicable"""
        md = self.match_details
        if md.has_unacceptable_antigens:
            return md.excluded_reason
        if self.compatibility_score > 0:
            return None
        if not md.blood_type_match:
            return mgr.REASON_BLOOD_TYPE
        if not md.crossmatch_compatible:
            return mgr.REASON_CROSSMATCH
        if md.hla_matches == 0:
            return mgr.REASON_NO_HLA
        if md.pra_factor == 0:
            return mgr.REASON_PRA
        return mgr.REASON_DEFAULT

    def return_match_info(self) -> Dict[str, Any]:
        """Return match information as a flat dictionary"""
        info = {
            cn.ID_DONOR: self.donor.id_donor,
            cn.ID_RECIPIENT: self.recipient.id_recipient,
            cn.FULL_NAME: self.donor.full_name,
            cn.D_BLOOD_TYPE: self.donor.d_bloodgroup,
            cn.R_BLOOD_TYPE: self.recipient.r_bloodgroup,
            cn.CLASSIFICATION: self.classification,
            cn.COMPATIBILITY_SCORE: self.compatibility_score,
            cn.MATCH_REASON: self.reason
        }
        info.update(self.match_details.as_dict())
        info.update(
            {
                f'{cn.HLA_MATCHES_PREFIX}'
                f'{mgr.LOCUS_SHORT_NAMES[locus].lower()}': n
                for locus, n in self.match_details.hla_matches_per_locus.items()
            }
        )
        return info

    def __eq__(self, other) -> bool:
        if not isinstance(other, MatchRecord):
            return NotImplemented
        return (
            self.donor is other.donor and
            self.recipient is other.recipient and
            self.compatibility_score == other.compatibility_score and
            self.match_details == other.match_details
        )

    def __str__(self) -> str:
        return (
            f'{self.classification} match of donor '
            f'{self.donor.id_donor} ({self.donor.d_bloodgroup}) to '
            f'recipient {self.recipient.id_recipient} '
            f'({self.recipient.r_bloodgroup}) with score '
            f'{self.compatibility_score:.2f} and '
            f'{self.match_details.hla_matches} HLA matches'
        )
