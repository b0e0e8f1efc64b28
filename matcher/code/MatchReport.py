#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

Assembly of the match report for a single recipient. Only the
report content is built here, not its rendering.

"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional
from uuid import uuid4

import matcher.magic_values.column_names as cn
import matcher.magic_values.matcher_settings as es
import matcher.magic_values.magic_values_rules as mgr
from matcher.code.entities import Recipient
from matcher.code.matchlist.MatchList import MatchList
from matcher.code.matchlist.MatchRecord import MatchRecord


def default_report_id() -> str:
    """First segment of a random UUID, in upper case"""
    return str(uuid4()).split('-')[0].upper()[:es.REPORT_ID_LENGTH]


def display_value(value: Any) -> Any:
    if value is None:
        return es.MISSING_VALUE_DISPLAY
    return value


def format_score(score: Optional[float]) -> str:
    """Render a score in [0, 1] as a percentage, e.g. 20.0%"""
    if score is None:
        return es.MISSING_VALUE_DISPLAY
    return f'{score * 100:.1f}%'


class MatchReport:
    """Class which assembles a report from a match list.

    Attributes   #noqa
    ----------
    recipient: Recipient
        recipient for whom the report is made
    match_list: MatchList
        match list for the recipient
    report_id: str
        identifier of the report, obtained from id_source
    report_time: datetime
        time at which the report was made
    """

    def __init__(
        self,
        recipient: Recipient,
        match_list: MatchList,
        report_time: Optional[datetime] = None,
        id_source: Optional[Callable[[], str]] = None
    ) -> None:
        self.recipient = recipient
        self.match_list = match_list
        self.report_time = (
            report_time if report_time is not None else datetime.now()
        )
        if id_source is None:
            id_source = default_report_id
        self.report_id = id_source()

    display_value = staticmethod(display_value)
    format_score = staticmethod(format_score)

    def summary(self) -> Dict[str, Any]:
        summ = dict(self.match_list.counts())
        if (best_score := self.match_list.best_score()) is not None:
            summ[cn.BEST_MATCH_SCORE] = best_score
        return summ

    def highest_compatible(self) -> Optional[MatchRecord]:
        if (ranked := self.match_list.ranked_compatible()):
            return ranked[0]
        return None

    def hla_comparison(self, record: MatchRecord) -> List[Dict[str, Any]]:
        """Per-locus comparison of donor and recipient HLA"""
        per_locus = record.match_details.hla_matches_per_locus
        return [
            {
                'locus': mgr.LOCUS_SHORT_NAMES[locus],
                'donor': self.display_value(
                    record.donor.hla.locus_string(locus) or None
                ),
                'recipient': self.display_value(
                    record.recipient.hla.locus_string(locus) or None
                ),
                cn.HLA_MATCHES: per_locus.get(locus, 0)
            }
            for locus in mgr.ALL_HLA_LOCI
        ]

    def _donor_row(self, record: MatchRecord) -> Dict[str, Any]:
        donor = record.donor
        row = {
            cn.ID_DONOR: donor.id_donor,
            cn.FULL_NAME: donor.full_name,
            cn.MRN: donor.mrn,
            cn.NATIONAL_ID: donor.national_id,
            cn.BLOOD_TYPE: donor.d_bloodgroup,
            cn.DONOR_STATUS: donor.status,
            cn.CLASSIFICATION: record.classification,
            cn.MATCH_REASON: record.reason
        }
        return {k: self.display_value(v) for k, v in row.items()}

    def other_donors_rows(self) -> List[Dict[str, Any]]:
        """Rows for donors which are not compatible. Incompatible
        donors are listed first, then excluded donors."""
        return [
            self._donor_row(record)
            for record in (
                self.match_list.incompatible() + self.match_list.excluded()
            )
        ]

    def _best_match(self) -> Optional[Dict[str, Any]]:
        if (best := self.highest_compatible()) is None:
            return None
        donor = best.donor
        return {
            cn.ID_DONOR: donor.id_donor,
            cn.FULL_NAME: self.display_value(donor.full_name),
            cn.MRN: self.display_value(donor.mrn),
            cn.BLOOD_TYPE: self.display_value(donor.d_bloodgroup),
            cn.COMPATIBILITY_SCORE: self.format_score(
                best.compatibility_score
            ),
            cn.HLA_MATCHES: best.match_details.hla_matches,
            cn.CROSSMATCH_RESULT: self.display_value(
                donor.crossmatch_result
            ),
            cn.DSA_DETECTED: self.display_value(donor.dsa_detected),
            cn.DSA_MFI: self.display_value(donor.dsa_mfi),
            'clinical': {
                k: self.display_value(v) for k, v in donor.clinical.items()
            },
            'hla_comparison': self.hla_comparison(best)
        }

    def to_dict(self) -> Dict[str, Any]:
        recipient = self.recipient
        summ = self.summary()
        return {
            cn.REPORT_ID: self.report_id,
            cn.REPORT_TIME: self.report_time.isoformat(),
            'recipient': {
                cn.ID_RECIPIENT: recipient.id_recipient,
                cn.FULL_NAME: self.display_value(recipient.full_name),
                cn.MRN: self.display_value(recipient.mrn),
                cn.NATIONAL_ID: self.display_value(recipient.national_id),
                cn.BLOOD_TYPE: self.display_value(recipient.r_bloodgroup),
                cn.PRA: recipient.pra,
                cn.CROSSMATCH_REQUIREMENT: self.display_value(
                    recipient.crossmatch_requirement
                ),
                cn.UNACCEPTABLE_ANTIGENS: self.display_value(
                    str(recipient.unacceptable_antigens) or None
                ),
                'clinical': {
                    k: self.display_value(v)
                    for k, v in recipient.clinical.items()
                }
            },
            'summary': {
                **summ,
                cn.BEST_MATCH_SCORE: self.format_score(
                    summ.get(cn.BEST_MATCH_SCORE)
                )
            },
            'best_match': self.display_value(self._best_match()),
            'ranked_compatible': [
                {
                    cn.ID_DONOR: mr.donor.id_donor,
                    cn.FULL_NAME: self.display_value(mr.donor.full_name),
                    cn.COMPATIBILITY_SCORE: self.format_score(
                        mr.compatibility_score
                    )
                }
                for mr in self.match_list.ranked_compatible()
            ],
            'other_donors': self.other_donors_rows()
        }

    def __str__(self) -> str:
        summ = self.summary()
        lines = [
            f'Match report {self.report_id} for recipient '
            f'{self.recipient.id_recipient} '
            f'({self.report_time:%Y-%m-%d %H:%M})',
            f'Total donors: {summ[cn.TOTAL_DONORS]}, '
            f'compatible: {summ[cn.N_COMPATIBLE]}, '
            f'incompatible: {summ[cn.N_INCOMPATIBLE]}, '
            f'excluded: {summ[cn.N_EXCLUDED]}',
            'Best match score: '
            f'{self.format_score(summ.get(cn.BEST_MATCH_SCORE))}'
        ]
        if (best := self.highest_compatible()) is not None:
            lines.append(f'Best match: {best}')
        return '\n'.join(lines)
