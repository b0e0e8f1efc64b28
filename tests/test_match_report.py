#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

"""

import sys
sys.path.append('./')
if True:  # noqa E402
    import unittest
    from datetime import datetime
    import matcher.magic_values.column_names as cn
    import matcher.magic_values.magic_values_rules as mgr
    from matcher.code.matchlist.MatchList import MatchBatchProcessor
    from matcher.code.MatchReport import (
        MatchReport, default_report_id, format_score
    )
    from tests.synthetic.SyntheticEntities import (
        recipient_a_pos, donor_panel
    )


class TestMatchReport(unittest.TestCase):
    """Test whether match reports are correctly assembled
    """

    def setUp(self):
        self.recipient = recipient_a_pos()
        self.match_list = MatchBatchProcessor().process(
            self.recipient, donor_panel()
        )
        self.report_time = datetime(2026, 10, 19, 9, 30)
        self.report = MatchReport(
            recipient=self.recipient,
            match_list=self.match_list,
            report_time=self.report_time,
            id_source=lambda: 'REPORT01'
        )

    def test_deterministic_id_and_time(self):
        self.assertEqual(self.report.report_id, 'REPORT01')
        report_dict = self.report.to_dict()
        self.assertEqual(report_dict[cn.REPORT_ID], 'REPORT01')
        self.assertEqual(
            report_dict[cn.REPORT_TIME], '2026-10-19T09:30:00'
        )

    def test_default_id(self):
        report_id = default_report_id()
        self.assertEqual(len(report_id), 8)
        self.assertEqual(report_id, report_id.upper())

    def test_summary(self):
        self.assertEqual(
            self.report.summary(),
            {
                cn.TOTAL_DONORS: 7,
                cn.N_COMPATIBLE: 3,
                cn.N_INCOMPATIBLE: 3,
                cn.N_EXCLUDED: 1,
                cn.BEST_MATCH_SCORE: 0.27
            }
        )

    def test_summary_without_compatible(self):
        report = MatchReport(
            recipient=self.recipient,
            match_list=MatchBatchProcessor().process(self.recipient, []),
            id_source=lambda: 'EMPTY'
        )
        self.assertNotIn(cn.BEST_MATCH_SCORE, report.summary())
        self.assertIsNone(report.highest_compatible())
        self.assertEqual(report.to_dict()['best_match'], 'N/A')

    def test_highest_compatible(self):
        self.assertEqual(
            self.report.highest_compatible().donor.id_donor, 'D5'
        )

    def test_hla_comparison(self):
        rows = self.report.hla_comparison(self.report.highest_compatible())
        self.assertEqual(
            [row['locus'] for row in rows],
            ['A', 'B', 'C', 'DR', 'DQ', 'DP']
        )
        self.assertEqual(
            rows[1],
            {
                'locus': 'B', 'donor': 'B7, B8',
                'recipient': 'B7, B8', cn.HLA_MATCHES: 2
            }
        )
        self.assertEqual(rows[2]['donor'], 'N/A')

    def test_other_donors(self):
        """Incompatible donors come first, then excluded donors"""
        rows = self.report.other_donors_rows()
        self.assertEqual(
            [row[cn.ID_DONOR] for row in rows], ['D2', 'D4', 'D7', 'D3']
        )
        self.assertEqual(
            [row[cn.MATCH_REASON] for row in rows],
            [
                mgr.REASON_BLOOD_TYPE,
                mgr.REASON_CROSSMATCH,
                mgr.REASON_NO_HLA,
                'Unacceptable antigens: B8'
            ]
        )
        self.assertEqual(rows[2][cn.FULL_NAME], 'N/A')
        self.assertEqual(rows[0][cn.MRN], 'N/A')
        self.assertEqual(rows[0][cn.DONOR_STATUS], mgr.DONOR_AVAILABLE)

    def test_formatting(self):
        self.assertEqual(format_score(0.2), '20.0%')
        self.assertEqual(format_score(0.27), '27.0%')
        self.assertEqual(format_score(None), 'N/A')
        self.assertEqual(MatchReport.display_value(None), 'N/A')
        self.assertEqual(MatchReport.display_value(0), 0)
        self.assertEqual(MatchReport.display_value(''), '')

    def test_to_dict(self):
        report_dict = self.report.to_dict()
        self.assertEqual(
            report_dict['summary'][cn.BEST_MATCH_SCORE], '27.0%'
        )
        self.assertEqual(
            [r[cn.ID_DONOR] for r in report_dict['ranked_compatible']],
            ['D5', 'D1', 'D6']
        )
        self.assertEqual(report_dict['best_match'][cn.ID_DONOR], 'D5')
        self.assertEqual(
            report_dict['recipient'][cn.UNACCEPTABLE_ANTIGENS], 'B8'
        )
        self.assertEqual(report_dict['recipient'][cn.NATIONAL_ID], 'N/A')
        self.assertIn('REPORT01', str(self.report))


if __name__ == '__main__':
    unittest.main()
