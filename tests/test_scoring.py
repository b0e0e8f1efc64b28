#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

"""

import sys
sys.path.append('./')
if True:  # noqa E402
    import unittest
    import matcher.magic_values.magic_values_rules as mgr
    from matcher.code.entities import (
        Donor, Recipient, InvalidRecordError, validate_pra
    )
    from matcher.code.matchlist.ScoringFunction import ScoreAggregator
    from matcher.code.utils.utils import round_to_decimals


class TestScoreAggregator(unittest.TestCase):
    """Test whether compatibility scores are correctly calculated
    """

    def setUp(self):
        self.aggregator = ScoreAggregator()
        self.donor = Donor.from_dummy_donor()
        self.recipient = Recipient.from_dummy_recipient()

    def test_reference_scenario(self):
        """O- donor with 3 HLA matches for an A+ recipient, PRA 20"""
        mr = self.aggregator.score(self.donor, self.recipient)
        self.assertEqual(mr.compatibility_score, 0.2)
        self.assertTrue(mr.match_details.blood_type_match)
        self.assertEqual(mr.match_details.hla_matches, 3)
        self.assertTrue(mr.match_details.crossmatch_compatible)
        self.assertFalse(mr.match_details.has_unacceptable_antigens)
        self.assertIsNone(mr.match_details.excluded_reason)
        self.assertEqual(mr.classification, mgr.COMPATIBLE)
        self.assertIsNone(mr.reason)

    def test_blood_type_gate(self):
        donor = Donor.from_dummy_donor(bloodgroup=mgr.BT_B_POS)
        mr = self.aggregator.score(donor, self.recipient)
        self.assertEqual(mr.compatibility_score, 0.0)
        self.assertFalse(mr.match_details.blood_type_match)
        self.assertEqual(mr.match_details.hla_matches, 3)
        self.assertEqual(mr.classification, mgr.INCOMPATIBLE)
        self.assertEqual(mr.reason, mgr.REASON_BLOOD_TYPE)

    def test_crossmatch_gate(self):
        donor = Donor.from_dummy_donor(crossmatch_result=mgr.XM_POSITIVE)
        mr = self.aggregator.score(donor, self.recipient)
        self.assertEqual(mr.compatibility_score, 0.0)
        self.assertFalse(mr.match_details.crossmatch_compatible)
        self.assertEqual(mr.reason, mgr.REASON_CROSSMATCH)

    def test_no_hla_matches(self):
        donor = Donor.from_dummy_donor(hla={'A': 'A3', 'B': 'B44'})
        mr = self.aggregator.score(donor, self.recipient)
        self.assertEqual(mr.compatibility_score, 0.0)
        self.assertEqual(mr.classification, mgr.INCOMPATIBLE)
        self.assertEqual(mr.reason, mgr.REASON_NO_HLA)

    def test_fully_sensitised(self):
        """PRA 100 gives a score of 0, but is not an error"""
        recipient = Recipient.from_dummy_recipient(pra=100)
        mr = self.aggregator.score(self.donor, recipient)
        self.assertEqual(mr.compatibility_score, 0.0)
        self.assertEqual(mr.match_details.pra_factor, 0)
        self.assertEqual(mr.classification, mgr.INCOMPATIBLE)
        self.assertEqual(mr.reason, mgr.REASON_PRA)

    def test_pra_zero(self):
        recipient = Recipient.from_dummy_recipient(pra=0)
        mr = self.aggregator.score(self.donor, recipient)
        self.assertEqual(mr.compatibility_score, 0.25)

    def test_exclusion_overrides_score(self):
        """Unacceptable antigens leave the score, but exclude the donor"""
        recipient = Recipient.from_dummy_recipient(
            unacceptable_antigens='B7, A24'
        )
        donor = Donor.from_dummy_donor(donor_antibodies='B7')
        mr = self.aggregator.score(donor, recipient)
        self.assertEqual(mr.compatibility_score, 0.2)
        self.assertTrue(mr.match_details.has_unacceptable_antigens)
        self.assertEqual(mr.classification, mgr.EXCLUDED)
        self.assertEqual(mr.reason, 'Unacceptable antigens: B7')

    def test_rounding(self):
        donor = Donor.from_dummy_donor(
            hla={'A': 'A1', 'B': 'B7, B8', 'DR': 'DR15'}
        )
        mr = self.aggregator.score(donor, self.recipient)
        self.assertEqual(mr.compatibility_score, 0.27)
        self.assertEqual(round_to_decimals(0.125, 2), 0.13)

    def test_rounding_of_float_product(self):
        """0.25 * 0.58 is just below 0.145 as a float, and rounds down"""
        recipient = Recipient.from_dummy_recipient(pra=42)
        mr = self.aggregator.score(self.donor, recipient)
        self.assertEqual(mr.compatibility_score, 0.14)

    def test_score_bounds(self):
        hla = {'A': 'A1, A2', 'B': 'B7, B8', 'C': 'C1, C2',
               'DR': 'DR1, DR4', 'DQ': 'DQ5, DQ6', 'DP': 'DP1, DP2'}
        donor = Donor.from_dummy_donor(hla=hla)
        recipient = Recipient.from_dummy_recipient(hla=hla, pra=0)
        mr = self.aggregator.score(donor, recipient)
        self.assertEqual(mr.match_details.hla_matches, 12)
        self.assertEqual(mr.compatibility_score, 1.0)

    def test_idempotent(self):
        first = self.aggregator.score(self.donor, self.recipient)
        second = self.aggregator.score(self.donor, self.recipient)
        self.assertEqual(first, second)
        self.assertEqual(
            first.return_match_info(), second.return_match_info()
        )

    def test_pra_factor(self):
        self.assertEqual(ScoreAggregator.pra_factor(20), 0.8)
        self.assertEqual(ScoreAggregator.pra_factor(0), 1)
        self.assertEqual(ScoreAggregator.pra_factor(100), 0)
        with self.assertRaises(InvalidRecordError):
            ScoreAggregator.pra_factor(120)


class TestValidatePRA(unittest.TestCase):

    def test_valid(self):
        self.assertEqual(validate_pra(20), 20)
        self.assertEqual(validate_pra(20.0), 20)
        self.assertEqual(validate_pra('35'), 35)

    def test_rejected(self):
        for pra in (-1, 101, 20.5, None, float('nan'), 'high', True):
            with self.assertRaises(InvalidRecordError, msg=repr(pra)):
                validate_pra(pra, id_recipient='R1')

    def test_recipient_rejects_pra(self):
        with self.assertRaises(InvalidRecordError) as cm:
            Recipient.from_dummy_recipient(id_recipient='R9', pra=150)
        self.assertEqual(cm.exception.id_record, 'R9')
        self.assertIn('R9', str(cm.exception))


if __name__ == '__main__':
    unittest.main()
