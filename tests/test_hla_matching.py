#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

"""

import sys
sys.path.append('./')
if True:  # noqa E402
    import pickle
    import unittest
    import matcher.magic_values.magic_values_rules as mgr
    from matcher.code.HLA.HLASystem import (
        HLAComparator, HLAProfile, parse_antigen_string
    )


class TestParseAntigens(unittest.TestCase):

    def test_parse(self):
        self.assertEqual(
            parse_antigen_string(' A1,A2 , ,A2'), frozenset(('A1', 'A2'))
        )
        self.assertEqual(parse_antigen_string(''), frozenset())
        self.assertEqual(parse_antigen_string(None), frozenset())
        self.assertEqual(parse_antigen_string(float('nan')), frozenset())

    def test_case_sensitive(self):
        self.assertEqual(
            HLAComparator.compare_locus('a1', 'A1'), 0
        )


class TestHLAComparator(unittest.TestCase):
    """Test whether HLA matches are correctly counted
    """

    def setUp(self):
        self.comparator = HLAComparator()
        self.donor_hla = HLAProfile.from_loci(
            A='A1, A2', B='B7', DR='DR15'
        )
        self.recipient_hla = HLAProfile.from_loci(
            A='A1', B='B7, B8', DR='DR15'
        )

    def test_compare_locus(self):
        self.assertEqual(self.comparator.compare_locus('A1, A2', 'A1'), 1)
        self.assertEqual(self.comparator.compare_locus('A1,A2', 'A2, A1'), 2)
        self.assertEqual(self.comparator.compare_locus('', 'A1'), 0)
        self.assertEqual(self.comparator.compare_locus(None, None), 0)

    def test_total_and_per_locus(self):
        per_locus = self.comparator.matches_per_locus(
            self.donor_hla, self.recipient_hla
        )
        self.assertEqual(
            per_locus,
            {
                mgr.HLA_A: 1, mgr.HLA_B: 1, mgr.HLA_C: 0,
                mgr.HLA_DR: 1, mgr.HLA_DQ: 0, mgr.HLA_DP: 0
            }
        )
        self.assertEqual(
            self.comparator.total_hla_score(
                self.donor_hla, self.recipient_hla
            ),
            3
        )

    def test_symmetry(self):
        self.assertEqual(
            self.comparator.total_hla_score(
                self.donor_hla, self.recipient_hla
            ),
            self.comparator.total_hla_score(
                self.recipient_hla, self.donor_hla
            )
        )

    def test_empty_inputs(self):
        self.assertEqual(self.comparator.total_hla_score(None, None), 0)
        self.assertEqual(
            self.comparator.total_hla_score({}, self.recipient_hla), 0
        )
        self.assertFalse(HLAProfile().is_typed)

    def test_mappings_with_short_names(self):
        self.assertEqual(
            self.comparator.total_hla_score(
                {'HLA-A': 'A1', 'hlaB': 'B7', 'DR': 'DR15'},
                {'hla_a': 'A1', 'hla_b': 'B7', 'hla_dr': 'DR15'}
            ),
            3
        )

    def test_unknown_locus(self):
        with self.assertRaises(ValueError):
            HLAProfile({'DX': 'A1'})

    def test_cap_and_normalization(self):
        self.assertEqual(self.comparator.hla_score(3), 0.25)
        self.assertEqual(self.comparator.hla_score(12), 1)
        self.assertEqual(self.comparator.capped_matches(14), 12)
        self.assertEqual(self.comparator.hla_score(14), 1)

    def test_more_than_two_alleles_per_locus(self):
        """Shared tokens are counted, also beyond two per locus"""
        hla = {
            locus: 'X1, X2, X3' for locus in mgr.ALL_HLA_LOCI
        }
        self.assertEqual(self.comparator.total_hla_score(hla, hla), 18)

    def test_pickle(self):
        restored = pickle.loads(pickle.dumps(self.donor_hla))
        self.assertEqual(restored, self.donor_hla)
        self.assertEqual(restored.locus_string('A'), 'A1, A2')
        self.assertEqual(
            restored.all_antigens, frozenset(('A1', 'A2', 'B7', 'DR15'))
        )


if __name__ == '__main__':
    unittest.main()
