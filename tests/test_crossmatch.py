#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

"""

import sys
sys.path.append('./')
if True:  # noqa E402
    import unittest
    import warnings
    import matcher.magic_values.magic_values_rules as mgr
    from matcher.code.CrossmatchEvaluator import (
        CrossmatchEvaluator, is_crossmatch_compatible
    )


class TestCrossmatch(unittest.TestCase):

    def test_equal_tokens(self):
        self.assertTrue(
            is_crossmatch_compatible(mgr.XM_NEGATIVE, mgr.XM_NEGATIVE)
        )
        self.assertTrue(
            is_crossmatch_compatible(mgr.XM_POSITIVE, mgr.XM_POSITIVE)
        )

    def test_unequal_tokens(self):
        self.assertFalse(
            is_crossmatch_compatible(mgr.XM_POSITIVE, mgr.XM_NEGATIVE)
        )
        self.assertFalse(is_crossmatch_compatible('negative', 'Negative'))

    def test_missing(self):
        self.assertFalse(is_crossmatch_compatible(None, mgr.XM_NEGATIVE))
        self.assertFalse(is_crossmatch_compatible(mgr.XM_NEGATIVE, None))

    def test_unknown_token_warns(self):
        xm = CrossmatchEvaluator()
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            self.assertTrue(xm.is_crossmatch_compatible('Weak', 'Weak'))
        self.assertEqual(len(w), 2)

        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter('always')
            xm.is_crossmatch_compatible(mgr.XM_NEGATIVE, mgr.XM_NEGATIVE)
        self.assertEqual(len(w), 0)


if __name__ == '__main__':
    unittest.main()
