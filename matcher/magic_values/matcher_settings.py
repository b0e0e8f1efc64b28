#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

Magic values for the matcher. Only magic values
which are to some extent immodifiable are included.

"""

from typing import Dict, Tuple
import matcher.magic_values.magic_values_rules as mgr
import matcher.magic_values.column_names as cn

DIR_MATCH_SETTINGS = 'matcher/match_yamls/'
DIR_TEST_DATA = 'data/test/'

# Directed donor -> recipient blood type compatibility (ABO/Rh).
BLOOD_TYPE_COMPATIBILITY: Dict[str, Tuple[str, ...]] = {
    mgr.BT_O_NEG: mgr.ALL_BLOOD_TYPES,
    mgr.BT_O_POS: (
        mgr.BT_O_POS, mgr.BT_A_POS, mgr.BT_B_POS, mgr.BT_AB_POS
    ),
    mgr.BT_A_NEG: (
        mgr.BT_A_NEG, mgr.BT_A_POS, mgr.BT_AB_NEG, mgr.BT_AB_POS
    ),
    mgr.BT_A_POS: (mgr.BT_A_POS, mgr.BT_AB_POS),
    mgr.BT_B_NEG: (
        mgr.BT_B_NEG, mgr.BT_B_POS, mgr.BT_AB_NEG, mgr.BT_AB_POS
    ),
    mgr.BT_B_POS: (mgr.BT_B_POS, mgr.BT_AB_POS),
    mgr.BT_AB_NEG: (mgr.BT_AB_NEG, mgr.BT_AB_POS),
    mgr.BT_AB_POS: (mgr.BT_AB_POS,)
}

# Nominal HLA denominator: 2 alleles for each of the 6 loci. This is
# a fixed normalization constant, not derived from the typed alleles.
N_ALLELES_PER_LOCUS = 2
N_HLA_ANTIGENS = N_ALLELES_PER_LOCUS * len(mgr.ALL_HLA_LOCI)

# PRA bounds (percentages)
PRA_MIN = 0
PRA_MAX = 100

# Decimals for compatibility scores
SCORE_DECIMALS = 2

# Separator for allele / antigen strings
ANTIGEN_SEPARATOR = ','

# Placeholder for missing values in reports
MISSING_VALUE_DISPLAY = 'N/A'

# Length of generated report identifiers
REPORT_ID_LENGTH = 8

# Default settings, used if absent from the settings file
DEFAULT_SETTINGS = {
    'ELIGIBLE_DONOR_STATUSES': [mgr.DONOR_AVAILABLE],
    'N_WORKERS': 1,
    'RESULTS_FOLDER': 'results/',
    'PATH_MATCH_RESULTS': 'match_results.csv',
    'PATH_LOG': 'matching_errors.log',
    'LOG_LEVEL': 'INFO',
    'PATH_DONORS': None,
    'PATH_RECIPIENTS': None
}

# Columns exported per match record
MATCH_RECORD_COLS = (
    cn.ID_DONOR, cn.FULL_NAME, cn.D_BLOOD_TYPE, cn.R_BLOOD_TYPE,
    cn.CLASSIFICATION, cn.COMPATIBILITY_SCORE, cn.BLOOD_TYPE_MATCH,
    cn.HLA_MATCHES, cn.CROSSMATCH_COMPATIBLE,
    cn.HAS_UNACCEPTABLE_ANTIGENS, cn.PRA_FACTOR, cn.EXCLUDED_REASON
)
