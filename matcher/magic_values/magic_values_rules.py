#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

Immutable values for blood types, HLA loci and match classification

"""

# Blood types (ABO with Rh factor)
BT_O_NEG = 'O-'
BT_O_POS = 'O+'
BT_A_NEG = 'A-'
BT_A_POS = 'A+'
BT_B_NEG = 'B-'
BT_B_POS = 'B+'
BT_AB_NEG = 'AB-'
BT_AB_POS = 'AB+'
ALL_BLOOD_TYPES = (
    BT_O_NEG, BT_O_POS, BT_A_NEG, BT_A_POS,
    BT_B_NEG, BT_B_POS, BT_AB_NEG, BT_AB_POS
)
ALLOWED_BLOOD_TYPES = frozenset(ALL_BLOOD_TYPES)

# HLA loci
HLA_A = 'hla_a'
HLA_B = 'hla_b'
HLA_C = 'hla_c'
HLA_DR = 'hla_dr'
HLA_DQ = 'hla_dq'
HLA_DP = 'hla_dp'
ALL_HLA_LOCI = (
    HLA_A, HLA_B, HLA_C, HLA_DR, HLA_DQ, HLA_DP
)

# Short locus names, as used on typing forms and in reports
LOCUS_SHORT_NAMES = {
    HLA_A: 'A',
    HLA_B: 'B',
    HLA_C: 'C',
    HLA_DR: 'DR',
    HLA_DQ: 'DQ',
    HLA_DP: 'DP'
}
SHORT_NAMES_TO_LOCUS = {v: k for k, v in LOCUS_SHORT_NAMES.items()}

# Crossmatch tokens
XM_NEGATIVE = 'Negative'
XM_POSITIVE = 'Positive'
KNOWN_CROSSMATCH_TOKENS = frozenset((XM_NEGATIVE, XM_POSITIVE))

# Donor statuses
DONOR_AVAILABLE = 'Available'
DONOR_UTILIZED = 'Utilized'
ALLOWED_DONOR_STATUSES = frozenset((DONOR_AVAILABLE, DONOR_UTILIZED))

# Match classification
COMPATIBLE = 'Compatible'
INCOMPATIBLE = 'Incompatible'
EXCLUDED = 'Excluded'
ALL_CLASSIFICATIONS = (COMPATIBLE, INCOMPATIBLE, EXCLUDED)

# Reasons for incompatibility, in order of evaluation
REASON_BLOOD_TYPE = 'Blood type incompatible'
REASON_CROSSMATCH = 'Crossmatch incompatible'
REASON_NO_HLA = 'No HLA matches'
REASON_PRA = 'PRA fully sensitised'
REASON_DEFAULT = 'Incompatible match'
