#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

Data types for the input files

"""

import matcher.magic_values.column_names as cn
import matcher.magic_values.magic_values_rules as mgr

HLA_COLS = mgr.ALL_HLA_LOCI

DTYPE_DONORLIST = {
    cn.ID_DONOR: 'object',
    cn.MRN: 'object',
    cn.NATIONAL_ID: 'object',
    cn.FULL_NAME: 'object',
    cn.AGE: 'Int64',
    cn.MOBILE_NUMBER: 'object',
    cn.BLOOD_TYPE: 'object',
    cn.HLA_A: 'object',
    cn.HLA_B: 'object',
    cn.HLA_C: 'object',
    cn.HLA_DR: 'object',
    cn.HLA_DQ: 'object',
    cn.HLA_DP: 'object',
    cn.CROSSMATCH_RESULT: 'object',
    cn.DONOR_ANTIBODIES: 'object',
    cn.DONOR_STATUS: 'object',
    cn.DSA_DETECTED: 'boolean',
    cn.DSA_MFI: 'float64',
    cn.SERUM_CREATININE: 'float64',
    cn.EGFR: 'float64',
    cn.BLOOD_PRESSURE: 'object',
    cn.VIRAL_SCREENING: 'object',
    cn.CMV_STATUS: 'object',
    cn.MEDICAL_CONDITIONS: 'object',
    cn.HIGH_RES_TYPING: 'object',
    cn.NOTES: 'object'
}

DTYPE_RECIPIENTLIST = {
    cn.ID_RECIPIENT: 'object',
    cn.MRN: 'object',
    cn.NATIONAL_ID: 'object',
    cn.FULL_NAME: 'object',
    cn.AGE: 'Int64',
    cn.MOBILE_NUMBER: 'object',
    cn.BLOOD_TYPE: 'object',
    cn.HLA_A: 'object',
    cn.HLA_B: 'object',
    cn.HLA_C: 'object',
    cn.HLA_DR: 'object',
    cn.HLA_DQ: 'object',
    cn.HLA_DP: 'object',
    cn.PRA: 'float64',
    cn.CROSSMATCH_REQUIREMENT: 'object',
    cn.UNACCEPTABLE_ANTIGENS: 'object',
    cn.SERUM_CREATININE: 'float64',
    cn.EGFR: 'float64',
    cn.BLOOD_PRESSURE: 'object',
    cn.VIRAL_SCREENING: 'object',
    cn.CMV_STATUS: 'object',
    cn.MEDICAL_HISTORY: 'object',
    cn.NOTES: 'object'
}

# Text columns which are filled with an empty string if missing.
DTYPE_DONOR_FILL_NAS = {
    col: '' for col in HLA_COLS + (
        cn.CROSSMATCH_RESULT, cn.DONOR_ANTIBODIES
    )
}
DTYPE_DONOR_FILL_NAS[cn.DONOR_STATUS] = mgr.DONOR_AVAILABLE

DTYPE_RECIPIENT_FILL_NAS = {
    col: '' for col in HLA_COLS + (
        cn.CROSSMATCH_REQUIREMENT, cn.UNACCEPTABLE_ANTIGENS
    )
}
