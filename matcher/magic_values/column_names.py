#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

Column names for input tables and match records

"""

import sys
sys.path.append('./')
import matcher.magic_values.magic_values_rules as mgr

# Identity columns
ID_DONOR = 'id_donor'
ID_RECIPIENT = 'id_recipient'
MRN = 'mrn'
NATIONAL_ID = 'national_id'
FULL_NAME = 'full_name'
AGE = 'age'
MOBILE_NUMBER = 'mobile_number'

# Matching inputs
BLOOD_TYPE = 'blood_type'
D_BLOOD_TYPE = 'd_blood_type'
R_BLOOD_TYPE = 'r_blood_type'
HLA_A = mgr.HLA_A
HLA_B = mgr.HLA_B
HLA_C = mgr.HLA_C
HLA_DR = mgr.HLA_DR
HLA_DQ = mgr.HLA_DQ
HLA_DP = mgr.HLA_DP
PRA = 'pra'
CROSSMATCH_REQUIREMENT = 'crossmatch_requirement'
CROSSMATCH_RESULT = 'crossmatch_result'
UNACCEPTABLE_ANTIGENS = 'unacceptable_antigens'
DONOR_ANTIBODIES = 'donor_antibodies'
DONOR_STATUS = 'status'
DSA_DETECTED = 'dsa_detected'
DSA_MFI = 'dsa_mfi'

# Clinical columns (not used for scoring)
SERUM_CREATININE = 'serum_creatinine'
EGFR = 'egfr'
BLOOD_PRESSURE = 'blood_pressure'
VIRAL_SCREENING = 'viral_screening'
CMV_STATUS = 'cmv_status'
MEDICAL_HISTORY = 'medical_history'
MEDICAL_CONDITIONS = 'medical_conditions'
HIGH_RES_TYPING = 'high_res_typing'
NOTES = 'notes'

# Match details
BLOOD_TYPE_MATCH = 'blood_type_match'
HLA_MATCHES = 'hla_matches'
CROSSMATCH_COMPATIBLE = 'crossmatch_compatible'
HAS_UNACCEPTABLE_ANTIGENS = 'has_unacceptable_antigens'
EXCLUDED_REASON = 'excluded_reason'
PRA_FACTOR = 'pra_factor'
COMPATIBILITY_SCORE = 'compatibility_score'
CLASSIFICATION = 'classification'
MATCH_REASON = 'reason'
HLA_MATCHES_PREFIX = 'hla_matches_'

# Report summary
TOTAL_DONORS = 'total_donors'
N_COMPATIBLE = 'compatible_donors'
N_INCOMPATIBLE = 'incompatible_donors'
N_EXCLUDED = 'excluded_donors'
BEST_MATCH_SCORE = 'best_match_score'
REPORT_ID = 'report_id'
REPORT_TIME = 'report_time'
