#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

"""

from typing import Any, Dict, Optional
from warnings import warn

import numpy as np

import matcher.magic_values.column_names as cn
import matcher.magic_values.matcher_settings as es
import matcher.magic_values.magic_values_rules as mgr
from matcher.code.utils.utils import (
    nanOrNone, none_if_missing, text_or_empty
)
from matcher.code.HLA.HLASystem import HLAInput, as_hla_profile
from matcher.code.HLA.Unacceptables import Unacceptables


class InvalidRecordError(ValueError):
    """Raised for donor / recipient records which cannot be matched."""

    def __init__(self, message: str, id_record: Any = None) -> None:
        super(InvalidRecordError, self).__init__(message)
        self.id_record = id_record


def validate_pra(pra: Any, id_recipient: Any = None) -> int:
    """Check that a PRA is an integer percentage in [0, 100].
    Out-of-range PRAs are rejected, not clamped."""
    if isinstance(pra, (bool, np.bool_)) or nanOrNone(pra):
        raise InvalidRecordError(
            f'PRA for recipient {id_recipient} should be an integer '
            f'percentage, not {pra!r}',
            id_record=id_recipient
        )
    try:
        pra_float = float(pra)
    except (TypeError, ValueError):
        raise InvalidRecordError(
            f'PRA for recipient {id_recipient} should be an integer '
            f'percentage, not {pra!r}',
            id_record=id_recipient
        )
    if not pra_float.is_integer():
        raise InvalidRecordError(
            f'PRA for recipient {id_recipient} should be an integer '
            f'percentage, not {pra!r}',
            id_record=id_recipient
        )
    if not es.PRA_MIN <= pra_float <= es.PRA_MAX:
        raise InvalidRecordError(
            f'PRA for recipient {id_recipient} should be between '
            f'{es.PRA_MIN} and {es.PRA_MAX}, not {pra!r}',
            id_record=id_recipient
        )
    return int(pra_float)


def _check_blood_type(bloodgroup: Optional[str], entity: str) -> None:
    if bloodgroup not in mgr.ALLOWED_BLOOD_TYPES:
        warn(
            f'{entity} blood type {bloodgroup!r} is not one of '
            f'{", ".join(mgr.ALL_BLOOD_TYPES)}. It will not be '
            f'compatible with any blood type.'
        )


class Donor:
    """
    Class which implements a donor.

    Attributes   #noqa
    ----------
    id_donor : str
        ID for the donor.
    mrn : Optional[str]
        Medical record number.
    national_id : Optional[str]
        National identification number.
    full_name : Optional[str]
        Name of the donor.
    d_bloodgroup : str
        Blood type of the donor (e.g. 'O-').
    hla : HLAProfile
        HLA typing of the donor.
    crossmatch_result : Optional[str]
        Crossmatch result token (e.g. 'Negative').
    donor_antibodies : Unacceptables
        Antigens / antibodies the donor carries.
    status : str
        Donor status (Available / Utilized).
    dsa_detected : Optional[bool]
        Whether donor-specific antibodies were detected.
    dsa_mfi : Optional[float]
        Mean fluorescence intensity of the DSA.
    clinical : Dict[str, Any]
        Clinical information, not used for matching.
    """

    def __init__(
        self, id_donor: Any, bloodgroup: str,
        hla: HLAInput = None,
        crossmatch_result: Optional[str] = None,
        donor_antibodies: Optional[str] = None,
        status: str = mgr.DONOR_AVAILABLE,
        mrn: Optional[str] = None,
        national_id: Optional[str] = None,
        full_name: Optional[str] = None,
        dsa_detected: Optional[bool] = None,
        dsa_mfi: Optional[float] = None,
        age: Optional[int] = None,
        mobile_number: Optional[str] = None,
        serum_creatinine: Optional[float] = None,
        egfr: Optional[float] = None,
        blood_pressure: Optional[str] = None,
        viral_screening: Optional[str] = None,
        cmv_status: Optional[str] = None,
        medical_conditions: Optional[str] = None,
        high_res_typing: Optional[str] = None,
        notes: Optional[str] = None
    ) -> None:

        if nanOrNone(id_donor) or id_donor == '':
            raise InvalidRecordError('A donor requires an identifier.')
        self.id_donor = id_donor
        self.mrn = none_if_missing(mrn)
        self.national_id = none_if_missing(national_id)
        self.full_name = none_if_missing(full_name)

        # Unknown blood types are kept, and fail closed when matching.
        bloodgroup = none_if_missing(bloodgroup)
        _check_blood_type(bloodgroup, f'Donor {id_donor}')
        self.d_bloodgroup = bloodgroup

        self.hla = as_hla_profile(hla)
        self.crossmatch_result = none_if_missing(crossmatch_result)
        self.donor_antibodies = Unacceptables(text_or_empty(donor_antibodies))

        status = text_or_empty(status) or mgr.DONOR_AVAILABLE
        if status not in mgr.ALLOWED_DONOR_STATUSES:
            warn(
                f'Donor {id_donor} has unknown status {status!r}.'
            )
        self.status = status

        self.dsa_detected = (
            None if nanOrNone(dsa_detected) else bool(dsa_detected)
        )
        self.dsa_mfi = none_if_missing(dsa_mfi)

        self.clinical = {
            cn.AGE: none_if_missing(age),
            cn.MOBILE_NUMBER: none_if_missing(mobile_number),
            cn.SERUM_CREATININE: none_if_missing(serum_creatinine),
            cn.EGFR: none_if_missing(egfr),
            cn.BLOOD_PRESSURE: none_if_missing(blood_pressure),
            cn.VIRAL_SCREENING: none_if_missing(viral_screening),
            cn.CMV_STATUS: none_if_missing(cmv_status),
            cn.MEDICAL_CONDITIONS: none_if_missing(medical_conditions),
            cn.HIGH_RES_TYPING: none_if_missing(high_res_typing),
            cn.NOTES: none_if_missing(notes)
        }

    @property
    def has_dsa(self) -> bool:
        # DSA is considered detected if the lab reported it, or if
        # the donor carries any antibodies.
        if self.dsa_detected is not None:
            return self.dsa_detected
        return bool(self.donor_antibodies)

    def __str__(self) -> str:
        return (
            f'Donor {self.id_donor} ({self.full_name}), '
            f'bg: {self.d_bloodgroup}, xm: {self.crossmatch_result}, '
            f'status: {self.status}'
        )

    def __repr__(self) -> str:
        return f'Donor {self.id_donor}, bg: {self.d_bloodgroup}'

    @classmethod
    def from_dummy_donor(cls, **kwargs):
        # Provide default arguments
        default_args = {
            'id_donor': 'D1255',
            'full_name': 'Dummy Donor',
            'bloodgroup': mgr.BT_O_NEG,
            'hla': {
                'A': 'A1, A2', 'B': 'B7', 'C': '',
                'DR': 'DR15', 'DQ': '', 'DP': ''
            },
            'crossmatch_result': mgr.XM_NEGATIVE,
            'donor_antibodies': '',
            'status': mgr.DONOR_AVAILABLE
        }
        # Update default arguments with provided kwargs
        default_args.update(kwargs)
        return cls(**default_args)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Donor':
        """Construct a donor from a flat record (e.g. a DataFrame row)"""
        return cls(
            id_donor=record.get(cn.ID_DONOR),
            bloodgroup=record.get(cn.BLOOD_TYPE),
            hla={
                locus: record.get(locus) for locus in mgr.ALL_HLA_LOCI
            },
            crossmatch_result=record.get(cn.CROSSMATCH_RESULT),
            donor_antibodies=record.get(cn.DONOR_ANTIBODIES),
            status=record.get(cn.DONOR_STATUS, mgr.DONOR_AVAILABLE),
            mrn=record.get(cn.MRN),
            national_id=record.get(cn.NATIONAL_ID),
            full_name=record.get(cn.FULL_NAME),
            dsa_detected=record.get(cn.DSA_DETECTED),
            dsa_mfi=record.get(cn.DSA_MFI),
            age=record.get(cn.AGE),
            mobile_number=record.get(cn.MOBILE_NUMBER),
            serum_creatinine=record.get(cn.SERUM_CREATININE),
            egfr=record.get(cn.EGFR),
            blood_pressure=record.get(cn.BLOOD_PRESSURE),
            viral_screening=record.get(cn.VIRAL_SCREENING),
            cmv_status=record.get(cn.CMV_STATUS),
            medical_conditions=record.get(cn.MEDICAL_CONDITIONS),
            high_res_typing=record.get(cn.HIGH_RES_TYPING),
            notes=record.get(cn.NOTES)
        )


class Recipient:
    """Class which implements a transplant recipient

    Attributes   #noqa
    ----------
    id_recipient: Any
        recipient ID
    mrn: Optional[str]
        medical record number
    national_id: Optional[str]
        national identification number
    full_name: Optional[str]
        name of the recipient
    r_bloodgroup: str
        recipient blood type
    hla: HLAProfile
        recipient HLA typing
    pra: int
        panel-reactive antibody percentage (0-100)
    crossmatch_requirement: Optional[str]
        required crossmatch result (e.g. 'Negative')
    unacceptable_antigens: Unacceptables
        antigens the recipient cannot tolerate
    clinical: Dict[str, Any]
        clinical information, not used for matching

    Methods
    -------
    from_dummy_recipient(**kwargs)
        Construct a recipient with default arguments
    """

    def __init__(
        self, id_recipient: Any, bloodgroup: str,
        pra: int,
        hla: HLAInput = None,
        crossmatch_requirement: Optional[str] = None,
        unacceptable_antigens: Optional[str] = None,
        mrn: Optional[str] = None,
        national_id: Optional[str] = None,
        full_name: Optional[str] = None,
        age: Optional[int] = None,
        mobile_number: Optional[str] = None,
        serum_creatinine: Optional[float] = None,
        egfr: Optional[float] = None,
        blood_pressure: Optional[str] = None,
        viral_screening: Optional[str] = None,
        cmv_status: Optional[str] = None,
        medical_history: Optional[str] = None,
        notes: Optional[str] = None
    ) -> None:

        if nanOrNone(id_recipient) or id_recipient == '':
            raise InvalidRecordError('A recipient requires an identifier.')
        self.id_recipient = id_recipient
        self.mrn = none_if_missing(mrn)
        self.national_id = none_if_missing(national_id)
        self.full_name = none_if_missing(full_name)

        bloodgroup = none_if_missing(bloodgroup)
        _check_blood_type(bloodgroup, f'Recipient {id_recipient}')
        self.r_bloodgroup = bloodgroup

        self.hla = as_hla_profile(hla)
        self.pra = validate_pra(pra, id_recipient=id_recipient)
        self.crossmatch_requirement = none_if_missing(crossmatch_requirement)
        self.unacceptable_antigens = Unacceptables(
            text_or_empty(unacceptable_antigens)
        )

        self.clinical = {
            cn.AGE: none_if_missing(age),
            cn.MOBILE_NUMBER: none_if_missing(mobile_number),
            cn.SERUM_CREATININE: none_if_missing(serum_creatinine),
            cn.EGFR: none_if_missing(egfr),
            cn.BLOOD_PRESSURE: none_if_missing(blood_pressure),
            cn.VIRAL_SCREENING: none_if_missing(viral_screening),
            cn.CMV_STATUS: none_if_missing(cmv_status),
            cn.MEDICAL_HISTORY: none_if_missing(medical_history),
            cn.NOTES: none_if_missing(notes)
        }

    def __str__(self) -> str:
        return (
            f'Recipient {self.id_recipient} ({self.full_name}), '
            f'bg: {self.r_bloodgroup}, PRA: {self.pra}%, '
            f'xm requirement: {self.crossmatch_requirement}'
        )

    def __repr__(self) -> str:
        return f'Recipient {self.id_recipient}, bg: {self.r_bloodgroup}'

    @classmethod
    def from_dummy_recipient(cls, **kwargs):
        default_args = {
            'id_recipient': 'R1',
            'full_name': 'Dummy Recipient',
            'bloodgroup': mgr.BT_A_POS,
            'hla': {
                'A': 'A1', 'B': 'B7, B8', 'C': '',
                'DR': 'DR15', 'DQ': '', 'DP': ''
            },
            'pra': 20,
            'crossmatch_requirement': mgr.XM_NEGATIVE,
            'unacceptable_antigens': ''
        }
        default_args.update(kwargs)
        return cls(**default_args)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'Recipient':
        """Construct a recipient from a flat record"""
        return cls(
            id_recipient=record.get(cn.ID_RECIPIENT),
            bloodgroup=record.get(cn.BLOOD_TYPE),
            pra=record.get(cn.PRA),
            hla={
                locus: record.get(locus) for locus in mgr.ALL_HLA_LOCI
            },
            crossmatch_requirement=record.get(cn.CROSSMATCH_REQUIREMENT),
            unacceptable_antigens=record.get(cn.UNACCEPTABLE_ANTIGENS),
            mrn=record.get(cn.MRN),
            national_id=record.get(cn.NATIONAL_ID),
            full_name=record.get(cn.FULL_NAME),
            age=record.get(cn.AGE),
            mobile_number=record.get(cn.MOBILE_NUMBER),
            serum_creatinine=record.get(cn.SERUM_CREATININE),
            egfr=record.get(cn.EGFR),
            blood_pressure=record.get(cn.BLOOD_PRESSURE),
            viral_screening=record.get(cn.VIRAL_SCREENING),
            cmv_status=record.get(cn.CMV_STATUS),
            medical_history=record.get(cn.MEDICAL_HISTORY),
            notes=record.get(cn.NOTES)
        )
