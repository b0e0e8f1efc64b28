#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

Scripts to read in input files.

"""

from copy import deepcopy
from typing import Optional, List, Dict, Any, Iterable
import pandas as pd

import yaml

from matcher.code.utils.utils import DotDict
from matcher.code.entities import Donor, Recipient
import matcher.magic_values.inputfile_settings as dtypes
import matcher.magic_values.column_names as cn
import matcher.magic_values.matcher_settings as es


def _read_csv(
        input_path: str,
        dtps: Dict[str, Any],
        usecols: Optional[List[str]] = None,
        **kwargs
) -> pd.DataFrame:
    """Read in a csv file, with known columns cast to dtps"""

    if usecols is None:
        usecols = list(dtps.keys())

    data_ = pd.read_csv(
        input_path,
        dtype=dtps,
        usecols=lambda x: x in usecols,
        **kwargs
    )

    assert isinstance(data_, pd.DataFrame), \
        f'Expected DataFrame, not {type(data_)}'

    return data_


def read_donors(
        input_path: str,
        usecols: Optional[List[str]] = None,
        **kwargs
) -> pd.DataFrame:
    """"Read in donor file."""

    data_ = _read_csv(
        input_path=input_path,
        dtps=dtypes.DTYPE_DONORLIST,
        usecols=usecols,
        **kwargs
    )

    data_ = data_.fillna(
        value=dtypes.DTYPE_DONOR_FILL_NAS
    )

    return data_


def read_recipients(
        input_path: str,
        usecols: Optional[List[str]] = None,
        **kwargs
) -> pd.DataFrame:
    """"Read in recipient file."""

    data_ = _read_csv(
        input_path=input_path,
        dtps=dtypes.DTYPE_RECIPIENTLIST,
        usecols=usecols,
        **kwargs
    )

    data_ = data_.fillna(
        value=dtypes.DTYPE_RECIPIENT_FILL_NAS
    )

    return data_


def donors_from_df(d_donors: pd.DataFrame) -> List[Donor]:
    """Construct donors from a data frame"""
    return [
        Donor.from_record(rcrd)
        for rcrd in d_donors.to_dict(orient='records')
    ]


def recipients_from_df(d_recipients: pd.DataFrame) -> List[Recipient]:
    """Construct recipients from a data frame"""
    return [
        Recipient.from_record(rcrd)
        for rcrd in d_recipients.to_dict(orient='records')
    ]


def load_recipient(input_path: str, id_recipient: Any) -> Recipient:
    """Load a single recipient from the recipient file"""
    d_recipients = read_recipients(input_path)
    d_sel = d_recipients[
        d_recipients[cn.ID_RECIPIENT].astype(str) == str(id_recipient)
    ]
    if d_sel.shape[0] == 0:
        raise ValueError(
            f'Recipient {id_recipient} not found in {input_path}'
        )
    elif d_sel.shape[0] > 1:
        raise ValueError(
            f'Recipient {id_recipient} occurs {d_sel.shape[0]} times '
            f'in {input_path}'
        )
    return recipients_from_df(d_sel)[0]


def filter_eligible_donors(
        donors: Iterable[Donor],
        statuses: Iterable[str]
) -> List[Donor]:
    """Keep donors with an eligible status, in input order"""
    statuses = set(statuses)
    return [donor for donor in donors if donor.status in statuses]


def read_match_settings(ss_path: str) -> DotDict:
    """Read in match settings"""
    with open(ss_path, "r", encoding='utf-8') as file:
        match_set: Optional[Dict[str, Any]] = yaml.load(
            file, Loader=yaml.FullLoader
        )
    if match_set is None:
        match_set = {}

    for k, v in es.DEFAULT_SETTINGS.items():
        if match_set.get(k) is None:
            match_set[k] = deepcopy(v)

    match_set['N_WORKERS'] = int(match_set['N_WORKERS'])
    if isinstance(match_set['ELIGIBLE_DONOR_STATUSES'], str):
        match_set['ELIGIBLE_DONOR_STATUSES'] = [
            match_set['ELIGIBLE_DONOR_STATUSES']
        ]

    return DotDict(match_set)
