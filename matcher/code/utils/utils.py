#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

"""

from copy import deepcopy
from typing import Any, Tuple, Optional
from math import isnan
import numpy as np
from pandas import NA as pd_NA


def nanOrNone(x: Any) -> bool:
    if x is None:
        return True
    if x is pd_NA:
        return True
    if isinstance(x, (float, np.floating)) and isnan(x):
        return True
    return False


def none_if_missing(x: Any) -> Optional[Any]:
    """Resolve NaN / NA values (e.g. from pandas) to None"""
    if nanOrNone(x):
        return None
    return x


def text_or_empty(x: Any) -> str:
    if nanOrNone(x):
        return ''
    return str(x)


def round_to_decimals(x: float, p: int):
    """Round half up to p decimals"""
    if isnan(x):
        return x
    p = float(10**p)
    return int(x * p + 0.5) / p


def clamp(x: float, lims: Tuple[float, float], default_lim: int = 0) -> float:
    """Force number between limits."""
    if isnan(x):
        return lims[default_lim]
    return max(min(lims[1], x), lims[0])


class DotDict(dict):
    """Helper class which allows access with dot operator
    """

    def __init__(self, *args, **kwargs):
        super(DotDict, self).__init__(*args, **kwargs)
        for arg in args:
            if isinstance(arg, dict):
                for key, val in arg.items():
                    self[key] = val

        if kwargs:
            for key, val in kwargs.items():
                self[key] = val

    def __getattr__(self, attr) -> Any:
        return self.get(attr)

    def __setattr__(self, key, value):
        self.__setitem__(key, value)

    def __setitem__(self, key, value):
        super(DotDict, self).__setitem__(key, value)
        self.__dict__.update({key: value})

    def __delattr__(self, item):
        self.__delitem__(item)

    def __delitem__(self, key):
        super(DotDict, self).__delitem__(key)
        del self.__dict__[key]

    def __deepcopy__(self, memo=None):
        return DotDict(deepcopy(dict(self), memo=memo))
