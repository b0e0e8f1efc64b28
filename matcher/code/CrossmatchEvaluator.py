#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

"""

from typing import Optional
from warnings import warn

import matcher.magic_values.magic_values_rules as mgr


class CrossmatchEvaluator:
    """Binary crossmatch veto. A donor crossmatch result is compatible
    only if it is exactly equal (case-sensitive) to the recipient's
    crossmatch requirement.
    """

    def __init__(self, verbose: bool = True) -> None:
        self._verbose = verbose

    def is_crossmatch_compatible(
        self,
        donor_result: Optional[str],
        recipient_requirement: Optional[str]
    ) -> bool:
        if donor_result is None or recipient_requirement is None:
            return False
        if self._verbose:
            for token in (donor_result, recipient_requirement):
                if token not in mgr.KNOWN_CROSSMATCH_TOKENS:
                    warn(
                        f'Crossmatch token {token!r} is not one of '
                        f'{", ".join(sorted(mgr.KNOWN_CROSSMATCH_TOKENS))}.'
                    )
        return donor_result == recipient_requirement


def is_crossmatch_compatible(
    donor_result: Optional[str], recipient_requirement: Optional[str]
) -> bool:
    return CrossmatchEvaluator(verbose=False).is_crossmatch_compatible(
        donor_result, recipient_requirement
    )
