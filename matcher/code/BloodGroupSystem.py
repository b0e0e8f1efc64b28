#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

Blood group compatibility rules for donation.

"""

from typing import Dict, Optional, Tuple

import matcher.magic_values.matcher_settings as es


class BloodTypeCompatibility:
    """Class which implements directed ABO/Rh compatibility

    Attributes   #noqa
    ----------
    compatibility: Dict[str, Tuple[str, ...]]
        per donor blood type, recipient blood types
        the donor may supply to.

    Methods
    -------
    is_compatible(donor_type: str, recipient_type: str) -> bool
        Whether a donor blood type may donate to the recipient type
    compatible_recipients(donor_type: str) -> Tuple[str, ...]
        Recipient blood types that may receive from donor type
    compatible_donors(recipient_type: str) -> Tuple[str, ...]
        Donor blood types that may donate to recipient type
    """

    def __init__(
        self,
        compatibility: Optional[Dict[str, Tuple[str, ...]]] = None
    ) -> None:
        if compatibility is None:
            compatibility = es.BLOOD_TYPE_COMPATIBILITY
        self.compatibility = {
            donor_type: frozenset(recipient_types)
            for donor_type, recipient_types in compatibility.items()
        }
        self._ordered = {
            donor_type: tuple(recipient_types)
            for donor_type, recipient_types in compatibility.items()
        }

    def is_compatible(
        self, donor_type: Optional[str], recipient_type: Optional[str]
    ) -> bool:
        # Unknown donor types are never compatible.
        recipient_types = self.compatibility.get(donor_type)
        if recipient_types is None:
            return False
        return recipient_type in recipient_types

    def compatible_recipients(self, donor_type: str) -> Tuple[str, ...]:
        return self._ordered.get(donor_type, ())

    def compatible_donors(self, recipient_type: str) -> Tuple[str, ...]:
        return tuple(
            donor_type for donor_type, recipient_types
            in self._ordered.items()
            if recipient_type in recipient_types
        )


BLOOD_TYPE_COMPATIBILITY = BloodTypeCompatibility()


def is_blood_type_compatible(
    donor_type: Optional[str], recipient_type: Optional[str]
) -> bool:
    """Check blood type compatibility against the standard table"""
    return BLOOD_TYPE_COMPATIBILITY.is_compatible(donor_type, recipient_type)
