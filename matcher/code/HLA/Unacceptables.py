#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

"""

from typing import FrozenSet, Optional, Tuple, Union

from matcher.code.HLA.HLASystem import parse_antigen_string


class Unacceptables:
    """Class which implements a set of antigens, parsed
    from a comma-separated free-text string.

    Attributes
    ----------
    unacc_string : Optional[str]
        original antigen string

    Methods
    -------
    unacceptables
        set of antigens, constructed from the string
    """
    __slots__ = ('_unacceptables', 'unacc_string')

    def __init__(self, unacc_string: Optional[str] = None):
        self.unacc_string = unacc_string
        self._unacceptables = None

    @property
    def unacceptables(self) -> FrozenSet[str]:
        """property which returns a set of unacceptables,
           constructed from the unacceptable string"""
        if self._unacceptables is None:
            self._unacceptables = parse_antigen_string(self.unacc_string)
        return self._unacceptables

    def __bool__(self) -> bool:
        return bool(self.unacceptables)

    def __contains__(self, antigen: str) -> bool:
        return antigen in self.unacceptables

    def __getstate__(self):
        return (self.unacc_string,)

    def __setstate__(self, state):
        self.__init__(state[0])

    def __str__(self):
        if type(self.unacc_string) is str:
            return self.unacc_string
        else:
            return ''


AntigenInput = Union[Unacceptables, str, None]


def _as_antigen_set(antigens: AntigenInput) -> FrozenSet[str]:
    if isinstance(antigens, Unacceptables):
        return antigens.unacceptables
    return parse_antigen_string(antigens)


class AntigenExclusionFilter:
    """Veto a donor if the donor carries any antibody / antigen
    that is on the recipient's list of unacceptable antigens.
    """

    @staticmethod
    def conflicting_antigens(
        recipient_unacceptable_antigens: AntigenInput,
        donor_antibodies: AntigenInput
    ) -> Tuple[str, ...]:
        return tuple(
            sorted(
                _as_antigen_set(recipient_unacceptable_antigens) &
                _as_antigen_set(donor_antibodies)
            )
        )

    def has_exclusion(
        self,
        recipient_unacceptable_antigens: AntigenInput,
        donor_antibodies: AntigenInput
    ) -> bool:
        return len(
            self.conflicting_antigens(
                recipient_unacceptable_antigens, donor_antibodies
            )
        ) > 0

    def excluded_reason(
        self,
        recipient_unacceptable_antigens: AntigenInput,
        donor_antibodies: AntigenInput
    ) -> Optional[str]:
        if (
            conflicts := self.conflicting_antigens(
                recipient_unacceptable_antigens, donor_antibodies
            )
        ):
            return f'Unacceptable antigens: {", ".join(conflicts)}'
        return None
