#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

"""

from multiprocessing import Pool
from typing import (
    Any, Dict, Iterator, List, Optional, Sequence, Tuple
)

import numpy as np
import pandas as pd

import matcher.magic_values.column_names as cn
import matcher.magic_values.matcher_settings as es
import matcher.magic_values.magic_values_rules as mgr
from matcher.code.entities import Donor, Recipient, InvalidRecordError
from matcher.code.matchlist.MatchRecord import MatchRecord
from matcher.code.matchlist.ScoringFunction import ScoreAggregator


class BatchMatchingError(Exception):
    """Raised if a donor in a batch cannot be matched. The
    batch is aborted; no partial match list is returned."""

    def __init__(
        self, message: str, id_donor: Any = None,
        cause: Optional[BaseException] = None
    ) -> None:
        super(BatchMatchingError, self).__init__(message)
        self.message = message
        self.id_donor = id_donor
        self.cause = cause

    def __reduce__(self):
        return (self.__class__, (self.message, self.id_donor, self.cause))


class MatchList:
    """
    Class implementing the match list of one recipient against
    a batch of donors. Records are kept in input order.

    Attributes
    ----------
    recipient : Recipient
        Recipient for whom the list was generated.
    match_list : List[MatchRecord]
        List of match records, in order of the input donors.
    """

    def __init__(
        self, recipient: Recipient, match_list: Sequence[MatchRecord]
    ) -> None:
        self.recipient = recipient
        self.match_list = list(match_list)

    def __len__(self) -> int:
        return len(self.match_list)

    def __iter__(self) -> Iterator[MatchRecord]:
        return iter(self.match_list)

    def __getitem__(self, i: int) -> MatchRecord:
        return self.match_list[i]

    def _with_classification(self, classification: str) -> List[MatchRecord]:
        return [
            mr for mr in self.match_list
            if mr.classification == classification
        ]

    def compatible(self) -> List[MatchRecord]:
        return self._with_classification(mgr.COMPATIBLE)

    def incompatible(self) -> List[MatchRecord]:
        return self._with_classification(mgr.INCOMPATIBLE)

    def excluded(self) -> List[MatchRecord]:
        return self._with_classification(mgr.EXCLUDED)

    def ranked_compatible(self) -> List[MatchRecord]:
        """Compatible records by descending score. The sort is stable,
        i.e. ties keep input order."""
        return sorted(
            self.compatible(),
            key=lambda mr: mr.compatibility_score,
            reverse=True
        )

    def counts(self) -> Dict[str, int]:
        return {
            cn.TOTAL_DONORS: len(self.match_list),
            cn.N_COMPATIBLE: len(self.compatible()),
            cn.N_INCOMPATIBLE: len(self.incompatible()),
            cn.N_EXCLUDED: len(self.excluded())
        }

    def best_score(self) -> Optional[float]:
        """Highest compatibility score among compatible donors"""
        if (compatible := self.compatible()):
            return float(
                np.max([mr.compatibility_score for mr in compatible])
            )
        return None

    def return_match_info(self) -> List[Dict[str, Any]]:
        """Return match information as a list of dictionaries."""
        return [
            matchr.return_match_info() for matchr in self.match_list
        ]

    def return_match_df(self) -> pd.DataFrame:
        """Return match information as a data frame."""
        df = pd.DataFrame.from_records(
            self.return_match_info(),
            columns=[cn.ID_RECIPIENT] + list(es.MATCH_RECORD_COLS) + [
                cn.MATCH_REASON
            ] + [
                f'{cn.HLA_MATCHES_PREFIX}{short.lower()}'
                for short in mgr.LOCUS_SHORT_NAMES.values()
            ]
        )
        return df

    def __str__(self) -> str:
        return '\n'.join(
            [f'Match list for recipient {self.recipient.id_recipient}'] +
            [str(mr) for mr in self.match_list]
        )


def _score_donor(
    args: Tuple[ScoreAggregator, Donor, Recipient]
) -> MatchRecord:
    aggregator, donor, recipient = args
    id_donor = getattr(donor, 'id_donor', None)
    try:
        return aggregator.score(donor=donor, recipient=recipient)
    except (InvalidRecordError, AttributeError, TypeError, ValueError) as e:
        raise BatchMatchingError(
            f'Could not match donor {id_donor} to recipient '
            f'{getattr(recipient, "id_recipient", None)}: {e}',
            id_donor=id_donor,
            cause=e
        ) from e


class MatchOutcome:
    """Typed outcome of a batch: either a match list, or a
    descriptive failure naming the offending donor."""
    __slots__ = ('match_list', 'error')

    def __init__(
        self,
        match_list: Optional[MatchList] = None,
        error: Optional[BatchMatchingError] = None
    ) -> None:
        if (match_list is None) == (error is None):
            raise ValueError(
                'A match outcome holds either a match list or an error.'
            )
        self.match_list = match_list
        self.error = error

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def id_donor(self) -> Any:
        return self.error.id_donor if self.error is not None else None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None

    def __str__(self) -> str:
        if self.ok:
            return f'Matched {len(self.match_list)} donors'
        return f'Matching failed: {self.message}'


class MatchBatchProcessor:
    """Class which scores a batch of donors for a single recipient.

    Attributes
    ----------
    aggregator : ScoreAggregator
        scoring function applied to each donor
    n_workers : int
        number of processes. Donors are scored independently,
        so with n_workers > 1 they are scored in a pool.
    """

    def __init__(
        self,
        aggregator: Optional[ScoreAggregator] = None,
        n_workers: int = 1
    ) -> None:
        self.aggregator = (
            aggregator if aggregator is not None else ScoreAggregator()
        )
        if n_workers < 1:
            raise ValueError(
                f'n_workers should be at least 1, not {n_workers}'
            )
        self.n_workers = n_workers

    def process(
        self, recipient: Recipient, donors: Sequence[Donor]
    ) -> MatchList:
        """Score all donors for the recipient. Raises a
        BatchMatchingError if any of the donors cannot be scored."""
        tasks = [(self.aggregator, donor, recipient) for donor in donors]

        if self.n_workers > 1 and len(tasks) > 1:
            with Pool(processes=min(self.n_workers, len(tasks))) as p:
                # imap yields in input order, so the first failing
                # donor is raised.
                records = list(p.imap(_score_donor, tasks))
        else:
            records = [_score_donor(task) for task in tasks]

        return MatchList(recipient=recipient, match_list=records)

    def try_process(
        self, recipient: Recipient, donors: Sequence[Donor]
    ) -> MatchOutcome:
        """Score all donors, returning a typed outcome instead
        of raising on a malformed donor."""
        try:
            return MatchOutcome(
                match_list=self.process(recipient=recipient, donors=donors)
            )
        except BatchMatchingError as e:
            return MatchOutcome(error=e)
