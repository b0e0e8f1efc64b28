#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Created on Mon Oct 19 2026

Match eligible donors to a single recipient, and write
the match list to a csv file.

"""

import os
import sys
import argparse
import logging
from pathlib import Path
from time import time

import matcher.magic_values.matcher_settings as es
from matcher.code.utils.read_input_files import (
    read_match_settings, read_donors, donors_from_df,
    load_recipient, filter_eligible_donors
)
from matcher.code.entities import InvalidRecordError
from matcher.code.matchlist.MatchList import MatchBatchProcessor
from matcher.code.MatchReport import MatchReport


def parse_arguments(args=None):
    parser = argparse.ArgumentParser(
        description="Script to match donors to a recipient.")
    parser.add_argument(
        "-s", "--settings",
        type=str,
        default=os.path.join(es.DIR_MATCH_SETTINGS, 'match_settings.yml'),
        help="Path to the match settings (yml)."
    )
    parser.add_argument(
        "-r", "--recipient",
        type=str,
        required=True,
        help="ID of the recipient to match donors to."
    )
    parser.add_argument(
        "--donors",
        type=str,
        default=None,
        help="Path to the donor file. Overrides PATH_DONORS."
    )
    parser.add_argument(
        "--recipients",
        type=str,
        default=None,
        help="Path to the recipient file. Overrides PATH_RECIPIENTS."
    )
    parser.add_argument(
        "-n", "--n_workers",
        type=int,
        default=None,
        help="Number of workers to use. Overrides N_WORKERS."
    )
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help=(
            "Path to write match results to. Default is "
            "PATH_MATCH_RESULTS in RESULTS_FOLDER."
        )
    )
    return parser.parse_args(args)


def main(args=None) -> int:
    args = parse_arguments(args)

    match_set = read_match_settings(args.settings)
    if args.donors is not None:
        match_set.PATH_DONORS = args.donors
    if args.recipients is not None:
        match_set.PATH_RECIPIENTS = args.recipients
    if args.n_workers is not None:
        match_set.N_WORKERS = args.n_workers

    if match_set.PATH_LOG:
        Path(match_set.PATH_LOG).parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=match_set.PATH_LOG,
        level=getattr(logging, str(match_set.LOG_LEVEL).upper()),
        format='%(asctime)s %(levelname)s:%(message)s'
    )

    for k in ('PATH_DONORS', 'PATH_RECIPIENTS'):
        if match_set[k] is None:
            msg = f'{k} is neither in {args.settings} nor given as argument'
            print(msg)
            logging.error(msg)
            return 1

    start_time = time()
    try:
        recipient = load_recipient(match_set.PATH_RECIPIENTS, args.recipient)
        donors = filter_eligible_donors(
            donors_from_df(read_donors(match_set.PATH_DONORS)),
            statuses=match_set.ELIGIBLE_DONOR_STATUSES
        )
    except InvalidRecordError as e:
        print('\n\n***********')
        msg = (
            f'An error occurred when reading record {e.id_record} '
            f'for recipient {args.recipient}: {e}'
        )
        print(msg)
        logging.exception(msg)
        print('\n\n***********')
        return 1
    logging.info(
        f'Matching {len(donors)} eligible donors to '
        f'recipient {recipient.id_recipient}'
    )

    processor = MatchBatchProcessor(n_workers=match_set.N_WORKERS)
    outcome = processor.try_process(recipient=recipient, donors=donors)

    if not outcome.ok:
        print('\n\n***********')
        msg = (
            f'An error occurred when matching donor {outcome.id_donor} '
            f'to recipient {recipient.id_recipient}: {outcome.message}'
        )
        print(msg)
        logging.exception(msg, exc_info=outcome.error)
        print('\n\n***********')
        return 1

    output = args.output
    if output is None:
        output = os.path.join(
            match_set.RESULTS_FOLDER, match_set.PATH_MATCH_RESULTS
        )
    Path(output).parent.mkdir(parents=True, exist_ok=True)
    outcome.match_list.return_match_df().to_csv(output, index=False)

    report = MatchReport(recipient=recipient, match_list=outcome.match_list)
    print(report)
    print(f'Match results written to {output}')
    logging.info(
        f'Matched recipient {recipient.id_recipient} in '
        f'{time() - start_time:.2f} seconds'
    )
    return 0


if __name__ == '__main__':
    sys.exit(main())
