#!/usr/bin/env python3
"""
Inject Note Properties Script

Parses the PHI note of every node of a corpus and stores the resulting
region, location, type, layout, date and reference properties. Previously
injected properties are removed first, so the script can be re-run on the
whole corpus.

Usage:
    python -m injection.inject_notes [--verbose] inject [--corpus packhum] [--dry-run]
    python -m injection.inject_notes parse "Att. — Lamptrai: Thiti — 440-410 a."

Options:
    --dry-run: Parse every note without touching the database
    --verbose: Log every injected property
"""

from __future__ import annotations

import argparse
import logging
import sys
import threading

from injection.database_injection import (
    DEFAULT_CORPUS,
    clear_injected_props,
    connect_db,
    count_notes,
    insert_props,
    iter_notes,
)
from note_parsing import NoteParser

logger = logging.getLogger(__name__)

PROGRESS_EVERY = 100


def inject_props(
    conn,
    parser: NoteParser,
    corpus: str = DEFAULT_CORPUS,
    dry_run: bool = False,
    cancel: threading.Event | None = None,
) -> int:
    """Parse every note of corpus and store its properties.

    The clear step and every insert share one transaction, committed once
    all notes are stored. A cancelled or failed run is rolled back, leaving
    the corpus as it was. Cancellation is checked between notes, never
    within one.

    Returns:
        The number of injected (or, for a dry run, parsed) properties
    """
    try:
        if not dry_run:
            clear_injected_props(conn, corpus, commit=False)

        total = count_notes(conn, corpus)
        logger.info(f"Injecting properties from {total} notes of corpus {corpus}")

        count = injected = 0
        for node_id, note in iter_notes(conn, corpus):
            if cancel is not None and cancel.is_set():
                logger.warning(f"Injection cancelled after {count} of {total} notes, rolling back")
                conn.rollback()
                return 0

            try:
                properties = parser.parse(note, node_id)
            except Exception:
                logger.critical(f"Error parsing PHI note {note!r} of node {node_id}", exc_info=True)
                raise

            count += 1
            if properties:
                for p in properties:
                    logger.debug(str(p))
                if not dry_run:
                    insert_props(conn, properties, commit=False)
                injected += len(properties)

            if count % PROGRESS_EVERY == 0:
                logger.info(f"Parsed {count}/{total} notes, {injected} properties")

        if not dry_run:
            conn.commit()
    except Exception:
        conn.rollback()
        raise

    logger.info(f"Done: {count} notes, {injected} properties{' (dry run)' if dry_run else ''}")
    return injected


def _inject(args) -> int:
    conn = connect_db()
    try:
        injected = inject_props(conn, NoteParser(), args.corpus, dry_run=args.dry_run)
    finally:
        conn.close()

    if args.dry_run:
        print(f"[DRY RUN] Would inject {injected} properties into corpus {args.corpus}")
    else:
        print(f"Injected {injected} properties into corpus {args.corpus}")
    return 0


def _parse(args) -> int:
    for p in NoteParser().parse(args.note, args.node_id):
        print(p)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parse PHI notes into node properties"
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show every parsed property'
    )
    commands = parser.add_subparsers(dest="command", required=True)

    inject = commands.add_parser("inject", help="Re-inject the properties of a whole corpus")
    inject.add_argument(
        '--corpus',
        default=DEFAULT_CORPUS,
        help=f'Corpus whose notes are parsed (default: {DEFAULT_CORPUS})'
    )
    inject.add_argument(
        '--dry-run',
        action='store_true',
        help='Parse the notes without changing the database'
    )
    inject.set_defaults(handler=_inject)

    parse = commands.add_parser("parse", help="Print the properties parsed from a single note")
    parse.add_argument('note', help='The note text')
    parse.add_argument('--node-id', type=int, default=0, help='Node id to attach (default: 0)')
    parse.set_defaults(handler=_parse)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.handler(args)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except Exception as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
