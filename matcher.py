"""profile-matcher – score candidate social-media profiles against a person."""

import argparse
import logging
import os
from pathlib import Path

from profilematch.reader import read_request
from profilematch.matching import match_profiles
from profilematch.reporter import (
    print_summary,
    write_csv_report,
    write_html_report,
    write_json_report,
)
from profilematch.server import DEFAULT_HOST, DEFAULT_PORT, serve


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description='Rank candidate social-media profiles by how likely they belong to a person.',
        prog='matcher.py',
    )
    parser.add_argument(
        '--request', type=Path,
        help='Path to a JSON match request ({"person": ..., "profiles": [...]})',
    )
    parser.add_argument(
        '--request-dir', type=Path,
        help='Directory of JSON match requests (batch mode)',
    )
    parser.add_argument(
        '--output', type=Path,
        help='Path for the CSV report',
    )
    parser.add_argument(
        '--output-dir', type=Path,
        help='Directory for reports (batch mode)',
    )
    parser.add_argument(
        '--html', action='store_true',
        help='Also write an HTML report',
    )
    parser.add_argument(
        '--json', action='store_true',
        help='Also write the ranked results as JSON',
    )
    parser.add_argument(
        '--summary', action='store_true',
        help='Print a summary to stdout',
    )
    parser.add_argument(
        '--serve', action='store_true',
        help='Run the HTTP service instead of processing files',
    )
    parser.add_argument(
        '--host', default=DEFAULT_HOST,
        help=f'Host for --serve (default: {DEFAULT_HOST})',
    )
    parser.add_argument(
        '--port', type=int, default=int(os.environ.get('PORT', DEFAULT_PORT)),
        help=f'Port for --serve (default: $PORT or {DEFAULT_PORT})',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Enable debug logging',
    )
    return parser


def process_single_request(
    request_path: Path,
    output_path: Path,
    html: bool,
    json_report: bool,
    summary: bool,
) -> None:
    """Score one request file and write its reports."""
    person, profiles = read_request(request_path)
    results = match_profiles(person, profiles)

    write_csv_report(results, output_path)

    if html:
        write_html_report(results, output_path.with_suffix('.html'), request_path.stem)

    if json_report:
        write_json_report(results, output_path.with_suffix('.json'))

    if summary:
        print_summary(results, request_path.name)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s',
    )

    if args.serve:
        serve(args.host, args.port)
        return

    if not args.request and not args.request_dir:
        parser.error('Either --request, --request-dir or --serve is required.')

    if args.request and not args.output:
        parser.error('--output is required with --request.')

    if args.request_dir and not args.output_dir:
        parser.error('--output-dir is required with --request-dir.')

    if args.request:
        process_single_request(
            args.request, args.output, args.html, args.json, args.summary,
        )
    elif args.request_dir:
        args.output_dir.mkdir(parents=True, exist_ok=True)
        request_files = sorted(args.request_dir.glob('*.json'))

        if not request_files:
            logging.warning("No JSON request files found in %s.", args.request_dir)
            return

        for request_path in request_files:
            output_path = args.output_dir / f"report_{request_path.stem}.csv"
            logging.info("Processing %s ...", request_path.name)
            try:
                process_single_request(
                    request_path, output_path, args.html, args.json, args.summary,
                )
            except ValueError as exc:
                logging.error("Skipping %s: %s", request_path.name, exc)


if __name__ == '__main__':
    main()
