"""Report generation for match results (JSON, CSV, HTML, summary)."""

import csv
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from jinja2 import Environment, FileSystemLoader

from profilematch import MatchResult, Profile
from profilematch.scoring import FACTOR_KEYS, FACTOR_WEIGHTS

log = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / 'templates'

CSV_COLUMNS = [
    'Rank',
    'Platform',
    'Username',
    'Display_Name',
    'Location',
    'Profile_URL',
    'Score',
    *FACTOR_KEYS,
]


def profile_to_dict(profile: Profile) -> dict[str, Any]:
    """Return the profile as it was received, or its canonical fields."""
    if profile.raw is not None:
        return dict(profile.raw)
    data = {
        'platform': profile.platform,
        'username': profile.username,
        'displayName': profile.display_name,
        'bio': profile.bio,
        'location': profile.location,
        'profileUrl': profile.profile_url,
    }
    return {k: v for k, v in data.items() if v is not None}


def result_to_dict(result: MatchResult) -> dict[str, Any]:
    """Convert a MatchResult to its JSON shape."""
    return {
        'profile': profile_to_dict(result.profile),
        'score': result.score,
        'factors': dict(result.factors),
    }


def results_to_response(results: Sequence[MatchResult]) -> dict[str, Any]:
    """Wrap ranked results in the ``{"matches": [...]}`` response shape."""
    return {'matches': [result_to_dict(r) for r in results]}


def _result_to_row(rank: int, result: MatchResult) -> dict:
    """Convert a MatchResult to a flat dict for CSV/HTML output."""
    p = result.profile
    row = {
        'Rank': str(rank),
        'Platform': p.platform,
        'Username': p.username,
        'Display_Name': p.display_name or '',
        'Location': p.location or '',
        'Profile_URL': p.profile_url or '',
        'Score': f'{result.score:.2f}',
    }
    for key in FACTOR_KEYS:
        # Blank means the factor had no inputs, not a zero score
        row[key] = f'{result.factors[key]:.2f}' if key in result.factors else ''
    return row


def write_json_report(results: Sequence[MatchResult], output_path: Path) -> None:
    """Write ranked results in the response JSON shape."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(results_to_response(results), indent=2, ensure_ascii=False),
        encoding='utf-8',
    )
    log.info("JSON report written: %s", output_path)


def write_csv_report(results: Sequence[MatchResult], output_path: Path) -> None:
    """Write match results as a CSV report.

    Uses UTF-8 with BOM (utf-8-sig) and semicolon delimiter for
    compatibility with Excel.

    Args:
        results: Ranked match results.
        output_path: Path for the output CSV file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='', encoding='utf-8-sig') as f:
        writer = csv.DictWriter(
            f, fieldnames=CSV_COLUMNS, delimiter=';', extrasaction='ignore',
        )
        writer.writeheader()
        for rank, result in enumerate(results, start=1):
            writer.writerow(_result_to_row(rank, result))

    log.info("CSV report written: %s (%d rows)", output_path, len(results))


def write_html_report(
    results: Sequence[MatchResult],
    output_path: Path,
    request_name: str = '',
) -> None:
    """Write match results as an HTML report using Jinja2.

    Args:
        results: Ranked match results.
        output_path: Path for the output HTML file.
        request_name: Name of the request file (for the report title).
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
    )
    template = env.get_template('report.html')

    rows = [_result_to_row(rank, r) for rank, r in enumerate(results, start=1)]
    html = template.render(
        request_name=request_name,
        rows=rows,
        stats=_compute_stats(results),
        columns=CSV_COLUMNS,
        factor_keys=FACTOR_KEYS,
        weights=FACTOR_WEIGHTS,
    )

    output_path.write_text(html, encoding='utf-8')
    log.info("HTML report written: %s", output_path)


def _compute_stats(results: Sequence[MatchResult]) -> dict:
    """Compute summary statistics from match results."""
    total = len(results)
    scores = [r.score for r in results]
    return {
        'total': total,
        'best': max(scores) if scores else 0.0,
        'strong': sum(1 for s in scores if s >= 0.8),
        'weak': sum(1 for s in scores if 0.5 <= s < 0.8),
        'unlikely': sum(1 for s in scores if s < 0.5),
        'factor_coverage': {
            key: sum(1 for r in results if key in r.factors) for key in FACTOR_KEYS
        },
    }


def print_summary(results: Sequence[MatchResult], request_name: str = '') -> None:
    """Print a summary of match results to stdout.

    Args:
        results: Ranked match results.
        request_name: Name of the request file.
    """
    stats = _compute_stats(results)

    print(f"\n=== Match report: {request_name} ===")
    print(f"Profiles scored:           {stats['total']:>5}")
    print(f"Best score:                {stats['best']:>5.2f}")
    print(f"Strong (>= 0.80):          {stats['strong']:>5}")
    print(f"Weak (0.50 - 0.79):        {stats['weak']:>5}")
    print(f"Unlikely (< 0.50):         {stats['unlikely']:>5}")
    print("---")
    for key in FACTOR_KEYS:
        print(f"  - {key:<22} {stats['factor_coverage'][key]:>5}")
    for rank, result in enumerate(results, start=1):
        p = result.profile
        print(f"{rank:>3}. {p.platform}/{p.username:<20} {result.score:.2f}")
    print()
