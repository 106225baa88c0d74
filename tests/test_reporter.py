"""Tests for profilematch.reporter module."""

import csv
import json

from profilematch import MatchResult, Person, Profile
from profilematch.matching import match_profiles
from profilematch.reader import read_request
from profilematch.reporter import (
    CSV_COLUMNS,
    print_summary,
    profile_to_dict,
    result_to_dict,
    results_to_response,
    write_csv_report,
    write_html_report,
    write_json_report,
)


def _results(data_dir) -> list[MatchResult]:
    person, profiles = read_request(data_dir / 'request.json')
    return match_profiles(person, profiles)


class TestSerialization:
    """Tests for the JSON response shape."""

    def test_raw_profile_echoed(self):
        raw = {'platform': 'x', 'username': 'jane', 'profile_url': 'https://x.com/jane'}
        profile = Profile(platform='x', username='jane', profile_url='https://x.com/jane', raw=raw)
        assert profile_to_dict(profile) == raw

    def test_canonical_profile_without_raw(self):
        profile = Profile(platform='x', username='jane', display_name='Jane')
        assert profile_to_dict(profile) == {
            'platform': 'x', 'username': 'jane', 'displayName': 'Jane',
        }

    def test_result_to_dict(self):
        profile = Profile(platform='x', username='jane')
        result = MatchResult(profile=profile, score=0.5, factors={'name_match': 0.5})
        assert result_to_dict(result) == {
            'profile': {'platform': 'x', 'username': 'jane'},
            'score': 0.5,
            'factors': {'name_match': 0.5},
        }

    def test_response_is_json_serializable(self, data_dir):
        response = results_to_response(_results(data_dir))
        decoded = json.loads(json.dumps(response))
        assert [m['profile']['platform'] for m in decoded['matches']] == ['linkedin', 'twitter']
        assert decoded['matches'][0]['profile']['profile_url'] == 'https://linkedin.com/in/janedoe'

    def test_sample_request_scores(self, data_dir):
        matches = results_to_response(_results(data_dir))['matches']
        assert matches[0]['score'] >= 0.9
        assert matches[1]['score'] < 0.5
        assert {'name_match', 'location_match', 'employer_in_bio', 'email_username_match'} <= set(
            matches[0]['factors'])


class TestWriteReports:
    """Tests for report files."""

    def test_csv_report(self, data_dir, tmp_path):
        out = tmp_path / 'sub' / 'report.csv'
        write_csv_report(_results(data_dir), out)

        with open(out, encoding='utf-8-sig', newline='') as f:
            rows = list(csv.DictReader(f, delimiter=';'))
        assert list(rows[0].keys()) == CSV_COLUMNS
        assert rows[0]['Rank'] == '1'
        assert rows[0]['Platform'] == 'linkedin'
        assert rows[0]['name_match'] == '1.00'
        # No job title on the person: blank, not zero
        assert rows[0]['job_title_in_bio'] == ''

    def test_html_report(self, data_dir, tmp_path):
        out = tmp_path / 'report.html'
        write_html_report(_results(data_dir), out, 'request')
        html = out.read_text(encoding='utf-8')
        assert 'Match report: request' in html
        assert 'linkedin' in html
        assert 'name_match (0.30)' in html

    def test_html_escapes_values(self, tmp_path):
        profile = Profile(platform='x', username='<script>')
        results = match_profiles(Person(name='Jane'), [profile])
        out = tmp_path / 'report.html'
        write_html_report(results, out)
        html = out.read_text(encoding='utf-8')
        assert '<script>' not in html
        assert '&lt;script&gt;' in html

    def test_json_report(self, data_dir, tmp_path):
        out = tmp_path / 'report.json'
        write_json_report(_results(data_dir), out)
        data = json.loads(out.read_text(encoding='utf-8'))
        assert len(data['matches']) == 2

    def test_summary(self, data_dir, capsys):
        print_summary(_results(data_dir), 'request.json')
        out = capsys.readouterr().out
        assert 'Match report: request.json' in out
        assert 'Profiles scored:' in out
        assert 'linkedin/janedoe' in out
