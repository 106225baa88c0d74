"""Tests for the matcher.py command line entry point."""

import json
import shutil

import pytest

import matcher


class TestSingleRequest:
    """Tests for --request mode."""

    def test_writes_all_reports(self, data_dir, tmp_path, capsys):
        out = tmp_path / 'report.csv'
        matcher.main([
            '--request', str(data_dir / 'request.json'),
            '--output', str(out), '--html', '--json', '--summary',
        ])
        assert out.exists()
        assert out.with_suffix('.html').exists()
        data = json.loads(out.with_suffix('.json').read_text(encoding='utf-8'))
        assert data['matches'][0]['profile']['platform'] == 'linkedin'
        assert 'Match report: request.json' in capsys.readouterr().out

    def test_output_required(self, data_dir):
        with pytest.raises(SystemExit):
            matcher.main(['--request', str(data_dir / 'request.json')])

    def test_nothing_to_do(self):
        with pytest.raises(SystemExit):
            matcher.main([])


class TestBatch:
    """Tests for --request-dir mode."""

    def test_batch_skips_invalid(self, data_dir, tmp_path):
        in_dir = tmp_path / 'in'
        in_dir.mkdir()
        shutil.copy(data_dir / 'request.json', in_dir / 'a.json')
        shutil.copy(data_dir / 'invalid_request.json', in_dir / 'b.json')
        out_dir = tmp_path / 'out'

        matcher.main(['--request-dir', str(in_dir), '--output-dir', str(out_dir)])

        assert (out_dir / 'report_a.csv').exists()
        assert not (out_dir / 'report_b.csv').exists()

    def test_empty_dir(self, tmp_path, caplog):
        out_dir = tmp_path / 'out'
        matcher.main(['--request-dir', str(tmp_path), '--output-dir', str(out_dir)])
        assert 'No JSON request files' in caplog.text
