"""Local HTTP service exposing the matcher as JSON endpoints.

Uses only the stdlib http.server:

    POST /match   {"person": {...}, "profiles": [...]} -> {"matches": [...]}
    GET  /health  -> {"status": "ok", "timestamp": "<ISO 8601>"}
"""

import json
import logging
from datetime import datetime, timezone
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import urlparse

from profilematch.matching import match_profiles
from profilematch.reader import RequestValidationError, parse_request
from profilematch.reporter import results_to_response

log = logging.getLogger(__name__)

DEFAULT_HOST = '127.0.0.1'
DEFAULT_PORT = 3000


def handle_match(body_raw: bytes) -> tuple[int, dict[str, Any]]:
    """Score a raw /match request body.

    Returns:
        Tuple of HTTP status and JSON payload.
    """
    try:
        body = json.loads(body_raw) if body_raw else None
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        return 400, {
            'error': 'Invalid request',
            'details': [{'path': '', 'message': f'Malformed JSON: {exc}'}],
        }

    try:
        person, profiles = parse_request(body)
    except RequestValidationError as exc:
        return 400, {'error': 'Invalid request', 'details': exc.details}

    results = match_profiles(person, profiles)
    return 200, results_to_response(results)


def handle_health() -> dict[str, str]:
    return {'status': 'ok', 'timestamp': datetime.now(timezone.utc).isoformat()}


class MatchHandler(BaseHTTPRequestHandler):

    def log_message(self, fmt, *args):
        log.debug("%s - %s", self.address_string(), fmt % args)

    def _send_json(self, data: dict, status: int = 200):
        body = json.dumps(data, ensure_ascii=False).encode('utf-8')
        self.send_response(status)
        self.send_header('Content-Type', 'application/json; charset=utf-8')
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self):
        path = urlparse(self.path).path
        if path == '/health':
            self._send_json(handle_health())
        else:
            self._send_json({'error': 'Not found'}, 404)

    def do_POST(self):
        path = urlparse(self.path).path
        if path != '/match':
            self._send_json({'error': 'Not found'}, 404)
            return

        try:
            length = int(self.headers.get('Content-Length') or 0)
        except ValueError:
            length = -1
        if length < 0:
            self._send_json({
                'error': 'Invalid request',
                'details': [{'path': '', 'message': 'Invalid Content-Length header'}],
            }, 400)
            return

        body_raw = self.rfile.read(length)
        try:
            status, payload = handle_match(body_raw)
        except Exception:
            log.exception("Error processing /match request")
            status, payload = 500, {'error': 'Internal server error'}
        self._send_json(payload, status)


def make_server(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> ThreadingHTTPServer:
    """Create (but do not start) the HTTP server. Port 0 picks a free port."""

    class _Server(ThreadingHTTPServer):
        allow_reuse_address = True
        daemon_threads = True

    return _Server((host, port), MatchHandler)


def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Run the HTTP server until interrupted."""
    server = make_server(host, port)
    bound_host, bound_port = server.server_address[:2]
    log.info("Server running at http://%s:%d", bound_host, bound_port)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        log.info("Shutting down")
    finally:
        server.server_close()
