"""
Turso database access for verb roots
Uses Turso HTTP API (compatible with Vercel serverless)
"""

from typing import List, Optional

import requests

import config


def _to_https_url(url: str) -> str:
    """Convert libsql:// or other URL schemes to https://"""
    if url.startswith('libsql://'):
        return url.replace('libsql://', 'https://', 1)
    if url.startswith('http://'):
        return url.replace('http://', 'https://', 1)
    if not url.startswith('https://'):
        return 'https://' + url
    return url


class TursoDatabase:
    """Turso database connection wrapper using HTTP API"""

    def __init__(self, url: Optional[str] = None, auth_token: Optional[str] = None, timeout: float = 8):
        url = config.TURSO_DATABASE_URL if url is None else url
        auth_token = config.TURSO_AUTH_TOKEN if auth_token is None else auth_token

        self.connected = False
        self.timeout = timeout
        self.base_url = _to_https_url(url) if url else ''
        self.pipeline_url = f'{self.base_url}/v2/pipeline' if self.base_url else ''
        self.headers = {
            'Authorization': f'Bearer {auth_token}',
            'Content-Type': 'application/json'
        } if auth_token else {}

    @property
    def configured(self) -> bool:
        return bool(self.pipeline_url and self.headers)

    def _execute(self, sql: str, args: Optional[List] = None) -> Optional[List[List]]:
        """
        Execute a SQL query via Turso HTTP pipeline API

        Args:
            sql: SQL query string
            args: Optional list of query arguments

        Returns:
            List of rows (each row is a list of values), or None on error
        """
        if not self.configured:
            return None

        stmt = {'sql': sql}
        if args:
            stmt['args'] = [{'type': 'text', 'value': str(a)} for a in args]

        payload = {
            'requests': [
                {'type': 'execute', 'stmt': stmt},
                {'type': 'close'}
            ]
        }

        try:
            resp = requests.post(
                self.pipeline_url,
                headers=self.headers,
                json=payload,
                timeout=self.timeout
            )
            if resp.status_code != 200:
                print(f"Turso: HTTP {resp.status_code} for query")
                return None
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            print(f"Turso: Request failed: {e}")
            return None

        results = data.get('results', [])
        if not results or results[0].get('type') != 'ok':
            return None

        result = results[0].get('response', {}).get('result', {})

        # Extract values from typed response
        rows = []
        for raw_row in result.get('rows', []):
            rows.append([col.get('value') if isinstance(col, dict) else col for col in raw_row])
        return rows

    def connect(self) -> bool:
        """Check the database answers a trivial query"""
        if not self.configured:
            print("Turso: URL or auth token not configured")
            self.connected = False
            return False

        if self._execute("SELECT 1") is not None:
            self.connected = True
            print("Turso: Connected successfully")
        else:
            print("Turso: Connection test failed")
            self.connected = False
        return self.connected

    def load_verb_roots(self) -> List[str]:
        """
        Load all verb roots from Turso database

        Returns:
            Sorted list of distinct roots (HK, as stored); empty on failure
        """
        if not self.connected and not self.connect():
            return []

        rows = self._execute("SELECT DISTINCT root FROM verb_roots")
        if rows is None:
            return []

        roots = sorted({row[0].strip() for row in rows if row and row[0] and row[0].strip()})
        print(f"Turso: Loaded {len(roots)} verb roots")
        return roots

    def close(self):
        """Close database connection"""
        self.connected = False
