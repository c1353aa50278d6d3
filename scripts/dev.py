#!/usr/bin/env python3
import argparse
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
BACKEND_DIR = ROOT / 'backend'


def main() -> int:
    parser = argparse.ArgumentParser(description='Run the API with auto-reload for local development.')
    parser.add_argument('--port', type=int, default=int(os.environ.get('PORT', '3001')))
    args = parser.parse_args()

    backend_cmd = [
        sys.executable,
        '-m',
        'uvicorn',
        'siteo.main:app',
        '--host',
        '0.0.0.0',
        '--port',
        str(args.port),
        '--reload',
    ]
    try:
        return subprocess.call(backend_cmd, cwd=str(BACKEND_DIR), env=os.environ.copy())
    except KeyboardInterrupt:
        return 0


if __name__ == '__main__':
    raise SystemExit(main())
