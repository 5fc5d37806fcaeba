#!/usr/bin/env python3
"""
TemplateReview - Command line entry point

  templatereview analyze_template  < payload.json
  templatereview validate_template < payload.json
  templatereview enhance_template  < payload.json
  templatereview serve [port]

Payload: {"template": "...", "metadata": {...}}
The JSON result goes to stdout, errors to stderr (exit code 1).
"""

import json
import logging
import os
import sys

from . import __version__

USAGE = """
TemplateReview v{}

OPERATIONS (JSON payload on stdin):
  templatereview analyze_template       Structure, quality and pattern report
  templatereview validate_template      Pass/fail with rule violations
  templatereview enhance_template       Rewritten template + change log

SERVICE:
  templatereview serve [port]           Start HTTP API (localhost:9998)
"""


def _setup_logging():
    level = os.environ.get("TEMPLATEREVIEW_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s [%(levelname)s] %(message)s',
        stream=sys.stderr,
    )


def _fail(message: str) -> int:
    sys.stderr.write(f"Error: {message}\n")
    return 1


def run(argv) -> int:
    from .core.errors import TemplateReviewError
    from .core.operations import OPERATIONS, check_operation, run_operation

    if not argv:
        return _fail(f"No command provided. Expected one of: {', '.join(OPERATIONS)}")

    cmd = argv[0]

    if cmd == "serve":
        from .service import server
        try:
            port = int(argv[1]) if len(argv) > 1 else server.PORT
        except ValueError:
            return _fail(f"Invalid port: {argv[1]}")
        server.run(port=port)
        return 0

    try:
        # Unknown operations are rejected before stdin is read
        check_operation(cmd)
        raw = sys.stdin.read()
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            return _fail(f"Invalid JSON input: {e}")
        result = run_operation(cmd, payload)
    except TemplateReviewError as e:
        return _fail(str(e))

    sys.stdout.write(json.dumps(result, indent=2, ensure_ascii=False))
    sys.stdout.write("\n")
    return 0


def main():
    _setup_logging()

    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help", "help"):
        print(USAGE.format(__version__))
        return

    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
