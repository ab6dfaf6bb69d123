#!/usr/bin/env python3
"""Run article JSON files through the admission pipeline.

Usage:
  python scripts/validate_articles.py articles.json [--publish | --force] [--card-name NAME]

The file may hold a single article object or an array of them. One JSON
result per article is printed; the exit code is 1 when any non-forced
article fails validation.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from articles.services.pipeline import review_batch  # noqa: E402
from articles.settings import get_settings  # noqa: E402
from articles.utils.logging import configure_logging  # noqa: E402


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("path", type=Path, help="JSON file with one article or a list of articles")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--publish", action="store_true", help="apply the strict publish gate")
    mode.add_argument("--force", action="store_true", help="force-save: never fail, report warnings")
    parser.add_argument("--card-name", default=None, help="card name for the answer-first check")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    configure_logging(settings)

    try:
        payload = json.loads(args.path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        print(f"[validate_articles] cannot read {args.path}: {exc}", file=sys.stderr)
        return 2

    results = review_batch(
        payload,
        force=args.force,
        publish=args.publish,
        card_name=args.card_name,
        settings=settings,
    )
    failed = 0
    for result in results:
        print(json.dumps(result.to_payload(), ensure_ascii=False))
        if not result.success:
            failed += 1
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
