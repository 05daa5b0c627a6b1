#!/usr/bin/env python3
"""
Look up a Korean word in the Naver Korean-English dictionary from the shell.

Examples:
  koen-dict 사랑
  koen-dict 공부하다 --json
  koen-dict 학교 --raw searchinfo
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from koen_dict import config, pipeline
from koen_dict.errors import KoenDictError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="koen-dict", description=__doc__.strip().splitlines()[0])
    ap.add_argument("word", help="Word to look up (non-letters are stripped)")
    ap.add_argument("--json", action="store_true", help="Print the normalized entry as JSON")
    ap.add_argument(
        "--raw",
        choices=["entryinfo", "searchinfo"],
        help="Print a raw Naver document instead of the message",
    )
    ap.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=config.LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    return ap


def _dump(data) -> str:
    return json.dumps(data, ensure_ascii=False, indent=2)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config.configure_logging(args.log_level)

    try:
        if args.raw == "entryinfo":
            print(_dump(pipeline.get_entry_info_raw(args.word)))
        elif args.raw == "searchinfo":
            print(_dump(pipeline.get_search_info_raw(args.word)))
        elif args.json:
            entry = pipeline.get_entry(args.word)
            print(_dump(entry.model_dump(by_alias=True)))
        else:
            msg = pipeline.get_message(args.word)
            if not msg:
                print(f"No entry found for {args.word}", file=sys.stderr)
                return 1
            print(msg)
    except KoenDictError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
