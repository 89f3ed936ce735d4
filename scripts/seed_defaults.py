"""Seed Redis with default settings for the lorem endpoint.

This script populates:
- lorem:defaults: JSON object with shape, length, wordsPerUnit,
  sentencesPerParagraph and an optional seed

Usage:
    python scripts/seed_defaults.py --redis redis://localhost:6379/0 --shape ul --length 3-5
"""
from __future__ import annotations

import argparse
import json

import redis

DEFAULTS_KEY = "lorem:defaults"


def _build_defaults(args: argparse.Namespace) -> dict:
    payload = {
        "shape": args.shape,
        "length": args.length,
        "wordsPerUnit": args.words_per_unit,
        "sentencesPerParagraph": args.sentences_per_paragraph,
    }
    if args.seed is not None:
        payload["seed"] = args.seed
    return payload


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed Redis with default lorem settings")
    parser.add_argument("--redis", default="redis://localhost:6379/0", help="Redis URL")
    parser.add_argument("--shape", default="paragraph", help="Default shape")
    parser.add_argument("--length", default="3-5", help="Default length")
    parser.add_argument("--words-per-unit", default="4-16", help="Default words per sentence or item")
    parser.add_argument("--sentences-per-paragraph", default="3-6", help="Default sentences per paragraph")
    parser.add_argument("--seed", type=float, default=None, help="Default seed")
    args = parser.parse_args()

    client = redis.Redis.from_url(args.redis, decode_responses=True)
    payload = _build_defaults(args)
    client.set(DEFAULTS_KEY, json.dumps(payload))

    print("Seeded", DEFAULTS_KEY, f"with {payload}")


if __name__ == "__main__":
    main()
