"""Build the built-in word list module from a one-word-per-line file.

Lines are trimmed and lowercased, blank lines are dropped and duplicates
removed before the words are written, sorted, into ``lorem_words.py``.

Usage:
    python scripts/words_to_module.py words.txt --output lorem_words.py
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from lorem import normalize_words  # noqa: E402

HEADER = '''"""Built-in placeholder word list.

Generated by scripts/words_to_module.py from a one-word-per-line file.
"""

from typing import Tuple

DICTIONARY: Tuple[str, ...] = (
'''


def render_module(words: List[str]) -> str:
    lines = [f'    "{word}",\n' for word in sorted(set(words))]
    return HEADER + "".join(lines) + ")\n"


def main() -> None:
    parser = argparse.ArgumentParser(description="Build lorem_words.py from a word file")
    parser.add_argument("source", help="One-word-per-line text file")
    parser.add_argument(
        "--output",
        default=str(Path(__file__).resolve().parent.parent / "lorem_words.py"),
        help="Module to write (default: lorem_words.py at the repository root)",
    )
    args = parser.parse_args()

    with open(args.source, "r", encoding="utf-8") as handle:
        words = normalize_words(handle)
    if not words:
        parser.error(f"{args.source} contains no words")

    Path(args.output).write_text(render_module(words), encoding="utf-8")
    print(f"Wrote {len(set(words))} words to {args.output}")


if __name__ == "__main__":
    main()
