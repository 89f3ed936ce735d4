"""Placeholder ("lorem ipsum") text generator.

Builds words, titles, sentences, paragraphs and lists from a fixed word
dictionary. Sizes are given either as a fixed count or as an inclusive
``{min}-{max}`` range, and output is reproducible when a seed is supplied.
The result is a plain string with light HTML-like wrappers (``<p>``,
``<li>``, ``<dt>``...) that callers embed in a document of their own.

Running the module prints generated text, for example::

    python lorem.py --shape title --length 5 --seed 12345
"""

from __future__ import annotations

import argparse
import json
import math
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from loguru import logger

from lorem_words import DICTIONARY
from seeded_random import SeededStream, UnseededStream, clamp_random

# A comma is inserted when a draw over [0, COMMA_FREQUENCY] hits zero.
COMMA_FREQUENCY = 10
# Words this close to the end of a sentence never get a comma before them.
COMMA_FREE_TAIL = 3


class ConfigurationError(ValueError):
    """Raised when generator parameters cannot produce well-defined output."""


class Shape(str, Enum):
    WORD_LIST = "word-list"
    SENTENCE = "sentence"
    TITLE = "title"
    PARAGRAPH = "paragraph"
    ORDERED_LIST = "ordered-list"
    UNORDERED_LIST = "unordered-list"
    DEFINITION_LIST = "definition-list"

    @classmethod
    def parse(cls, raw: Union[str, "Shape"]) -> "Shape":
        if isinstance(raw, Shape):
            return raw
        key = str(raw).strip().lower()
        key = SHAPE_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError as exc:
            raise ConfigurationError(f"unknown shape {raw!r}") from exc


SHAPE_ALIASES: Dict[str, str] = {
    "words": Shape.WORD_LIST.value,
    "ol": Shape.ORDERED_LIST.value,
    "ul": Shape.UNORDERED_LIST.value,
    "dl": Shape.DEFINITION_LIST.value,
}

LIST_TAGS: Dict[Shape, str] = {
    Shape.ORDERED_LIST: "ol",
    Shape.UNORDERED_LIST: "ul",
    Shape.DEFINITION_LIST: "dl",
}


@dataclass(frozen=True)
class Fixed:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ConfigurationError(f"size must be non-negative, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Range:
    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum < 0:
            raise ConfigurationError(f"range bounds must be non-negative, got {self}")
        if self.maximum < self.minimum:
            raise ConfigurationError(f"range maximum is below its minimum in {self}")

    def __str__(self) -> str:
        return f"{self.minimum}-{self.maximum}"


SizeSpec = Union[Fixed, Range]
RawSize = Union[int, str, Fixed, Range]


def _parse_bound(text: str, raw: str) -> int:
    try:
        return int(text.strip())
    except ValueError as exc:
        raise ConfigurationError(f"invalid size {raw!r}: {text.strip()!r} is not an integer") from exc


def parse_size(raw: RawSize) -> SizeSpec:
    """Turn a count or a ``{min}-{max}`` string into a size spec.

    Args:
        raw: A non-negative integer, a numeric string such as ``"7"``, a
            range string such as ``"3-5"``, or an already parsed spec.

    Returns:
        ``Fixed`` for single values and ``Range`` for ranges.

    Raises:
        ConfigurationError: If a bound is not an integer, is negative, or
            the range maximum is below its minimum.
    """

    if isinstance(raw, (Fixed, Range)):
        return raw
    if isinstance(raw, bool):
        raise ConfigurationError(f"invalid size {raw!r}")
    if isinstance(raw, int):
        return Fixed(raw)
    if isinstance(raw, str):
        if "-" not in raw:
            return Fixed(_parse_bound(raw, raw))
        lower, _, upper = raw.partition("-")
        return Range(_parse_bound(lower, raw), _parse_bound(upper, raw))
    raise ConfigurationError(f"invalid size {raw!r}")


def resolve_size(spec: SizeSpec, stream) -> int:
    """Pick a concrete count. Fixed sizes never advance ``stream``."""
    if isinstance(spec, Fixed):
        return spec.value
    return clamp_random(stream.next(), spec.minimum, spec.maximum)


def parse_seed(seed: Union[int, float, str, None]) -> Optional[float]:
    if seed is None:
        return None
    if isinstance(seed, bool):
        raise ConfigurationError(f"invalid seed {seed!r}")
    try:
        value = float(seed)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ConfigurationError(f"invalid seed {seed!r}: not a number") from exc
    if not math.isfinite(value):
        raise ConfigurationError(f"invalid seed {seed!r}: must be finite")
    return value


def stream_for_seed(seed: Union[int, float, str, None]):
    """Return a seeded stream for a numeric seed, an unseeded one for ``None``."""
    value = parse_seed(seed)
    if value is None:
        return UnseededStream()
    return SeededStream(value)


@dataclass(frozen=True)
class GeneratorConfig:
    shape: Shape = Shape.PARAGRAPH
    length: SizeSpec = Range(3, 5)
    words_per_unit: SizeSpec = Range(4, 16)
    sentences_per_paragraph: SizeSpec = Range(3, 6)
    seed: Optional[float] = None

    def __post_init__(self) -> None:
        # Accept loose values so configs built by hand are parsed exactly once.
        object.__setattr__(self, "shape", Shape.parse(self.shape))
        object.__setattr__(self, "length", parse_size(self.length))
        object.__setattr__(self, "words_per_unit", parse_size(self.words_per_unit))
        object.__setattr__(self, "sentences_per_paragraph", parse_size(self.sentences_per_paragraph))
        object.__setattr__(self, "seed", parse_seed(self.seed))

    @classmethod
    def from_values(
        cls,
        shape: Union[str, Shape, None] = None,
        length: Optional[RawSize] = None,
        words_per_unit: Optional[RawSize] = None,
        sentences_per_paragraph: Optional[RawSize] = None,
        seed: Union[int, float, str, None] = None,
    ) -> "GeneratorConfig":
        """Build a config from loose values; ``None`` keeps the default."""
        values = {
            "shape": shape,
            "length": length,
            "words_per_unit": words_per_unit,
            "sentences_per_paragraph": sentences_per_paragraph,
            "seed": seed,
        }
        return cls(**{name: value for name, value in values.items() if value is not None})

    def to_dict(self) -> dict:
        return {
            "shape": self.shape.value,
            "length": str(self.length),
            "wordsPerUnit": str(self.words_per_unit),
            "sentencesPerParagraph": str(self.sentences_per_paragraph),
            "seed": self.seed,
        }


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


class _Composition:
    """One generation run. Owns the stream it draws from."""

    def __init__(self, dictionary: Sequence[str], config: GeneratorConfig, stream) -> None:
        self.dictionary = dictionary
        self.config = config
        self.stream = stream

    def count(self, spec: SizeSpec) -> int:
        return resolve_size(spec, self.stream)

    def words(self, count: int) -> List[str]:
        last = len(self.dictionary) - 1
        return [self.dictionary[clamp_random(self.stream.next(), 0, last)] for _ in range(count)]

    def word_list(self) -> str:
        return " ".join(self.words(self.count(self.config.length)))

    def title(self) -> str:
        return " ".join(_capitalize(word) for word in self.words(self.count(self.config.length)))

    def sentence(self) -> str:
        words = self.words(self.count(self.config.words_per_unit))
        if not words:
            return "."
        parts = [_capitalize(words[0])]
        for index in range(1, len(words)):
            separator = " "
            if index < len(words) - COMMA_FREE_TAIL:
                if clamp_random(self.stream.next(), 0, COMMA_FREQUENCY) == 0:
                    separator = ", "
            parts.append(separator + words[index])
        return "".join(parts) + "."

    def sentences(self, count: int) -> str:
        return " ".join(self.sentence() for _ in range(count))

    def paragraphs(self) -> str:
        paragraphs = []
        for _ in range(self.count(self.config.length)):
            sentences = self.sentences(self.count(self.config.sentences_per_paragraph))
            paragraphs.append(f"<p>{sentences}</p>")
        return "".join(paragraphs)

    def item(self) -> str:
        return _capitalize(" ".join(self.words(self.count(self.config.words_per_unit))))

    def list_items(self) -> str:
        items = []
        for _ in range(self.count(self.config.length)):
            value = self.item()
            if self.config.shape is Shape.DEFINITION_LIST:
                # The term reuses the outer length as its word count.
                items.append(f"<dt>{self.title()}</dt><dd>{value}</dd>")
            else:
                items.append(f"<li>{value}</li>")
        tag = LIST_TAGS[self.config.shape]
        return f"<{tag}>{''.join(items)}</{tag}>"

    def compose(self) -> str:
        builders: Dict[Shape, Callable[[], str]] = {
            Shape.WORD_LIST: self.word_list,
            Shape.TITLE: self.title,
            Shape.SENTENCE: lambda: self.sentences(self.count(self.config.length)),
            Shape.PARAGRAPH: self.paragraphs,
            Shape.ORDERED_LIST: self.list_items,
            Shape.UNORDERED_LIST: self.list_items,
            Shape.DEFINITION_LIST: self.list_items,
        }
        return builders[self.config.shape]()


class LoremGenerator:
    """Generates placeholder text from a shared, read-only dictionary."""

    def __init__(self, dictionary: Sequence[str] = DICTIONARY) -> None:
        if not dictionary:
            raise ConfigurationError("dictionary must contain at least one word")
        self.dictionary: Tuple[str, ...] = tuple(dictionary)

    def generate(self, config: GeneratorConfig) -> str:
        stream = stream_for_seed(config.seed)
        logger.debug(f"Generating {config.shape.value} (seed={config.seed})")
        composition = _Composition(self.dictionary, config, stream)
        return composition.compose()


def generate(config: GeneratorConfig, dictionary: Sequence[str] = DICTIONARY) -> str:
    """Generate placeholder text for ``config``.

    Args:
        config: Shape, sizes and optional seed of the text to produce.
        dictionary: Words to draw from. Defaults to the built-in list.

    Returns:
        The assembled text. Equal configs with a seed give equal strings.

    Raises:
        ConfigurationError: If the dictionary is empty, the shape is
            unknown or the seed is not a finite number.
    """

    return LoremGenerator(dictionary).generate(config)


def normalize_words(lines: Iterable[str]) -> List[str]:
    """Trim and lowercase one-word-per-line content, dropping blank lines."""
    return [line.strip().lower() for line in lines if line.strip()]


def load_dictionary(path: Union[str, Path, None] = None) -> Tuple[str, ...]:
    if path is None:
        return DICTIONARY
    with open(path, "r", encoding="utf-8") as handle:
        words = normalize_words(handle)
    if not words:
        raise ConfigurationError(f"dictionary file {path} contains no words")
    logger.info(f"Loaded {len(words)} words from {path}")
    return tuple(words)


def configure_logging(level: str = "INFO") -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def _format_content(config: GeneratorConfig, content: str, as_json: bool) -> str:
    if as_json:
        return json.dumps({"shape": config.shape.value, "seed": config.seed, "content": content})
    return content


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument(
        "--shape",
        default=Shape.PARAGRAPH.value,
        help="Shape of the text: " + ", ".join(shape.value for shape in Shape) + " (default: paragraph)",
    )
    parser.add_argument("--length", default="3-5", help="Words, sentences, paragraphs or items (default: 3-5)")
    parser.add_argument(
        "--words-per-unit",
        default="4-16",
        help="Words per sentence or list item (default: 4-16)",
    )
    parser.add_argument(
        "--sentences-per-paragraph",
        default="3-6",
        help="Sentences per paragraph (default: 3-6)",
    )
    parser.add_argument("--seed", default=None, help="Seed for reproducible output")
    parser.add_argument("--dictionary", default=None, help="One-word-per-line file to draw words from")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output the generated text as a JSON object",
    )
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.verbose else "WARNING")
    try:
        config = GeneratorConfig.from_values(
            shape=args.shape,
            length=args.length,
            words_per_unit=args.words_per_unit,
            sentences_per_paragraph=args.sentences_per_paragraph,
            seed=args.seed,
        )
        dictionary = load_dictionary(args.dictionary)
        content = generate(config, dictionary)
    except ConfigurationError as exc:
        parser.error(str(exc))
    except (OSError, UnicodeDecodeError) as exc:
        parser.error(f"cannot read dictionary {args.dictionary}: {exc}")
    print(_format_content(config, content, args.json))


if __name__ == "__main__":
    main()
