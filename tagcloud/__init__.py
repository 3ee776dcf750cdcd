"""
tagcloud/__init__.py - Tag Cloud Orchestrator

Runs the pipeline end to end:
- Reads and counts the words of the input file
- Ranks the top N words and scales their font sizes
- Renders the HTML document and writes it out

Key role: the only place where files are opened; I/O failures are
turned into InputUnavailable / OutputUnavailable here.
"""

import re

from utils import get_logger
from tagcloud.counter import count_words
from tagcloud.errors import InputUnavailable, InvalidCount, OutputUnavailable, TagCloudError
from tagcloud.ranker import RankedEntry, rank
from tagcloud.render import render_document
from tagcloud.text import read_lines

COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def parse_count(text):
    """
    Parse the requested number of words.

    Only plain ASCII digits, optionally signed with "+", are accepted.

    Raises:
        InvalidCount: if text is not a non-negative integer
    """
    if isinstance(text, int) and not isinstance(text, bool):
        count = text
    elif isinstance(text, str) and COUNT_PATTERN.fullmatch(text.strip()):
        count = int(text.strip())
    else:
        raise InvalidCount(f"Number of words must be a non-negative integer, got {text!r}.")
    if count < 0:
        raise InvalidCount(f"Number of words must be non-negative, got {count}.")
    return count


class TagCloud(object):
    """
    Tag cloud generator for one configuration.

    Each call to generate() is independent; nothing is kept between
    runs besides the configuration and the logger.
    """

    def __init__(self, config):
        """
        Args:
            config: utils.config.Config (fonts, stylesheet, encoding, log dir)
        """
        self.config = config
        self.logger = get_logger("TAGCLOUD", log_dir=config.log_dir)

    def count(self, input_path, html=False):
        """
        Count the words of input_path.

        Args:
            html: count the visible text of an HTML document instead of its markup

        Raises:
            InputUnavailable: if the file cannot be opened, read or decoded
        """
        try:
            with open(input_path, "r", encoding=self.config.encoding) as file:
                counts = count_words(read_lines(file, html=html))
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnavailable(f"Cannot read {input_path}: {e}") from e

        self.logger.info(
            f"Read {input_path}: {sum(counts.values())} words, "
            f"{len(counts)} distinct.")
        return counts

    def rank(self, counts, n):
        entries = rank(counts, n, self.config.min_font, self.config.max_font)
        self.logger.info(f"Selected {len(entries)} of {len(counts)} distinct words.")
        return entries

    def render(self, entries, n, source_name):
        return render_document(
            entries, n, source_name,
            stylesheet=self.config.stylesheet,
            inline_style=self.config.inline_style,
            min_font=self.config.min_font,
            max_font=self.config.max_font,
        )

    def generate(self, input_path, output_path, n, html=False):
        """
        Count, rank, render and write a tag cloud.

        The document is rendered completely before the output file is
        opened, so a failed run leaves no partial cloud behind.

        Returns:
            the list of RankedEntry written
        """
        if isinstance(n, str):
            n = parse_count(n)
        elif n < 0:
            raise InvalidCount(f"Number of words must be non-negative, got {n}.")

        counts = self.count(input_path, html=html)
        entries = self.rank(counts, n)
        document = self.render(entries, n, str(input_path))

        try:
            with open(output_path, "w", encoding="utf-8") as out:
                out.write(document)
        except OSError as e:
            raise OutputUnavailable(f"Cannot write {output_path}: {e}") from e

        self.logger.info(f"Wrote tag cloud of {len(entries)} words to {output_path}.")
        return entries


__all__ = [
    "TagCloud",
    "TagCloudError",
    "InputUnavailable",
    "InvalidCount",
    "OutputUnavailable",
    "RankedEntry",
    "parse_count",
]
