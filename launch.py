"""
launch.py - Tag Cloud Generator Entry Point

Main entry point for the tag cloud generator.
Handles configuration loading, prompting for anything not given
on the command line, and running the generator.

Usage:
    python launch.py                                    # Prompt for everything
    python launch.py --input book.txt --output cloud.html --count 100
    python launch.py --input page.html --html           # Count visible page text
    python launch.py --config_file path                 # Use custom config file
"""

import sys
import logging
from configparser import ConfigParser, Error as ConfigParserError
from argparse import ArgumentParser

from utils.config import Config
from tagcloud import TagCloud, TagCloudError, parse_count


def prompt(message, value):
    """Return value if given, otherwise ask for it on stdin."""
    if value is not None:
        return value
    print(message)
    return input().strip()


def main(config_file, input_path=None, output_path=None, count=None, html=False):
    """
    Generate a tag cloud, asking for missing arguments.

    Args:
        config_file: Path to configuration file (default: config.ini)
        input_path, output_path, count: taken from stdin when None
        html: count the visible text of an HTML input

    Returns:
        process exit status
    """
    # Load configuration (a missing file leaves every default in place)
    try:
        cparser = ConfigParser()
        cparser.read(config_file)
        config = Config(cparser)
        generator = TagCloud(config)
    except (ConfigParserError, ValueError, OSError) as e:
        logging.getLogger("TAGCLOUD").error(f"Invalid configuration in {config_file}: {e}")
        return 1

    try:
        input_path = prompt("Enter name of input file: ", input_path)
        output_path = prompt("Enter name of output file: ", output_path)
        n = parse_count(prompt("Enter number of words to be included in tag cloud: ", count))
        generator.generate(input_path, output_path, n, html=html)
    except TagCloudError as e:
        generator.logger.error(str(e))
        return 1
    except EOFError:
        generator.logger.error("Error reading input stream.")
        return 1
    return 0


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--input", type=str, default=None,
                        help="Text (or HTML) file to count words in")
    parser.add_argument("--output", type=str, default=None,
                        help="HTML file to write the tag cloud to")
    parser.add_argument("--count", type=str, default=None,
                        help="Number of words to include in the tag cloud")
    parser.add_argument("--html", action="store_true", default=False,
                        help="Count the visible text of an HTML input")
    parser.add_argument("--config_file", type=str, default="config.ini",
                        help="Path to configuration file")
    args = parser.parse_args()
    sys.exit(main(args.config_file, args.input, args.output, args.count, args.html))
