"""
text.py - Input Text Sources

Provides the lines fed to the counter: the raw lines of a text file,
or, when asked for, the text of an HTML document with its markup,
scripts and styles removed.
"""

from bs4 import BeautifulSoup


def extract_visible_text(markup):
    """Return the non-blank text lines of an HTML document."""
    soup = BeautifulSoup(markup, "lxml")
    for tag in soup(["script", "style"]):
        tag.decompose()

    text = soup.get_text(separator="\n")
    return [line for line in (l.strip() for l in text.splitlines()) if line]


def read_lines(file, html=False):
    """
    Yield the lines to count from an open text file.

    Plain text is streamed line by line; HTML has to be read whole
    before its text can be extracted.
    """
    if html:
        yield from extract_visible_text(file.read())
    else:
        yield from file
