"""
render.py - HTML Tag Cloud Document

Builds the output page with BeautifulSoup: a header naming the word
count and source, then one styled span per ranked entry.
"""

from bs4 import BeautifulSoup, Doctype

from tagcloud.ranker import MAX_FONT, MIN_FONT


def font_class(size):
    return f"f{size}"


def font_styles(min_font=MIN_FONT, max_font=MAX_FONT):
    """CSS rules defining one class per font size, e.g. .f11 { font-size: 11pt; }"""
    return "\n".join(
        f".{font_class(size)} {{ font-size: {size}pt; }}"
        for size in range(min_font, max_font + 1)
    )


def render_document(entries, count, source_name, stylesheet="doc/tagcloud.css",
                    inline_style=True, min_font=MIN_FONT, max_font=MAX_FONT):
    """
    Render ranked entries as a complete HTML document.

    Args:
        entries: RankedEntry sequence, already in display order
        count: the requested number of words, shown in the title
        source_name: name of the input, shown in the title
        stylesheet: href of the external stylesheet, skipped if empty
        inline_style: also embed the .f<size> rules in a <style> block

    Returns:
        the serialized document as a string
    """
    soup = BeautifulSoup("<html><head></head><body></body></html>", "lxml")
    soup.insert(0, Doctype("html"))
    heading = f"Top {count} words in {source_name}"

    title = soup.new_tag("title")
    title.string = heading
    soup.head.append(title)

    if stylesheet:
        soup.head.append(soup.new_tag(
            "link", attrs={"href": stylesheet, "rel": "stylesheet", "type": "text/css"}))
    if inline_style:
        style = soup.new_tag("style", attrs={"type": "text/css"})
        style.string = font_styles(min_font, max_font)
        soup.head.append(style)

    h2 = soup.new_tag("h2")
    h2.string = heading
    soup.body.append(h2)
    soup.body.append(soup.new_tag("hr"))

    div = soup.new_tag("div", attrs={"class": "cdiv"})
    box = soup.new_tag("p", attrs={"class": "cbox"})
    for entry in entries:
        span = soup.new_tag("span", attrs={
            "style": "cursor:default",
            "class": font_class(entry.font_size),
            "title": f"count: {entry.count}",
        })
        span.string = entry.word
        box.append(span)
        box.append("\n")
    div.append(box)
    soup.body.append(div)

    return str(soup)
