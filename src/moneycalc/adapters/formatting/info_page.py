# src/moneycalc/adapters/formatting/info_page.py
"""
Info Page - Static "Read Me" Content

The help page ships as HTML inside the package. Tk has no HTML widget, so
the page is reduced to plain text paragraphs with BeautifulSoup before it
is shown in the content area.

Files that USE this module:
- moneycalc.adapters.tk.displays (ChartContentDisplay.show_info)
- tests.test_formatter (unit tests)

Files that this module USES:
- None (bs4 and package resources only)
"""
from __future__ import annotations

import logging
from importlib import resources

from bs4 import BeautifulSoup  # HTML parsing library for extracting the page text

log = logging.getLogger(__name__)

INFO_RESOURCE = "index.html"
LOAD_ERROR_TEXT = "Error while loading HTML file"

# Block-level tags that start a new paragraph in the extracted text
_BLOCK_TAGS = ["h1", "h2", "h3", "p", "li"]


def html_to_text(html: str) -> str:
    """
    Reduce an HTML page to its title and paragraphs, one block per line.

    Headings and paragraphs are separated by a blank line; list items are
    prefixed with a bullet.
    """
    soup = BeautifulSoup(html, "html.parser")
    blocks = []
    for element in soup.find_all(_BLOCK_TAGS):
        text = " ".join(element.get_text(" ", strip=True).split())
        if not text:
            continue
        if element.name == "li":
            blocks.append(f"• {text}")
        else:
            blocks.append(f"\n{text}" if blocks else text)
    return "\n".join(blocks).strip()


def load_info_text() -> str:
    """
    Load the bundled help page as plain text.

    Returns:
        The page text, or a short error message if the resource is missing
    """
    try:
        html = resources.files("moneycalc.resources").joinpath(INFO_RESOURCE).read_text(encoding="utf-8")
    except (FileNotFoundError, ModuleNotFoundError, OSError) as e:
        log.error("Could not load info page: %s", e)
        return LOAD_ERROR_TEXT
    return html_to_text(html)
