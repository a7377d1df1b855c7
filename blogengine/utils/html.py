"""Queries over rendered HTML fragments."""
from __future__ import annotations

from typing import NamedTuple

from bs4 import BeautifulSoup


class LeadImage(NamedTuple):
    src: str
    alt: str | None


def text_content(html: str) -> str:
    """Visible text of an HTML fragment, whitespace runs collapsed to single spaces."""
    return " ".join(BeautifulSoup(html or "", "html.parser").get_text().split())


def first_image(html: str) -> LeadImage | None:
    """Return the first ``<img>`` of the fragment, or None when there is none.

    An empty ``alt`` attribute is reported as None.
    """
    img = BeautifulSoup(html or "", "html.parser").select_one("img")
    if img is None:
        return None
    return LeadImage(src=img.get("src", ""), alt=img.get("alt") or None)
