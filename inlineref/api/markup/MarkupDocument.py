"""Parsed markup tree."""

from bs4 import BeautifulSoup

from .MarkupNode import MarkupNode


class MarkupDocument:
    """Editor markup parsed with the stdlib-backed `html.parser` builder.

    Attribute values are kept as plain strings (`class` included) so they can
    be stored and re-rendered without coercion.
    """

    def __init__(self, markup: str):
        self._soup = BeautifulSoup(markup or "", "html.parser", multi_valued_attributes=None)

    def select(self, tag: str, marker: str) -> list[MarkupNode]:
        """Return the `tag` elements that carry the `marker` attribute, in document order."""
        return [MarkupNode(element) for element in self._soup.find_all(tag, attrs={marker: True})]

    def serialize(self) -> str:
        return self._soup.decode()

    def __str__(self) -> str:
        return self.serialize()
