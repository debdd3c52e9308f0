"""One addressable element of a parsed markup tree."""

from collections.abc import Mapping

from bs4 import BeautifulSoup, NavigableString, Tag


class MarkupNode:
    """Wraps a BeautifulSoup tag with the operations the transformers need.

    Replacement mutates the owning document in place; the node must not be
    used after `wrap_content` or `replace`.
    """

    def __init__(self, tag: Tag):
        self._tag = tag

    @property
    def tag(self) -> str:
        return self._tag.name

    def get_attribute(self, name: str) -> str | None:
        value = self._tag.attrs.get(name)
        return None if value is None else str(value)

    def remove_attribute(self, name: str) -> str:
        """Remove `name` and return its trimmed value, or "" when absent."""
        value = self._tag.attrs.pop(name, None)
        if value is None:
            return ""
        return str(value).strip()

    @property
    def attributes(self) -> dict[str, str]:
        """Copy of the remaining attributes, in document order."""
        return {str(key): str(value) for key, value in self._tag.attrs.items()}

    def set_attributes(self, attributes: Mapping[str, str]) -> None:
        self._tag.attrs = {str(key): str(value) for key, value in attributes.items()}

    def inner_markup(self) -> str:
        return self._tag.decode_contents()

    def wrap_content(self, open_text: str, close_text: str) -> None:
        """Replace the element by `open_text`, its inner content, then `close_text`."""
        self._tag.insert_before(NavigableString(open_text))
        self._tag.insert_after(NavigableString(close_text))
        self._tag.unwrap()

    def replace(self, text: str) -> None:
        """Replace the whole element, inner content included, by `text`."""
        fragment = BeautifulSoup(text, "html.parser", multi_valued_attributes=None)
        self._tag.replace_with(*list(fragment.contents))

    def __repr__(self) -> str:
        return f"MarkupNode({self._tag.name!r}, {self.attributes!r})"
