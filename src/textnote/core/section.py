"""Sections and their content items."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContentItem:
    """One header + body unit of text within a section."""

    header: str = ""
    text: str = ""

    def render(self) -> str:
        out = f"{self.header}\n" if self.header else ""
        out += self.text
        if not self.text.endswith("\n"):
            out += "\n"
        return out


class Section:
    """A named, ordered block of content items."""

    def __init__(self, name: str, *contents: ContentItem):
        self._name = name
        self.contents: list[ContentItem] = list(contents)

    @property
    def name(self) -> str:
        return self._name

    def is_empty(self) -> bool:
        return not self.contents

    def contains(self, item: ContentItem) -> bool:
        """Order-independent membership test."""
        return item in self.contents

    def extend(self, items: list[ContentItem]) -> None:
        """Append items after the existing contents."""
        self.contents = self.contents + list(items)

    def clear(self) -> None:
        self.contents = []

    def render(self, empty_body: str) -> str:
        """Render the section body; `empty_body` is used when there is no content."""
        if not self.contents:
            return empty_body
        return "".join(item.render() for item in self.contents)

    def __eq__(self, other):
        if not isinstance(other, Section):
            return NotImplemented
        return self._name == other._name and self.contents == other.contents

    def __repr__(self):
        return f"Section(name={self._name!r}, contents={self.contents!r})"
