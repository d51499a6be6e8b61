"""Inline suggestion value object."""

from dataclasses import dataclass

from .identifiers import Platform


@dataclass(frozen=True)
class Suggestion:
    """One inline answer item: result id, display title and deep link."""

    id: str
    display_title: str
    url: str
    platform: Platform

    @property
    def markdown_link(self) -> str:
        return f"[{self.display_title}]({self.url})"
