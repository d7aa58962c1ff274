"""StoryPage entity - placeholder page content generated for a book."""

from dataclasses import dataclass
from typing import List

from .book import Book

DEFAULT_TOTAL_PAGES = 5

_STORY_LINES = {
    1: "むかしむかし、あるところに\n{title}がいました。",
    2: "ある日のことです。\nとても不思議なことが起きました。",
    3: "みんなでちからを合わせて\nがんばりました。",
    4: "そして、ついに\n願いがかないました。",
    5: "みんな幸せに暮らしました。\nおしまい。",
}


@dataclass(frozen=True)
class StoryPage:
    """A single page of a picture book.

    Page numbers are 1-based for display; ``hue`` is in [0, 1] and drives
    the placeholder gradient.
    """

    page_number: int
    total_pages: int
    text: str

    @property
    def hue(self) -> float:
        return self.page_number / self.total_pages


def story_text_for_page(book: Book, page_number: int) -> str:
    """Returns the narration text for a 1-based page number."""
    template = _STORY_LINES.get(page_number)
    if template is None:
        return f"ページ {page_number} のテキスト"
    return template.format(title=book.title)


def build_story_pages(book: Book, total_pages: int = DEFAULT_TOTAL_PAGES) -> List[StoryPage]:
    """Build the placeholder pages for a book.

    Raises:
        ValueError: if total_pages is not positive.
    """
    if total_pages <= 0:
        raise ValueError(f"A book needs at least one page, got {total_pages}")
    return [
        StoryPage(
            page_number=number,
            total_pages=total_pages,
            text=story_text_for_page(book, number),
        )
        for number in range(1, total_pages + 1)
    ]
