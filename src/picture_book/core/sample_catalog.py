"""Fixed sample books seeded into an empty catalog on first launch."""

from typing import NamedTuple, Tuple


class SampleBook(NamedTuple):
    id: str
    title: str
    cover_image_name: str


SAMPLE_BOOKS: Tuple[SampleBook, ...] = (
    SampleBook("book_001", "浦島太郎", "urashima"),
    SampleBook("book_002", "桃太郎", "momotaro"),
    SampleBook("book_003", "かぐや姫", "kaguya"),
    SampleBook("book_004", "鶴の恩返し", "tsuru"),
    SampleBook("book_005", "一寸法師", "issunboushi"),
    SampleBook("book_006", "花咲かじいさん", "hanasaka"),
)
