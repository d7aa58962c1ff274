"""Orientation-aware layout of a picture-book page."""

from dataclasses import dataclass

IMAGE_ASPECT_RATIO = 16 / 9

# (font size, horizontal text padding) per (idiom, landscape)
_TEXT_METRICS = {
    ("phone", False): (18, 30),
    ("tablet", False): (24, 60),
    ("phone", True): (24, 60),
    ("tablet", True): (32, 120),
}


@dataclass(frozen=True)
class PageLayout:
    """Geometry for rendering one page into a viewport.

    In landscape the illustration fills the viewport and the text is drawn
    over it. In portrait the illustration keeps a 16:9 band at the top and
    the text sits in the area below it.
    """

    is_landscape: bool
    image_width: int
    image_height: int
    text_area_height: int
    text_overlaid: bool
    font_size: int
    text_padding: int


def is_landscape(width: int, height: int) -> bool:
    return width > height


def compute_page_layout(width: int, height: int, device_idiom: str = "phone") -> PageLayout:
    """Compute the page layout for a viewport.

    Raises:
        ValueError: if the viewport has a negative dimension.
    """
    if width < 0 or height < 0:
        raise ValueError(f"Invalid viewport size: {width}x{height}")

    landscape = is_landscape(width, height)
    idiom = device_idiom if device_idiom == "tablet" else "phone"
    font_size, text_padding = _TEXT_METRICS[(idiom, landscape)]

    if landscape:
        return PageLayout(
            is_landscape=True,
            image_width=width,
            image_height=height,
            text_area_height=0,
            text_overlaid=True,
            font_size=font_size,
            text_padding=text_padding,
        )

    image_height = min(round(width / IMAGE_ASPECT_RATIO), height)
    return PageLayout(
        is_landscape=False,
        image_width=width,
        image_height=image_height,
        text_area_height=height - image_height,
        text_overlaid=False,
        font_size=font_size,
        text_padding=text_padding,
    )
