"""Overlay screens: title, ready/pause popups, results and the help guide.

Screens are plain data. The presenter decides which one is showing and
the skin draws it; nothing here touches pygame.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class ScreenKind(str, Enum):
    """Which overlay is on top of the playfield."""
    TITLE = "title"
    READY = "ready"
    PAUSE = "pause"
    RESULT = "result"


@dataclass(frozen=True)
class Screen:
    """A centered card with a heading, some text and one button.

    Attributes:
        kind: Overlay type
        title: Heading
        lines: Body text, one entry per line
        button_label: Caption of the single button (Enter or click)
    """
    kind: ScreenKind
    title: str
    lines: Tuple[str, ...]
    button_label: str


def title_screen() -> Screen:
    return Screen(
        kind=ScreenKind.TITLE,
        title="Block Breaker",
        lines=("Press Start to begin playing.", "H: how to play"),
        button_label="Start",
    )


def ready_popup(message: str = "") -> Screen:
    """Popup shown while the ball is parked between lives and levels."""
    content = message.strip() or "Press Resume when you are ready."
    return Screen(
        kind=ScreenKind.READY,
        title="Ready",
        lines=(content,),
        button_label="Resume",
    )


def pause_popup(message: str = "") -> Screen:
    content = message.strip() or "The game is paused. Press Resume to continue."
    return Screen(
        kind=ScreenKind.PAUSE,
        title="Paused",
        lines=(content,),
        button_label="Resume",
    )


def result_screen(score: int, high_score: int) -> Screen:
    """Final score card shown after the last life is lost."""
    return Screen(
        kind=ScreenKind.RESULT,
        title="Results",
        lines=(f"Score: {score}", f"High score: {high_score}"),
        button_label="Back to title",
    )


class ScreenNavigator:
    """Holds the single overlay currently shown, if any."""

    def __init__(self):
        self._current: Optional[Screen] = None

    @property
    def current(self) -> Optional[Screen]:
        return self._current

    @property
    def kind(self) -> Optional[ScreenKind]:
        return self._current.kind if self._current is not None else None

    def show(self, screen: Screen) -> None:
        """Replace whatever is showing with ``screen``."""
        self._current = screen

    def hide(self) -> None:
        self._current = None

    def is_showing(self, kind: ScreenKind) -> bool:
        return self.kind == kind


@dataclass(frozen=True)
class HelpPage:
    title: str
    lines: Tuple[str, ...]


HOW_TO_PLAY_PAGES: Tuple[HelpPage, ...] = (
    HelpPage(
        title="How to play",
        lines=(
            "Move the paddle with the mouse or the left/right keys (A/D work too).",
            "On touch screens, slide a finger along the window.",
            "Press SPACE or a popup button to start and resume.",
            "Clear every brick to reach the next level.",
        ),
    ),
    HelpPage(
        title="Power-up ball",
        lines=(
            "Break five bricks to power up the ball.",
            "A powered-up ball glows gold, leaves a trail and smashes",
            "straight through every brick it touches.",
            "The effect ends when the ball hits the ceiling or a life is lost.",
        ),
    ),
)


class HowToPlayGuide:
    """Paged help overlay, opened and closed with H."""

    def __init__(self, pages: Tuple[HelpPage, ...] = HOW_TO_PLAY_PAGES):
        if not pages:
            raise ValueError("HowToPlayGuide needs at least one page")
        self._pages = pages
        self._page_index = 0
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def page_index(self) -> int:
        return self._page_index

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def current_page(self) -> HelpPage:
        return self._pages[self._page_index]

    @property
    def page_indicator(self) -> str:
        return f"{self._page_index + 1} / {len(self._pages)}"

    def open(self, page: int = 0) -> None:
        self._page_index = max(0, min(page, len(self._pages) - 1))
        self._open = True

    def close(self) -> None:
        self._open = False

    def toggle(self) -> None:
        if self._open:
            self.close()
        else:
            self.open()

    def next_page(self) -> None:
        """Advance one page, stopping at the last."""
        self._page_index = min(self._page_index + 1, len(self._pages) - 1)

    def prev_page(self) -> None:
        self._page_index = max(self._page_index - 1, 0)
