"""
Profile slide-over panel.

The panel is a two-state machine (closed / open). The NavBar's profile
button requests opening; the close button and a click on the overlay
request closing. Anything else is ignored.
"""
from __future__ import annotations

from enum import Enum

PANEL_TITLE = "Your Account"
PANEL_ENTRIES: tuple[str, ...] = ("Profile", "My Orders", "Settings", "Log Out")


class PanelEvent(str, Enum):
    profile = "profile"
    close = "close"
    overlay = "overlay"


_OPENS = {PanelEvent.profile}
_CLOSES = {PanelEvent.close, PanelEvent.overlay}


class ProfilePanel:
    def __init__(self, open: bool = False) -> None:
        self.open = open

    def handle(self, event: PanelEvent | str | None) -> bool:
        """Apply a UI event and return the resulting ``open`` flag."""
        try:
            event = PanelEvent(event)
        except ValueError:
            return self.open

        if event in _OPENS:
            self.open = True
        elif event in _CLOSES:
            self.open = False
        return self.open

    @classmethod
    def after(cls, event: PanelEvent | str | None) -> ProfilePanel:
        """A freshly mounted (closed) panel with ``event`` applied."""
        panel = cls()
        panel.handle(event)
        return panel
