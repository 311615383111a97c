"""Protocol for observing station signal aspects."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from section_controller.domain.models.aspect_change import AspectChange


class AspectObserver(Protocol):
    """Receives notifications when a station's directional aspect is set."""

    def on_aspect_changed(self, change: "AspectChange") -> None:
        """Handle an aspect change.

        Args:
            change: The station, direction and the old and new aspects.
        """
        ...
