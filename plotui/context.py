from __future__ import annotations

from dataclasses import dataclass, field, replace

from plotui.disposition import Disposition
from plotui.style import TickStyle, tiny_dashed
from plotui.viewport import Viewport


@dataclass(frozen=True)
class RenderContext:
    """Inherited render settings, passed down explicitly from container to content.

    Each override returns a child context; the parent is left untouched.
    """

    disposition: Disposition = field(default_factory=Disposition)
    viewport: Viewport = field(default_factory=Viewport)
    horizontal_tick_style: TickStyle = field(default_factory=lambda: TickStyle(label_style="trailing"))
    vertical_tick_style: TickStyle = field(
        default_factory=lambda: TickStyle(stroke=tiny_dashed(), label_style="bottom_trailing")
    )

    def with_disposition(self, disposition: Disposition) -> "RenderContext":
        # Nearer overrides win field by field; unset fields inherit.
        return replace(self, disposition=disposition.merge(self.disposition))

    def with_viewport(self, viewport: Viewport) -> "RenderContext":
        return replace(self, viewport=viewport)

    def with_tick_style(
        self,
        *,
        horizontal: TickStyle | None = None,
        vertical: TickStyle | None = None,
    ) -> "RenderContext":
        return replace(
            self,
            horizontal_tick_style=horizontal if horizontal is not None else self.horizontal_tick_style,
            vertical_tick_style=vertical if vertical is not None else self.vertical_tick_style,
        )
