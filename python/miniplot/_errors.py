"""Exception hierarchy for miniplot."""


class MiniplotError(Exception):
    """Base exception for all miniplot errors."""
    pass


class RenderError(MiniplotError):
    """The renderer failed to draw or display the chart."""
    pass


class SpecificationConsumedError(MiniplotError):
    """A plot specification was used again after show()."""

    def __init__(self, window_title: str):
        self.window_title = window_title
        super().__init__(
            f"Plot {window_title!r} has already been shown and cannot be modified"
        )
