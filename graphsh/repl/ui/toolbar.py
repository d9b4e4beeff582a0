"""Toolbar component for the console's bottom status bar."""

from typing import TYPE_CHECKING

from prompt_toolkit.formatted_text import FormattedText

from graphsh.repl.tracing import TraceTarget
from graphsh.repl.ui.style_tokens import PT_GREEN, PT_GREY, PT_ORANGE, PT_PURPLE

if TYPE_CHECKING:
    from graphsh.repl.session import Session


class Toolbar:
    """Generates bottom toolbar showing the driver and tracing state."""

    def __init__(self, session: "Session"):
        """Initialize toolbar.

        Args:
            session: Console session whose state is displayed
        """
        self.session = session

    def build_tokens(self) -> FormattedText:
        """Generate bottom toolbar text.

        Returns:
            FormattedText for bottom toolbar
        """
        tracing = self.session.tracing
        if tracing.target is TraceTarget.FILE:
            trace_label = f" TRACING → {tracing.path} "
        elif tracing.target is TraceTarget.CONSOLE:
            trace_label = " TRACING → console "
        else:
            trace_label = " TRACING OFF "
        trace_style = f"fg:{PT_ORANGE} bold" if tracing.active else f"fg:{PT_GREEN} bold"

        return FormattedText(
            [
                (trace_style, trace_label),
                (f"fg:{PT_GREY}", " • End statements with ; • help; for commands • Driver: "),
                (f"fg:{PT_PURPLE}", f"{self.session.store_name} "),
            ]
        )

    def __call__(self) -> FormattedText:
        return self.build_tokens()
