"""Shared styling tokens for console output and the prompt toolbar."""

# =============================================================================
# Rich console colors
# =============================================================================

ERROR = "#ff5c57"
WARNING = "#ffb347"
SUCCESS = "#6ad18f"
SUBTLE = "#9aa0ac"
CYAN = "#00bfff"

# =============================================================================
# prompt_toolkit toolbar colors
# =============================================================================

PT_ORANGE = "#ff9f43"  # Tracing active
PT_GREEN = "#2ecc71"  # Tracing off
PT_GREY = "#aaaaaa"  # Toolbar text
PT_PURPLE = "#6c5ce7"  # Driver name
