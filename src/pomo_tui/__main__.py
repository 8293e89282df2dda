"""Allow ``python -m pomo_tui``."""

from pomo_tui.cli import main

main()
