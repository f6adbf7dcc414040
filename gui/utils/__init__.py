"""GUI utilities (logging, timer)."""
