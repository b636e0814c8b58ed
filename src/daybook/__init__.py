"""daybook - a timestamped, per-day personal journal."""
