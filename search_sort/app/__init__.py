"""App components."""
