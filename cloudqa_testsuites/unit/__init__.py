"""Framework unit tests (no browser)."""
