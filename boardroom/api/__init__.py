"""REST API for the board portal."""
