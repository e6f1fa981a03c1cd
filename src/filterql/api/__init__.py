"""REST API for filterql."""
