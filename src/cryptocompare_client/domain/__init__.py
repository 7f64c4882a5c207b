"""Domain types, query building and response decoding."""
