"""Reference asset database implementations."""
