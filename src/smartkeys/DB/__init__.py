"""Key-value persistence backends (memory://, sqlite:///path)."""
