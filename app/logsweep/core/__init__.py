"""Core infrastructure: XDG paths, theme, and the deletion audit log."""
