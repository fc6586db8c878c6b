"""Bundled data files for logsweep."""
