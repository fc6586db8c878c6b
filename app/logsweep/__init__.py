"""logsweep - rule-driven log retention sweeper.

Scans configured directories for files matching a pattern that are
older than a retention threshold and deletes them after operator
confirmation.
"""

__version__ = "0.1.0"
