"""CLI layer — stderr console and the process-exit boundary.

This package is the outermost layer. It is the only place that writes
the user-facing message and translates a failure into an OS exit status.
"""
