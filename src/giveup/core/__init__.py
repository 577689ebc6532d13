"""Core layer — result type, annotation chain, and pure rendering.

Rules
-----
* No stream writes and no process exit (the terminal call delegates to
  ``giveup.cli``).
* Models are frozen dataclasses.
* Imports only from ``giveup.exceptions`` and within ``core``.
"""
