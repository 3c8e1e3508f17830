"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — viewer rendered / document valid
  1   Violation — nothing to show (no icons) or schema violation
  2   Error — usage error, missing folder, runtime failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
