"""Exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — scan finished and every entry was readable
  1   Issues — scan finished with unreadable entries, or a validated
      document does not match its schema
  2   Error — usage error, missing path, bad options file
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    ISSUES = 1
    ERROR = 2
