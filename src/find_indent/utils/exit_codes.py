"""Exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success
  1   Violation (``--strict`` found undetectable files, ``--expect`` mismatch,
      or an invalid report)
  2   Error (usage error, missing path, unreadable input)
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
