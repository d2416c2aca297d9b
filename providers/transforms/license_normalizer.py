"""Line-count preserving removal of boilerplate Apache license headers.

The optimizing compiler keeps every ``@license`` comment it sees, so a
compiled chunk would otherwise carry one copy per source file. Headers from
the two permitted rights-holders are blanked out before compilation. Each
removed block is replaced by exactly the line breaks it contained so that
line-indexed source maps computed downstream stay valid.
"""

import re
from pathlib import Path
from typing import Pattern, Sequence, Tuple, Union

from loguru import logger

LICENSE_HOLDERS: Tuple[str, ...] = ("Google LLC", "Massachusetts Institute of Technology")

LICENSE_SPDX_ID = "Apache-2.0"

_LINE_BREAK = r"\r?\n"
_LINE_BREAK_RE = re.compile(_LINE_BREAK)


def build_license_pattern(
    holders: Sequence[str] = LICENSE_HOLDERS,
    spdx_id: str = LICENSE_SPDX_ID,
) -> Pattern[str]:
    """Compile the license block pattern for the given rights-holders.

    Named groups:
        copyright: the full "Copyright <year> <holder>" text
        holder: the rights-holder name
    """
    holder_alternatives = "|".join(re.escape(holder) for holder in holders)
    return re.compile(
        r"/\*\*" + _LINE_BREAK
        + r" \* @license" + _LINE_BREAK
        + r" \* (?P<copyright>Copyright \d+ (?P<holder>" + holder_alternatives + r"))" + _LINE_BREAK
        + r"(?: \* All rights reserved\." + _LINE_BREAK + r")?"
        + r" \* SPDX-License-Identifier: " + re.escape(spdx_id) + _LINE_BREAK
        + r" \*/"
    )


LICENSE_PATTERN = build_license_pattern()


def line_count(text: str) -> int:
    return text.count("\n") + 1


def _blank_match(match: "re.Match[str]") -> str:
    return "".join(_LINE_BREAK_RE.findall(match.group(0)))


class LicenseNormalizer:
    """Strips recognized license headers without changing line counts.

    A block that only resembles the pattern (other holder, other license,
    missing marker line) is not an error; it is left untouched.
    """

    def __init__(self, holders: Sequence[str] = LICENSE_HOLDERS):
        self.holders = tuple(holders)
        self._pattern = (
            LICENSE_PATTERN if self.holders == LICENSE_HOLDERS
            else build_license_pattern(self.holders)
        )

    @property
    def pattern(self) -> Pattern[str]:
        return self._pattern

    def normalize_with_count(self, text: str) -> Tuple[str, int]:
        """Return the normalized text and the number of blocks removed."""
        return self._pattern.subn(_blank_match, text)

    def normalize(self, text: str) -> str:
        return self.normalize_with_count(text)[0]

    def normalize_file(self, path: Union[str, Path]) -> Tuple[str, int]:
        """Read a source file and return its normalized text and removal count."""
        # newline="" keeps \r\n intact so the replacement mirrors it
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
        normalized, removed = self.normalize_with_count(text)
        if removed:
            logger.debug(f"Stripped {removed} license block(s) from {path}")
        return normalized, removed


def normalize(text: str) -> str:
    """Strip license headers of the default holders from ``text``."""
    return LICENSE_PATTERN.sub(_blank_match, text)
