# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ...domain.errors import ParseError
from ...domain.model import (
    Ascend,
    DescendInto,
    ListEntries,
    ListingItem,
    NavigationEvent,
)
from ...ports.transcript import TranscriptParserPort

logger = logging.getLogger(__name__)

PROMPT = "$ "

_CD_ROOT = re.compile(r"^\$ cd /$")
_CD_UP = re.compile(r"^\$ cd \.\.$")
_CD_INTO = re.compile(r"^\$ cd ([A-Za-z]+)$")
_LS = re.compile(r"^\$ ls$")
_DIR_ENTRY = re.compile(r"^dir ([A-Za-z]+)$")
_FILE_ENTRY = re.compile(r"^([0-9]+) (\S.*)$")
_LINE_BREAK = re.compile(r"\r?\n")


class ShellTranscriptParser(TranscriptParserPort):
    """
    Parses a recorded `cd` / `ls` session.

    Grammar:
      $ cd /        only as the very first command (optional)
      $ cd ..       -> Ascend
      $ cd <alpha>  -> DescendInto
      $ ls          followed by `<size> <name>` / `dir <alpha>` lines
                    until the next prompt or end of input
    """

    def parse(self, text: str) -> List[NavigationEvent]:
        events: List[NavigationEvent] = []
        listing: Optional[List[ListingItem]] = None
        seen_command = False

        # Only \n and \r\n end a line; other Unicode breaks belong to file names
        lines = _LINE_BREAK.split(text)
        if lines and lines[-1] == "":
            lines.pop()
        for number, line in enumerate(lines, start=1):
            if line.startswith(PROMPT):
                if listing is not None:
                    events.append(ListEntries.of(listing))
                    listing = None

                if _CD_ROOT.match(line):
                    if seen_command:
                        raise ParseError(line, number, "'cd /' is only allowed first")
                elif _CD_UP.match(line):
                    events.append(Ascend())
                elif _CD_INTO.match(line):
                    events.append(DescendInto(line[len("$ cd ") :]))
                elif _LS.match(line):
                    listing = []
                else:
                    raise ParseError(line, number, "unknown command")
                seen_command = True
                continue

            if listing is None:
                raise ParseError(line, number, "output outside of an ls block")

            dir_match = _DIR_ENTRY.match(line)
            file_match = _FILE_ENTRY.match(line)
            if dir_match:
                listing.append(ListingItem.directory(dir_match.group(1)))
            elif file_match:
                size, name = file_match.groups()
                listing.append(ListingItem.file(name, int(size)))
            else:
                raise ParseError(line, number, "bad listing entry")

        if listing is not None:
            events.append(ListEntries.of(listing))

        logger.debug("Parsed %d lines into %d events", len(lines), len(events))
        return events
