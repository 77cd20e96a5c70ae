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

import logging
from typing import Iterable, Optional, Set

from ..domain.errors import StructuralError
from ..domain.model import Ascend, DescendInto, DirPath, ListEntries, NavigationEvent
from ..ports.transcript import TranscriptParserPort
from .accumulator import SizeAccumulator, SizeIndex
from .tracker import WorkingDirectoryTracker

logger = logging.getLogger(__name__)


class ReplayService:
    """
    Replays navigation events into a finished SizeIndex:
      - `DescendInto` pushes onto a fresh WorkingDirectoryTracker
      - `Ascend` pops it (StructuralError at the root)
      - `ListEntries` fans file sizes out to every ancestor of the cwd

    Each call to build() owns its own tracker and accumulator, so one service
    can be reused for independent transcripts.

    Note:
      * A directory listed twice is counted twice. Pass `skip_relisted=True`
        to ignore repeat listings of the same path instead.
      * Any failure discards the partially built index.
    """

    def __init__(
        self,
        parser: Optional[TranscriptParserPort] = None,
        *,
        skip_relisted: bool = False,
    ) -> None:
        self._parser = parser
        self._skip_relisted = bool(skip_relisted)

    def build(self, events: Iterable[NavigationEvent]) -> SizeIndex:
        tracker = WorkingDirectoryTracker()
        accumulator = SizeAccumulator(tracker)
        listed: Set[DirPath] = set()
        count = 0

        for position, event in enumerate(events):
            count += 1
            try:
                if isinstance(event, DescendInto):
                    tracker.descend(event.name)
                    accumulator.register(tracker.current_path())
                elif isinstance(event, Ascend):
                    tracker.ascend()
                elif isinstance(event, ListEntries):
                    cwd = tracker.current_path()
                    if cwd in listed and self._skip_relisted:
                        logger.warning("Skipping repeated listing of %s", cwd)
                        continue
                    listed.add(cwd)
                    accumulator.apply_listing(event.items)
                else:
                    raise StructuralError(
                        f"unknown event {type(event).__name__}", tracker.stack
                    )
            except StructuralError as e:
                logger.debug("Replay aborted at event #%d: %s", position, e)
                raise StructuralError(e.message, e.stack, position) from e

        index = accumulator.finish()
        logger.debug(
            "Replayed %d events into %d directories (total %d bytes)",
            count,
            len(index),
            index.total,
        )
        return index

    def build_from_text(self, text: str) -> SizeIndex:
        """Parse a transcript and replay it; a ParseError aborts before replay."""
        if self._parser is None:
            raise ValueError("ReplayService was created without a transcript parser")
        events = self._parser.parse(text)
        return self.build(events)
