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
from typing import Dict, Iterable, Iterator, Mapping

from ..domain.model import DirPath, ListingItem
from .tracker import WorkingDirectoryTracker

logger = logging.getLogger(__name__)


class SizeIndex(Mapping[DirPath, int]):
    """
    Read-only map of directory -> cumulative bytes beneath it.

    Built once by SizeAccumulator.finish(); never mutated afterwards.
    """

    def __init__(self, sizes: Mapping[DirPath, int]) -> None:
        self._sizes: Dict[DirPath, int] = dict(sizes)

    def __getitem__(self, path: DirPath) -> int:
        return self._sizes[path]

    def __iter__(self) -> Iterator[DirPath]:
        return iter(self._sizes)

    def __len__(self) -> int:
        return len(self._sizes)

    def __repr__(self) -> str:
        return f"SizeIndex({len(self._sizes)} directories, total={self.total})"

    @property
    def total(self) -> int:
        return self._sizes.get(DirPath.root(), 0)


class SizeAccumulator:
    """
    Attributes listing totals to the current directory and all its ancestors.

    Subdirectory placeholders add nothing at listing time; their bytes arrive
    when the subdirectory itself is entered and listed. Listing the same
    directory twice adds its files twice.
    """

    def __init__(self, tracker: WorkingDirectoryTracker) -> None:
        self._tracker = tracker
        self._sizes: Dict[DirPath, int] = {DirPath.root(): 0}

    def register(self, path: DirPath) -> None:
        """Make sure a visited directory shows up even if it is never listed."""
        self._sizes.setdefault(path, 0)

    def apply_listing(self, entries: Iterable[ListingItem]) -> int:
        file_total = sum(e.size for e in entries if e.size > 0)
        for p in self._tracker.ancestor_paths():
            self._sizes[p] = self._sizes.get(p, 0) + file_total
        return file_total

    def finish(self) -> SizeIndex:
        return SizeIndex(self._sizes)
