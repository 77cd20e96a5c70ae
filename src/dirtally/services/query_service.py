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

from typing import List, Tuple

from ..domain.errors import NotFoundError
from ..domain.model import DirPath
from ..domain.settings import DiskSettings
from .accumulator import SizeIndex


class QueryService:
    """
    Read-only aggregate queries over a finished SizeIndex.
    """

    def __init__(self, index: SizeIndex) -> None:
        self._index = index

    def at_most(self, limit: int) -> int:
        """Sum of every directory size that is <= `limit`."""
        return sum(v for v in self._index.values() if v <= limit)

    def min_at_least(self, need: int) -> int:
        """
        Smallest directory size that is >= `need`.

        Raises:
            NotFoundError: if no directory is large enough.
        """
        candidates = [v for v in self._index.values() if v >= need]
        if not candidates:
            raise NotFoundError(need)
        return min(candidates)

    def total_used(self) -> int:
        return self._index.total

    def space_to_free(self, settings: DiskSettings) -> int:
        free = settings.capacity - self.total_used()
        return max(0, settings.required - free)

    def smallest_to_delete(self, settings: DiskSettings) -> Tuple[DirPath, int]:
        """The smallest directory whose removal leaves `required` bytes free."""
        need = self.space_to_free(settings)
        size = self.min_at_least(need)
        # Ties resolve to the lexically first path
        path = min(p for p, v in self._index.items() if v == size)
        return path, size

    def largest(self, n: int) -> List[Tuple[DirPath, int]]:
        ranked = sorted(self._index.items(), key=lambda kv: (-kv[1], kv[0]))
        return ranked[: max(0, n)]
