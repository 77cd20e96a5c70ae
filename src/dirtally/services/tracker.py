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

from ..domain.errors import StructuralError
from ..domain.model import DirPath


class WorkingDirectoryTracker:
    """
    The current directory as a stack of names; depth 0 is the root.
    """

    def __init__(self) -> None:
        self._stack: List[str] = []

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def stack(self) -> Tuple[str, ...]:
        return tuple(self._stack)

    def descend(self, name: str) -> None:
        if not name or "/" in name or name == "..":
            raise StructuralError(f"invalid directory name {name!r}", self._stack)
        self._stack.append(name)

    def ascend(self) -> None:
        if not self._stack:
            raise StructuralError("cannot ascend above the root", self._stack)
        self._stack.pop()

    def current_path(self) -> DirPath:
        return DirPath(tuple(self._stack))

    def ancestor_paths(self) -> Tuple[DirPath, ...]:
        """The current path and every proper prefix down to the root."""
        return self.current_path().prefixes()
