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

from dataclasses import dataclass
from typing import Iterable, Tuple, Union


@dataclass(frozen=True, order=True)
class DirPath:
    """
    A directory identified by its segments from the root.

    The root is the empty tuple and renders as "/".
    """

    segments: Tuple[str, ...] = ()

    @classmethod
    def root(cls) -> DirPath:
        return cls(())

    @property
    def depth(self) -> int:
        return len(self.segments)

    def prefixes(self) -> Tuple[DirPath, ...]:
        """Root first, self last."""
        return tuple(DirPath(self.segments[:i]) for i in range(len(self.segments) + 1))

    def __str__(self) -> str:
        return "/" + "/".join(self.segments)


@dataclass(frozen=True)
class ListingItem:
    """One `ls` output line; directory placeholders carry size 0."""

    name: str
    size: int = 0
    is_dir: bool = False

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"negative size for {self.name!r}: {self.size}")
        if self.is_dir and self.size:
            raise ValueError(f"directory placeholder {self.name!r} must have size 0")

    @classmethod
    def file(cls, name: str, size: int) -> ListingItem:
        return cls(name, int(size), False)

    @classmethod
    def directory(cls, name: str) -> ListingItem:
        return cls(name, 0, True)


@dataclass(frozen=True)
class DescendInto:
    name: str


@dataclass(frozen=True)
class Ascend:
    pass


@dataclass(frozen=True)
class ListEntries:
    items: Tuple[ListingItem, ...] = ()

    @classmethod
    def of(cls, items: Iterable[ListingItem]) -> ListEntries:
        return cls(tuple(items))


NavigationEvent = Union[DescendInto, Ascend, ListEntries]
