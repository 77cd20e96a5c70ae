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

from typing import Optional, Sequence


class DirTallyError(Exception):
    """Base exception for domain-specific errors."""


class ParseError(DirTallyError):
    """A transcript line that does not match the command grammar."""

    def __init__(self, line: str, line_number: int, reason: str = "") -> None:
        self.line = line
        self.line_number = line_number
        self.reason = reason
        msg = f"line {line_number}: cannot parse {line!r}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class StructuralError(DirTallyError):
    """
    Illegal navigation during replay (e.g. `cd ..` at the root).

    `stack` is the working-directory stack at the time of failure and
    `position` the index of the offending event, when known.
    """

    def __init__(
        self,
        message: str,
        stack: Sequence[str] = (),
        position: Optional[int] = None,
    ) -> None:
        self.message = message
        self.stack = tuple(stack)
        self.position = position
        where = "/" + "/".join(self.stack)
        detail = f"{message} (cwd={where}"
        if position is not None:
            detail += f", event #{position}"
        super().__init__(detail + ")")


class QueryError(DirTallyError):
    """Problems answering a query against a finished size index."""


class NotFoundError(QueryError):
    """No directory satisfies the requested threshold."""

    def __init__(self, threshold: int) -> None:
        self.threshold = threshold
        super().__init__(f"no directory of at least {threshold} bytes")


class ConfigurationError(DirTallyError):
    """Bad CLI args or unusable settings (e.g., required > capacity)."""
