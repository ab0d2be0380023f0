# Copyright 2023 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""Out-of-band error reporting for calls that cross the bridge boundary.

Callers on the other side of the boundary cannot rely on Python exceptions.
A fallible entry point takes an `ErrorSlot`; on failure it places an owned
message into the slot and returns a sentinel status. On success the slot is
not touched. Every string handed out by the bridge, error messages and
version strings alike, is released by the caller exactly once through
`release_string`.
"""

from typing import Optional

from absl import logging  # type: ignore[import-untyped]

from colbridge.core.utils import errors


class OwnedString:
  """A string whose ownership is transferred to the caller."""

  def __init__(self, value: str):
    self._value: Optional[str] = value

  @property
  def value(self) -> str:
    """Return the text of a live string."""
    if self._value is None:
      raise errors.StringReleaseError("String has already been released")

    return self._value

  @property
  def released(self) -> bool:
    """Return true if the string has been released."""
    return self._value is None

  def release(self) -> None:
    """Free the string; a string can only be released once."""
    if self._value is None:
      raise errors.StringReleaseError("String has already been released")

    self._value = None

  def __str__(self) -> str:
    return self.value

  def __repr__(self) -> str:
    if self._value is None:
      return "OwnedString(<released>)"

    return f"OwnedString({self._value!r})"


class ErrorSlot:
  """A single-slot out-parameter carrying an error message."""

  def __init__(self):
    self._message: Optional[OwnedString] = None

  @property
  def message(self) -> Optional[OwnedString]:
    """Return the message in the slot, or None if no failure was reported."""
    return self._message

  def fail(self, message: str) -> OwnedString:
    """Allocate an owned message into the slot.

    A previous message that was never released is replaced; it is only
    reported in the log.
    """
    if self._message is not None and not self._message.released:
      logging.warning(
          f"Replacing unreleased error message: {self._message.value}")

    self._message = OwnedString(message)
    return self._message

  def take(self) -> Optional[OwnedString]:
    """Hand the message over to the caller and empty the slot."""
    message, self._message = self._message, None
    return message

  def __bool__(self) -> bool:
    return self._message is not None


def release_string(string: OwnedString) -> None:
  """Release a string returned by the bridge.

  This is the only deallocation path for error messages and version strings.
  """
  if not isinstance(string, OwnedString):
    raise errors.StringReleaseError(
        f"Not a string owned by the bridge: {string!r}")

  string.release()
