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
"""Define errors thrown by the colbridge core."""


class UserInputError(ValueError):
  """Errors caused by invalid user input."""


class ColumnNotFoundError(UserInputError):
  """The requested column does not exist in a file."""

  def __init__(self, file_path: str, column: str):
    super().__init__(f"Dataset: {column} does not exist in file: {file_path}")
    self.file_path = file_path
    self.column = column


class InvalidBufferError(UserInputError):
  """Errors caused by a transfer buffer of the wrong shape or type."""


class BufferTooSmallError(InvalidBufferError):
  """The transfer buffer cannot hold all values of a column."""


class BridgeRuntimeError(RuntimeError):
  """Basic class of errors thrown from the colbridge runtime."""


class FileOpenError(BridgeRuntimeError):
  """A file cannot be opened for reading or created for writing."""


class ParquetIoError(BridgeRuntimeError):
  """Errors from the Parquet library while reading or writing a file."""


class FileCloseError(BridgeRuntimeError):
  """Errors from closing a written file; the file may be truncated."""


class StringReleaseError(RuntimeError):
  """A returned string is used or released outside of its ownership rules."""
