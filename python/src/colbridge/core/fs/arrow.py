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
"""Arrow file system implementation."""

from abc import abstractmethod
from os import path

import pyarrow as pa
from pyarrow import fs

from colbridge.core.fs.base import BaseFileSystem
from colbridge.core.utils import errors


class ArrowFileSystem(BaseFileSystem):
  """Abstract Arrow file system."""

  def __init__(self):
    super().__init__()
    self._fs = self.create_fs()

  @abstractmethod
  def create_fs(self) -> fs.FileSystem:
    """Create a new underlying Arrow file system."""

  def normalize_path(self, file_path: str) -> str:
    """Return the path in the form accepted by the underlying file system."""
    return file_path

  def open_input_file(self, file_path: str) -> pa.NativeFile:
    try:
      return self._fs.open_input_file(self.normalize_path(file_path))
    except OSError as e:
      raise errors.FileOpenError(str(e)) from e

  def open_output_stream(self, file_path: str) -> pa.NativeFile:
    # Disable compression detection from the file extension; Parquet pages
    # carry their own codec.
    try:
      return self._fs.open_output_stream(self.normalize_path(file_path),
                                         compression=None)
    except OSError as e:
      raise errors.FileOpenError(str(e)) from e


class ArrowLocalFileSystem(ArrowFileSystem):
  """Arrow local file system implementation."""

  def create_fs(self) -> fs.FileSystem:
    return fs.LocalFileSystem()

  def normalize_path(self, file_path: str) -> str:
    return path.abspath(file_path)


def create_fs(file_path: str) -> BaseFileSystem:
  """Create a file system for a file path."""
  del file_path  # Only local paths are supported now.
  return ArrowLocalFileSystem()
