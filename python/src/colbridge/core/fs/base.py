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
"""Abstract base file system."""

from abc import ABC, abstractmethod

import pyarrow as pa


class BaseFileSystem(ABC):
  """Abstract file system."""

  @abstractmethod
  def open_input_file(self, file_path: str) -> pa.NativeFile:
    """Open a file for random access reading.

    Raises:
      FileOpenError: if the file cannot be opened.
    """

  @abstractmethod
  def open_output_stream(self, file_path: str) -> pa.NativeFile:
    """Create a file for writing, truncating it when it already exists.

    Raises:
      FileOpenError: if the file cannot be created.
    """
