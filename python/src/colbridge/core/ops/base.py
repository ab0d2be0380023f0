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
"""Abstract base operation."""

from __future__ import annotations
from abc import ABC

from absl import logging  # type: ignore[import-untyped]
import numpy as np
from typing_extensions import TypeAlias

# A flat, caller-owned array of int64 slots.
TransferBuffer: TypeAlias = np.ndarray


class BaseColumnOp(ABC):
  """Abstract base operation on a single column of a Parquet file."""

  def __init__(self, file_path: str, column: str, verbose: bool = False):
    self._file_path = file_path
    self._column = column
    self._verbose = verbose

  @property
  def file_path(self) -> str:
    """Return the path of the file the operation works on."""
    return self._file_path

  @property
  def column(self) -> str:
    """Return the name of the column."""
    return self._column

  def _log_summary(self, msg: str) -> None:
    if self._verbose:
      logging.info(msg)
    else:
      logging.debug(msg)
