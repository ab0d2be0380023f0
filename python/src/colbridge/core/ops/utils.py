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
"""Utilities for column operations."""

from contextlib import contextmanager
from typing import Iterator, Tuple

import numpy as np

from colbridge.core.ops.base import TransferBuffer
from colbridge.core.utils import errors


def row_group_ranges(num_rows: int,
                     row_group_size: int) -> Iterator[Tuple[int, int]]:
  """Yield [start, stop) row ranges of consecutive row groups.

  Every range holds `row_group_size` rows except the last one, which holds the
  remainder. No range is yielded when `num_rows` is zero.
  """
  if row_group_size < 1:
    raise errors.UserInputError(
        f"Row group size must be positive, got {row_group_size}")

  for start in range(0, num_rows, row_group_size):
    yield start, min(start + row_group_size, num_rows)


def check_transfer_buffer(buffer: TransferBuffer,
                          length: int,
                          writable: bool = False) -> None:
  """Check that a buffer is a flat int64 array holding at least `length`
  values.

  Args:
    buffer: the transfer buffer.
    length: the number of values the caller declares available.
    writable: if true, the buffer must accept writes.
  """
  if not isinstance(buffer, np.ndarray):
    raise errors.InvalidBufferError(
        f"Transfer buffer must be a numpy array, got {type(buffer).__name__}")

  if buffer.ndim != 1 or buffer.dtype != np.int64:
    raise errors.InvalidBufferError(
        "Transfer buffer must be a 1-D int64 array, got "
        f"{buffer.ndim}-D {buffer.dtype}")

  if writable and not buffer.flags.writeable:
    raise errors.InvalidBufferError("Transfer buffer is read-only")

  if length < 0:
    raise errors.UserInputError(f"Length must not be negative, got {length}")

  if buffer.shape[0] < length:
    raise errors.BufferTooSmallError(
        f"Transfer buffer of {buffer.shape[0]} values is smaller than the "
        f"declared length {length}")


@contextmanager
def scratch_buffer(size: int, dtype: np.dtype) -> Iterator[np.ndarray]:
  """Acquire a scratch buffer for the duration of the block.

  Callers must not keep references to the buffer after the block exits.
  """
  yield np.empty(size, dtype=dtype)
