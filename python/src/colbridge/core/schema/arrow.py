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
"""Utilities for column schemas in the Arrow format."""

from dataclasses import dataclass
from typing import Dict

import numpy as np
import pyarrow as pa

from colbridge.core.schema.constants import DTYPE_INT64, TypeCode

_INTEGER_TYPE_CODES: Dict[pa.DataType, TypeCode] = {
    pa.int64(): TypeCode.INT64,
    pa.int32(): TypeCode.INT32,
    pa.uint64(): TypeCode.UINT64,
}


def type_code(type_: pa.DataType) -> TypeCode:
  """Return the bridge type code of an Arrow column type.

  Types outside of the known set map to `TypeCode.UNDEFINED`, which is a valid
  classification rather than an error.
  """
  if pa.types.is_timestamp(type_):
    return TypeCode.TIMESTAMP

  return _INTEGER_TYPE_CODES.get(type_, TypeCode.UNDEFINED)


@dataclass(frozen=True)
class ColumnTransfer:
  """Describes how values of an on-disk type land in int64 buffer slots."""
  # The numpy dtype of values decoded from the file.
  source_dtype: np.dtype

  # If true, values are narrower than int64; they are staged in a scratch
  # buffer of `source_dtype` and sign-extended into the destination.
  widen: bool

  def copy(self, values: np.ndarray, out: np.ndarray) -> None:
    """Copy decoded values into int64 slots of the same length."""
    if self.widen:
      # Assignment from a narrower signed dtype sign-extends each value.
      out[:] = values
    else:
      # Unsigned values are kept bit-identical in signed storage.
      out[:] = values.view(np.int64)


# Conversion table of transfer-eligible types.
TRANSFERS: Dict[TypeCode, ColumnTransfer] = {
    TypeCode.INT64: ColumnTransfer(np.dtype(np.int64), widen=False),
    TypeCode.UINT64: ColumnTransfer(np.dtype(np.uint64), widen=False),
    TypeCode.INT32: ColumnTransfer(np.dtype(np.int32), widen=True),
}


def column_type(dtype_flag: int) -> pa.DataType:
  """Return the Arrow type of a written column for a writer dtype flag."""
  if dtype_flag == DTYPE_INT64:
    return pa.int64()

  return pa.uint64()


def column_schema(column: str, dtype_flag: int) -> pa.Schema:
  """Return the schema of a single required 64-bit integer column.

  Args:
    column: name of the only field.
    dtype_flag: `DTYPE_INT64` for signed values; any other flag writes INT64
      physical storage annotated as unsigned.
  """
  return pa.schema(
      [pa.field(column, column_type(dtype_flag), nullable=False)])
