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

import pytest

from colbridge.core.error_channel import ErrorSlot, OwnedString, release_string
from colbridge.core.utils import errors


class TestOwnedString:

  def test_value_until_released(self):
    string = OwnedString("hello")
    assert string.value == "hello"
    assert str(string) == "hello"
    assert not string.released

    release_string(string)
    assert string.released
    assert repr(string) == "OwnedString(<released>)"

    with pytest.raises(errors.StringReleaseError):
      _ = string.value

  def test_release_twice(self):
    string = OwnedString("hello")
    release_string(string)

    with pytest.raises(errors.StringReleaseError,
                       match="has already been released"):
      release_string(string)

  def test_release_foreign_object(self):
    with pytest.raises(errors.StringReleaseError, match="Not a string owned"):
      release_string("hello")  # type: ignore[arg-type]


class TestErrorSlot:

  def test_empty_slot(self):
    err = ErrorSlot()
    assert not err
    assert err.message is None
    assert err.take() is None

  def test_fail_and_take(self):
    err = ErrorSlot()
    message = err.fail("something went wrong")
    assert err
    assert err.message is message

    taken = err.take()
    assert taken is message
    assert taken.value == "something went wrong"
    assert not err

    release_string(taken)
    assert message.released

  def test_fail_replaces_unreleased_message(self):
    err = ErrorSlot()
    first = err.fail("first")

    second = err.fail("second")
    assert err.message is second
    assert second.value == "second"
    # The replaced message is still owned by the caller.
    assert not first.released
    release_string(first)

  def test_fail_after_release(self):
    err = ErrorSlot()
    release_string(err.fail("first"))

    err.fail("second")
    assert err.message.value == "second"  # type: ignore[union-attr]
