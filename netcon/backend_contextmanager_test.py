# Copyright 2020 The netcon Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
import pytest
import netcon
from netcon.backend_contextmanager import _default_backend_stack
from netcon.backend_contextmanager import get_default_backend
from netcon.backends.shell import shell_backend


def test_contextmanager_simple():
  with netcon.DefaultBackend("shell"):
    assert get_default_backend() == "shell"
  assert get_default_backend() == "numpy"


def test_contextmanager_default_backend():
  netcon.set_default_backend("shell")
  with netcon.DefaultBackend("numpy"):
    assert _default_backend_stack.default_backend == "shell"
    assert get_default_backend() == "numpy"


def test_contextmanager_interruption():
  netcon.set_default_backend("shell")
  with pytest.raises(AssertionError):
    with netcon.DefaultBackend("numpy"):
      netcon.set_default_backend("numpy")


def test_contextmanager_nested():
  with netcon.DefaultBackend("shell"):
    assert get_default_backend() == "shell"
    with netcon.DefaultBackend("numpy"):
      assert get_default_backend() == "numpy"
    assert get_default_backend() == "shell"
  assert get_default_backend() == "numpy"


def test_contextmanager_wrong_item():
  with pytest.raises(ValueError):
    netcon.DefaultBackend(1)  # pytype: disable=wrong-arg-types


def test_contextmanager_backend_object():
  backend = shell_backend.ShellBackend()
  with netcon.DefaultBackend(backend):
    assert get_default_backend() is backend


def test_set_default_backend_wrong_item():
  with pytest.raises(ValueError):
    netcon.set_default_backend(1)  # pytype: disable=wrong-arg-types


def test_set_default_backend_unknown_name():
  with pytest.raises(ValueError, match="not found"):
    netcon.set_default_backend("fortran")
