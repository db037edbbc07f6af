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
"""Lookup of backends by name.

Each backend is instantiated once, on first request; the optional
frameworks are only imported at that point.
"""
from typing import Union, Text
from netcon.backends.numpy import numpy_backend
from netcon.backends.jax import jax_backend
from netcon.backends.pytorch import pytorch_backend
from netcon.backends.tensorflow import tensorflow_backend
from netcon.backends.shell import shell_backend
from netcon.backends import abstract_backend

BackendOrName = Union[Text, abstract_backend.AbstractBackend]

_BACKENDS = {
    "numpy": numpy_backend.NumPyBackend,
    "jax": jax_backend.JaxBackend,
    "pytorch": pytorch_backend.PyTorchBackend,
    "tensorflow": tensorflow_backend.TensorFlowBackend,
    # shape-only, used by `netcon.plan`
    "shell": shell_backend.ShellBackend,
}

_INSTANTIATED_BACKENDS = dict()


def get_backend(backend: BackendOrName) -> abstract_backend.AbstractBackend:
  """Resolve `backend` to a backend object.

  Args:
    backend: A backend name or an `AbstractBackend`, which is returned as is.
  Returns:
    The backend object. Repeated calls with the same name return the same
    object.
  Raises:
    ValueError: If no backend of that name exists.
    ImportError: If the framework of the backend is not installed.
  """
  if isinstance(backend, abstract_backend.AbstractBackend):
    return backend
  if backend not in _BACKENDS:
    raise ValueError("Backend '{}' does not exist, available backends are "
                     "{}".format(backend, sorted(_BACKENDS)))
  if backend not in _INSTANTIATED_BACKENDS:
    _INSTANTIATED_BACKENDS[backend] = _BACKENDS[backend]()
  return _INSTANTIATED_BACKENDS[backend]
