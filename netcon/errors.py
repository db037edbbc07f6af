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
"""Errors raised while checking or contracting a network.

All of them are `ValueError`s, so code written against the plain
`ValueError` convention keeps working.
"""


class NetworkError(ValueError):
  """Base class of all errors describing an ill-formed network."""


class ShapeMismatch(NetworkError):
  """Tensor and label-list counts, or a tensor rank and its labels, differ."""


class SignViolation(NetworkError):
  """A non-positive label in `order` or a non-negative one in `forder`."""


class InvalidLabel(NetworkError):
  """A label is 0 or not an integer."""


class LabelSetMismatch(NetworkError):
  """`order` and `forder` do not partition the labels of the network."""


class ArityViolation(NetworkError):
  """A contracted label does not occur twice, or a free label not once."""


class DimensionMismatch(NetworkError):
  """The two axes carrying a contracted label have different extents."""


class InconsistentNetwork(NetworkError):
  """The scheduler found a label on neither one nor two tensors."""
