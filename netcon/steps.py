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
"""Records of the operations performed during a contraction."""

from typing import NamedTuple, Text, Tuple


class ContractionStep(NamedTuple):
  """One operation performed while contracting a network.

  Attributes:
    kind: One of 'trace', 'contract', 'outer_product' or 'permute'.
    operands: Positions of the operands in the network before the step.
    labels: The label lists of the operands.
    contracted: The labels eliminated by the step.
    result_labels: The labels of the resulting tensor.
    result_shape: The shape of the resulting tensor.
  """
  kind: Text
  operands: Tuple[int, ...]
  labels: Tuple[Tuple[int, ...], ...]
  contracted: Tuple[int, ...]
  result_labels: Tuple[int, ...]
  result_shape: Tuple[int, ...]
