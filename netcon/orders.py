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
"""Default contraction and output orders."""

from typing import List, Sequence


def default_order(network_structure: Sequence[Sequence[int]]) -> List[int]:
  """All distinct positive labels, sorted ascending."""
  return sorted({l for labels in network_structure for l in labels if l > 0})


def default_forder(network_structure: Sequence[Sequence[int]]) -> List[int]:
  """All distinct negative labels, sorted descending (-1 first)."""
  return sorted({l for labels in network_structure for l in labels if l < 0},
                reverse=True)
