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
"""Combination of the disconnected tensors left after all contractions."""

import logging
from typing import Any, List, Optional, Sequence
import numpy as np
from netcon.backends.abstract_backend import AbstractBackend
from netcon.steps import ContractionStep

Tensor = Any

logger = logging.getLogger(__name__)


def multiply_final(tensors: List[Tensor],
                   network_structure: List[List[int]],
                   forder: Sequence[int],
                   backend_obj: AbstractBackend,
                   steps: Optional[List[ContractionStep]] = None) -> Tensor:
  """Outer product of all `tensors`, with axes ordered as in `forder`.

  The two tensors with the fewest elements are always multiplied first,
  which keeps the intermediate tensors as small as possible. A lone
  tensor is only permuted (and copied). `tensors` and `network_structure`
  are consumed.

  Args:
    tensors: Tensors without any contracted labels left.
    network_structure: Their label lists.
    forder: The order of the labels of the result.
    backend_obj: The backend doing the numerical work.
    steps: If given, a `ContractionStep` is appended for every operation.
  Returns:
    The final tensor.
  """
  forder = list(forder)
  if len(tensors) == 1:
    result = backend_obj.copy_permute(tensors[0], network_structure[0], forder)
    if steps is not None:
      steps.append(
          ContractionStep("permute", (0,), (tuple(network_structure[0]),), (),
                          tuple(forder),
                          tuple(backend_obj.shape_tuple(result))))
    return result

  sizes = [int(np.prod(backend_obj.shape_tuple(t))) for t in tensors]
  while len(tensors) > 1:
    i = int(np.argmin(sizes))
    a, labels_a = tensors.pop(i), network_structure.pop(i)
    sizes.pop(i)
    j = int(np.argmin(sizes))
    b, labels_b = tensors.pop(j), network_structure.pop(j)
    sizes.pop(j)
    new_labels = [l for l in forder if l in labels_a or l in labels_b]
    new_tensor = backend_obj.outer_product_permute(a, labels_a, b, labels_b,
                                                   new_labels)
    del a, b
    logger.debug("outer product of labels %s and %s -> labels %s", labels_a,
                 labels_b, new_labels)
    if steps is not None:
      steps.append(
          ContractionStep("outer_product", (i, j if j < i else j + 1),
                          (tuple(labels_a), tuple(labels_b)), (),
                          tuple(new_labels),
                          tuple(backend_obj.shape_tuple(new_tensor))))
    tensors.append(new_tensor)
    network_structure.append(new_labels)
    sizes.append(int(np.prod(backend_obj.shape_tuple(new_tensor))))
  return tensors[0]
