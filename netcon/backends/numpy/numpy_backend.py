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
from typing import Optional, Any, Sequence, Tuple, Callable, List
from typing import Union
from netcon.backends import abstract_backend
import numpy as np
Tensor = Any

int_to_string = np.array(list(map(chr, list(range(65, 91)))))


class NumPyBackend(abstract_backend.AbstractBackend):
  """See abstract_backend.AbstractBackend for documentation."""

  def __init__(self) -> None:
    super().__init__()
    self.name = "numpy"

  def tensordot(self, a: Tensor, b: Tensor,
                axes: Union[int, Sequence[Sequence[int]]]) -> Tensor:
    # use einsum for scalar-like products, its much faster
    if not isinstance(axes, int):
      if (len(axes[0]) == a.ndim) and (len(axes[1]) == b.ndim):
        if not len(axes[0]) == len(axes[1]):
          raise ValueError("shape-mismatch for sum")
        labels = int_to_string[0:len(axes[0])]
        labels_2 = np.array([''] * len(axes[1]), dtype=labels.dtype)
        labels_2[np.array(axes[1], dtype=int)] = labels
        labels_1 = np.array([''] * len(axes[0]), dtype=labels.dtype)
        labels_1[np.array(axes[0], dtype=int)] = labels
        einsum_label = ','.join([''.join(labels_1), ''.join(labels_2)])
        return np.array(np.einsum(einsum_label, a, b, optimize=True))
      return np.tensordot(a, b, axes)
    return np.tensordot(a, b, axes)

  def reshape(self, tensor: Tensor, shape: Tensor) -> Tensor:
    return np.reshape(tensor, np.asarray(shape).astype(np.int64))

  def transpose(self,
                tensor: Tensor,
                perm: Optional[Sequence] = None) -> Tensor:
    return np.transpose(tensor, perm)

  def shape_tuple(self, tensor: Tensor) -> Tuple[Optional[int], ...]:
    return np.shape(tensor)

  def convert_to_tensor(self, tensor: Tensor) -> Tensor:
    if (not isinstance(tensor, np.ndarray) and not np.isscalar(tensor)):
      raise TypeError("Expected a `np.array` or scalar. Got {}".format(
          type(tensor)))
    result = np.asarray(tensor)
    return result

  def outer_product(self, tensor1: Tensor, tensor2: Tensor) -> Tensor:
    return np.tensordot(tensor1, tensor2, 0)

  def einsum(self,
             expression: str,
             *tensors: Tensor,
             optimize: bool = True) -> Tensor:
    return np.asarray(np.einsum(expression, *tensors, optimize=optimize))

  def trace(self,
            tensor: Tensor,
            offset: int = 0,
            axis1: int = -2,
            axis2: int = -1) -> Tensor:
    return np.asarray(np.trace(tensor, offset=offset, axis1=axis1, axis2=axis2))

  def copy(self, tensor: Tensor) -> Tensor:
    return np.array(tensor, copy=True)

  def jit(self, fun: Callable, *args: List, **kwargs: dict) -> Callable:
    return fun
