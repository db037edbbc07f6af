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
# pylint: disable=line-too-long
from typing import Optional, Any, Sequence, Tuple, Callable, List
from typing import Union
from netcon.backends import abstract_backend
import numpy as np

# This might seem bad, but pytype treats tf.Tensor as Any anyway, so
# we don't actually lose anything by doing this.
Tensor = Any

# pylint: disable=abstract-method


class TensorFlowBackend(abstract_backend.AbstractBackend):
  """See abstract_backend.AbstractBackend for documentation."""

  def __init__(self) -> None:
    # pylint: disable=global-variable-undefined
    global tf
    super().__init__()
    try:
      # pylint: disable=import-outside-toplevel
      import tensorflow
    except ImportError as err:
      raise ImportError("Tensorflow not installed, please switch to a "
                        "different backend or install Tensorflow.") from err
    tf = tensorflow
    self.name = "tensorflow"

  def tensordot(self, a: Tensor, b: Tensor,
                axes: Union[int, Sequence[Sequence[int]]]) -> Tensor:
    if not isinstance(axes, int):
      axes = [list(axes[0]), list(axes[1])]
    return tf.tensordot(a, b, axes)

  def reshape(self, tensor: Tensor, shape: Tensor) -> Tensor:
    return tf.reshape(tensor, [int(d) for d in shape])

  def transpose(self, tensor, perm=None) -> Tensor:
    return tf.transpose(tensor, perm)

  def shape_tuple(self, tensor: Tensor) -> Tuple[Optional[int], ...]:
    return tuple(tensor.shape.as_list())

  def convert_to_tensor(self, tensor: Tensor) -> Tensor:
    result = tf.convert_to_tensor(tensor)
    return result

  def outer_product(self, tensor1: Tensor, tensor2: Tensor) -> Tensor:
    return tf.tensordot(tensor1, tensor2, 0)

  #pylint: disable=unused-argument
  def einsum(self,
             expression: str,
             *tensors: Tensor,
             optimize: bool = True) -> Tensor:
    return tf.einsum(expression, *tensors)

  def trace(self,
            tensor: Tensor,
            offset: int = 0,
            axis1: int = -2,
            axis2: int = -1) -> Tensor:
    """Return summed entries along diagonals.

    In the TensorFlow backend the trace is always over the main diagonal of
    the last two axes.
    """
    if offset != 0:
      errstr = (f"offset = {offset} must be 0 (the default)"
                f"with TensorFlow backend.")
      raise NotImplementedError(errstr)
    if axis1 == axis2:
      raise ValueError(f"axis1 = {axis1} cannot equal axis2 = {axis2}")
    N = len(tensor.shape)
    if axis1 < 0:
      axis1 = N+axis1
    if axis2 < 0:
      axis2 = N+axis2
    if (axis1, axis2) != (N - 2, N - 1):
      perm = [n for n in range(N) if n not in (axis1, axis2)] + [axis1, axis2]
      tensor = tf.transpose(tensor, perm)
    return tf.linalg.trace(tensor)

  def copy(self, tensor: Tensor) -> Tensor:
    return tf.identity(tensor)

  def numpy_dtype(self, dtype: Any) -> np.dtype:
    return np.dtype(dtype.as_numpy_dtype)

  def jit(self, fun: Callable, *args: List, **kwargs: dict) -> Callable:
    # tf.function is slow and bad.
    return fun
