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

import functools
import operator
from netcon.backends import abstract_backend
#pylint: disable=line-too-long
from typing import Optional, Sequence, Tuple, List, Any, Union, Callable
import numpy as np


class ShellTensor:
  """A tensor that only knows its shape and dtype."""

  def __init__(self, shape: Tuple[int, ...], dtype=None):
    self.shape = tuple(int(d) for d in shape)
    self.dtype = dtype

  @property
  def ndim(self) -> int:
    return len(self.shape)

  def reshape(self, new_shape: Tuple[int, ...]) -> "ShellTensor":
    return ShellTensor(new_shape, self.dtype)

  def __repr__(self) -> str:
    return "ShellTensor(shape={}, dtype={})".format(self.shape, self.dtype)


Tensor = Any


class ShellBackend(abstract_backend.AbstractBackend):
  """Backend operating on `ShellTensor`s.

  Every operation only computes the shape of its result, which makes it
  possible to walk through a contraction schedule without doing any
  numerical work.
  """

  def __init__(self) -> None:
    super().__init__()
    self.name = "shell"

  def tensordot(self, a: Tensor, b: Tensor,
                axes: Union[int, Sequence[Sequence[int]]]) -> Tensor:
    if isinstance(axes, int):
      axes = (list(range(a.ndim - axes, a.ndim)), list(range(axes)))
    # Does not work when axis < 0
    gen_a = (x for i, x in enumerate(a.shape) if i not in axes[0])
    gen_b = (x for i, x in enumerate(b.shape) if i not in axes[1])
    return ShellTensor(
        tuple(self._concat_generators(gen_a, gen_b)),
        _result_dtype(a.dtype, b.dtype))

  def _concat_generators(self, *gen):
    """Concatenates Python generators."""
    for g in gen:
      yield from g

  def reshape(self, tensor: Tensor, shape: Sequence[int]) -> Tensor:
    if self.shape_product(shape) != self.shape_product(tensor.shape):
      raise ValueError("cannot reshape tensor of shape {} into shape {}".format(
          tensor.shape, tuple(shape)))
    return tensor.reshape(tuple(shape))

  def transpose(self, tensor: Tensor, perm: Optional[Sequence[int]] = None) -> Tensor:
    if perm is None:
      perm = tuple(range(tensor.ndim - 1, -1, -1))
    shape = tuple(tensor.shape[i] for i in perm)
    return tensor.reshape(shape)

  def shape_tuple(self, tensor: Tensor) -> Tuple[Optional[int], ...]:
    return tensor.shape

  def shape_product(self, shape: Sequence[int]) -> int:
    return functools.reduce(operator.mul, shape, 1)

  def convert_to_tensor(self, tensor: Any) -> Tensor:
    """Accepts `ShellTensor`s, shape tuples or anything with a `shape`."""
    if isinstance(tensor, ShellTensor):
      return tensor
    if isinstance(tensor, (tuple, list)):
      return ShellTensor(tuple(tensor))
    if hasattr(tensor, "shape"):
      return ShellTensor(
          tuple(tensor.shape), _numpy_dtype_or_none(getattr(tensor, "dtype", None)))
    raise TypeError("Expected a shape tuple or a tensor. Got {}".format(
        type(tensor)))

  def outer_product(self, tensor1: Tensor, tensor2: Tensor) -> Tensor:
    return ShellTensor(tensor1.shape + tensor2.shape,
                       _result_dtype(tensor1.dtype, tensor2.dtype))

  def einsum(self,
             expression: str,
             *tensors: Tensor,
             optimize: bool = True) -> Tensor:
    inputs, output = expression.split('->')
    dims = {}
    for subscripts, tensor in zip(inputs.split(','), tensors):
      for symbol, dim in zip(subscripts, tensor.shape):
        dims[symbol] = dim
    dtype = functools.reduce(_result_dtype, [t.dtype for t in tensors])
    return ShellTensor(tuple(dims[s] for s in output), dtype)

  def trace(self,
            tensor: Tensor,
            offset: int = 0,
            axis1: int = -2,
            axis2: int = -1) -> Tensor:
    axis1, axis2 = axis1 % tensor.ndim, axis2 % tensor.ndim
    if tensor.shape[axis1] != tensor.shape[axis2]:
      raise ValueError("cannot trace axes of dimensions {} and {}".format(
          tensor.shape[axis1], tensor.shape[axis2]))
    shape = tuple(
        d for n, d in enumerate(tensor.shape) if n not in (axis1, axis2))
    return ShellTensor(shape, tensor.dtype)

  def copy(self, tensor: Tensor) -> Tensor:
    return ShellTensor(tensor.shape, tensor.dtype)

  def dtype(self, tensor: Tensor) -> Any:
    # dtype-less shells are planned like float64 tensors
    return tensor.dtype if tensor.dtype is not None else np.float64

  def jit(self, fun: Callable, *args: List, **kwargs: dict) -> Callable:
    return fun


def _result_dtype(dtype1, dtype2):
  if dtype1 is None or dtype2 is None:
    return None
  return np.result_type(dtype1, dtype2)


def _numpy_dtype_or_none(dtype):
  if dtype is None:
    return None
  try:
    return np.dtype(dtype)
  except TypeError:
    return None
