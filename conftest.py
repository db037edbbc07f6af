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

_BACKEND_MODULES = {
    "numpy": "numpy",
    "jax": "jax",
    "pytorch": "torch",
    "tensorflow": "tensorflow",
}


@pytest.fixture(
    name="backend", params=["numpy", "jax", "pytorch", "tensorflow"])
def backend_fixture(request):
  module = pytest.importorskip(_BACKEND_MODULES[request.param])
  if request.param == "jax":
    module.config.update("jax_enable_x64", True)
  return request.param


@pytest.fixture(autouse=True)
def reset_default_backend():
  netcon.set_default_backend("numpy")
  yield
  netcon.set_default_backend("numpy")
