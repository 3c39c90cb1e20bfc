# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Config sources for makers.

A maker receives its configuration either as a fixed value or as a function
of the target architecture. The two cases are separate types so the maker
never has to inspect a value to decide whether it is callable:

- Static(value): the same object for every architecture
- Factory(fn): fn(arch) is called on every resolve

Example:
    ```python
    from makerkit.config import Factory, Static

    Static({"compression": 9}).resolve("x64")
    # {'compression': 9}

    source = Factory(lambda arch: {"universal": arch == "universal"})
    source.resolve("arm64")
    # {'universal': False}
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from makerkit.types import Arch

C = TypeVar("C")

__all__ = ["Static", "Factory", "ConfigSource"]


@dataclass(frozen=True)
class Static(Generic[C]):
    """Config source holding one value shared by every architecture.

    Attributes:
        value: The configuration object. Returned as-is, never copied.
    """

    value: C

    def resolve(self, arch: Arch) -> C:
        return self.value


@dataclass(frozen=True)
class Factory(Generic[C]):
    """Config source computing the configuration per architecture.

    Attributes:
        fn: Called with the target architecture on every resolve. Anything
            it raises propagates to the caller unchanged.
    """

    fn: Callable[[Arch], C]

    def resolve(self, arch: Arch) -> C:
        return self.fn(arch)


ConfigSource = Union[Static[Any], Factory[Any]]
