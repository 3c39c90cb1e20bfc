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

"""Maker configuration for makerkit.

Public API:

- Static, Factory: config sources handed to a maker at construction
- load_maker_config: load and validate a YAML maker configuration file
- config_source_for: build the config source for one maker entry
- build_makers: instantiate the enabled makers of a loaded configuration

Example:
    ```python
    from pathlib import Path
    from makerkit.config import build_makers, load_maker_config

    makers = build_makers(load_maker_config(Path("makers.yaml")))
    ```
"""

from .loader import build_makers, config_source_for, load_maker_config
from .source import ConfigSource, Factory, Static

__all__ = [
    "ConfigSource",
    "Factory",
    "Static",
    "build_makers",
    "config_source_for",
    "load_maker_config",
]
