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

"""makerkit - maker contract for application packaging

makerkit defines how pluggable "makers" turn an already-packaged application
directory into platform and architecture specific artifacts (installers,
archives, ...). It does not produce any artifact format itself.

makerkit provides:

- MakerBase, the class concrete makers subclass
- Per-architecture config resolution (Static values or Factory functions)
- Platform gating with per-instance overrides
- External binary and optional module checks
- Destructive async staging helpers for output directories and files
- A name-based maker registry and YAML maker configuration

Package Structure:

maker : package
    Maker protocol, MakerBase, staging and dependency helpers.
config : package
    Config sources and YAML maker configuration loading.
registry : module
    Register makers by name and instantiate them.
versioning : module
    Windows version normalization.
types : module
    Platform/Arch identifiers and MakerOptions.
exceptions : module
    ContractViolation, MissingDependency, ConfigError.
logging : module
    Step/verbose/debug logger interface.

Public API:

    from makerkit import MakerBase, MakerOptions
    from makerkit.config import Factory, Static, load_maker_config, build_makers
    from makerkit.registry import register_maker, is_maker
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "Maker contract and lifecycle helpers for application packaging"

from makerkit.config import Factory, Static
from makerkit.exceptions import (
    ConfigError,
    ContractViolation,
    MakerKitError,
    MissingDependency,
)
from makerkit.maker import Maker, MakerBase
from makerkit.registry import is_maker, register_maker
from makerkit.types import MakerOptions
from makerkit.versioning import normalize_windows_version

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "ConfigError",
    "ContractViolation",
    "Factory",
    "Maker",
    "MakerBase",
    "MakerKitError",
    "MakerOptions",
    "MissingDependency",
    "Static",
    "is_maker",
    "normalize_windows_version",
    "register_maker",
]
