# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from importlib import import_module
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel

from xdrcodec.utils.yaml import model_from_extended_yaml

T = TypeVar('T', bound=BaseModel)

# packaged yaml files (`default.yml`, `legacy.yml`) can be extended by name from anywhere
PACKAGED_SETTINGS_DIR = Path(__file__).parent


def load_yaml_settings(model: type[T], filepath: str) -> T:
    """Validate the yaml file at `filepath`, following its `extends` chain, into an instance of `model`."""
    return model_from_extended_yaml(model, filepath=filepath, custom_root=PACKAGED_SETTINGS_DIR)


def load_module_settings(model: type[T], module_path: str) -> T:
    """Validate the `SETTINGS` attribute of the module at the dotted `module_path` into an instance of `model`."""
    return model.model_validate(import_module(module_path).SETTINGS)
