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

from pathlib import Path
from typing import Any, Optional, TypeVar, Union

import yaml
from pydantic import BaseModel

from xdrcodec.utils.dict import deep_merge

_EXTENDS_KEY = 'extends'

T = TypeVar('T', bound=BaseModel)


def dict_from_yaml(*, filepath: Union[Path, str]) -> dict[str, Any]:
    """Read a yaml file that must hold a mapping, an empty file reads as `{}`."""
    path = Path(filepath)
    if not path.is_file():
        raise ValueError(f"'{filepath}' is not a file")

    contents = yaml.safe_load(path.read_text())
    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise ValueError(f"'{filepath}' cannot be parsed as a dictionary")
    return contents


def dict_from_extended_yaml(*, filepath: Union[Path, str], custom_root: Optional[Path] = None) -> dict[str, Any]:
    """
    Like `dict_from_yaml`, but a file can name a base file under the `extends` key and override only part of it.

    A relative base path is looked up next to the extending file, then under `custom_root` when one is given. Chains
    of any depth are followed, a chain that comes back to a file already in it is rejected. The `extends` key never
    shows up in the result.
    """
    return _load_chain(Path(filepath), custom_root, visited=())


def _load_chain(path: Path, custom_root: Optional[Path], *, visited: tuple[Path, ...]) -> dict[str, Any]:
    contents = dict_from_yaml(filepath=path)
    base_name = contents.pop(_EXTENDS_KEY, None)
    if not base_name:
        return contents

    base_path = path.parent / str(base_name)
    if custom_root is not None and not base_path.is_file():
        base_path = custom_root / str(base_name)

    chain = visited + (path.resolve(),)
    if base_path.resolve() in chain:
        raise ValueError('Cannot parse yaml with recursive extensions.')

    base = _load_chain(base_path, custom_root, visited=chain)
    return deep_merge(base, contents)


def model_from_extended_yaml(model: type[T], *, filepath: str, custom_root: Optional[Path] = None) -> T:
    """Load an extended yaml file and validate it into an instance of `model`."""
    return model.model_validate(dict_from_extended_yaml(filepath=filepath, custom_root=custom_root))
