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


import os
from pathlib import Path
from typing import NamedTuple, Optional

from structlog import get_logger

from xdrcodec.conf.settings import XdrSettings
from xdrcodec.conf.utils import load_module_settings, load_yaml_settings

logger = get_logger()

CONFIG_FILE_ENV = 'XDRCODEC_CONFIG_FILE'
CONFIG_YAML_ENV = 'XDRCODEC_CONFIG_YAML'

DEFAULT_SETTINGS_YAML = str(Path(__file__).parent / 'default.yml')


class _SettingsMetadata(NamedTuple):
    source: str
    is_yaml: bool
    settings: XdrSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> XdrSettings:
    """ Return the codec settings, loaded once per process.

    A Python module given by `XDRCODEC_CONFIG_FILE` (dotted path, exposing `SETTINGS`) takes precedence, otherwise the
    yaml file given by `XDRCODEC_CONFIG_YAML` is used, falling back to the packaged `default.yml`.
    """
    settings_module_filepath = os.environ.get(CONFIG_FILE_ENV)
    if settings_module_filepath is not None:
        return _load_settings_singleton(settings_module_filepath, is_yaml=False)

    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV, DEFAULT_SETTINGS_YAML)
    return _load_settings_singleton(settings_yaml_filepath, is_yaml=True)


def _load_settings_singleton(source: str, *, is_yaml: bool) -> XdrSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.is_yaml != is_yaml:
            raise ValueError('loading config twice with a different file type')
        if _settings_singleton.source != source:
            raise ValueError('loading config twice with a different file')

        return _settings_singleton.settings

    settings_loader = load_yaml_settings if is_yaml else load_module_settings
    settings = settings_loader(XdrSettings, source)
    logger.debug('settings loaded', source=source, is_yaml=is_yaml)
    _settings_singleton = _SettingsMetadata(source=source, is_yaml=is_yaml, settings=settings)

    return _settings_singleton.settings


def reset_global_settings() -> None:
    """ Forget the loaded settings, the next `get_global_settings()` reads the environment again.

    Only meant for tests, where different configurations are loaded in the same process.
    """
    global _settings_singleton
    _settings_singleton = None
