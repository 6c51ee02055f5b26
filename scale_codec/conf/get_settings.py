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
from typing import NamedTuple, Optional

from structlog import get_logger

from scale_codec.conf.settings import ScaleSettings

logger = get_logger()

CONFIG_YAML_ENV_VAR = 'SCALE_CODEC_CONFIG_YAML'
DEFAULT_SOURCE = '<defaults>'


class _SettingsMetadata(NamedTuple):
    source: str
    settings: ScaleSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> ScaleSettings:
    """
    Returns the process-wide settings.

    They are loaded from the yaml filepath in the 'SCALE_CODEC_CONFIG_YAML' env var the first time this is called, if
    the env var is not set the defaults are used. Later calls return the same instance, and fail if the env var was
    changed to point somewhere else in the meantime.
    """
    source = os.environ.get(CONFIG_YAML_ENV_VAR, DEFAULT_SOURCE)
    return _load_settings_singleton(source)


def get_settings_source() -> str:
    """ Returns the path of the YAML file that was loaded, or '<defaults>'.

    XXX: Will raise an assertion error if get_global_settings() wasn't used before.
    """
    assert _settings_singleton is not None, 'get_global_settings() not called before'
    return _settings_singleton.source


def _load_settings_singleton(source: str) -> ScaleSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')
        return _settings_singleton.settings

    if source == DEFAULT_SOURCE:
        settings = ScaleSettings()
    else:
        settings = ScaleSettings.from_yaml(filepath=source)
    logger.info('loaded scale codec settings', source=source)

    _settings_singleton = _SettingsMetadata(source=source, settings=settings)
    return settings


def _reset_settings_singleton() -> None:
    """Forget the loaded settings, only meant to be used by tests."""
    global _settings_singleton
    _settings_singleton = None
