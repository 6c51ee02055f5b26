import os

import pytest
from hypothesis import HealthCheck, settings

from scale_codec.conf.get_settings import CONFIG_YAML_ENV_VAR, _reset_settings_singleton

# tests never pick up a config file from the environment unless they set one themselves
os.environ.pop(CONFIG_YAML_ENV_VAR, None)

# the settings reset below is function scoped, it is harmless to share it between hypothesis examples
settings.register_profile('default', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('default')


@pytest.fixture(autouse=True)
def reset_global_settings():
    _reset_settings_singleton()
    yield
    _reset_settings_singleton()
