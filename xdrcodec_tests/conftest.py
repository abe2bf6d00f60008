import os

from xdrcodec.conf.get_settings import CONFIG_YAML_ENV, DEFAULT_SETTINGS_YAML

os.environ[CONFIG_YAML_ENV] = os.environ.get('XDRCODEC_TEST_CONFIG_YAML', DEFAULT_SETTINGS_YAML)
