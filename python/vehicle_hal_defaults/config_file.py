# Copyright (C) 2019 GlobalLogic
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except
# in compliance with the License. You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express
# or implied. See the License for the specific language governing permissions and limitations
# under the License.
#

import os

import yaml

from typing import Any, Dict, Optional

from vehicle_hal_defaults.custom_logging import fatal


CONFIG_FILE_KEYS = ['target_product', 'output_format', 'output_file']


def load_config_file(config_file_path: str) -> Dict[str, Optional[str]]:
    """
    Reads a YAML configuration file with settings for this tool. Every key is optional. Returns a
    dictionary with all known keys, where missing keys are mapped to None.
    """
    if not os.path.isfile(config_file_path):
        fatal("Configuration file does not exist: %s", config_file_path)

    try:
        with open(config_file_path) as config_file:
            raw_config: Any = yaml.load(config_file, Loader=yaml.SafeLoader)
    except (OSError, yaml.YAMLError) as ex:
        fatal("Could not read configuration file %s: %s", config_file_path, ex)

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        fatal("Expected a mapping at the top level of configuration file %s, got: %s",
              config_file_path, type(raw_config).__name__)

    unknown_keys = sorted(str(key) for key in raw_config if key not in CONFIG_FILE_KEYS)
    if unknown_keys:
        fatal("Unknown keys in configuration file %s: %s. Known keys: %s",
              config_file_path, ', '.join(unknown_keys), ', '.join(CONFIG_FILE_KEYS))

    config: Dict[str, Optional[str]] = {}
    for key in CONFIG_FILE_KEYS:
        value = raw_config.get(key)
        if value is not None and not isinstance(value, str):
            fatal("Expected a string value for %s in configuration file %s, got: %r",
                  key, config_file_path, value)
        config[key] = value
    return config
