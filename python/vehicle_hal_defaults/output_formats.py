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

import json

import yaml

from typing import Callable, Dict, List

from vehicle_hal_defaults.defaults_properties import DefaultsProperties
from vehicle_hal_defaults.string_util import shlex_join


def _format_lines(properties: DefaultsProperties) -> str:
    return ''.join(flag + '\n' for flag in properties.cflags)


def _format_shell(properties: DefaultsProperties) -> str:
    return shlex_join(properties.cflags) + '\n'


def _format_json(properties: DefaultsProperties) -> str:
    return json.dumps(properties.to_dict(), indent=2) + '\n'


def _format_yaml(properties: DefaultsProperties) -> str:
    return yaml.safe_dump(properties.to_dict(), default_flow_style=False)


FORMATTERS: Dict[str, Callable[[DefaultsProperties], str]] = {
    'lines': _format_lines,
    'shell': _format_shell,
    'json': _format_json,
    'yaml': _format_yaml,
}

DEFAULT_OUTPUT_FORMAT = 'lines'

OUTPUT_FORMATS: List[str] = list(FORMATTERS.keys())


def format_properties(properties: DefaultsProperties, output_format: str) -> str:
    """
    Renders defaults module properties in one of the supported output formats.

    >>> props = DefaultsProperties(['-DTARGET_PRODUCT_SALVATOR=1'])
    >>> print(format_properties(props, 'yaml'), end='')
    cflags:
    - -DTARGET_PRODUCT_SALVATOR=1
    >>> format_properties(DefaultsProperties(), 'lines')
    ''
    >>> format_properties(props, 'xml')
    Traceback (most recent call last):
    ValueError: Unknown output format: 'xml'. Known formats: lines, shell, json, yaml
    """
    formatter = FORMATTERS.get(output_format)
    if formatter is None:
        raise ValueError("Unknown output format: %r. Known formats: %s" % (
            output_format, ', '.join(OUTPUT_FORMATS)))
    return formatter(properties)
