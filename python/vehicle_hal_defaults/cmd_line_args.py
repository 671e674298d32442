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

import argparse
import os
import sys

from typing import Dict, List, Mapping, Optional

from vehicle_hal_defaults import env_var_names
from vehicle_hal_defaults.config_file import load_config_file
from vehicle_hal_defaults.custom_logging import fatal
from vehicle_hal_defaults.env_helpers import get_target_product, is_verbose_mode_requested
from vehicle_hal_defaults.flag_resolver import get_supported_products
from vehicle_hal_defaults.output_formats import DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS


class ToolConfig:
    """
    Effective settings, after combining command-line arguments, the optional configuration file,
    and the environment. Command-line arguments take priority over the configuration file, and the
    configuration file takes priority over environment variables.
    """

    target_product: Optional[str]
    output_format: str
    output_file: Optional[str]
    config_file: Optional[str]
    list_products: bool
    verbose: bool

    def __init__(
            self,
            target_product: Optional[str] = None,
            output_format: str = DEFAULT_OUTPUT_FORMAT,
            output_file: Optional[str] = None,
            config_file: Optional[str] = None,
            list_products: bool = False,
            verbose: bool = False) -> None:
        self.target_product = target_product
        self.output_format = output_format
        self.output_file = output_file
        self.config_file = config_file
        self.list_products = list_products
        self.verbose = verbose

    def describe(self) -> Dict[str, Optional[str]]:
        return {
            'target_product': self.target_product,
            'output_format': self.output_format,
            'output_file': self.output_file,
            'config_file': self.config_file,
        }


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]),
        description='Prints the compiler flags that the vehicle HAL defaults module contributes '
                    'for the current target product.')
    parser.add_argument(
        '--target-product',
        type=str,
        default=None,
        help='Target product identifier. Supported products: %s. Other values produce no flags. '
             'By default, the value of the %s environment variable is used.' % (
                 ', '.join(get_supported_products()), env_var_names.TARGET_PRODUCT))
    parser.add_argument(
        '--output-format',
        type=str,
        choices=OUTPUT_FORMATS,
        default=None,
        help='Output format. The default is determined by the %s environment variable, '
             'falling back to %s.' % (env_var_names.OUTPUT_FORMAT, DEFAULT_OUTPUT_FORMAT))
    parser.add_argument(
        '--output-file',
        type=str,
        default=None,
        help='Write the output to this file instead of standard output.')
    parser.add_argument(
        '--config-file',
        type=str,
        default=None,
        help='YAML configuration file with any of the keys target_product, output_format, '
             'output_file. The default is determined by the %s environment variable.' %
             env_var_names.CONFIG_FILE)
    parser.add_argument(
        '--list-products',
        action='store_true',
        help='List supported target products and exit.')
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Log the effective configuration and the resolved flags to standard error. Also '
             'enabled by setting %s.' % env_var_names.VERBOSE)
    return parser


def parse_cmd_line_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return create_arg_parser().parse_args(argv)


def _first_not_none(*values: Optional[str]) -> Optional[str]:
    for value in values:
        if value is not None:
            return value
    return None


def get_tool_config(
        args: argparse.Namespace,
        env: Optional[Mapping[str, str]] = None) -> ToolConfig:
    if env is None:
        env = os.environ

    file_config: Dict[str, Optional[str]] = {}
    config_file_path = _first_not_none(args.config_file, env.get(env_var_names.CONFIG_FILE))
    if config_file_path:
        file_config = load_config_file(config_file_path)

    output_format = _first_not_none(
        args.output_format,
        file_config.get('output_format'),
        env.get(env_var_names.OUTPUT_FORMAT) or None,
        DEFAULT_OUTPUT_FORMAT)
    assert output_format is not None
    if output_format not in OUTPUT_FORMATS:
        fatal("Invalid output format: %s. Known formats: %s",
              output_format, ', '.join(OUTPUT_FORMATS))

    return ToolConfig(
        target_product=_first_not_none(
            args.target_product,
            file_config.get('target_product'),
            get_target_product(env)),
        output_format=output_format,
        output_file=_first_not_none(args.output_file, file_config.get('output_file')),
        config_file=config_file_path or None,
        list_products=args.list_products,
        verbose=args.verbose or is_verbose_mode_requested(env))
