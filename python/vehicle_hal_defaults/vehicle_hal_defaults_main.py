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
import pathlib
import sys

from typing import List, Optional, TextIO

from vehicle_hal_defaults.cmd_line_args import ToolConfig, get_tool_config, parse_cmd_line_args
from vehicle_hal_defaults.custom_logging import (
    FatalError,
    configure_logging,
    fatal,
    heading,
    log_debug,
)
from vehicle_hal_defaults.defaults_properties import (
    DefaultsProperties,
    vehicle_hal_defaults_load_hook,
)
from vehicle_hal_defaults.env_helpers import is_verbose_mode_requested
from vehicle_hal_defaults.flag_resolver import get_supported_products
from vehicle_hal_defaults.output_formats import format_properties


class DefaultsTool:
    args: argparse.Namespace
    config: ToolConfig
    stdout: TextIO

    def __init__(self, args: argparse.Namespace, stdout: Optional[TextIO] = None) -> None:
        self.args = args
        self.stdout = stdout or sys.stdout
        self.config = get_tool_config(args)

    def write_output(self, output: str) -> None:
        output_file_path = self.config.output_file
        if output_file_path is None:
            self.stdout.write(output)
            self.stdout.flush()
            return

        try:
            parent_dir = os.path.dirname(os.path.abspath(output_file_path))
            pathlib.Path(parent_dir).mkdir(parents=True, exist_ok=True)
            with open(output_file_path, 'w') as output_file:
                output_file.write(output)
        except OSError as ex:
            fatal("Could not write output file %s: %s", output_file_path, ex)
        log_debug("Wrote %d bytes to %s", len(output), output_file_path)

    def resolve(self) -> DefaultsProperties:
        properties = vehicle_hal_defaults_load_hook(self.config.target_product)
        if self.config.verbose:
            if properties.cflags:
                log_debug("Resolved compiler flags: %s", ' '.join(properties.cflags))
            else:
                log_debug("No compiler flags for target product %r", self.config.target_product)
        return properties

    def run(self) -> None:
        if self.config.verbose:
            heading('Vehicle HAL defaults configuration')
            for key, value in sorted(self.config.describe().items()):
                log_debug("%s: %s", key, value)

        if self.config.list_products:
            self.write_output(''.join(product + '\n' for product in get_supported_products()))
            return

        properties = self.resolve()
        self.write_output(format_properties(properties, self.config.output_format))


def main(argv: Optional[List[str]] = None, stdout: Optional[TextIO] = None) -> int:
    args = parse_cmd_line_args(argv)
    configure_logging(verbose=args.verbose or is_verbose_mode_requested())

    try:
        DefaultsTool(args, stdout=stdout).run()
    except FatalError:
        return 1
    return 0


def console_main() -> None:
    sys.exit(main())


if __name__ == "__main__":
    console_main()
