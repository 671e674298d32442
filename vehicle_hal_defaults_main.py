#!/usr/bin/env python3

#
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

# Expects the python directory of this repository to be on PYTHONPATH, or the package to be
# installed.

from vehicle_hal_defaults.vehicle_hal_defaults_main import console_main


if __name__ == "__main__":
    console_main()
