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

from vehicle_hal_defaults.compiler_flag_util import (  # noqa: F401
    is_define_flag,
    make_define_flag,
    parse_define_flag,
)
from vehicle_hal_defaults.defaults_properties import (  # noqa: F401
    DefaultsProperties,
    append_cflags,
    get_defaults_properties_from_env,
    vehicle_hal_defaults_load_hook,
)
from vehicle_hal_defaults.flag_resolver import (  # noqa: F401
    get_supported_products,
    resolve_product_flags,
)
