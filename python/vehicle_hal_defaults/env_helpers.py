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

from typing import Any, Dict, Mapping, MutableMapping, Optional

from vehicle_hal_defaults import env_var_names
from vehicle_hal_defaults.string_util import parse_bool


def dict_set_or_del(d: MutableMapping[str, str], k: str, v: Optional[str]) -> None:
    """
    Set the value of the given key in a dictionary to the given value, or delete it if the value
    is None.

    >>> d = {'TARGET_PRODUCT': 'salvator'}
    >>> dict_set_or_del(d, 'TARGET_PRODUCT', None)
    >>> d
    {}
    >>> dict_set_or_del(d, 'TARGET_PRODUCT', 'kingfisher')
    >>> d
    {'TARGET_PRODUCT': 'kingfisher'}
    """
    if v is None:
        if k in d:
            del d[k]
    else:
        d[k] = v


class EnvVarContext:
    """
    Sets the given environment variables and restores them on exit. A None value means the variable
    is undefined.

    >>> with EnvVarContext(TARGET_PRODUCT='kingfisher'):
    ...     print(os.getenv('TARGET_PRODUCT'))
    kingfisher
    >>> with EnvVarContext({env_var_names.TARGET_PRODUCT: None}):
    ...     print(os.getenv('TARGET_PRODUCT'))
    None
    """

    env_vars: Dict[str, Optional[str]]
    saved_env_vars: Dict[str, Optional[str]]

    def __init__(
            self,
            env_vars: Optional[Mapping[str, Optional[str]]] = None,
            **kwargs_env_vars: Optional[str]) -> None:
        self.env_vars = dict(env_vars or {})
        self.env_vars.update(kwargs_env_vars)
        self.saved_env_vars = {}

    def __enter__(self) -> None:
        self.saved_env_vars = {}
        for env_var_name, new_value in self.env_vars.items():
            self.saved_env_vars[env_var_name] = os.environ.get(env_var_name)
            dict_set_or_del(os.environ, env_var_name, new_value)

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        for env_var_name, saved_value in self.saved_env_vars.items():
            dict_set_or_del(os.environ, env_var_name, saved_value)


def get_target_product(env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Looks up the target product identifier in the given environment (the process environment by
    default). The value is returned as is, without trimming.

    >>> get_target_product({'TARGET_PRODUCT': 'salvator'})
    'salvator'
    >>> print(get_target_product({}))
    None
    """
    if env is None:
        env = os.environ
    return env.get(env_var_names.TARGET_PRODUCT)


def is_verbose_mode_requested(env: Optional[Mapping[str, str]] = None) -> bool:
    if env is None:
        env = os.environ
    return parse_bool(env.get(env_var_names.VERBOSE))

