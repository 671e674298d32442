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

from typing import Any, Dict, List, Mapping, Optional

from vehicle_hal_defaults.env_helpers import get_target_product
from vehicle_hal_defaults.flag_resolver import resolve_product_flags


class DefaultsProperties:
    """
    Properties that a defaults module contributes to the native targets that reference it. The
    build pipeline appends cflags to the dependent target's own list of compiler flags.
    """

    cflags: List[str]

    def __init__(self, cflags: Optional[List[str]] = None) -> None:
        self.cflags = list(cflags or [])

    def to_dict(self) -> Dict[str, Any]:
        return {'cflags': list(self.cflags)}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DefaultsProperties):
            return NotImplemented
        return self.cflags == other.cflags

    def __repr__(self) -> str:
        return 'DefaultsProperties(cflags=%r)' % self.cflags


def vehicle_hal_defaults_load_hook(target_product: Optional[str]) -> DefaultsProperties:
    """
    >>> vehicle_hal_defaults_load_hook('kingfisher')
    DefaultsProperties(cflags=['-DTARGET_PRODUCT_KINGFISHER=1'])
    >>> vehicle_hal_defaults_load_hook('')
    DefaultsProperties(cflags=[])
    """
    return DefaultsProperties(cflags=resolve_product_flags(target_product))


def get_defaults_properties_from_env(
        env: Optional[Mapping[str, str]] = None) -> DefaultsProperties:
    """
    Sources the target product from the environment and resolves it.

    >>> get_defaults_properties_from_env({'TARGET_PRODUCT': 'salvator'})
    DefaultsProperties(cflags=['-DTARGET_PRODUCT_SALVATOR=1'])
    >>> get_defaults_properties_from_env({'PATH': '/usr/bin'})
    DefaultsProperties(cflags=[])
    """
    return vehicle_hal_defaults_load_hook(get_target_product(env))


def append_cflags(existing_cflags: List[str], properties: DefaultsProperties) -> List[str]:
    """
    Returns the flags of a dependent target followed by the flags contributed by the defaults
    module. Neither input is modified.

    >>> append_cflags(['-Wall', '-Werror'], DefaultsProperties(['-DTARGET_PRODUCT_SALVATOR=1']))
    ['-Wall', '-Werror', '-DTARGET_PRODUCT_SALVATOR=1']
    """
    return list(existing_cflags) + list(properties.cflags)
