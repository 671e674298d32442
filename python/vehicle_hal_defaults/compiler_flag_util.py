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

import re

from typing import Optional, Tuple, Union


DEFINE_FLAG_PREFIX = '-D'
TARGET_PRODUCT_DEFINE_PREFIX = 'TARGET_PRODUCT_'

C_IDENTIFIER_RE = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


def is_valid_define_name(name: str) -> bool:
    return C_IDENTIFIER_RE.match(name) is not None


def make_define_flag(name: str, value: Union[int, str] = 1) -> str:
    """
    Returns a preprocessor definition flag for the compiler command line.

    >>> make_define_flag('TARGET_PRODUCT_SALVATOR')
    '-DTARGET_PRODUCT_SALVATOR=1'
    >>> make_define_flag('USE_CAN_BUS', 'vcan0')
    '-DUSE_CAN_BUS=vcan0'
    >>> make_define_flag('1ST_BOARD')
    Traceback (most recent call last):
    ValueError: Not a valid preprocessor macro name: '1ST_BOARD'
    """
    if not is_valid_define_name(name):
        raise ValueError("Not a valid preprocessor macro name: %r" % name)
    return '%s%s=%s' % (DEFINE_FLAG_PREFIX, name, value)


def is_define_flag(flag: str) -> bool:
    """
    Returns true if the given compiler flag defines a preprocessor macro.

    >>> is_define_flag('-DTARGET_PRODUCT_KINGFISHER=1')
    True
    >>> is_define_flag('-Wall')
    False
    >>> is_define_flag('-D')
    False
    """
    return flag.startswith(DEFINE_FLAG_PREFIX) and len(flag) > len(DEFINE_FLAG_PREFIX)


def parse_define_flag(flag: str) -> Tuple[str, Optional[str]]:
    """
    Splits a preprocessor definition flag into the macro name and its value. The value is None for
    flags without an explicit value.

    >>> parse_define_flag('-DTARGET_PRODUCT_SALVATOR=1')
    ('TARGET_PRODUCT_SALVATOR', '1')
    >>> parse_define_flag('-DNDEBUG')
    ('NDEBUG', None)
    >>> parse_define_flag('-O2')
    Traceback (most recent call last):
    ValueError: Not a preprocessor definition flag: '-O2'
    """
    if not is_define_flag(flag):
        raise ValueError("Not a preprocessor definition flag: %r" % flag)
    definition = flag[len(DEFINE_FLAG_PREFIX):]
    if '=' in definition:
        name, value = definition.split('=', 1)
        return name, value
    return definition, None


def get_product_define_name(product: str) -> str:
    """
    >>> get_product_define_name('salvator')
    'TARGET_PRODUCT_SALVATOR'
    """
    return TARGET_PRODUCT_DEFINE_PREFIX + product.upper()
