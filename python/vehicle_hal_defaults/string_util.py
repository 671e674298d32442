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

import shlex

from typing import List, Optional


def shlex_join(args: List[str]) -> str:
    """
    >>> shlex_join(['-DTARGET_PRODUCT_SALVATOR=1'])
    '-DTARGET_PRODUCT_SALVATOR=1'
    >>> shlex_join(['-DBOARD_NAME="salvator x"', '-Wall'])
    '\\'-DBOARD_NAME="salvator x"\\' -Wall'
    >>> shlex_join([])
    ''
    """
    return ' '.join(shlex.quote(arg) for arg in args)


def parse_bool(s: Optional[str]) -> bool:
    """
    >>> [parse_bool(s) for s in [None, '', ' 0 ', 'False', 'no']]
    [False, False, False, False, False]
    >>> [parse_bool(s) for s in ['1', 'true', 'YES', 'on']]
    [True, True, True, True]
    """
    if s is None:
        return False
    return s.strip().lower() not in ['', '0', 'false', 'no']
