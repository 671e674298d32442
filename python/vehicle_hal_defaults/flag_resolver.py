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

"""
Maps the target product identifier supplied by the build environment to the compiler flags that
select board-specific code in the vehicle HAL.
"""

from typing import Dict, List, Optional

from vehicle_hal_defaults.compiler_flag_util import get_product_define_name, make_define_flag


# Products are matched by exact, case-sensitive comparison. Order is preserved for listings.
SUPPORTED_PRODUCTS = [
    'salvator',
    'kingfisher',
]

PRODUCT_DEFINE_FLAGS: Dict[str, List[str]] = {
    product: [make_define_flag(get_product_define_name(product))]
    for product in SUPPORTED_PRODUCTS
}


def get_supported_products() -> List[str]:
    return list(SUPPORTED_PRODUCTS)


def resolve_product_flags(product_identifier: Optional[str]) -> List[str]:
    """
    Returns the list of compiler flags to append for the given target product. Unknown, empty or
    missing product identifiers result in an empty list.

    >>> resolve_product_flags('salvator')
    ['-DTARGET_PRODUCT_SALVATOR=1']
    >>> resolve_product_flags('kingfisher')
    ['-DTARGET_PRODUCT_KINGFISHER=1']
    >>> resolve_product_flags('Salvator')
    []
    >>> resolve_product_flags(None)
    []
    """
    # A new list every time, so callers can append to the result.
    return list(PRODUCT_DEFINE_FLAGS.get(product_identifier or '', []))
