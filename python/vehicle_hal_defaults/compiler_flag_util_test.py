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

import unittest

from vehicle_hal_defaults.compiler_flag_util import (
    get_product_define_name,
    is_define_flag,
    is_valid_define_name,
    make_define_flag,
    parse_define_flag,
)


class TestCompilerFlagUtil(unittest.TestCase):
    def test_make_define_flag(self) -> None:
        self.assertEqual('-DTARGET_PRODUCT_KINGFISHER=1',
                         make_define_flag('TARGET_PRODUCT_KINGFISHER'))
        self.assertEqual('-DCAN_IFACE=can0', make_define_flag('CAN_IFACE', 'can0'))
        self.assertEqual('-D_PRIVATE=0', make_define_flag('_PRIVATE', 0))

    def test_invalid_define_names(self) -> None:
        for name in ['', '1ABC', 'TARGET-PRODUCT', 'A B', 'X=1']:
            with self.subTest(name=name):
                self.assertFalse(is_valid_define_name(name))
                with self.assertRaises(ValueError):
                    make_define_flag(name)

    def test_parse_define_flag(self) -> None:
        self.assertEqual(('TARGET_PRODUCT_SALVATOR', '1'),
                         parse_define_flag(make_define_flag('TARGET_PRODUCT_SALVATOR')))
        self.assertEqual(('EXPR', 'a=b'), parse_define_flag('-DEXPR=a=b'))
        self.assertEqual(('EMPTY', ''), parse_define_flag('-DEMPTY='))
        with self.assertRaises(ValueError):
            parse_define_flag('-I/usr/include')

    def test_is_define_flag(self) -> None:
        self.assertTrue(is_define_flag('-DNDEBUG'))
        self.assertFalse(is_define_flag('-UNDEBUG'))
        self.assertFalse(is_define_flag('D=1'))

    def test_product_define_name(self) -> None:
        self.assertEqual('TARGET_PRODUCT_KINGFISHER', get_product_define_name('kingfisher'))


if __name__ == '__main__':
    unittest.main()
