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

from vehicle_hal_defaults.flag_resolver import get_supported_products, resolve_product_flags


class TestFlagResolver(unittest.TestCase):
    def test_salvator(self) -> None:
        self.assertEqual(['-DTARGET_PRODUCT_SALVATOR=1'], resolve_product_flags('salvator'))

    def test_kingfisher(self) -> None:
        self.assertEqual(['-DTARGET_PRODUCT_KINGFISHER=1'], resolve_product_flags('kingfisher'))

    def test_unrecognized_products(self) -> None:
        for product in ['', 'other_board', 'Salvator', 'KINGFISHER', ' salvator', 'salvator\n',
                        'salvator-x', 'aosp_arm64']:
            with self.subTest(product=product):
                self.assertEqual([], resolve_product_flags(product))

    def test_missing_product(self) -> None:
        self.assertEqual([], resolve_product_flags(None))

    def test_repeated_calls_are_equal(self) -> None:
        for product in ['salvator', 'kingfisher', 'unknown']:
            with self.subTest(product=product):
                self.assertEqual(resolve_product_flags(product), resolve_product_flags(product))

    def test_result_is_a_fresh_list(self) -> None:
        flags = resolve_product_flags('salvator')
        flags.append('-Wall')
        self.assertEqual(['-DTARGET_PRODUCT_SALVATOR=1'], resolve_product_flags('salvator'))

        empty_flags = resolve_product_flags('unknown')
        empty_flags.append('-Wall')
        self.assertEqual([], resolve_product_flags('unknown'))

    def test_supported_products(self) -> None:
        self.assertEqual(['salvator', 'kingfisher'], get_supported_products())
        products = get_supported_products()
        products.clear()
        self.assertEqual(['salvator', 'kingfisher'], get_supported_products())


if __name__ == '__main__':
    unittest.main()
