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

import json
import os
import unittest

import yaml

from vehicle_hal_defaults.defaults_properties import (
    DefaultsProperties,
    append_cflags,
    get_defaults_properties_from_env,
    vehicle_hal_defaults_load_hook,
)
from vehicle_hal_defaults.env_helpers import EnvVarContext
from vehicle_hal_defaults.output_formats import OUTPUT_FORMATS, format_properties


class TestDefaultsProperties(unittest.TestCase):
    def test_load_hook(self) -> None:
        self.assertEqual(DefaultsProperties(['-DTARGET_PRODUCT_SALVATOR=1']),
                         vehicle_hal_defaults_load_hook('salvator'))
        self.assertEqual(DefaultsProperties([]), vehicle_hal_defaults_load_hook('other_board'))
        self.assertEqual(DefaultsProperties(), vehicle_hal_defaults_load_hook(None))

    def test_properties_copy_their_input(self) -> None:
        cflags = ['-DTARGET_PRODUCT_KINGFISHER=1']
        properties = DefaultsProperties(cflags)
        cflags.append('-Wall')
        self.assertEqual(['-DTARGET_PRODUCT_KINGFISHER=1'], properties.cflags)
        self.assertEqual({'cflags': ['-DTARGET_PRODUCT_KINGFISHER=1']}, properties.to_dict())

    def test_from_explicit_env(self) -> None:
        self.assertEqual(
            ['-DTARGET_PRODUCT_KINGFISHER=1'],
            get_defaults_properties_from_env({'TARGET_PRODUCT': 'kingfisher'}).cflags)
        self.assertEqual([], get_defaults_properties_from_env({}).cflags)
        self.assertEqual([], get_defaults_properties_from_env({'TARGET_PRODUCT': ''}).cflags)

    def test_from_process_env(self) -> None:
        with EnvVarContext(TARGET_PRODUCT='salvator'):
            self.assertEqual(['-DTARGET_PRODUCT_SALVATOR=1'],
                             get_defaults_properties_from_env().cflags)
        with EnvVarContext(TARGET_PRODUCT=None):
            self.assertEqual([], get_defaults_properties_from_env().cflags)

    def test_env_var_context_restores_value(self) -> None:
        with EnvVarContext(TARGET_PRODUCT='aosp_x86_64'):
            with EnvVarContext(TARGET_PRODUCT='kingfisher'):
                self.assertEqual('kingfisher', os.environ['TARGET_PRODUCT'])
            self.assertEqual('aosp_x86_64', os.environ['TARGET_PRODUCT'])
            with EnvVarContext(TARGET_PRODUCT=None):
                self.assertNotIn('TARGET_PRODUCT', os.environ)
            self.assertEqual('aosp_x86_64', os.environ['TARGET_PRODUCT'])

    def test_append_cflags(self) -> None:
        existing = ['-Wall', '-DTARGET_PRODUCT_SALVATOR=1']
        properties = vehicle_hal_defaults_load_hook('salvator')
        self.assertEqual(
            ['-Wall', '-DTARGET_PRODUCT_SALVATOR=1', '-DTARGET_PRODUCT_SALVATOR=1'],
            append_cflags(existing, properties))
        self.assertEqual(['-Wall', '-DTARGET_PRODUCT_SALVATOR=1'], existing)
        self.assertEqual(['-Wall'], append_cflags(['-Wall'], DefaultsProperties()))


class TestOutputFormats(unittest.TestCase):
    def setUp(self) -> None:
        self.salvator = vehicle_hal_defaults_load_hook('salvator')
        self.empty = vehicle_hal_defaults_load_hook('other_board')

    def test_lines(self) -> None:
        self.assertEqual('-DTARGET_PRODUCT_SALVATOR=1\n',
                         format_properties(self.salvator, 'lines'))
        self.assertEqual('', format_properties(self.empty, 'lines'))

    def test_shell(self) -> None:
        self.assertEqual('-DTARGET_PRODUCT_SALVATOR=1\n',
                         format_properties(self.salvator, 'shell'))
        self.assertEqual('\n', format_properties(self.empty, 'shell'))
        self.assertEqual(
            "-DA=1 '-DB=two words'\n",
            format_properties(DefaultsProperties(['-DA=1', '-DB=two words']), 'shell'))

    def test_json(self) -> None:
        self.assertEqual({'cflags': ['-DTARGET_PRODUCT_SALVATOR=1']},
                         json.loads(format_properties(self.salvator, 'json')))
        self.assertEqual({'cflags': []}, json.loads(format_properties(self.empty, 'json')))

    def test_yaml(self) -> None:
        self.assertEqual(
            {'cflags': ['-DTARGET_PRODUCT_SALVATOR=1']},
            yaml.load(format_properties(self.salvator, 'yaml'), Loader=yaml.SafeLoader))
        self.assertEqual('cflags: []\n', format_properties(self.empty, 'yaml'))

    def test_all_formats_end_with_newline(self) -> None:
        for output_format in OUTPUT_FORMATS:
            with self.subTest(output_format=output_format):
                self.assertTrue(format_properties(self.salvator, output_format).endswith('\n'))

    def test_unknown_format(self) -> None:
        with self.assertRaises(ValueError):
            format_properties(self.salvator, 'makefile')


if __name__ == '__main__':
    unittest.main()
