import os
import logging
import tempfile
from io import StringIO
from unittest.mock import patch
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import SimpleTestCase, override_settings

from ..utils.path import os_filesystem
from ._common import make_tree


class CombinePathCommandTestClass(SimpleTestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.base = self.tmp.name
        make_tree(
            self.base,
            files=['Modded/com.example.MyMod/Config.JSON']
        )
        logging.disable(logging.DEBUG)

    def tearDown(self):
        self.tmp.cleanup()
        logging.disable(logging.NOTSET)

    def _call(self, *args):
        out = StringIO()
        call_command('combinepath', *args, stdout=out)
        return out.getvalue().strip()

    def test_combine(self):
        self.assertEqual(
            os.path.join(self.base, 'Modded', 'com.example.MyMod'),
            self._call(self.base, 'modded', 'COM.EXAMPLE.MYMOD')
        )

    def test_mod(self):
        with self.settings(STREAMING_ASSETS_PATH=self.base):
            self.assertEqual(
                os.path.join(
                    self.base, 'Modded', 'com.example.MyMod', 'Config.JSON'
                ),
                self._call('--mod', 'com.example.mymod', 'config.json')
            )

    def test_no_segments(self):
        with self.assertRaisesMessage(CommandError, 'No paths provided'):
            self._call()

    def test_listing_error(self):
        with patch.object(
            os_filesystem, 'list_directories',
            side_effect=PermissionError('denied')
        ):
            with self.assertRaisesMessage(CommandError, 'denied'):
                self._call(self.base, 'modded')

    @override_settings(STREAMING_ASSETS_PATH=None)
    def test_mod_not_configured(self):
        with self.assertRaisesMessage(CommandError, 'STREAMING_ASSETS_PATH'):
            self._call('--mod', 'com.example.MyMod')

    def test_must_exist(self):
        self.assertEqual(
            os.path.join(self.base, 'Modded'),
            self._call('--must-exist', self.base, 'MODDED')
        )
        with self.assertRaises(CommandError):
            self._call('--must-exist', self.base, 'ghost')
