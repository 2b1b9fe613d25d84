"""
Unit tests for export configuration.
"""

import json
import shutil
import tempfile
import unittest
from pathlib import Path

from flight_log_exporter.config import ExportConfig


class TestExportConfig(unittest.TestCase):
    """Test configuration defaults, validation and persistence."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir)

    def test_defaults(self):
        """Test default values."""
        config = ExportConfig()

        self.assertEqual(config.binary_extensions, ['.bin'])
        self.assertEqual(config.output_extension, '.csv')
        self.assertEqual(config.encoding, 'utf-8')
        self.assertEqual(config.progress_interval, 1000)
        self.assertEqual(config.min_gps_fix_type, 3)
        self.assertEqual(config.gps_leap_seconds, 18)

    def test_extensions_lower_cased(self):
        """Test binary extensions match case-insensitively."""
        config = ExportConfig(binary_extensions=['.BIN', '.Dat'])
        self.assertEqual(config.binary_extensions, ['.bin', '.dat'])

    def test_invalid_values(self):
        """Test validation errors."""
        invalid = [
            {'progress_interval': 0},
            {'min_gps_fix_type': -1},
            {'gps_leap_seconds': -1},
            {'output_extension': 'csv'},
            {'output_extension': '.bin'},
            {'binary_extensions': ['bin']},
            {'encoding': 'not-a-codec'},
        ]
        for kwargs in invalid:
            with self.subTest(kwargs=kwargs):
                with self.assertRaises(ValueError):
                    ExportConfig(**kwargs)

    def test_file_round_trip(self):
        """Test saving and loading JSON configuration."""
        config = ExportConfig(min_gps_fix_type=4, progress_interval=500)
        path = Path(self.temp_dir) / 'nested' / 'config.json'

        config.to_file(str(path))
        loaded = ExportConfig.from_file(str(path))

        self.assertEqual(loaded, config)
        self.assertEqual(json.loads(path.read_text())['min_gps_fix_type'], 4)

    def test_from_missing_file(self):
        """Test loading a missing configuration file."""
        with self.assertRaises(FileNotFoundError):
            ExportConfig.from_file(str(Path(self.temp_dir) / 'missing.json'))

    def test_unknown_key_rejected(self):
        """Test unexpected keys in a configuration file."""
        path = Path(self.temp_dir) / 'config.json'
        path.write_text(json.dumps({'target_frequency': 15.0}))

        with self.assertRaises(TypeError):
            ExportConfig.from_file(str(path))

    def test_component_configs(self):
        """Test reader and decoder setting subsets."""
        config = ExportConfig(progress_interval=10, min_gps_fix_type=2)

        self.assertEqual(config.get_reader_config()['progress_interval'], 10)
        self.assertEqual(config.get_decoder_config(),
                         {'min_gps_fix_type': 2, 'gps_leap_seconds': 18})

    def test_copy_revalidates(self):
        """Test copies are independent and validated."""
        config = ExportConfig()
        copied = config.copy()
        copied.binary_extensions.append('.dat')

        self.assertEqual(config.binary_extensions, ['.bin'])

        config.progress_interval = -5
        with self.assertRaises(ValueError):
            config.copy()


if __name__ == '__main__':
    unittest.main()
