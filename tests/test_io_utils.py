"""
Unit tests for file I/O utilities.
"""

import shutil
import tempfile
import unittest
from pathlib import Path

import numpy as np
import pandas as pd

from flight_log_exporter.records import CSV_HEADER, CSV_COLUMNS, CsvRow
from flight_log_exporter.utils.io_utils import FileHandler


class TestFileHandler(unittest.TestCase):
    """Test output naming, export loading and log discovery."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.handler = FileHandler()

    def tearDown(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir)

    def test_output_path_replaces_extension(self):
        """Test the CSV sits next to the log."""
        self.assertEqual(self.handler.output_path_for('/logs/flight.bin'), Path('/logs/flight.csv'))
        self.assertEqual(self.handler.output_path_for('/logs/flight.2024.log'), Path('/logs/flight.2024.csv'))
        self.assertEqual(self.handler.output_path_for('/logs/flight'), Path('/logs/flight.csv'))

    def _write_export(self, rows):
        path = Path(self.temp_dir) / 'flight.csv'
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(CSV_HEADER + '\n')
            for row in rows:
                f.write(row.to_csv_line() + '\n')
        return str(path)

    def test_load_export(self):
        """Test reading an exported CSV back into typed columns."""
        path = self._write_export([
            CsvRow(time='2022-03-06 00:04:42.125', message_type='GPS', lat=12.34, lng=56.78,
                   alt=100.0, spd=5.0, hdg=90.0, vx=1.0, vy=0.5, vz=0.0,
                   raw_data='GPS, 0, 300000, 2200, 3, 12.34'),
            CsvRow(time='', message_type='ATT', roll=1.5, pitch=-2.25, yaw=180.0,
                   raw_data='ATT,"quoted",1'),
        ])

        df = self.handler.load_export(path)

        self.assertEqual(list(df.columns), CSV_COLUMNS)
        self.assertEqual(len(df), 2)
        self.assertEqual(df.loc[0, 'Time'], pd.Timestamp('2022-03-06 00:04:42.125'))
        self.assertTrue(pd.isna(df.loc[1, 'Time']))
        self.assertAlmostEqual(df.loc[0, 'Lat'], 12.34)
        self.assertTrue(np.isnan(df.loc[1, 'Lat']))
        self.assertEqual(df.loc[1, 'Pitch'], -2.25)
        self.assertEqual(df.loc[0, 'RawData'], 'GPS, 0, 300000, 2200, 3, 12.34')
        self.assertEqual(df.loc[1, 'RawData'], 'ATT,"quoted",1')

    def test_load_header_only_export(self):
        """Test an export with no rows."""
        df = self.handler.load_export(self._write_export([]))
        self.assertTrue(df.empty)

    def test_load_rejects_other_csv(self):
        """Test a CSV without the export columns."""
        path = Path(self.temp_dir) / 'other.csv'
        path.write_text('a,b\n1,2\n')

        with self.assertRaises(ValueError):
            self.handler.load_export(str(path))

    def test_find_log_files(self):
        """Test discovery by extension, sorted."""
        for name in ['b.bin', 'a.LOG', 'c.txt', 'notes.md', 'flight.csv']:
            (Path(self.temp_dir) / name).write_text('')
        (Path(self.temp_dir) / 'sub.bin').mkdir()

        found = [Path(p).name for p in self.handler.find_log_files(self.temp_dir)]

        self.assertEqual(found, ['a.LOG', 'b.bin', 'c.txt'])

    def test_find_log_files_custom_extensions(self):
        """Test restricting discovery to given extensions."""
        for name in ['a.bin', 'b.log']:
            (Path(self.temp_dir) / name).write_text('')

        found = self.handler.find_log_files(self.temp_dir, ['.bin'])
        self.assertEqual([Path(p).name for p in found], ['a.bin'])


if __name__ == '__main__':
    unittest.main()
