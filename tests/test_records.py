"""Tests for loading villager records"""
# pylint: skip-file

import os
import tempfile
import unittest

from avl_trees.records import Villager, load_villagers

HEADER = "Name,Species,Gender,Personality,Hobby,Birthday,Catchphrase,Favorite Song,Style 1,Style 2\n"
ROWS = [
    "Admiral,Bird,Male,Cranky,Nature,27-Jan,aye aye,Steep Hill,Cool,Cool\n",
    "Agent S,Squirrel,Female,Peppy,Fitness,2-Jul,sidekick,Go K.K. Rider,Active,Simple\n",
    "Agnes,Pig,Female,Big Sister,Play,21-Apr,snuffle,K.K. House,Simple,Elegant\n",
    "Al,Gorilla,Male,Lazy,Fitness,18-Oct,Ayyyeee,Steep Hill,Active,Active\n",
]


class TestVillager(unittest.TestCase):

    def test_ordered_by_name_only(self):
        a = Villager("Ankha", "Snooty", "Fashion", "K.K. Disco")
        b = Villager("Bob", "Lazy", "Play", "K.K. Lullaby")
        self.assertLess(a, b)
        self.assertEqual(a, Villager("Ankha", "Peppy", "Music", "K.K. Ska"))
        self.assertFalse(a < Villager("Ankha", "Peppy", "Music", "K.K. Ska"))

    def test_str(self):
        v = Villager("Al", "Lazy", "Fitness", "Steep Hill")
        self.assertEqual(str(v), "Al (Lazy, Fitness, Steep Hill)")


class TestLoadVillagers(unittest.TestCase):

    def setUp(self):
        fd, self.path = tempfile.mkstemp(suffix=".csv")
        os.close(fd)

    def tearDown(self):
        os.remove(self.path)

    def _write(self, lines):
        with open(self.path, "w", encoding="utf-8") as f:
            f.writelines(lines)

    def test_reads_all_rows(self):
        self._write([HEADER] + ROWS)
        villagers = load_villagers(self.path, 5)
        self.assertEqual([v.name for v in villagers], ["Admiral", "Agent S", "Agnes", "Al"])
        self.assertEqual(villagers[0], Villager("Admiral", "Cranky", "Nature", "Steep Hill"))
        self.assertEqual(villagers[2].personality, "Big Sister")
        self.assertEqual(villagers[1].favorite_song, "Go K.K. Rider")

    def test_num_lines_counts_header(self):
        self._write([HEADER] + ROWS)
        self.assertEqual(len(load_villagers(self.path, 3)), 2)
        self.assertEqual(load_villagers(self.path, 1), [])

    def test_num_lines_past_end_of_file(self):
        self._write([HEADER] + ROWS)
        self.assertEqual(len(load_villagers(self.path, 392)), 4)

    def test_malformed_rows_are_skipped_with_warning(self):
        self._write([HEADER, ROWS[0], "Broken,Row\n", "\n", ROWS[1]])
        with self.assertLogs("avl_trees.records", level="WARNING") as cm:
            villagers = load_villagers(self.path, 10)
        self.assertEqual([v.name for v in villagers], ["Admiral", "Agent S"])
        self.assertIn("line 3", cm.output[0])
        self.assertEqual(len(cm.output), 2)

    def test_quoted_field_spanning_lines_counts_physical_lines(self):
        multiline = 'Bob,Cat,Male,Lazy,Play,1-Jan,pthhpth,"K.K.\nSong",Simple,Simple\n'
        self._write([HEADER, ROWS[0], multiline, "Broken,Row\n", ROWS[1]])
        # Bob occupies lines 3 and 4
        self.assertEqual([v.name for v in load_villagers(self.path, 3)], ["Admiral"])
        villagers = load_villagers(self.path, 4)
        self.assertEqual([v.name for v in villagers], ["Admiral", "Bob"])
        self.assertEqual(villagers[1].favorite_song, "K.K.\nSong")
        with self.assertLogs("avl_trees.records", level="WARNING") as cm:
            villagers = load_villagers(self.path, 6)
        self.assertEqual([v.name for v in villagers], ["Admiral", "Bob", "Agent S"])
        self.assertEqual(len(cm.output), 1)
        self.assertIn("line 5", cm.output[0])

    def test_invalid_num_lines(self):
        self._write([HEADER])
        with self.assertRaises(ValueError):
            load_villagers(self.path, 0)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_villagers(self.path + ".missing", 5)


if __name__ == "__main__":
    unittest.main()
