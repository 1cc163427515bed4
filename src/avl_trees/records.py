# -*- coding: utf-8 -*-
# ------------------------------------------------------------------------------
#
#   Copyright 2025 Jannik Hehemann
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
# ------------------------------------------------------------------------------

"""Villager records loaded from the Animal Crossing villagers dataset"""

import csv
import logging
from dataclasses import dataclass, field
from typing import List

logger = logging.getLogger(__name__)

# Column positions in villagers.csv
NAME_COL = 0
PERSONALITY_COL = 3
HOBBY_COL = 4
FAVORITE_SONG_COL = 7


@dataclass(frozen=True, order=True)
class Villager:
    """
    A villager record. Villagers are ordered and compared by name only.

    Attributes:
        name (str): The villager's name (the ordering key).
        personality (str): Personality type.
        hobby (str): Hobby.
        favorite_song (str): Favorite K.K. song.
    """
    name: str
    personality: str = field(compare=False)
    hobby: str = field(compare=False)
    favorite_song: str = field(compare=False)

    def __str__(self):
        return f"{self.name} ({self.personality}, {self.hobby}, {self.favorite_song})"


def load_villagers(path: str, num_lines: int) -> List[Villager]:
    """
    Read villagers from a CSV file with a header row.

    The header counts as line 1, so lines 2..num_lines are read (fewer if the
    file ends first). These are physical lines: a record whose quoted field
    runs past line num_lines is not read. Rows that are blank or lack one of
    the used columns are skipped with a warning.

    Parameters:
        path (str): Path to the CSV file.
        num_lines (int): Number of file lines to consume, header included.

    Returns:
        List[Villager]: The parsed villagers in file order.

    Raises:
        ValueError: If num_lines is less than 1.
        FileNotFoundError: If path does not exist.
    """
    if num_lines < 1:
        raise ValueError(f"load_villagers(): num_lines must be >= 1, got {num_lines}")

    villagers: List[Villager] = []
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        next(reader, None)  # header
        end = reader.line_num
        for row in reader:
            # a quoted field may span several physical lines
            start, end = end + 1, reader.line_num
            if end > num_lines:
                break
            if len(row) <= FAVORITE_SONG_COL:
                logger.warning("insert failed - line %d", start)
                continue
            villagers.append(Villager(
                row[NAME_COL],
                row[PERSONALITY_COL],
                row[HOBBY_COL],
                row[FAVORITE_SONG_COL],
            ))

    logger.info("Loaded %d villagers from %s", len(villagers), path)
    return villagers
