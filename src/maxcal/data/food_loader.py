"""Load food catalogs from delimited text files.

Catalog format (first line is a header and is ignored):
    description^weight_ounces^calories
    refried spicy beans^4.5^250
"""

from __future__ import annotations

import csv
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

import pandas as pd

from maxcal.optimizer.models import FoodDatabaseError, FoodItem, FoodVector, InvalidFoodItemError

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = "^"

# Bytes that are not valid UTF-8 decode to this character
REPLACEMENT_CHAR = "\ufffd"


@dataclass
class LoadReport:
    """Foods loaded from a catalog plus counts of skipped rows.

    skipped_field_count counts rows with extra fields; rows with missing or
    unparsable fields are counted in skipped_invalid.
    """

    foods: FoodVector = field(default_factory=list)
    skipped_field_count: int = 0
    skipped_invalid: int = 0

    @property
    def skipped(self) -> int:
        return self.skipped_field_count + self.skipped_invalid


class FoodLoader:
    """Handles reading a food catalog into FoodItem values."""

    COLUMNS = ["description", "weight_ounces", "calories"]

    def __init__(self, path: Path, delimiter: str = DEFAULT_DELIMITER):
        """Initialize the food loader.

        Args:
            path: Path to the catalog file
            delimiter: Field separator
        """
        self.path = Path(path)
        self.delimiter = delimiter

    def load(
        self,
        progress_callback: Optional[Callable[[str], None]] = None,
    ) -> LoadReport:
        """Load every valid food from the catalog.

        Rows with the wrong number of fields, unparsable numbers, an empty
        description, a description that is not valid UTF-8 or a non-positive
        weight are skipped.

        Args:
            progress_callback: Optional callback for progress updates

        Returns:
            LoadReport with foods in file order

        Raises:
            FoodDatabaseError: If the file cannot be opened or read
        """
        report = LoadReport()
        df = self._read_frame(report)
        if progress_callback:
            progress_callback(f"Read {len(df)} rows from {self.path}")

        weights = pd.to_numeric(df["weight_ounces"].str.strip(), errors="coerce")
        calories = pd.to_numeric(df["calories"].str.strip(), errors="coerce")

        for row_number, (description, weight, cals) in enumerate(
            zip(df["description"], weights, calories), start=2
        ):
            if pd.isna(description) or pd.isna(weight) or pd.isna(cals):
                logger.debug("Skipping row %d: missing or non-numeric field", row_number)
                report.skipped_invalid += 1
                continue
            if REPLACEMENT_CHAR in description:
                logger.debug("Skipping row %d: description is not valid UTF-8", row_number)
                report.skipped_invalid += 1
                continue
            if not (math.isfinite(weight) and math.isfinite(cals)):
                logger.debug("Skipping row %d: non-finite value", row_number)
                report.skipped_invalid += 1
                continue

            try:
                food = FoodItem(str(description), float(weight), float(cals))
            except InvalidFoodItemError as e:
                logger.debug("Skipping row %d: %s", row_number, e)
                report.skipped_invalid += 1
                continue

            report.foods.append(food)

        if progress_callback:
            progress_callback(f"Loaded {len(report.foods)} foods, skipped {report.skipped}")

        logger.info(
            "Loaded %d foods from %s (%d rows skipped)",
            len(report.foods),
            self.path,
            report.skipped,
        )
        return report

    def _read_frame(self, report: LoadReport) -> pd.DataFrame:
        """Read the raw catalog rows as strings.

        Rows with too many fields are dropped and counted on the report.
        """

        def on_bad_line(fields: list[str]) -> None:
            logger.debug(
                "Skipping row with %d fields; want %d: %s",
                len(fields),
                len(self.COLUMNS),
                self.delimiter.join(fields),
            )
            report.skipped_field_count += 1
            return None

        try:
            df = pd.read_csv(
                self.path,
                sep=self.delimiter,
                header=None,
                skiprows=1,
                names=self.COLUMNS,
                dtype=str,
                keep_default_na=False,
                na_values=[""],
                quoting=csv.QUOTE_NONE,
                engine="python",
                on_bad_lines=on_bad_line,
                encoding="utf-8",
                encoding_errors="replace",
            )
        except pd.errors.EmptyDataError:
            return pd.DataFrame(columns=self.COLUMNS)
        except OSError as e:
            raise FoodDatabaseError(
                f"Failed to load food database; cannot open file: {self.path}"
            ) from e

        return df


def load_food_database(
    path: Path,
    delimiter: str = DEFAULT_DELIMITER,
) -> FoodVector:
    """Convenience function to load all valid foods from a catalog.

    Args:
        path: Path to the catalog file
        delimiter: Field separator

    Returns:
        List of foods in file order

    Raises:
        FoodDatabaseError: If the file cannot be opened or read
    """
    loader = FoodLoader(path, delimiter)
    return loader.load().foods
