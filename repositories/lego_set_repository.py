# repositories/lego_set_repository.py
"""
LegoSet Repository - Catalog queries over the Brickset data file.
"""

from functools import cmp_to_key
from typing import Dict, List, Optional, Union
from pathlib import Path
import logging

from repositories.json_repository import JSONRepository
from models.lego_set import LegoSet
from config.paths import BRICKSET_FILE
from core.exceptions import EmptyResultError, ValidationError

logger = logging.getLogger(__name__)

SUBTHEMES_LABEL = "Subthemes in the theme:"
SUBTHEME_SEPARATOR = " | "
MISSING_SUBTHEME = "null"


def compare_nulls_first(left: Optional[str], right: Optional[str]) -> int:
    """Order None before any string, strings in natural order."""
    if left is None and right is None:
        return 0
    if left is None:
        return -1
    if right is None:
        return 1
    return (left > right) - (left < right)


def _distinct(values) -> list:
    """Drop repeats, keeping first-occurrence order."""
    return list(dict.fromkeys(values))


def _check_limit(limit: int) -> None:
    if limit < 0:
        raise ValidationError(f"limit must not be negative, got {limit}", field="limit", value=limit)


class LegoSetRepository(JSONRepository[LegoSet]):
    """
    Repository for LegoSet records.

    Every query re-scans the full record list; nothing is memoized.
    """

    def __init__(
        self,
        resource_name: Union[str, Path] = BRICKSET_FILE,
        data_dir: Optional[Union[str, Path]] = None
    ):
        super().__init__(
            record_type=LegoSet,
            resource_name=resource_name,
            data_dir=data_dir,
            entity_name="LegoSet"
        )

    def has_sets_with_pieces_at_least(self, num: int) -> bool:
        """True if any set has at least ``num`` pieces."""
        return any(lego_set.pieces >= num for lego_set in self.get_all())

    def tags_for_set_named(self, name: str) -> List[str]:
        """Distinct tags of the sets named exactly ``name``."""
        return _distinct(
            tag
            for lego_set in self.get_all()
            if lego_set.name == name
            for tag in lego_set.tags
        )

    def subthemes_in_theme(self, theme: str) -> str:
        """
        Distinct subthemes of ``theme`` joined into one labelled string.

        A missing subtheme counts as one distinct entry rendered as "null".
        With no matching sets the result is the bare label.
        """
        subthemes = _distinct(
            lego_set.subtheme
            for lego_set in self.get_all()
            if lego_set.theme == theme
        )
        result = SUBTHEMES_LABEL
        for subtheme in subthemes:
            result += SUBTHEME_SEPARATOR + (MISSING_SUBTHEME if subtheme is None else subtheme)
        return result

    def number_to_name_for_piece_count(self, num: int) -> Dict[str, str]:
        """Map set number to name for sets with exactly ``num`` pieces."""
        # Duplicate numbers: the later record wins
        return {
            lego_set.number: lego_set.name
            for lego_set in self.get_all()
            if lego_set.pieces == num
        }

    def names_grouped_by_theme(self) -> Dict[Optional[str], List[str]]:
        """Set names grouped by theme; sets without a theme group under None."""
        groups: Dict[Optional[str], List[str]] = {}
        for lego_set in self.get_all():
            groups.setdefault(lego_set.theme, []).append(lego_set.name)
        return groups

    def names_of_sets_with_zero_pieces(self, limit: int = 3) -> List[str]:
        """Names of the first ``limit`` sets with no pieces."""
        _check_limit(limit)
        names = [lego_set.name for lego_set in self.get_all() if lego_set.pieces == 0]
        return names[:limit]

    def themes_starting_with_a(self) -> List[Optional[str]]:
        """Distinct themes starting with "A", ascending, nulls first."""
        themes = _distinct(
            lego_set.theme
            for lego_set in self.get_all()
            if lego_set.theme is not None and lego_set.theme.startswith("A")
        )
        return sorted(themes, key=cmp_to_key(compare_nulls_first))

    def has_theme_containing(self, substring: str) -> bool:
        """True if any set's theme contains ``substring`` (case-sensitive)."""
        return any(
            lego_set.theme is not None and substring in lego_set.theme
            for lego_set in self.get_all()
        )

    def average_name_length_in_theme(self, substring: str) -> float:
        """
        Average length of set names whose theme contains ``substring``.

        Raises:
            EmptyResultError: if no set's theme contains ``substring``
        """
        lengths = [
            len(lego_set.name)
            for lego_set in self.get_all()
            if lego_set.theme is not None and substring in lego_set.theme
        ]
        if not lengths:
            self._logger.warning(f"No {self._entity_name} with theme containing '{substring}'")
            raise EmptyResultError(
                "average_name_length_in_theme",
                criteria={"theme_contains": substring}
            )
        return sum(lengths) / len(lengths)

    def top_names_over_length(self, min_len: int = 15, limit: int = 5) -> List[str]:
        """First ``limit`` names longer than ``min_len`` characters, ascending."""
        _check_limit(limit)
        names = sorted(
            lego_set.name for lego_set in self.get_all() if len(lego_set.name) > min_len
        )
        return names[:limit]
