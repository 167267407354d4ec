# services/catalog_report_service.py
"""
Catalog Report Service - Printable views over the LegoSet queries.
"""

from typing import Any, Dict, IO, List, Optional
from dataclasses import dataclass
import sys
import logging

from core.base import BaseService
from core.exceptions import DataNotFoundError, EmptyResultError
from repositories.lego_set_repository import LegoSetRepository

logger = logging.getLogger(__name__)


@dataclass
class ReportSection:
    """One numbered section of the catalog report."""
    number: int
    title: str
    body: str

    def render(self) -> str:
        return f"{self.number}.{self.title}:\n{self.body}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "number": self.number,
            "title": self.title,
            "body": self.body
        }


class CatalogReportService(BaseService):
    """
    Presentation wrappers over LegoSetRepository.

    The print_* methods write one item per line; the report reproduces the
    numbered walkthrough of every catalog query.
    """

    def __init__(self, repository: LegoSetRepository, out: Optional[IO[str]] = None):
        super().__init__("CatalogReportService")
        self._repository = repository
        self._out = out

    @property
    def repository(self) -> LegoSetRepository:
        return self._repository

    def _write_lines(self, lines: List[Any]) -> None:
        out = self._out or sys.stdout
        for line in lines:
            print(line, file=out)

    def print_tags_of_set_named(self, name: str) -> None:
        """Print the distinct tags of the set with the given name."""
        self._write_lines(self._repository.tags_for_set_named(name))

    def print_names_with_zero_pieces(self, limit: int = 3) -> None:
        """Print names of the first sets that have no pieces."""
        self._write_lines(self._repository.names_of_sets_with_zero_pieces(limit))

    def print_themes_starting_with_a(self) -> None:
        """Print all themes that start with A in ascending order."""
        self._write_lines(self._repository.themes_starting_with_a())

    def names_over_length_line(self, min_len: int = 15, limit: int = 5) -> str:
        """Names longer than ``min_len`` as one comma-separated string."""
        return ", ".join(self._repository.top_names_over_length(min_len, limit))

    def average_name_length_text(self, substring: str) -> str:
        """Average name length for display; an empty match is reported, not raised."""
        try:
            return str(self._repository.average_name_length_in_theme(substring))
        except EmptyResultError as e:
            self.logger.info(f"Average skipped: {e}")
            return f"No sets with theme containing '{substring}'"

    def _section_builders(self, settings) -> List[tuple]:
        repo = self._repository
        return [
            ("Sets with at least the given number of pieces exist",
             lambda: str(repo.has_sets_with_pieces_at_least(settings.min_pieces))),
            ("Distinct tags of the set with the given name",
             lambda: "\n".join(repo.tags_for_set_named(settings.tags_set_name))),
            ("Subthemes in the given theme",
             lambda: repo.subthemes_in_theme(settings.subtheme_theme)),
            ("Set numbers and names with the given number of pieces",
             lambda: str(repo.number_to_name_for_piece_count(settings.piece_count))),
            ("Themes with the names of their sets",
             lambda: str(repo.names_grouped_by_theme())),
            ("Names of the first 3 sets with 0 pieces",
             lambda: "\n".join(repo.names_of_sets_with_zero_pieces())),
            ("Themes starting with A in ascending order",
             lambda: "\n".join(str(theme) for theme in repo.themes_starting_with_a())),
            ("At least one set within the given theme exists",
             lambda: str(repo.has_theme_containing(settings.theme_substring))),
            ("Average name length of sets within the given theme",
             lambda: self.average_name_length_text(settings.average_theme_substring)),
            ("Names longer than the given length in ascending order",
             lambda: self.names_over_length_line(settings.min_name_length, settings.name_limit)),
        ]

    def build_report(self, settings=None, sections: Optional[List[int]] = None) -> List[ReportSection]:
        """
        Build the numbered catalog report.

        Args:
            settings: Settings holding the query arguments (global settings if omitted)
            sections: Section numbers to include (all if omitted)

        Returns:
            Rendered report sections in number order
        """
        if settings is None:
            from config.settings import get_settings
            settings = get_settings()

        builders: List[tuple] = self._section_builders(settings)
        wanted = sorted(set(sections)) if sections else list(range(1, len(builders) + 1))

        report = []
        for number in wanted:
            if not 1 <= number <= len(builders):
                raise DataNotFoundError("Report section", str(number))
            title, build = builders[number - 1]
            with self._error_context(f"Report section {number}"):
                report.append(ReportSection(number=number, title=title, body=build()))
        return report

    def print_report(self, settings=None, sections: Optional[List[int]] = None) -> None:
        """Print the numbered catalog report."""
        self._write_lines([section.render() for section in self.build_report(settings, sections)])
