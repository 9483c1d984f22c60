import unittest

from ..core.paging import derive
from ..models.pagination import PaginationMeta
from ..utils.formatters import PLACEHOLDER, format_range, format_year, truncate_text


class TestFormatters(unittest.TestCase):
    def test_truncate_text(self):
        self.assertEqual(truncate_text(None), PLACEHOLDER)
        self.assertEqual(truncate_text("short"), "short")
        self.assertEqual(truncate_text("abcdefghij", max_length=4), "abcd…")

    def test_truncate_collapses_line_breaks(self):
        self.assertEqual(truncate_text("Georges Seurat\nFrench, 1859-1891"), "Georges Seurat French, 1859-1891")

    def test_format_year(self):
        self.assertEqual(format_year(None), PLACEHOLDER)
        self.assertEqual(format_year(-500), "-500")

    def test_format_range(self):
        self.assertEqual(format_range(None), "No records")
        self.assertEqual(format_range(derive(PaginationMeta.from_counts(1, 0, 12))), "No records")
        self.assertEqual(format_range(derive(PaginationMeta.from_counts(2, 1250, 12))), "13–24 of 1,250")


if __name__ == "__main__":
    unittest.main()
