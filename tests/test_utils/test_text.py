"""Tests for comma-separated field splitting."""

from movie_catalog.utils.text import split_csv


class TestSplitCsv:
    """Tests for split_csv."""

    def test_trims_and_drops_blanks(self) -> None:
        assert split_csv(" Action , ,Drama,  ") == ["Action", "Drama"]

    def test_keeps_order_and_duplicates(self) -> None:
        assert split_csv("Emma Thomas, Charles Roven, Emma Thomas") == [
            "Emma Thomas",
            "Charles Roven",
            "Emma Thomas",
        ]

    def test_empty_and_none(self) -> None:
        assert split_csv("") == []
        assert split_csv(None) == []
