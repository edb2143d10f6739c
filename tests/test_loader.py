import logging

import pytest

from catalog.book import BookEntry
from catalog.errors import DecodeFieldError, NullInputError
from catalog.loader import LibraryFileLoader


def test_decodes_rows_in_file_order(books_csv):
    loader = LibraryFileLoader()
    assert loader.load_file_content(books_csv) is True
    assert loader.content_loaded()

    books = loader.parse_file_content()
    assert books == [
        BookEntry("Dune", ["Herbert"], 4.5, "0441013597", 412),
        BookEntry("Foo", ["A", "B"], 3.0, "123", 100),
    ]

def test_header_line_is_skipped(make_csv):
    path = make_csv([], header="Dune,Herbert,4.5,0441013597,412")
    loader = LibraryFileLoader()
    assert loader.load_file_content(path)
    assert loader.parse_file_content() == []

def test_n_rows_yield_n_books(make_csv):
    rows = [f"Book {i},Author {i},{i % 6},isbn{i},{i * 10}" for i in range(25)]
    loader = LibraryFileLoader()
    loader.load_file_content(make_csv(rows))
    books = loader.parse_file_content()
    assert [b.title for b in books] == [f"Book {i}" for i in range(25)]

def test_accepts_str_path(books_csv):
    loader = LibraryFileLoader()
    assert loader.load_file_content(str(books_csv))
    assert len(loader.parse_file_content()) == 2

def test_blank_lines_are_skipped(make_csv):
    path = make_csv(["Dune,Herbert,4.5,0441013597,412", "", "   ", "Foo,A-B,3.0,123,100"])
    loader = LibraryFileLoader()
    loader.load_file_content(path)
    assert [b.title for b in loader.parse_file_content()] == ["Dune", "Foo"]

@pytest.mark.parametrize("rating,expected", [(" 4.5 ", 4.5), ("+3", 3.0), (".5", 0.5), ("4.", 4.0), ("4e0", 4.0)])
def test_rating_number_formats(make_csv, rating, expected):
    loader = LibraryFileLoader()
    loader.load_file_content(make_csv([f"Dune,Herbert,{rating},1,+412"]))
    book = loader.parse_file_content()[0]
    assert book.rating == expected
    assert book.pages == 412

def test_windows_line_endings(tmp_path):
    path = tmp_path / "crlf.csv"
    path.write_bytes(b"title,authors,rating,isbn,pages\r\nDune,Herbert,4.5,0441013597,412\r\n")
    loader = LibraryFileLoader()
    loader.load_file_content(path)
    assert loader.parse_file_content()[0].pages == 412

def test_missing_file_returns_false(tmp_path, caplog):
    loader = LibraryFileLoader()
    with caplog.at_level(logging.ERROR):
        assert loader.load_file_content(tmp_path / "missing.csv") is False
    assert not loader.content_loaded()
    assert "Reading file content failed" in caplog.text

def test_directory_returns_false(tmp_path):
    assert LibraryFileLoader().load_file_content(tmp_path) is False

def test_failed_load_clears_previous_content(books_csv, tmp_path):
    loader = LibraryFileLoader()
    assert loader.load_file_content(books_csv)
    assert not loader.load_file_content(tmp_path / "missing.csv")
    assert loader.parse_file_content() == []

def test_parse_without_load_reports_error(caplog):
    loader = LibraryFileLoader()
    with caplog.at_level(logging.ERROR):
        assert loader.parse_file_content() == []
    assert "No content loaded before parsing." in caplog.text

def test_none_path_raises():
    with pytest.raises(NullInputError):
        LibraryFileLoader().load_file_content(None)

@pytest.mark.parametrize("row,reason", [
    ("Dune,Herbert,4.5,0441013597", "expected 5 fields but found 4"),
    ("Dune,Herbert,4.5,0441013597,412,extra", "expected 5 fields but found 6"),
    ("Dune,Herbert,great,0441013597,412", "rating is not a number"),
    ("Dune,Herbert,4.5,0441013597,many", "pages is not an integer"),
    ("Dune,Herbert,4.5,0441013597,41.2", "pages is not an integer"),
    ("Dune,Herbert,4.5,1,1_000", "pages is not an integer"),
    ("Dune,Herbert,4.5,1, 412", "pages is not an integer"),
    ("Dune,Herbert,4.5,1,412 ", "pages is not an integer"),
    ("Dune,Herbert,0_4.5,1,412", "rating is not a number"),
    ("Dune,Herbert,nan,1,412", "rating is not a number"),
    ("Dune,Herbert,,1,412", "rating is not a number"),
    ("Dune,Herbert,7.5,0441013597,412", "rating must be between"),
    ("Dune,Herbert,4.5,0441013597,-3", "pages must not be less than"),
    ("Dune,A--B,4.5,0441013597,412", "Author names must not be empty"),
])
def test_malformed_row_raises_with_line_number(make_csv, row, reason):
    path = make_csv(["Foo,A-B,3.0,123,100", row])
    loader = LibraryFileLoader()
    loader.load_file_content(path)
    with pytest.raises(DecodeFieldError) as excinfo:
        loader.parse_file_content()
    assert excinfo.value.line_number == 3
    assert reason in str(excinfo.value)
    assert excinfo.value.line == row
