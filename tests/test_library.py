import logging

import pytest
from unittest.mock import MagicMock

from catalog.book import BookEntry
from catalog.errors import NullInputError
from catalog.library import Library
from catalog.loader import LibraryFileLoader


def test_new_library_is_empty(lib):
    assert lib.is_empty()
    assert len(lib) == 0
    assert lib.get_book_data() == []

def test_load_data_appends_in_order(lib, books_csv, make_csv):
    assert lib.load_data(books_csv) == 2
    more = make_csv(["Ulysses,James Joyce,3.8,9780199535675,730"], name="more.csv")
    assert lib.load_data(more) == 1
    assert [b.title for b in lib.get_book_data()] == ["Dune", "Foo", "Ulysses"]

def test_loading_same_file_twice_keeps_duplicates(lib, books_csv):
    lib.load_data(books_csv)
    lib.load_data(books_csv)
    assert len(lib) == 4

def test_get_book_data_is_live(loaded_lib):
    books = loaded_lib.get_book_data()
    books.pop()
    assert len(loaded_lib) == 1

def test_unreadable_file_adds_nothing(loaded_lib, tmp_path):
    assert loaded_lib.load_data(tmp_path / "missing.csv") == 0
    assert len(loaded_lib) == 2

def test_malformed_row_aborts_whole_load(loaded_lib, make_csv, caplog):
    path = make_csv([
        "Sapiens,Yuval Noah Harari,4.4,9780099590088,498",
        "Broken,Nobody,not-a-number,000,1",
        "Ulysses,James Joyce,3.8,9780199535675,730",
    ], name="broken.csv")
    with caplog.at_level(logging.ERROR):
        assert loaded_lib.load_data(path) == 0
    assert [b.title for b in loaded_lib.get_book_data()] == ["Dune", "Foo"]
    assert "aborted" in caplog.text
    assert "Line 3" in caplog.text

def test_load_data_uses_given_loader(books_csv):
    book = BookEntry("Stub", ["Someone"], 1.0, "1", 1)
    loader = MagicMock(spec=LibraryFileLoader)
    loader.load_file_content.return_value = True
    loader.parse_file_content.return_value = [book]

    lib = Library(loader=loader)
    assert lib.load_data(books_csv) == 1
    loader.load_file_content.assert_called_once_with(books_csv)
    assert lib.get_book_data() == [book]

def test_load_data_skips_parsing_when_read_fails(tmp_path):
    loader = MagicMock(spec=LibraryFileLoader)
    loader.load_file_content.return_value = False

    lib = Library(loader=loader)
    assert lib.load_data(tmp_path / "x.csv") == 0
    loader.parse_file_content.assert_not_called()

def test_load_data_requires_path(lib):
    with pytest.raises(NullInputError):
        lib.load_data(None)

def test_load_data_requires_loader(lib, books_csv):
    lib.loader = None
    with pytest.raises(NullInputError):
        lib.load_data(books_csv)

def test_replace_book_data(loaded_lib):
    book = BookEntry("Only", ["One"], 2.0, "9", 9)
    live = loaded_lib.get_book_data()
    loaded_lib.replace_book_data([book])
    assert loaded_lib.get_book_data() == [book]
    assert live is loaded_lib.get_book_data()

def test_replace_book_data_requires_books(lib):
    with pytest.raises(NullInputError):
        lib.replace_book_data(None)
