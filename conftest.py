import pytest

from catalog.library import Library

HEADER = "title,authors,rating,isbn,pages"

SAMPLE_ROWS = [
    "Dune,Herbert,4.5,0441013597,412",
    "Foo,A-B,3.0,123,100",
]


def write_csv(path, rows, header=HEADER):
    path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def books_csv(tmp_path):
    # Two-book source used by most command tests
    return write_csv(tmp_path / "books.csv", SAMPLE_ROWS)


@pytest.fixture
def lib():
    return Library()


@pytest.fixture
def loaded_lib(lib, books_csv):
    assert lib.load_data(books_csv) == 2
    return lib


@pytest.fixture
def make_csv(tmp_path):
    """Factory writing a CSV source with the standard header."""
    def _make(rows, name="books.csv", header=HEADER):
        return write_csv(tmp_path / name, rows, header=header)
    return _make
