"""Tests for the CoMet and ComicInfo sidecar documents."""

import xml.etree.ElementTree as ET

import pytest

from drawnstories.errors import WriteError
from drawnstories.metadata import (
    COMET_FILENAME,
    COMIC_INFO_FILENAME,
    build_comet,
    build_comic_info,
    write_metadata,
)
from drawnstories.models import Book


@pytest.fixture
def book():
    return Book(
        identifier="x-003",
        title="X",
        issue_number=3,
        publisher="Y",
        pages=("https://drawnstories.ru/a/x-003/a.jpg", "https://drawnstories.ru/a/x-003/b.jpg"),
    )


def test_comet_fields(book):
    root = ET.fromstring(build_comet(book))

    assert root.tag == "comet"
    assert root.findtext("title") == "X"
    assert root.findtext("issue") == "3"
    assert root.findtext("publisher") == "Y"
    assert root.findtext("pages") == "2"
    assert root.findtext("format") == "Comic"
    assert root.get("{http://www.w3.org/2001/XMLSchema-instance}schemaLocation") == (
        "http://www.denvog.com http://www.denvog.com/comet/comet.xsd"
    )


def test_comic_info_fields(book):
    root = ET.fromstring(build_comic_info(book))

    assert root.tag == "ComicInfo"
    assert root.findtext("Title") == "X"
    assert root.findtext("Publisher") == "Y"
    assert root.findtext("Number") == "3"
    assert root.findtext("PageCount") == "2"


def test_documents_have_declaration_and_two_space_indent(book):
    for document in (build_comet(book), build_comic_info(book)):
        text = document.decode("utf-8")
        assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>\n')
        assert "\n  <" in text
        assert "\n    <" not in text


def test_comic_info_declares_namespaces(book):
    text = build_comic_info(book).decode("utf-8")
    assert 'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"' in text
    assert 'xmlns:xsd="http://www.w3.org/2001/XMLSchema"' in text


def test_special_characters_are_escaped():
    book = Book("a-001", "Tom & Jerry <1>", 1, "Oni press", ("u",))
    assert ET.fromstring(build_comic_info(book)).findtext("Title") == "Tom & Jerry <1>"


def test_write_metadata(tmp_path, book):
    written = write_metadata(tmp_path, book)

    assert [path.name for path in written] == [COMET_FILENAME, COMIC_INFO_FILENAME]
    assert (tmp_path / COMIC_INFO_FILENAME).read_bytes() == build_comic_info(book)


def test_write_metadata_into_missing_directory(tmp_path, book):
    with pytest.raises(WriteError):
        write_metadata(tmp_path / "missing", book)
