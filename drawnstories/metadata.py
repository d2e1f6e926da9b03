"""CoMet and ComicInfo sidecar files for CBZ archives.

CoMet: http://www.denvog.com/comet/comet-specification/
ComicInfo: https://wiki.mobileread.com/wiki/ComicRack
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from .errors import WriteError
from .models import Book

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

COMET_FILENAME = "CoMet.xml"
COMIC_INFO_FILENAME = "ComicInfo.xml"

XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
COMET_NAMESPACE = "http://www.denvog.com/comet/"
COMET_SCHEMA_LOCATION = "http://www.denvog.com http://www.denvog.com/comet/comet.xsd"


def _element(parent: ET.Element, tag: str, value) -> None:
    ET.SubElement(parent, tag).text = str(value)


def _serialize(root: ET.Element) -> bytes:
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return (XML_DECLARATION + body + "\n").encode("utf-8")


def build_comet(book: Book) -> bytes:
    root = ET.Element(
        "comet",
        {
            "xmlns:comet": COMET_NAMESPACE,
            "xmlns:xsi": XSI_NAMESPACE,
            "xsi:schemaLocation": COMET_SCHEMA_LOCATION,
        },
    )
    _element(root, "title", book.title)
    _element(root, "issue", book.issue_number)
    _element(root, "publisher", book.publisher)
    _element(root, "pages", book.page_count)
    _element(root, "format", "Comic")
    return _serialize(root)


def build_comic_info(book: Book) -> bytes:
    root = ET.Element(
        "ComicInfo",
        {
            "xmlns:xsi": XSI_NAMESPACE,
            "xmlns:xsd": XSD_NAMESPACE,
        },
    )
    _element(root, "Title", book.title)
    _element(root, "Publisher", book.publisher)
    _element(root, "Number", book.issue_number)
    _element(root, "PageCount", book.page_count)
    return _serialize(root)


def write_metadata(directory: Path, book: Book) -> list[Path]:
    written: list[Path] = []
    for filename, builder in (
        (COMET_FILENAME, build_comet),
        (COMIC_INFO_FILENAME, build_comic_info),
    ):
        target = directory / filename
        try:
            target.write_bytes(builder(book))
        except OSError as exc:
            raise WriteError(f"failed to create {filename}: {exc}") from exc
        written.append(target)
    return written
