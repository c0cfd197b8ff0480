"""
Tests for ExportService CSV serialization.
"""

from datetime import date, datetime

import pytest

from models.category import Category
from models.entry import Entry
from services.errors import EmptyExportError
from services.export_service import BOM, ExportService
from utils.constants import DELETED_CATEGORY_LABEL

T = int(datetime(2026, 6, 15, 9, 5).timestamp() * 1000)


@pytest.fixture
def exporter():
    return ExportService()


def _rows(text):
    assert text.startswith(BOM)
    return text[len(BOM):].split("\n")


def test_header_and_escaped_row(exporter):
    cats = [Category(id="c1", name="A,B", color="#4CAF50", order=0)]
    out = exporter.export([Entry(id="e1", category_id="c1", timestamp=T)], cats)
    assert _rows(out) == [
        '"timestamp_display","category_name","category_id"',
        '"2026/06/15 09:05","A,B","c1"',
    ]


def test_empty_raises(exporter):
    with pytest.raises(EmptyExportError):
        exporter.export([], [])


def test_sorted_ascending(exporter):
    cats = {"c1": Category(id="c1", name="One", color="#4CAF50")}
    later = Entry(id="e2", category_id="c1", timestamp=T + 60_000)
    earlier = Entry(id="e1", category_id="c1", timestamp=T)
    rows = _rows(exporter.export([later, earlier], cats))
    assert rows[1].startswith('"2026/06/15 09:05"')
    assert rows[2].startswith('"2026/06/15 09:06"')


def test_deleted_category_keeps_raw_id(exporter):
    out = exporter.export([Entry(id="e1", category_id="cat_gone", timestamp=T)], {})
    assert _rows(out)[1] == f'"2026/06/15 09:05","{DELETED_CATEGORY_LABEL}","cat_gone"'


def test_embedded_quote_doubled(exporter):
    cats = [Category(id="c1", name='Say "hi"', color="#4CAF50")]
    out = exporter.export([Entry(id="e1", category_id="c1", timestamp=T)], cats)
    assert _rows(out)[1] == '"2026/06/15 09:05","Say ""hi""","c1"'


def test_no_trailing_newline(exporter):
    out = exporter.export([Entry(id="e1", category_id="c1", timestamp=T)], {})
    assert not out.endswith("\n")
    assert out.count("\n") == 1


def test_deterministic(exporter):
    cats = [Category(id="c1", name="One", color="#4CAF50")]
    data = [
        Entry(id="e1", category_id="c1", timestamp=T),
        Entry(id="e2", category_id="c1", timestamp=T),
        Entry(id="e3", category_id="c9", timestamp=T - 1),
    ]
    first = exporter.export(data, cats).encode("utf-8")
    second = exporter.export(list(data), list(cats)).encode("utf-8")
    assert first == second
    assert first.startswith(b"\xef\xbb\xbf")


def test_suggested_filename():
    assert ExportService.suggested_filename(date(2026, 10, 17)) == "front_counter_20261017.csv"
