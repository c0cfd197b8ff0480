"""CSV serialization of the entry log.

Output is deterministic for a given input: entries are ordered by timestamp
(stable, so equal timestamps keep their stored order), every field is quoted,
rows are joined with a bare newline and there is no trailing newline. The
document starts with a UTF-8 byte-order mark so spreadsheet tools pick the
right encoding.
"""
import csv
import io
from datetime import date
from models.category import Category
from models.entry import Entry
from services.category_service import CategoryService
from services.errors import EmptyExportError
from utils.constants import EXPORT_FILENAME_PREFIX, EXPORT_HEADER
from utils.date_helpers import format_export_timestamp, format_file_date

BOM = "\ufeff"


class ExportService:
    def export(self, entries: list[Entry], categories: dict[str, Category] | list[Category]) -> str:
        if not entries:
            raise EmptyExportError("There is no data to export.")
        category_map = categories if isinstance(categories, dict) else {c.id: c for c in categories}

        buf = io.StringIO()
        writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(EXPORT_HEADER)
        for e in sorted(entries, key=lambda e: e.timestamp):
            writer.writerow([
                format_export_timestamp(e.timestamp),
                CategoryService.resolve_name(e.category_id, category_map),
                e.category_id,
            ])
        return BOM + buf.getvalue().removesuffix("\n")

    @staticmethod
    def suggested_filename(on: date) -> str:
        return f"{EXPORT_FILENAME_PREFIX}{format_file_date(on)}.csv"
