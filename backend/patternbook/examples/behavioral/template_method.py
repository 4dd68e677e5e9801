"""
Template Method - Data exporters

Q: CSV, JSON and Markdown exports all follow the same steps (header, one
line per record, footer) but format each step differently. How do you fix
the overall algorithm and let subclasses fill in the details?
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List


Record = Dict[str, Any]


class DataExporter(ABC):
    def export(self, records: List[Record]) -> str:
        """Template method: the step order is fixed here"""
        columns = self.columns(records)
        lines = []
        header = self.header(columns)
        if header:
            lines.append(header)
        lines.extend(self.format_record(record, columns) for record in records)
        footer = self.footer(records)
        if footer:
            lines.append(footer)
        output = "\n".join(lines)
        print(f"{type(self).__name__} exported {len(records)} records")
        return output

    def columns(self, records: List[Record]) -> List[str]:
        columns: List[str] = []
        for record in records:
            for key in record:
                if key not in columns:
                    columns.append(key)
        return columns

    def header(self, columns: List[str]) -> str:
        # hook
        return ""

    @abstractmethod
    def format_record(self, record: Record, columns: List[str]) -> str:
        pass

    def footer(self, records: List[Record]) -> str:
        # hook
        return ""


class CsvExporter(DataExporter):
    def header(self, columns: List[str]) -> str:
        return ",".join(columns)

    def format_record(self, record: Record, columns: List[str]) -> str:
        return ",".join(str(record.get(c, "")) for c in columns)


class JsonLinesExporter(DataExporter):
    def format_record(self, record: Record, columns: List[str]) -> str:
        return json.dumps(record, sort_keys=True)


class MarkdownTableExporter(DataExporter):
    def header(self, columns: List[str]) -> str:
        return "| " + " | ".join(columns) + " |\n|" + "---|" * len(columns)

    def format_record(self, record: Record, columns: List[str]) -> str:
        return "| " + " | ".join(str(record.get(c, "")) for c in columns) + " |"

    def footer(self, records: List[Record]) -> str:
        return f"\n_{len(records)} rows_"


def demo() -> Dict[str, str]:
    records = [
        {"sku": "A-1", "qty": 3},
        {"sku": "B-7", "qty": 1},
    ]
    outputs = {}
    for exporter in (CsvExporter(), JsonLinesExporter(), MarkdownTableExporter()):
        outputs[type(exporter).__name__] = exporter.export(records)
    print(outputs["CsvExporter"])
    return outputs
