"""Render analysis summaries as console text, a pandas table, or JSON."""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Iterable, List, Mapping

import pandas as pd


def _format_mapping(mapping: Mapping) -> str:
    return "{" + ", ".join(f"{key}={value}" for key, value in mapping.items()) + "}"


def _format_list(values: Iterable) -> str:
    return "[" + ", ".join(repr(value) if isinstance(value, float) else str(value) for value in values) + "]"


def _aggregate_lines(summary: dict) -> List[str]:
    return [
        f"Nucleotide Frequencies: {_format_mapping(summary['frequencies'])}",
        f"Sequence Length Distribution: {_format_mapping(summary['length_distribution'])}",
        f"Most Common Nucleotides: {_format_list(summary['most_common'])}",
    ]


def render_text(summary: dict) -> str:
    """Lay the summary out line by line, one statistic per line."""
    lines = [
        f"Nucleotide Frequencies: {_format_mapping(summary['frequencies'])}",
        f"GC Content of each sequence: {_format_list(summary['gc_content'])}",
        f"AT Content of each sequence: {_format_list(summary['at_content'])}",
        f"Sequence Length Distribution: {_format_mapping(summary['length_distribution'])}",
        f"Most Common Nucleotides: {_format_list(summary['most_common'])}",
        "Complementary Strands:",
    ]
    for result in summary["complements"]:
        lines.append(f"Sequence {result.index}: {result.sequence}")
        if result.ok:
            lines.append(f"Complementary Strand: {result.complement}")
        else:
            lines.append(f"Error: {result.error}")
    if summary.get("aborted"):
        lines.append("Complement generation aborted.")
    return "\n".join(lines)


def summary_frame(summary: dict) -> pd.DataFrame:
    """One row per input sequence with its content percentages and complement."""
    by_index = {result.index: result for result in summary["complements"]}
    rows = []
    for position, sequence in enumerate(summary["sequences"]):
        result = by_index.get(position + 1)
        rows.append(
            {
                "sequence": sequence,
                "length": len(sequence) if sequence is not None else None,
                "gc_percent": summary["gc_content"][position],
                "at_percent": summary["at_content"][position],
                "complement": result.complement if result is not None else None,
                "error": result.error if result is not None else None,
            }
        )
    columns = ["sequence", "length", "gc_percent", "at_percent", "complement", "error"]
    return pd.DataFrame(rows, columns=columns)


def render_table(summary: dict) -> str:
    lines = _aggregate_lines(summary)
    frame = summary_frame(summary)
    if not frame.empty:
        lines.append(frame.to_string(index=False))
    if summary.get("aborted"):
        lines.append("Complement generation aborted.")
    return "\n".join(lines)


def render_json(summary: dict) -> str:
    payload = {
        **summary,
        "complements": [asdict(result) for result in summary["complements"]],
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)


RENDERERS = {
    "text": render_text,
    "table": render_table,
    "json": render_json,
}
