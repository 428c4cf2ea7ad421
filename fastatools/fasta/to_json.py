"""Convert FASTA records to a JSON object of per-character arrays."""

import json
import logging
from typing import Dict, TextIO

from Bio import SeqIO

logger = logging.getLogger('fastatools.fasta.to_json')


def _format_tokens(sequence: str, quote: bool) -> str:
    if quote:
        return json.dumps(list(sequence), separators=(',', ':'))
    # Legacy bare tokens, e.g. [A,C,G]
    return '[' + ','.join(sequence) + ']'


def fasta_to_json(handle: TextIO, out: TextIO, quote: bool = True) -> int:
    """
    Write ``{"header": ["A", "C", ...], ...}`` for every record in ``handle``.

    The key is the full header text after '>'. Headers are JSON-escaped.
    With ``quote=False`` each character is written bare, which is only
    valid JSON for numeric tokens. If a header repeats, the last record
    wins and keeps the position of the first.

    Args:
        handle: Text stream of FASTA data
        out: Stream receiving the JSON
        quote: Write characters as JSON strings

    Returns:
        Number of distinct headers written
    """
    entries: Dict[str, str] = {}
    total = 0

    for record in SeqIO.parse(handle, 'fasta'):
        total += 1
        if record.description in entries:
            logger.warning(f"Duplicate header {record.description!r}; keeping the last record")
        entries[record.description] = _format_tokens(str(record.seq), quote)

    out.write("{\n")
    out.write(",\n".join(
        f"{json.dumps(header)} : {tokens}" for header, tokens in entries.items()
    ))
    if entries:
        out.write("\n")
    out.write("}\n")

    logger.info(f"Converted {total} records ({len(entries)} distinct headers)")
    return len(entries)
