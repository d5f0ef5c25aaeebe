"""
Parser for the text returned by the Redis INFO command
"""

from typing import Dict, Union

LINE_SEPARATOR = "\r\n"
FIELD_DELIMITER = ":"


def parse_info(blob: Union[str, bytes, None]) -> Dict[str, str]:
    """
    Decode an INFO blob into a flat field mapping

    Lines without a delimiter (section headers such as "# Server", blank lines,
    garbage) are skipped. Values keep any embedded ':' characters. Never raises.
    """
    if blob is None:
        return {}
    if isinstance(blob, bytes):
        blob = blob.decode("utf-8", errors="replace")
    elif not isinstance(blob, str):
        blob = str(blob)

    fields = {}
    for line in blob.split(LINE_SEPARATOR):
        if FIELD_DELIMITER not in line:
            continue
        key, value = line.split(FIELD_DELIMITER, 1)
        fields[key] = value
    return fields
