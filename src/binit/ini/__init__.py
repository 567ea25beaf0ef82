"""INI decoding for binit.

Usage:
    from binit.ini import Casing, IniReader

    reader = IniReader(separator=".", casing=Casing.UPPER)
    reader.decode(b"[db]\\nhost = localhost\\n")  # {"DB.HOST": ["localhost"]}
"""

from binit.ini.casing import Casing, parse_casing
from binit.ini.reader import TRUE, IniReader, ValueSink

__all__ = [
    "Casing",
    "parse_casing",
    "IniReader",
    "ValueSink",
    "TRUE",
]
