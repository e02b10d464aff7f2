# topmark:header:start
#
#   project      : BiomeDump
#   file         : __init__.py
#   file_relpath : src/biomedump/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""BiomeDump package.

BiomeDump prints a single, fixed biome record as pretty-printed JSON. The
record model, the serializer and the emitter are importable for reuse; the
``biomedump`` console script wires them to standard output.
"""

from __future__ import annotations
