"""
MCP tool implementations.

Tools are organized by domain:
- notes - Parsing, transposing and re-spelling notes
- frequency - Hz / MIDI / piano key / cents conversions
- durations - Note values and dotted durations
"""

from medley.tools.durations import register_duration_tools
from medley.tools.frequency import register_frequency_tools
from medley.tools.notes import register_note_tools

__all__ = [
    "register_duration_tools",
    "register_frequency_tools",
    "register_note_tools",
]
