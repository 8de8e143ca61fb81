"""
Compilation - converts score elements to MIDI messages.

    Note -> note_on / note_off (pitch and velocity)
    note_on / note_off -> Note
"""

from medley.compiler.midi import note_from_message, note_off_message, note_on_message

__all__ = [
    "note_from_message",
    "note_off_message",
    "note_on_message",
]
