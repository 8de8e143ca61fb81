"""
MIDI messages - Notes to and from mido note_on / note_off messages.

Only pitch and velocity cross this boundary: a note's MIDI number becomes
the message note, its volume the velocity. Messages are built with the
default time of 0; scheduling them is left to the caller.
"""

from __future__ import annotations

from mido import Message

from medley.core.duration import DEFAULT_DURATION, Duration
from medley.errors import FormatError, RangeError
from medley.score.note import Note

MIN_CHANNEL = 0
MAX_CHANNEL = 15

NOTE_MESSAGE_TYPES = ("note_on", "note_off")


def _validate_channel(channel: int) -> None:
    if isinstance(channel, bool) or not isinstance(channel, int):
        raise RangeError(f"Channel must be an integer 0-15, got {channel!r}")
    if not MIN_CHANNEL <= channel <= MAX_CHANNEL:
        raise RangeError(f"Channel must be 0-15, got {channel}")


def note_on_message(note: Note, channel: int = 0) -> Message:
    """
    note_on message sounding a note at its volume.

    Raises:
        RangeError: If channel is outside 0-15
    """
    _validate_channel(channel)
    return Message("note_on", channel=channel, note=note.midi_number, velocity=note.volume)


def note_off_message(note: Note, channel: int = 0) -> Message:
    """
    note_off message releasing a note.

    Raises:
        RangeError: If channel is outside 0-15
    """
    _validate_channel(channel)
    return Message("note_off", channel=channel, note=note.midi_number, velocity=0)


def note_from_message(message: Message, duration: Duration = DEFAULT_DURATION) -> Note:
    """
    Build a Note from a note_on or note_off message.

    The message note gives the pitch (primary spelling) and its velocity
    the volume. Messages carry no length, so the duration is supplied.

    Raises:
        FormatError: If the message is not a note_on or note_off
    """
    if message.type not in NOTE_MESSAGE_TYPES:
        raise FormatError(f"Not a note message: {message.type}")
    return Note.from_midi(message.note, duration=duration, volume=message.velocity)
