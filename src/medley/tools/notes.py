"""
Note tools - MCP tools for parsing and manipulating notes.

Tools for parsing notation, building notes from MIDI numbers or
frequencies, transposing and re-spelling.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from medley.config import MedleyConfig
from medley.score import Note

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def note_to_dict(note: Note) -> dict[str, Any]:
    """Serialize a note for tool responses."""
    return {
        "notation": note.notation,
        "display": str(note),
        "letter": note.letter.value,
        "accidental": note.accidental.value,
        "pitch_class": note.tone.pitch_class,
        "octave": note.octave,
        "midi_number": note.midi_number,
        "frequency": round(note.frequency, 3),
        "duration": str(note.duration),
        "duration_value": note.duration_value,
        "volume": note.volume,
    }


def register_note_tools(mcp: ChukMCPServer, config: MedleyConfig) -> dict[str, Any]:
    """
    Register note tools with the MCP server.

    Args:
        mcp: The MCP server instance
        config: Defaults for octave, volume and duration

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def parse(notation: str) -> Note:
        return Note.parse(
            notation,
            duration=config.default_duration,
            volume=config.default_volume,
            default_octave=config.default_octave,
        )

    @mcp.tool  # type: ignore[arg-type]
    async def music_parse_note(notation: str) -> str:
        """
        Parse a note from notation.

        Notation is a letter A-G, an optional accidental ('b' or '#')
        and an optional octave (may be negative). Octave defaults to 4.

        Args:
            notation: Note such as "C4", "C#4", "Bb" or "A-1"

        Returns:
            JSON string with note details

        Example:
            music_parse_note(notation="F#3")
        """
        try:
            note = parse(notation)
            return json.dumps({"status": "success", "note": note_to_dict(note)})
        except Exception as e:
            logger.exception("Failed to parse note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_parse_note"] = music_parse_note

    @mcp.tool  # type: ignore[arg-type]
    async def music_note_from_midi(midi_number: int) -> str:
        """
        Build a note from a MIDI note number.

        Args:
            midi_number: MIDI note number (0-127, 60 = middle C)

        Returns:
            JSON string with note details

        Example:
            music_note_from_midi(midi_number=69)
        """
        try:
            note = Note.from_midi(
                midi_number, duration=config.default_duration, volume=config.default_volume
            )
            return json.dumps({"status": "success", "note": note_to_dict(note)})
        except Exception as e:
            logger.exception("Failed to build note from MIDI number")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_note_from_midi"] = music_note_from_midi

    @mcp.tool  # type: ignore[arg-type]
    async def music_note_from_frequency(frequency: float) -> str:
        """
        Build a note from a frequency.

        The note snaps to the nearest semitone; the original frequency
        is kept and the deviation reported in cents.

        Args:
            frequency: Frequency in Hz (8.176-12543.854)

        Returns:
            JSON string with note details and deviation in cents

        Example:
            music_note_from_frequency(frequency=445.0)
        """
        try:
            from medley.core.frequency import cents_between, frequency_from_midi_number

            note = Note.from_frequency(
                frequency, duration=config.default_duration, volume=config.default_volume
            )
            deviation = cents_between(frequency_from_midi_number(note.midi_number), frequency)
            return json.dumps(
                {
                    "status": "success",
                    "note": note_to_dict(note),
                    "deviation_cents": round(deviation, 2),
                }
            )
        except Exception as e:
            logger.exception("Failed to build note from frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_note_from_frequency"] = music_note_from_frequency

    @mcp.tool  # type: ignore[arg-type]
    async def music_transpose_note(notation: str, semitones: int) -> str:
        """
        Transpose a note by a number of semitones.

        The result is spelled with sharps. Fails without changes if the
        result leaves the MIDI range (0-127).

        Args:
            notation: Note such as "C4"
            semitones: Shift (positive = up, negative = down)

        Returns:
            JSON string with the original and transposed notes

        Example:
            music_transpose_note(notation="C4", semitones=7)
        """
        try:
            original = parse(notation)
            transposed = original.copy()
            transposed.transpose(semitones)
            return json.dumps(
                {
                    "status": "success",
                    "original": note_to_dict(original),
                    "transposed": note_to_dict(transposed),
                }
            )
        except Exception as e:
            logger.exception("Failed to transpose note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_transpose_note"] = music_transpose_note

    @mcp.tool  # type: ignore[arg-type]
    async def music_switch_accidental(notation: str) -> str:
        """
        Re-spell a note with its enharmonic alternative.

        C#4 becomes Db4, C4 becomes B#3. The pitch does not change. The
        switched notation is for display: parsing "B#3" back gives MIDI 48,
        not the 60 of the switched note.

        Args:
            notation: Note such as "C#4"

        Returns:
            JSON string with the original and re-spelled notes

        Example:
            music_switch_accidental(notation="A#2")
        """
        try:
            original = parse(notation)
            switched = original.copy()
            switched.switch_accidental()
            return json.dumps(
                {
                    "status": "success",
                    "original": note_to_dict(original),
                    "switched": note_to_dict(switched),
                }
            )
        except Exception as e:
            logger.exception("Failed to switch accidental")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_switch_accidental"] = music_switch_accidental

    return tools
