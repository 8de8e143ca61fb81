"""
Frequency tools - MCP tools for pitch arithmetic.

Conversions between Hz, MIDI note numbers, piano keys and cents.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from medley.config import MedleyConfig
from medley.core.frequency import (
    cents_between,
    frequency_from_midi_number,
    frequency_from_piano_key,
    frequency_from_semitones,
    midi_number_from_frequency,
    piano_key_from_frequency,
    semitones_from_cents,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_frequency_tools(mcp: ChukMCPServer, config: MedleyConfig) -> dict[str, Any]:
    """
    Register frequency conversion tools with the MCP server.

    Args:
        mcp: The MCP server instance
        config: Supplies the reference pitch for semitone distances

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_frequency_to_midi(frequency: float) -> str:
        """
        Nearest MIDI note number for a frequency.

        Args:
            frequency: Frequency in Hz (8.176-12543.854)

        Returns:
            JSON string with the MIDI note number

        Example:
            music_frequency_to_midi(frequency=261.63)
        """
        try:
            return json.dumps(
                {"status": "success", "midi_number": midi_number_from_frequency(frequency)}
            )
        except Exception as e:
            logger.exception("Failed to convert frequency to MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_frequency_to_midi"] = music_frequency_to_midi

    @mcp.tool  # type: ignore[arg-type]
    async def music_midi_to_frequency(midi_number: int) -> str:
        """
        Frequency of a MIDI note number.

        Args:
            midi_number: MIDI note number (0-127)

        Returns:
            JSON string with the frequency in Hz

        Example:
            music_midi_to_frequency(midi_number=69)
        """
        try:
            return json.dumps(
                {"status": "success", "frequency": frequency_from_midi_number(midi_number)}
            )
        except Exception as e:
            logger.exception("Failed to convert MIDI to frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_midi_to_frequency"] = music_midi_to_frequency

    @mcp.tool  # type: ignore[arg-type]
    async def music_frequency_to_piano_key(frequency: float) -> str:
        """
        Nearest piano key (1-88) for a frequency.

        Args:
            frequency: Frequency in Hz (27.5-4186.01)

        Returns:
            JSON string with the piano key number

        Example:
            music_frequency_to_piano_key(frequency=440.0)
        """
        try:
            return json.dumps(
                {"status": "success", "piano_key": piano_key_from_frequency(frequency)}
            )
        except Exception as e:
            logger.exception("Failed to convert frequency to piano key")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_frequency_to_piano_key"] = music_frequency_to_piano_key

    @mcp.tool  # type: ignore[arg-type]
    async def music_piano_key_to_frequency(piano_key: int) -> str:
        """
        Frequency of a piano key.

        Args:
            piano_key: Piano key number (1-88, 49 = A4)

        Returns:
            JSON string with the frequency in Hz

        Example:
            music_piano_key_to_frequency(piano_key=40)
        """
        try:
            return json.dumps(
                {"status": "success", "frequency": frequency_from_piano_key(piano_key)}
            )
        except Exception as e:
            logger.exception("Failed to convert piano key to frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_piano_key_to_frequency"] = music_piano_key_to_frequency

    @mcp.tool  # type: ignore[arg-type]
    async def music_cents_between(reference: float, frequency: float) -> str:
        """
        Distance between two frequencies in cents and whole semitones.

        Args:
            reference: Reference frequency in Hz (> 0)
            frequency: Target frequency in Hz (> 0)

        Returns:
            JSON string with cents and semitones

        Example:
            music_cents_between(reference=440.0, frequency=880.0)
        """
        try:
            cents = cents_between(reference, frequency)
            return json.dumps(
                {
                    "status": "success",
                    "cents": cents,
                    "semitones": semitones_from_cents(cents),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute cents")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_cents_between"] = music_cents_between

    @mcp.tool  # type: ignore[arg-type]
    async def music_semitones_to_frequency(semitones: int) -> str:
        """
        Frequency at a semitone distance from the configured reference pitch.

        Args:
            semitones: Distance from the reference (negative = below)

        Returns:
            JSON string with the frequency and the reference used

        Example:
            music_semitones_to_frequency(semitones=-9)
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "reference": config.reference_pitch,
                    "frequency": frequency_from_semitones(semitones, config.reference_pitch),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_semitones_to_frequency"] = music_semitones_to_frequency

    return tools
