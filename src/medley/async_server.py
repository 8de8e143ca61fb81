#!/usr/bin/env python3
"""
Async Medley MCP Server using chuk-mcp-server

This server exposes the medley value library as MCP tools:
- Parsing note notation ("C#4", "Bb", "A-1") and re-spelling notes
- Building notes from MIDI numbers or frequencies, transposing them
- Converting between Hz, MIDI numbers, piano keys and cents
- Computing dotted duration values

Set MEDLEY_CONFIG to a YAML file to override the defaults.
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from medley.config import CONFIG_ENV, load_config
from medley.tools import (
    register_duration_tools,
    register_frequency_tools,
    register_note_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("medley")

CONFIG_PATH = Path(os.environ[CONFIG_ENV]) if os.environ.get(CONFIG_ENV) else None

config = load_config(CONFIG_PATH)

# Register all tools
note_tools = register_note_tools(mcp, config)
frequency_tools = register_frequency_tools(mcp, config)
duration_tools = register_duration_tools(mcp, config)

# Export tool functions for direct access
music_parse_note = note_tools["music_parse_note"]
music_note_from_midi = note_tools["music_note_from_midi"]
music_note_from_frequency = note_tools["music_note_from_frequency"]
music_transpose_note = note_tools["music_transpose_note"]
music_switch_accidental = note_tools["music_switch_accidental"]

music_frequency_to_midi = frequency_tools["music_frequency_to_midi"]
music_midi_to_frequency = frequency_tools["music_midi_to_frequency"]
music_frequency_to_piano_key = frequency_tools["music_frequency_to_piano_key"]
music_piano_key_to_frequency = frequency_tools["music_piano_key_to_frequency"]
music_cents_between = frequency_tools["music_cents_between"]
music_semitones_to_frequency = frequency_tools["music_semitones_to_frequency"]

music_list_note_values = duration_tools["music_list_note_values"]
music_duration_value = duration_tools["music_duration_value"]

logger.info("Medley MCP Server initialized")
logger.info(f"  Config: {CONFIG_PATH or 'defaults'}")
logger.info(f"  Reference pitch: {config.reference_pitch} Hz")
