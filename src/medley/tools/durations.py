"""
Duration tools - MCP tools for note values and dotted durations.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from medley.config import MedleyConfig
from medley.core.duration import Duration, NoteValue

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_duration_tools(mcp: ChukMCPServer, config: MedleyConfig) -> dict[str, Any]:
    """
    Register duration tools with the MCP server.

    Args:
        mcp: The MCP server instance
        config: Supplies the default dot count

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def music_list_note_values() -> str:
        """
        List note values and their base time values.

        Time values are fractions of a whole note (semibreve = 1).

        Returns:
            JSON string with note values

        Example:
            music_list_note_values()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "note_values": [
                        {"name": value.name.lower(), "value": value.value} for value in NoteValue
                    ],
                    "count": len(NoteValue),
                }
            )
        except Exception as e:
            logger.exception("Failed to list note values")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_list_note_values"] = music_list_note_values

    @mcp.tool  # type: ignore[arg-type]
    async def music_duration_value(value: str, dots: int | None = None) -> str:
        """
        Time value of a (possibly dotted) note value.

        Args:
            value: Note value name (breve, semibreve, minim, crotchet,
                quaver, semiquaver, demisemiquaver, hemidemisemiquaver)
            dots: Number of dots (0-3, default from config)

        Returns:
            JSON string with the duration and its time value

        Example:
            music_duration_value(value="crotchet", dots=1)
        """
        try:
            if dots is None:
                dots = config.default_dots
            duration = Duration(NoteValue.parse(value), dots)
            return json.dumps(
                {
                    "status": "success",
                    "duration": str(duration),
                    "duration_value": duration.duration_value,
                }
            )
        except Exception as e:
            logger.exception("Failed to compute duration value")
            return json.dumps({"status": "error", "message": str(e)})

    tools["music_duration_value"] = music_duration_value

    return tools
