#!/usr/bin/env python3
"""
Example: Parse notes, re-spell them and turn them into MIDI messages.

This demonstrates the value layer end to end:
- Parsing notation into Notes
- Frequency / MIDI number / piano key conversions
- Enharmonic switching with octave bookkeeping
- Dotted durations
- note_on / note_off messages for a short phrase

Usage:
    python examples/note_tour.py
"""

from medley import Duration, Note, NoteValue
from medley.compiler import note_from_message, note_off_message, note_on_message
from medley.core import piano_key_from_frequency


def main() -> None:
    """Walk through the library."""
    print("Parsing notes...")
    for text in ["C4", "C#4", "Bb", "A-1", "E#5"]:
        note = Note.parse(text)
        print(f"  {text:>4} -> {note} (MIDI {note.midi_number}, {note.frequency:.3f} Hz)")

    print("\nPiano keys...")
    for text in ["A0", "C4", "A4", "C8"]:
        note = Note.parse(text)
        print(f"  {note}: key {piano_key_from_frequency(note.frequency)}")

    print("\nSwitching accidentals...")
    note = Note.parse("C4")
    for _ in range(2):
        before = str(note)
        note.switch_accidental()
        print(f"  {before} -> {note}")

    print("\nDotted crotchets...")
    for dots in range(4):
        duration = Duration(NoteValue.CROTCHET, dots)
        print(f"  {duration}: {duration.duration_value}")

    print("\nMIDI messages...")
    for text in ["D4", "F4", "A4"]:
        note = Note.parse(text, volume=80)
        print(f"  {note}: {note_on_message(note)} / {note_off_message(note)}")

    note = note_from_message(note_on_message(Note.parse("Eb5")))
    print(f"  back from MIDI: {note} (volume {note.volume})")


if __name__ == "__main__":
    main()
