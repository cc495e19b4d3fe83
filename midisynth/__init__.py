"""Audio ring buffer, spectrum, ADSR envelopes and note input for a MIDI synthesizer."""

__version__ = "0.1.0"