"""Streaming audio and video transcription backed by Google Gemini."""

__version__ = "0.1.0"
