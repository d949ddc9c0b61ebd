"""Voicescribe: audio transcription with AI text cleanup."""
