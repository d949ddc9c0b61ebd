"""Run the transcription pipeline against a local audio file.

Usage: python scripts/transcribe_file.py path/to/audio.mp3
"""

import asyncio
import mimetypes
import os
import sys

from voicescribe.services import (
    AudioUpload,
    ConfigurationError,
    TranscriptionError,
    create_text_cleaning_service,
    create_transcribe_service,
)


async def main() -> int:
    if len(sys.argv) < 2:
        print("Usage: python scripts/transcribe_file.py [path/to/audio.mp3]")
        return 2

    file_path = sys.argv[1]
    if not os.path.exists(file_path):
        print(f"File '{file_path}' not found.")
        return 1

    with open(file_path, "rb") as f:
        audio = AudioUpload(
            filename=os.path.basename(file_path),
            content=f.read(),
            content_type=mimetypes.guess_type(file_path)[0] or "application/octet-stream",
        )

    try:
        transcriber = create_transcribe_service()
        cleaner = create_text_cleaning_service()
    except ConfigurationError as e:
        print(f"Configuration Error: {e}")
        return 1

    print(f"Transcribing {len(audio.content)} bytes with {transcriber.model}...")
    try:
        raw_text = await transcriber.transcribe(audio)
    except TranscriptionError as e:
        print(f"\nTranscription Error: {e}")
        return 1

    outcome = await cleaner.clean_text_with_details(raw_text)

    print("\n--- Original Transcript ---")
    print(outcome.original_text)
    print(f"\n--- Cleaned Transcript ({outcome.result.value}) ---")
    print(outcome.cleaned_text)
    if outcome.error:
        print(f"\nCleaning error: {outcome.error}")
    print("---------------------------")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
