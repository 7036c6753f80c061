"""Tests de transcripción → nota, incluida la política de fallback."""
from __future__ import annotations

from openai import OpenAIError

from studynotes.repositories.note_repo import NoteRepository
from studynotes.services.voice_service import (
    VOICE_NOTES_TITLE,
    build_transcription_prompt,
    decode_transcription,
    process_transcription,
)
from conftest import fake_client, make_ai


def _assert_fallback(note, key_points, transcription: str) -> None:
    assert note["title"] == VOICE_NOTES_TITLE
    assert note["content"] == transcription
    assert note["tags"] == ["voice"]
    assert note["is_voice_generated"] is True
    assert note["original_transcript"] == transcription
    assert key_points == []


def test_without_ai_saves_raw_transcription() -> None:
    repo = NoteRepository()
    note, key_points = process_transcription(make_ai(None), repo, "hello world")
    _assert_fallback(note, key_points, "hello world")
    assert repo.get_note(note["id"]) == note


def test_ai_failure_falls_back_to_raw_transcription() -> None:
    repo = NoteRepository()
    note, key_points = process_transcription(make_ai(fake_client(OpenAIError("down"))), repo, "raw text")
    _assert_fallback(note, key_points, "raw text")
    assert repo.count() == 1


def test_invalid_json_falls_back() -> None:
    repo = NoteRepository()
    note, key_points = process_transcription(make_ai(fake_client("{oops")), repo, "raw text")
    _assert_fallback(note, key_points, "raw text")


def test_ai_success_uses_structured_fields() -> None:
    repo = NoteRepository()
    client = fake_client(
        {"title": "Lecture 1", "content": "Clean notes", "tags": ["bio", "cells"], "keyPoints": ["ATP"]}
    )
    note, key_points = process_transcription(make_ai(client), repo, "um so cells uh")
    assert note["title"] == "Lecture 1"
    assert note["content"] == "Clean notes"
    assert note["tags"] == ["bio", "cells"]
    assert note["is_voice_generated"] is True
    assert note["original_transcript"] == "um so cells uh"
    assert key_points == ["ATP"]
    prompt = client.chat.completions.calls[0]["messages"][0]["content"]
    assert prompt == build_transcription_prompt("um so cells uh")
    assert 'Transcription: "um so cells uh"' in prompt


def test_decode_defaults() -> None:
    st = decode_transcription({"tags": "bio", "keyPoints": None}, "raw")
    assert st.title == VOICE_NOTES_TITLE
    assert st.content == "raw"
    assert st.tags == []
    assert st.key_points == []


def test_decode_drops_non_string_elements() -> None:
    st = decode_transcription({"title": "T", "content": "C", "tags": ["a", 1, None, "b"]}, "raw")
    assert st.tags == ["a", "b"]
