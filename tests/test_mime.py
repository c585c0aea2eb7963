import logging

import pytest

from src.transcription.mime import classify, name_from_url


@pytest.mark.parametrize(
    "name, expected",
    [
        ("talk.mp3", "audio/mpeg"),
        ("/tmp/rec/interview.wav", "audio/wav"),
        ("clip.aac", "audio/aac"),
        ("lossless.flac", "audio/flac"),
        ("voice.ogg", "audio/ogg"),
        ("call.webm", "audio/webm"),
        ("call.weba", "audio/webm"),
    ],
)
def test_classify_known_extensions(name, expected):
    assert classify(name) == expected


def test_classify_is_case_insensitive():
    assert classify("LOUD.MP3") == "audio/mpeg"


@pytest.mark.parametrize("name", ["notes.txt", "no_extension", "", "archive.tar.gz"])
def test_classify_unknown_falls_back(name):
    assert classify(name) == "audio/octet-stream"


def test_classify_unknown_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="src.transcription.mime"):
        classify("memo.m4a")

    assert any("audio/octet-stream" in r.getMessage() for r in caplog.records)


def test_classify_known_does_not_warn(caplog):
    with caplog.at_level(logging.WARNING, logger="src.transcription.mime"):
        classify("memo.mp3")

    assert caplog.records == []


def test_name_from_url_ignores_query_and_fragment():
    assert name_from_url("https://cdn.example.com/audio/ep1.mp3?token=abc#t=10") == "ep1.mp3"


def test_name_from_url_decodes_escapes():
    assert name_from_url("https://example.com/my%20talk.wav") == "my talk.wav"


def test_name_from_url_without_path_has_fallback_name():
    assert name_from_url("https://example.com/") == "remote_audio"
