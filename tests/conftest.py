"""Pytest configuration and fixtures."""

import logging
import os
import re

import pytest


@pytest.fixture
def nested_record():
    """Nested record mixing maps, lists and scalar types."""
    return {
        "foo": {
            "jim": "bean",
        },
        "fee": "bar",
        "n1": {
            "alist": [
                "a",
                "b",
                "c",
                {
                    "d": "other",
                    "e": "another",
                },
            ],
        },
        "number": 1.4567,
        "bool": True,
    }


@pytest.fixture
def deep_json():
    """Four levels of nesting as JSON text."""
    return '{ "a": { "b" : { "c" : { "d" : "e" } } } }'


@pytest.fixture
def escaping_merger():
    """Underscore merger that escapes underscores and dots in source keys."""

    def escape(s):
        s = re.sub(r"(_)", r"\1\1", s)
        s = re.sub(r"(\.{2,})", r"\1\1", s)
        return s.replace(".", "_")

    def merge(top, key, subkey):
        if top:
            return key + escape(subkey)
        return key + "_" + escape(subkey)

    return merge


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Environment without FLATKEYS_* variables, run from an empty directory."""
    names = ("FLATKEYS_STYLE", "FLATKEYS_PREFIX", "FLATKEYS_LOG_LEVEL")
    for name in names:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    yield tmp_path

    # load_dotenv writes straight to os.environ
    for name in names:
        os.environ.pop(name, None)


@pytest.fixture
def restore_root_logger():
    """Undo setup_logging changes to the flatkeys logger after the test."""
    logger = logging.getLogger("flatkeys")
    handlers = list(logger.handlers)
    level = logger.level

    yield logger

    logger.handlers = handlers
    logger.setLevel(level)
