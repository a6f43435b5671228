"""Tests for prompting helpers."""

import io
from unittest.mock import patch

from rich.console import Console

from meilisearch_keys.prompts import ConsolePrompter, DefaultsPrompter, list_completer


class TestListCompleter:
    """Test completion of comma separated answers."""

    def test_completes_first_entry(self):
        """Test completion without a comma."""
        complete = list_completer(["search", "settings.get", "version"])
        assert complete("se", 0) == "search"
        assert complete("se", 1) == "settings.get"
        assert complete("se", 2) is None

    def test_completes_after_last_comma(self):
        """Test that earlier entries are kept in the completion."""
        complete = list_completer(["documents.add", "documents.get", "search"])
        assert complete("search,doc", 0) == "search,documents.add"
        assert complete("search,doc", 1) == "search,documents.get"
        assert complete("search,doc", 2) is None


class TestDefaultsPrompter:
    """Test the non-interactive prompter."""

    def test_returns_defaults(self):
        """Test that every question is answered with its default."""
        prompter = DefaultsPrompter()
        assert prompter.ask("Name?", "Foo") == "Foo"
        assert prompter.ask_with_completion("Actions?", ["search"], "*") == "*"
        assert prompter.ask("Description?") is None
        assert prompter.questions == ["Name?", "Actions?", "Description?"]


class TestConsolePrompter:
    """Test the rich backed prompter."""

    def test_blank_answer_keeps_default(self):
        """Test that an empty answer returns the default."""
        prompter = ConsolePrompter(Console(file=io.StringIO()))
        with patch("meilisearch_keys.prompts.Prompt.ask", return_value="") as ask:
            assert prompter.ask("Name?", "Foo") == "Foo"
        ask.assert_called_once()

    def test_answer_is_returned(self):
        """Test that typed answers are returned as-is."""
        prompter = ConsolePrompter(Console(file=io.StringIO()))
        with patch("meilisearch_keys.prompts.Prompt.ask", return_value="search,version"):
            assert prompter.ask_with_completion("Actions?", ["search"], "*") == "search,version"
