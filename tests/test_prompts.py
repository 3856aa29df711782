import pytest

from md2html.errors import PromptAborted
from md2html.utils import prompts
from md2html.utils.prompts import ClickPrompter, DialogPrompter, make_prompter


class _Dialog:
    def __init__(self, result):
        self.result = result

    def run(self):
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result


def test_make_prompter():
    assert isinstance(make_prompter(True), DialogPrompter)
    assert isinstance(make_prompter(False), ClickPrompter)


def test_dialog_choose_returns_value(monkeypatch):
    seen = {}

    def fake_radiolist(**kw):
        seen.update(kw)
        return _Dialog("b.md")

    monkeypatch.setattr(prompts, "radiolist_dialog", fake_radiolist)
    assert DialogPrompter().choose("Pick", ["a.md", "b.md"]) == "b.md"
    assert seen["values"] == [("a.md", "a.md"), ("b.md", "b.md")]


def test_dialog_cancel_raises(monkeypatch):
    monkeypatch.setattr(prompts, "radiolist_dialog", lambda **kw: _Dialog(None))
    with pytest.raises(PromptAborted):
        DialogPrompter().choose("Pick", ["a.md"])

    monkeypatch.setattr(prompts, "yes_no_dialog", lambda **kw: _Dialog(KeyboardInterrupt()))
    with pytest.raises(PromptAborted):
        DialogPrompter().confirm("Open?")


def test_dialog_confirm(monkeypatch):
    monkeypatch.setattr(prompts, "yes_no_dialog", lambda **kw: _Dialog(False))
    assert DialogPrompter().confirm("Open?") is False
