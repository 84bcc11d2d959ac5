"""Tests for the interactive terminal loop using scripted input."""
from __future__ import annotations

import io

from contact_book.config import Settings
from contact_book.interfaces import build_local_app, run_terminal


def _scripted(*answers):
    remaining = list(answers)

    def _input(prompt: str) -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _input


def _local_app():
    return build_local_app(Settings(storage_force_memory=True), confirm=lambda message: True)


def test_add_then_quit():
    controller = _local_app()
    out = io.StringIO()

    run_terminal(controller, input_fn=_scripted("a", "Ana", "ana@x.com", "555", "q"), out=out)

    assert [c.name for c in controller.model.contacts] == ["Ana"]
    assert "Goodbye!" in out.getvalue()


def test_edit_keeps_blank_answers():
    controller = _local_app()
    controller.model.add("Ana", "ana@x.com", "555")

    run_terminal(controller, input_fn=_scripted("e 1", "Ana B.", "", "", "q"), out=io.StringIO())

    contact = controller.model.contacts[0]
    assert (contact.name, contact.email, contact.phone) == ("Ana B.", "ana@x.com", "555")


def test_delete_and_out_of_range():
    controller = _local_app()
    controller.model.add("Ana", "ana@x.com", "555")
    out = io.StringIO()

    run_terminal(controller, input_fn=_scripted("d 5", "d 1"), out=out)

    assert controller.model.contacts == []
    assert "Selection out of range." in out.getvalue()


def test_incomplete_form_is_rejected():
    controller = _local_app()
    out = io.StringIO()

    run_terminal(controller, input_fn=_scripted("a", "Ana", "", ""), out=out)

    assert controller.model.contacts == []
    assert "all required" in out.getvalue()


def test_search_command_filters_view():
    controller = _local_app()
    controller.model.add("Ana", "ana@x.com", "555")
    controller.model.add("Ben", "ben@x.com", "556")

    run_terminal(controller, input_fn=_scripted("s ben"), out=io.StringIO())

    assert [item.name for item in controller.view.items] == ["Ben"]
