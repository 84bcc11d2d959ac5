"""Interactive terminal front end for the contact book."""
from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from ..config import Settings
from ..contacts import LocalContactModel, RemoteContactModel, get_storage
from .controller import ContactController, ConfirmPrompt, confirm_in_terminal
from .view import ContactItem, ContactView

HELP_TEXT = (
    "[a] add  [e N] edit  [d N] delete  [s TEXT] search  "
    "[s] clear search  [r] reload  [q] quit"
)

InputFn = Callable[[str], str]


def build_local_app(
    settings: Settings, *, confirm: ConfirmPrompt = confirm_in_terminal
) -> ContactController:
    model = LocalContactModel(get_storage(settings))
    return ContactController(model, ContactView(), confirm=confirm)


def build_remote_app(
    settings: Settings,
    *,
    confirm: ConfirmPrompt = confirm_in_terminal,
    session=None,
) -> ContactController:
    model = RemoteContactModel(settings.api_url, session=session, timeout=settings.api_timeout)
    return ContactController(model, ContactView(), confirm=confirm)


def run_terminal(
    controller: ContactController,
    *,
    input_fn: InputFn = input,
    out: Optional[TextIO] = None,
) -> None:
    """Read commands until quit or end of input."""
    out = out or sys.stdout
    view = controller.view
    while True:
        print("\n" + view.render_text(), file=out)
        print(HELP_TEXT, file=out)
        try:
            raw = input_fn("> ").strip()
        except EOFError:
            print("Goodbye!", file=out)
            return
        if not raw:
            continue

        command, _, argument = raw.partition(" ")
        command = command.lower()
        argument = argument.strip()

        if command in {"q", "quit", "exit"}:
            print("Goodbye!", file=out)
            return
        if command == "a":
            view.open_add_form()
            _fill_form(view, input_fn, out)
        elif command in {"e", "d"}:
            item = _select_item(view, argument, out)
            if item is None:
                continue
            if command == "d":
                item.on_delete()
            else:
                item.on_edit()
                if view.modal_open:
                    _fill_form(view, input_fn, out)
        elif command == "s":
            view.set_search(argument)
        elif command == "r":
            controller.refresh()
        else:
            print("Unknown command.", file=out)


def _select_item(view: ContactView, argument: str, out: TextIO) -> Optional[ContactItem]:
    if not argument.isdigit():
        print("Please enter a contact number.", file=out)
        return None
    idx = int(argument) - 1
    if idx < 0 or idx >= len(view.items):
        print("Selection out of range.", file=out)
        return None
    return view.items[idx]


def _fill_form(view: ContactView, input_fn: InputFn, out: TextIO) -> None:
    """Prompt for each field; an empty answer keeps the current value."""
    print(f"\n--- {view.modal_title} ---", file=out)
    form = view.form
    for field_name in ("name", "email", "phone"):
        current = getattr(form, field_name)
        suffix = f" [{current}]" if current else ""
        answer = input_fn(f"{field_name.capitalize()}{suffix}: ").strip()
        if answer:
            setattr(form, field_name, answer)
    if not view.submit_form():
        print("Name, email and phone are all required.", file=out)
        view.close_modal()
