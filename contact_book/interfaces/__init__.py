"""View, controller and terminal front end."""
from .controller import ContactController, confirm_in_terminal
from .terminal import build_local_app, build_remote_app, run_terminal
from .view import ContactForm, ContactItem, ContactView, get_initials

__all__ = [
    "ContactController",
    "ContactForm",
    "ContactItem",
    "ContactView",
    "build_local_app",
    "build_remote_app",
    "confirm_in_terminal",
    "get_initials",
    "run_terminal",
]
