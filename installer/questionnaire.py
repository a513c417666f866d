"""Interactive questionnaire driven by a declarative list of fields."""

from __future__ import annotations

import base64
import secrets
from dataclasses import dataclass
from typing import Callable, Optional

from rich.prompt import Confirm, Prompt

from installer import settings
from installer.console import console, error, info
from installer.envfile import EnvFile

Answers = dict[str, str]
Validator = Callable[[str, Answers], Optional[str]]

TEXT = "text"
PASSWORD = "password"
PORT = "port"
SECRET = "secret"
DERIVED = "derived"


@dataclass(frozen=True)
class Field:
    key: str
    prompt: str = ""
    validator: Optional[Validator] = None
    default: Optional[str] = None
    kind: str = TEXT
    derive: Optional[Callable[[Answers], str]] = None


# ── Validators ────────────────────────────────────────────────


def not_empty(message: str) -> Validator:
    def check(value: str, answers: Answers) -> Optional[str]:
        if not value or not value.strip():
            return message
        return None

    return check


def _as_port(value) -> Optional[int]:
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def port_validator(reserved=(), distinct_from=()) -> Validator:
    """Reject non-numeric ports, reserved ports and ports already taken by ``distinct_from`` keys."""
    reserved = sorted(int(p) for p in reserved)

    def check(value: str, answers: Answers) -> Optional[str]:
        port = _as_port(value)
        if port is None:
            return f"'{value}' is not a valid port number."
        if not 1 <= port <= 65535:
            return "Port must be between 1 and 65535."
        if port in reserved:
            listed = ", ".join(str(p) for p in reserved)
            return f"Port is already in use. Please choose a different port than {listed}."
        for key in distinct_from:
            other = answers.get(key)
            if other is not None and _as_port(other) == port:
                return f"{key} is already set to {port}, cannot use the same port twice."
        return None

    return check


def generate_secret_key(nbytes: int = 32) -> str:
    return base64.b64encode(secrets.token_bytes(nbytes)).decode("ascii")


# ── Prompts ───────────────────────────────────────────────────


def ask_choice(message: str, choices: list[str], default: Optional[str] = None) -> str:
    console.print(f"[bold]{message}[/bold]")
    for idx, label in enumerate(choices, start=1):
        console.print(f"  {idx}) {label}")
    numbers = [str(i) for i in range(1, len(choices) + 1)]
    default_number = str(choices.index(default) + 1) if default in choices else "1"
    picked = Prompt.ask("Enter choice", choices=numbers, default=default_number, console=console)
    return choices[int(picked) - 1]


def confirm_download() -> bool:
    picked = ask_choice(
        "We will download the .env and the docker-compose file in the current directory. "
        "Any file with the same name will be overridden, continue?",
        [settings.CONTINUE, settings.CANCEL],
        default=settings.CONTINUE,
    )
    return picked == settings.CONTINUE


def choose_setup_mode() -> str:
    return ask_choice(
        "Now we'll help you to setup your project. How do you want to continue?",
        [settings.SETUP_CLI, settings.SETUP_CUSTOM],
        default=settings.SETUP_CLI,
    )


def ask_field(field: Field, answers: Answers) -> str:
    """Prompt until the field's validator accepts the answer."""
    kwargs = {"password": field.kind == PASSWORD, "console": console}
    if field.default is not None:
        kwargs["default"] = field.default
        kwargs["show_default"] = field.kind != PASSWORD
    while True:
        try:
            value = Prompt.ask(field.prompt, **kwargs)
        except EOFError:
            if field.default is None:
                raise
            console.print(f"Using default: {field.default}")
            value = field.default
        value = "" if value is None else str(value).strip()
        problem = field.validator(value, answers) if field.validator else None
        if problem is None:
            if field.kind == PORT:
                return str(int(value))
            return value
        error(problem)


def resolve(field: Field, answers: Answers) -> Optional[str]:
    if field.kind == DERIVED:
        return field.derive(answers) if field.derive else None
    if field.kind == SECRET:
        if Confirm.ask(field.prompt, default=True, console=console):
            return generate_secret_key()
        return None
    return ask_field(field, answers)


def run_questionnaire(fields: list[Field], env: EnvFile) -> Answers:
    """Collect every field and apply it to ``env`` in memory; the caller flushes."""
    answers: Answers = {}
    for field in fields:
        value = resolve(field, answers)
        if value is None:
            continue
        answers[field.key] = value
        if not env.set(field.key, value):
            info(f"{field.key} is not present in {env.path.name}, left unchanged.")
    return answers
