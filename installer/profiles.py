"""Questionnaire profiles. Each historic installer variant is one entry here."""

from __future__ import annotations

from dataclasses import dataclass, field

from installer import settings
from installer.questionnaire import (
    DERIVED,
    PASSWORD,
    PORT,
    SECRET,
    Field,
    not_empty,
    port_validator,
)

DEFAULT_PROFILE = "local"


@dataclass(frozen=True)
class Profile:
    name: str
    description: str
    fields: list[Field]
    intro: list[str] = field(default_factory=list)
    offers_launch: bool = False


SECRET_FIELD = Field(
    key="SECRET_KEY",
    prompt="Generate a secret key for encrypting sensitive database values? (recommended)",
    kind=SECRET,
)

DASHBOARD_PORT_FIELD = Field(
    key="FRONTEND_PORT",
    prompt=f"Enter the port you want to run the dashboard on (default is {settings.DEFAULT_DASHBOARD_PORT})",
    validator=port_validator(reserved={settings.DEFAULT_BACKEND_PORT, *settings.INFRA_PORTS}),
    default=str(settings.DEFAULT_DASHBOARD_PORT),
    kind=PORT,
)


def _api_url(answers: dict[str, str]) -> str:
    return f"http://localhost:{answers.get('BACKEND_PORT', settings.DEFAULT_BACKEND_PORT)}"


CLERK = Profile(
    name="clerk",
    description="Clerk-managed users and organizations",
    intro=[
        "We use Clerk to manage users and organizations.",
        "You can get Clerk keys for FREE at https://clerk.com/. We plan to remove this dependency asap.",
    ],
    fields=[
        Field(
            key="CLERK_PUBLISHABLE_KEY",
            prompt="Enter your Clerk Publishable Key",
            validator=not_empty(
                "Clerk Publishable Key cannot be empty. This is where your organization will be stored."
            ),
        ),
        Field(
            key="CLERK_SECRET_KEY",
            prompt="Enter your Clerk Secret Key",
            validator=not_empty(
                "Clerk Secret Key cannot be empty. This is where your organization will be stored."
            ),
        ),
        SECRET_FIELD,
        DASHBOARD_PORT_FIELD,
    ],
)

LOCAL = Profile(
    name="local",
    description="Built-in initial user, dashboard and backend ports",
    fields=[
        Field(
            key="INITIAL_USER_EMAIL",
            prompt="Enter the email of the initial admin user",
            validator=not_empty("Email cannot be empty."),
            default="admin@supallm.com",
        ),
        Field(
            key="INITIAL_USER_PASSWORD",
            prompt="Enter the password of the initial admin user",
            validator=not_empty("Password cannot be empty."),
            default="supallm123",
            kind=PASSWORD,
        ),
        SECRET_FIELD,
        DASHBOARD_PORT_FIELD,
        Field(
            key="BACKEND_PORT",
            prompt=f"Enter the port you want to run the backend on (default is {settings.DEFAULT_BACKEND_PORT})",
            validator=port_validator(reserved=settings.INFRA_PORTS, distinct_from=("FRONTEND_PORT",)),
            default=str(settings.DEFAULT_BACKEND_PORT),
            kind=PORT,
        ),
        Field(key="SUPALLM_API_URL", kind=DERIVED, derive=_api_url),
    ],
    offers_launch=True,
)

PROFILES = {p.name: p for p in (LOCAL, CLERK)}


def get_profile(name: str) -> Profile:
    try:
        return PROFILES[name]
    except KeyError:
        raise RuntimeError(f"Unknown profile '{name}'. Available: {', '.join(PROFILES)}") from None
