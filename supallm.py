#!/usr/bin/env python3
"""SupaLLM installer.

Downloads docker-compose.yml and the .env template into the current
directory, asks for the handful of values the stack needs, writes them into
.env and optionally starts the stack.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.prompt import Confirm

from installer import settings
from installer.console import console, error, info, print_banner, success
from installer.envfile import EnvFile
from installer.fetch import fetch_required_files
from installer.launcher import compose_command, launch_stack
from installer.profiles import DEFAULT_PROFILE, PROFILES, Profile, get_profile
from installer.questionnaire import choose_setup_mode, confirm_download, run_questionnaire

START_HINT = "docker compose up -d"


def _configure(profile: Profile) -> dict[str, str]:
    env = EnvFile.load(Path(settings.ENV_FILE))
    if choose_setup_mode() != settings.SETUP_CLI:
        info(f"Skipping the questionnaire. Edit {settings.ENV_FILE} yourself before starting the stack.")
        port = env.get("FRONTEND_PORT")
        return {"FRONTEND_PORT": port} if port else {}
    for line in profile.intro:
        info(line)
    answers = run_questionnaire(profile.fields, env)
    env.flush()
    return answers


def _print_next_steps(dashboard_port: str, launched: bool) -> None:
    success("\n🎉 Your Supallm instance is ready.")
    console.print("------------------------------------------------")
    console.print("📄 Next Steps:\n")
    steps = [] if launched else [f"Start your stack with: [cyan]{START_HINT}[/cyan]"]
    steps.append(f"Open the dashboard at [cyan]http://localhost:{dashboard_port}[/cyan] 🚀")
    for idx, step in enumerate(steps, start=1):
        console.print(f"    {idx}. {step}\n")
    if not launched:
        console.print(f"Run [cyan]{START_HINT}[/cyan] to launch it.")


def cmd_install(args: argparse.Namespace) -> int:
    profile = get_profile(args.profile)
    print_banner()

    if not confirm_download():
        error("Operation cancelled by the user.")
        return 0

    info("➡️  Downloading required files...")
    fetch_required_files()

    answers = _configure(profile)
    dashboard_port = answers.get("FRONTEND_PORT", str(settings.DEFAULT_DASHBOARD_PORT))

    launched = False
    if profile.offers_launch and args.launch is not False:
        if args.launch or Confirm.ask("Start SupaLLM now with docker compose?", default=True, console=console):
            launch_stack()
            launched = True

    _print_next_steps(dashboard_port, launched)
    return 0


def cmd_launch(args: argparse.Namespace) -> int:
    if not Path(settings.COMPOSE_FILE).exists():
        raise RuntimeError(f"Missing {settings.COMPOSE_FILE} in {Path.cwd()}. Run install first.")
    return launch_stack()


def cmd_profiles(args: argparse.Namespace) -> int:
    for name, profile in PROFILES.items():
        marker = " (default)" if name == DEFAULT_PROFILE else ""
        keys = ", ".join(f.key for f in profile.fields)
        console.print(f"[bold]{name}[/bold]{marker}: {profile.description}")
        console.print(f"    keys: {keys}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="SupaLLM installer")
    sub = parser.add_subparsers(dest="command", required=True)

    p_install = sub.add_parser("install", help="Download the stack files and configure .env")
    p_install.add_argument("--profile", choices=sorted(PROFILES), default=DEFAULT_PROFILE)
    p_install.add_argument(
        "--launch", action="store_true", default=None, help="Start the stack after setup without asking"
    )
    p_install.add_argument("--no-launch", dest="launch", action="store_false", help="Never start the stack")
    p_install.set_defaults(func=cmd_install)

    p_launch = sub.add_parser("launch", help=f"Run {' '.join(compose_command())} in this directory")
    p_launch.set_defaults(func=cmd_launch)

    p_profiles = sub.add_parser("profiles", help="List questionnaire profiles")
    p_profiles.set_defaults(func=cmd_profiles)

    return parser


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else list(argv)
    # Default behavior is the one-command install.
    if not argv:
        argv = ["install"]
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
