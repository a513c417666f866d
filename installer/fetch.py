"""Download the compose file and env template into the working directory."""

from __future__ import annotations

from pathlib import Path

import requests

from installer import settings
from installer.console import console

CHUNK_SIZE = 64 * 1024


class DownloadError(RuntimeError):
    pass


def download_file(url: str, dest: str | Path) -> Path:
    """Stream ``url`` into ``dest``, replacing any existing file.

    Raises DownloadError on a transport error or a non-2xx response. A file
    that was partially written is left as is.
    """
    dest = Path(dest)
    with console.status(f"Downloading {dest}..."):
        try:
            with requests.get(url, stream=True, timeout=settings.DOWNLOAD_TIMEOUT) as resp:
                resp.raise_for_status()
                with dest.open("wb") as f:
                    for chunk in resp.iter_content(chunk_size=CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
        except requests.RequestException as exc:
            console.print(f"[red]✖ Failed to download {dest}.[/red]")
            raise DownloadError(f"Failed to download {dest} from {url}: {exc}") from exc
    console.print(f"[green]✔ {dest}[/green] downloaded successfully.")
    return dest


def fetch_required_files() -> list[Path]:
    # Each download completes before the next starts.
    return [download_file(settings.remote_url(remote), local) for remote, local in settings.REQUIRED_FILES]
