from __future__ import annotations

import os
import zipfile
from pathlib import Path

from .errors import WriteError


def staged_files(staging_dir: Path) -> list[Path]:
    return sorted(
        (entry for entry in staging_dir.iterdir() if entry.is_file()),
        key=lambda entry: entry.name,
    )


def write_archive(staging_dir: Path, destination: Path) -> Path:
    """Zip every file of ``staging_dir`` into ``destination``.

    Entries are deflated, sorted by name and stored without a directory
    prefix. The archive is assembled next to ``destination`` and only renamed
    into place once complete.
    """
    partial = destination.with_name(f".{destination.name}.part")
    try:
        files = staged_files(staging_dir)
        with zipfile.ZipFile(partial, "w", zipfile.ZIP_DEFLATED) as archive:
            for path in files:
                archive.write(path, arcname=path.name, compress_type=zipfile.ZIP_DEFLATED)
        os.replace(partial, destination)
    except (OSError, zipfile.BadZipFile, ValueError) as exc:
        partial.unlink(missing_ok=True)
        raise WriteError(f"failed to create zip archive {destination.name}: {exc}") from exc
    except BaseException:
        partial.unlink(missing_ok=True)
        raise
    return destination
