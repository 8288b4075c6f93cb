import os
import zipfile
import zlib
from typing import List, Optional

from .constants import MANIFEST_NAME
from .errors import ArchiveReadError, NoManifestError


def find_manifest_entry(names: List[str]) -> Optional[str]:
    """Pick the project.json entry of an archive listing.

    Scratch writes the manifest at the archive root. Projects re-zipped by
    hand often nest it one folder down, so fall back to the first entry with
    a matching basename.
    """
    if MANIFEST_NAME in names:
        return MANIFEST_NAME
    for name in names:
        if not name.endswith("/") and name.rsplit("/", 1)[-1] == MANIFEST_NAME:
            return name
    return None


def load_manifest_bytes(path: str) -> bytes:
    if not os.path.isfile(path):
        raise ArchiveReadError("Project file not found", path)

    try:
        with zipfile.ZipFile(path, "r") as archive:
            entry = find_manifest_entry(archive.namelist())
            if entry is None:
                raise NoManifestError(f"{MANIFEST_NAME} not found in the archive", path)
            with archive.open(entry) as handle:
                return handle.read()
    except zipfile.BadZipFile as exc:
        raise ArchiveReadError("Not a readable project archive", str(exc)) from exc
    except (zlib.error, RuntimeError, NotImplementedError, EOFError) as exc:
        # Damaged deflate data, encrypted entries, unsupported compression
        raise ArchiveReadError("Could not extract project.json", str(exc)) from exc
    except OSError as exc:
        raise ArchiveReadError("Could not read project archive", str(exc)) from exc


def load_manifest_text(path: str) -> str:
    """Return the manifest text of a project archive.

    Raises ArchiveReadError when the archive itself cannot be read and
    NoManifestError when it is readable but holds no manifest. Undecodable
    bytes raise UnicodeDecodeError; the caller treats that as a corrupt
    manifest.
    """
    return load_manifest_bytes(path).decode("utf-8-sig")
