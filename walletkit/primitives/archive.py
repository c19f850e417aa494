"""In-memory ZIP archive writer."""

import io
import zipfile
from typing import Callable, Sequence, Tuple

ArchiveEntry = Tuple[str, bytes]
ArchiveWriter = Callable[[Sequence[ArchiveEntry]], bytes]


def write_archive(entries: Sequence[ArchiveEntry]) -> bytes:
    """Write entries into a DEFLATE-compressed ZIP and return its bytes.

    Args:
        entries: Sequence of (member name, contents) pairs.

    Returns:
        The finished archive.

    Raises:
        ValueError: If a member name appears more than once.
    """
    seen = set()
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for name, data in entries:
            if name in seen:
                raise ValueError(f"Duplicate archive member: {name}")
            seen.add(name)
            archive.writestr(name, data)
    return buffer.getvalue()
