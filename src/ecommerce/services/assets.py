"""
Uploaded asset files (brand logos, category/product images, avatars).

Uploads land in a temporary folder under ASSET_ROOT; once the entity is saved
the file is moved into the entity's folder and the relative path is stored in
the record. File system calls run in the thread pool so the event loop never
blocks on disk I/O.
"""

import logging
import shutil
import uuid
from pathlib import Path
from typing import Protocol

from starlette.concurrency import run_in_threadpool

from ecommerce.exceptions.base import BadRequestError

logger = logging.getLogger(__name__)


class AssetStorage(Protocol):
    async def move(self, reference: str, folder: str) -> str: ...

    async def delete(self, path: str) -> None: ...


class LocalAssetStorage:
    """
    AssetStorage on the local file system.

    References and stored paths are POSIX-style paths relative to `root`
    (e.g. "temp/logo.png" -> "brands/9b1e...c4.png"). Every moved file gets a
    fresh name so two uploads with the same file name never share a path.
    """

    def __init__(self, root: Path | str, temp_dir: str = "temp"):
        self.root = Path(root).resolve()
        self.temp_dir = temp_dir

    def resolve(self, reference: str) -> Path | None:
        """Absolute path of a reference, or None when it points outside the root."""
        candidate = (self.root / reference.lstrip("/\\")).resolve()
        if not candidate.is_relative_to(self.root):
            return None
        return candidate

    async def move(self, reference: str, folder: str) -> str:
        """Move an uploaded file into `folder` and return its durable relative path."""
        return await run_in_threadpool(self._move, reference, folder)

    async def delete(self, path: str) -> None:
        """Remove a stored file. Failures are logged, never raised."""
        try:
            await run_in_threadpool(self._delete, path)
        except OSError as exc:
            logger.warning("assets.delete.failed", extra={"path": path, "error": str(exc)})

    def _move(self, reference: str, folder: str) -> str:
        source = self.resolve(reference)
        if source is None or not source.is_file():
            raise BadRequestError(f"The uploaded file {reference} was not found")

        target_dir = (self.root / folder).resolve()
        if source.parent == target_dir:
            return f"{folder}/{source.name}"

        target_dir.mkdir(parents=True, exist_ok=True)
        name = f"{uuid.uuid4().hex}{source.suffix.lower()}"
        shutil.move(str(source), str(target_dir / name))

        logger.debug("assets.move.success", extra={"reference": reference, "folder": folder, "stored": name})
        return f"{folder}/{name}"

    def _delete(self, path: str) -> None:
        target = self.resolve(path)
        if target is None:
            logger.warning("assets.delete.outside_root", extra={"path": path})
            return
        target.unlink(missing_ok=True)
        logger.debug("assets.delete.success", extra={"path": path})
