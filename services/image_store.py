"""Local file storage for uploaded car images.

Files live in one flat directory which the app also serves as static files.
Deletion is best-effort: a file that cannot be removed is logged and left
behind, it never fails the request that asked for the removal.
"""
import atexit
import logging
import os
import random
import time
from concurrent.futures import ThreadPoolExecutor

from werkzeug.security import safe_join
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)


def generate_filename(original_name):
    """Build ``<epoch-ms>-<0..1000>.<ext>`` keeping the upload's extension."""
    ext = secure_filename((original_name or "").rsplit(".", 1)[-1])
    stem = f"{int(time.time() * 1000)}-{random.randint(0, 1000)}"
    return f"{stem}.{ext}" if ext else stem


class ImageStore:
    def __init__(self, directory, max_workers=2):
        self.directory = directory
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="image-cleanup")

    def ensure_directory(self):
        os.makedirs(self.directory, exist_ok=True)
        return self.directory

    def path_for(self, filename):
        return safe_join(self.directory, filename)

    def save(self, file):
        """Write an uploaded ``FileStorage`` and return its generated name."""
        filename = generate_filename(file.filename)
        self.ensure_directory()
        file.save(os.path.join(self.directory, filename))
        logger.info("Saved image %s", filename)
        return filename

    def delete(self, filename):
        """Remove an image file. Returns True when the file was removed."""
        path = self.path_for(filename)
        if path is None:
            logger.error("Refusing to delete image outside %s: %r", self.directory, filename)
            return False
        try:
            os.remove(path)
        except OSError as e:
            logger.error("Failed to delete image %s: %s", filename, e)
            return False
        logger.info("Deleted image %s", filename)
        return True

    def discard(self, filename):
        """Delete an image in the background; the caller does not wait."""
        return self._executor.submit(self.delete, filename)

    def close(self, wait=True):
        self._executor.shutdown(wait=wait)


def create_image_store(directory):
    store = ImageStore(directory)
    store.ensure_directory()
    # let queued deletions finish before the interpreter exits
    atexit.register(store.close)
    return store
