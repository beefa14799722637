#!/usr/bin/env python3
"""
Size Aggregation Module

Computes the total size of a path from lstat() sizes. Directories are
summed over everything they transitively contain; symbolic links are
never followed, so a link to a directory counts only as the link itself.

Aggregation is best-effort: anything that cannot be inspected counts as
zero and the walk carries on.
"""

import logging
import os
import stat

logger = logging.getLogger(__name__)


class SizeAggregator:
    """Depth-first size aggregation over real directories"""

    def compute_size(self, path: str) -> int:
        """Return the size of *path* in bytes

        Args:
            path: File, symlink or directory to size

        Returns:
            st_size for non-directories, the sum over all contained
            non-directory nodes for directories, 0 if path can't be inspected
        """
        try:
            st = os.lstat(path)
        except OSError as e:
            logger.debug("Cannot stat %s: %s", path, e)
            return 0

        if not stat.S_ISDIR(st.st_mode):
            return st.st_size

        return self._directory_size(path)

    def _directory_size(self, root: str) -> int:
        """Sum sizes below *root* using an explicit stack of directories"""
        total = 0
        pending = [root]

        while pending:
            current = pending.pop()
            try:
                with os.scandir(current) as entries:
                    for entry in entries:
                        try:
                            st = entry.stat(follow_symlinks=False)
                        except OSError as e:
                            logger.debug("Skipping %s: %s", entry.path, e)
                            continue

                        # lstat() semantics: a symlink to a directory is not S_ISDIR
                        if stat.S_ISDIR(st.st_mode):
                            pending.append(entry.path)
                        else:
                            total += st.st_size
            except OSError as e:
                logger.debug("Cannot open directory %s: %s", current, e)
                continue

        return total
