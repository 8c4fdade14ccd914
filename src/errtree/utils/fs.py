# SPDX-FileCopyrightText: 2023-present Datadog, Inc. <dev@datadoghq.com>
#
# SPDX-License-Identifier: MIT
from __future__ import annotations

import os
import pathlib
import sys
from tempfile import mkstemp

# There is special recognition in Mypy for `sys.platform`, not `os.name`
if sys.platform == 'win32':
    _PathBase = pathlib.WindowsPath
else:
    _PathBase = pathlib.PosixPath


class Path(_PathBase):
    def ensure_dir_exists(self) -> None:
        self.mkdir(parents=True, exist_ok=True)

    def write_atomic(self, text: str, encoding: str = 'utf-8') -> None:
        """Replace the file's contents so that readers never observe a partial write."""
        self.parent.ensure_dir_exists()

        fd, path = mkstemp(dir=self.parent, prefix=f'.{self.name}.')
        try:
            with os.fdopen(fd, 'w', encoding=encoding) as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())

            os.replace(path, self)
        except BaseException:
            os.remove(path)
            raise
