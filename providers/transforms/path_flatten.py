"""Reversible flattening of nested source paths under one reserved area.

The compiler scopes its @package visibility check per directory. Files under
the reserved top-level area (``core/`` by default) group related code in
subdirectories but are meant to share one visibility scope, so before
compilation they are moved into the area's top directory with each former
directory boundary recorded by ``FLATTEN_TOKEN``::

    core/renderers/common/block.js  ->  core/renderers-slash-common-slash-block.js

The original basename stays as the suffix, so two distinct nested paths can
never collide. ``reverse`` swaps the token back for the path separator in
paths under the area only; it is applied to the ``sources`` of emitted
source maps.
"""

import os
from dataclasses import dataclass
from typing import List

from core.exceptions import ValidationError

FLATTEN_TOKEN = "-slash-"

DEFAULT_FLATTEN_AREA = "core"


@dataclass(frozen=True)
class PathParts:
    """A path split the way a rename callback sees it.

    Attributes:
        dirname: Directory relative to the source base, e.g. "core/renderers"
        basename: File name without extension, e.g. "block"
        extname: Extension including the dot, e.g. ".js"
    """

    dirname: str
    basename: str
    extname: str = ""


class PathFlattenTransform:
    """Flattens paths under ``area`` and restores them."""

    def __init__(
        self,
        area: str = DEFAULT_FLATTEN_AREA,
        token: str = FLATTEN_TOKEN,
        sep: str = os.sep,
    ):
        if not area:
            raise ValidationError("area", area, "Flatten area cannot be empty")
        if not token or sep in token:
            raise ValidationError("token", token, "Token must be non-empty and separator-free")
        self.area = area
        self.token = token
        self.sep = sep

    def applies_to(self, parts: PathParts) -> bool:
        return parts.dirname.split(self.sep)[0] == self.area

    def forward(self, parts: PathParts) -> PathParts:
        """Flatten ``parts`` if it lies under the reserved area.

        Raises:
            ValidationError: If a segment already contains the token, since
                the rewrite could then not be undone
        """
        if not self.applies_to(parts):
            return parts

        segments: List[str] = parts.dirname.split(self.sep)[1:] + [parts.basename]
        for segment in segments:
            if self.token in segment:
                raise ValidationError(
                    "path",
                    self.join(parts),
                    f"Segment '{segment}' contains reserved token '{self.token}'",
                )

        return PathParts(
            dirname=self.area,
            basename=self.token.join(segments),
            extname=parts.extname,
        )

    def reverse(self, flat_path: str) -> str:
        """Restore a flattened path; strings outside the area are returned as-is."""
        prefix = self.area + self.sep
        if not flat_path.startswith(prefix):
            return flat_path
        return prefix + flat_path[len(prefix):].replace(self.token, self.sep)

    def split(self, path: str) -> PathParts:
        index = path.rfind(self.sep)
        dirname, name = (path[:index], path[index + 1:]) if index >= 0 else ("", path)
        basename, extname = os.path.splitext(name)
        return PathParts(dirname=dirname, basename=basename, extname=extname)

    def join(self, parts: PathParts) -> str:
        name = parts.basename + parts.extname
        return f"{parts.dirname}{self.sep}{name}" if parts.dirname else name

    def flatten_path(self, path: str) -> str:
        return self.join(self.forward(self.split(path)))

    def unflatten_path(self, path: str) -> str:
        return self.reverse(path)


_default_transform = PathFlattenTransform()


def flatten_path(path: str) -> str:
    """Flatten ``path`` under the default area with the platform separator."""
    return _default_transform.flatten_path(path)


def unflatten_path(path: str) -> str:
    """Undo ``flatten_path`` on a single path string."""
    return _default_transform.unflatten_path(path)
