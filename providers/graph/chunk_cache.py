"""On-disk cache of resolver output for runtimes that cannot run the graph tool."""

import json
from pathlib import Path
from typing import Union

from loguru import logger

from core.exceptions import CacheMissingError
from core.models import RawResolverOutput


class ResolverCache:
    """Reads and writes the resolver cache file.

    The file holds the raw resolver output verbatim, with paths relative to
    the working directory so it stays valid on other machines. It is
    overwritten on every build where the live tool runs and only read
    otherwise.
    """

    def __init__(self, cache_file: Union[str, Path]):
        self.cache_file = Path(cache_file)

    def exists(self) -> bool:
        return self.cache_file.is_file()

    def load(self) -> RawResolverOutput:
        """Load the cached resolver output.

        Raises:
            CacheMissingError: If the file is absent or cannot be parsed
        """
        if not self.exists():
            raise CacheMissingError(str(self.cache_file), "file not found")

        try:
            with open(self.cache_file, encoding="utf-8") as f:
                data = json.load(f)
            raw = RawResolverOutput.from_dict(data)
        except (OSError, json.JSONDecodeError, ValueError) as e:
            raise CacheMissingError(str(self.cache_file), str(e), cause=e)

        logger.debug(f"Loaded {len(raw.chunk)} cached chunk descriptors from {self.cache_file}")
        return raw

    def save(self, raw: RawResolverOutput) -> None:
        """Persist resolver output, replacing any previous contents."""
        self.cache_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.cache_file, "w", encoding="utf-8") as f:
            f.write(json.dumps(raw.to_dict(), indent=2) + "\n")
        logger.debug(f"Wrote resolver cache {self.cache_file}")
