"""Sass importer that serves token JSON files as SCSS modules.

Example:
    from sass_tokens import ImporterOptions, OutputMode, TokenImporter

    importer = TokenImporter(["tokens/"], ImporterOptions(output=OutputMode.MAP))
    url = importer.canonicalize("token:colors")
    if url is not None:
        print(importer.load(url).contents)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Sequence, Union

from sass_tokens.errors import TokenFileError
from sass_tokens.pipeline import ImporterOptions, ImporterResult, compile_tokens

log = logging.getLogger(__name__)

TOKEN_SCHEME = "token:"
TOKEN_FILE_SUFFIX = ".json"

PathLike = Union[str, Path]


class TokenImporter:
    """Resolve ``token:`` imports against token directories and convert them.

    Results are cached per file for the lifetime of the importer.
    """

    def __init__(
        self,
        token_paths: PathLike | Sequence[PathLike],
        options: ImporterOptions | None = None,
    ):
        """Initialize the importer.

        Args:
            token_paths: Directory or directories searched in order.
            options: Conversion settings (defaults to flat variables with
                     alias resolution).
        """
        if isinstance(token_paths, (str, Path)):
            token_paths = [token_paths]
        self._token_dirs = [Path(p).resolve() for p in token_paths]
        self._options = options or ImporterOptions()
        self._cache: dict[str, ImporterResult] = {}

    @property
    def token_dirs(self) -> list[Path]:
        return list(self._token_dirs)

    @property
    def options(self) -> ImporterOptions:
        return self._options

    def canonicalize(self, url: str) -> str | None:
        """Map an import URL to a canonical ``token:<absolute path>`` URL.

        Both ``token:name`` and bare ``name`` are looked up as ``name.json``
        in each token directory. Already canonical URLs pass through.

        Returns:
            The canonical URL, or None if no token file matches.
        """
        lookup_name = url
        if url.startswith(TOKEN_SCHEME):
            rest = url[len(TOKEN_SCHEME):]
            if rest.startswith("/"):
                return url
            lookup_name = rest

        for token_dir in self._token_dirs:
            candidate = token_dir / f"{lookup_name}{TOKEN_FILE_SUFFIX}"
            if candidate.is_file():
                return f"{TOKEN_SCHEME}{candidate.resolve().as_posix()}"

        return None

    def load(self, canonical_url: str) -> ImporterResult:
        """Load and convert the token file behind a canonical URL.

        Raises:
            TokenFileError: If the file cannot be read or is not valid JSON.
            CircularReferenceError: If the tokens alias each other in a cycle.
        """
        file_path = canonical_url[len(TOKEN_SCHEME):]
        cached = self._cache.get(file_path)
        if cached is not None:
            log.debug("Cache hit for %s", file_path)
            return cached

        document = read_token_file(Path(file_path))
        result = compile_tokens(document, options=self._options)
        self._cache[file_path] = result
        return result

    def clear_cache(self) -> None:
        self._cache.clear()

    def as_libsass_importer(self) -> Callable[[str], list[tuple[str, str]] | None]:
        """Adapt this importer to the libsass ``importers`` callable protocol.

        Example:
            sass.compile(filename="main.scss",
                         importers=[(0, importer.as_libsass_importer())])
        """

        def _import(path: str) -> list[tuple[str, str]] | None:
            canonical = self.canonicalize(path)
            if canonical is None:
                return None
            result = self.load(canonical)
            return [(canonical[len(TOKEN_SCHEME):], result.contents)]

        return _import


def read_token_file(path: Path) -> object:
    """Read and parse a token JSON file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TokenFileError(f"Cannot read token file {path}: {exc}", path=str(path)) from exc

    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise TokenFileError(f"Invalid JSON in token file {path}: {exc}", path=str(path)) from exc
