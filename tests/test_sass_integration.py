"""Integration tests compiling token imports with libsass."""

from __future__ import annotations

from pathlib import Path

import pytest
import sass

from sass_tokens import ImporterOptions, OutputMode, TokenImporter


def _compile(source: str, importer: TokenImporter) -> str:
    return sass.compile(string=source, importers=[(0, importer.as_libsass_importer())])


class TestLibsassIntegration:
    """Tests running the importer through a real Sass compiler."""

    def test_variables(self, dtcg_importer: TokenImporter) -> None:
        css = _compile(
            '@import "token:colors";\n.button { color: $color-primary; }',
            dtcg_importer,
        )
        assert "color: #0066cc" in css

    def test_maps(self, dtcg_dir: Path) -> None:
        importer = TokenImporter(dtcg_dir, ImporterOptions(output=OutputMode.MAP))
        css = _compile(
            '@import "token:spacing";\n'
            ".card { padding: map-get($spacing, sm) map-get($spacing, md); }",
            importer,
        )
        assert "padding: 8px 16px" in css

    def test_resolved_aliases(self, dtcg_importer: TokenImporter) -> None:
        css = _compile(
            '@import "token:aliases";\n.link { color: $color-action; }',
            dtcg_importer,
        )
        assert "color: #0066cc" in css

    def test_typography_composite(self, dtcg_importer: TokenImporter) -> None:
        css = _compile(
            '@import "token:typography";\n'
            ".heading { font-size: map-get($typography-heading-h1, font-size); }",
            dtcg_importer,
        )
        assert "font-size: 32px" in css

    def test_border_composite(self, dtcg_importer: TokenImporter) -> None:
        css = _compile(
            '@import "token:shadows";\n'
            ".box { border-width: map-get($border-thin, width); }",
            dtcg_importer,
        )
        assert "border-width: 1px" in css

    def test_multiple_directories(self, dtcg_dir: Path, style_dictionary_dir: Path) -> None:
        importer = TokenImporter([dtcg_dir, style_dictionary_dir])
        css = _compile(
            '@import "token:colors";\n@import "token:sizes";\n'
            ".test { color: $color-primary; margin: $size-sm; }",
            importer,
        )
        assert "color: #0066cc" in css
        assert "margin: 8px" in css

    def test_unknown_import_fails(self, dtcg_importer: TokenImporter) -> None:
        with pytest.raises(sass.CompileError):
            _compile('@import "token:nonexistent";', dtcg_importer)
