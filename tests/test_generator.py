"""Tests for SCSS generation."""

from __future__ import annotations

from sass_tokens import OutputMode, TokenRecord, generate_scss, sanitize_name


class TestSanitizeName:
    def test_camel_case(self) -> None:
        assert sanitize_name("primaryHover") == "primary-hover"

    def test_invalid_characters(self) -> None:
        assert sanitize_name("size/large") == "size-large"
        assert sanitize_name("1.5x") == "1-5x"

    def test_collapse_and_trim_dashes(self) -> None:
        assert sanitize_name("--weird  name--") == "weird-name"

    def test_underscore_kept(self) -> None:
        assert sanitize_name("snake_case") == "snake_case"


class TestVariablesMode:
    """Tests for flat variable output."""

    def test_flat_variables(self, palette_records: list[TokenRecord]) -> None:
        scss = generate_scss(palette_records, OutputMode.VARIABLES)

        assert scss == (
            "$color-primary: #0066cc;\n"
            "$color-secondary: #ff6600;\n"
            "$spacing-sm: 8px;\n"
            "$spacing-md: 16px;\n"
        )

    def test_default_mode_is_variables(self, palette_records: list[TokenRecord]) -> None:
        assert generate_scss(palette_records) == generate_scss(
            palette_records, OutputMode.VARIABLES
        )

    def test_composite_inline_map(self) -> None:
        records = [
            TokenRecord(
                path=["typography", "body"],
                type="typography",
                value={"fontFamily": ["Georgia", "serif"], "fontSize": "16px"},
            )
        ]
        scss = generate_scss(records, OutputMode.VARIABLES)

        assert scss.startswith("$typography-body: (\n")
        assert '  font-family: ("Georgia", serif),\n' in scss
        assert "  font-size: 16px,\n" in scss
        assert scss.endswith(");\n")

    def test_duplicates_emitted(self) -> None:
        records = [
            TokenRecord(path=["a"], type="number", value=1),
            TokenRecord(path=["a"], type="number", value=2),
        ]
        assert generate_scss(records) == "$a: 1;\n$a: 2;\n"


class TestMapMode:
    """Tests for nested map output."""

    def test_grouped_by_top_level(self, palette_records: list[TokenRecord]) -> None:
        scss = generate_scss(palette_records, OutputMode.MAP)

        assert scss == (
            "$color: (\n"
            "  primary: #0066cc,\n"
            "  secondary: #ff6600,\n"
            ");\n"
            "\n"
            "$spacing: (\n"
            "  sm: 8px,\n"
            "  md: 16px,\n"
            ");\n"
        )

    def test_deeply_nested(self) -> None:
        records = [
            TokenRecord(path=["typography", "heading", "h1"], type="dimension", value="32px"),
            TokenRecord(path=["typography", "heading", "h2"], type="dimension", value="24px"),
        ]
        scss = generate_scss(records, OutputMode.MAP)

        assert scss == (
            "$typography: (\n"
            "  heading: (\n"
            "    h1: 32px,\n"
            "    h2: 24px,\n"
            "  ),\n"
            ");\n"
        )

    def test_single_segment_is_flat(self) -> None:
        records = [TokenRecord(path=["gutter"], type="dimension", value="12px")]
        assert generate_scss(records, OutputMode.MAP) == "$gutter: 12px;\n"

    def test_keys_sanitized(self) -> None:
        records = [TokenRecord(path=["brandColors", "darkBlue"], type="color", value="#003")]
        scss = generate_scss(records, OutputMode.MAP)

        assert "$brand-colors: (" in scss
        assert "dark-blue: #003," in scss


class TestEmpty:
    def test_empty_records(self) -> None:
        assert generate_scss([], OutputMode.VARIABLES) == ""
        assert generate_scss([], OutputMode.MAP) == ""
