"""Tests for line-count preserving license header removal."""

import pytest

from providers.transforms.license_normalizer import (
    LICENSE_PATTERN,
    LicenseNormalizer,
    line_count,
    normalize,
)
from tests import create_test_file


GOOGLE_HEADER = (
    "/**\n"
    " * @license\n"
    " * Copyright 2021 Google LLC\n"
    " * SPDX-License-Identifier: Apache-2.0\n"
    " */"
)

MIT_HEADER = (
    "/**\n"
    " * @license\n"
    " * Copyright 2012 Massachusetts Institute of Technology\n"
    " * All rights reserved.\n"
    " * SPDX-License-Identifier: Apache-2.0\n"
    " */"
)

SOURCE_BODY = "\n'use strict';\n\ngoog.module('Blockly.utils.dom');\n"


class TestLicensePattern:
    """Test the license block pattern and its capture groups."""

    def test_captures_copyright_and_holder(self):
        match = LICENSE_PATTERN.search(GOOGLE_HEADER)
        assert match is not None
        assert match.group("copyright") == "Copyright 2021 Google LLC"
        assert match.group("holder") == "Google LLC"

    def test_matches_optional_rights_reserved_line(self):
        match = LICENSE_PATTERN.search(MIT_HEADER)
        assert match is not None
        assert match.group("holder") == "Massachusetts Institute of Technology"

    @pytest.mark.parametrize("header", [
        GOOGLE_HEADER.replace("Google LLC", "Example Corp"),
        GOOGLE_HEADER.replace("Apache-2.0", "MIT"),
        GOOGLE_HEADER.replace(" * @license\n", ""),
        GOOGLE_HEADER.replace("2021", "twenty"),
    ])
    def test_near_matches_are_not_recognized(self, header):
        assert LICENSE_PATTERN.search(header) is None


class TestLicenseNormalizer:
    """Test LicenseNormalizer."""

    def test_line_count_preserved(self):
        text = GOOGLE_HEADER + SOURCE_BODY
        result = normalize(text)

        assert line_count(result) == line_count(text)
        assert "@license" not in result
        assert result.endswith(SOURCE_BODY)

    def test_replacement_is_only_line_breaks(self):
        normalizer = LicenseNormalizer()
        result, removed = normalizer.normalize_with_count(GOOGLE_HEADER)

        assert removed == 1
        assert result == "\n" * 4

    def test_rights_reserved_block_keeps_its_extra_line(self):
        result = normalize(MIT_HEADER + SOURCE_BODY)

        assert result == "\n" * 5 + SOURCE_BODY
        assert line_count(result) == line_count(MIT_HEADER + SOURCE_BODY)

    def test_no_match_is_identity(self):
        text = "const x = 1;\n/** Not a license. */\n"
        normalizer = LicenseNormalizer()

        assert normalizer.normalize_with_count(text) == (text, 0)

    def test_multiple_blocks_removed(self):
        text = GOOGLE_HEADER + "\ncode();\n" + MIT_HEADER + "\nmore();\n"
        result, removed = LicenseNormalizer().normalize_with_count(text)

        assert removed == 2
        assert line_count(result) == line_count(text)
        assert "code();" in result and "more();" in result

    def test_near_match_left_untouched(self):
        text = GOOGLE_HEADER.replace("Google LLC", "Example Corp") + SOURCE_BODY
        assert normalize(text) == text

    def test_crlf_line_breaks_mirrored(self):
        text = (GOOGLE_HEADER + SOURCE_BODY).replace("\n", "\r\n")
        result = normalize(text)

        assert result.startswith("\r\n" * 4)
        assert result.count("\r\n") == text.count("\r\n")

    def test_custom_holders(self):
        header = GOOGLE_HEADER.replace("Google LLC", "Example Corp")
        normalizer = LicenseNormalizer(holders=["Example Corp"])

        assert normalizer.normalize(header) == "\n" * 4
        assert normalizer.normalize(GOOGLE_HEADER) == GOOGLE_HEADER

    def test_normalize_file_preserves_crlf(self, temp_dir):
        path = temp_dir / "licensed.js"
        path.write_bytes((GOOGLE_HEADER + SOURCE_BODY).replace("\n", "\r\n").encode("utf-8"))

        text, removed = LicenseNormalizer().normalize_file(path)

        assert removed == 1
        assert "\r\n" in text
        assert "@license" not in text

    def test_normalize_file_without_header(self, temp_dir):
        path = create_test_file(temp_dir, "plain.js", "var a = 1;\n")

        assert LicenseNormalizer().normalize_file(path) == ("var a = 1;\n", 0)
