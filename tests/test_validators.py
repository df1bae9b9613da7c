from src.utils.validators import InputValidator


class TestParseIndex:
    """Test the lenient leading-integer parse used by /remove."""

    def test_plain_numbers(self):
        assert InputValidator.parse_index("1") == 1
        assert InputValidator.parse_index("42") == 42

    def test_trailing_junk_ignored(self):
        """Digits are read as far as they go."""
        assert InputValidator.parse_index("3abc") == 3
        assert InputValidator.parse_index("7.5") == 7

    def test_no_leading_digits_is_zero(self):
        for value in ["abc", "", "x1", "+", "-"]:
            assert InputValidator.parse_index(value) == 0, value

    def test_signs(self):
        assert InputValidator.parse_index("-2") == -2
        assert InputValidator.parse_index("+5") == 5

    def test_leading_whitespace(self):
        assert InputValidator.parse_index("  9") == 9

    def test_only_ascii_digits(self):
        """Non-ASCII digits and spaces do not count."""
        assert InputValidator.parse_index("\u0661") == 0
        assert InputValidator.parse_index("\uff13") == 0
        assert InputValidator.parse_index("\u30002") == 0


class TestLineHelpers:
    """Test line normalisation and classification."""

    def test_normalize_strips_trailing_only(self):
        assert InputValidator.normalize_line("  milk \r\n") == "  milk"
        assert InputValidator.normalize_line("   ") == ""

    def test_normalize_keeps_unicode_whitespace(self):
        """Only the C isspace set is trimmed."""
        for tail in ["\u3000", "\x1c", "\x85", "\xa0"]:
            assert InputValidator.normalize_line(f"tea{tail}") == f"tea{tail}"
        assert InputValidator.normalize_line("tea \t\v\f\r\n") == "tea"

    def test_is_blank(self):
        assert InputValidator.is_blank(" \t\r\n")
        assert not InputValidator.is_blank("\u3000")

    def test_is_command(self):
        assert InputValidator.is_command("/view")
        assert InputValidator.is_command("/")
        assert not InputValidator.is_command("milk")
        assert not InputValidator.is_command(" /view")
        assert not InputValidator.is_command("")

    def test_answer_of(self):
        assert InputValidator.answer_of("y") == "yes"
        assert InputValidator.answer_of("Yes please") == "yes"
        assert InputValidator.answer_of("N") == "no"
        assert InputValidator.answer_of("nope") == "no"
        assert InputValidator.answer_of("maybe") is None
        assert InputValidator.answer_of("") is None


class TestFilenameValidation:
    """Test /save and /load file arguments."""

    def test_valid_names(self):
        for name in ["out.txt", "lists/weekly.txt", "../shared.txt"]:
            valid, msg = InputValidator.validate_filename(name)
            assert valid == True, f"{name} should be valid"

    def test_empty_name_invalid(self):
        valid, msg = InputValidator.validate_filename("")
        assert valid == False
        assert "empty" in msg.lower()

    def test_null_byte_invalid(self):
        valid, msg = InputValidator.validate_filename("out\x00.txt")
        assert valid == False
        assert "null" in msg.lower()
