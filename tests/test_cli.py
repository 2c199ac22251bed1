"""Unit tests for the command line interface."""

import json
import os
import tempfile

import pytest

from punycode_mcp_server.cli import build_parser, main


class TestCLI:
    """Test suite for the punycode command."""

    @pytest.mark.unit
    def test_encode(self, capsys):
        """Test encoding prints one line per domain."""
        status = main(["encode", "mañana.com", "example.org"])

        assert status == 0
        assert capsys.readouterr().out == "xn--maana-pta.com\nexample.org\n"

    @pytest.mark.unit
    def test_decode(self, capsys):
        """Test decoding prints the Unicode form."""
        status = main(["decode", "xn--80adxhks.xn--p1ai"])

        assert status == 0
        assert capsys.readouterr().out == "москва.рф\n"

    @pytest.mark.unit
    def test_decode_error_continues(self, capsys):
        """Test that a bad domain sets the exit status but others still convert."""
        status = main(["decode", "xn--ab!c", "xn--ida"])

        captured = capsys.readouterr()
        assert status == 1
        assert captured.out == "ñ\n"
        assert "xn--ab!c: Invalid punycode digit" in captured.err

    @pytest.mark.unit
    def test_decode_surrogate_reports_error(self, capsys):
        """Test that a label decoding to a surrogate fails cleanly."""
        status = main(["decode", "xn--a-rc4g.com"])

        captured = capsys.readouterr()
        assert status == 1
        assert captured.out == ""
        assert "xn--a-rc4g.com: Invalid punycode digit" in captured.err
        assert "surrogate" in captured.err

    @pytest.mark.unit
    def test_check_bundled(self, capsys):
        """Test the bundled vectors pass."""
        status = main(["check"])

        assert status == 0
        assert "Passed 26 of 26, failed 0" in capsys.readouterr().out

    @pytest.mark.unit
    def test_check_verbose_lists_vectors(self, capsys):
        """Test verbose output lists each vector."""
        main(["check", "-v"])

        out = capsys.readouterr().out
        assert "ok   mañana.com: xn--maana-pta.com / mañana.com" in out

    @pytest.mark.unit
    def test_check_failure(self, capsys):
        """Test a failing fixture gives exit status 1."""
        with tempfile.TemporaryDirectory() as vector_dir:
            with open(os.path.join(vector_dir, "bad.json"), "w", encoding="utf-8") as f:
                json.dump({"tests": [{"in": "ñ", "out": "xn--74h"}]}, f)
            status = main(["check", "--vectors", vector_dir])

        assert status == 1
        assert "FAIL" in capsys.readouterr().out

    @pytest.mark.unit
    def test_check_empty_directory(self, capsys):
        """Test that no fixtures is an error."""
        with tempfile.TemporaryDirectory() as vector_dir:
            status = main(["check", "--vectors", vector_dir])

        assert status == 1
        assert "No test vectors found" in capsys.readouterr().err

    @pytest.mark.unit
    def test_command_required(self):
        """Test that a sub command must be given."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
