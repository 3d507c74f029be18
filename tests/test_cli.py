import io
import os
import tempfile
import pytest

from screening import cli


@pytest.fixture
def wordlist_file():
    with tempfile.NamedTemporaryFile(mode='w', delete=False) as f:
        f.write("password\ndragon12345\n")
    filename = f.name
    yield filename
    os.unlink(filename)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep configuration overrides from the environment out of the CLI tests"""
    for key in list(os.environ):
        if key.startswith("PASSWORD_SCREENER_"):
            monkeypatch.delenv(key)


class TestCli:
    def test_weak_password_output(self, wordlist_file, capsys):
        exit_code = cli.main(["--wordlist", wordlist_file, "password7"])

        out = capsys.readouterr().out
        assert exit_code == cli.EXIT_OK
        assert out.index("Loading dictionary...") < out.index("Dictionary loaded.") < out.index("Checking password")
        assert "Checking password: password7" in out
        assert "Is the password strong? false" in out

    def test_strong_password_output(self, wordlist_file, capsys):
        exit_code = cli.main(["--wordlist", wordlist_file, "--exit-code", "Xk92plmQ"])

        assert exit_code == cli.EXIT_OK
        assert "Is the password strong? true" in capsys.readouterr().out

    def test_exit_code_flag_reports_weak(self, wordlist_file):
        assert cli.main(["--wordlist", wordlist_file, "--exit-code", "abc"]) == cli.EXIT_WEAK

    def test_password_read_from_stdin(self, wordlist_file, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("dragon1234\n"))

        cli.main(["--wordlist", wordlist_file])

        out = capsys.readouterr().out
        assert "Enter a password to check: " in out
        assert "Checking password: dragon1234" in out
        assert "Is the password strong? false" in out

    def test_end_of_input_is_empty_password(self):
        assert cli.read_password(io.StringIO("")) == ""

    def test_missing_wordlist_exit_code(self, capsys):
        assert cli.main(["--wordlist", "/invalid/path/wordlist.txt", "Xk92plmQ"]) == cli.EXIT_LOAD_ERROR
        assert "Dictionary loaded." not in capsys.readouterr().out

    def test_saturated_table_exit_code(self, wordlist_file):
        exit_code = cli.main(["--wordlist", wordlist_file, "--probing-size", "2", "Xk92plmQ"])

        assert exit_code == cli.EXIT_SATURATED

    def test_invalid_configuration_exit_code(self, wordlist_file):
        exit_code = cli.main(["--wordlist", wordlist_file, "--chaining-size", "0", "Xk92plmQ"])

        assert exit_code == cli.EXIT_CONFIG_ERROR

    def test_config_file_is_used(self, wordlist_file, capsys):
        with tempfile.NamedTemporaryFile(mode='w', suffix='.json', delete=False) as file:
            file.write('{"min_password_length": 12}')
        try:
            cli.main(["--config", file.name, "--wordlist", wordlist_file, "Xk92plmQ"])
        finally:
            os.unlink(file.name)

        assert "Is the password strong? false" in capsys.readouterr().out
