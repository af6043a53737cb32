"""
End-to-end CLI pipeline tests

Runs the pipeline stages behind the huedown command on real files: read
source → decorate → write output.
"""

import pytest
from argparse import Namespace

from huedown.__main__ import (
    env_check,
    source_read,
    source_preview,
    text_decorate,
    results_report,
)
from huedown.models import ProgramState, pipeline


def esc(digits: str) -> str:
    return "§x" + "".join("§" + d for d in digits)


def state_make(inputdir, outputdir, **options) -> ProgramState:
    """Build an initial state the way the plugin entry point does"""
    namespace = Namespace(
        inputFile=options.pop("inputFile", "motd.txt"),
        outputFile=options.pop("outputFile", None),
        placeholdersFile=options.pop("placeholdersFile", None),
        entityName=options.pop("entityName", None),
        hostVersion=options.pop("hostVersion", None),
        preview=options.pop("preview", False),
        verbosity=options.pop("verbosity", 0),
        unrelated="ignored",
    )
    return ProgramState.state_createFromNamespace(namespace, inputdir, outputdir)


def run_all(state: ProgramState) -> ProgramState:
    return pipeline(state, env_check, source_read, source_preview, text_decorate, results_report)


class TestStateCreation:
    """Test building the initial state"""

    def test_unknown_options_filtered(self, tmp_path):
        """Namespace entries that aren't state fields are dropped"""
        state = state_make(tmp_path, tmp_path / "out")
        assert not hasattr(state, "unrelated")
        assert state.inputFile == "motd.txt"

    def test_copy_is_independent(self, tmp_path):
        """Stages work on copies"""
        state = state_make(tmp_path, tmp_path / "out")
        copied = state.copy()
        copied.sourceText = "changed"
        assert state.sourceText is None


class TestDecoration:
    """Test full runs"""

    def test_basic_file(self, tmp_path):
        """Hex and legacy codes are decorated and written out"""
        (tmp_path / "motd.txt").write_text("&aWelcome &#FF8800back", encoding="utf-8")
        outdir = tmp_path / "out"

        final = run_all(state_make(tmp_path, outdir, hostVersion="1.20.4"))

        output = (outdir / "motd.txt").read_text(encoding="utf-8")
        assert output == "§aWelcome " + esc("FF8800") + "back"
        assert final.decorateResult["status"] is True
        assert final.decorateResult["visible_length"] == len("Welcome back")

    def test_output_file_name(self, tmp_path):
        """--outputFile renames the result"""
        (tmp_path / "motd.txt").write_text("plain", encoding="utf-8")
        outdir = tmp_path / "out"
        run_all(state_make(tmp_path, outdir, outputFile="sub/decorated.txt"))
        assert (outdir / "sub" / "decorated.txt").read_text(encoding="utf-8") == "plain"

    def test_old_host_keeps_gradients(self, tmp_path):
        """Hosts below the minimum version get gradients literally"""
        source = "<GRADIENT:FF0000>AB</GRADIENT:0000FF>"
        (tmp_path / "motd.txt").write_text(source, encoding="utf-8")
        final = run_all(state_make(tmp_path, tmp_path / "out", hostVersion="1.12.2"))
        assert final.gradientsSupported is False
        assert final.decoratedText == source

    def test_new_host_expands_gradients(self, tmp_path):
        """Hosts at or above the minimum version get gradients expanded"""
        (tmp_path / "motd.txt").write_text("<GRADIENT:FF0000>AB</GRADIENT:0000FF>", encoding="utf-8")
        final = run_all(state_make(tmp_path, tmp_path / "out", hostVersion="1.16"))
        assert final.decoratedText == esc("ff0000") + "A" + esc("0000ff") + "B"

    def test_placeholders_and_entity(self, tmp_path):
        """Placeholder file values and the entity name are substituted"""
        (tmp_path / "motd.txt").write_text("%server_name%: hi %entity_name%", encoding="utf-8")
        (tmp_path / "values.yaml").write_text("server_name: '&6Lobby'\n", encoding="utf-8")
        final = run_all(state_make(
            tmp_path, tmp_path / "out",
            placeholdersFile="values.yaml",
            entityName="Steve",
        ))
        assert final.decoratedText == "§6Lobby: hi Steve"

    def test_preview_prints_source(self, tmp_path, capsys):
        """--preview writes the highlighted source to stdout"""
        (tmp_path / "motd.txt").write_text("&cHello", encoding="utf-8")
        run_all(state_make(tmp_path, tmp_path / "out", preview=True))
        assert "Hello" in capsys.readouterr().out


class TestErrors:
    """Test environment failures exit with status 1"""

    def test_missing_input(self, tmp_path):
        state = state_make(tmp_path, tmp_path / "out", inputFile="nope.txt")
        with pytest.raises(SystemExit) as excinfo:
            env_check(state)
        assert excinfo.value.code == 1

    def test_missing_placeholders_file(self, tmp_path):
        (tmp_path / "motd.txt").write_text("x", encoding="utf-8")
        state = state_make(tmp_path, tmp_path / "out", placeholdersFile="nope.yaml")
        with pytest.raises(SystemExit):
            env_check(state)

    def test_bad_host_version(self, tmp_path, capsys):
        (tmp_path / "motd.txt").write_text("x", encoding="utf-8")
        state = state_make(tmp_path, tmp_path / "out", hostVersion="banana")
        with pytest.raises(SystemExit):
            env_check(state)
        assert "Invalid host version" in capsys.readouterr().err

    def test_malformed_placeholders_file(self, tmp_path, capsys):
        (tmp_path / "motd.txt").write_text("x", encoding="utf-8")
        (tmp_path / "values.yaml").write_text("- not\n- a mapping\n", encoding="utf-8")
        state = state_make(tmp_path, tmp_path / "out", placeholdersFile="values.yaml")
        with pytest.raises(SystemExit):
            run_all(state)
        assert "Placeholder error" in capsys.readouterr().err

    def test_report_without_result(self, tmp_path):
        with pytest.raises(SystemExit):
            results_report(state_make(tmp_path, tmp_path / "out"))
