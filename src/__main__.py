#!/usr/bin/env python3
"""
huedown - Text-first color markup resolver

Decorates a plain text file containing color markup into the escape-coded
form a text client displays.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Markup:
    <GRADIENT:FF0000>text</GRADIENT:0000FF>   per-character color gradient
    &#1A2B3C                                   fixed hex color
    &c, &l, &o, &n, &k, ...                    legacy color and style codes
    %entity_name%                              placeholders

Usage:
    huedown inputdir/ outputdir/ --inputFile motd.txt

    The decorated text is written to outputdir/ under the same name, or
    under --outputFile if given.

Examples:
    # Basic decoration
    huedown . output/ --inputFile motd.txt

    # Placeholders from a YAML file, resolved for a named entity
    huedown . output/ --inputFile motd.txt --placeholdersFile values.yaml --entityName Steve

    # Older host without extended colors: gradients stay literal
    huedown . output/ --inputFile motd.txt --hostVersion 1.12.2

    # Show the highlighted source, verbose output
    huedown . output/ --inputFile motd.txt --preview -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from pydantic import ValidationError
from pygments import highlight
from pygments.formatters import TerminalFormatter

from .config import appsettings, AppSettings
from .lib import decorate, PlaceholderRegistry, PlaceholderError, __version__, LOG, state_connectToLogger
from .lib.legacy import codes_strip
from .lib.lexer import HuedownLexer
from .lib.placeholders import registry_default
from .models import ProgramState, EntityRef, pipeline


DISPLAY_TITLE = r"""
   _                     _
  | |__  _   _  ___   __| | _____      ___ __
  | '_ \| | | |/ _ \ / _` |/ _ \ \ /\ / / '_ \
  | | | | |_| |  __/| (_| | (_) \ V  V /| | | |
  |_| |_|\__,_|\___| \__,_|\___/ \_/\_/ |_| |_|

  Text-first color markup resolver
"""

# Define CLI arguments
parser = ArgumentParser(
    description="huedown - Resolve gradient, hex, placeholder and legacy color markup",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input text file (relative to inputdir)"
)

parser.add_argument(
    "--outputFile",
    default=None,
    type=str,
    help="Output file name (relative to outputdir). Defaults to the input file name",
)

parser.add_argument(
    "--placeholdersFile",
    default=None,
    type=str,
    help="YAML mapping of placeholder identifiers to values (relative to inputdir)",
)

parser.add_argument(
    "--entityName",
    default=None,
    type=str,
    help="Name of the requesting entity placeholders are resolved for",
)

parser.add_argument(
    "--hostVersion",
    default=None,
    type=str,
    help="Host version to decide gradient support for. Defaults to HUEDOWN_HOST_VERSION",
)

parser.add_argument(
    "--preview",
    default=False,
    action="store_true",
    help="Print the syntax-highlighted source before decorating",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to the input file
            - placeholdersSourceFile: Resolved path to the placeholders file, if any
            - decoratedOutputFile: Path the result will be written to
            - gradientsSupported: Capability gate result for the host version
            - envOK: True if environment is valid

    Exits:
        1 if an input file is missing or the host version is malformed
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    input_file = state.inputdir / state.inputFile
    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    if state.placeholdersFile:
        placeholders_file = state.inputdir / state.placeholdersFile
        if not placeholders_file.exists():
            print(f"Error: Placeholders file not found: {placeholders_file}", file=sys.stderr)
            state.envOK = False
            sys.exit(1)
        state.placeholdersSourceFile = placeholders_file
        LOG(f"Placeholders file: {placeholders_file}", level=2)

    if state.hostVersion:
        try:
            settings = AppSettings(host_version=state.hostVersion)
        except ValidationError as e:
            print(f"Error: Invalid host version '{state.hostVersion}': {e}", file=sys.stderr)
            state.envOK = False
            sys.exit(1)
    else:
        settings = appsettings
    state.gradientsSupported = settings.gradients_supported()
    LOG(f"Host {settings.host_version}, gradients supported: {state.gradientsSupported}", level=2)

    output_dir = state.outputdir
    output_dir.mkdir(parents=True, exist_ok=True)
    state.decoratedOutputFile = output_dir / (state.outputFile or state.inputFile)
    state.decoratedOutputFile.parent.mkdir(parents=True, exist_ok=True)
    LOG(f"Output file: {state.decoratedOutputFile}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the source text to decorate.

    Args:
        inputstate: Program state with inputSourceFile path set

    Returns:
        ProgramState with added field:
            - sourceText: Raw file contents

    Exits:
        1 if the file can't be read
    """

    state = inputstate.copy()

    LOG("Reading source file...", level=1)

    try:
        state.sourceText = state.inputSourceFile.read_text(encoding="utf-8")
        LOG(f"Read {len(state.sourceText)} characters from {state.inputSourceFile.name}", level=2)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input file: {e}", file=sys.stderr)
        sys.exit(1)
    return state


def source_preview(inputstate: ProgramState) -> ProgramState:
    """
    Print the source with its markup highlighted, if --preview was given.

    Args:
        inputstate: Program state with sourceText

    Returns:
        ProgramState unchanged
    """

    state = inputstate.copy()
    if state.preview and state.sourceText is not None:
        print(highlight(state.sourceText, HuedownLexer(), TerminalFormatter()), end="")
    return state


def text_decorate(inputstate: ProgramState) -> ProgramState:
    """
    Run the decoration pipeline over the source text and write the result.

    Args:
        inputstate: Program state with sourceText

    Returns:
        ProgramState with added fields:
            - decoratedText: Decorated output
            - decorateResult: Dict containing:
                - status: bool (decoration success)
                - output_file: str (path to the written file)
                - input_length: int (characters read)
                - output_length: int (characters written)
                - visible_length: int (characters left once escapes are removed)

    Exits:
        1 if sourceText is None, placeholders can't be loaded or the output
        can't be written
    """

    state = inputstate.copy()

    LOG("Decorating text...", level=1)

    if state.sourceText is None:
        print("Error: No source text available", file=sys.stderr)
        sys.exit(1)

    try:
        if state.placeholdersSourceFile:
            resolver = PlaceholderRegistry.fromYaml_load(state.placeholdersSourceFile)
        else:
            resolver = registry_default()
    except PlaceholderError as e:
        print(f"Placeholder error: {e}", file=sys.stderr)
        sys.exit(1)

    context = EntityRef(name=state.entityName) if state.entityName else None
    gradients_supported = state.gradientsSupported

    state.decoratedText = decorate(
        state.sourceText,
        context,
        resolver=resolver,
        gate=lambda: gradients_supported,
    )

    try:
        state.decoratedOutputFile.write_text(state.decoratedText, encoding="utf-8")
        LOG(f"Wrote {state.decoratedOutputFile}", level=2)
    except OSError as e:
        print(f"Error writing output file: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    state.decorateResult = {
        'status': True,
        'output_file': str(state.decoratedOutputFile),
        'input_length': len(state.sourceText),
        'output_length': len(state.decoratedText),
        'visible_length': len(codes_strip(state.decoratedText)),
    }
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display decoration results to the user.

    Args:
        inputstate: Program state with decorateResult populated

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if decorateResult is None
    """
    state: ProgramState = inputstate.copy()
    if not state.decorateResult:
        print("Error: Decoration failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Decoration successful!", level=1)
    LOG(f"  Output: {state.decorateResult['output_file']}", level=1)
    LOG(
        f"  Length: {state.decorateResult['input_length']} -> "
        f"{state.decorateResult['output_length']} characters "
        f"({state.decorateResult['visible_length']} visible)",
        level=1,
    )
    return state


@chris_plugin(
    parser=parser,
    title="huedown - Text-first color markup resolver",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - decorate a text file's color markup.

    Orchestrates the full pipeline:
        1. env_check: Validate paths, host version and environment
        2. source_read: Read the input file
        3. source_preview: Optionally print the highlighted source
        4. text_decorate: Resolve markup and write the output file
        5. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
        inputdir: Directory containing the source text
        outputdir: Directory where the decorated text will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, source_read, source_preview, text_decorate, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
