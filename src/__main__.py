#!/usr/bin/env python3
"""
lolmark - LOLCODE-flavoured markup to HTML compiler

Compiles keyword-delimited lolmark documents into HTML pages.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Philosophy:
    - Keywords shout: #HAI opens a document, #KTHXBYE closes it
    - One pass: the source is tokenized, then parsed and emitted at once
    - Stop at first error: no partial HTML is ever written

Language at a glance:
    #HAI
    #OBTW a comment #TLDR
    #MAEK HEAD #GIMMEH TITLE My Page #MKAY #OIC
    #I HAZ name #IT IZ World #MKAY
    #MAEK PARAGRAF Hello #LEMME SEE name #MKAY ! #OIC
    #GIMMEH BOLD loud #MKAY #GIMMEH NEWLINE
    #GIMMEH SOUNDZ https://example.com/cat.mp3 #MKAY
    #KTHXBYE

Usage:
    lolmark inputdir/ outputdir/ --inputFile page.lol

    The compiled page is written to outputdir/page.html.

Examples:
    # Basic compilation
    lolmark . output/ --inputFile page.lol

    # Also write a highlighted source listing and open the result
    lolmark . output/ --inputFile page.lol --listing --open

    # Verbose output
    lolmark . output/ --inputFile page.lol -vv
"""

import sys
import webbrowser
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import Compiler, CompileError, InputError, __version__, LOG, state_connectToLogger
from .lib.highlight import listing_render
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
  _       _                      _
 | | ___ | |_ __ ___   __ _ _ __| | __
 | |/ _ \| | '_ ` _ \ / _` | '__| |/ /
 | | (_) | | | | | | | (_| | |  |   <
 |_|\___/|_|_| |_| |_|\__,_|_|  |_|\_\

  LOLCODE-flavoured markup to HTML
"""

# Define CLI arguments
parser = ArgumentParser(
    description="lolmark - LOLCODE-flavoured markup to HTML compiler",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", required=True, type=str, help="Input lolmark (.lol) file (relative to inputdir)"
)

parser.add_argument(
    "--listing",
    action="store_true",
    default=False,
    help="Also write a syntax-highlighted HTML listing of the source",
)

parser.add_argument(
    "--open",
    dest="openBrowser",
    action="store_true",
    default=False,
    help="Open the generated page in a browser",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def inputFile_resolve(state: ProgramState) -> Path:
    """
    Resolve the input file path, checking its extension and existence

    Raises:
        InputError: If the name lacks the source extension or the file is missing
    """
    if not appsettings.sourceName_isValid(state.inputFile):
        raise InputError(
            f"Only {appsettings.source_extension} files are accepted. "
            f"'{state.inputFile}' is invalid."
        )

    input_file = Path(state.inputdir or ".") / state.inputFile
    if not input_file.is_file():
        raise InputError(f"Input file not found: {input_file}")
    return input_file


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and resolve all file paths.

    Verifies that the input file exists and carries the source extension,
    then creates the output directory.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - inputSourceFile: Resolved path to .lol input file
            - htmlOutputFile: Path of the HTML file to generate
            - listingOutputFile: Path of the optional source listing
            - envOK: True if environment is valid

    Exits:
        1 if the input file is missing or has the wrong extension
    """

    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    try:
        input_file = inputFile_resolve(state)
    except InputError as e:
        print(str(e), file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.inputSourceFile = input_file
    LOG(f"Input file: {input_file}", level=2)

    output_dir = Path(state.outputdir or ".")
    output_dir.mkdir(parents=True, exist_ok=True)
    state.htmlOutputFile = output_dir / appsettings.outputName_make(input_file.name)
    state.listingOutputFile = output_dir / appsettings.listingName_make(input_file.name)
    LOG(f"Output file: {state.htmlOutputFile}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the lolmark source file.

    Args:
        inputstate: Program state with inputSourceFile path set

    Returns:
        ProgramState with added field:
            - sourceText: Raw source text

    Exits:
        1 if the file cannot be read
    """

    state = inputstate.copy()

    LOG("Reading source file...", level=1)

    try:
        state.sourceText = state.inputSourceFile.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: could not read file '{state.inputSourceFile}': {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Read {len(state.sourceText)} characters from {state.inputSourceFile.name}", level=2)
    return state


def html_compile(inputstate: ProgramState) -> ProgramState:
    """
    Compile the source text to an HTML document.

    Compilation stops at the first lexical, syntax or semantic error; the
    error is reported on stderr and nothing is written.

    Args:
        inputstate: Program state with sourceText

    Returns:
        ProgramState with added field:
            - compileResult: CompileResult from the compiler

    Exits:
        1 on any compilation error
    """

    state = inputstate.copy()

    LOG("Compiling source to HTML...", level=1)

    if state.sourceText is None:
        print("Error: No source text available", file=sys.stderr)
        sys.exit(1)

    try:
        state.compileResult = Compiler().compile(state.sourceText)
    except CompileError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    LOG(f"Compiled {len(state.compileResult.tokens)} tokens", level=2)
    return state


def html_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the generated HTML (and the optional source listing) to disk.

    Args:
        inputstate: Program state with compileResult

    Returns:
        ProgramState with added field:
            - htmlWritten: True once the HTML file exists

    Exits:
        1 if compileResult is missing or a file cannot be written
    """

    state = inputstate.copy()

    if not state.compileResult:
        print("Error: Compilation failed", file=sys.stderr)
        sys.exit(1)

    try:
        state.htmlOutputFile.write_text(state.compileResult.html, encoding="utf-8")
        LOG(f"Wrote {state.htmlOutputFile}", level=2)

        if state.listing:
            listing = listing_render(
                state.sourceText or "",
                style=appsettings.listing_style,
                title=state.inputSourceFile.name,
            )
            state.listingOutputFile.write_text(listing, encoding="utf-8")
            LOG(f"Wrote {state.listingOutputFile}", level=2)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        sys.exit(1)

    state.htmlWritten = True
    return state


def browser_launch(inputstate: ProgramState) -> ProgramState:
    """
    Open the generated page in a browser, if requested.

    Requested either with --open or the open_browser setting. A browser
    that cannot be started is reported but does not fail the run.

    Args:
        inputstate: Program state with htmlOutputFile written

    Returns:
        ProgramState with added field:
            - browserOpened: True if a browser accepted the page
    """

    state = inputstate.copy()

    if not (state.openBrowser or appsettings.open_browser):
        return state

    url = state.htmlOutputFile.resolve().as_uri()
    LOG(f"Opening {url}", level=2)
    try:
        browser = webbrowser.get(appsettings.browser) if appsettings.browser else webbrowser
        state.browserOpened = bool(browser.open(url))
    except webbrowser.Error as e:
        print(f"Warning: could not open browser: {e}", file=sys.stderr)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Report the compilation result to the user.

    Args:
        inputstate: Program state after html_write

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if nothing was written
    """
    state: ProgramState = inputstate.copy()
    if not state.htmlWritten:
        print("Error: Compilation failed", file=sys.stderr)
        sys.exit(1)

    print(f"\nParsing completed successfully. HTML saved as {state.htmlOutputFile}")
    if state.listing:
        LOG(f"  Listing: {state.listingOutputFile}", level=1)
    if state.compileResult.title is not None:
        LOG(f"  Title: {state.compileResult.title}", level=1)
    LOG(f"  Variables: {len(state.compileResult.variables)}", level=2)
    return state


@chris_plugin(
    parser=parser,
    title="lolmark - LOLCODE-flavoured markup to HTML compiler",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - compile a lolmark document to HTML.

    Orchestrates the full compilation pipeline:
        1. env_check: Validate paths and environment
        2. source_read: Read the .lol file
        3. html_compile: Tokenize, parse and emit HTML
        4. html_write: Write the HTML (and optional listing)
        5. browser_launch: Optionally open the page
        6. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - inputFile: str - Input .lol filename
            - listing: bool - Also write a source listing
            - openBrowser: bool - Open the page in a browser
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Directory containing lolmark source files
        outputdir: Directory where the HTML page will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, source_read, html_compile, html_write, browser_launch, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
