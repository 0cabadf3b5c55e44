"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the compilation pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the compilation progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, listing, openBrowser
        - env_check: inputSourceFile, htmlOutputFile, listingOutputFile, envOK
        - source_read: sourceText
        - html_compile: compileResult
        - html_write: htmlWritten
        - browser_launch: browserOpened
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the source .lol file
        outputdir: Directory for generated files
        verbosity: Logging verbosity level (1-3)
        inputFile: Input .lol filename (relative to inputdir)
        listing: Also write a highlighted source listing
        openBrowser: Open the generated page in a browser
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the input file
        htmlOutputFile: Path of the HTML file to write
        listingOutputFile: Path of the source listing to write
        sourceText: Raw source text
        compileResult: CompileResult from the compiler
        htmlWritten: HTML file was written
        browserOpened: A browser was asked to show the page
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    listing: bool = field(default=False)
    openBrowser: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    htmlOutputFile: Path = field(default=Path("/"))
    listingOutputFile: Path = field(default=Path("/"))
    sourceText: Optional[str] = field(default=None)
    compileResult: Optional[Any] = field(default=None)  # CompileResult at runtime
    htmlWritten: bool = field(default=False)
    browserOpened: bool = field(default=False)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Merges CLI options with explicitly provided directories to create
        the initial program state for the compilation pipeline.

        Args:
            options: Parsed CLI arguments (inputFile, listing, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for compilation output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        import dataclasses

        options_dict = vars(options)

        # Only keep options that are ProgramState fields
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}
        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            source_read,
            html_compile,
        )

    This is equivalent to:
        html_compile(source_read(env_check(initial_state)))
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
