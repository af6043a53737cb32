"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

import dataclasses
from pathlib import Path
from argparse import Namespace
from functools import reduce
from typing import Any, Optional, Type, TypeVar, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the decoration pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as processing progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, inputFile, outputFile,
          placeholdersFile, entityName, hostVersion, preview
        - env_check: inputSourceFile, placeholdersSourceFile, decoratedOutputFile,
          gradientsSupported, envOK
        - source_read: sourceText
        - source_preview: (no additions, prints highlighted source)
        - text_decorate: decoratedText, decorateResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing the source text file
        outputdir: Directory for decorated output
        verbosity: Logging verbosity level (1-3)
        inputFile: Input filename (relative to inputdir)
        outputFile: Output filename (relative to outputdir); defaults to inputFile
        placeholdersFile: Optional YAML file of static placeholder values
        entityName: Optional name of the requesting entity (placeholder context)
        hostVersion: Optional host version overriding the configured one
        preview: Print the syntax-highlighted source before decorating
        envOK: Environment validation passed
        inputSourceFile: Resolved path to the input file
        placeholdersSourceFile: Resolved path to the placeholders file
        decoratedOutputFile: Resolved path of the output file
        gradientsSupported: Result of the capability gate for this run
        sourceText: Raw text read from inputSourceFile
        decoratedText: Text after the full decoration pipeline
        decorateResult: Results (output_file, input_length, output_length, status)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    inputFile: str = field(default="")
    outputFile: Optional[str] = field(default=None)
    placeholdersFile: Optional[str] = field(default=None)
    entityName: Optional[str] = field(default=None)
    hostVersion: Optional[str] = field(default=None)
    preview: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputSourceFile: Path = field(default=Path("/"))
    placeholdersSourceFile: Optional[Path] = field(default=None)
    decoratedOutputFile: Path = field(default=Path("/"))
    gradientsSupported: bool = field(default=True)
    sourceText: Optional[str] = field(default=None)
    decoratedText: Optional[str] = field(default=None)
    decorateResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Merges CLI options with explicitly provided directories to create
        the initial program state for the decoration pipeline.

        Args:
            options: Parsed CLI arguments (inputFile, entityName, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for decorated output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
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
            text_decorate,
            results_report
        )

    This is equivalent to:
        results_report(text_decorate(source_read(env_check(initial_state))))
    """
    return reduce(lambda state, stage: stage(state), stages, initial_state)
