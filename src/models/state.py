"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern used by
the command line and the pipeline() helper for composing stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Optional, Type, TypeVar, List, Dict, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the CLI pipeline (state bus pattern).

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, pattern, stylesFile,
          strip, highlight, stdout
        - env_check: inputFiles, envOK
        - sources_read: sources
        - sources_colorize: results
        - outputs_write: writtenFiles
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Directory containing markup files
        outputdir: Directory receiving colorized files
        verbosity: Logging verbosity level (1-3)
        pattern: Glob selecting input files (relative to inputdir)
        stylesFile: Optional custom YAML style table
        strip: Remove recognized tags instead of rendering codes
        highlight: Log highlighted markup of each source (verbosity >= 3)
        stdout: Also print each result to stdout
        envOK: Environment validation passed
        inputFiles: Input files matched by pattern, sorted
        sources: Markup text per input file (relative path → text)
        results: Rendered text per input file (relative path → text)
        writtenFiles: Paths of files written to outputdir
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    pattern: str = field(default="")
    stylesFile: Optional[str] = field(default=None)
    strip: bool = field(default=False)
    highlight: bool = field(default=False)
    stdout: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    inputFiles: List[Path] = field(default_factory=list)
    sources: Dict[str, str] = field(default_factory=dict)
    results: Dict[str, str] = field(default_factory=dict)
    writtenFiles: List[Path] = field(default_factory=list)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (pattern, stylesFile, etc.)
            inputdir: Directory containing source files
            outputdir: Directory for output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Only keep options that are ProgramState fields
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

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            sources_read,
            sources_colorize,
            outputs_write,
            results_report
        )
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
