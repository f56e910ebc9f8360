#!/usr/bin/env python3
"""
emojicolors - Emoji tag markup to terminal colors

Converts text marked up with emoji or keyword tags into text carrying ANSI
escape codes, keeping nested styles intact:

    <🔴>error in <🔳>config.yaml</🔳>, line 3</🔴>

renders "error in " red, the file name red and underlined, and ", line 3"
red again.

As with other ChRIS-style apps, the command works on directories: every
file in inputdir matching --pattern is colorized and written to the same
relative path in outputdir.

Usage:
    emojicolors inputdir/ outputdir/ [--pattern '**/*.txt']

Examples:
    # Colorize every .txt file
    emojicolors notes/ out/

    # Markdown files, custom style table, also print results
    emojicolors notes/ out/ --pattern '*.md' --stylesFile mystyles.yaml --stdout

    # Remove styling tags (for logs that are not viewed in a terminal)
    emojicolors notes/ out/ --strip
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .config import appsettings
from .lib import (
    Parser,
    colorize,
    Renderer,
    StyleRegistry,
    StyleTableError,
    registry_default,
    source_highlight,
    __version__,
    LOG,
    state_connectToLogger,
)
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
  <🔴>emoji</🔴><🟢>colors</🟢>
  Emoji tag markup to terminal colors
"""

# Define CLI arguments
parser = ArgumentParser(
    description="emojicolors - convert emoji tag markup to terminal colors",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--pattern",
    default=appsettings.input_pattern,
    type=str,
    help="Glob (relative to inputdir) selecting markup files",
)

parser.add_argument(
    "--stylesFile",
    default=appsettings.styles_file,
    type=str,
    help="Custom YAML style table. Defaults to the bundled table",
)

parser.add_argument(
    "--strip",
    action="store_true",
    default=False,
    help="Remove recognized tags instead of rendering terminal codes",
)

parser.add_argument(
    "--highlight",
    action="store_true",
    default=False,
    help="Log syntax-highlighted markup of each source (needs -vv)",
)

parser.add_argument(
    "--stdout",
    action="store_true",
    default=False,
    help="Also print each rendered file to stdout",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def registry_resolve(state: ProgramState) -> StyleRegistry:
    """
    Style registry for this run

    Exits:
        1 if the custom style table cannot be loaded
    """
    try:
        if state.stylesFile:
            return StyleRegistry(styles_file=state.stylesFile)
        return registry_default()
    except StyleTableError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate environment and collect input files.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - pattern: Glob used, falling back to appsettings.input_pattern
            - inputFiles: Sorted files in inputdir matching pattern
            - envOK: True if environment is valid

    Exits:
        1 if inputdir or the custom style table does not exist
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(colorize(DISPLAY_TITLE), level=2)

    LOG("Checking environment...", level=2)

    if state.inputdir is None or not state.inputdir.is_dir():
        print(f"Error: Input directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    if state.stylesFile and not Path(state.stylesFile).expanduser().exists():
        print(f"Error: Style table not found: {state.stylesFile}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    state.pattern = state.pattern or appsettings.input_pattern
    state.inputFiles = sorted(p for p in state.inputdir.glob(state.pattern) if p.is_file())
    LOG(f"Matched {len(state.inputFiles)} files with '{state.pattern}'", level=2)

    state.outputdir.mkdir(parents=True, exist_ok=True)
    LOG(f"Output directory: {state.outputdir}", level=2)

    state.envOK = True
    return state


def sources_read(inputstate: ProgramState) -> ProgramState:
    """
    Read every matched input file.

    Returns:
        ProgramState with added field:
            - sources: Relative path → file text

    Exits:
        1 if a file cannot be read
    """
    state = inputstate.copy()

    LOG("Reading source files...", level=1)

    sources = {}
    for path in state.inputFiles:
        relative = str(path.relative_to(state.inputdir))
        try:
            sources[relative] = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error reading input file {path}: {e}", file=sys.stderr)
            sys.exit(1)
        LOG(f"Read {len(sources[relative])} characters from {relative}", level=2)

        if state.highlight:
            LOG(f"{relative}:\n{source_highlight(sources[relative])}", level=3)

    state.sources = sources
    return state


def sources_colorize(inputstate: ProgramState) -> ProgramState:
    """
    Render every source with the configured style table.

    Returns:
        ProgramState with added field:
            - results: Relative path → rendered text
    """
    state = inputstate.copy()

    registry = registry_resolve(state)
    renderer = Renderer(registry, plain=state.strip)
    LOG(f"{'Stripping' if state.strip else 'Colorizing'} with {registry!r}", level=1)

    results = {}
    for relative, source in state.sources.items():
        nodes = Parser(source).parse()
        LOG(f"{relative}: {len(nodes)} top-level nodes", level=3)
        results[relative] = renderer.render(nodes, [])

    state.results = results
    return state


def outputs_write(inputstate: ProgramState) -> ProgramState:
    """
    Write rendered text to outputdir, mirroring the input layout.

    Returns:
        ProgramState with added field:
            - writtenFiles: Paths written

    Exits:
        1 if a file cannot be written
    """
    state = inputstate.copy()

    written = []
    for relative, text in state.results.items():
        target = state.outputdir / relative
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        except OSError as e:
            print(f"Error writing {target}: {e}", file=sys.stderr)
            sys.exit(1)
        written.append(target)
        LOG(f"Wrote {target}", level=2)

        if state.stdout:
            print(text)

    state.writtenFiles = written
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display a summary of the run.

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state: ProgramState = inputstate.copy()

    if not state.writtenFiles:
        LOG(f"No files matched '{state.pattern}' in {state.inputdir}", level=1)
        return state

    LOG(f"✓ Rendered {len(state.writtenFiles)} files", level=1)
    LOG(f"  Output: {state.outputdir}", level=1)
    return state


def run(state: ProgramState) -> ProgramState:
    """Connect logging and run the full pipeline"""
    if appsettings.debug_mode:
        state = state.copy()
        state.verbosity = max(state.verbosity, 3)

    state_connectToLogger(state)
    return pipeline(state, env_check, sources_read, sources_colorize, outputs_write, results_report)


@chris_plugin(
    parser=parser,
    title="emojicolors - emoji tag markup to terminal colors",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - colorize markup files from inputdir into outputdir.

    Orchestrates the pipeline:
        1. env_check: Validate paths, collect input files
        2. sources_read: Read markup text
        3. sources_colorize: Tokenize, parse and render
        4. outputs_write: Write results to outputdir
        5. results_report: Summarize

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """
    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )
    run(state)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
