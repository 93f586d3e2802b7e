"""Cyclopts CLI entrypoint for numbering headings and generating TOCs.

The ``toc`` console script defined here reads ``toc.yaml``, numbers the
headings of each configured document, marks every heading with its section
number and installs the rendered table of contents into the document's TOC
container. ``toc outline`` prints the computed numbering without writing
anything, which is handy when tuning ``max_toc_depth`` or a root section id.

Examples
--------
Generate every configured document:

>>> from outline_toc.cli import main
>>> main()  # doctest: +SKIP

Process a single document into a custom file:

>>> from outline_toc.cli import app
>>> app(
...     ["generate", "--document", "guide", "--output", "dist/guide.html"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_toc_config
from .generator import TocGenerator

DEFAULT_CONFIG = Path("toc.yaml")
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

app = App(
    name="toc",
    config=cyclopts.config.Env("INPUT_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(level: str) -> None:
    """Route log records to stderr at ``level`` (a standard level name)."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        msg = f"Unknown log level {level!r}."
        raise ValueError(msg)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger("outline_toc").setLevel(numeric)


@app.command(help="Number headings and install the table of contents.")
def generate(
    *,
    document: typ.Annotated[
        str | None, Parameter(help="Document key", env_var="INPUT_DOCUMENT")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to TOC config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    input_path: typ.Annotated[
        Path | None,
        Parameter(name="--input", help="Override the input document"),
    ] = None,
    output: typ.Annotated[
        Path | None, Parameter(help="Override the output file")
    ] = None,
    log_level: typ.Annotated[
        str, Parameter(help="Logging level", env_var="INPUT_LOG_LEVEL")
    ] = "WARNING",
) -> None:
    """Generate TOCs for the requested documents.

    Parameters
    ----------
    document : str or None, optional
        Specific document key to process; when ``None`` (default) every
        configured document is processed.
    config : Path, optional
        Path to the ``toc.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    input_path : Path or None, optional
        Override the input file for single-document runs.
    output : Path or None, optional
        Override the output file for single-document runs.
    log_level : str, optional
        Standard logging level name; ``DEBUG`` traces every numbering step.

    Raises
    ------
    ValueError
        If ``--input`` or ``--output`` overrides are supplied when more than
        one document is selected.
    """
    _configure_logging(log_level)
    site_config = load_toc_config(config)

    if document:
        targets = [site_config.get_document(document)]
    else:
        targets = list(site_config.documents.values())

    if len(targets) > 1 and (input_path or output):
        msg = "Cannot override input/output when generating multiple documents."
        raise ValueError(msg)

    for target in targets:
        generator = TocGenerator(target, input_path=input_path, output_path=output)
        written = generator.run()
        print(f"wrote {_format_path(written)}")


@app.command(help="Print the computed section numbers of a document.")
def outline(
    *,
    document: typ.Annotated[
        str | None, Parameter(help="Document key", env_var="INPUT_DOCUMENT")
    ] = None,
    config: typ.Annotated[
        Path, Parameter(help="Path to TOC config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    input_path: typ.Annotated[
        Path | None,
        Parameter(name="--input", help="Override the input document"),
    ] = None,
    log_level: typ.Annotated[
        str, Parameter(help="Logging level", env_var="INPUT_LOG_LEVEL")
    ] = "WARNING",
) -> None:
    """Print one line per heading: indented section id and heading text."""
    _configure_logging(log_level)
    site_config = load_toc_config(config)
    target = site_config.get_document(document)
    entries = TocGenerator(target, input_path=input_path).outline()
    limit = target.settings.max_toc_depth
    for entry in entries:
        indent = "  " * max(entry.toc_depth - 1, 0)
        hidden = "" if entry.toc_depth <= limit else "  (not listed)"
        print(f"{indent}{entry.section_id}  {entry.text}{hidden}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``toc`` console command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
