"""Command-line interface for rawtext.

Responsibilities:
- Expose user-facing commands for raw-text normalization.
- Convert CLI arguments, environment and YAML defaults into `NormalizerConfig`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_config, exit_with_command_error
from .config import ConfigLoader, NormalizerConfig, RuntimeConfigSources
from .errors import RawTextStageError
from .normalizer import normalize
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="rawtext",
    no_args_is_help=True,
    help="Normalize literal template text.",
)

_STDIO_PATH = Path("-")


def _load_yaml_config(config_path: Path | None) -> NormalizerConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise RawTextStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
            path=config_path,
        ) from exc
    except ValueError as exc:
        raise RawTextStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config keys/values and rerun.",
            path=config_path,
        ) from exc
    except OSError as exc:
        raise RawTextStageError.from_os_error(
            "config", "read config file", config_path, exc, "Verify file permissions."
        ) from exc


def _resolve_config(
    config_file: Path | None,
    trim_prefix: bool | None,
    trim_suffix: bool | None,
) -> NormalizerConfig:
    """Resolve effective settings with CLI > env > YAML > default precedence."""

    base_config = _load_yaml_config(config_file) or NormalizerConfig()
    cli_values: dict[str, str] = {}
    if trim_prefix is not None:
        cli_values["trim_prefix"] = "true" if trim_prefix else "false"
    if trim_suffix is not None:
        cli_values["trim_suffix"] = "true" if trim_suffix else "false"

    try:
        return base_config.resolved(
            RuntimeConfigSources(cli=cli_values, env=ConfigLoader.runtime_env())
        )
    except ValueError as exc:
        raise RawTextStageError(
            stage="config",
            detail=str(exc),
            hint=(
                "Check the `RAWTEXT_TRIM_PREFIX` and `RAWTEXT_TRIM_SUFFIX` "
                "environment variables."
            ),
        ) from exc


def _read_source(input_path: Path | None) -> bytes:
    """Read raw source bytes from a file, or from stdin for `-`/missing paths."""

    if input_path is None or input_path == _STDIO_PATH:
        return typer.get_binary_stream("stdin").read()
    try:
        return input_path.read_bytes()
    except OSError as exc:
        raise RawTextStageError.from_os_error(
            "read",
            "read input",
            input_path,
            exc,
            "Verify the input file exists and is readable.",
        ) from exc


def _write_result(out: Path | None, payload: bytes) -> None:
    """Write normalized bytes to `out`, or to stdout for `-`/missing paths."""

    if out is None or out == _STDIO_PATH:
        stream = typer.get_binary_stream("stdout")
        stream.write(payload)
        stream.flush()
        return
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(payload)
    except OSError as exc:
        raise RawTextStageError.from_os_error(
            "write", "write output", out, exc, "Verify the output directory is writable."
        ) from exc


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with default trim flags."),
]
TrimPrefixOption = Annotated[
    bool | None,
    typer.Option(
        "--trim-prefix/--no-trim-prefix",
        help="Drop a leading whitespace run that contains a line break.",
    ),
]
TrimSuffixOption = Annotated[
    bool | None,
    typer.Option(
        "--trim-suffix/--no-trim-suffix",
        help="Drop a trailing whitespace run that contains a line break.",
    ),
]


@app.command("normalize")
def normalize_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(help="Raw text file to normalize. Reads stdin when omitted or `-`."),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Output file. Writes stdout when omitted or `-`."),
    ] = None,
    config_file: ConfigOption = None,
    trim_prefix: TrimPrefixOption = None,
    trim_suffix: TrimSuffixOption = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Emit phase logs on stderr."),
    ] = False,
) -> None:
    """Strip comments and collapse whitespace in one raw text span."""

    run_logger = RunLogger(enabled=verbose)
    stage = "config"
    try:
        run_logger.log_stage_start(stage)
        config = _resolve_config(config_file, trim_prefix, trim_suffix)
        run_logger.log_stage_complete(
            stage, trim_prefix=config.trim_prefix, trim_suffix=config.trim_suffix
        )

        stage = "read"
        run_logger.log_stage_start(stage)
        source = _read_source(input_path)
        run_logger.log_stage_complete(stage, bytes=len(source))

        stage = "normalize"
        run_logger.log_stage_start(stage)
        result = normalize(source, config.trim_prefix, config.trim_suffix)
        run_logger.log_stage_complete(stage, bytes=len(result))

        stage = "write"
        run_logger.log_stage_start(stage)
        _write_result(out, result)
        run_logger.log_stage_complete(stage)
    except Exception as exc:
        run_logger.log_stage_failure(stage, type(exc).__name__)
        exit_with_command_error("normalize", exc)


@app.command("show-config")
def show_config_command(
    config_file: ConfigOption = None,
    trim_prefix: TrimPrefixOption = None,
    trim_suffix: TrimSuffixOption = None,
) -> None:
    """Print the resolved normalization settings."""

    try:
        config = _resolve_config(config_file, trim_prefix, trim_suffix)
    except Exception as exc:
        exit_with_command_error("show-config", exc)

    echo_config(config)


def main() -> None:
    """CLI entrypoint for console scripts."""

    app()


if __name__ == "__main__":
    main()
