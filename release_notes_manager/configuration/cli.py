"""Defines the Command Line Interface (CLI) using Typer."""

import asyncio
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from pydantic import ValidationError
from typer import Argument, Option
from typing_extensions import Annotated

from release_notes_manager.configuration.credentials import CredentialProvider, EnvironmentCredentialProvider, StaticCredentialProvider
from release_notes_manager.configuration.env import settings
from release_notes_manager.configuration.exceptions import ConfigurationError
from release_notes_manager.release_notes.exceptions import ReleaseNotesError
from release_notes_manager.release_notes.generator import ReleaseNotesGenerator, apply_overrides, run_generate_release_notes
from release_notes_manager.release_notes.models import GeneratorSettings, ReleaseNotesStatus
from release_notes_manager.utils.logging import configure_logging
from release_notes_manager.utils.yaml import load_yaml_file

load_dotenv()

typer_app = typer.Typer(pretty_exceptions_show_locals=False, help="Generate categorized release notes from GitHub milestones.")


def load_generator_settings(settings_path: Path) -> GeneratorSettings:
    """Load and validate generator settings from a YAML or JSON file."""
    if not settings_path.exists():
        error = f"Settings file not found: {settings_path.absolute()}"
        typer.echo(error, err=True)
        raise typer.Exit(1)

    try:
        content = load_yaml_file(settings_path)
    except Exception as exc:
        typer.echo(f"Failed to parse settings file {settings_path}: {exc}", err=True)
        raise typer.Exit(1) from exc

    try:
        return GeneratorSettings.model_validate(content)
    except ValidationError as exc:
        typer.echo(f"Invalid settings in {settings_path}:\n{exc}", err=True)
        raise typer.Exit(1) from exc


def build_generator(github_token: str | None, github_api_url: str) -> ReleaseNotesGenerator:
    """Build a generator using either an explicit token or the environment."""
    credential_provider: CredentialProvider
    if github_token:
        credential_provider = StaticCredentialProvider(github_token)
    else:
        credential_provider = EnvironmentCredentialProvider()
    return ReleaseNotesGenerator(credential_provider=credential_provider, github_api_url=github_api_url)


@typer_app.command(name="generate")
def generate_cli(
    settings_path: Annotated[Path, Argument(envvar="RELEASE_NOTES_SETTINGS_PATH", help="Path to the YAML or JSON release notes settings file.")],
    version: Annotated[str | None, Option(envvar="RELEASE_VERSION", help="Version of the release, overrides the settings file.")] = None,
    release_type: Annotated[str | None, Option(envvar="RELEASE_TYPE", help="Type of the release, overrides the settings file.")] = None,
    output: Annotated[Path | None, Option("--output", "-o", help="File to write the release notes to. Prints to stdout when omitted.")] = None,
    github_token: Annotated[
        str | None, Option(help="GitHub token to use instead of the environment variable named in the settings file.")
    ] = None,
    github_api_url: Annotated[str, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = settings.GITHUB_API_URL,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = settings.DEBUG,
) -> None:
    """Generate release notes for the milestone described by a settings file."""
    configure_logging(debug)
    generator_settings = apply_overrides(load_generator_settings(settings_path), version=version, release_type=release_type)
    generator = build_generator(github_token, github_api_url)

    result = asyncio.run(run_generate_release_notes(generator_settings, generator, output_path=output))
    if result.status == ReleaseNotesStatus.ERROR:
        typer.secho(f"Failed to generate release notes: {result.error}", fg=typer.colors.RED, err=True)
        sys.exit(1)

    if result.output_path is not None:
        typer.secho(f"Release notes written to {result.output_path}", fg=typer.colors.GREEN, err=True)
    else:
        typer.echo(result.content)


@typer_app.command(name="validate")
def validate_cli(
    settings_path: Annotated[Path, Argument(envvar="RELEASE_NOTES_SETTINGS_PATH", help="Path to the YAML or JSON release notes settings file.")],
    github_token: Annotated[
        str | None, Option(help="GitHub token to use instead of the environment variable named in the settings file.")
    ] = None,
    github_api_url: Annotated[str, Option(envvar="GITHUB_API_URL", help="GitHub API URL.")] = settings.GITHUB_API_URL,
    debug: Annotated[bool, Option(envvar="DEBUG", help="Enable debug mode.")] = settings.DEBUG,
) -> None:
    """Validate a settings file against the repository (repository and labels must exist)."""
    configure_logging(debug)
    generator_settings = load_generator_settings(settings_path)
    generator = build_generator(github_token, github_api_url)

    try:
        asyncio.run(generator.validate(generator_settings))
    except (ConfigurationError, ReleaseNotesError) as exc:
        typer.secho(f"Settings are invalid: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from exc

    typer.secho(f"Settings in {settings_path} are valid.", fg=typer.colors.GREEN)


if __name__ == "__main__":
    typer_app()
