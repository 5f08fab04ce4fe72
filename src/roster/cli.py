"""CLI entry point for Roster.

Each command opens the configured student store, runs one registry operation
and prints the result as JSON.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from typing import Any

import click

from roster.config import ConfigError, RosterConfig, load_config
from roster.logging import setup_logging
from roster.registry import (
    MAX_UINT64,
    GradePayload,
    RegistryError,
    Student,
    StudentPayload,
    StudentRegistry,
    StudentStore,
)


def _echo_json(value: Any) -> None:
    if isinstance(value, Student):
        value = value.to_dict()
    elif isinstance(value, list):
        value = [v.to_dict() if isinstance(v, Student) else v for v in value]
    click.echo(json.dumps(value, indent=2))


def _run(ctx: click.Context, operation: Callable[[StudentRegistry], Any]) -> None:
    """Run one registry operation and print its result.

    Registry errors are reported as ``<Kind>: <message>`` with exit status 1.
    """
    config: RosterConfig = ctx.obj["config"]
    principal = config.default_principal
    registry = StudentRegistry(StudentStore(config.db_path), identity=lambda: principal)
    try:
        _echo_json(operation(registry))
    except RegistryError as e:
        click.echo(f"{e.kind}: {e.message}", err=True)
        sys.exit(1)
    finally:
        registry.close()


@click.group()
@click.version_option(package_name="roster")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to roster.yaml",
)
@click.option("--db", "db_path", type=str, default=None, help="SQLite database path")
@click.option("-v", "--verbose", is_flag=True, help="Log to the console as well")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, db_path: str | None, verbose: bool) -> None:
    """Roster - student record registry."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    if db_path is not None:
        config = replace(config, db_path=db_path)

    setup_logging(log_dir=config.log_dir, level=config.log_level, console=verbose)
    ctx.obj = {"config": config}


@main.command()
@click.option("--host", type=str, default=None, help="Bind address (default: from config)")
@click.option("--port", type=int, default=None, help="Bind port (default: from config)")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Serve the REST API."""
    import uvicorn  # noqa: PLC0415

    from roster.api.app import create_app  # noqa: PLC0415

    config: RosterConfig = ctx.obj["config"]
    uvicorn.run(
        create_app(config),
        host=host if host is not None else config.host,
        port=port if port is not None else config.port,
    )


@main.command()
@click.argument("name")
@click.argument("course")
@click.argument("level", type=click.IntRange(min=0, max=MAX_UINT64))
@click.argument("cgpa", type=click.IntRange(min=0, max=MAX_UINT64))
@click.option("--as", "caller", type=str, default=None, help="Creating principal")
@click.pass_context
def create(
    ctx: click.Context, name: str, course: str, level: int, cgpa: int, caller: str | None
) -> None:
    """Create a student record."""
    _run(ctx, lambda r: r.create_student(name, course, level, cgpa, caller=caller))


@main.command("list")
@click.pass_context
def list_students(ctx: click.Context) -> None:
    """List all student records."""
    _run(ctx, lambda r: r.get_all_students())


@main.command()
@click.argument("student_id")
@click.pass_context
def show(ctx: click.Context, student_id: str) -> None:
    """Show one student record."""
    _run(ctx, lambda r: r.get_student_by_id(student_id))


@main.command()
@click.argument("student_id")
@click.option("--name", required=True, type=str)
@click.option("--course", type=str, default="", help="Leave empty to keep the current course")
@click.option("--level", required=True, type=click.IntRange(min=0, max=MAX_UINT64))
@click.option("--cgpa", required=True, type=click.IntRange(min=0, max=MAX_UINT64))
@click.pass_context
def update(
    ctx: click.Context, student_id: str, name: str, course: str, level: int, cgpa: int
) -> None:
    """Replace a student's name, course, level and cgpa."""
    payload = StudentPayload(name=name, course=course, level=level, cgpa=cgpa)
    _run(ctx, lambda r: r.update_student(student_id, payload))


@main.command()
@click.argument("student_id")
@click.argument("cgpa", type=click.IntRange(min=0, max=MAX_UINT64))
@click.pass_context
def grade(ctx: click.Context, student_id: str, cgpa: int) -> None:
    """Update only a student's cgpa."""
    _run(ctx, lambda r: r.update_grade(student_id, GradePayload(cgpa=cgpa)))


@main.command()
@click.argument("student_id")
@click.pass_context
def delete(ctx: click.Context, student_id: str) -> None:
    """Delete a student record and print it."""
    _run(ctx, lambda r: r.delete_student_record(student_id))


@main.command()
@click.argument("count", type=click.IntRange(min=0, max=MAX_UINT64))
@click.pass_context
def top(ctx: click.Context, count: int) -> None:
    """List the COUNT students with the highest cgpa."""
    _run(ctx, lambda r: r.get_top_students(count))


@main.command()
@click.pass_context
def courses(ctx: click.Context) -> None:
    """List the valid course names."""
    _run(ctx, lambda r: r.list_courses())


if __name__ == "__main__":
    main()
