import json

import click


@click.group()
def main() -> None:
    """wskpack - Build execution descriptors and web annotations for serverless actions."""


def _settings():
    """Load settings and configure logging for a command run."""
    from wskpack.deployer.log import setup_logging
    from wskpack.deployer.settings import get_settings

    settings = get_settings()
    setup_logging(settings)
    return settings


# ---------------------------------------------------------------------------
# Exec resolution
# ---------------------------------------------------------------------------


@main.command(name="exec")
@click.argument("artifact")
@click.option("--kind", default="", help="Explicit runtime kind (required for .zip artifacts).")
@click.option("--docker", is_flag=True, default=False, help="Build a blackbox action from an image or zip bundle.")
@click.option("--main", "main_entry", default="", help="Entry point, e.g. the Java main class.")
def exec_(artifact: str, kind: str, docker: bool, main_entry: str) -> None:
    """Resolve the exec descriptor for ARTIFACT and print it as JSON."""
    from wskpack.deployer.content import ContentReadError
    from wskpack.deployer.execution.resolver import UnsupportedInputError, resolve_exec

    settings = _settings()

    try:
        exec_desc = resolve_exec(
            artifact,
            kind,
            docker,
            main_entry,
            docker_image=settings.docker_skeleton_image,
            java_guard=settings.java_guard,
        )
    except (ContentReadError, UnsupportedInputError) as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(json.dumps(exec_desc.to_payload(), indent=2))


# ---------------------------------------------------------------------------
# Web annotations
# ---------------------------------------------------------------------------


def _parse_annotation(value: str) -> tuple[str, object]:
    key, sep, raw = value.partition("=")
    if not sep:
        msg = f"annotation must be key=value, got '{value}'"
        raise click.BadParameter(msg)
    try:
        return key, json.loads(raw)
    except json.JSONDecodeError:
        return key, raw


@main.command()
@click.argument("mode")
@click.option("--annotation", "-a", "annotations", multiple=True, help="Existing annotation as key=value (JSON value).")
@click.option("--name", default="", help="Entity name used in log messages.")
@click.option("--fetch", is_flag=True, default=False, help="Defer when no annotations are known yet.")
def web(mode: str, annotations: tuple[str, ...], name: str, fetch: bool) -> None:
    """Reconcile the web-export annotations for MODE and print them as JSON."""
    from wskpack.deployer.execution.web import InvalidWebModeError, web_action
    from wskpack.deployer.models.annotations import KeyValue

    settings = _settings()

    existing = [KeyValue(key=k, value=v) for k, v in map(_parse_annotation, annotations)]
    try:
        result = web_action(mode, existing, name, fetch, dedup=settings.web_annotation_dedup)
    except InvalidWebModeError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(json.dumps([kv.model_dump() for kv in result or []], indent=2))


# ---------------------------------------------------------------------------
# Packaging
# ---------------------------------------------------------------------------


@main.command(name="zip")
@click.argument("dest", type=click.Path(dir_okay=False))
@click.argument("sources", nargs=-1, required=True, type=click.Path(exists=True))
@click.option("--files", "flat", is_flag=True, default=False, help="Store each source flat at the archive root.")
def zip_(dest: str, sources: tuple[str, ...], flat: bool) -> None:
    """Package SOURCES into the zip archive DEST."""
    from wskpack.deployer.packaging.archive import create_files_zip, create_folder_zip

    _settings()

    if not flat and len(sources) != 1:
        msg = "exactly one source directory or file is required without --files"
        raise click.UsageError(msg)

    try:
        if flat:
            create_files_zip(dest, sources)
        else:
            create_folder_zip(sources[0], dest)
    except OSError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(f"Archive written to {dest}.")


if __name__ == "__main__":
    main()
