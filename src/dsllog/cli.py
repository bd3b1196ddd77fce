from __future__ import annotations

from pathlib import Path

import click

from dsllog.combat.formatting import format_clock
from dsllog.export import export_log
from dsllog.logging import configure_logging
from dsllog.replay import EchoSink, ReplayPipeline, play
from dsllog.settings import Settings
from dsllog.timeline.parser import load_log, session_duration

LOG_PATH = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--log-level", default=None, help="Override DSLLOG_LOG_LEVEL.")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """dsllog command line interface."""
    settings = Settings()
    if log_level:
        settings.log_level = log_level
    configure_logging(settings)
    ctx.obj = settings


@cli.command("play")
@click.argument("log", type=LOG_PATH)
@click.option("--speed", type=float, default=None, help="Virtual seconds per wall-clock second.")
@click.option("--tick", type=float, default=None, help="Tick interval in seconds.")
@click.option("--start", type=float, default=0.0, show_default=True, help="Start offset in seconds.")
@click.option("--markup/--no-markup", default=False, show_default=True, help="Render narrative as color markup.")
@click.pass_obj
def play_cmd(
    settings: Settings,
    log: Path,
    speed: float | None,
    tick: float | None,
    start: float,
    markup: bool,
) -> None:
    """Replay a log against the playback clock."""
    pipeline = ReplayPipeline(settings, markup=markup)
    pipeline.load_entries(load_log(log))
    play(
        pipeline,
        EchoSink(),
        speed=speed if speed is not None else settings.playback_speed,
        tick=tick if tick is not None else settings.tick_interval,
        start=start,
    )


@cli.command("dump")
@click.argument("log", type=LOG_PATH)
@click.option("--markup/--no-markup", default=False, show_default=True)
@click.pass_obj
def dump(settings: Settings, log: Path, markup: bool) -> None:
    """Print the whole log at once, with fight summaries."""
    pipeline = ReplayPipeline(settings, markup=markup)
    pipeline.load_entries(load_log(log))
    pipeline.run(EchoSink(), pipeline.duration)


@cli.command("export")
@click.argument("log", type=LOG_PATH)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["plain", "markup"]),
    default="plain",
    show_default=True,
)
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), default=None)
def export(log: Path, fmt: str, output: Path | None) -> None:
    """Export the log as plain text or forum color markup."""
    text = export_log(load_log(log), fmt)  # type: ignore[arg-type]
    if output is None:
        click.echo(text)
        return
    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"Wrote {output}", err=True)


@cli.command("info")
@click.argument("log", type=LOG_PATH)
def info(log: Path) -> None:
    """Show entry counts and session duration."""
    entries = load_log(log)
    rounds = sum(1 for entry in entries if entry.is_damage)
    click.echo(f"entries: {len(entries)}")
    click.echo(f"narrative: {len(entries) - rounds}")
    click.echo(f"damage rounds: {rounds}")
    click.echo(f"duration: {format_clock(session_duration(entries))}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
