import logging
from pathlib import Path
from typing import Annotated

import typer

from pod_generator.cli._logging import configure_logging
from pod_generator.cli._output import print_error, print_json, print_plan, print_pod_reports, print_unassigned
from pod_generator.config import SettingsError, create_config, load_generation_settings
from pod_generator.domain.pod import PodSizeMode
from pod_generator.domain.result import Err, Ok
from pod_generator.roster_file import RosterFileError, load_roster_file
from pod_generator.services.assignment_engine import generate
from pod_generator.services.pod_reporter import report_result, report_unassigned
from pod_generator.services.pod_size_planner import plan_pod_sizes
from pod_generator.services.roster import build_roster

logger = logging.getLogger(__name__)

app = typer.Typer(name="podgen", help="Pod generator — split players into power-matched game pods")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Pod generator — split players into power-matched game pods."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_ToleranceOpt = Annotated[
    str | None, typer.Option("--tolerance", "-t", help="Tier tolerance: exact, lenient or super_lenient")
]
_ModeOpt = Annotated[str | None, typer.Option("--mode", "-m", help="Pod sizing: balanced or avoid_five")]


@app.command("generate")
def generate_pods(
    roster: Annotated[Path, typer.Argument(help="YAML roster file with a 'participants' list")],
    tolerance: _ToleranceOpt = None,
    mode: _ModeOpt = None,
    brackets: Annotated[bool, typer.Option("--brackets", help="Tiers are bracket labels (1-4, cedh)")] = False,
    config_file: Annotated[Path, typer.Option("--config", help="Settings file")] = Path("podgen.yaml"),
    as_json: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
) -> None:
    """Assign the players in ROSTER to pods."""
    try:
        cfg = create_config(
            yaml_path=str(config_file),
            tolerance=tolerance,
            mode=mode,
            tier_mode="bracket" if brackets else None,
        )
        settings = load_generation_settings(cfg)
        entries = load_roster_file(roster)
    except (SettingsError, RosterFileError) as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    match build_roster(entries, settings):
        case Ok(built):
            roster_units = built.units
        case Err(error):
            print_error(error.message)
            raise typer.Exit(code=1)

    tol = settings.effective_tolerance
    logger.debug("Generating with tolerance=%s mode=%s tier_mode=%s", tol, settings.mode, settings.tier_mode)
    result = generate(roster_units, tol, settings.mode)
    reports = report_result(result, tol, settings.tier_mode)
    unassigned = report_unassigned(result.unassigned, tol)

    if as_json:
        print_json(reports, unassigned)
        return
    print_pod_reports(reports)
    print_unassigned(unassigned)


@app.command()
def plan(
    players: Annotated[int, typer.Argument(help="Number of players")],
    mode: Annotated[PodSizeMode, typer.Option("--mode", "-m", help="Pod sizing strategy")] = PodSizeMode.BALANCED,
) -> None:
    """Show how PLAYERS would be split into pod sizes."""
    print_plan(players, mode, plan_pod_sizes(players, mode))
