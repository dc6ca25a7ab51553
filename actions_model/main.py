import logging
import sys

import typer

from actions_model.cli import CLI, StandardCLI
from actions_model.globals.cli_config import CLIConfig

app = typer.Typer()


@app.callback(invoke_without_command=True)
def main(
    workflow_file: str = typer.Argument(
        default=None, help="Path to a specific workflow file to describe"
    ),
    job: str = typer.Option(default=None, help="Only describe the job with this id"),
    verbose: bool = typer.Option(default=False, help="Log decoding and matrix expansion details"),
):
    """Main CLI entry point for actions-model.

    Decodes GitHub Actions workflow files and prints their triggers, jobs,
    matrix variants and steps as an executor would see them.

    Args:
        workflow_file: Path to a specific workflow file. If not provided,
            searches for workflow files in .github/workflows/ directory.
        job: Id of a single job to describe instead of all jobs.
        verbose: Whether to enable debug logging.

    Examples:
        Describe all workflows:
            $ actions-model

        Describe specific file:
            $ actions-model .github/workflows/ci.yml

        Describe one job with debug output:
            $ actions-model .github/workflows/ci.yml --job test --verbose
    """
    config = CLIConfig(workflow_file=workflow_file, job=job, verbose=verbose)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    cli: CLI = StandardCLI(config)
    exit_code = cli.run()
    sys.exit(exit_code)
