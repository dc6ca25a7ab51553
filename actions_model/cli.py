from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from rich.progress import Progress, SpinnerColumn, TextColumn

from actions_model.cli_components.describe_service import (
    DescribeService,
    StandardDescribeService,
)
from actions_model.cli_components.output_formatter import ColoredFormatter, OutputFormatter
from actions_model.globals.cli_config import CLIConfig
from actions_model.globals.workflow_report import WorkflowReport
from actions_model.workflow.matrix import get_matrixes


class CLI(ABC):
    """Interface for CLI implementations."""

    @abstractmethod
    def run(self) -> int:
        """
        Run the CLI and return exit code.

        Returns:
            int: Exit code (0=success, 1=errors)
        """
        pass


class StandardCLI(CLI):
    """
    Standard CLI implementation with separated concerns.

    Coordinates description using pluggable components:
    - OutputFormatter: handles display formatting
    - DescribeService: decodes the workflow files
    """

    def __init__(
        self,
        config: CLIConfig,
        formatter: Optional[OutputFormatter] = None,
        describe_service: Optional[DescribeService] = None,
    ):
        """
        Initialize CLI with configuration and optional component overrides.

        Args:
            config: CLI configuration (workflow file, job filter, verbosity)
            formatter: Output formatter (defaults to ColoredFormatter)
            describe_service: Describe service (defaults to StandardDescribeService)
        """
        self.config = config
        self.formatter = formatter or ColoredFormatter()
        self.describe_service = describe_service or StandardDescribeService()
        self.failed_files = 0
        self.total_files = 0

    def run(self) -> int:
        """Main CLI execution method.

        Describes either a single workflow file (if specified in config) or
        discovers and describes all workflow files in the .github/workflows/
        directory.

        Returns:
            int: Exit code indicating results:
                - 0: Every file decoded (and the requested job exists)
                - 1: A file failed to decode, or a file or job was not found
        """
        if self.config.workflow_file:
            return self._run_single_file(Path(self.config.workflow_file))
        else:
            return self._run_directory()

    def _run_single_file(self, file: Path) -> int:
        """Describe a single workflow file."""
        if not self._validate_file(file):
            print(
                f"File {file} is not accessible, does not exist, "
                f"or is not a YAML workflow file."
            )
            return 1

        ok = self._describe(file)
        self._display_summary()
        return 0 if ok else 1

    def _run_directory(self) -> int:
        """Describe all workflow files in the standard .github/workflows directory."""
        project_root = self._find_workflows_directory()
        if not project_root:
            print(
                "Could not find .github/workflows directory. "
                "Please run from your project root or pass a workflow file."
            )
            return 1

        directory = project_root / ".github/workflows"
        files = [f for f in self._find_workflow_files(directory) if self._validate_file(f)]
        if not files:
            print(f"No readable workflow files (*.yml, *.yaml) found in {directory}.")
            return 1

        all_ok = True
        for file in files:
            all_ok = self._describe(file) and all_ok

        self._display_summary()
        return 0 if all_ok else 1

    def _describe(self, file: Path) -> bool:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            transient=True,
        ) as progress:
            progress.add_task(description=f"Decoding {file.name}...", total=None)
            report = self.describe_service.describe_file(file)

        self.total_files += 1
        if not report.ok:
            self.failed_files += 1
        return self._display_report(report)

    def _display_report(self, report: WorkflowReport) -> bool:
        """Display one decoded file; returns False if something was missing."""
        print(self.formatter.format_file_header(report.file))
        if report.error is not None:
            print(self.formatter.format_error(report.error))
            return False

        workflow = report.workflow
        print(self.formatter.format_events(workflow.events()))

        job_ids = [self.config.job] if self.config.job else workflow.get_job_ids()
        found = True
        for job_id in job_ids:
            job = workflow.get_job(job_id)
            if job is None:
                print(f"  Job '{job_id}' not found in {report.file}")
                found = False
                continue
            print(self.formatter.format_job(job_id, job, get_matrixes(job)))
        return found

    def _display_summary(self) -> None:
        print(self.formatter.format_summary(self.total_files, self.failed_files))

    def _find_workflows_directory(self, marker: str = ".github") -> Optional[Path]:
        """Find the project root containing .github directory."""
        start_dir = Path.cwd()
        for directory in [start_dir] + list(start_dir.parents)[:2]:
            if (directory / marker / "workflows").is_dir():
                return directory
        return None

    def _find_workflow_files(self, directory: Path) -> List[Path]:
        """Find all YAML workflow files in a directory, sorted by name."""
        return sorted(list(directory.glob("*.yml")) + list(directory.glob("*.yaml")))

    def _validate_file(self, file_path: Path) -> bool:
        """Check that the file exists, is readable and has a YAML extension."""
        try:
            if not file_path.exists() or not file_path.is_file():
                return False

            if file_path.suffix not in [".yml", ".yaml"]:
                return False

            with open(file_path, "rb") as f:
                f.read(1)
            return True

        except OSError:
            return False
