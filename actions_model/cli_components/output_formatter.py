from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

from actions_model.globals.errors import DecodeError
from actions_model.workflow import ast
from actions_model.workflow.step_descriptor import display_name, shell_command, step_type


class OutputFormatter(ABC):
    """Interface for formatting CLI output."""

    @abstractmethod
    def format_file_header(self, file: Path) -> str:
        """Format header for a file being described."""
        pass

    @abstractmethod
    def format_events(self, events: List[str]) -> str:
        """Format the trigger list of a workflow."""
        pass

    @abstractmethod
    def format_job(self, job_id: str, job: ast.Job, variants: List[Dict[str, Any]]) -> str:
        """Format a job with its variants and steps."""
        pass

    @abstractmethod
    def format_error(self, error: DecodeError) -> str:
        """Format a decode error."""
        pass

    @abstractmethod
    def format_summary(self, total_files: int, failed_files: int) -> str:
        """Format final summary of all described files."""
        pass


class ColoredFormatter(OutputFormatter):
    """
    Colored console output formatter.

    Formats CLI output with ANSI color codes and consistent spacing.
    Used as the default formatter for interactive terminal sessions.
    """

    STYLE = {
        "ok": {"color_bold": "\033[1;92m", "color": "\033[92m", "sign": "✓"},
        "error": {"color_bold": "\033[1;31m", "color": "\033[31m", "sign": "✗"},
    }

    DEF_STYLE = {
        "format_end": "\033[0m",
        "neutral": "\033[2m",
        "underline": "\033[4m",
        "bold": "\033[1m",
    }

    STEP_TYPE_NAMES = {
        ast.StepType.run: "run",
        ast.StepType.uses_docker_url: "docker",
        ast.StepType.uses_action_local: "local",
        ast.StepType.uses_action_remote: "action",
    }

    def format_file_header(self, file: Path) -> str:
        """Format file header with underline."""
        return f'\n{self.DEF_STYLE["underline"]}{file}{self.DEF_STYLE["format_end"]}'

    def format_events(self, events: List[str]) -> str:
        return f'  on: {", ".join(events) if events else "-"}'

    def format_job(self, job_id: str, job: ast.Job, variants: List[Dict[str, Any]]) -> str:
        """Format job header, runner, needs, variants and one line per step."""
        lines = [f'  {self.DEF_STYLE["bold"]}{job_id}{self.DEF_STYLE["format_end"]}']
        if job.name_ and job.name_ != job_id:
            lines[0] += f' {self.DEF_STYLE["neutral"]}({job.name_}){self.DEF_STYLE["format_end"]}'
        lines.append(f'    runs-on: {job.runs_on_ or "-"}')
        needs = job.needs()
        if needs:
            lines.append(f'    needs: {", ".join(needs)}')

        lines.append(f'    variants: {len(variants)}')
        for variant in variants:
            if variant:
                pairs = ", ".join(f"{key}={value}" for key, value in variant.items())
                lines.append(f'      {self.DEF_STYLE["neutral"]}{pairs}{self.DEF_STYLE["format_end"]}')

        for index, step in enumerate(job.steps_, start=1):
            lines.append(self._format_step(index, step))
        return "\n".join(lines)

    def format_error(self, error: DecodeError) -> str:
        style = self.STYLE["error"]
        line = f'  {style["color"]}{style["sign"]} {error}{self.DEF_STYLE["format_end"]}'
        if error.rule:
            line += f'  {self.DEF_STYLE["neutral"]}({error.rule}){self.DEF_STYLE["format_end"]}'
        return line

    def format_summary(self, total_files: int, failed_files: int) -> str:
        """Format colored summary with counts."""
        style = self.STYLE["error"] if failed_files else self.STYLE["ok"]
        return (
            f'\n{style["color_bold"]}{style["sign"]} {total_files} workflows '
            f'({failed_files} failed to decode){self.DEF_STYLE["format_end"]}\n'
        )

    def _format_step(self, index: int, step: ast.Step) -> str:
        kind = step_type(step)
        line = f'    {index}. [{self.STEP_TYPE_NAMES[kind]}]'
        line += max(20 - len(line), 0) * " "
        # multi-line run bodies are cut to their first line
        name = display_name(step)
        line += name.splitlines()[0] if name else ""
        if kind is ast.StepType.run:
            line += f'  {self.DEF_STYLE["neutral"]}{shell_command(step)}{self.DEF_STYLE["format_end"]}'
        return line
