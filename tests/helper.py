import tempfile
from pathlib import Path

from actions_model.workflow import ast
from actions_model.workflow.director import read_workflow_file


def parse_workflow_string(workflow_string: str) -> ast.Workflow:
    """
    Helper function to parse a workflow string into a Workflow object.

    The string is written to a temporary file first so the same path as the
    CLI is exercised.

    Args:
        workflow_string (str): The workflow YAML content as a string

    Returns:
        Workflow: The decoded workflow

    Raises:
        DecodeError: If the workflow does not decode
    """
    with tempfile.NamedTemporaryFile(suffix=".yml", mode="w+", encoding="utf-8", delete=False) as temp_file:
        temp_file.write(workflow_string)
        temp_file_path = Path(temp_file.name)

    try:
        return read_workflow_file(temp_file_path)
    finally:
        temp_file_path.unlink(missing_ok=True)
