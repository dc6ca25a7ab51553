"""Per-step helpers used by an executor: naming, classification, env and shell."""

import re
from typing import Dict

from actions_model.workflow.ast import Step, StepType

DOCKER_URL_PREFIX = 'docker://'
LOCAL_ACTION_PREFIX = './'

DEFAULT_SHELL_COMMAND = 'bash --noprofile --norc -eo pipefail {0}'

SHELL_COMMANDS: Dict[str, str] = {
    '': DEFAULT_SHELL_COMMAND,
    'bash': DEFAULT_SHELL_COMMAND,
    'pwsh': "pwsh -command \"& '{0}'\"",
    'python': 'python {0}',
    'sh': 'sh -e -c {0}',
    'cmd': '%ComSpec% /D /E:ON /V:OFF /S /C "CALL "{0}""',
    'powershell': "powershell -command \"& '{0}'\"",
}

_INPUT_NAME_INVALID = re.compile(r'[^A-Z0-9]')


def display_name(step: Step) -> str:
    """First non-empty of name, uses, run and id."""
    return str(step)


def step_type(step: Step) -> StepType:
    if step.run_:
        return StepType.run
    if step.uses_.startswith(DOCKER_URL_PREFIX):
        return StepType.uses_docker_url
    if step.uses_.startswith(LOCAL_ACTION_PREFIX):
        return StepType.uses_action_local
    return StepType.uses_action_remote


def input_env_key(input_name: str) -> str:
    """Maps a ``with`` input name to its env key, ``node-version`` -> ``INPUT_NODE_VERSION``."""
    key = _INPUT_NAME_INVALID.sub('_', input_name.upper())
    return f'INPUT_{key}'.upper()


def step_env(step: Step) -> Dict[str, str]:
    """Declared env merged with the step inputs exposed as ``INPUT_*`` variables.

    Inputs win over declared variables with the same key.
    """
    env = dict(step.env_)
    for input_name, value in step.with_.items():
        env[input_env_key(input_name)] = value
    return env


def shell_command(step: Step) -> str:
    """Command template for the step's shell; ``{0}`` stands for the script path.

    An unknown shell name is used as the template itself.
    """
    return SHELL_COMMANDS.get(step.shell_, step.shell_)
