from actions_model.workflow.ast import Step, StepType
from actions_model.workflow.step_descriptor import (
    display_name,
    input_env_key,
    shell_command,
    step_env,
    step_type,
)


def test_display_name_precedence():
    assert display_name(Step(id_='s1', name_='Build', uses_='a/b@v1', run_='make')) == 'Build'
    assert display_name(Step(id_='s1', uses_='a/b@v1', run_='make')) == 'a/b@v1'
    assert display_name(Step(id_='s1', run_='make')) == 'make'
    assert display_name(Step(id_='s1')) == 's1'
    assert display_name(Step()) == ''


def test_run_wins_over_uses():
    assert step_type(Step(run_='echo hi')) is StepType.run
    assert step_type(Step(run_='echo hi', uses_='docker://alpine')) is StepType.run


def test_docker_url():
    assert step_type(Step(uses_='docker://alpine')) is StepType.uses_docker_url


def test_local_action():
    assert step_type(Step(uses_='./local-action')) is StepType.uses_action_local


def test_remote_action():
    assert step_type(Step(uses_='actions/checkout@v3')) is StepType.uses_action_remote


def test_step_without_run_or_uses_is_remote_action():
    assert step_type(Step()) is StepType.uses_action_remote


def test_input_env_key():
    assert input_env_key('node-version') == 'INPUT_NODE_VERSION'
    assert input_env_key('token') == 'INPUT_TOKEN'
    assert input_env_key('fetch depth.v2') == 'INPUT_FETCH_DEPTH_V2'


def test_step_env_merges_inputs():
    step = Step(
        env_={'CI': 'true', 'INPUT_TOKEN': 'declared'},
        with_={'node-version': '16', 'token': 'from-with'},
    )
    assert step_env(step) == {
        'CI': 'true',
        'INPUT_NODE_VERSION': '16',
        'INPUT_TOKEN': 'from-with',
    }


def test_step_env_does_not_alias_declared_env():
    step = Step(env_={'CI': 'true'}, with_={'path': 'dist'})
    env = step_env(step)
    env['EXTRA'] = '1'
    assert step.env_ == {'CI': 'true'}


def test_shell_commands():
    assert shell_command(Step()) == 'bash --noprofile --norc -eo pipefail {0}'
    assert shell_command(Step(shell_='bash')) == 'bash --noprofile --norc -eo pipefail {0}'
    assert shell_command(Step(shell_='pwsh')) == "pwsh -command \"& '{0}'\""
    assert shell_command(Step(shell_='python')) == 'python {0}'
    assert shell_command(Step(shell_='sh')) == 'sh -e -c {0}'
    assert shell_command(Step(shell_='cmd')) == '%ComSpec% /D /E:ON /V:OFF /S /C "CALL "{0}""'
    assert shell_command(Step(shell_='powershell')) == "powershell -command \"& '{0}'\""


def test_unknown_shell_is_used_verbatim():
    assert shell_command(Step(shell_='perl {0}')) == 'perl {0}'
