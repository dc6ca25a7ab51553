from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List, Optional

from actions_model.pos import Pos
from actions_model.workflow.names import RawNames, normalize_names


@dataclass
class Workflow:
    name_: str = ''
    on_: RawNames = field(default_factory=RawNames)
    env_: Dict[str, str] = field(default_factory=dict)
    jobs_: Dict[str, "Job"] = field(default_factory=dict)

    def events(self) -> List[str]:
        """Names of the events that trigger the workflow."""
        return normalize_names(self.on_)

    def get_job(self, job_id: str) -> Optional["Job"]:
        """Gets a job by id, or None if the workflow has no such job.

        A job without a name is given its id as name on first lookup.
        """
        job = self.jobs_.get(job_id)
        if job is None:
            return None
        if not job.name_:
            job.name_ = job_id
        return job

    def get_job_ids(self) -> List[str]:
        """All job ids in lexicographic order."""
        return sorted(self.jobs_)


# region Jobs
@dataclass
class Job:
    name_: str = ''
    needs_: RawNames = field(default_factory=RawNames)
    runs_on_: str = ''
    env_: Dict[str, str] = field(default_factory=dict)
    if_: str = ''
    steps_: List["Step"] = field(default_factory=list)
    # 0 means unset
    timeout_minutes_: int = 0
    container_: Optional["ContainerSpec"] = None
    services_: Dict[str, "ContainerSpec"] = field(default_factory=dict)
    strategy_: Optional["Strategy"] = None
    pos: Optional[Pos] = None

    def needs(self) -> List[str]:
        """Ids of the jobs this job depends on."""
        return normalize_names(self.needs_)


@dataclass
class Strategy:
    fail_fast_: bool = False
    # 0 means unbounded
    max_parallel_: int = 0
    # axis name -> candidate values; 'include' and 'exclude' hold mappings
    matrix_: Dict[str, List[Any]] = field(default_factory=dict)


@dataclass
class ContainerSpec:
    image_: str = ''
    env_: Dict[str, str] = field(default_factory=dict)
    ports_: List[int] = field(default_factory=list)
    volumes_: List[str] = field(default_factory=list)
    options_: str = ''
    # populated by the executor, never by the decoder
    entrypoint: str = ''
    args: str = ''
    name: str = ''
    reuse: bool = False


@dataclass
class Step:
    id_: str = ''
    if_: str = ''
    name_: str = ''
    uses_: str = ''
    run_: str = ''
    working_directory_: str = ''
    shell_: str = ''
    env_: Dict[str, str] = field(default_factory=dict)
    # empty dict if no inputs
    with_: Dict[str, str] = field(default_factory=dict)
    continue_on_error_: bool = False
    timeout_minutes_: int = 0
    pos: Optional[Pos] = None

    def __str__(self) -> str:
        for candidate in (self.name_, self.uses_, self.run_):
            if candidate:
                return candidate
        return self.id_


class StepType(Enum):
    # steps with a `run` body
    run = auto()
    # `uses: docker://...`
    uses_docker_url = auto()
    # `uses: ./path/to/action`
    uses_action_local = auto()
    # `uses: owner/repo@ref`
    uses_action_remote = auto()


# endregion Jobs
